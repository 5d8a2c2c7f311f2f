"""
Allow running as a module: python -m funquizz
"""

from funquizz.cli.main import run

if __name__ == "__main__":
    run()
