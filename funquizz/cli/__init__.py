"""
Command-line interface: Typer commands with Rich rendering.
"""
