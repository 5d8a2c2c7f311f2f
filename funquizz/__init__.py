"""
FunQuizz: quiz questions with variant scoring and adaptive selection.
"""

__version__ = "1.0.0"
