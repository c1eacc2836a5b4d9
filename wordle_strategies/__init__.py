"""
Wordle strategies: scoring, consistency tracking and guess selection for
Wordle, plus tools to batch-solve every solution from one or many openers.
"""

__version__ = "1.0.0"
