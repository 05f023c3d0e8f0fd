"""Solutions to classic string, digit, array and counting puzzles."""

__version__ = "0.1.0"
__all__ = ["strings", "digits", "arrays", "counting"]