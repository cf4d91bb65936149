"""Find shell aliases that already do what you are typing."""

__version__ = "2.0.0"
