"""clean: lint text files for whitespace and line-ending issues."""

__version__ = "0.1.0"
