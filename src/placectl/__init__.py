"""placectl — place hierarchy addressing and validation."""

__version__ = "0.1.0"
