"""Financial-independence profile core."""

__version__ = "0.1.0"
