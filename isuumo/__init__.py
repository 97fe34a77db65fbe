"""isuumo: chair and estate listing service."""

__version__ = "0.1.0"
