"""Version information for clean-arch-reference."""

__version__ = "0.1.0"
