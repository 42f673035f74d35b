"""Balanced brackets, broken keyboard and ferry loading exercises."""

__version__ = "0.1.0"
__all__ = ["brackets", "keyboard", "ferry"]