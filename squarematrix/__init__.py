"""Square matrices with overflow-checked arithmetic and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["matrix", "cli"]