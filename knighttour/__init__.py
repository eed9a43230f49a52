"""Knight's tour search on a 5x5 chess board, with a command line entry point."""

__version__ = "0.1.0"
__all__ = ["board", "tree", "search", "display", "cli"]