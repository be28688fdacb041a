"""Review, reorder and validate a plan of tasks with dependencies."""

__version__ = "0.1.0"
__all__ = ["review"]