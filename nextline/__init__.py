"""Read file descriptors one line at a time: ``reader`` for one descriptor, ``multi`` for many."""

__version__ = "0.1.0"
__all__ = ["reader", "multi"]