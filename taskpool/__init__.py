"""Bounded-concurrency task running with error collection."""

__version__ = "0.1.0"
__all__ = ["fdlimit", "parallel", "shared"]