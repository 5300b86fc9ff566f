"""A printf-style formatter for c, s, p, d, i, u, x, X and % with flags, width and precision."""

__version__ = "0.1.0"
__all__ = ["libstr", "spec", "render", "printf"]