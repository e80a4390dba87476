"""Taylor-series matrix exponential with strided and block work splits, and midpoint-rule integration."""

__version__ = "0.1.0"

__all__ = ["cli", "integrate", "matrix", "taylor"]