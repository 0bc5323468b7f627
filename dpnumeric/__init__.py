"""Numeric helpers for differential privacy: checked integer arithmetic, an inverse normal CDF estimate and small statistics."""

__version__ = "0.1.0"
__all__ = ["arith", "stats"]