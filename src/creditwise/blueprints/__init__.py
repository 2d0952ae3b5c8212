"""Blueprint exports."""

from . import credit

__all__ = ["credit"]
