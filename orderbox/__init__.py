"""A container of comparable values that can be traversed in several orders."""

__version__ = "0.1.0"
__all__ = ["container", "traversal", "demo"]