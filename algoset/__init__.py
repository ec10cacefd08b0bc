"""Classic algorithm and data-structure routines: linked lists, containers, strings, arrays, matrices, arithmetic and pattern matching."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "arrays", "containers", "linked_list", "matching", "matrix", "strings"]