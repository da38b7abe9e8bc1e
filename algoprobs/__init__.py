"""Classic algorithm problems on trees, lists, stacks, arrays, strings and numbers."""

__version__ = "0.1.0"