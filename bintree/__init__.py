"""Binary tree nodes with parent links, traversals, measures and an ASCII printer."""

__version__ = "0.1.0"
__all__ = ["measures", "node", "printer", "traversal"]