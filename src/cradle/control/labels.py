"""
Label Allocator
===============

Produces the unique symbolic jump targets threaded between emitted
instructions. Labels are "L0", "L1", ... in allocation order and are
never reused or freed.
"""


class LabelAllocator:
    """
    Monotonic label counter.

    Example:
        >>> labels = LabelAllocator()
        >>> labels.new_label(), labels.new_label()
        ('L0', 'L1')
    """

    def __init__(self, prefix: str = "L", start: int = 0):
        self.prefix = prefix
        self._start = start
        self._next = start

    def new_label(self) -> str:
        """Generate a unique label."""
        label = f"{self.prefix}{self._next}"
        self._next += 1
        return label

    @property
    def count(self) -> int:
        """Number of labels allocated so far."""
        return self._next - self._start
