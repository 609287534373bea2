"""
Run-scoped id counter for generated test cases.

One IdSequence belongs to exactly one synthesis run; it is handed to each
category builder explicitly and never shared between runs.
"""


class IdSequence:
    """Monotonic, zero-padded id generator: TC_0001, TC_0002, ..."""

    def __init__(self, prefix: str = "TC", width: int = 4, start: int = 1):
        if start < 1:
            raise ValueError(f"Id sequences start at 1 or later, got {start}")
        self.prefix = prefix
        self.width = width
        self._start = start
        self._next = start

    def next_id(self) -> str:
        """Consume and return the next id."""
        value = self._next
        self._next += 1
        return f"{self.prefix}_{value:0{self.width}d}"

    @property
    def issued(self) -> int:
        """How many ids were handed out so far."""
        return self._next - self._start

    def peek(self) -> str:
        """The id the next call to next_id() will return."""
        return f"{self.prefix}_{self._next:0{self.width}d}"
