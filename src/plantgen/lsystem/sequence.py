"""Doubly linked symbol sequence stored in an index arena.

Notes
-----
    * Nodes are addressed by stable integer indices into parallel lists;
      ``NIL`` marks a missing predecessor/successor.
    * ``splice`` replaces one node by a run of new nodes without touching the
      rest of the sequence, which is what the rewriting pass needs.
    * Replaced nodes stay in the arena, detached and unreachable, until
      ``compact`` renumbers the live nodes and drops them.
"""

# Standard library
from collections.abc import Iterator

NIL = -1


class SymbolSequence:
    """Ordered sequence of single-character symbols with O(1) splicing."""

    def __init__(self) -> None:
        self._values: list[str] = []
        self._prev: list[int] = []
        self._next: list[int] = []
        self._live: list[bool] = []
        self._size = 0
        self.head = NIL
        self.tail = NIL

    @classmethod
    def from_text(cls, text: str) -> "SymbolSequence":
        """Build a sequence holding one node per character of ``text``."""
        sequence = cls()
        sequence.head, sequence.tail = sequence._build_run(text)
        return sequence

    def _new_node(self, value: str) -> int:
        self._values.append(value)
        self._prev.append(NIL)
        self._next.append(NIL)
        self._live.append(True)
        self._size += 1
        return len(self._values) - 1

    def _build_run(self, text: str) -> tuple[int, int]:
        """Allocate a linked run of nodes, returning its (first, last)."""
        first = last = NIL
        for char in text:
            index = self._new_node(char)
            if last == NIL:
                first = index
            else:
                self._prev[index] = last
                self._next[last] = index
            last = index
        return first, last

    def _check(self, index: int) -> None:
        if not (0 <= index < len(self._values)) or not self._live[index]:
            msg = f"Node {index} is not part of this sequence."
            raise IndexError(msg)

    def value(self, index: int) -> str:
        self._check(index)
        return self._values[index]

    def prev(self, index: int) -> int:
        self._check(index)
        return self._prev[index]

    def next(self, index: int) -> int:
        self._check(index)
        return self._next[index]

    def splice(self, index: int, text: str) -> tuple[int, int]:
        """
        Replace node ``index`` with a fresh run of nodes built from ``text``.

        Parameters
        ----------
        index : int
            A live node of this sequence.
        text : str
            Replacement symbols. An empty string removes the node.

        Returns
        -------
        tuple[int, int]
            First and last index of the inserted run, ``(NIL, NIL)`` when
            ``text`` is empty.

        Raises
        ------
        IndexError
            If ``index`` is not a live node.
        """
        self._check(index)
        before = self._prev[index]
        after = self._next[index]
        first, last = self._build_run(text)

        if first == NIL:
            # Empty replacement: neighbours link to each other
            successor_of_before, predecessor_of_after = after, before
        else:
            self._prev[first] = before
            self._next[last] = after
            successor_of_before, predecessor_of_after = first, last

        if before == NIL:
            self.head = successor_of_before
        else:
            self._next[before] = successor_of_before
        if after == NIL:
            self.tail = predecessor_of_after
        else:
            self._prev[after] = predecessor_of_after

        self._live[index] = False
        self._prev[index] = NIL
        self._next[index] = NIL
        self._size -= 1
        return first, last

    @property
    def capacity(self) -> int:
        """Number of arena slots, detached nodes included."""
        return len(self._values)

    def compact(self) -> None:
        """Drop detached nodes. Live nodes get new indices, in sequence order."""
        text = str(self)
        self._values, self._prev, self._next, self._live = [], [], [], []
        self._size = 0
        self.head, self.tail = self._build_run(text)

    def indices(self) -> Iterator[int]:
        """Yield live node indices from head to tail."""
        current = self.head
        while current != NIL:
            yield current
            current = self._next[current]

    def __iter__(self) -> Iterator[str]:
        for index in self.indices():
            yield self._values[index]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return f"SymbolSequence({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolSequence):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented
