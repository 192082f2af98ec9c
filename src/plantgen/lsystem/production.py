"""L-system production engine: grammar storage and in-place rewriting.

Notes
-----
    * Rewriting is non-recursive per generation: symbols inserted by a rule
      are only considered in the next call to ``expand_once``.
    * Symbols without a rule are kept in place.
    * The engine accepts any symbol and any replacement string; validating
      user input is the job of the calling layer.

References
----------
    [1] https://en.wikipedia.org/wiki/L-system
"""

# Standard library
from collections.abc import Mapping
from types import MappingProxyType

# Local libraries
from plantgen.lsystem.sequence import NIL, SymbolSequence


class ProductionEngine:
    """Holds the rewriting rules of one L-system and applies them."""

    def __init__(self, rules: Mapping[str, str] | None = None) -> None:
        self._rules: dict[str, str] = dict(rules) if rules else {}

    @property
    def rules(self) -> Mapping[str, str]:
        return MappingProxyType(self._rules)

    def add_rule(self, symbol: str, replacement: str) -> None:
        """Register ``symbol -> replacement``; a later call for the same symbol wins."""
        self._rules[symbol] = replacement

    def clear_rules(self) -> None:
        self._rules = {}

    @staticmethod
    def parse(text: str) -> SymbolSequence:
        """Build a symbol sequence from ``text`` (empty text gives an empty sequence)."""
        return SymbolSequence.from_text(text)

    def expand_once(self, sequence: SymbolSequence) -> SymbolSequence:
        """
        Rewrite every symbol that has a rule, once, in place.

        Parameters
        ----------
        sequence : SymbolSequence
            Sequence to rewrite.

        Returns
        -------
        SymbolSequence
            The same (mutated) sequence.
        """
        current = sequence.head
        while current != NIL:
            # Successor is taken before splicing so new nodes are skipped
            following = sequence.next(current)
            replacement = self._rules.get(sequence.value(current))
            if replacement is not None:
                sequence.splice(current, replacement)
            current = following
        return sequence

    def generate(self, axiom: str, iterations: int) -> SymbolSequence:
        """Parse ``axiom`` and rewrite it ``iterations`` times, compacting after each pass."""
        sequence = self.parse(axiom)
        for _ in range(iterations):
            self.expand_once(sequence)
            sequence.compact()
        return sequence
