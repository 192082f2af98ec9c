"""plantgen: branching plant shapes from L-system grammars."""

__version__ = "0.1.0"
