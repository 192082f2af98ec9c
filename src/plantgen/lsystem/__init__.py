"""L-system rewriting and turtle interpretation."""

from plantgen.lsystem.changer import Changer, apply_changer
from plantgen.lsystem.lsys import LSystem
from plantgen.lsystem.production import ProductionEngine
from plantgen.lsystem.sequence import NIL, SymbolSequence
from plantgen.lsystem.turtle import CursorState, TurtleCallback, TurtleInterpreter, vec2

__all__ = [
    "NIL",
    "Changer",
    "CursorState",
    "LSystem",
    "ProductionEngine",
    "SymbolSequence",
    "TurtleCallback",
    "TurtleInterpreter",
    "apply_changer",
    "vec2",
]
