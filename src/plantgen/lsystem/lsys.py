"""Single-object L-system: rules, turtle settings and callbacks together."""

# Standard library
from collections.abc import Mapping
from types import MappingProxyType

# Third-party libraries
import numpy as np
import numpy.typing as npt

# Local libraries
import plantgen.config as config
from plantgen.lsystem.changer import Changer
from plantgen.lsystem.production import ProductionEngine
from plantgen.lsystem.sequence import SymbolSequence
from plantgen.lsystem.turtle import TurtleCallback, TurtleInterpreter


class LSystem:
    """Rewrites an axiom and interprets the result with a 2D turtle."""

    def __init__(
        self,
        position: npt.ArrayLike,
        angle: float,
        width: float,
        length: float,
    ) -> None:
        self.position = np.array(position, dtype=np.float64, copy=True)
        self.angle = angle
        self.width = width
        self.length = length
        self.delta_angle = config.DEFAULT_DELTA_ANGLE
        self.changer_width = Changer.none()
        self.changer_length = Changer.none()
        self._engine = ProductionEngine()
        self._callbacks: dict[str, TurtleCallback] = {}

    @property
    def rules(self) -> Mapping[str, str]:
        return self._engine.rules

    @property
    def callbacks(self) -> Mapping[str, TurtleCallback]:
        return MappingProxyType(self._callbacks)

    def add_rule(self, symbol: str, replacement: str) -> None:
        self._engine.add_rule(symbol, replacement)

    def clear_rules(self) -> None:
        self._engine.clear_rules()

    def add_callback(self, symbol: str, callback: TurtleCallback) -> None:
        self._callbacks[symbol] = callback

    def interpreter(self) -> TurtleInterpreter:
        """Build a turtle from the current settings."""
        return TurtleInterpreter(
            self.position,
            self.angle,
            self.width,
            self.length,
            delta_angle=self.delta_angle,
            changer_width=self.changer_width,
            changer_length=self.changer_length,
            callbacks=self._callbacks,
        )

    def generate(self, axiom: str, iterations: int) -> SymbolSequence:
        """
        Expand ``axiom`` and draw it through the registered callbacks.

        Parameters
        ----------
        axiom : str
            Start string.
        iterations : int
            Number of rewriting generations.

        Returns
        -------
        SymbolSequence
            The expanded sequence that was interpreted.
        """
        sequence = self._engine.generate(axiom, iterations)
        self.interpreter().interpret(sequence)
        return sequence
