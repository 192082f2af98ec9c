"""2D turtle interpretation of an expanded L-system string.

The interpreter walks the symbols once, left to right, keeping a cursor
(position, heading, width, length) and a stack of saved cursors for branches.
Geometry is not produced here: every forward step and every custom symbol is
reported to the callback registered for that symbol.

    F, f    move forward by ``length``, evolve width/length with the changers
    -       turn by ``+delta_angle``
    +       turn by ``-delta_angle``
    [       save the cursor
    ]       restore the last saved cursor (ignored when nothing is saved)
    other   report the last completed segment to its callback, if any
"""

from __future__ import annotations

# Standard library
import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias

# Third-party libraries
import numpy as np
import numpy.typing as npt

# Local libraries
import plantgen.config as config
from plantgen.lsystem.changer import Changer

# Type Aliases
Vec2: TypeAlias = npt.NDArray[np.float64]
TurtleCallback: TypeAlias = Callable[[Vec2, float, Vec2, float], None]


def vec2(x: float, y: float) -> Vec2:
    return np.array([x, y], dtype=np.float64)


@dataclass
class CursorState:
    """Position, heading (degrees), width and length of the turtle."""

    position: Vec2
    angle: float
    width: float
    length: float

    def copy(self) -> CursorState:
        return CursorState(
            np.array(self.position, dtype=np.float64, copy=True),
            self.angle,
            self.width,
            self.length,
        )

    def heading(self) -> Vec2:
        """Unit vector along the current angle."""
        theta = math.radians(self.angle)
        return vec2(math.cos(theta), math.sin(theta))


class TurtleInterpreter:
    """Turns a symbol sequence into callback invocations."""

    def __init__(
        self,
        position: npt.ArrayLike,
        angle: float,
        width: float,
        length: float,
        delta_angle: float = config.DEFAULT_DELTA_ANGLE,
        changer_width: Changer | None = None,
        changer_length: Changer | None = None,
        callbacks: Mapping[str, TurtleCallback] | None = None,
    ) -> None:
        """
        Initialize the interpreter.

        Parameters
        ----------
        position : npt.ArrayLike
            Start position (x, y); copied.
        angle : float
            Start heading in degrees, 0 pointing along +x.
        width : float
            Start width.
        length : float
            Start step length.
        delta_angle : float, optional
            Turn increment in degrees, by default 90.0
        changer_width : Changer | None, optional
            Transform applied to the width on every forward step.
        changer_length : Changer | None, optional
            Transform applied to the length on every forward step.
        callbacks : Mapping[str, TurtleCallback] | None, optional
            Initial symbol -> callback registry; copied.
        """
        self.position = np.array(position, dtype=np.float64, copy=True)
        self.angle = angle
        self.width = width
        self.length = length
        self.delta_angle = delta_angle
        self.changer_width = changer_width or Changer.none()
        self.changer_length = changer_length or Changer.none()
        self._callbacks: dict[str, TurtleCallback] = dict(callbacks) if callbacks else {}

    @property
    def callbacks(self) -> Mapping[str, TurtleCallback]:
        return MappingProxyType(self._callbacks)

    def add_callback(self, symbol: str, callback: TurtleCallback) -> None:
        self._callbacks[symbol] = callback

    def remove_callback(self, symbol: str) -> None:
        self._callbacks.pop(symbol, None)

    def clear_callbacks(self) -> None:
        self._callbacks = {}

    def initial_state(self) -> CursorState:
        return CursorState(self.position, self.angle, self.width, self.length).copy()

    def interpret(self, symbols: Iterable[str]) -> None:
        """
        Walk ``symbols`` once and fire the registered callbacks.

        Parameters
        ----------
        symbols : Iterable[str]
            A ``SymbolSequence`` or any iterable of single characters.
        """
        stack: list[CursorState] = []
        state = self.initial_state()
        prev_position = state.position.copy()
        prev_width = state.width

        for symbol in symbols:
            match symbol:
                case config.FORWARD_DRAW | config.FORWARD_MOVE:
                    next_position = state.position + state.heading() * state.length
                    next_width = self.changer_width.apply(state.width)
                    next_length = self.changer_length.apply(state.length)

                    callback = self._callbacks.get(symbol)
                    if callback is not None:
                        callback(state.position.copy(), state.width, next_position.copy(), next_width)

                    prev_position = state.position.copy()
                    prev_width = state.width
                    state.position = next_position
                    state.width = next_width
                    state.length = next_length
                case config.TURN_LEFT:
                    state.angle += self.delta_angle
                case config.TURN_RIGHT:
                    state.angle -= self.delta_angle
                case config.PUSH:
                    stack.append(state.copy())
                case config.POP:
                    if stack:
                        state = stack.pop()
                case _:
                    callback = self._callbacks.get(symbol)
                    if callback is not None:
                        callback(prev_position.copy(), prev_width, state.position.copy(), state.width)
