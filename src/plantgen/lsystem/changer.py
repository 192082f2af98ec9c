"""Numeric transforms applied to width and length after every forward step."""

# Standard library
from dataclasses import dataclass

# Third-party libraries
import numpy as np

# Local libraries
from plantgen.config import ChangerType


@dataclass(frozen=True)
class Changer:
    """A one-argument transform: identity, additive, multiplicative or power."""

    kind: ChangerType = ChangerType.NONE
    parameter: float = 0.0

    @classmethod
    def none(cls) -> "Changer":
        """Return the identity changer."""
        return cls(ChangerType.NONE, 0.0)

    def apply(self, value: float) -> float:
        """
        Compute the next value from the current one.

        Parameters
        ----------
        value : float
            Current width or length.

        Returns
        -------
        float
            The transformed value. ``EXPONENTIAL`` follows real-number power
            semantics: a negative base with a fractional exponent gives
            ``nan``, zero to a negative power gives ``inf``. Such results are
            returned as-is.
        """
        match self.kind:
            case ChangerType.LINEAR:
                return value + self.parameter
            case ChangerType.GEOMETRIC:
                return value * self.parameter
            case ChangerType.EXPONENTIAL:
                with np.errstate(all="ignore"):
                    return float(np.power(np.float64(value), self.parameter))
        return value


def apply_changer(changer: Changer, value: float) -> float:
    return changer.apply(value)
