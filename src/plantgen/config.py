"""Configuration, enums and constants for plantgen.

Notes
-----
    * Enum values follow the order of the changer/leaf selectors, so presets
      can be stored as plain integers.
    * ``PlantGenSettings`` reads overrides from ``PLANTGEN_*`` environment
      variables.
"""

# Standard library
from enum import Enum
from pathlib import Path

# Third-party libraries
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Global constants
SEED = 42
DPI = 300

# Turtle alphabet
FORWARD_DRAW = "F"
FORWARD_MOVE = "f"
TURN_LEFT = "-"
TURN_RIGHT = "+"
PUSH = "["
POP = "]"
RESERVED_SYMBOLS = FORWARD_MOVE + FORWARD_DRAW + TURN_LEFT + TURN_RIGHT + PUSH + POP

# Symbols the plant scene draws with
BRANCH_SYMBOL = FORWARD_DRAW
LEAF_SYMBOL = "L"
FLOWER_SYMBOL = "J"

DEFAULT_DELTA_ANGLE = 90.0

# Host-side rule validation
RULE_KEY_PATTERN = r"^[a-zA-Z]$"
RULE_BODY_PATTERN = r"^[a-zA-Z+-]+$"


class ChangerType(Enum):
    """How width/length evolve after each forward step."""

    NONE = 0
    LINEAR = 1
    GEOMETRIC = 2
    EXPONENTIAL = 3


class LeafType(Enum):
    """Leaf shapes drawn for the leaf symbol."""

    BOX = 0
    KITE = 1


class PlantGenSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PLANTGEN_")

    seed: int = SEED
    dpi: int = Field(default=DPI, gt=0)
    min_iterations: int = Field(default=0, ge=0)
    max_iterations: int = Field(default=10, ge=0)
    default_preset: int = Field(default=0, ge=0)
    data_dir: Path = Path.cwd() / "__data__"

    # Draw order of the generated layers (more negative = in front)
    branch_depth: float = 0.0
    leaf_depth: float = -0.2
    flower_outer_depth: float = -0.1
    flower_inner_depth: float = -0.2

    # Flower geometry
    star_points: int = Field(default=10, gt=2)
    star_inner_ratio: float = Field(default=0.8, gt=0.0)
    circle_segments: int = Field(default=6, gt=2)
