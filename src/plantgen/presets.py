"""Built-in plant presets.

Each preset bundles an axiom, its rules and every turtle/appearance setting
needed to reproduce one plant.
"""

# Third-party libraries
from pydantic import BaseModel, ConfigDict, Field

# Local libraries
from plantgen.config import ChangerType, LeafType
from plantgen.lsystem.changer import Changer

Vec2 = tuple[float, float]
RGBA = tuple[int, int, int, int]


class Preset(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    position: Vec2 = (0.0, -80.0)
    width: float = Field(gt=0.0)
    length: float = Field(gt=0.0)
    angle: float = 90.0
    delta_angle: float
    input: str
    rules: dict[str, str] = Field(default_factory=dict)
    iter: int = Field(ge=0)
    branch_color: RGBA
    leaf_color: RGBA
    flower_inner_color: RGBA = (235, 207, 52, 255)
    flower_outer_color: RGBA = (235, 52, 171, 255)
    leaf_type: LeafType = LeafType.KITE
    leaf_size: Vec2
    leaf_ratio: float = Field(default=0.5, ge=0.0, le=1.0)
    flower_inner_radius: float = 3.0
    flower_outer_radius: float = 6.0
    width_changer_type: ChangerType = ChangerType.NONE
    width_changer_param: float = 0.0
    length_changer_type: ChangerType = ChangerType.NONE
    length_changer_param: float = 0.0

    def width_changer(self) -> Changer:
        return Changer(self.width_changer_type, self.width_changer_param)

    def length_changer(self) -> Changer:
        return Changer(self.length_changer_type, self.length_changer_param)


PRESETS: list[Preset] = [
    Preset(
        name="Flower 1",
        width=4.0,
        length=20.0,
        delta_angle=40.0,
        input="F[-fL]F[+fL]FBFFFBBFFFFFJ",
        rules={
            "B": "[-CCCFFJ][+CCCFFJ]",
            "C": "F[-FJ][+FJ]",
        },
        iter=3,
        branch_color=(25, 99, 30, 255),
        leaf_color=(25, 99, 30, 255),
        flower_inner_color=(224, 194, 61, 255),
        flower_outer_color=(71, 76, 166, 255),
        leaf_size=(5.0, 20.0),
        flower_inner_radius=1.5,
        flower_outer_radius=3.0,
        width_changer_type=ChangerType.GEOMETRIC,
        width_changer_param=0.8,
        length_changer_type=ChangerType.GEOMETRIC,
        length_changer_param=0.8,
    ),
    Preset(
        name="Flower 2",
        width=1.0,
        length=20.0,
        delta_angle=40.0,
        input="F[+fL]F[-fL]FJ",
        iter=1,
        branch_color=(87, 212, 130, 255),
        leaf_color=(87, 212, 130, 255),
        leaf_size=(4.0, 20.0),
    ),
    Preset(
        name="Tree 1",
        width=12.0,
        length=15.0,
        delta_angle=25.0,
        input="FFFFFB",
        rules={"B": "[-FBfL][+FBfL]"},
        iter=7,
        branch_color=(161, 90, 43, 255),
        leaf_color=(163, 207, 60, 255),
        leaf_size=(3.0, 5.0),
        width_changer_type=ChangerType.GEOMETRIC,
        width_changer_param=0.7,
        length_changer_type=ChangerType.GEOMETRIC,
        length_changer_param=0.95,
    ),
    Preset(
        name="Tree 2",
        width=12.0,
        length=20.0,
        delta_angle=30.0,
        input="FFX",
        rules={"X": "F[-FXL][+FXL]X"},
        iter=4,
        branch_color=(161, 90, 43, 255),
        leaf_color=(163, 207, 60, 255),
        leaf_size=(30.0, 30.0),
        width_changer_type=ChangerType.GEOMETRIC,
        width_changer_param=0.7,
        length_changer_type=ChangerType.GEOMETRIC,
        length_changer_param=0.95,
    ),
]


def get_preset(key: int | str) -> Preset:
    """
    Look up a preset by index or by name (case-insensitive).

    Raises
    ------
    ValueError
        If no preset matches ``key``.
    """
    if isinstance(key, int):
        if 0 <= key < len(PRESETS):
            return PRESETS[key]
        msg = f"Preset index {key} out of range (0..{len(PRESETS) - 1})."
        raise ValueError(msg)
    for preset in PRESETS:
        if preset.name.lower() == key.lower():
            return preset
    msg = f"Unknown preset {key!r}; choose from {[p.name for p in PRESETS]}."
    raise ValueError(msg)
