"""Plant scene: presets, user rules and mesh generation around one L-system.

Notes
-----
    * ``F`` draws a branch segment, ``L`` a leaf and ``J`` a flower. Any
      other symbol only steers the turtle or acts as a rule placeholder.
    * Rules added through the scene are restricted to single-letter keys and
      letter/``+``/``-`` bodies; anything else is logged and dropped.
"""

# Standard library
import re

# Third-party libraries
import numpy as np
from rich.console import Console

# Local libraries
import plantgen.config as config
from plantgen.config import LeafType, PlantGenSettings
from plantgen.lsystem import LSystem, SymbolSequence
from plantgen.lsystem.turtle import Vec2
from plantgen.mesh.triangulation import (
    PolyData,
    gen_circle,
    gen_line,
    gen_line_kite,
    gen_obb,
    gen_star,
)
from plantgen.presets import get_preset

console = Console()

_RULE_KEY = re.compile(config.RULE_KEY_PATTERN)
_RULE_BODY = re.compile(config.RULE_BODY_PATTERN)


def is_valid_rule(key: str, body: str) -> bool:
    """Return True for a single-letter key with a letter/``+``/``-`` body."""
    return bool(_RULE_KEY.fullmatch(key)) and bool(_RULE_BODY.fullmatch(body))


class PlantScene:
    """Owns the L-system, its drawing callbacks and the generated mesh."""

    def __init__(self, settings: PlantGenSettings | None = None) -> None:
        self.settings = settings or PlantGenSettings()
        self.rng = np.random.default_rng(self.settings.seed)
        self.poly = PolyData()
        self.sequence = SymbolSequence()

        self.lsystem = LSystem((0.0, -100.0), 90.0, 20.0, 40.0)
        self.lsystem.delta_angle = 20.0

        # Appearance and generation inputs
        self.input = ""
        self.iterations = 0
        self.preset = self.settings.default_preset
        self.rules: dict[str, str] = {}
        self.branch_color = (255, 255, 255, 255)
        self.leaf_color = (255, 255, 255, 255)
        self.flower_inner_color = (255, 255, 255, 255)
        self.flower_outer_color = (255, 255, 255, 255)
        self.leaf_size = (1.0, 1.0)
        self.leaf_ratio = 0.5
        self.leaf_type = LeafType.BOX
        self.flower_inner_radius = 1.0
        self.flower_outer_radius = 2.0

        self.lsystem.add_callback(config.LEAF_SYMBOL, self.draw_leaf)
        self.lsystem.add_callback(config.FLOWER_SYMBOL, self.draw_flower)
        self.lsystem.add_callback(config.BRANCH_SYMBOL, self.draw_branch)

        self.load_preset(self.preset)

    # ------------------------------------------------------------------ #
    # Drawing callbacks
    # ------------------------------------------------------------------ #

    def draw_branch(self, start: Vec2, w0: float, end: Vec2, w1: float) -> None:
        gen_line(start, w0, end, w1, self.settings.branch_depth, self.branch_color, self.poly)

    def draw_leaf(self, start: Vec2, w0: float, end: Vec2, w1: float) -> None:
        """Leaf at the start of the last segment, pointing along it."""
        if self.leaf_type == LeafType.BOX:
            gen_obb(
                start,
                self.leaf_size,
                float(self.rng.random()),
                self.settings.leaf_depth,
                self.leaf_color,
                self.poly,
            )
            return

        delta = np.asarray(end) - np.asarray(start)
        norm = float(np.hypot(*delta))
        if norm == 0.0 or not np.isfinite(norm):
            return
        tip = np.asarray(start) + delta / norm * self.leaf_size[1]
        gen_line_kite(
            start,
            tip,
            self.leaf_size[0],
            self.leaf_ratio,
            self.settings.leaf_depth,
            self.leaf_color,
            self.poly,
        )

    def draw_flower(self, start: Vec2, w0: float, end: Vec2, w1: float) -> None:
        gen_star(
            end,
            self.flower_outer_radius,
            self.flower_outer_radius * self.settings.star_inner_ratio,
            self.settings.star_points,
            self.settings.flower_outer_depth,
            self.flower_outer_color,
            self.poly,
        )
        gen_circle(
            end,
            self.flower_inner_radius,
            self.settings.circle_segments,
            self.settings.flower_inner_depth,
            self.flower_inner_color,
            self.poly,
        )

    # ------------------------------------------------------------------ #
    # Configuration
    # ------------------------------------------------------------------ #

    def load_preset(self, key: int | str) -> None:
        """Copy every value of a preset into the scene and its L-system."""
        preset = get_preset(key)
        self.preset = key
        self.input = preset.input
        self.iterations = preset.iter
        self.branch_color = preset.branch_color
        self.leaf_color = preset.leaf_color
        self.flower_inner_color = preset.flower_inner_color
        self.flower_outer_color = preset.flower_outer_color
        self.leaf_type = preset.leaf_type
        self.leaf_size = preset.leaf_size
        self.leaf_ratio = preset.leaf_ratio
        self.flower_inner_radius = preset.flower_inner_radius
        self.flower_outer_radius = preset.flower_outer_radius

        self.lsystem.angle = preset.angle
        self.lsystem.delta_angle = preset.delta_angle
        self.lsystem.length = preset.length
        self.lsystem.width = preset.width
        self.lsystem.changer_length = preset.length_changer()
        self.lsystem.changer_width = preset.width_changer()
        self.lsystem.position = np.array(preset.position, dtype=np.float64)

        self.rules = dict(preset.rules)
        console.log(f"Loaded preset [bold cyan]{preset.name}[/bold cyan]")

    def add_rule(self, key: str, body: str) -> bool:
        """Add a rule if it passes validation; return whether it was added."""
        if not is_valid_rule(key, body):
            console.log(f"[yellow]Ignoring rule {key!r} -> {body!r}: invalid key or body.[/yellow]")
            return False
        self.rules[key] = body
        return True

    def clear_rules(self) -> None:
        self.rules = {}

    # ------------------------------------------------------------------ #
    # Generation
    # ------------------------------------------------------------------ #

    def generate(self) -> PolyData:
        """
        Rebuild the mesh from the current input, rules and settings.

        The leaf generator is reseeded first, so the same inputs always give
        the same mesh.
        """
        self.rng = np.random.default_rng(self.settings.seed)
        self.poly.clear()
        self.lsystem.clear_rules()
        for key, body in self.rules.items():
            self.lsystem.add_rule(key, body)

        iterations = min(
            max(self.iterations, self.settings.min_iterations),
            self.settings.max_iterations,
        )
        self.sequence = self.lsystem.generate(self.input, iterations)
        console.log(
            f"Generated {len(self.sequence)} symbols -> "
            f"{self.poly.vertex_count} vertices, {self.poly.triangle_count} triangles",
        )
        return self.poly
