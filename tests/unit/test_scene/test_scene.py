"""Test: plant scene (presets, rule validation, mesh generation)."""

import numpy as np
import pytest

from plantgen.config import LeafType
from plantgen.lsystem import ProductionEngine
from plantgen.presets import get_preset
from plantgen.scene import PlantScene, is_valid_rule


class TestRuleValidation:
    """Tests for is_valid_rule and PlantScene.add_rule."""

    @pytest.mark.parametrize(
        ("key", "body", "expected"),
        [
            ("X", "F+F-F", True),
            ("b", "FB", True),
            ("XY", "F", False),
            ("1", "F", False),
            ("X", "F[F]", False),
            ("X", "", False),
            ("X", "F\n", False),
        ],
    )
    def test_is_valid_rule(self, key: str, body: str, expected: bool) -> None:
        """Test single-letter keys with letter/+/- bodies are accepted."""
        assert is_valid_rule(key, body) is expected

    def test_add_rule(self, settings) -> None:
        """Test valid rules are stored and invalid ones dropped."""
        scene = PlantScene(settings)
        scene.clear_rules()
        assert scene.add_rule("X", "FF") is True
        assert scene.add_rule("[", "FF") is False
        assert scene.rules == {"X": "FF"}


class TestLoadPreset:
    """Tests for PlantScene.load_preset."""

    def test_default_preset_loaded(self, settings) -> None:
        """Test the scene starts from the default preset."""
        scene = PlantScene(settings)
        preset = get_preset(settings.default_preset)
        assert scene.input == preset.input
        assert scene.rules == preset.rules
        assert scene.lsystem.delta_angle == preset.delta_angle

    def test_values_copied(self, settings) -> None:
        """Test every preset value reaches the scene and the L-system."""
        scene = PlantScene(settings)
        scene.load_preset("Tree 1")
        preset = get_preset("Tree 1")
        assert scene.iterations == preset.iter
        assert scene.leaf_size == preset.leaf_size
        assert scene.branch_color == preset.branch_color
        assert scene.lsystem.width == preset.width
        assert scene.lsystem.length == preset.length
        assert scene.lsystem.changer_width == preset.width_changer()
        np.testing.assert_allclose(scene.lsystem.position, preset.position)

    def test_rules_are_copied(self, settings) -> None:
        """Test editing scene rules does not touch the preset table."""
        scene = PlantScene(settings)
        scene.load_preset("Tree 2")
        scene.add_rule("Y", "F")
        assert "Y" not in get_preset("Tree 2").rules

    def test_tracks_loaded_preset(self, settings) -> None:
        """Test the scene remembers which preset was loaded last."""
        scene = PlantScene(settings)
        assert scene.preset == settings.default_preset
        scene.load_preset(2)
        assert scene.preset == 2
        scene.load_preset("Tree 2")
        assert scene.preset == "Tree 2"

    def test_unknown_preset(self, settings) -> None:
        """Test an unknown preset raises ValueError."""
        scene = PlantScene(settings)
        with pytest.raises(ValueError):
            scene.load_preset(99)


class TestGenerate:
    """Tests for PlantScene.generate."""

    def test_flower_two_triangle_count(self, settings) -> None:
        """Test 3 branches, 2 kite leaves and 1 flower."""
        scene = PlantScene(settings)
        scene.load_preset("Flower 2")
        poly = scene.generate()
        branch = 3 * 2
        leaves = 2 * 2
        flower = 2 * settings.star_points + settings.circle_segments
        assert poly.triangle_count == branch + leaves + flower

    def test_regenerate_clears_mesh(self, settings) -> None:
        """Test generating twice does not accumulate geometry."""
        scene = PlantScene(settings)
        first = scene.generate().triangle_count
        second = scene.generate().triangle_count
        assert first == second > 0

    def test_iterations_clamped(self, settings) -> None:
        """Test iterations above the configured maximum are clamped."""
        settings.max_iterations = 2
        scene = PlantScene(settings)
        scene.load_preset("Tree 1")
        scene.generate()
        preset = get_preset("Tree 1")
        expected = ProductionEngine(preset.rules).generate(preset.input, 2)
        assert scene.sequence == expected

    def test_box_leaves_reproducible(self, settings) -> None:
        """Test random leaf rotation is driven by the seeded generator."""
        meshes = []
        for _ in range(2):
            scene = PlantScene(settings)
            scene.load_preset("Tree 2")
            scene.leaf_type = LeafType.BOX
            meshes.append(scene.generate().as_arrays()[0])
        np.testing.assert_array_equal(meshes[0], meshes[1])

    def test_regenerate_same_scene_identical(self, settings) -> None:
        """Test repeated generates on one scene give the same box leaves."""
        scene = PlantScene(settings)
        scene.load_preset("Tree 2")
        scene.leaf_type = LeafType.BOX
        first = scene.generate().as_arrays()[0].copy()
        second = scene.generate().as_arrays()[0]
        np.testing.assert_array_equal(first, second)

    def test_user_rules_used(self, settings) -> None:
        """Test rules added through the scene drive the rewrite."""
        scene = PlantScene(settings)
        scene.input = "X"
        scene.iterations = 1
        scene.clear_rules()
        scene.add_rule("X", "FFF")
        poly = scene.generate()
        assert str(scene.sequence) == "FFF"
        assert poly.triangle_count == 3 * 2

    def test_layers_use_configured_depths(self, settings) -> None:
        """Test branches, leaves and flowers land on their own depth."""
        scene = PlantScene(settings)
        scene.load_preset("Flower 2")
        positions, _, _ = scene.generate().as_arrays()
        depths = set(np.round(positions[:, 2].astype(np.float64), 4).tolist())
        assert depths == {
            round(settings.branch_depth, 4),
            round(settings.leaf_depth, 4),
            round(settings.flower_outer_depth, 4),
            round(settings.flower_inner_depth, 4),
        }
