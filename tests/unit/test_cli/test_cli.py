"""Test: plantgen command line interface."""

import argparse

import pytest

import plantgen.cli as cli


class TestParseRule:
    """Tests for parse_rule."""

    def test_split(self) -> None:
        """Test KEY=BODY splits on the first '='."""
        assert cli.parse_rule("X=F[-X]+X") == ("X", "F[-X]+X")
        assert cli.parse_rule("X=") == ("X", "")

    @pytest.mark.parametrize("text", ["X", "=F"])
    def test_invalid(self, text: str) -> None:
        """Test malformed rules are rejected."""
        with pytest.raises(argparse.ArgumentTypeError):
            cli.parse_rule(text)


class TestCommands:
    """Tests for main()."""

    def test_expand(self, capsys) -> None:
        """Test expand prints the rewritten string."""
        code = cli.main(["expand", "--axiom", "A", "--rule", "A=AB", "--iterations", "2"])
        assert code == 0
        assert capsys.readouterr().out.strip() == "ABB"

    def test_expand_keeps_brackets(self, capsys) -> None:
        """Test brackets are printed literally."""
        code = cli.main(["expand", "--axiom", "X", "--rule", "X=F[-X][+X]", "--iterations", "1"])
        assert code == 0
        assert capsys.readouterr().out.strip() == "F[-X][+X]"

    def test_presets(self, capsys) -> None:
        """Test presets lists every preset name."""
        assert cli.main(["presets"]) == 0
        out = capsys.readouterr().out
        for name in ("Flower 1", "Flower 2", "Tree 1", "Tree 2"):
            assert name in out

    def test_render(self, tmp_path, settings, monkeypatch) -> None:
        """Test render writes a PNG for a preset."""
        monkeypatch.setattr(cli, "PlantGenSettings", lambda: settings)
        output = tmp_path / "flower.png"
        code = cli.main(["render", "--preset", "1", "--output", str(output), "--dpi", "50"])
        assert code == 0
        assert output.exists()

    def test_render_default_path(self, settings, monkeypatch) -> None:
        """Test render falls back to the data folder."""
        monkeypatch.setattr(cli, "PlantGenSettings", lambda: settings)
        code = cli.main(["render", "--preset", "Tree 2", "--iterations", "2", "--dpi", "50"])
        assert code == 0
        assert (settings.data_dir / "tree_2.png").exists()

    def test_render_unknown_preset(self, settings, monkeypatch) -> None:
        """Test an unknown preset exits with code 1."""
        monkeypatch.setattr(cli, "PlantGenSettings", lambda: settings)
        assert cli.main(["render", "--preset", "Shrub"]) == 1

    def test_missing_command(self) -> None:
        """Test argparse rejects a missing sub-command."""
        with pytest.raises(SystemExit) as excinfo:
            cli.main([])
        assert excinfo.value.code == 2
