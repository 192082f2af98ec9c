"""Command line interface: list presets, expand grammars, render plants.

Usage
-----
    plantgen presets
    plantgen expand --axiom A --rule A=AB --iterations 3
    plantgen render --preset "Tree 1" --output tree.png
"""

# Standard library
import argparse
from collections.abc import Sequence
from pathlib import Path

# Third-party libraries
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.traceback import install

# Local libraries
from plantgen.config import PlantGenSettings
from plantgen.lsystem import ProductionEngine
from plantgen.presets import PRESETS, get_preset
from plantgen.scene import PlantScene
from plantgen.utils.renderers import render_poly_data

# Global functions
install(show_locals=False)
console = Console()


def parse_rule(text: str) -> tuple[str, str]:
    """Split ``KEY=BODY``; the body may be empty."""
    key, sep, body = text.partition("=")
    if not sep or not key:
        msg = f"Rule {text!r} must look like KEY=BODY."
        raise argparse.ArgumentTypeError(msg)
    return key, body


def _preset_key(text: str) -> int | str:
    return int(text) if text.isdigit() else text


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plantgen",
        description="Generate branching plants from L-system grammars.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("presets", help="List the built-in presets")

    expand = sub.add_parser("expand", help="Print the rewritten string of a grammar")
    expand.add_argument("--axiom", required=True, help="Start string")
    expand.add_argument(
        "--rule",
        action="append",
        default=[],
        type=parse_rule,
        help="Rewriting rule KEY=BODY (repeatable)",
    )
    expand.add_argument("--iterations", type=int, default=1, help="Number of generations")

    render = sub.add_parser("render", help="Render a preset to a PNG image")
    render.add_argument("--preset", type=_preset_key, default=None, help="Preset index or name")
    render.add_argument("--iterations", type=int, default=None, help="Override the preset iteration count")
    render.add_argument("--output", type=Path, default=None, help="PNG file to write")
    render.add_argument("--dpi", type=int, default=None, help="Image resolution")
    return parser


def cmd_presets() -> None:
    table = Table(title="Presets")
    table.add_column("#", justify="right")
    table.add_column("Name", no_wrap=True)
    table.add_column("Axiom")
    table.add_column("Rules")
    table.add_column("Iterations", justify="right")
    for idx, preset in enumerate(PRESETS):
        rules = ", ".join(f"{k} -> {v}" for k, v in preset.rules.items()) or "-"
        table.add_row(str(idx), preset.name, escape(preset.input), escape(rules), str(preset.iter))
    console.print(table)


def cmd_expand(axiom: str, rules: Sequence[tuple[str, str]], iterations: int) -> None:
    engine = ProductionEngine()
    for key, body in rules:
        engine.add_rule(key, body)
    console.print(str(engine.generate(axiom, iterations)), markup=False, highlight=False, soft_wrap=True)


def cmd_render(
    settings: PlantGenSettings,
    preset: int | str | None,
    iterations: int | None,
    output: Path | None,
    dpi: int | None,
) -> Path:
    scene = PlantScene(settings)
    if preset is not None:
        scene.load_preset(preset)
    if iterations is not None:
        scene.iterations = iterations
    name = get_preset(preset if preset is not None else settings.default_preset).name
    poly = scene.generate()

    output = output or settings.data_dir / f"{name.lower().replace(' ', '_')}.png"
    render_poly_data(poly, output, dpi=dpi or settings.dpi, title=name)
    console.log(f"[green]Saved render to {output}[/green]")
    return output


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_argparser()
    args = parser.parse_args(argv)
    settings = PlantGenSettings()

    try:
        match args.command:
            case "presets":
                cmd_presets()
            case "expand":
                cmd_expand(args.axiom, args.rule, args.iterations)
            case "render":
                cmd_render(settings, args.preset, args.iterations, args.output, args.dpi)
    except ValueError as e:
        console.log(f"[red]{escape(str(e))}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
