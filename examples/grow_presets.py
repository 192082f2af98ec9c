"""Render every built-in preset and the branching skeleton of each.

Images are written to ``__data__/`` in the current working directory.
"""

# Standard library
from pathlib import Path

# Third-party libraries
from rich.console import Console
from rich.traceback import install

# Local libraries
from plantgen.config import PlantGenSettings
from plantgen.lsystem import LSystem
from plantgen.presets import PRESETS
from plantgen.scene import PlantScene
from plantgen.utils.graph_ops import EdgeRecorder, branch_tips, draw_skeleton, edges_to_digraph
from plantgen.utils.renderers import render_poly_data

# Global constants
SCRIPT_NAME = __file__.split("/")[-1][:-3]
CWD = Path.cwd()
DATA = CWD / "__data__" / SCRIPT_NAME
DATA.mkdir(parents=True, exist_ok=True)

# Global functions
install()
console = Console()


def skeleton_of(preset_id: int) -> EdgeRecorder:
    """Replay a preset through a bare L-system, recording only the branches."""
    preset = PRESETS[preset_id]
    lsys = LSystem(preset.position, preset.angle, preset.width, preset.length)
    lsys.delta_angle = preset.delta_angle
    lsys.changer_width = preset.width_changer()
    lsys.changer_length = preset.length_changer()
    for key, body in preset.rules.items():
        lsys.add_rule(key, body)

    recorder = EdgeRecorder()
    lsys.add_callback("F", recorder)
    lsys.generate(preset.input, preset.iter)
    return recorder


def main() -> None:
    """Entry point."""
    settings = PlantGenSettings(data_dir=DATA)
    scene = PlantScene(settings)

    for idx, preset in enumerate(PRESETS):
        console.rule(f"[bold blue]{preset.name}")
        scene.load_preset(idx)
        poly = scene.generate()
        slug = preset.name.lower().replace(" ", "_")
        render_poly_data(poly, DATA / f"{slug}.png", title=preset.name)

        graph = edges_to_digraph(skeleton_of(idx).edges)
        console.log(
            f"{graph.number_of_edges()} branch segments, {len(branch_tips(graph))} tips",
        )
        draw_skeleton(graph, title=f"{preset.name} skeleton", save_file=DATA / f"{slug}_skeleton.png")

    console.log(f"[green]Saved images to {DATA}[/green]")


if __name__ == "__main__":
    main()
