# src/termtodo/ui/banner.py

from __future__ import annotations

from ..core.ports import RenderPort

COMMANDS: tuple[tuple[str, str], ...] = (
    ("'a'", "Add TODO"),
    ("Enter", "Mark TODO as done"),
    ("CTRL+'C'", "Exit program"),
)


def show_command_banner(render: RenderPort) -> None:
    """Clear the screen and list the key bindings, one per row below the title."""
    render.clear()
    render.goto(1, 1)
    render.write("Commands: ")
    for row, (key, description) in enumerate(COMMANDS, start=2):
        render.goto(1, row)
        render.write_styled("Press ", bold=True)
        render.write_styled(key, bold=True, color="ansigreen")
        render.write_styled(f" => {description}", bold=True)
    render.flush()
