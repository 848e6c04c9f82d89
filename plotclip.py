import typer

from modules.cli.runtime import execute_clip
from modules.geometry.primitives import Edge, Point
from utils.logger import get_logger

log = get_logger("Orchestrator")
app = typer.Typer(
    help="plotclip: clip plot-space paths and polygons to a rectangular viewport",
    no_args_is_help=True,
)


@app.command(name="clip")
def run_clip(
    input_path: str = typer.Argument(..., help="JSON clip request with kind, extent and points."),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Result path. Defaults to <OUTPUT_DIR>/<stem>_clipped.json."
    ),
) -> None:
    """Clip the shape described in a JSON request and write the clipped geometry."""
    execute_clip(input_path=input_path, output_path=output, context_label="Clip")


@app.command(name="check-edge")
def run_check_edge(
    x1: float = typer.Argument(..., help="First edge start X."),
    y1: float = typer.Argument(..., help="First edge start Y."),
    x2: float = typer.Argument(..., help="First edge end X."),
    y2: float = typer.Argument(..., help="First edge end Y."),
    x3: float = typer.Argument(..., help="Second edge start X."),
    y3: float = typer.Argument(..., help="Second edge start Y."),
    x4: float = typer.Argument(..., help="Second edge end X."),
    y4: float = typer.Argument(..., help="Second edge end Y."),
) -> None:
    """Report where the supporting lines of two edges cross."""
    first = Edge(Point(x1, y1), Point(x2, y2))
    second = Edge(Point(x3, y3), Point(x4, y4))
    crossing = first.intersection(second)
    if crossing is None:
        log.warning("Edges are parallel or degenerate; no intersection.")
        return
    typer.echo(f"{crossing.x} {crossing.y}")


if __name__ == "__main__":
    app()
