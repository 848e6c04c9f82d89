from pathlib import Path

import typer

from config.settings import settings
from modules.cli.common import default_output_path, ensure_input_exists, load_clip_request
from modules.geometry.clipping import clip_path, clip_polygon
from modules.geometry.output_writer import write_json_output
from schemas.geometry_models import ClipRequest, ClipResult, ShapeKind
from utils.logger import get_logger

log = get_logger("CLI_Runtime")


def clip_request(request: ClipRequest, precision: int | None = None) -> ClipResult:
    """Run the clip matching the request kind and package the shapes."""
    points = request.to_points()
    if request.kind == ShapeKind.POLYGON:
        ring = clip_polygon(points, request.extent)
        shapes = [ring] if ring else []
    else:
        shapes = clip_path(points, request.extent)
    return ClipResult.from_shapes(request.kind, request.extent, shapes, precision=precision)


def execute_clip(
    *,
    input_path: str | Path,
    output_path: str | Path | None = None,
    context_label: str = "Clip",
) -> Path:
    """
    Standardized CLI execution wrapper for clip requests.

    Validates the input path, wraps loading, clipping and writing in a single
    try/except block, and strictly exits with code 1 on failure.
    """
    source_path = ensure_input_exists(input_path, context_label=context_label)
    target_path = Path(output_path) if output_path else default_output_path(source_path)

    try:
        request = load_clip_request(source_path)
        log.info(
            f"Clipping {request.kind} of {len(request.points)} points to "
            f"{request.extent.width} x {request.extent.height}"
        )
        result = clip_request(request, precision=settings.OUTPUT_PRECISION)
        write_json_output(result, target_path)
    except Exception as exc:
        log.error(f"{context_label}: {exc}")
        raise typer.Exit(code=1) from exc

    log.success(f"{context_label}: {len(result.shapes)} shape(s) written to {target_path}")
    return target_path
