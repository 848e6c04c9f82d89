from pathlib import Path

import typer

from config.settings import settings
from schemas.geometry_models import ClipRequest
from utils.logger import get_logger

log = get_logger("CLICommon")


def ensure_input_exists(input_path: str | Path, context_label: str) -> Path:
    """Validate the request file exists and return normalized path."""
    source_path = Path(input_path)
    if not source_path.exists():
        log.error(f"{context_label}: Input file '{source_path}' does not exist.")
        raise typer.Exit(code=1)
    return source_path


def load_clip_request(source_path: Path) -> ClipRequest:
    """Parse and validate a JSON clip request."""
    return ClipRequest.model_validate_json(source_path.read_text(encoding="utf-8"))


def default_output_path(source_path: Path, output_dir: Path | None = None) -> Path:
    """Return `<output_dir>/<stem>_clipped.json` for a request file."""
    base = output_dir or settings.OUTPUT_DIR
    return base / f"{source_path.stem}_clipped.json"
