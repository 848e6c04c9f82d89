from pathlib import Path

from schemas.geometry_models import ClipResult


def write_json_output(result: ClipResult, output_path: Path) -> None:
    """Persist a clip result to JSON with UTF-8 encoding."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as file:
        file.write(result.model_dump_json(indent=2))
