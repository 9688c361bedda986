"""Render parameter save/load for JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from hexcube.model import RenderParams

logger = logging.getLogger(__name__)

_VALID_SECTIONS = frozenset({"render_params", "text"})


def save_params(
    path: str | Path,
    params: RenderParams,
    *,
    text: str | None = None,
) -> None:
    """Save render parameters to a JSON file.

    Only non-default parameters are written.  The file is
    human-readable with two-space indentation.

    Args:
        path: Destination file path.
        params: Parameters to save.
        text: Optional sample text stored alongside the parameters.
    """
    data: dict = {"render_params": params.to_dict()}
    if text is not None:
        data["text"] = text
    Path(path).write_text(json.dumps(data, indent=2) + "\n")
    logger.info("Render parameters saved to: %s", path)


def load_params(path: str | Path) -> tuple[RenderParams, str | None]:
    """Load render parameters from a JSON file.

    Args:
        path: Source file path.

    Returns:
        A ``(params, text)`` tuple; *text* is ``None`` when the file
        stores no sample text.

    Raises:
        ValueError: If the file contains unknown top-level keys or
            invalid parameter values.
    """
    logger.info("Loading render parameters from: %s", path)
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(
            f"parameter file must contain a JSON object, got {type(data).__name__}"
        )

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in parameter file: {sorted(unknown)}"
        )

    params = RenderParams.from_dict(data.get("render_params", {}))
    text = data.get("text")
    if text is not None and not isinstance(text, str):
        raise ValueError(f"text must be a string, got {type(text).__name__}")
    return params, text
