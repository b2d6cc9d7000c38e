"""Loader for the TTS audio manifest used as a no-match fallback.

The manifest is a JSON array of ``{"text": ..., "audio": ...}`` objects.
Malformed entries are skipped with a warning; a malformed document raises
ManifestError.
"""

import json
from pathlib import Path
from typing import Any, List, Union

from pydantic import ValidationError

from signmatch.logging import get_logger

from .models import AudioSample

logger = get_logger(__name__, component="assets")


class ManifestError(Exception):
    """Raised when the TTS manifest cannot be read or is not a JSON array."""

    def __init__(self, message: str, path: Union[str, Path, None] = None):
        self.message = message
        self.path = str(path) if path is not None else None
        super().__init__(f"{message} ({self.path})" if self.path else message)


def parse_manifest(data: Any) -> List[AudioSample]:
    """Build AudioSample entries from decoded manifest JSON.

    Args:
        data: Decoded JSON document

    Returns:
        Samples in manifest order

    Raises:
        ManifestError: If the document is not a list
    """
    if not isinstance(data, list):
        raise ManifestError(f"Manifest must be a JSON array, got {type(data).__name__}")

    samples = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.warning(
                "Skipping non-object manifest entry",
                extra={"event": "assets.manifest.entry_skipped", "index": index},
            )
            continue
        try:
            samples.append(AudioSample.model_validate(entry))
        except ValidationError as e:
            logger.warning(
                "Skipping invalid manifest entry",
                extra={
                    "event": "assets.manifest.entry_skipped",
                    "index": index,
                    "error_count": e.error_count(),
                },
            )

    return samples


def load_tts_manifest(path: Union[str, Path]) -> List[AudioSample]:
    """Read and parse a TTS manifest file.

    Args:
        path: Location of the manifest JSON

    Returns:
        Parsed AudioSample list

    Raises:
        ManifestError: If the file is missing, unreadable, not JSON or not an array
    """
    manifest_path = Path(path)
    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ManifestError("Manifest file not found", manifest_path)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Manifest is not valid JSON: {e}", manifest_path)
    except OSError as e:
        raise ManifestError(f"Failed to read manifest: {e}", manifest_path)

    try:
        samples = parse_manifest(data)
    except ManifestError as e:
        raise ManifestError(e.message, manifest_path)

    logger.info(
        "TTS manifest loaded",
        extra={
            "event": "assets.manifest.loaded",
            "path": str(manifest_path),
            "sample_count": len(samples),
        },
    )
    return samples
