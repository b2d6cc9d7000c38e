"""Media assets: phrase avatar/video lookups and the TTS audio manifest."""

from .catalog import DEFAULT_PHRASES, AssetCatalog
from .manifest import ManifestError, load_tts_manifest, parse_manifest
from .models import AudioSample, VideoSegment

__all__ = [
    "AssetCatalog",
    "AudioSample",
    "VideoSegment",
    "DEFAULT_PHRASES",
    "ManifestError",
    "load_tts_manifest",
    "parse_manifest",
]
