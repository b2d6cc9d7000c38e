"""Command-line entry point: match utterances against the phrase catalog.

Utterances are taken from positional arguments, or read one per line from
stdin when none are given. Each line stands in for one finalized recognition
result.
"""

from dotenv import load_dotenv
load_dotenv()

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from signmatch.config.exceptions import ConfigurationError
from signmatch.config.loader import load_config
from signmatch.logging import get_logger
from signmatch.logging.config import configure_logging
from signmatch.session import MediaDecision, SessionController

logger = get_logger(__name__, component="cli")


def format_decision(decision: MediaDecision) -> str:
    """One output line per handled utterance."""
    result = decision.result
    line = f"[{decision.badge}] {result.raw_input.strip()!r} score={result.score:.3f}"

    if decision.matched:
        line += f" phrase={decision.phrase!r}"
        if decision.asset:
            line += f" asset={decision.asset}"
        if decision.video:
            line += f" video={decision.video.video_id}@{decision.video.start_seconds:g}"
    elif decision.fallback_audio:
        line += f" fallback_audio={decision.fallback_audio.audio}"

    return line


def _utterances(args_utterances: List[str], stream) -> Iterable[str]:
    if args_utterances:
        yield from args_utterances
        return
    for line in stream:
        line = line.rstrip("\n")
        if line.strip():
            yield line


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the matcher over a batch of utterances.

    Returns:
        Exit code (0 for success, 1 for configuration errors).
    """
    parser = argparse.ArgumentParser(
        description="Match finalized speech utterances to preset sign-language phrases"
    )
    parser.add_argument(
        "utterances",
        nargs="*",
        help="Utterances to match (default: read one per line from stdin)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml, else built-in catalog)",
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        default=None,
        help="TTS manifest used for no-match audio fallback",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )

    args = parser.parse_args(argv)

    try:
        app_config, env_config = load_config(args.config)
    except ConfigurationError as e:
        print(f"Configuration error:\n{e}", file=sys.stderr)
        return 1

    # Log level priority: CLI > environment > config file
    log_level = args.log_level or env_config.log_level or app_config.logging.level
    configure_logging(
        level=log_level,
        format_type=app_config.logging.format,
        environment=env_config.environment,
    )

    controller = SessionController.from_config(
        app_config, env_config, manifest_path=args.manifest
    )
    logger.info(
        "Phrase matcher ready",
        extra={
            "event": "service.ready",
            "phrase_count": len(controller.assets),
            "audio_sample_count": len(controller.audio_samples),
            "threshold": controller.engine.threshold,
        },
    )

    controller.start()
    for utterance in _utterances(args.utterances, sys.stdin):
        print(format_decision(controller.handle_finalized(utterance)))
    controller.pause()

    print("History (newest first):")
    for line in controller.history_lines():
        print(f"  {line}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
