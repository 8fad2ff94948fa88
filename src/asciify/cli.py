from __future__ import annotations

import argparse
from pathlib import Path
import sys

from loguru import logger
from pydantic import ValidationError
import yaml

from .batch import run_batch
from .config import AsciifyConfig
from .errors import AsciifyError

DEFAULT_CONFIG = Path("asciify_config.yaml")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciify", description="Render images as ASCII art images.")
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG,
        help="YAML configuration listing the font and conversion jobs.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--print",
        dest="echo",
        action="store_true",
        help="Also print each generated text to stdout.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    try:
        config = AsciifyConfig.from_yaml(args.config)
        texts = run_batch(config)
    except FileNotFoundError as ex:
        logger.error("MAIN: File not found: {}", ex.filename or ex)
        return 1
    except (ValidationError, yaml.YAMLError) as ex:
        logger.error("MAIN: Invalid configuration '{}': {}", args.config, ex)
        return 1
    except AsciifyError as ex:
        logger.error("MAIN: Conversion failed: {}", ex)
        return 1
    except Exception as ex:
        logger.exception("MAIN: An unexpected error occurred: {}", ex)
        return 1

    if args.echo:
        for text in texts:
            sys.stdout.write(text)

    logger.info("MAIN: Converted {} image(s).", len(texts))
    return 0


if __name__ == "__main__":
    sys.exit(main())
