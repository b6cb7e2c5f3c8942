"""
Command-line interface for translating docker-compose files to Kubernetes
manifests.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from compose2kube.core.config import (
    DEFAULT_COMPOSE_FILE,
    DEFAULT_OUTPUT_DIR,
    TranslationConfig,
)
from compose2kube.core.exceptions import (
    ParseError,
    SerializationError,
    ServiceTranslationError,
    TranslationFailedError,
    ValidationError,
    WriteError,
)
from compose2kube.core.protocols import SourceParser
from compose2kube.plugins.compose.orchestrator import ComposeOrchestrator


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Logs go to stderr; stdout only carries the written manifest paths.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level logging from all modules if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )

    if not verbose and not debug:
        # Keep the CLI's own messages visible in quiet mode
        logging.getLogger(__name__).setLevel(logging.INFO)


def validate_inputs(config: TranslationConfig, parser: SourceParser) -> None:
    """Validate command line inputs.

    The compose file must be one the parser accepts.

    Raises:
        ValidationError: If inputs are invalid.
    """
    if not config.compose_file.exists():
        raise ValidationError(
            f"Compose file does not exist: {config.compose_file}",
            field_name="compose_file",
        )

    if not config.compose_file.is_file():
        raise ValidationError(
            f"Compose path is not a file: {config.compose_file}",
            field_name="compose_file",
        )

    if not parser.can_parse(config.compose_file):
        raise ValidationError(
            f"Unsupported compose file: {config.compose_file} "
            f"(expected one of {parser.get_supported_extensions()})",
            field_name="compose_file",
        )

    if config.output_dir.exists() and not config.output_dir.is_dir():
        raise ValidationError(
            f"Output path is not a directory: {config.output_dir}",
            field_name="output_dir",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compose2kube",
        description="Translate docker-compose services into Kubernetes manifests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Workload kinds (from the compose 'restart' setting):
  "" / always   ReplicationController (restartPolicy: Always)
  no / false    Pod                   (restartPolicy: Never)
  on-failure    Job                   (restartPolicy: OnFailure)

Examples:
  # Translate docker-compose.yml into ./output
  compose2kube

  # Alternate file and output directory, JSON output
  compose2kube -f stack.yml -o manifests --format json

  # Force image pulls and pin pods to labelled nodes
  compose2kube --image-pull-policy Always --node-selector "disk=ssd;zone=a"
        """,
    )

    parser.add_argument(
        "-f",
        "--compose-file",
        type=Path,
        default=DEFAULT_COMPOSE_FILE,
        metavar="FILE",
        help=f"Specify an alternate compose file (default: {DEFAULT_COMPOSE_FILE})",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        metavar="DIRECTORY",
        help=f"Kubernetes manifests output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--image-pull-policy",
        default=None,
        metavar="POLICY",
        help="Image pull policy for every container: IfNotPresent, Always or Never",
    )
    parser.add_argument(
        "--node-selector",
        default=None,
        metavar="SELECTOR",
        help="Node selector for every pod, as key=value;key2=value2",
    )
    parser.add_argument(
        "--format",
        choices=["yaml", "json"],
        default="yaml",
        dest="output_format",
        help="Manifest serialization format (default: yaml)",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Translate the remaining services when one fails (still exits nonzero)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def config_from_args(args: argparse.Namespace) -> TranslationConfig:
    return TranslationConfig(
        compose_file=args.compose_file,
        output_dir=args.output_dir,
        pull_policy=args.image_pull_policy,
        node_selector=args.node_selector,
        output_format=args.output_format,
        keep_going=args.keep_going,
    )


def run_translation(
    config: TranslationConfig, debug: bool = False, verbose: bool = False
) -> NoReturn:
    """Execute the translation and exit.

    Raises:
        SystemExit: Always exits with appropriate code (0 for success, >0 for errors).
    """
    configure_logging(debug, verbose)
    logger = logging.getLogger(__name__)

    try:
        orchestrator = ComposeOrchestrator()
        logger.debug(f"Orchestrator: {orchestrator.get_orchestrator_info()}")

        validate_inputs(config, orchestrator.get_parser())

        report = orchestrator.translate(config)

        logger.info(
            f"Generated {len(report.written)} manifest(s) in {config.output_dir}"
        )
        sys.exit(0)

    except ValidationError as e:
        logger.error(f"Input validation failed: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        sys.exit(1)
    except ParseError as e:
        logger.error(f"Failed to parse the compose project: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        sys.exit(2)
    except ServiceTranslationError as e:
        logger.error(f"Service translation error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        sys.exit(3)
    except SerializationError as e:
        logger.error(f"Serialization error: {e}")
        sys.exit(4)
    except WriteError as e:
        logger.error(f"Write error: {e}")
        sys.exit(5)
    except TranslationFailedError as e:
        logger.error(f"{e}")
        for error in e.errors:
            logger.error(f"  - {error}")
        sys.exit(6)
    except OSError as e:
        logger.error(f"File system error: {e}")
        sys.exit(8)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if debug:
            logger.exception("Full traceback:")
        sys.exit(9)


def main(argv: list[str] | None = None) -> NoReturn:
    args = parse_arguments(argv)
    run_translation(config_from_args(args), args.debug, args.verbose)


if __name__ == "__main__":
    main()
