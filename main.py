import argparse
import logging
import sys
from typing import List, Optional

from core.config import load_settings
from core.logger import setup_logging
from core.payload_registry import PayloadRegistry
from protocols.exceptions import A2ADecodeError, A2ARpcError, A2AValidationError
from utils.json_utils import parse_json_payload

logger = logging.getLogger(f"a2aProtocol.{__name__}")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Decode and validate an A2A protocol payload stored in a JSON file."
    )
    parser.add_argument(
        "type_key",
        help=f"Payload type, one of: {', '.join(PayloadRegistry.available_types())}"
    )
    parser.add_argument(
        "path",
        help="Path to the JSON file to check"
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Only decode; skip semantic validation even when strict validation is enabled"
    )
    return parser


def check_payload(type_key: str, path: str, strict: bool = True) -> int:
    """Decode the payload in `path` and, if strict, validate it. Returns the exit code."""
    if type_key not in PayloadRegistry.available_types():
        logger.error(f"Unknown payload type '{type_key}'. Available types: {PayloadRegistry.available_types()}")
        return EXIT_USAGE

    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        logger.error(f"Could not read {path}: {e}")
        return EXIT_USAGE

    try:
        payload = PayloadRegistry.decode(type_key, parse_json_payload(raw))
    except A2ARpcError as e:
        logger.error(f"{path}: {e}")
        return EXIT_INVALID
    except A2ADecodeError as e:
        logger.error(f"{path} is not a valid {type_key} payload: {e}")
        return EXIT_INVALID

    if strict and hasattr(payload, "validate"):
        try:
            payload.validate()
        except A2AValidationError as e:
            logger.error(f"{path} failed validation: {e}")
            return EXIT_INVALID

    logger.info(f"{path}: valid {type_key} payload ({type(payload).__name__})")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as e:
        # logging is not configured yet
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE
    setup_logging(settings)
    return check_payload(args.type_key, args.path, strict=settings.strict_validation and not args.no_validate)


if __name__ == "__main__":
    sys.exit(main())
