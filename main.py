#!/usr/bin/env python3
"""
Boleto Decoder - Main Entry Point.

Command-line access to the decoder: each candidate (argument or line
of a file) is decoded and printed as one JSON object per line.

Usage:
    Command Line:
        python main.py "23794.48606 ..."
        python main.py --file codes.txt --strict
        python main.py --reference-date 2024-01-10 00191100000000100000000000000000000000000000

    Python:
        from main import run_decoding
        results = run_decoding(["0019..."])

Author: ML Engineering Team
Version: 1.0.0
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import ConfigurationManager
from src.decoder import BoletoDecoder
from src.postprocessor import DueDateResolver, LEGACY_EPOCH
from src.utils.exceptions import BoletoDecoderError
from src.utils.helpers import parse_iso_date
from src.utils.logger import setup_logger_from_config, get_logger


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Decode Brazilian boleto barcodes and codelines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Decode a typed codeline:
        python main.py "00190.00009 00000.000000 00000.000000 1 10000000010000"

    Decode every line of a file, failing on bad check digits:
        python main.py --file codes.txt --strict
        """
    )

    parser.add_argument(
        "codes",
        nargs="*",
        help="Barcodes or codelines (any non-digit characters are ignored)"
    )

    parser.add_argument(
        "--file", "-f",
        type=str,
        default=None,
        help="Read one candidate per line from this file"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat checksum mismatches as errors"
    )

    parser.add_argument(
        "--legacy",
        action="store_true",
        help="Resolve due dates as a raw day offset from 1997-10-07"
    )

    parser.add_argument(
        "--reference-date",
        type=str,
        default=None,
        help="Date (YYYY-MM-DD) used to pick the due-date epoch (default: today)"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors"
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Initialize configuration and logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    if args.config:
        ConfigurationManager.reset()
    config = ConfigurationManager(args.config)

    setup_logger_from_config()

    app_logger = logging.getLogger("boleto_decoder")
    if args.debug:
        app_logger.setLevel(logging.DEBUG)
        for handler in app_logger.handlers:
            handler.setLevel(logging.DEBUG)
    elif args.quiet:
        app_logger.setLevel(logging.ERROR)

    return config


def collect_candidates(args: argparse.Namespace) -> List[str]:
    """
    Gather candidates from arguments and --file.

    Raises:
        FileNotFoundError: If --file doesn't exist.
    """
    candidates = list(args.codes)

    if args.file:
        path = Path(args.file)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")
        with open(path, 'r', encoding='utf-8') as f:
            candidates.extend(line.rstrip('\n') for line in f if line.strip())

    return candidates


def run_decoding(
    candidates: List[str],
    strict: bool = False,
    legacy: bool = False,
    reference_date: Optional[str] = None
) -> List[Dict[str, Any]]:
    """
    Decode a batch of candidates.

    Args:
        candidates: Raw candidate strings.
        strict: Treat checksum mismatches as errors.
        legacy: Use the raw-offset due-date epoch.
        reference_date: ISO date used to pick the due-date epoch.

    Returns:
        One dictionary per candidate: the DecodeResult fields plus
        `input`, or `input` and `error` for rejected candidates.
    """
    logger = get_logger(__name__)

    resolver = DueDateResolver(
        [LEGACY_EPOCH] if legacy else None,
        reference_date=parse_iso_date(reference_date) if reference_date else None
    )
    decoder = BoletoDecoder(due_date_resolver=resolver, strict=strict)

    outputs = []
    for raw in candidates:
        try:
            result = decoder.decode(raw)
            entry = {'input': raw, **result.to_dict()}
        except BoletoDecoderError as e:
            logger.error(f"Could not decode {raw!r}: {e.message}")
            entry = {
                'input': raw,
                'error': type(e).__name__,
                'message': e.message,
                'details': e.details,
            }
        outputs.append(entry)

    return outputs


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - entry point for command-line execution.

    Returns:
        Exit code: 0 when every candidate decoded with valid check
        digits, 1 otherwise.
    """
    try:
        args = parse_arguments(argv)
        initialize_system(args)
        logger = get_logger(__name__)

        candidates = collect_candidates(args)
        if not candidates:
            logger.error("No candidates to decode")
            return 1

        outputs = run_decoding(
            candidates,
            strict=args.strict,
            legacy=args.legacy,
            reference_date=args.reference_date
        )

        for entry in outputs:
            print(json.dumps(entry, ensure_ascii=False))

        ok = all(entry.get('checksum_valid') for entry in outputs)
        logger.info(f"Decoded {len(outputs)} candidate(s), all valid: {ok}")
        return 0 if ok else 1

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except BoletoDecoderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
