#!/usr/bin/env python3
"""
Ink Invoice Parser - Main Entry Point.

This is the command-line entry point for the invoice parser. It reads
one supplier invoice, runs the vendor grammar and prints or saves the
parsed stock lines.

Usage:
    Command Line:
        python main.py --input invoice.pdf --vendor eternal
        python main.py --input invoice.pdf --vendor worldFamous --output items.xlsx
        python main.py --input invoice.pdf --vendor solidInk --dump-lines

    Python:
        from main import run_parse
        result = run_parse("invoice.pdf", "eternal")

Author: ML Engineering Team
Version: 1.0.0
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ink_invoice.config import ConfigurationManager
from ink_invoice.orchestrator import ParseOrchestrator
from ink_invoice.output_handler import OutputHandler
from ink_invoice.text_extraction import Line, PdfPlumberExtractor
from ink_invoice.utils.exceptions import InvoiceParsingError
from ink_invoice.utils.logger import ROOT_LOGGER_NAME, get_logger, setup_logger_from_config
from ink_invoice.vendors import ParseResult, Vendor


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Ink supplier invoice parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Print items as JSON:
        python main.py --input invoice.pdf --vendor eternal

    Save to Excel:
        python main.py --input invoice.pdf --vendor worldFamous --output items.xlsx

    Inspect reconstructed lines:
        python main.py --input invoice.pdf --vendor solidInk --dump-lines
        """
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="Invoice PDF to parse"
    )

    parser.add_argument(
        "--vendor", "-v",
        type=str,
        required=True,
        help=f"Invoice vendor ({', '.join(v.value for v in Vendor)})"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file (.json or .xlsx). Prints JSON to stdout when omitted"
    )

    parser.add_argument(
        "--dump-lines",
        action="store_true",
        help="Print the reconstructed lines instead of parsing items"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    # Logging options
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
    config = ConfigurationManager(args.config)

    logger = setup_logger_from_config()

    if args.debug:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = None
    if level is not None:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            handler.setLevel(level)

    logger.info("=" * 60)
    logger.info("INK INVOICE PARSER")
    logger.info("=" * 60)
    logger.info(f"Version: {config.get('project.version', '1.0.0')}")
    logger.info(f"Input: {args.input}")
    logger.info(f"Vendor: {args.vendor}")

    return config


def read_input(path: str) -> bytes:
    """
    Read the invoice bytes.

    Raises:
        FileNotFoundError: If the input file doesn't exist.
    """
    input_path = Path(path)
    if not input_path.is_file():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    return input_path.read_bytes()


def run_parse(input_path: str, vendor: str) -> ParseResult:
    """
    Parse one invoice file.

    Args:
        input_path: Path to the invoice PDF.
        vendor: Vendor selector.

    Returns:
        ParseResult with at least one item.

    Example:
        >>> result = run_parse("invoice.pdf", "eternal")
        >>> print(result.total_quantity)
    """
    data = read_input(input_path)
    orchestrator = ParseOrchestrator(PdfPlumberExtractor(source_name=input_path))
    return asyncio.run(orchestrator.parse(data, vendor))


def dump_lines(input_path: str, vendor: str) -> List[Line]:
    """Return the reconstructed lines of an invoice file."""
    data = read_input(input_path)
    orchestrator = ParseOrchestrator(PdfPlumberExtractor(source_name=input_path))
    return asyncio.run(orchestrator.reconstruct_lines(data, vendor))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - entry point for command-line execution.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        args = parse_arguments(argv)

        config = initialize_system(args)
        logger = get_logger(__name__)

        if args.dump_lines:
            for line in dump_lines(args.input, args.vendor):
                print(line)
            return 0

        result = run_parse(args.input, args.vendor)

        if args.output:
            output_path = OutputHandler().save(result, args.output)
            logger.info(f"Output: {output_path}")
        else:
            print(result.to_json(indent=config.get("output.json.indent", 2)))

        logger.info("=" * 60)
        logger.info(
            f"Parsing complete. {len(result)} items, "
            f"total quantity {result.total_quantity}"
        )
        logger.info("=" * 60)

        return 0

    except InvoiceParsingError as e:
        print(f"Error [{e.kind.value}]: {e}", file=sys.stderr)
        return 1

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130

    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if "--debug" in sys.argv:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
