"""Command-line interface for the digit decoder."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import Config
from .errors import InvalidInputError
from .pipeline import DecodingPipeline
from .segmenter import Segmenter

COMMANDS = ("decode", "batch")
PROMPT = "Enter the digit sequence you wish to decode: "


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="digit-decoder",
        description="Decode a digit sequence into every possible message (1=a ... 26=z)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Decode one sequence
  digit-decoder 1234

  # Treat "0" and "00" as groups that translate to nothing
  digit-decoder decode 1020 --zero-policy empty

  # Only count the messages
  digit-decoder decode 111111111111 --count

  # Decode a file of sequences into CSV
  digit-decoder batch --input data/digits.txt --output data/decoded --workers 4
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    decode_parser = subparsers.add_parser("decode", help="Decode one digit sequence")
    setup_decode_parser(decode_parser)

    batch_parser = subparsers.add_parser("batch", help="Decode a file of digit sequences")
    setup_batch_parser(batch_parser)

    argv = list(sys.argv[1:] if argv is None else argv)
    # If no command specified, treat as decode command
    if not argv or argv[0] not in COMMANDS + ("-h", "--help"):
        argv = ["decode"] + argv

    return parser.parse_args(argv)


def add_decoder_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by the decode and batch commands."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--engine",
        choices=["recursive", "table"],
        help="Partition engine (default: recursive)",
    )
    parser.add_argument(
        "--zero-policy",
        choices=["strict", "empty"],
        help='How to treat groups equal to 0 (default: strict, which rejects them)',
    )
    parser.add_argument(
        "--max-length",
        type=int,
        help="Reject sequences longer than this",
    )
    parser.add_argument(
        "--max-messages",
        type=int,
        help="Stop after this many messages per sequence",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_decode_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for decode command."""
    parser.add_argument(
        "digits",
        nargs="?",
        help="Digit sequence to decode (prompted for when omitted)",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="Print only the number of messages",
    )
    parser.add_argument(
        "--show-groups",
        action="store_true",
        help="Print the digit grouping next to each message",
    )
    add_decoder_arguments(parser)


def setup_batch_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for batch command."""
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to input file (.txt with one sequence per line, or .jsonl)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory for CSV files",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of parallel workers (default: 1)",
    )
    parser.add_argument(
        "--single-lines",
        action="store_true",
        help="Also save one CSV file per input line",
    )
    parser.add_argument(
        "--no-full-files",
        action="store_true",
        help="Skip saving combined file with all messages",
    )
    parser.add_argument(
        "--no-groupings",
        action="store_true",
        help="Omit the Grouping column",
    )
    add_decoder_arguments(parser)


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    # Start with config file if provided
    if args.config:
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    # Decoder config overrides
    if args.engine:
        config.decoder.engine = args.engine
    if args.zero_policy:
        config.decoder.zero_policy = args.zero_policy
    if args.max_length is not None:
        config.decoder.max_length = args.max_length
    if args.max_messages is not None:
        config.decoder.max_messages = args.max_messages

    # Batch-only overrides
    if getattr(args, "input", None):
        config.input_file = args.input
    if getattr(args, "output", None):
        config.output.output_dir = args.output
    if getattr(args, "workers", None) is not None:
        config.decoder.workers = args.workers
    if getattr(args, "single_lines", False):
        config.output.save_single_lines = True
    if getattr(args, "no_full_files", False):
        config.output.save_full_files = False
    if getattr(args, "no_groupings", False):
        config.output.include_groupings = False

    # Re-validate after overrides
    return Config.model_validate(config.model_dump())


def handle_decode(args: argparse.Namespace) -> int:
    """Handle decode command."""
    try:
        config = build_config(args)
    except FileNotFoundError as e:
        print(f"Error: Config file not found - {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    digits = args.digits
    if digits is None:
        # stdout carries only messages
        print(PROMPT, file=sys.stderr)
        digits = sys.stdin.readline().strip()

    segmenter = Segmenter(config.decoder)
    try:
        if args.count:
            print(segmenter.count(digits))
            return 0
        result = segmenter.decode(digits)
    except InvalidInputError as e:
        print(f"Invalid Input! {e}", file=sys.stderr)
        return 1

    for message in result.messages:
        if args.show_groups:
            print(f"{message.text}\t{message.grouping}")
        else:
            print(message.text)
    if result.truncated:
        logging.info("Output truncated to %d messages", len(result.messages))
    return 0


def handle_batch(args: argparse.Namespace) -> int:
    """Handle batch command."""
    try:
        config = build_config(args)
    except FileNotFoundError as e:
        print(f"Error: Config file not found - {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.input_file:
        print("Error: Input file is required (use --input or --config)", file=sys.stderr)
        return 1

    try:
        pipeline = DecodingPipeline(config)
        line_count = pipeline.run()
        print(f"\nProcessed {line_count} lines")
        return 0
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "batch":
        return handle_batch(args)
    return handle_decode(args)


if __name__ == "__main__":
    sys.exit(main())
