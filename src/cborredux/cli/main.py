"""Main CLI entry point for cborredux."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .. import __version__
from ..codec.config import EncoderConfig
from ..codec.encoder import Encoder
from ..exceptions import CborReduxError


def _load_json(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the cborredux CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="cborredux",
        description="cborredux: CBOR Encoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cborredux --encode doc.json                 Print CBOR of a JSON document as hex
  cborredux --encode doc.json --output d.cbor Write raw CBOR bytes to a file
  echo '[1, 2, 3]' | cborredux --encode -     Read JSON from stdin
  cborredux --version                         Show version
        """,
    )

    parser.add_argument(
        "--encode",
        metavar="FILE",
        type=str,
        help="Encode a JSON document ('-' for stdin)",
    )
    parser.add_argument(
        "--output",
        metavar="FILE",
        type=str,
        help="Write raw CBOR bytes to FILE instead of printing hex",
    )
    parser.add_argument(
        "--max-depth",
        metavar="N",
        type=int,
        default=EncoderConfig.max_depth,
        help="Maximum container nesting depth (default: %(default)s)",
    )
    parser.add_argument(
        "--chunk-size",
        metavar="N",
        type=int,
        default=EncoderConfig.chunk_size,
        help="Indefinite-length string threshold in bytes (default: %(default)s)",
    )
    parser.add_argument(
        "--nan-as-undefined",
        action="store_true",
        help="Encode NaN as the CBOR undefined value",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cborredux {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # If no command specified, show help
    if not args.encode:
        parser.print_help()
        return 0

    if args.encode != "-" and not Path(args.encode).exists():
        print(f"Error: File not found: {args.encode}", file=sys.stderr)
        return 1

    try:
        config = EncoderConfig(
            max_depth=args.max_depth,
            chunk_size=args.chunk_size,
            nan_as_undefined=args.nan_as_undefined,
        )
        document = _load_json(args.encode)
        data = Encoder(config=config).encode(document)
    except (OSError, ValueError, CborReduxError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"Error encoding {args.encode}: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            Path(args.output).write_bytes(data)
        except OSError as e:
            print(f"Error writing {args.output}: {e}", file=sys.stderr)
            return 1
        print(f"Wrote {len(data)} bytes to {args.output}")
    else:
        print(data.hex())
    return 0


if __name__ == "__main__":
    sys.exit(main())
