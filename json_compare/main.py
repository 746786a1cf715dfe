#!/usr/bin/env python3
"""
JSON Compare Explorer

A CLI tool for comparing two JSON documents.

Usage:
    python -m json_compare.main diff <left> <right>            List structural differences
    python -m json_compare.main align <left> <right>           Show the aligned side-by-side view
    python -m json_compare.main locate <file> <path>           Show where a path's value sits in a file
    python -m json_compare.main search <left> <right> <query>  Find aligned rows containing text
    python -m json_compare.main paths <left> <right>           List difference paths only

Paths use '$' for the document root, '.name' for properties and '[n]' for
array indices, e.g. '$.meta.tags[0]'.
"""

import argparse
import json
import logging
import os
import sys

from json_compare.diff_engine import (
    DEFAULT_INDENT,
    MISSING,
    RowStatus,
    Side,
    align,
    classify_rows,
    compare_documents,
    format_path,
    locate,
    offset_to_line_col,
    pretty_print,
    read_document,
    search_alignment,
)

_LOG = logging.getLogger(__name__)

# Marker column for the aligned view
STATUS_MARKERS = {
    RowStatus.EQUAL: " ",
    RowStatus.CHANGED: "~",
    RowStatus.REMOVED: "-",
    RowStatus.ADDED: "+",
}


def truncate(text: str, max_len: int = 50) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."


def format_value(value, max_len: int = 60) -> str:
    """One-line preview of a difference value."""
    if value is MISSING:
        return "(absent)"
    return truncate(json.dumps(value, ensure_ascii=False), max_len)


def load_text(path: str) -> str:
    """Read a document, exiting with an error message when it cannot be read."""
    if not os.path.exists(path):
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    try:
        return read_document(path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {path}: {e}", file=sys.stderr)
        sys.exit(1)


# ============== Commands ==============

def cmd_diff(args):
    """List structural differences between two documents."""
    comparison = compare_documents(load_text(args.left), load_text(args.right))

    if comparison.error:
        print(f"Error: {comparison.error}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps([record.to_dict() for record in comparison.diffs], indent=2, ensure_ascii=False))
        return

    if not comparison.diffs:
        print("Documents are identical")
        return

    header = f"{'KIND':<8} {'PATH':<40} {'LEFT':<30} {'RIGHT'}"
    print("-" * len(header))
    print(header)
    print("-" * len(header))
    for record in comparison.diffs:
        print(f"{record.kind.value:<8} {truncate(record.path, 40):<40} "
              f"{format_value(record.left_value, 30):<30} {format_value(record.right_value, 30)}")
    print("-" * len(header))
    print(f"Found {len(comparison.diffs)} differences")


def cmd_align(args):
    """Print the aligned side-by-side view of two documents."""
    left_text = pretty_print(load_text(args.left), args.indent)
    right_text = pretty_print(load_text(args.right), args.indent)
    result = align(left_text, right_text)
    width = args.width

    for row, ((left, right), status) in enumerate(zip(result.rows(), classify_rows(result))):
        left_cell = truncate(left if left is not None else "", width)
        right_cell = truncate(right if right is not None else "", width)
        print(f"{row + 1:>5} {STATUS_MARKERS[status]} {left_cell:<{width}} | {right_cell}")


def cmd_locate(args):
    """Show the range of a path's value inside a document."""
    text = load_text(args.file)

    expected = MISSING
    if args.value is not None:
        try:
            expected = json.loads(args.value)
        except ValueError:
            print(f"Error: --value is not valid JSON: {args.value}", file=sys.stderr)
            sys.exit(1)

    position = locate(text, args.path, expected)
    if position is None:
        print(f"Path '{args.path}' not found")
        sys.exit(1)

    line, column = offset_to_line_col(text, position.start)
    print(f"{position.start} {position.end} (line {line + 1}, column {column + 1})")
    print(position.slice(text))


def cmd_search(args):
    """Find aligned rows containing a query."""
    left_text = pretty_print(load_text(args.left), args.indent)
    right_text = pretty_print(load_text(args.right), args.indent)
    result = align(left_text, right_text)

    hits = search_alignment(result, args.query)
    for hit in hits:
        sides = ",".join(side.value for side in hit.sides)
        line = result.left_lines[hit.row] if hit.sides[0] == Side.LEFT else result.right_lines[hit.row]
        print(f"[{hit.row + 1}] {sides:<10} {truncate(line.strip(), 60)}")

    print("-" * 60)
    print(f"Found {len(hits)} matching rows")


def cmd_paths(args):
    """List differences as human-readable paths only."""
    comparison = compare_documents(load_text(args.left), load_text(args.right))
    if comparison.error:
        print(f"Error: {comparison.error}", file=sys.stderr)
        sys.exit(1)
    for record in comparison.diffs:
        print(format_path(record.path) or "(root)")


def main():
    parser = argparse.ArgumentParser(
        description="JSON Compare Explorer - structural diff, aligned view and locator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Diff command
    diff_parser = subparsers.add_parser('diff', help='List structural differences')
    diff_parser.add_argument('left', help='Left (old) JSON file')
    diff_parser.add_argument('right', help='Right (new) JSON file')
    diff_parser.add_argument('--json', action='store_true', help='Output differences as JSON')
    diff_parser.set_defaults(func=cmd_diff)

    # Paths command
    paths_parser = subparsers.add_parser('paths', help='List difference paths only')
    paths_parser.add_argument('left', help='Left (old) JSON file')
    paths_parser.add_argument('right', help='Right (new) JSON file')
    paths_parser.set_defaults(func=cmd_paths)

    # Align command
    align_parser = subparsers.add_parser('align', help='Show aligned side-by-side view')
    align_parser.add_argument('left', help='Left (old) JSON file')
    align_parser.add_argument('right', help='Right (new) JSON file')
    align_parser.add_argument('-w', '--width', type=int, default=50, help='Column width (default: 50)')
    align_parser.add_argument('--indent', type=int, default=DEFAULT_INDENT, help='Pretty-print indent (default: 2)')
    align_parser.set_defaults(func=cmd_align)

    # Locate command
    locate_parser = subparsers.add_parser('locate', help='Show where a path is in a file')
    locate_parser.add_argument('file', help='JSON file')
    locate_parser.add_argument('path', help="Path such as '$.meta.tags[0]'")
    locate_parser.add_argument('--value', help='Expected value as JSON; stale values are not found')
    locate_parser.set_defaults(func=cmd_locate)

    # Search command
    search_parser = subparsers.add_parser('search', help='Find aligned rows containing text')
    search_parser.add_argument('left', help='Left (old) JSON file')
    search_parser.add_argument('right', help='Right (new) JSON file')
    search_parser.add_argument('query', help='Search query (case-insensitive)')
    search_parser.add_argument('--indent', type=int, default=DEFAULT_INDENT, help='Pretty-print indent (default: 2)')
    search_parser.set_defaults(func=cmd_search)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    _LOG.debug("running %s", args.command)
    args.func(args)


if __name__ == "__main__":
    main()
