#!/usr/bin/env python3
"""
PostFormatter CLI

Command-line interface for converting post drafts between formats.

Usage:
    postformatter draft.html --to unicode
    postformatter draft.md --from markdown --to html
    postformatter draft.md --from markdown --count     # plain-text length
    cat draft.html | postformatter --to markdown       # read stdin
    postformatter a.html b.html --to unicode -o ./out  # save next to each other

Options:
    --from FORMAT        Source format: html or markdown (default: html)
    --to FORMAT          Target format: html, markdown, plain, unicode
    -o, --output DIR     Output directory (default: ./postformatter_output)
    --stdout             Print to stdout instead of saving files
    --count              Print the plain-text length and limit status
    --formats            Show all supported formats
"""

import argparse
import logging
import os
import sys

from postformatter.core import PostFormatter
from postformatter.formats import LINKEDIN_MAX_LENGTH, FormatterConfig, SourceFormat, TargetFormat

OUTPUT_EXTENSIONS = {
    TargetFormat.HTML: ".html",
    TargetFormat.MARKDOWN: ".md",
    TargetFormat.PLAIN: ".txt",
    TargetFormat.UNICODE: ".txt",
}


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="postformatter",
        description=(
            "Social Post Formatter\n\n"
            "Converts post drafts between HTML and Markdown, counts their\n"
            "plain-text length, and exports Unicode-styled text for\n"
            "platforms without bold/italic markup."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  postformatter post.html --to unicode --stdout\n"
            "  postformatter post.md --from markdown --to html\n"
            "  postformatter post.md --from markdown --count\n"
            "  postformatter ./drafts/*.html --to markdown -o ./md_out\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Files to convert (reads stdin when omitted)",
    )
    parser.add_argument(
        "--from",
        dest="source_format",
        choices=[f.value for f in SourceFormat],
        default=SourceFormat.HTML.value,
        help="Format of the input (default: html)",
    )
    parser.add_argument(
        "--to",
        dest="target_format",
        choices=[f.value for f in TargetFormat],
        default=TargetFormat.UNICODE.value,
        help="Format to produce (default: unicode)",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./postformatter_output)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print output to stdout instead of saving to files",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="Print plain-text length against the limit instead of converting",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=LINKEDIN_MAX_LENGTH,
        help="Character limit used by --count (default: %(default)s)",
    )
    parser.add_argument(
        "--numbered",
        action="store_true",
        help="Number ordered-list items in unicode output instead of bulleting them",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show all supported formats and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log conversion details to stderr",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.formats:
        _show_formats()
        return 0

    try:
        config = FormatterConfig(max_length=args.max_length, number_ordered_lists=args.numbered)
    except ValueError as e:
        parser.error(str(e))

    engine = PostFormatter(config=config)
    source = SourceFormat(args.source_format)
    target = TargetFormat(args.target_format)

    if not args.sources:
        content = sys.stdin.read()
        if args.count:
            _print_count(engine, content, source, "<stdin>")
        else:
            print(engine.convert(content, source, target))
        return 0

    output_dir = args.output or os.path.join(os.getcwd(), "postformatter_output")
    save = not (args.stdout or args.count)
    if save:
        os.makedirs(output_dir, exist_ok=True)

    print("=" * 60)
    print("  POSTFORMATTER - Social Post Format Converter")
    print("=" * 60)
    print()

    success_count = 0
    error_count = 0

    for path in args.sources:
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()

            if args.count:
                _print_count(engine, content, source, path)
            else:
                result = engine.convert(content, source, target)
                if args.stdout:
                    print(result)
                    print("\n" + "=" * 60 + "\n")
                else:
                    out_path = os.path.join(output_dir, _output_name(path, target))
                    with open(out_path, "w", encoding="utf-8") as f:
                        f.write(result)
                    print(f"[SAVED] {out_path}")
            success_count += 1
        except (OSError, ValueError) as e:
            print(f"[ERROR] {path}: {e}", file=sys.stderr)
            error_count += 1

    print()
    print("-" * 60)
    print(f"  Done: {success_count} processed, {error_count} errors")
    if save:
        print(f"  Output: {output_dir}")
    print("-" * 60)

    return 1 if error_count else 0


def _print_count(engine: PostFormatter, content: str, source: SourceFormat, label: str) -> None:
    length = engine.plain_text_length(content, source)
    limit = engine.config.max_length
    status = "OK" if length <= limit else "OVER LIMIT"
    print(f"[{status}] {label}: {length} / {limit}")


def _output_name(path: str, target: TargetFormat) -> str:
    """Output filename from the source file, with the target's extension."""
    name, _ = os.path.splitext(os.path.basename(path))
    safe_name = "".join(c if c.isalnum() or c in "-_ " else "_" for c in name)
    return f"{safe_name}{OUTPUT_EXTENSIONS[target]}"


def _show_formats():
    """Display all supported formats."""
    formats = PostFormatter.supported_formats()
    print("\nSupported Formats:")
    print("-" * 40)
    for category, values in formats.items():
        print(f"\n  {category}:")
        for value in values:
            print(f"    {value}")
    print()


if __name__ == "__main__":
    sys.exit(main())
