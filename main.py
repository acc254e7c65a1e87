# msgtree-decode
# Archived Message Reconstruction
# main.py
# 10/19/26

"""
Archived Message Reconstruction

Reads an .arch file (code tree description + encoded message), prints the
character codes, the decoded message and its compression statistics.

How to run:
  python main.py message.arch
  python main.py message.arch --strict
  python main.py message.arch --csv codes.csv --plot-dir charts
  python main.py                      (asks for the filename)
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from archive import read_archive
from decoder import decode
from errors import MsgTreeError
from msgtree import build_tree, generate_codes
from report import (
    format_code_table,
    format_statistics,
    plot_code_lengths,
    plot_tree,
    write_codes_csv,
)


def prompt_filename() -> str:
    print("Please enter the filename to decode:")
    return input().strip()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Decode a message archived with a binary code tree")
    ap.add_argument("archive", nargs="?", help="Archive file (.arch); prompted for when omitted")
    ap.add_argument("--strict", action="store_true",
                    help="Reject extra tree tokens and messages that stop mid-code")
    ap.add_argument("--csv", type=str, default=None, help="Write the code table to this CSV file")
    ap.add_argument("--plot-dir", type=str, default=None,
                    help="Directory for code_lengths.png and tree.png")
    return ap


def run(archive_path: str, strict: bool = False, csv_path: Optional[str] = None,
        plot_dir: Optional[str] = None) -> None:
    sections = read_archive(archive_path)

    root = build_tree(sections.tree_description, strict=strict)

    print()
    print(format_code_table(generate_codes(root)))

    result = decode(root, sections.encoded_bits, strict=strict)

    print("\nMESSAGE:")
    print(result.text)
    if result.dangling_bits:
        print(f"Warning: last {result.dangling_bits} bit(s) do not complete a code and were ignored",
              file=sys.stderr)

    print()
    print(format_statistics(result))

    if csv_path:
        rows = write_codes_csv(Path(csv_path), generate_codes(root))
        print(f"\nWrote {rows} codes to {csv_path}")

    if plot_dir:
        outdir = Path(plot_dir)
        outdir.mkdir(parents=True, exist_ok=True)
        plot_code_lengths(list(generate_codes(root)), result, outdir / "code_lengths.png")
        if not plot_tree(root, outdir / "tree.png"):
            print("Tree too large to draw, skipped tree.png", file=sys.stderr)
        print("Charts saved in:", outdir.resolve())


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        archive_path = args.archive or prompt_filename()
        run(archive_path, strict=args.strict, csv_path=args.csv, plot_dir=args.plot_dir)
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 1
    except MsgTreeError as e:
        print(f"Processing error: {e}", file=sys.stderr)
        return 1
    except EOFError:
        print("Processing error: no filename given", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
