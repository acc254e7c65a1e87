# report.py

"""
Presentation of a decoded archive: the text tables printed by the command
line, plus optional CSV and chart outputs

Charts follow the usual pattern: plt.figure() -> draw -> savefig -> close
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

import matplotlib
matplotlib.use("Agg") # files only, never open a window
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Circle

from decoder import DecodeResult
from msgtree import MsgNode, count_leaves, tree_depth

CodeEntry = Tuple[str, str]

# characters that would be invisible or break the table when printed raw
_DISPLAY_NAMES = {
    ' ': "' '",
    '\n': "\\n",
    '\t': "\\t",
    '\r': "\\r",
}

MAX_PLOT_LEAVES = 200 # past this the tree drawing is unreadable


def display_char(ch: str) -> str:
    return _DISPLAY_NAMES.get(ch, ch)


def format_code_table(codes: Iterable[CodeEntry]) -> str:
    lines = ["character code", "-------------------------"]
    for ch, path in codes:
        lines.append(f"{display_char(ch)}\t{path}")
    return "\n".join(lines)


def format_statistics(result: DecodeResult) -> str:
    return "\n".join([
        "STATISTICS:",
        f"Avg bits/char:       {result.avg_bits_per_char:.1f}",
        f"Total characters:    {result.total_characters}",
        f"Space savings:       {result.space_saving_pct:.1f}%",
    ])


def write_codes_csv(path: Path, codes: Iterable[CodeEntry]) -> int:
    """
    Write one row per leaf: character, code, length. Returns the row count
    """
    fields = ["character", "code", "length"]
    rows = 0
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for ch, code in codes:
            w.writerow({"character": ch, "code": code, "length": len(code)})
            rows += 1
    return rows


# Plotting

def plot_code_lengths(codes: List[CodeEntry], result: DecodeResult, out_path: Path) -> None:
    labels = [display_char(ch) for ch, _ in codes]
    lengths = [len(code) for _, code in codes]
    x = list(range(len(codes)))

    plt.figure()
    plt.bar(x, lengths)
    plt.axhline(result.avg_bits_per_char, color="red", linestyle="--",
                label=f"avg {result.avg_bits_per_char:.1f} bits/char")
    plt.xticks(x, labels, rotation=90 if len(labels) > 20 else 0)
    plt.xlabel("Character")
    plt.ylabel("Code Length (bits)")
    plt.title(f"Code Lengths ({result.space_saving_pct:.1f}% space savings)")
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def _layout(root: MsgNode) -> Dict[int, Tuple[float, int]]:
    """
    x/depth position for every node, keyed by id(node)

    Post-order so both children have positions before their parent is
    centred over them; leaves are spread left to right.
    """
    positions: Dict[int, Tuple[float, int]] = {}
    leaf_x = 0
    stack = [(root, 0, False)]
    while stack:
        node, depth, children_done = stack.pop()
        children = [c for c in (node.left, node.right) if c is not None]
        if not children:
            positions[id(node)] = (float(leaf_x), depth)
            leaf_x += 1
        elif children_done:
            xs = [positions[id(c)][0] for c in children]
            positions[id(node)] = (sum(xs) / len(xs), depth)
        else:
            stack.append((node, depth, True))
            for child in reversed(children):
                stack.append((child, depth + 1, False))
    return positions


def plot_tree(root: MsgNode, out_path: Path) -> bool:
    """
    Draw the code tree (left=0, right=1) with each leaf's character.
    Returns False without drawing when the tree is too big to read
    """
    leaves = count_leaves(root)
    if leaves > MAX_PLOT_LEAVES:
        return False

    positions = _layout(root)
    max_depth = tree_depth(root)
    fig, ax = plt.subplots(figsize=(min(40, max(6, leaves // 2)), min(40, max(4, max_depth))))

    stack = [root]
    while stack:
        node = stack.pop()
        x, y = positions[id(node)]
        for child, label in ((node.left, "0"), (node.right, "1")):
            if child is None:
                continue
            cx, cy = positions[id(child)]
            ax.add_line(Line2D([x, cx], [-y, -cy], color="darkblue"))
            ax.text((x + cx) / 2, (-y - cy) / 2 + 0.1, label, fontsize=8,
                    ha="center", va="bottom", color="darkblue")
            stack.append(child)

        ax.add_patch(Circle((x, -y), 0.12, facecolor="navy", edgecolor="black"))
        if node.is_leaf():
            ax.text(x, -y - 0.25, display_char(node.payload), fontsize=9, ha="center", va="top")

    xs = [pos[0] for pos in positions.values()]
    ax.set_xlim(min(xs) - 0.8, max(xs) + 0.8)
    ax.set_ylim(-max_depth - 0.8, 0.5)
    ax.set_title("Code Tree (left=0, right=1)")
    ax.set_aspect("equal")
    ax.axis("off")

    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close(fig)
    return True
