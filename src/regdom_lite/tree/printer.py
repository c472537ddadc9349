"""Indented text rendering of a suffix tree, for debugging.

    root:
      com
      uk:
        co
        *
        parliament:
          !

Nodes with children end in ':' and their children are indented two
more spaces. Exception nodes are shown with their '!' marker.
"""
from __future__ import annotations

import sys
from typing import TextIO

from regdom_lite.tree.node import EXCEPTION_MARK, SuffixNode


def _lines(node: SuffixNode, spacer: str, out: list[str]) -> None:
    name = EXCEPTION_MARK + node.label if node.is_exception else node.label
    if node.is_leaf:
        out.append(f"{spacer}{name}")
        return
    out.append(f"{spacer}{name}:")
    for child in node.children:
        _lines(child, spacer + "  ", out)


def format_tree(node: SuffixNode, spacer: str = "") -> str:
    out: list[str] = []
    _lines(node, spacer, out)
    return "\n".join(out)


def print_tree(
    node: SuffixNode, spacer: str = "", file: TextIO | None = None
) -> None:
    print(format_tree(node, spacer), file=file or sys.stdout)
