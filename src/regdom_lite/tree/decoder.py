"""Decoder for the compact nested-label rule encoding.

The public suffix list is compiled ahead of time into one string in
which every node is written as its label, optionally followed by a
parenthesised child block that starts with the child count:

    root(3:com,uk(3:co,*,parliament(1:!)),ck(2:*,www(1:!)))

Grammar:

    Node          := ExceptionMark? LabelChars ChildBlock?
    ExceptionMark := '!'
    LabelChars    := any run of characters except ',', '(', ')'
    ChildBlock    := '(' Count ':' Node (',' Node){Count-1} ')'

decode_node() is a recursive-descent parser. It takes the position to
start reading at and returns the decoded node together with the
position just past it, so each caller continues from where its child
stopped:

    - a leaf returns the position of the delimiter that ended it
      (',' or ')'), which the parent then checks and steps over;
    - a node with children returns the position one past its ')'.

The encoding is a build artifact, not user input, but every delimiter
and child count is still checked. A mismatch raises MalformedEncoding
instead of producing a partial tree.
"""
from __future__ import annotations

import logging

from regdom_lite.tree.node import EXCEPTION_MARK, SuffixNode

log = logging.getLogger(__name__)

_LABEL_END = ",()"


class MalformedEncoding(ValueError):
    """Raised when the rule encoding does not follow the grammar."""

    def __init__(self, message: str, position: int) -> None:
        self.position = position
        super().__init__(f"{message} (at position {position})")


def _expect(text: str, pos: int, char: str, what: str) -> None:
    if pos >= len(text):
        raise MalformedEncoding(f"expected {char!r} {what}, got end of input", pos)
    if text[pos] != char:
        raise MalformedEncoding(
            f"expected {char!r} {what}, got {text[pos]!r}", pos
        )


def _read_label(text: str, start: int, end: int) -> tuple[str, bool]:
    """Split a raw label run into (label, is_exception).

    The marker is only honoured as the first character of the run.
    """
    run = text[start:end]
    is_exception = run.startswith(EXCEPTION_MARK)
    if is_exception:
        run = run[1:]
    stray = run.find(EXCEPTION_MARK)
    if stray != -1:
        raise MalformedEncoding(
            "exception marker must be the first character of a label",
            start + stray + (1 if is_exception else 0),
        )
    return run, is_exception


def _read_count(text: str, open_pos: int) -> tuple[int, int]:
    """Read "<digits>:" after '(' and return (count, position of ':')."""
    colon = text.find(":", open_pos + 1)
    if colon == -1:
        raise MalformedEncoding("child count is not terminated by ':'", open_pos)
    digits = text[open_pos + 1:colon]
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedEncoding(f"invalid child count {digits!r}", open_pos + 1)
    count = int(digits)
    if count == 0:
        raise MalformedEncoding("child block declares zero children", open_pos + 1)
    return count, colon


def decode_node(text: str, pos: int = 0) -> tuple[SuffixNode, int]:
    """Decode the node starting at `pos`.

    Returns (node, next_pos) where next_pos is the position of the
    delimiter that ended a leaf, or one past the ')' that closed the
    node's child block. At the top level a leaf may also end at the
    end of the text.

    Raises MalformedEncoding on any delimiter or count mismatch.
    """
    length = len(text)
    start = pos
    while pos < length and text[pos] not in _LABEL_END:
        pos += 1
    label, is_exception = _read_label(text, start, pos)

    if pos == length or text[pos] != "(":
        return SuffixNode(label, is_exception), pos

    count, pos = _read_count(text, pos)
    children: list[SuffixNode] = []
    for i in range(count):
        if i == 0:
            _expect(text, pos, ":", f"before first child of {label!r}")
        else:
            _expect(text, pos, ",", f"between children of {label!r}")
        child, pos = decode_node(text, pos + 1)
        children.append(child)
    _expect(text, pos, ")", f"after {count} children of {label!r}")

    return SuffixNode(label, is_exception, tuple(children)), pos + 1


def decode_tree(text: str) -> SuffixNode:
    """Decode a complete encoding into its root node.

    The root must account for the whole string; trailing characters
    mean the child counts and the actual children disagree.
    """
    try:
        if not text:
            raise MalformedEncoding("empty rule encoding", 0)
        root, end = decode_node(text, 0)
        if end != len(text):
            raise MalformedEncoding("unexpected text after root node", end)
    except MalformedEncoding as exc:
        log.error("Rejecting rule encoding of %d chars: %s", len(text), exc)
        raise
    return root
