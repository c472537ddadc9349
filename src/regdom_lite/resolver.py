"""Registered-domain lookup against a decoded suffix tree.

The registered domain is always a suffix of the host name, so the
resolver starts at the last label and walks left, descending one tree
level per label:

    www.example.co.uk
                   ^^ root -> "uk"     found, keep going
                ^^    "uk" -> "co"     found, keep going
        ^^^^^^^       "co" -> ?        no child: stop here

    registered domain = "example.co.uk"

The walk stops when the current label has no matching child, or when
the matched child is an exception boundary (its only child carries
the '!' marker), so the public suffix ends one level higher than the
wildcard above it would imply. The label under the cursor at that
point is the first label of the answer.

Everything works on offsets into the original string. Only the result
is sliced out, once.

Usage:
    root = decode_tree(encoded)
    resolve("www.example.com", root)                  # "example.com"
    resolve("something.xx", root, drop_unknown=True)  # None
"""
from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from regdom_lite.tree.node import WILDCARD, Label, SuffixNode

if TYPE_CHECKING:
    from regdom_lite.tree.handle import SuffixTree

Hostname: TypeAlias = str


def find_child(node: SuffixNode, label: Label) -> SuffixNode | None:
    """Exact child for `label`, else the node's wildcard child, else None."""
    return node.child(label)


def find_child_scan(node: SuffixNode, label: Label) -> SuffixNode | None:
    """Linear two-phase child search.

    Same answer as find_child() without the label index: an exact
    match returns immediately, otherwise the first "*" child seen
    during the scan is the fallback. This is the reference scan the
    label index is checked against.
    """
    wildcard = None
    for child in node.children:
        if child.label == label:
            return child
        if wildcard is None and child.label == WILDCARD:
            wildcard = child
    return wildcard


def _label_start(hostname: Hostname, seg_end: int) -> int:
    """Offset of the first character of the label ending at seg_end."""
    return hostname.rfind(".", 0, seg_end) + 1


def resolve(
    hostname: Hostname, root: SuffixNode, drop_unknown: bool = False
) -> Hostname | None:
    """Return the registered domain of `hostname`, or None.

    None means one of:
        - the name is empty or starts with '.';
        - every label is part of a public suffix ("com", "co.uk");
        - the name has a single label left after matching and cannot
          be widened (it is already the whole name, or drop_unknown
          was requested).

    One trailing '.' is ignored and never part of the result.
    With drop_unknown=False a name whose top-level label is unknown
    still yields its last two labels ("something.xx").
    """
    if not hostname or hostname[0] == ".":
        return None

    end = len(hostname)
    if hostname[end - 1] == ".":
        end -= 1

    seg_end = end
    seg_start = _label_start(hostname, seg_end)
    node = root
    while True:
        subtree = find_child(node, hostname[seg_start:seg_end])
        if subtree is None or subtree.is_exception_boundary:
            break
        if seg_start == 0:
            # Nothing left of the suffix to register.
            return None
        node = subtree
        seg_end = seg_start - 1
        seg_start = _label_start(hostname, seg_end)

    # Require at least two labels in the answer.
    if hostname.find(".", seg_start, end) == -1:
        if seg_start == 0 or drop_unknown:
            return None
        seg_start = _label_start(hostname, seg_start - 1)

    return hostname[seg_start:end]


def registered_domain(
    hostname: Hostname, tree: SuffixTree | SuffixNode
) -> Hostname | None:
    """resolve() with drop_unknown=False."""
    return registered_domain_strict(hostname, tree, False)


def registered_domain_strict(
    hostname: Hostname, tree: SuffixTree | SuffixNode, drop_unknown: bool
) -> Hostname | None:
    """resolve() against either a bare root node or a SuffixTree handle.

    A handle raises TreeDisposedError once it has been disposed.
    """
    if isinstance(tree, SuffixNode):
        return resolve(hostname, tree, drop_unknown)
    return tree.registered_domain(hostname, drop_unknown=drop_unknown)
