"""SuffixTree: the owning handle for a decoded rule tree.

Lifecycle:
    tree = build_tree(encoded)        # decode once, then read-only
    tree.registered_domain("www.example.co.uk")    # "example.co.uk"
    dispose_tree(tree)                # drop the whole tree at once

build_tree() returns only after the whole tree is decoded, so a
handle is complete the moment any other thread can see it, and lookups
take no lock. Each lookup reads the root reference once before it
starts walking, so a concurrent dispose() only unbinds the handle:
the lookup keeps its own reference and finishes on an intact tree.
Lookups that start after disposal raise TreeDisposedError.

Each node is owned by exactly one parent, so releasing the root
reference releases every node.
"""
from __future__ import annotations

import logging
import threading

from regdom_lite.resolver import Hostname, resolve
from regdom_lite.tree.decoder import decode_tree
from regdom_lite.tree.node import SuffixNode, node_count
from regdom_lite.tree.printer import format_tree

log = logging.getLogger(__name__)


class TreeDisposedError(RuntimeError):
    """Raised when a disposed SuffixTree is used."""


class SuffixTree:
    """A built suffix tree plus its default matching policy.

    Args:
        root: decoded root node (its own label is never matched)
        drop_unknown: default for registered_domain() when the caller
            does not pass one; True rejects names whose suffix is unknown
            instead of returning their last two labels
    """

    def __init__(self, root: SuffixNode, drop_unknown: bool = False) -> None:
        self._root: SuffixNode | None = root
        self._drop_unknown = drop_unknown
        self._node_count = node_count(root)
        self._dispose_lock = threading.Lock()

    @property
    def drop_unknown(self) -> bool:
        return self._drop_unknown

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def disposed(self) -> bool:
        return self._root is None

    @property
    def root(self) -> SuffixNode:
        root = self._root
        if root is None:
            raise TreeDisposedError("suffix tree has been disposed")
        return root

    def registered_domain(
        self, hostname: Hostname, drop_unknown: bool | None = None
    ) -> Hostname | None:
        """Registered domain of `hostname`, or None if there is none."""
        if drop_unknown is None:
            drop_unknown = self._drop_unknown
        return resolve(hostname, self.root, drop_unknown)

    def format(self) -> str:
        return format_tree(self.root)

    def dispose(self) -> None:
        """Release the tree. Idempotent; only the first call logs."""
        with self._dispose_lock:
            root, self._root = self._root, None
        if root is None:
            return
        log.debug("Disposed suffix tree of %d nodes", self._node_count)

    def __enter__(self) -> SuffixTree:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    def __repr__(self) -> str:
        state = "disposed" if self.disposed else f"{self._node_count} nodes"
        return f"SuffixTree({state}, drop_unknown={self._drop_unknown})"


def build_tree(encoded_text: str, drop_unknown: bool = False) -> SuffixTree:
    """Decode `encoded_text` into a ready-to-query SuffixTree.

    Raises MalformedEncoding if the encoding is structurally invalid.
    """
    tree = SuffixTree(decode_tree(encoded_text), drop_unknown=drop_unknown)
    log.info(
        "Built suffix tree: %d nodes from %d encoded chars",
        tree.node_count,
        len(encoded_text),
    )
    return tree


def dispose_tree(tree: SuffixTree | None) -> None:
    """Dispose `tree`. Accepts None and already-disposed trees."""
    if tree is not None:
        tree.dispose()
