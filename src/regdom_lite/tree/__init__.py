"""Suffix tree model, decoder and diagnostic printer.

The owning SuffixTree handle lives in regdom_lite.tree.handle; it
depends on the resolver and is re-exported from regdom_lite instead.
"""

from regdom_lite.tree.decoder import MalformedEncoding, decode_node, decode_tree
from regdom_lite.tree.node import (
    EXCEPTION_MARK,
    WILDCARD,
    Label,
    SuffixNode,
    iter_nodes,
    node_count,
)
from regdom_lite.tree.printer import format_tree, print_tree

__all__ = [
    "EXCEPTION_MARK",
    "WILDCARD",
    "Label",
    "MalformedEncoding",
    "SuffixNode",
    "decode_node",
    "decode_tree",
    "format_tree",
    "iter_nodes",
    "node_count",
    "print_tree",
]
