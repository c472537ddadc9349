"""regdom-lite: registered-domain (eTLD+1) lookup over a compiled
public suffix tree.

    from regdom_lite import build_tree, registered_domain

    tree = build_tree(encoded_rules)
    registered_domain("www.example.co.uk", tree)   # "example.co.uk"
"""
from regdom_lite.resolver import (
    Hostname,
    find_child,
    find_child_scan,
    registered_domain,
    registered_domain_strict,
    resolve,
)
from regdom_lite.tree import (
    MalformedEncoding,
    SuffixNode,
    decode_tree,
    format_tree,
    print_tree,
)
from regdom_lite.tree.handle import (
    SuffixTree,
    TreeDisposedError,
    build_tree,
    dispose_tree,
)

__all__ = [
    "Hostname",
    "MalformedEncoding",
    "SuffixNode",
    "SuffixTree",
    "TreeDisposedError",
    "build_tree",
    "decode_tree",
    "dispose_tree",
    "find_child",
    "find_child_scan",
    "format_tree",
    "print_tree",
    "registered_domain",
    "registered_domain_strict",
    "resolve",
]
