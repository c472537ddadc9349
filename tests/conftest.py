"""Shared rule encodings and fixtures for the regdom-lite tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from regdom_lite.tree.decoder import decode_tree
from regdom_lite.tree.handle import SuffixTree, build_tree
from regdom_lite.tree.node import SuffixNode

# Rules:
#   com
#   co.uk  *.uk  !parliament.uk
#   *.ck   !www.ck
#   co.jp  *.kawasaki.jp  !city.kawasaki.jp
#   !foo                          (top-level exception)
SAMPLE_RULES = (
    "root(5:"
    "com,"
    "uk(3:co,*,parliament(1:!)),"
    "ck(2:*,www(1:!)),"
    "jp(2:co,kawasaki(2:*,city(1:!))),"
    "foo(1:!)"
    ")"
)
SAMPLE_NODE_COUNT = 19

# "com" plus a catch-all "*" at the top level.
WILDCARD_ROOT_RULES = "root(2:com,*)"

HOSTNAMES = [
    "www.example.com",
    "example.com",
    "com",
    "a.b.co.uk",
    "b.co.uk",
    "co.uk",
    "parliament.uk",
    "www.parliament.uk",
    "x.y.uk",
    "y.uk",
    "www.ck",
    "a.b.ck",
    "b.ck",
    "www.city.kawasaki.jp",
    "a.b.kawasaki.jp",
    "shop.example.co.jp",
    "a.foo",
    "foo",
    "something.xx",
    "deep.something.xx",
    "xx",
]


@pytest.fixture
def sample_root() -> SuffixNode:
    return decode_tree(SAMPLE_RULES)


@pytest.fixture
def sample_tree() -> Iterator[SuffixTree]:
    tree = build_tree(SAMPLE_RULES)
    yield tree
    tree.dispose()


@pytest.fixture
def wildcard_root() -> SuffixNode:
    return decode_tree(WILDCARD_ROOT_RULES)
