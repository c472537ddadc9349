"""SuffixNode: one node of the public-suffix tree.

The tree stores rules label by label from the right, so the rule
"co.uk" is the path root -> "uk" -> "co". A node with no children
closes a rule. Wildcard rules ("*.ck") are stored as a child whose
label is "*", and exception rules ("!www.ck") as a node whose single
child carries the exception flag:

    root
      ck
        *
        www
          !            <- exception marker, empty label

Nodes are frozen and children are tuples, so a decoded tree cannot be
mutated and can be read from any number of threads without locking.
Each child has exactly one parent; there are no back references.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, TypeAlias

Label: TypeAlias = str

WILDCARD: Label = "*"
EXCEPTION_MARK = "!"


@dataclass(frozen=True, slots=True)
class SuffixNode:
    """A label in the suffix tree and the nodes beneath it.

    The label index maps each child label to the first child carrying
    it, which keeps child() equivalent to a front-to-back scan even if
    the encoding repeats a label among siblings.
    """

    label: Label
    is_exception: bool = False
    children: tuple[SuffixNode, ...] = ()
    _index: dict[Label, SuffixNode] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        for child in self.children:
            self._index.setdefault(child.label, child)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_exception_boundary(self) -> bool:
        """True if the only child is an exception node.

        Matching stops here: this level is a public suffix but the
        label below it is carved out of the wildcard.
        """
        return len(self.children) == 1 and self.children[0].is_exception

    def child(self, label: Label) -> SuffixNode | None:
        """Exact-label child, else the first wildcard child, else None."""
        found = self._index.get(label)
        if found is not None:
            return found
        return self._index.get(WILDCARD)


def iter_nodes(root: SuffixNode) -> Iterator[SuffixNode]:
    """Pre-order walk over the tree, parents before children."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def node_count(root: SuffixNode) -> int:
    return sum(1 for _ in iter_nodes(root))
