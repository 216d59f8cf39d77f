from enum import Enum
from typing import Hashable, Iterable

__all__ = [
    "Symbol",
    "Node",
    "DfaNode",
    "DeadState",
    "DEAD",
    "normalize_alphabet",
    "canonical_subset",
    "SubsetInterner",
]

Symbol = Hashable
Node = Hashable
DfaNode = int


class DeadState(Enum):
    DEAD = "dead"

    def __repr__(self) -> str:
        return "DEAD"


DEAD = DeadState.DEAD


def normalize_alphabet(alphabet: Iterable[Symbol]) -> tuple[Symbol, ...]:
    return tuple(dict.fromkeys(alphabet))


def canonical_subset(nodes: Iterable[Node]) -> frozenset[Node]:
    return frozenset(nodes)


class SubsetInterner:
    """Maps canonical subsets of NFA nodes to consecutive DFA indices.

    Indices are handed out in discovery order, so the first interned subset
    (the start subset) is always ``0``.
    """

    def __init__(self):
        self._index: dict[frozenset[Node], DfaNode] = {}
        self._subsets: list[frozenset[Node]] = []

    def intern(self, nodes: Iterable[Node]) -> tuple[DfaNode, bool]:
        subset = canonical_subset(nodes)
        idx = self._index.get(subset)
        if idx is not None:
            return idx, False

        idx = len(self._subsets)
        self._index[subset] = idx
        self._subsets.append(subset)
        return idx, True

    def subset(self, idx: DfaNode) -> frozenset[Node]:
        return self._subsets[idx]

    def subsets(self) -> tuple[frozenset[Node], ...]:
        return tuple(self._subsets)

    def __contains__(self, nodes: Iterable[Node]) -> bool:
        return canonical_subset(nodes) in self._index

    def __len__(self) -> int:
        return len(self._subsets)
