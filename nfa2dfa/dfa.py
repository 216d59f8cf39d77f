from typing import Iterable, Iterator, Union

from nfa2dfa.identity import DEAD, DeadState, DfaNode, Node, Symbol

__all__ = ["DFA"]


class DFA:
    """Deterministic, possibly partial, automaton produced by subset construction.

    States are small integers handed out by ``SubsetInterner``; ``subset``
    maps one back to the NFA nodes it stands for. Instances are created by
    ``nfa2dfa.converter.subset_construction`` only and are read-only after
    that, so ``is_accepted`` may be called from several threads at once.
    """

    def __init__(
        self,
        starting_node: DfaNode,
        alphabet: tuple[Symbol, ...],
        trans_table: dict[DfaNode, dict[Symbol, DfaNode]],
        final_nodes: frozenset[DfaNode],
        subsets: tuple[frozenset[Node], ...],
    ):
        self._starting_node = starting_node
        self._alphabet = alphabet
        self._trans_table = trans_table
        self._final_nodes = final_nodes
        self._subsets = subsets

    @property
    def starting_node(self) -> DfaNode:
        return self._starting_node

    @property
    def alphabet(self) -> tuple[Symbol, ...]:
        return self._alphabet

    @property
    def final_nodes(self) -> frozenset[DfaNode]:
        return self._final_nodes

    @property
    def states(self) -> range:
        return range(len(self._subsets))

    def subset(self, node: DfaNode) -> frozenset[Node]:
        return self._subsets[node]

    def next_node(
        self, node: Union[DfaNode, DeadState], symbol: Symbol
    ) -> Union[DfaNode, DeadState]:
        if node is DEAD:
            return DEAD
        return self._trans_table.get(node, {}).get(symbol, DEAD)

    def transitions(self) -> Iterator[tuple[DfaNode, Symbol, DfaNode]]:
        for from_nd, edges in self._trans_table.items():
            for symbol, to_nd in edges.items():
                yield from_nd, symbol, to_nd

    def is_accepted(self, text: Iterable[Symbol]) -> bool:
        node = self._starting_node
        for symbol in text:
            node = self.next_node(node, symbol)
            if node is DEAD:
                return False

        return node in self._final_nodes

    def __len__(self) -> int:
        return len(self._subsets)

    def __repr__(self) -> str:
        return (
            f"DFA(states={len(self._subsets)}, "
            f"alphabet={list(self._alphabet)!r}, "
            f"final_nodes={sorted(self._final_nodes)!r})"
        )
