from typing import Iterable, Iterator, TYPE_CHECKING

from nfa2dfa.identity import Node, Symbol, normalize_alphabet

if TYPE_CHECKING:
    from nfa2dfa.dfa import DFA

__all__ = ["NFA"]


class NFA:
    """Nondeterministic finite automaton without epsilon moves.

    The automaton is built incrementally with ``add`` and ``add_final``.
    Nothing is validated: duplicate edges and final nodes are kept as given,
    symbols outside the alphabet are stored but never explored, and nodes
    need not be reachable.
    """

    def __init__(self, starting_node: Node, alphabet: Iterable[Symbol]):
        self._starting_node = starting_node
        self._alphabet = normalize_alphabet(alphabet)
        self._trans_table: dict[Node, dict[Symbol, list[Node]]] = {}
        self._final_nodes: list[Node] = []

    @property
    def starting_node(self) -> Node:
        return self._starting_node

    @property
    def alphabet(self) -> tuple[Symbol, ...]:
        return self._alphabet

    @property
    def final_nodes(self) -> tuple[Node, ...]:
        return tuple(self._final_nodes)

    @property
    def nodes(self) -> set[Node]:
        nodes = {self._starting_node, *self._final_nodes}
        for from_nd, symbol, to_nd in self.transitions():
            nodes.add(from_nd)
            nodes.add(to_nd)
        return nodes

    def add(self, from_nd: Node, symbol: Symbol, to_nd: Node) -> None:
        self._trans_table.setdefault(from_nd, {}).setdefault(symbol, []).append(to_nd)

    def add_final(self, node: Node) -> None:
        self._final_nodes.append(node)

    def is_final(self, node: Node) -> bool:
        return node in self._final_nodes

    def targets(self, node: Node, symbol: Symbol) -> tuple[Node, ...]:
        return tuple(self._trans_table.get(node, {}).get(symbol, ()))

    def transitions(self) -> Iterator[tuple[Node, Symbol, Node]]:
        for from_nd, edges in self._trans_table.items():
            for symbol, targets in edges.items():
                for to_nd in targets:
                    yield from_nd, symbol, to_nd

    def to_dfa(self, order: str = "bfs") -> "DFA":
        from nfa2dfa.converter import subset_construction

        return subset_construction(self, order=order)

    def __repr__(self) -> str:
        return (
            f"NFA(starting_node={self._starting_node!r}, "
            f"alphabet={list(self._alphabet)!r}, "
            f"transitions={sum(1 for _ in self.transitions())}, "
            f"final_nodes={self._final_nodes!r})"
        )
