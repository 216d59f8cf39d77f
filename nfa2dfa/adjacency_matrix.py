from typing import Iterable

from scipy.sparse import csr_matrix, lil_matrix

from nfa2dfa.identity import Node, Symbol
from nfa2dfa.nfa import NFA

__all__ = ["AdjacencyMatrixNFA"]


class AdjacencyMatrixNFA:
    """Boolean sparse matrix view of an NFA, one matrix per alphabet symbol.

    Simulates the NFA directly by tracking the front of every node reachable
    so far, without building a DFA.
    """

    def __init__(self, nfa: NFA):
        self.num_nds = 0
        self.nd_to_idx: dict[Node, int] = {}
        self.idx_to_nd: dict[int, Node] = {}
        for nd in nfa.nodes:
            self.nd_to_idx[nd] = self.num_nds
            self.idx_to_nd[self.num_nds] = nd
            self.num_nds += 1

        self.start_idx: int = self.nd_to_idx[nfa.starting_node]
        self.final_idxs: set[int] = {self.nd_to_idx[nd] for nd in nfa.final_nodes}

        matrices: dict[Symbol, lil_matrix] = {
            symbol: lil_matrix((self.num_nds, self.num_nds), dtype=bool)
            for symbol in nfa.alphabet
        }
        for from_nd, symbol, to_nd in nfa.transitions():
            if symbol not in matrices:
                continue
            matrices[symbol][self.nd_to_idx[from_nd], self.nd_to_idx[to_nd]] = True

        self.adjacency_matrices: dict[Symbol, csr_matrix] = {
            symbol: matrix.tocsr() for symbol, matrix in matrices.items()
        }

    def _start_front(self) -> csr_matrix:
        return csr_matrix(
            ([True], ([0], [self.start_idx])), shape=(1, self.num_nds), dtype=bool
        )

    def reachable_front(self, text: Iterable[Symbol]) -> frozenset[Node]:
        front = self._start_front()

        for symbol in text:
            if symbol not in self.adjacency_matrices:
                return frozenset()
            front = (front @ self.adjacency_matrices[symbol]).astype(bool)
            if front.count_nonzero() == 0:
                return frozenset()

        return frozenset(self.idx_to_nd[idx] for idx in front.nonzero()[1])

    def accepts(self, text: Iterable[Symbol]) -> bool:
        front = self.reachable_front(text)
        return any(self.nd_to_idx[nd] in self.final_idxs for nd in front)
