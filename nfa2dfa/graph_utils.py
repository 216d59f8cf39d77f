from typing import Any, Iterable, Optional

import networkx as nx

from nfa2dfa.dfa import DFA
from nfa2dfa.identity import DfaNode, Node, Symbol
from nfa2dfa.nfa import NFA

__all__ = [
    "nfa_to_graph",
    "dfa_to_graph",
    "graph_to_nfa",
    "unreachable_states",
]


def nfa_to_graph(nfa: NFA) -> nx.MultiDiGraph:
    graph = nx.MultiDiGraph()
    for nd in nfa.nodes:
        graph.add_node(
            nd, is_start=nd == nfa.starting_node, is_final=nfa.is_final(nd)
        )
    for from_nd, symbol, to_nd in nfa.transitions():
        graph.add_edge(from_nd, to_nd, label=symbol)
    return graph


def dfa_to_graph(dfa: DFA) -> nx.MultiDiGraph:
    graph = nx.MultiDiGraph()
    for nd in dfa.states:
        graph.add_node(
            nd,
            is_start=nd == dfa.starting_node,
            is_final=nd in dfa.final_nodes,
            subset=dfa.subset(nd),
        )
    for from_nd, symbol, to_nd in dfa.transitions():
        graph.add_edge(from_nd, to_nd, label=symbol)
    return graph


def graph_to_nfa(
    graph: nx.MultiDiGraph,
    starting_node: Node,
    final_nodes: Iterable[Node],
    alphabet: Optional[Iterable[Symbol]] = None,
) -> NFA:
    if alphabet is None:
        alphabet = sorted(set(lbl for _, _, lbl in graph.edges(data="label")))

    nfa = NFA(starting_node, alphabet)
    for u, v, lbl in graph.edges(data="label"):
        nfa.add(u, lbl, v)
    for nd in final_nodes:
        nfa.add_final(nd)
    return nfa


def unreachable_states(dfa: DFA) -> set[DfaNode]:
    graph = dfa_to_graph(dfa)
    reachable: set[Any] = nx.descendants(graph, dfa.starting_node)
    reachable.add(dfa.starting_node)
    return set(graph.nodes) - reachable
