"""
Subset construction: NFA -> DFA.

Every DFA state is a set of NFA nodes reachable from the start by some word.
Only subsets discovered from the start are ever interned, so the result has no
unreachable states. In the worst case the number of subsets, and therefore the
time and memory spent here, is exponential in the number of NFA nodes.
"""

from collections import deque

from nfa2dfa.dfa import DFA
from nfa2dfa.identity import DfaNode, Node, Symbol, SubsetInterner
from nfa2dfa.logging_config import get_logger
from nfa2dfa.nfa import NFA

__all__ = ["EXPLORATION_ORDERS", "subset_construction", "reachable_set"]

log = get_logger(__name__)

EXPLORATION_ORDERS = ("bfs", "dfs")


def reachable_set(nfa: NFA, subset: frozenset[Node], symbol: Symbol) -> set[Node]:
    reached = set()
    for node in subset:
        reached.update(nfa.targets(node, symbol))
    return reached


def subset_construction(nfa: NFA, order: str = "bfs") -> DFA:
    if order not in EXPLORATION_ORDERS:
        raise ValueError(
            f"Unknown exploration order {order!r}, expected one of {EXPLORATION_ORDERS}"
        )

    final_nfa_nodes = set(nfa.final_nodes)
    interner = SubsetInterner()
    trans_table: dict[DfaNode, dict[Symbol, DfaNode]] = {}
    final_nodes: set[DfaNode] = set()

    start, _ = interner.intern([nfa.starting_node])
    if nfa.starting_node in final_nfa_nodes:
        final_nodes.add(start)

    worklist = deque([start])
    take = worklist.popleft if order == "bfs" else worklist.pop

    while worklist:
        current = take()
        subset = interner.subset(current)
        edges = trans_table.setdefault(current, {})

        for symbol in nfa.alphabet:
            reached = reachable_set(nfa, subset, symbol)
            target, is_new = interner.intern(reached)
            edges[symbol] = target

            if is_new:
                if not reached.isdisjoint(final_nfa_nodes):
                    final_nodes.add(target)
                worklist.append(target)

        log.debug("subset_expanded", state=current, size=len(subset), discovered=len(interner))

    log.info(
        "subset_construction_finished",
        order=order,
        states=len(interner),
        transitions=sum(len(edges) for edges in trans_table.values()),
        final_states=len(final_nodes),
    )

    return DFA(
        starting_node=start,
        alphabet=nfa.alphabet,
        trans_table=trans_table,
        final_nodes=frozenset(final_nodes),
        subsets=interner.subsets(),
    )
