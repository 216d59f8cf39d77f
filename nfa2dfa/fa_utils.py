from pyformlang.finite_automaton import DeterministicFiniteAutomaton
from pyformlang.finite_automaton import NondeterministicFiniteAutomaton
from pyformlang.finite_automaton import State
from pyformlang.finite_automaton import Symbol

from nfa2dfa.dfa import DFA
from nfa2dfa.nfa import NFA

__all__ = ["nfa_to_pyformlang", "dfa_to_pyformlang"]


def nfa_to_pyformlang(nfa: NFA) -> NondeterministicFiniteAutomaton:
    res = NondeterministicFiniteAutomaton()
    res.add_start_state(State(nfa.starting_node))
    for nd in nfa.final_nodes:
        res.add_final_state(State(nd))

    for from_nd, symbol, to_nd in nfa.transitions():
        if symbol in nfa.alphabet:
            res.add_transition(State(from_nd), Symbol(symbol), State(to_nd))

    return res


def dfa_to_pyformlang(dfa: DFA) -> DeterministicFiniteAutomaton:
    res = DeterministicFiniteAutomaton()
    res.add_start_state(State(dfa.starting_node))
    for nd in dfa.final_nodes:
        res.add_final_state(State(nd))

    for from_nd, symbol, to_nd in dfa.transitions():
        res.add_transition(State(from_nd), Symbol(symbol), State(to_nd))

    return res
