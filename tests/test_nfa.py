import pytest

from nfa2dfa.dfa import DFA
from nfa2dfa.nfa import NFA
from tests.automata import example_nfa


class TestNfaConstruction:
    def test_new_nfa_is_empty(self):
        nfa = NFA(0, "ab")
        assert nfa.starting_node == 0
        assert nfa.alphabet == ("a", "b")
        assert nfa.final_nodes == ()
        assert list(nfa.transitions()) == []
        assert nfa.nodes == {0}

    def test_add_appends_targets(self):
        nfa = example_nfa()
        assert nfa.targets("A", "1") == ("B", "A")
        assert nfa.targets("A", "0") == ("B",)
        assert nfa.targets("B", "0") == ()

    def test_duplicate_edges_are_kept(self):
        nfa = NFA(0, "a")
        nfa.add(0, "a", 1)
        nfa.add(0, "a", 1)
        assert nfa.targets(0, "a") == (1, 1)
        assert len(list(nfa.transitions())) == 2

    def test_duplicate_final_nodes_are_kept(self):
        nfa = NFA(0, "a")
        nfa.add_final(5)
        nfa.add_final(5)
        assert nfa.final_nodes == (5, 5)
        assert nfa.is_final(5)
        assert not nfa.is_final(0)

    def test_symbol_outside_alphabet_is_stored(self):
        nfa = NFA(0, "a")
        nfa.add(0, "z", 1)
        assert nfa.targets(0, "z") == (1,)
        assert nfa.alphabet == ("a",)

    def test_nodes_collects_every_mentioned_node(self):
        nfa = NFA("s", "a")
        nfa.add("x", "a", "y")
        nfa.add_final("f")
        assert nfa.nodes == {"s", "x", "y", "f"}


class TestToDfa:
    def test_to_dfa_returns_dfa(self):
        assert isinstance(example_nfa().to_dfa(), DFA)

    def test_to_dfa_does_not_mutate_nfa(self):
        nfa = example_nfa()
        before = (list(nfa.transitions()), nfa.final_nodes, nfa.alphabet)
        nfa.to_dfa()
        nfa.to_dfa(order="dfs")
        assert (list(nfa.transitions()), nfa.final_nodes, nfa.alphabet) == before

    def test_to_dfa_unknown_order(self):
        with pytest.raises(ValueError):
            example_nfa().to_dfa(order="random")
