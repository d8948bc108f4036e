"""Unit tests for UCT scoring and descent."""

import math

import pytest

from seqmcts.mcts.termination import TerminationRule
from seqmcts.mcts.tree import SearchTree
from seqmcts.mcts.ucb import select_child, ucb_score, ucb_select


def make_tree(moves=(1, 2, 3)):
    return SearchTree([], lambda seq: list(moves) if len(seq) < 3 else [])


class TestUCBScore:
    """Tests for the minimization UCT score."""

    @pytest.mark.parametrize("c", [0.0, 0.5, 1.41, 2.0, 10.0])
    def test_unvisited_scores_negative_infinity(self, c):
        tree = make_tree()
        tree.root.record_visit(100.0)
        visited = tree.create_child(tree.root, 1)
        visited.record_visit(-1e9)
        unvisited = tree.create_child(tree.root, 2)

        assert ucb_score(unvisited, tree.root, c) == float('-inf')
        assert ucb_score(unvisited, tree.root, c) < ucb_score(visited, tree.root, c)

    def test_formula(self):
        """score = W/N - c * sqrt(ln(N_parent) / N)."""
        tree = make_tree()
        child = tree.create_child(tree.root, 1)
        for value in (3.0, 5.0):
            child.record_visit(value)
            tree.root.record_visit(value)
        for _ in range(8):
            tree.root.record_visit(0.0)

        expected = 4.0 - 2.0 * math.sqrt(math.log(10) / 2)
        assert ucb_score(child, tree.root, 2.0) == pytest.approx(expected)

    def test_exploration_lowers_score(self):
        """Confidence term is subtracted: more exploration, lower score."""
        tree = make_tree()
        child = tree.create_child(tree.root, 1)
        child.record_visit(5.0)
        for _ in range(4):
            tree.root.record_visit(5.0)

        assert ucb_score(child, tree.root, 2.0) < ucb_score(child, tree.root, 0.5)
        assert ucb_score(child, tree.root, 0.0) == pytest.approx(5.0)


class TestSelectChild:
    """Tests for minimum-score child selection."""

    def test_lowest_mean_wins_without_exploration(self):
        tree = make_tree()
        a = tree.create_child(tree.root, 1)
        b = tree.create_child(tree.root, 2)
        a.record_visit(10.0)
        b.record_visit(1.0)
        tree.root.record_visit(10.0)
        tree.root.record_visit(1.0)

        assert select_child(tree, tree.root, c=0.0) is b

    def test_first_minimum_wins_ties(self):
        tree = make_tree()
        children = [tree.create_child(tree.root, m) for m in (1, 2, 3)]
        for child in children:
            child.record_visit(5.0)
            tree.root.record_visit(5.0)

        assert select_child(tree, tree.root, c=1.41) is children[0]

    def test_first_unvisited_wins(self):
        tree = make_tree()
        a = tree.create_child(tree.root, 1)
        b = tree.create_child(tree.root, 2)
        c = tree.create_child(tree.root, 3)
        a.record_visit(1.0)
        tree.root.record_visit(1.0)

        assert select_child(tree, tree.root) is b

    def test_no_finite_score_returns_none(self):
        tree = make_tree()
        child = tree.create_child(tree.root, 1)
        child.record_visit(float('inf'))
        tree.root.record_visit(float('inf'))

        assert select_child(tree, tree.root) is None


class TestUCBSelect:
    """Tests for descent from the root."""

    def test_root_without_children_is_frontier(self):
        tree = make_tree()
        rule = TerminationRule(target_length=3)
        assert ucb_select(tree, rule) is tree.root

    def test_stops_at_node_with_untried_moves(self):
        tree = make_tree()
        rule = TerminationRule(target_length=3)
        tree.is_expandable(tree.root)
        tree.root.untried_moves.remove(1)
        child = tree.create_child(tree.root, 1)
        child.record_visit(1.0)
        tree.root.record_visit(1.0)

        assert ucb_select(tree, rule) is tree.root

    def test_descends_through_fully_expanded_nodes(self):
        tree = make_tree(moves=(1, 2))
        rule = TerminationRule(target_length=3)
        tree.is_expandable(tree.root)
        tree.root.untried_moves.clear()
        good = tree.create_child(tree.root, 1)
        bad = tree.create_child(tree.root, 2)
        good.record_visit(0.0)
        bad.record_visit(100.0)
        tree.root.record_visit(0.0)
        tree.root.record_visit(100.0)

        assert ucb_select(tree, rule, c=0.1) is good

    def test_stops_at_complete_node(self):
        tree = make_tree(moves=(1,))
        rule = TerminationRule(target_length=1)
        tree.is_expandable(tree.root)
        tree.root.untried_moves.clear()
        child = tree.create_child(tree.root, 1)
        grandchild = tree.create_child(child, 1)
        child.record_visit(1.0)
        tree.root.record_visit(1.0)

        assert ucb_select(tree, rule) is child
