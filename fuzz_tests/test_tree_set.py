import hypothesis.strategies as st
import pytest
from hypothesis import given
from hypothesis.stateful import RuleBasedStateMachine, invariant, precondition, rule

from bstset import DuplicateElementError, EmptySetError, MissingElementError, TreeSet
from bstset.tree import is_search_tree

from .strategies import integer_elements, text_elements


@given(st.lists(integer_elements, unique=True))
def test_iterates_in_sorted_order(elements):
    tree_set = TreeSet(*elements)

    assert list(tree_set) == sorted(elements)
    assert len(tree_set) == len(elements)
    assert is_search_tree(tree_set.tree)


@given(st.lists(text_elements, unique=True, min_size=1), st.data())
def test_remove_and_reinsert(elements, data):
    tree_set = TreeSet(*elements)
    element = data.draw(st.sampled_from(elements))

    removed = tree_set.remove(element)
    assert removed == element
    assert element not in tree_set
    assert set(tree_set) == set(elements) - {element}

    tree_set.add(removed)
    assert tree_set == set(elements)
    assert is_search_tree(tree_set.tree)


@given(st.lists(integer_elements, unique=True, min_size=1))
def test_remove_any_removes_a_member(elements):
    tree_set = TreeSet(*elements)

    removed = tree_set.remove_any()

    assert removed in elements
    assert removed not in tree_set
    assert len(tree_set) == len(elements) - 1


class TreeSetComparison(RuleBasedStateMachine):
    def __init__(self):
        super().__init__()
        self.tree_set = TreeSet()
        self.model = set()

    @rule(element=integer_elements)
    def add(self, element):
        if element in self.model:
            with pytest.raises(DuplicateElementError):
                self.tree_set.add(element)
        else:
            self.tree_set.add(element)
            self.model.add(element)

    @rule(element=integer_elements)
    def remove(self, element):
        if element in self.model:
            assert self.tree_set.remove(element) == element
            self.model.remove(element)
        else:
            with pytest.raises(MissingElementError):
                self.tree_set.remove(element)

    @rule()
    def remove_any(self):
        if len(self.model) == 0:
            with pytest.raises(EmptySetError):
                self.tree_set.remove_any()
        else:
            removed = self.tree_set.remove_any()
            assert removed in self.model
            self.model.remove(removed)

    @rule(element=integer_elements)
    def contains(self, element):
        assert (element in self.tree_set) == (element in self.model)

    @precondition(lambda self: len(self.model) > 0)
    @rule()
    def transfer(self):
        destination = self.tree_set.new_instance()
        destination.transfer_from(self.tree_set)
        assert len(self.tree_set) == 0
        self.tree_set = destination

    @invariant()
    def matches_model(self):
        assert list(self.tree_set) == sorted(self.model)
        assert len(self.tree_set) == len(self.model)
        assert is_search_tree(self.tree_set.tree)


TestTreeSetComparison = TreeSetComparison.TestCase
