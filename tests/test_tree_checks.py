import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.tree_checks import (
    diameter_of_binary_tree,
    find_mode,
    find_second_minimum_value,
    find_target,
    find_tilt,
    get_minimum_difference,
    has_path_sum,
    is_balanced,
    is_cousins,
    is_cousins_bfs,
    is_same_tree,
    is_subtree,
    is_symmetric,
    is_unival_tree,
    is_valid_bst,
    leaf_similar,
    max_depth,
    min_depth,
    min_diff_in_bst,
    range_sum_bst,
    sum_of_left_leaves,
    sum_root_to_leaf,
)
from algokit.tree_node import TreeNode, build_tree
from algokit.tree_traversal import (
    binary_tree_paths,
    inorder_traversal,
    level_order,
    mirror_tree,
    sorted_array_to_bst,
)

trees = st.recursive(
    st.none(),
    lambda children: st.builds(TreeNode, st.integers(-50, 50), children, children),
    max_leaves=20,
)

unique_sorted = st.lists(st.integers(-100, 100), unique=True, max_size=25).map(sorted)


def _chain(values):
    items = []
    for value in values:
        items.extend([value, None])
    return build_tree(items[:-1])


@given(trees)
def test_same_tree_with_copy(tree):
    assert is_same_tree(tree, copy.deepcopy(tree))


def test_same_tree_differs():
    assert not is_same_tree(build_tree([1, 2]), build_tree([1, None, 2]))
    assert not is_same_tree(build_tree([1, 2, 1]), build_tree([1, 1, 2]))
    assert is_same_tree(None, None)


@given(trees)
def test_symmetric_matches_mirror(tree):
    mirrored = mirror_tree(copy.deepcopy(tree))
    assert is_symmetric(tree) == is_same_tree(tree, mirrored)


def test_symmetric_examples():
    assert is_symmetric(build_tree([1, 2, 2, 3, 4, 4, 3]))
    assert not is_symmetric(build_tree([1, 2, 2, None, 3, None, 3]))
    assert is_symmetric(None)


@given(trees)
def test_max_depth_counts_levels(tree):
    assert max_depth(tree) == len(level_order(tree))


@given(trees)
def test_min_depth_not_above_max(tree):
    assert min_depth(tree) <= max_depth(tree)


def test_min_depth_examples():
    assert min_depth(build_tree([3, 9, 20, None, None, 15, 7])) == 2
    values = [2, 3, 4, 5, 6]
    assert min_depth(_chain(values)) == len(values)
    assert min_depth(None) == 0


def test_is_balanced_examples():
    assert is_balanced(build_tree([3, 9, 20, None, None, 15, 7]))
    assert not is_balanced(build_tree([1, 2, 2, 3, 3, None, None, 4, 4]))


@given(unique_sorted)
def test_balanced_valid_bst_from_sorted(values):
    tree = sorted_array_to_bst(values)
    assert is_balanced(tree)
    assert is_valid_bst(tree)


def test_has_path_sum():
    tree = build_tree([5, 4, 8, 11, None, 13, 4, 7, 2, None, None, None, 1])
    assert has_path_sum(tree, 22)
    assert not has_path_sum(build_tree([1, 2, 3]), 5)
    assert not has_path_sum(None, 0)


@pytest.mark.parametrize("check", [is_cousins, is_cousins_bfs])
def test_cousins_examples(check):
    assert not check(build_tree([1, 2, 3, 4]), 4, 3)
    assert check(build_tree([1, 2, 3, None, 4, None, 5]), 5, 4)
    assert not check(build_tree([1, 2, 3, None, 4]), 2, 3)


@given(unique_sorted, st.data())
def test_cousins_forms_agree(values, data):
    tree = sorted_array_to_bst(values)
    pool = values + [1000]
    x = data.draw(st.sampled_from(pool))
    y = data.draw(st.sampled_from(pool))
    assert is_cousins(tree, x, y) == is_cousins_bfs(tree, x, y)


def test_unival():
    assert is_unival_tree(build_tree([1, 1, 1, 1, 1, None, 1]))
    assert not is_unival_tree(build_tree([2, 2, 2, 5, 2]))
    assert is_unival_tree(None)


@given(trees)
def test_subtree_of_itself(tree):
    assert is_subtree(tree, tree) == (tree is not None)


def test_subtree_examples():
    s = build_tree([3, 4, 5, 1, 2])
    assert is_subtree(s, build_tree([4, 1, 2]))
    deeper = build_tree([3, 4, 5, 1, 2, None, None, None, None, 0])
    assert not is_subtree(deeper, build_tree([4, 1, 2]))
    assert not is_subtree(build_tree([1, 1]), build_tree([1, 2]))


def test_valid_bst_examples():
    assert is_valid_bst(build_tree([2, 1, 3]))
    assert not is_valid_bst(build_tree([5, 1, 4, None, None, 3, 6]))
    assert not is_valid_bst(build_tree([1, 1]))
    assert not is_valid_bst(build_tree([5, 4, 6, None, None, 3, 7]))


@given(trees)
def test_leaf_similar_with_copy(tree):
    assert leaf_similar(tree, copy.deepcopy(tree))


def test_leaf_similar_examples():
    assert leaf_similar(build_tree([1, 2, 3]), build_tree([7, 2, 3]))
    assert not leaf_similar(build_tree([1, 2, 3]), build_tree([1, 3, 2]))


def test_find_target():
    tree = build_tree([5, 3, 6, 2, 4, None, 7])
    assert find_target(tree, 9)
    assert not find_target(tree, 28)
    assert not find_target(build_tree([1]), 2)


def test_sum_of_left_leaves():
    assert sum_of_left_leaves(build_tree([3, 9, 20, None, None, 15, 7])) == 9 + 15
    assert sum_of_left_leaves(build_tree([1, 2])) == 2
    assert sum_of_left_leaves(build_tree([1, None, 2])) == 0
    assert sum_of_left_leaves(None) == 0


def test_find_mode():
    assert find_mode(build_tree([1, None, 2, 2])) == [2]
    assert find_mode(build_tree([0])) == [0]
    assert find_mode(None) == []


@given(unique_sorted)
def test_find_mode_all_distinct(values):
    assert find_mode(sorted_array_to_bst(values)) == values


def test_minimum_difference_examples():
    tree = sorted_array_to_bst([0, 7])
    assert get_minimum_difference(tree) == 7
    assert min_diff_in_bst(tree) == 7


@given(unique_sorted.filter(lambda v: len(v) >= 2))
def test_minimum_difference_forms_agree(values):
    tree = sorted_array_to_bst(values)
    result = get_minimum_difference(tree)
    assert result == min_diff_in_bst(tree)
    assert result > 0


def test_minimum_difference_needs_two_nodes():
    with pytest.raises(ValueError):
        get_minimum_difference(build_tree([4]))
    with pytest.raises(ValueError):
        min_diff_in_bst(None)


def test_diameter():
    assert diameter_of_binary_tree(build_tree([1, 2, 3, 4, 5])) == 3
    values = [1, 2, 3, 4]
    assert diameter_of_binary_tree(_chain(values)) == len(values) - 1


@given(trees)
def test_diameter_bounds(tree):
    depth = max_depth(tree)
    diameter = diameter_of_binary_tree(tree)
    assert max(depth - 1, 0) <= diameter <= max(2 * depth - 2, 0)


def test_find_tilt():
    assert find_tilt(build_tree([1, 2])) == 2
    assert find_tilt(build_tree([7])) == find_tilt(None)


@given(trees)
def test_find_tilt_non_negative_and_mirror_invariant(tree):
    tilt = find_tilt(tree)
    assert tilt >= 0
    assert find_tilt(mirror_tree(copy.deepcopy(tree))) == tilt


def test_second_minimum():
    assert find_second_minimum_value(build_tree([2, 2, 5, None, None, 5, 7])) == 5
    assert find_second_minimum_value(build_tree([2, 2, 2])) == -1


@given(unique_sorted)
def test_range_sum_covers_everything(values):
    tree = sorted_array_to_bst(values)
    assert range_sum_bst(tree, -100, 100) == sum(inorder_traversal(tree))


@given(unique_sorted.filter(bool), st.data())
def test_range_sum_single_value(values, data):
    target = data.draw(st.sampled_from(values))
    assert range_sum_bst(sorted_array_to_bst(values), target, target) == target


def test_sum_root_to_leaf_example():
    assert sum_root_to_leaf(build_tree([1, 0, 1, 0, 1, 0, 1])) == 22
    assert sum_root_to_leaf(None) == 0


@given(
    st.recursive(
        st.none(),
        lambda children: st.builds(TreeNode, st.integers(0, 1), children, children),
        max_leaves=12,
    )
)
def test_sum_root_to_leaf_matches_paths(tree):
    paths = binary_tree_paths(tree)
    assert sum_root_to_leaf(tree) == sum(int(p.replace("->", ""), 2) for p in paths)