import pytest

from algokit.trees import (
    Codec,
    FindElements,
    TreeNode,
    average_of_subtree,
    bst_to_gst,
    deepest_leaves_sum,
    good_nodes,
    reverse_odd_levels,
    sum_even_grandparent,
)


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.val] + _inorder(node.right)


def _walk(node):
    if node is None:
        return []
    return [node] + _walk(node.left) + _walk(node.right)


def _level_values(root):
    level = [root]
    result = []
    while level:
        result.append([n.val for n in level])
        level = [c for n in level for c in (n.left, n.right) if c is not None]
    return result


def _sample_tree():
    return TreeNode(1, TreeNode(2, TreeNode(4)), TreeNode(3, TreeNode(5), TreeNode(6)))


def test_codec_round_trip_keeps_shape():
    codec = Codec()
    restored = codec.deserialize(codec.serialize(_sample_tree()))
    assert restored.left.left.val == 4
    assert _level_values(restored) == _level_values(_sample_tree())


def test_codec_serialize_is_stable():
    codec = Codec()
    text = codec.serialize(_sample_tree())
    assert codec.serialize(codec.deserialize(text)) == text


def test_codec_single_node_format():
    assert Codec().serialize(TreeNode(1)) == "1,null,null,"


def test_codec_empty():
    codec = Codec()
    assert codec.serialize(None) == ""
    assert codec.deserialize("") is None


@pytest.mark.parametrize("data", ["1,", "1,2,", "x,null,null,", "null,"])
def test_codec_rejects_malformed(data):
    with pytest.raises(ValueError):
        Codec().deserialize(data)


def test_find_elements_recovers_tree():
    root = TreeNode(-1, TreeNode(-1, None, TreeNode(-1)), TreeNode(-1))
    finder = FindElements(root)
    assert root.val == 0
    assert all(finder.find(node.val) for node in _walk(root))
    assert not finder.find(-1)
    assert all(
        child.val in (2 * node.val + 1, 2 * node.val + 2)
        for node in _walk(root)
        for child in (node.left, node.right)
        if child is not None
    )


def test_bst_to_gst_invariants():
    root = TreeNode(4, TreeNode(1, TreeNode(0), TreeNode(2)), TreeNode(6, TreeNode(5), TreeNode(7)))
    original = _inorder(root)
    result = _inorder(bst_to_gst(root))
    assert result[0] == sum(original)
    assert result[-1] == original[-1]
    assert all(a >= b for a, b in zip(result, result[1:]))


def test_deepest_leaves_sum():
    root = TreeNode(1, TreeNode(2, TreeNode(7)), TreeNode(3, None, TreeNode(4, None, TreeNode(8))))
    assert deepest_leaves_sum(root) == 8
    balanced = TreeNode(1, TreeNode(2, TreeNode(7)), TreeNode(3, TreeNode(8)))
    assert deepest_leaves_sum(balanced) == 7 + 8
    assert deepest_leaves_sum(None) == 0


def test_sum_even_grandparent():
    even_root = TreeNode(2, TreeNode(1, TreeNode(5)), TreeNode(3, TreeNode(6)))
    assert sum_even_grandparent(even_root) == 5 + 6
    odd_root = TreeNode(1, TreeNode(1, TreeNode(5)), TreeNode(3, TreeNode(6)))
    assert sum_even_grandparent(odd_root) == 0


def test_good_nodes():
    increasing = TreeNode(1, TreeNode(2, TreeNode(3)))
    assert good_nodes(increasing) == len(_walk(increasing))
    decreasing = TreeNode(3, TreeNode(2, TreeNode(1)))
    assert good_nodes(decreasing) == 1
    assert good_nodes(None) == 0


def test_average_of_subtree_uniform_tree():
    root = TreeNode(3, TreeNode(3, TreeNode(3)), TreeNode(3))
    assert average_of_subtree(root) == len(_walk(root))


def test_average_of_subtree_truncates_toward_zero():
    root = TreeNode(-1, TreeNode(-2))
    assert average_of_subtree(root) == len(_walk(root))


def test_reverse_odd_levels():
    root = TreeNode(
        2,
        TreeNode(3, TreeNode(8), TreeNode(13)),
        TreeNode(5, TreeNode(21), TreeNode(34)),
    )
    before = _level_values(root)
    after = _level_values(reverse_odd_levels(root))
    assert after[0] == before[0]
    assert after[1] == before[1][::-1]
    assert after[2] == before[2]


def test_reverse_odd_levels_twice_restores():
    root = _sample_tree()
    before = _level_values(root)
    reverse_odd_levels(reverse_odd_levels(root))
    assert _level_values(root) == before