import pytest

from hashsig.hashing import digest
from hashsig.merkle import MerkleTree


def leaf(n):
    return digest(bytes([n]))


def climb(node, index, path):
    for sibling in path:
        node = digest(node + sibling) if index % 2 == 0 else digest(sibling + node)
        index //= 2
    return node


def test_empty_tree_has_no_root():
    tree = MerkleTree([])
    assert tree.root is None
    assert tree.layers == [[]]


def test_single_leaf_is_root():
    a = leaf(1)
    tree = MerkleTree([a])
    assert tree.root == a
    assert tree.auth_path(0) == []


def test_two_leaves_root_is_hash_of_concatenation():
    a, b = leaf(1), leaf(2)
    tree = MerkleTree([a, b])
    assert tree.root == digest(a + b)
    assert len(tree.layers) == 2


def test_odd_node_is_hashed_alone():
    a, b, c = leaf(1), leaf(2), leaf(3)
    tree = MerkleTree([a, b, c])
    assert tree.layers[1] == [digest(a + b), digest(c)]
    assert tree.root == digest(digest(a + b) + digest(c))


def test_auth_path_of_four_leaves():
    a, b, c, d = (leaf(i) for i in range(4))
    tree = MerkleTree([a, b, c, d])
    assert tree.auth_path(0) == [b, digest(c + d)]
    assert tree.auth_path(3) == [c, digest(a + b)]


@pytest.mark.parametrize("size", [2, 4, 8, 16])
def test_auth_paths_lead_to_root(size):
    leaves = [leaf(i) for i in range(size)]
    tree = MerkleTree(leaves)
    for index, value in enumerate(leaves):
        assert climb(value, index, tree.auth_path(index)) == tree.root


def test_update_leaf_matches_fresh_tree():
    leaves = [leaf(i) for i in range(5)]
    tree = MerkleTree(leaves)
    old_root = tree.root
    tree.update_leaf(2, leaf(99))
    leaves[2] = leaf(99)
    fresh = MerkleTree(leaves)
    assert tree.root == fresh.root
    assert tree.layers == fresh.layers
    assert tree.root != old_root


def test_auth_path_index_out_of_range():
    tree = MerkleTree([leaf(0), leaf(1)])
    with pytest.raises(IndexError):
        tree.auth_path(2)
    with pytest.raises(IndexError):
        tree.auth_path(-1)


def test_update_leaf_index_out_of_range():
    tree = MerkleTree([leaf(0)])
    with pytest.raises(IndexError):
        tree.update_leaf(1, leaf(5))


def test_leaf_size_is_checked():
    with pytest.raises(ValueError):
        MerkleTree([b"short"])
    tree = MerkleTree([leaf(0)])
    with pytest.raises(ValueError):
        tree.update_leaf(0, b"\x00" * 31)