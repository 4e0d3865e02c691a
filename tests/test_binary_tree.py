import pytest

from dskit.binary_tree import BinaryTree

SAMPLE = "A(B(D,E),C)"
LARGER = "A(B(C,D(E,F)),G)"


@pytest.fixture
def tree():
    return BinaryTree.from_parenthesized(SAMPLE)


@pytest.mark.parametrize("text", [SAMPLE, LARGER, "A", "A(B)", "A(,C)"])
def test_parenthesized_round_trip(text):
    assert BinaryTree.from_parenthesized(text).to_parenthesized() == text


def test_preorder_and_inorder(tree):
    assert "".join(tree.preorder()) == "ABDEC"
    assert "".join(tree.inorder()) == "DBEAC"


def test_build_from_preorder_and_inorder():
    rebuilt = BinaryTree.from_preorder_inorder("ABDEC", "DBEAC")
    assert rebuilt.to_parenthesized() == SAMPLE


@pytest.mark.parametrize("text", [SAMPLE, LARGER])
def test_postorder_agrees_with_rebuilt_tree(text):
    original = BinaryTree.from_parenthesized(text)
    rebuilt = BinaryTree.from_preorder_inorder(
        "".join(original.preorder()), "".join(original.inorder())
    )
    assert rebuilt.postorder() == original.postorder()
    assert original.postorder()[-1] == original.root.value


def test_level_order(tree):
    assert tree.level_order() == list("ABCDE")


@pytest.mark.parametrize("text", [SAMPLE, LARGER])
def test_iterative_preorder_matches_recursive(text):
    built = BinaryTree.from_parenthesized(text)
    assert built.preorder_iterative() == built.preorder()


@pytest.mark.parametrize("text", [SAMPLE, LARGER])
def test_preorder_sequence_round_trip(text):
    built = BinaryTree.from_parenthesized(text)
    sequence = built.preorder_sequence()
    assert sequence.count("#") == built.node_count() + 1
    assert BinaryTree.from_preorder_sequence(sequence).to_parenthesized() == text


def test_find(tree):
    assert tree.find("E").value == "E"
    assert tree.find("Z") is None


def test_height_and_count(tree):
    assert tree.height() == 3
    assert tree.node_count() == len(tree.preorder())


def test_leaves_have_no_children(tree):
    leaves = tree.leaves()
    assert leaves
    for value in leaves:
        node = tree.find(value)
        assert node.left is None and node.right is None
    assert len(leaves) < tree.node_count()


def test_ancestors(tree):
    assert tree.ancestors("E") == ["A", "B"]
    assert tree.ancestors("A") == []
    assert tree.ancestors("Z") == []


@pytest.mark.parametrize("text", [SAMPLE, LARGER])
def test_level_of_matches_ancestor_count(text):
    built = BinaryTree.from_parenthesized(text)
    for value in built.preorder():
        assert built.level_of(value) == len(built.ancestors(value)) + 1
    assert built.level_of("Z") == 0


@pytest.mark.parametrize("text", [SAMPLE, LARGER])
def test_counts_per_level_sum_to_total(text):
    built = BinaryTree.from_parenthesized(text)
    counts = [built.count_at_level(k) for k in range(1, built.height() + 1)]
    assert sum(counts) == built.node_count()
    assert built.count_at_level(1) == 1
    assert built.count_at_level(built.height() + 1) == 0


def test_swap_children_mirrors_tree(tree):
    before = tree.inorder()
    tree.swap_children()
    assert tree.inorder() == before[::-1]
    tree.swap_children()
    assert tree.to_parenthesized() == SAMPLE


def test_sibling(tree):
    assert tree.sibling("D").value == "E"
    assert tree.sibling("C").value == "B"
    assert tree.sibling("A") is None


def test_empty_tree():
    empty = BinaryTree()
    assert empty.height() == 0
    assert empty.preorder() == []
    assert empty.to_parenthesized() == ""
    assert empty.preorder_sequence() == "#"


def test_malformed_bracket_notation_rejected():
    with pytest.raises(ValueError):
        BinaryTree.from_parenthesized("A)")
    with pytest.raises(ValueError):
        BinaryTree.from_parenthesized("A(B")
    with pytest.raises(ValueError):
        BinaryTree.from_parenthesized("(A)")


def test_inconsistent_traversals_rejected():
    with pytest.raises(ValueError):
        BinaryTree.from_preorder_inorder("ABC", "ABD")
    with pytest.raises(ValueError):
        BinaryTree.from_preorder_inorder("AB", "ABC")