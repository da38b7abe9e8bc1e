import io

from algoprobs.tree import TreeNode, connect_tree_nodes, describe_node, print_tree


def test_add_child_keeps_order():
    root = TreeNode(1)
    a, b = TreeNode(2), TreeNode(3)
    root.add_child(a)
    root.add_child(b)
    assert root.children == [a, b]


def test_connect_tree_nodes():
    parent, child = TreeNode(1), TreeNode(2)
    connect_tree_nodes(parent, child)
    assert parent.children == [child]


def test_connect_without_parent_does_nothing():
    child = TreeNode(2)
    connect_tree_nodes(None, child)
    assert child.children == []


def test_describe_node_lists_children():
    root = TreeNode(1)
    connect_tree_nodes(root, TreeNode(2))
    connect_tree_nodes(root, TreeNode(3))
    assert describe_node(root) == (
        "value of this node is: 1.\n"
        "its children is as the following:\n"
        "2\t3\t\n\n"
    )


def test_describe_missing_node():
    assert describe_node(None) == "this node is None.\n\n"


def test_print_tree_preorder():
    root, a, b, c = TreeNode(1), TreeNode(2), TreeNode(3), TreeNode(4)
    connect_tree_nodes(root, a)
    connect_tree_nodes(root, b)
    connect_tree_nodes(a, c)
    out = io.StringIO()
    print_tree(root, out)
    expected = "".join(describe_node(n) for n in (root, a, c, b))
    assert out.getvalue() == expected


def test_print_tree_empty():
    out = io.StringIO()
    print_tree(None, out)
    assert out.getvalue() == describe_node(None)