from minicomp.tree import Node, format_tree, print_tree


def _sample():
    root = Node("S")
    a = Node("A")
    a.add_child(Node("EMPTY"))
    root.add_child(a)
    root.add_child(Node("t1", "("))
    return root


def test_add_child_appends_in_order():
    root = Node("S")
    first, second = Node("A"), Node("B")
    root.add_child(first)
    root.add_child(second)
    assert root.children == [first, second]


def test_add_child_ignores_none():
    root = Node("S")
    root.add_child(None)
    assert root.children == []


def test_default_text_is_empty():
    assert Node("B").text == ""


def test_format_tree_layout():
    assert format_tree(_sample()) == "S\n    A\n        EMPTY\n    t1 (\n"


def test_format_tree_with_indent():
    lines = format_tree(_sample(), 2).splitlines()
    assert lines[0] == "  S"
    assert lines[1] == "      A"


def test_format_tree_none_is_empty():
    assert format_tree(None) == ""


def test_format_tree_line_count_matches_nodes():
    assert len(format_tree(_sample()).splitlines()) == 4


def test_print_tree_writes_format(capsys):
    tree = _sample()
    print_tree(tree)
    assert capsys.readouterr().out == format_tree(tree)