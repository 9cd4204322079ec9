import io

import pytest

from algolab.bst import SAMPLE_VALUES, BinarySearchTree, main


def test_inorder_is_sorted():
    tree = BinarySearchTree(SAMPLE_VALUES)
    assert list(tree.inorder()) == sorted(SAMPLE_VALUES)


def test_empty_tree():
    tree = BinarySearchTree()
    assert list(tree.inorder()) == []
    assert 1 not in tree


def test_duplicate_insert_is_ignored():
    tree = BinarySearchTree(SAMPLE_VALUES)
    assert tree.insert(6) is False
    assert list(tree.inorder()) == sorted(SAMPLE_VALUES)
    assert tree.insert(5) is True
    assert list(tree.inorder()) == sorted(SAMPLE_VALUES + (5,))


def test_root_level_is_one():
    tree = BinarySearchTree(SAMPLE_VALUES)
    assert tree.level_of(8) == 1


def test_child_levels_follow_parents():
    tree = BinarySearchTree(SAMPLE_VALUES)
    assert tree.level_of(3) == tree.level_of(8) + 1
    assert tree.level_of(14) == tree.level_of(10) + 1
    assert tree.level_of(13) == tree.level_of(14) + 1


def test_level_of_missing_raises():
    tree = BinarySearchTree(SAMPLE_VALUES)
    with pytest.raises(KeyError):
        tree.level_of(99)


def test_contains():
    tree = BinarySearchTree(SAMPLE_VALUES)
    assert all(value in tree for value in SAMPLE_VALUES)
    assert 2 not in tree


def test_main_inserts_new_value(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    expected = " ".join(f"[{v}]" for v in sorted(SAMPLE_VALUES + (5,)))
    assert expected in out


def test_main_reports_duplicate(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("8\n"))
    assert main([]) == 0
    assert "already exists" in capsys.readouterr().out