# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for Tree, TreeNode and the tree visitors."""

import pytest

from genro_configuration import PathConflictError, Tree, TreeNode


class TestTreeNode:
    """Tests for TreeNode."""

    def test_create_leaf(self):
        """Test creating a leaf node."""
        node = TreeNode('port', '5432')
        assert node.label == 'port'
        assert node.value == '5432'
        assert node.parent is None
        assert node.is_leaf is True
        assert node.is_branch is False

    def test_leaf_has_no_children(self):
        """Test leaf accessors for children."""
        node = TreeNode('port', '5432')
        assert node.children() == []
        assert node.get_child('x') is None
        assert node.subtree is None

    def test_create_branch(self):
        """Test creating a branch node."""
        node = TreeNode('database', Tree())
        assert node.is_branch is True
        assert node.is_leaf is False
        assert node.value is None
        assert isinstance(node.subtree, Tree)

    def test_repr(self):
        """Test string representation."""
        assert 'port' in repr(TreeNode('port', '5432'))
        assert '5432' in repr(TreeNode('port', '5432'))
        assert 'children=0' in repr(TreeNode('db', Tree()))

    def test_path(self):
        """Test fully qualified path of a nested node."""
        tree = Tree()
        node = tree.insert('a/b/c', '1')
        assert node.path == 'a/b/c'
        assert tree.get_node('a/b').path == 'a/b'

    def test_path_uses_tree_separator(self):
        """Test path is joined with the tree separator."""
        tree = Tree('.')
        node = tree.insert('a.b', '1')
        assert node.path == 'a.b'


class TestTreeInsert:
    """Tests for Tree.insert."""

    def test_insert_creates_branches(self):
        """Test intermediate branches are created."""
        tree = Tree()
        tree.insert('database/host', 'localhost')
        node = tree.get_node('database')
        assert node.is_branch
        assert node.get_child('host').value == 'localhost'

    def test_insert_returns_leaf(self):
        """Test insert returns the leaf node."""
        tree = Tree()
        node = tree.insert('a/b', '1')
        assert node.label == 'b'
        assert node.value == '1'

    def test_insert_stores_strings(self):
        """Test non-string values are stored as strings."""
        tree = Tree()
        tree.insert('port', 5432)
        assert tree['port'] == '5432'

    def test_insert_replaces_leaf_value(self):
        """Test inserting at an existing leaf replaces its value."""
        tree = Tree()
        tree.insert('a/b', '1')
        tree.insert('a/b', '2')
        assert tree['a/b'] == '2'
        assert len(tree.get_node('a').children()) == 1

    def test_insert_below_leaf_raises(self):
        """Test a leaf cannot become a branch."""
        tree = Tree()
        tree.insert('a/b', '1')
        with pytest.raises(PathConflictError, match="is a leaf"):
            tree.insert('a/b/c', '2')

    def test_insert_on_branch_raises(self):
        """Test a branch cannot become a leaf."""
        tree = Tree()
        tree.insert('a/b', '1')
        with pytest.raises(PathConflictError, match="is a branch"):
            tree.insert('a', '2')

    def test_insert_empty_path_raises(self):
        """Test empty path is rejected."""
        with pytest.raises(ValueError, match="Empty path"):
            Tree().insert('', '1')

    def test_insert_ignores_empty_segments(self):
        """Test leading, trailing and doubled separators are ignored."""
        tree = Tree()
        tree.insert('/a//b/', '1')
        assert tree.flatten() == {'a/b': '1'}

    def test_custom_separator(self):
        """Test insert splits on the tree separator."""
        tree = Tree('.')
        tree.insert('a.b/c', '1')
        assert tree.get_node('a').get_child('b/c').value == '1'

    def test_invalid_separator_raises(self):
        """Test separator must be one character."""
        with pytest.raises(ValueError, match="single character"):
            Tree('::')


class TestTreeAccess:
    """Tests for lookups and accessors."""

    def setup_method(self):
        self.tree = Tree.from_map({'a/b': '1', 'a/c': '2', 'd': '3'})

    def test_getitem_leaf(self):
        """Test tree[path] returns a leaf value."""
        assert self.tree['a/b'] == '1'
        assert self.tree['d'] == '3'

    def test_getitem_branch(self):
        """Test tree[path] returns the subtree of a branch."""
        subtree = self.tree['a']
        assert isinstance(subtree, Tree)
        assert subtree.keys() == ['b', 'c']

    def test_getitem_missing_raises(self):
        """Test tree[path] raises KeyError for missing paths."""
        with pytest.raises(KeyError):
            self.tree['a/x']

    def test_get_node_through_leaf_raises(self):
        """Test traversing below a leaf raises KeyError."""
        with pytest.raises(KeyError, match="is a leaf"):
            self.tree.get_node('d/x/y')

    def test_get_value(self):
        """Test get_value returns None for missing and branch paths."""
        assert self.tree.get_value('a/c') == '2'
        assert self.tree.get_value('a') is None
        assert self.tree.get_value('missing/path') is None

    def test_contains(self):
        """Test membership by path."""
        assert 'a' in self.tree
        assert 'a/b' in self.tree
        assert 'a/x' not in self.tree

    def test_len_and_iter(self):
        """Test len and iteration over direct children."""
        assert len(self.tree) == 2
        assert [node.label for node in self.tree] == ['a', 'd']

    def test_get_child_and_children(self):
        """Test direct child accessors."""
        assert self.tree.get_child('a').is_branch
        assert self.tree.get_child('b') is None
        assert [node.label for node in self.tree.children()] == ['a', 'd']

    def test_equality(self):
        """Test trees compare by content."""
        assert self.tree == Tree.from_map({'d': '3', 'a/c': '2', 'a/b': '1'})
        assert self.tree != Tree.from_map({'d': '3'})


class TestTreeTraversal:
    """Tests for accept() and walk()."""

    def test_accept_order_and_dispatch(self):
        """Test depth-first, parent-before-children visiting."""
        calls = []

        class Recorder:
            def visit_branch(self, node, children):
                calls.append(('branch', node.label, [c.label for c in children]))

            def visit_leaf(self, node, value):
                calls.append(('leaf', node.label, value))

        tree = Tree.from_map({'a/b': '1', 'a/c/d': '2', 'e': '3'})
        tree.accept(Recorder())
        assert calls == [
            ('branch', 'a', ['b', 'c']),
            ('leaf', 'b', '1'),
            ('branch', 'c', ['d']),
            ('leaf', 'd', '2'),
            ('leaf', 'e', '3'),
        ]

    def test_walk(self):
        """Test walk yields paths and nodes, parents first."""
        tree = Tree.from_map({'a/b': '1', 'e': '3'})
        assert [path for path, node in tree.walk()] == ['a', 'a/b', 'e']

    def test_dump(self):
        """Test indented debugging dump."""
        tree = Tree.from_map({'a/b': '1', 'c': '2'})
        assert tree.dump() == "a/\n  b = 1\nc = 2"


class TestTreeConversion:
    """Tests for flatten(), from_map() and as_dict()."""

    def test_flatten(self):
        """Test flatten joins ancestor labels."""
        tree = Tree()
        tree.insert('a/b', '1')
        tree.insert('a/c', '2')
        assert tree.flatten() == {'a/b': '1', 'a/c': '2'}

    def test_flatten_subtree_is_relative(self):
        """Test flattening a subtree gives paths below it."""
        tree = Tree.from_map({'a/b/c': '1', 'a/d': '2'})
        assert tree['a'].flatten() == {'b/c': '1', 'd': '2'}

    @pytest.mark.parametrize('separator', ['/', '.', ':'])
    def test_round_trip(self, separator):
        """Test from_map and flatten are inverse."""
        mapping = {
            separator.join(['db', 'host']): 'localhost',
            separator.join(['db', 'pool', 'size']): '10',
            'name': 'app',
        }
        assert Tree.from_map(mapping, separator).flatten() == mapping

    def test_from_map_conflict_raises(self):
        """Test from_map rejects leaf/branch collisions."""
        with pytest.raises(PathConflictError):
            Tree.from_map({'a': '1', 'a/b': '2'})

    def test_empty(self):
        """Test empty map builds an empty tree."""
        tree = Tree.from_map({})
        assert len(tree) == 0
        assert tree.flatten() == {}

    def test_as_dict(self):
        """Test nested dict conversion."""
        tree = Tree.from_map({'a/b': '1', 'c': '2'})
        assert tree.as_dict() == {'a': {'b': '1'}, 'c': '2'}
