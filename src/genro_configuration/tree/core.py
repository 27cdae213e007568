# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree - In-memory representation of a configuration subtree.

A Tree holds the result of a recursive configuration query. It is the
hierarchical dual of a flat key-value map: every Tree flattens to exactly
one ``{path: value}`` dict and every well-formed map builds exactly one Tree,
given a fixed separator.

Key Features:
    - **Tagged nodes**: each TreeNode is either a leaf (string value) or a
      branch (child Tree), never both
    - **O(1) lookup**: dict-based storage of direct children
    - **Path navigation**: separator-delimited paths ('a/b/c')
    - **Visitor traversal**: depth-first, parent before children

Example:
    Basic usage::

        tree = Tree()
        tree.insert('database/host', 'localhost')
        tree.insert('database/port', '5432')

        print(tree['database/host'])  # 'localhost'
        print(tree.flatten())  # {'database/host': 'localhost', ...}

        same = Tree.from_map({'a.b': '1'}, separator='.')
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from ..exceptions import PathConflictError
from .node import TreeNode
from .visitor import DumpVisitor, FlattenVisitor, TreeVisitor


class Tree:
    """A hierarchical configuration container.

    Tree provides:
    - insert(path, value): Create leaves, with intermediate branches
    - get_node(path) / tree[path]: Navigate by path
    - accept(visitor) / walk(): Depth-first traversal
    - flatten() / from_map(): Conversion to and from key-value maps

    Attributes:
        separator: Path separator used by insert, lookups and flatten.
        parent: The TreeNode that contains this tree as its subtree,
            or None if this is a root tree.
    """

    __slots__ = ('_nodes', 'separator', 'parent')

    def __init__(self, separator: str = '/', parent: TreeNode | None = None) -> None:
        """Initialize an empty Tree.

        Args:
            separator: Single-character path separator.
            parent: The TreeNode that contains this tree as its subtree.

        Raises:
            ValueError: If separator is not a single character.
        """
        if len(separator) != 1:
            raise ValueError(f"Separator must be a single character, got {separator!r}")
        self._nodes: dict[str, TreeNode] = {}
        self.separator = separator
        self.parent = parent

    @classmethod
    def from_map(cls, mapping: Mapping[str, Any], separator: str = '/') -> Tree:
        """Build a Tree from a flat ``{path: value}`` mapping.

        Args:
            mapping: Fully qualified paths mapped to scalar values.
            separator: Separator used in the mapping keys.

        Raises:
            PathConflictError: If two keys collide as leaf and branch.

        Example:
            >>> Tree.from_map({'a/b': '1', 'a/c': '2'})['a/c']
            '2'
        """
        tree = cls(separator)
        for path, value in mapping.items():
            tree.insert(path, value)
        return tree

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"Tree({list(self._nodes.keys())})"

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[TreeNode]:
        """Iterate over direct child nodes."""
        return iter(list(self._nodes.values()))

    def __contains__(self, path: str) -> bool:
        """True if a node exists at the given path."""
        try:
            self.get_node(path)
            return True
        except KeyError:
            return False

    def __getitem__(self, path: str) -> str | Tree:
        """Return the value of a leaf or the subtree of a branch.

        Raises:
            KeyError: If path not found.
        """
        node = self.get_node(path)
        if node.is_branch:
            return node.subtree
        return node.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    __hash__ = None

    # ==================== Path Utilities ====================

    def _split(self, path: str) -> list[str]:
        """Split a path into its non-empty segments."""
        return [part for part in path.split(self.separator) if part]

    def _new_branch(self, label: str) -> TreeNode:
        child_tree = Tree(self.separator)
        node = TreeNode(label, child_tree, parent=self)
        child_tree.parent = node
        self._nodes[label] = node
        return node

    # ==================== Core API ====================

    def insert(self, path: str, value: Any) -> TreeNode:
        """Set a scalar value at path, creating intermediate branches.

        Args:
            path: Separator-delimited path of the leaf.
            value: Scalar value, stored as a string.

        Returns:
            The leaf TreeNode.

        Raises:
            ValueError: If path has no segments.
            PathConflictError: If a leaf lies along the path, or the
                terminal node is a branch.
        """
        parts = self._split(path)
        if not parts:
            raise ValueError("Empty path")

        current = self
        for i, part in enumerate(parts[:-1]):
            node = current._nodes.get(part)
            if node is None:
                node = current._new_branch(part)
            elif node.is_leaf:
                leaf_path = self.separator.join(parts[:i + 1])
                raise PathConflictError(
                    f"'{leaf_path}' is a leaf, cannot insert '{path}' below it"
                )
            current = node.subtree

        label = parts[-1]
        node = current._nodes.get(label)
        if node is not None and node.is_branch:
            raise PathConflictError(f"'{path}' is a branch, cannot set a value on it")
        if node is None:
            node = TreeNode(label, str(value), parent=current)
            current._nodes[label] = node
        else:
            node._content = str(value)
        return node

    def get_node(self, path: str) -> TreeNode:
        """Get node at the given path.

        Raises:
            KeyError: If path not found.
        """
        parts = self._split(path)
        if not parts:
            raise KeyError("Empty path")

        current = self
        for i, part in enumerate(parts[:-1]):
            node = current._nodes.get(part)
            if node is None:
                raise KeyError(f"Path segment '{part}' not found")
            if node.is_leaf:
                remaining = self.separator.join(parts[i + 1:])
                raise KeyError(f"'{part}' is a leaf, cannot access '{remaining}'")
            current = node.subtree
        try:
            return current._nodes[parts[-1]]
        except KeyError:
            raise KeyError(f"Path segment '{parts[-1]}' not found") from None

    def get_value(self, path: str) -> str | None:
        """Return the scalar value at path, or None if missing or a branch."""
        try:
            return self.get_node(path).value
        except KeyError:
            return None

    def get_child(self, label: str) -> TreeNode | None:
        """Return the direct child with the given label, or None."""
        return self._nodes.get(label)

    def children(self) -> list[TreeNode]:
        """Return the direct child nodes."""
        return list(self._nodes.values())

    def keys(self) -> list[str]:
        """Return the labels of the direct children."""
        return list(self._nodes.keys())

    # ==================== Traversal ====================

    def accept(self, visitor: TreeVisitor) -> None:
        """Walk depth-first, parent before children, dispatching on node kind.

        Args:
            visitor: Object with visit_branch(node, children) and
                visit_leaf(node, value) methods.
        """
        for node in self._nodes.values():
            if node.is_branch:
                visitor.visit_branch(node, node.children())
                node.subtree.accept(visitor)
            else:
                visitor.visit_leaf(node, node.value)

    def walk(self) -> Iterator[tuple[str, TreeNode]]:
        """Yield ``(path, node)`` tuples depth-first, parents first.

        Example:
            >>> for path, node in tree.walk():
            ...     print(path, node.value)
        """
        def _walk_gen(tree: Tree, prefix: str) -> Iterator[tuple[str, TreeNode]]:
            for node in tree._nodes.values():
                path = f"{prefix}{self.separator}{node.label}" if prefix else node.label
                yield path, node
                if node.is_branch:
                    yield from _walk_gen(node.subtree, path)

        return _walk_gen(self, '')

    # ==================== Conversion ====================

    def flatten(self) -> dict[str, str]:
        """Return the ``{path: value}`` map of every leaf."""
        visitor = FlattenVisitor(self)
        self.accept(visitor)
        return visitor.result

    def as_dict(self) -> dict[str, Any]:
        """Convert to a nested plain dict (branches become dicts)."""
        result: dict[str, Any] = {}
        for node in self._nodes.values():
            if node.is_branch:
                result[node.label] = node.subtree.as_dict()
            else:
                result[node.label] = node.value
        return result

    def dump(self, indent: str = '  ') -> str:
        """Render the tree as indented text for debugging."""
        visitor = DumpVisitor(self, indent)
        self.accept(visitor)
        return visitor.text()
