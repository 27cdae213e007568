# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree node class."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import Tree


class TreeNode:
    """A node in a configuration Tree.

    A node is exactly one of:
    - leaf: holds a scalar string value
    - branch: holds a child Tree

    Each node has:
    - label: The node's unique name within its parent
    - parent: Reference to the containing Tree

    Example:
        >>> node = TreeNode('port', '5432')
        >>> node.label
        'port'
        >>> node.value
        '5432'
    """

    __slots__ = ('label', '_content', 'parent')

    def __init__(
        self,
        label: str,
        content: str | Tree,
        parent: Tree | None = None,
    ) -> None:
        """Initialize a TreeNode.

        Args:
            label: The node's name within its parent.
            content: A scalar string (leaf) or a Tree (branch).
            parent: The Tree containing this node.
        """
        self.label = label
        self._content = content
        self.parent = parent

    def __repr__(self) -> str:
        if self.is_branch:
            return f"TreeNode({self.label!r}, children={len(self._content)})"
        return f"TreeNode({self.label!r}, value={self._content!r})"

    @property
    def is_branch(self) -> bool:
        """True if this node contains a child Tree."""
        from .core import Tree
        return isinstance(self._content, Tree)

    @property
    def is_leaf(self) -> bool:
        """True if this node contains a scalar value."""
        return not self.is_branch

    @property
    def value(self) -> str | None:
        """The scalar value, or None for a branch node."""
        if self.is_branch:
            return None
        return self._content

    @property
    def subtree(self) -> Tree | None:
        """The child Tree, or None for a leaf node."""
        if self.is_branch:
            return self._content
        return None

    def children(self) -> list[TreeNode]:
        """Direct children of a branch (empty for a leaf)."""
        if self.is_branch:
            return self._content.children()
        return []

    def get_child(self, label: str) -> TreeNode | None:
        """Return the direct child with the given label, or None."""
        if self.is_branch:
            return self._content.get_child(label)
        return None

    @property
    def path(self) -> str:
        """Fully qualified path of this node from the root Tree."""
        return self.path_from(None)

    def path_from(self, root: Tree | None) -> str:
        """Path of this node relative to an ancestor Tree (None for the root)."""
        labels = [self.label]
        tree = self.parent
        while tree is not None and tree is not root and tree.parent is not None:
            labels.append(tree.parent.label)
            tree = tree.parent.parent
        separator = tree.separator if tree is not None else '/'
        return separator.join(reversed(labels))
