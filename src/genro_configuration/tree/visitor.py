# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Visitors for Tree traversal.

Tree.accept() walks depth-first, parent before children, and calls one of
two methods on the visitor depending on the node kind. Visitors only see
nodes through their public accessors.

Example:
    >>> class Printer:
    ...     def visit_branch(self, node, children):
    ...         print('branch', node.label, len(children))
    ...     def visit_leaf(self, node, value):
    ...         print('leaf', node.label, value)
    >>> tree.accept(Printer())
"""

from __future__ import annotations

from typing import Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import Tree
    from .node import TreeNode


class TreeVisitor(Protocol):
    """Two-case callback interface for Tree.accept()."""

    def visit_branch(self, node: TreeNode, children: list[TreeNode]) -> None:
        ...

    def visit_leaf(self, node: TreeNode, value: str) -> None:
        ...


class FlattenVisitor:
    """Collect leaf values keyed by their path below ``root``."""

    def __init__(self, root: Tree | None = None) -> None:
        self.root = root
        self.result: dict[str, str] = {}

    def visit_branch(self, node: TreeNode, children: list[TreeNode]) -> None:
        pass

    def visit_leaf(self, node: TreeNode, value: str) -> None:
        self.result[node.path_from(self.root)] = value


class DumpVisitor:
    """Render the tree as indented text, one node per line."""

    def __init__(self, root: Tree | None = None, indent: str = '  ') -> None:
        self.root = root
        self.indent = indent
        self.lines: list[str] = []

    def _depth(self, node: TreeNode) -> int:
        depth = 0
        tree = node.parent
        while tree is not None and tree is not self.root and tree.parent is not None:
            depth += 1
            tree = tree.parent.parent
        return depth

    def visit_branch(self, node: TreeNode, children: list[TreeNode]) -> None:
        self.lines.append(f"{self.indent * self._depth(node)}{node.label}/")

    def visit_leaf(self, node: TreeNode, value: str) -> None:
        self.lines.append(f"{self.indent * self._depth(node)}{node.label} = {value}")

    def text(self) -> str:
        return '\n'.join(self.lines)
