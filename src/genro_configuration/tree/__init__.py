# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree package - Hierarchical view of a configuration subtree.

The package is organized into:
- core: Tree container with insertion, path lookup, traversal and flattening
- node: TreeNode, a leaf (scalar value) or a branch (child Tree)
- visitor: Two-case visitor protocol and the built-in visitors

Example:
    >>> from genro_configuration import Tree
    >>> tree = Tree.from_map({'db/host': 'localhost', 'db/port': '5432'})
    >>> tree['db/port']
    '5432'
"""

from .core import Tree
from .node import TreeNode
from .visitor import DumpVisitor, FlattenVisitor, TreeVisitor

__all__ = ["Tree", "TreeNode", "TreeVisitor", "FlattenVisitor", "DumpVisitor"]
