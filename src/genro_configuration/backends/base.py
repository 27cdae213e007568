# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared separator and prefix handling for backends."""

from __future__ import annotations

from ..interface import DEFAULT_SEPARATOR, ConfigurationInterface
from ..tree import Tree


class BackendBase(ConfigurationInterface):
    """ConfigurationInterface with the per-instance path state implemented.

    Backends work on lists of path segments: ``_segments(path)`` turns an
    operation path into segments below the prefix, ``_join(segments)``
    turns segments back into a key using the current separator.
    get_recursive() is derived from get_recursive_map().
    """

    def __init__(self) -> None:
        self._separator = DEFAULT_SEPARATOR
        self._prefix: list[str] = []

    # ==================== Path State ====================

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def prefix(self) -> str:
        return DEFAULT_SEPARATOR.join(self._prefix)

    def set_prefix(self, prefix: str) -> None:
        self._prefix = [part for part in prefix.split(DEFAULT_SEPARATOR) if part]

    def set_path_separator(self, separator: str) -> None:
        if len(separator) != 1:
            raise ValueError(f"Separator must be a single character, got {separator!r}")
        self._separator = separator

    def reset_path_separator(self) -> None:
        self._separator = DEFAULT_SEPARATOR

    def _segments(self, path: str) -> list[str]:
        """Split an operation path, without the prefix."""
        return [part for part in path.split(self._separator) if part]

    def _full_segments(self, path: str) -> list[str]:
        """Split an operation path and prepend the prefix."""
        return self._prefix + self._segments(path)

    def _join(self, segments: list[str]) -> str:
        return self._separator.join(segments)

    # ==================== Recursive ====================

    def get_recursive(self, path: str) -> Tree:
        return Tree.from_map(self.get_recursive_map(path), self._separator)
