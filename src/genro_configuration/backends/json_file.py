# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""JSON document backend.

Objects are branches and their keys are path segments; array elements are
addressed by their index::

    {"database": {"host": "localhost", "port": 5432, "replicas": ["a", "b"]}}

    conf.get_string('database/host')        # 'localhost'
    conf.get_string('database/port')        # '5432'
    conf.get_string('database/replicas/1')  # 'b'

Non-string scalars are reported in JSON notation ('5432', 'true', 'null').
Puts always store strings. A missing file is treated as an empty document
and created by the first put.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator

from ..exceptions import BackendError, ParseError, PathConflictError
from ..interface import KeyValueMap
from .base import BackendBase

logger = logging.getLogger(__name__)

_MISSING = object()


def _scalar_to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _iter_children(container: Any) -> Iterator[tuple[str, Any]]:
    if isinstance(container, dict):
        yield from container.items()
    elif isinstance(container, list):
        for index, item in enumerate(container):
            yield str(index), item


def _child(container: Any, segment: str) -> Any:
    """Return the child of an object or array, or _MISSING."""
    if isinstance(container, dict):
        return container.get(segment, _MISSING)
    if isinstance(container, list):
        try:
            index = int(segment)
        except ValueError:
            return _MISSING
        if 0 <= index < len(container):
            return container[index]
    return _MISSING


class JsonBackend(BackendBase):
    """Configuration backend for JSON documents."""

    def __init__(self, path: str | Path, encoding: str = 'utf-8') -> None:
        """Load the JSON document at path.

        Raises:
            BackendError: If the file cannot be read.
            ParseError: If the file is not JSON or its top level is not
                an object.
        """
        super().__init__()
        self._path = Path(path)
        self._encoding = encoding
        self._document: dict[str, Any] = {}
        self._load()

    def __repr__(self) -> str:
        return f"JsonBackend({str(self._path)!r})"

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            logger.debug("File %s does not exist, starting empty", self._path)
            return
        try:
            with self._path.open(encoding=self._encoding) as fh:
                document = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ParseError(f"{exc.msg} in {self._path} line {exc.lineno}") from exc
        except OSError as exc:
            raise BackendError(f"Cannot read {self._path}: {exc}") from exc
        if not isinstance(document, dict):
            raise ParseError(f"Top level of {self._path} must be an object")
        self._document = document
        logger.debug("Loaded %s", self._path)

    def _save(self) -> None:
        try:
            with self._path.open('w', encoding=self._encoding) as fh:
                json.dump(self._document, fh, indent=2)
                fh.write('\n')
        except OSError as exc:
            raise BackendError(f"Cannot write {self._path}: {exc}") from exc

    def _resolve(self, segments: list[str]) -> Any:
        current: Any = self._document
        for segment in segments:
            current = _child(current, segment)
            if current is _MISSING:
                break
        return current

    # ==================== Interface ====================

    def put_string(self, path: str, value: str) -> None:
        segments = self._full_segments(path)
        if not segments:
            raise PathConflictError("Cannot put a value on the document root")

        current: Any = self._document
        for i, segment in enumerate(segments[:-1]):
            child = _child(current, segment)
            if child is _MISSING:
                if not isinstance(current, dict):
                    raise PathConflictError(
                        f"Cannot create '{segment}' inside an array at '{path}'"
                    )
                child = current[segment] = {}
            elif not isinstance(child, (dict, list)):
                leaf = '/'.join(segments[:i + 1])
                raise PathConflictError(f"'{leaf}' is a value, cannot put '{path}' below it")
            current = child

        label = segments[-1]
        existing = _child(current, label)
        if isinstance(existing, (dict, list)):
            raise PathConflictError(f"'{path}' is a branch, cannot set a value on it")
        if isinstance(current, list):
            if existing is _MISSING:
                raise PathConflictError(f"Index '{label}' out of range at '{path}'")
            current[int(label)] = value
        else:
            current[label] = value
        logger.debug("Put %s in %s", '/'.join(segments), self._path)
        self._save()

    def get_string(self, path: str) -> str | None:
        found = self._resolve(self._full_segments(path))
        if found is _MISSING or isinstance(found, (dict, list)):
            return None
        return _scalar_to_string(found)

    def get_recursive_map(self, path: str) -> KeyValueMap:
        relative = self._segments(path)
        found = self._resolve(self._prefix + relative)
        result: KeyValueMap = {}
        if found is _MISSING:
            return result

        def _collect(node: Any, segments: list[str]) -> None:
            if isinstance(node, (dict, list)):
                for key, child in _iter_children(node):
                    _collect(child, segments + [key])
            elif segments:
                result[self._join(segments)] = _scalar_to_string(node)

        _collect(found, relative)
        return result
