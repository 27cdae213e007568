# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConfigurationInterface - Contract shared by every configuration backend.

Backends implement a small mandatory surface of string operations, prefix
and separator handling, and recursive retrieval. Numeric put/get, existence
checks and the typed ``put``/``get`` helpers have default implementations
built on the string operations, because most backends store strings anyway.

Path rules:
    - Paths given to put/get use the instance's current separator,
      '/' unless changed with set_path_separator()
    - The prefix given to set_prefix() always uses '/'
    - A missing key is not an error: scalar getters return None and
      recursive getters return an empty Tree or dict

Example:
    >>> conf = get_configuration('json:///etc/app.json')
    >>> conf.put_int('server/port', 8080)
    >>> conf.get_int('server/port')
    8080
    >>> conf.set_path_separator('.')
    >>> conf.get_string('server.port')
    '8080'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .exceptions import ConversionError
from .tree import Tree

KeyValueMap = dict[str, str]

DEFAULT_SEPARATOR = '/'


class ConfigurationInterface(ABC):
    """Abstract access contract for configuration backends."""

    # ==================== Mandatory API ====================

    @abstractmethod
    def put_string(self, path: str, value: str) -> None:
        """Store a string value at path."""

    @abstractmethod
    def get_string(self, path: str) -> str | None:
        """Return the string value at path, or None if there is none."""

    @abstractmethod
    def set_prefix(self, prefix: str) -> None:
        """Prepend ``prefix`` ('/'-separated) to every subsequent path.

        The way the prefix is applied is backend-dependent and may not be
        a trivial call.
        """

    @abstractmethod
    def set_path_separator(self, separator: str) -> None:
        """Use ``separator`` for the paths of subsequent put/get calls.

        Prefixes and URIs keep using '/'.
        """

    @abstractmethod
    def reset_path_separator(self) -> None:
        """Restore the default '/' separator."""

    @abstractmethod
    def get_recursive(self, path: str) -> Tree:
        """Return every value at or below path as a Tree."""

    @abstractmethod
    def get_recursive_map(self, path: str) -> KeyValueMap:
        """Return every value at or below path as a ``{path: value}`` dict."""

    # ==================== Numeric Conversions ====================

    def put_int(self, path: str, value: int) -> None:
        """Store an integer, formatted as a string."""
        self.put_string(path, str(value))

    def put_float(self, path: str, value: float) -> None:
        """Store a float, formatted so that it parses back to the same value."""
        self.put_string(path, repr(float(value)))

    def get_int(self, path: str) -> int | None:
        """Return the integer at path, or None if there is none.

        Raises:
            ConversionError: If the stored string is not an integer.
        """
        raw = self.get_string(path)
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            raise ConversionError(f"Value at '{path}' is not an integer: {raw!r}") from None

    def get_float(self, path: str) -> float | None:
        """Return the float at path, or None if there is none.

        Raises:
            ConversionError: If the stored string is not a number.
        """
        raw = self.get_string(path)
        if raw is None:
            return None
        try:
            return float(raw)
        except ValueError:
            raise ConversionError(f"Value at '{path}' is not a number: {raw!r}") from None

    def exists(self, path: str) -> bool:
        """Check if a value exists at path.

        This is not a cheap call for every backend: it may cost as much as a
        full get, and the answer can be stale by the time a following get
        runs. Prefer checking the None result of a getter over an
        "if exists, then get" pattern.
        """
        return self.get_string(path) is not None

    # ==================== Typed Helpers ====================

    def put(self, path: str, value: Any) -> None:
        """Store a str, int or float, dispatching on the value type.

        Raises:
            TypeError: For any other value type.
        """
        if isinstance(value, str):
            self.put_string(path, value)
        elif isinstance(value, bool):
            raise TypeError("Cannot put a bool, use put_string() or put_int()")
        elif isinstance(value, int):
            self.put_int(path, value)
        elif isinstance(value, float):
            self.put_float(path, value)
        else:
            raise TypeError(f"Cannot put a value of type {type(value).__name__}")

    def get(self, path: str, type_: type = str) -> Any:
        """Return the value at path converted to ``type_`` (str, int or float).

        Example:
            >>> conf.get('server/port', int)
            8080
        """
        if type_ is str:
            return self.get_string(path)
        if type_ is int:
            return self.get_int(path)
        if type_ is float:
            return self.get_float(path)
        raise TypeError(f"Unsupported type: {type_.__name__}")

    # ==================== Resources ====================

    def close(self) -> None:
        """Release resources held by the backend."""

    def __enter__(self) -> ConfigurationInterface:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
