# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""INI file backend.

Maps paths onto INI sections and options: the first segment (after the
prefix) is the section, the remaining segments joined with '/' form the
option name::

    [database]
    host = localhost
    pool/size = 10

    conf.get_string('database/host')       # 'localhost'
    conf.get_string('database/pool/size')  # '10'

Files are read with configparser, without interpolation and with
case-sensitive option names. ``[DEFAULT]`` is an ordinary section: its
values live under ``DEFAULT/...`` and are not inherited by other sections.
A missing file is treated as an empty document and created by the first put.

Leading and trailing whitespace of values is not preserved on disk: a
value put as ``'  padded '`` reads back as ``'padded'`` once the file is
loaded again.
"""

from __future__ import annotations

import configparser
import logging
from pathlib import Path

from ..exceptions import BackendError, ParseError, PathConflictError
from ..interface import KeyValueMap
from .base import BackendBase

logger = logging.getLogger(__name__)

SUFFIXES = ('.ini', '.cfg')

# no header can name it, so [DEFAULT] parses as a plain section
_NO_DEFAULT_SECTION = '\x00'


class FileBackend(BackendBase):
    """Configuration backend for ``.ini`` and ``.cfg`` files."""

    def __init__(self, path: str | Path, encoding: str = 'utf-8') -> None:
        """Load the file at path.

        Args:
            path: Filesystem path; its suffix selects the parser.
            encoding: Text encoding used to read and write the file.

        Raises:
            BackendError: If the suffix is not supported or the file
                cannot be read.
            ParseError: If the file is not valid INI.
        """
        super().__init__()
        self._path = Path(path)
        self._encoding = encoding
        if self._path.suffix.lower() not in SUFFIXES:
            raise BackendError(
                f"Unsupported file type '{self._path.suffix}' for {self._path}, "
                f"expected one of {', '.join(SUFFIXES)}"
            )
        self._parser = configparser.ConfigParser(
            interpolation=None, default_section=_NO_DEFAULT_SECTION
        )
        self._parser.optionxform = str
        self._load()

    def __repr__(self) -> str:
        return f"FileBackend({str(self._path)!r})"

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            logger.debug("File %s does not exist, starting empty", self._path)
            return
        try:
            with self._path.open(encoding=self._encoding) as fh:
                self._parser.read_file(fh, source=str(self._path))
        except configparser.Error as exc:
            raise ParseError(str(exc)) from exc
        except OSError as exc:
            raise BackendError(f"Cannot read {self._path}: {exc}") from exc
        logger.debug("Loaded %d sections from %s", len(self._parser.sections()), self._path)

    def _save(self) -> None:
        try:
            with self._path.open('w', encoding=self._encoding) as fh:
                self._parser.write(fh)
        except OSError as exc:
            raise BackendError(f"Cannot write {self._path}: {exc}") from exc

    def _locate(self, path: str) -> tuple[str, str] | None:
        """Return (section, option) for path, or None if it names a section."""
        segments = self._full_segments(path)
        if len(segments) < 2:
            return None
        return segments[0], '/'.join(segments[1:])

    # ==================== Interface ====================

    def put_string(self, path: str, value: str) -> None:
        location = self._locate(path)
        if location is None:
            raise PathConflictError(f"'{path}' names a section, not a value")
        section, option = location

        if self._parser.has_section(section):
            existing_options = self._parser.options(section)
        else:
            existing_options = []

        for existing in existing_options:
            if existing.startswith(option + '/') or option.startswith(existing + '/'):
                raise PathConflictError(f"'{path}' conflicts with '{section}/{existing}'")

        if not self._parser.has_section(section):
            self._parser.add_section(section)
        self._parser.set(section, option, value)
        logger.debug("Put [%s] %s in %s", section, option, self._path)
        self._save()

    def get_string(self, path: str) -> str | None:
        location = self._locate(path)
        if location is None:
            return None
        section, option = location
        return self._parser.get(section, option, fallback=None)

    def get_recursive_map(self, path: str) -> KeyValueMap:
        query = self._full_segments(path)
        offset = len(self._prefix)
        result: KeyValueMap = {}
        for section in self._parser.sections():
            for option, value in self._parser.items(section, raw=True):
                segments = [section] + [part for part in option.split('/') if part]
                if segments[:len(query)] != query or len(segments) <= offset:
                    continue
                result[self._join(segments[offset:])] = value
        return result
