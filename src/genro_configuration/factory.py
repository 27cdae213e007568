# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConfigurationFactory - Backend selection by URI.

The URI scheme selects the backend, the rest of the URI tells it where its
data lives::

    file:/etc/app.ini                  INI file /etc/app.ini
    file://etc/app.cfg                 same, authority read as first segment
    json:///etc/app.json               JSON document /etc/app.json
    consul://consul.local:8500/app     Consul agent, key prefix 'app'

Schemes map to constructor callables in a registry owned by the factory.
Additional backends are plugged in with register() without touching the
dispatch::

    factory = default_factory()
    factory.register('memory', lambda uri: MemoryBackend())
    conf = factory.get_configuration('memory:')
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable
from urllib.parse import urlsplit

from .exceptions import BackendDisabledError, IllFormedUriError, UnrecognizedBackendError
from .interface import ConfigurationInterface

logger = logging.getLogger(__name__)

BackendConstructor = Callable[['ParsedUri'], ConfigurationInterface]


@dataclass(frozen=True)
class ParsedUri:
    """Components of a backend URI."""

    uri: str
    scheme: str
    host: str
    port: int | None
    path: str

    @classmethod
    def parse(cls, uri: str) -> ParsedUri:
        """Split uri into its components.

        Raises:
            IllFormedUriError: If the URI has no scheme or an invalid
                authority.
        """
        try:
            parts = urlsplit(uri)
            port = parts.port
        except ValueError as exc:
            raise IllFormedUriError(f"Ill-formed URI '{uri}': {exc}") from exc
        if not parts.scheme:
            raise IllFormedUriError(f"Ill-formed URI '{uri}': missing scheme")
        # keep the case of the host, it may be a directory name
        host = parts.netloc.rpartition('@')[2]
        if port is not None or host.endswith(':'):
            host = host.rpartition(':')[0]
        return cls(
            uri=uri,
            scheme=parts.scheme,
            host=host,
            port=port,
            path=parts.path,
        )

    @property
    def document_path(self) -> str:
        """Filesystem path, rejoining a first segment parsed as host."""
        if self.host:
            return '/' + self.host + self.path
        return self.path


# ==================== Reference Backends ====================


def _file_backend(uri: ParsedUri) -> ConfigurationInterface:
    from .backends.file import FileBackend
    return FileBackend(uri.document_path)


def _json_backend(uri: ParsedUri) -> ConfigurationInterface:
    from .backends.json_file import JsonBackend
    return JsonBackend(uri.document_path)


def _consul_backend(uri: ParsedUri) -> ConfigurationInterface:
    try:
        from .backends.consul import DEFAULT_HOST, DEFAULT_PORT, ConsulBackend
    except ImportError as exc:
        raise BackendDisabledError(
            f"Backend 'consul' not enabled, install genro-configuration[consul]: {exc}"
        ) from exc
    consul = ConsulBackend(uri.host or DEFAULT_HOST, uri.port or DEFAULT_PORT)
    if uri.path.strip('/'):
        consul.set_prefix(uri.path)
    return consul


class ConfigurationFactory:
    """Create ConfigurationInterface instances from URIs.

    Example:
        >>> factory = default_factory()
        >>> conf = factory.get_configuration('file:/etc/app.ini')
        >>> factory.schemes()
        ['consul', 'file', 'json']
    """

    def __init__(self) -> None:
        self._constructors: dict[str, BackendConstructor] = {}

    def register(self, scheme: str, constructor: BackendConstructor) -> None:
        """Register the constructor for a URI scheme, replacing any previous one.

        Args:
            scheme: URI scheme, case-insensitive.
            constructor: Callable receiving the ParsedUri and returning a
                ConfigurationInterface. It raises BackendDisabledError if
                the backend is not available.
        """
        self._constructors[scheme.lower()] = constructor

    def schemes(self) -> list[str]:
        """Return the registered schemes, sorted."""
        return sorted(self._constructors)

    def get_configuration(self, uri: str) -> ConfigurationInterface:
        """Create the backend selected by the scheme of uri.

        Raises:
            IllFormedUriError: If the URI cannot be parsed or has no scheme.
            UnrecognizedBackendError: If no backend is registered for the scheme.
            BackendDisabledError: If the backend is not available.
        """
        parsed = ParsedUri.parse(uri)
        constructor = self._constructors.get(parsed.scheme)
        if constructor is None:
            raise UnrecognizedBackendError(
                f"Unrecognized backend '{parsed.scheme}' in URI '{uri}'"
            )
        logger.debug("Creating '%s' backend for %s", parsed.scheme, uri)
        return constructor(parsed)


def default_factory() -> ConfigurationFactory:
    """Return a factory with the file, json and consul backends registered."""
    factory = ConfigurationFactory()
    factory.register('file', _file_backend)
    factory.register('json', _json_backend)
    factory.register('consul', _consul_backend)
    return factory


def get_configuration(uri: str) -> ConfigurationInterface:
    """Create a backend from uri using the default factory."""
    return default_factory().get_configuration(uri)
