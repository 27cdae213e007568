# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Consul key-value store backend.

Talks to the Consul HTTP API (``/v1/kv``) through a requests Session. The
prefix is prepended to every key; recursive results are keyed relative to
the prefix::

    conf = ConsulBackend('consul.local', 8500)
    conf.set_prefix('/services/web')
    conf.put_string('listen/port', '8080')   # key services/web/listen/port
    conf.get_recursive_map('listen')         # {'listen/port': '8080'}

Keys are percent-encoded in the request URL, so characters such as
'#', '?' and spaces are part of the key name.

Consul stores a value and children under the same key natively, so this
backend does not enforce the leaf-or-branch rule on put: after
``put_string('a', ...)`` and ``put_string('a/b', ...)`` both keys are
returned by get_recursive_map, while get_recursive raises
PathConflictError since a Tree node cannot be both.
"""

from __future__ import annotations

import base64
import logging
from typing import Any
from urllib.parse import quote

import requests

from ..exceptions import BackendError
from ..interface import KeyValueMap
from .base import BackendBase

logger = logging.getLogger(__name__)

DEFAULT_HOST = 'localhost'
DEFAULT_PORT = 8500
DEFAULT_TIMEOUT = 10.0


class ConsulBackend(BackendBase):
    """Configuration backend for the Consul KV store."""

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Prepare the HTTP session. No request is made until the first call.

        Args:
            host: Consul agent host.
            port: Consul agent HTTP port.
            timeout: Timeout in seconds for every request.
            session: Optional preconfigured requests Session (TLS, auth).
        """
        super().__init__()
        self._base_url = f"http://{host}:{port}/v1/kv/"
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()

    def __repr__(self) -> str:
        return f"ConsulBackend({self._base_url!r})"

    def close(self) -> None:
        self._session.close()

    def _key(self, path: str) -> str:
        return '/'.join(self._full_segments(path))

    def _request(self, method: str, key: str, **kwargs: Any) -> requests.Response:
        url = self._base_url + quote(key, safe='/')
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as exc:
            raise BackendError(f"Consul request {method} {url} failed: {exc}") from exc
        if response.status_code not in (200, 404):
            raise BackendError(
                f"Consul request {method} {url} returned {response.status_code}: "
                f"{response.text.strip()}"
            )
        return response

    # ==================== Interface ====================

    def put_string(self, path: str, value: str) -> None:
        key = self._key(path)
        response = self._request('PUT', key, data=value.encode('utf-8'))
        if response.status_code != 200:
            raise BackendError(f"Consul rejected key '{key}'")
        logger.debug("Put %s", key)

    def get_string(self, path: str) -> str | None:
        key = self._key(path)
        if not key:
            return None
        response = self._request('GET', key, params={'raw': ''})
        if response.status_code == 404:
            return None
        return response.content.decode('utf-8')

    def get_recursive_map(self, path: str) -> KeyValueMap:
        key = self._key(path)
        response = self._request('GET', key, params={'recurse': ''})
        result: KeyValueMap = {}
        if response.status_code == 404:
            return result

        offset = len(self._prefix)
        query = key.split('/') if key else []
        for entry in response.json():
            if entry.get('Value') is None:
                continue
            segments = [part for part in entry['Key'].split('/') if part]
            # recurse matches on string prefix, 'a' also returns 'ab/...'
            if segments[:len(query)] != query or len(segments) <= offset:
                continue
            value = base64.b64decode(entry['Value']).decode('utf-8')
            result[self._join(segments[offset:])] = value
        logger.debug("Fetched %d keys below '%s'", len(result), key)
        return result
