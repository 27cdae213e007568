# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Configuration backends.

Available backends:
- file: INI files (.ini, .cfg)
- json_file: JSON documents
- consul: Consul KV store (requires requests)

The consul backend is not imported here so that the package stays usable
without its client library; the factory imports it on demand.
"""

from .base import BackendBase
from .file import FileBackend
from .json_file import JsonBackend

__all__ = [
    'BackendBase',
    'FileBackend',
    'JsonBackend',
]
