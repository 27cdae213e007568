# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Configuration - Path-addressed access to hierarchical configuration.

One API for configuration stored in INI files, JSON documents or a Consul
key-value store, with scalar get/put and whole-subtree retrieval as a Tree.

Example:
    >>> from genro_configuration import get_configuration
    >>> conf = get_configuration('file:/etc/app.ini')
    >>> conf.get_string('database/host')
    'localhost'
"""

__version__ = "0.1.0"

from .exceptions import (
    BackendDisabledError,
    BackendError,
    ConfigurationError,
    ConversionError,
    IllFormedUriError,
    ParseError,
    PathConflictError,
    UnrecognizedBackendError,
)
from .factory import ConfigurationFactory, ParsedUri, default_factory, get_configuration
from .interface import ConfigurationInterface, KeyValueMap
from .tree import DumpVisitor, FlattenVisitor, Tree, TreeNode, TreeVisitor

__all__ = [
    # Core classes
    "ConfigurationInterface",
    "KeyValueMap",
    "Tree",
    "TreeNode",
    "TreeVisitor",
    "FlattenVisitor",
    "DumpVisitor",
    # Factory
    "ConfigurationFactory",
    "ParsedUri",
    "default_factory",
    "get_configuration",
    # Exceptions
    "ConfigurationError",
    "IllFormedUriError",
    "UnrecognizedBackendError",
    "BackendDisabledError",
    "ParseError",
    "ConversionError",
    "PathConflictError",
    "BackendError",
]
