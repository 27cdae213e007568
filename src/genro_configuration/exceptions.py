# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Configuration exceptions."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Base exception for configuration errors."""

    pass


class IllFormedUriError(ConfigurationError):
    """Raised when a backend URI cannot be parsed or has no scheme."""

    pass


class UnrecognizedBackendError(ConfigurationError):
    """Raised when no backend is registered for a URI scheme."""

    pass


class BackendDisabledError(ConfigurationError):
    """Raised when a registered backend is not available in this installation."""

    pass


class ParseError(ConfigurationError):
    """Raised when a source document is malformed."""

    pass


class ConversionError(ConfigurationError):
    """Raised when a stored value cannot be converted to the requested type."""

    pass


class PathConflictError(ConfigurationError):
    """Raised when a path would turn a leaf into a branch or vice versa."""

    pass


class BackendError(ConfigurationError):
    """Raised on backend I/O or connection failures."""

    pass
