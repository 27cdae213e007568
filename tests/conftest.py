# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures: an in-memory backend built on BackendBase."""

import pytest

from genro_configuration.backends import BackendBase


class DictBackend(BackendBase):
    """Backend storing '/'-joined keys in a dict."""

    def __init__(self):
        super().__init__()
        self.data = {}

    def put_string(self, path, value):
        self.data['/'.join(self._full_segments(path))] = value

    def get_string(self, path):
        return self.data.get('/'.join(self._full_segments(path)))

    def get_recursive_map(self, path):
        query = self._full_segments(path)
        offset = len(self._prefix)
        result = {}
        for key, value in self.data.items():
            segments = key.split('/')
            if segments[:len(query)] == query and len(segments) > offset:
                result[self._join(segments[offset:])] = value
        return result


@pytest.fixture
def backend():
    return DictBackend()
