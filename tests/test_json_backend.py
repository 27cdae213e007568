# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the JSON document backend."""

import json

import pytest

from genro_configuration import ParseError, PathConflictError
from genro_configuration.backends import JsonBackend

DOCUMENT = {
    'database': {
        'host': 'localhost',
        'port': 5432,
        'debug': True,
        'replicas': ['a', 'b'],
    },
    'name': 'app',
}


@pytest.fixture
def json_path(tmp_path):
    path = tmp_path / 'app.json'
    path.write_text(json.dumps(DOCUMENT))
    return path


class TestJsonBackendGet:
    """Tests for reading values."""

    def test_get_string(self, json_path):
        """Test object lookup."""
        conf = JsonBackend(json_path)
        assert conf.get_string('database/host') == 'localhost'
        assert conf.get_string('name') == 'app'

    def test_non_string_scalars(self, json_path):
        """Test numbers and booleans in JSON notation."""
        conf = JsonBackend(json_path)
        assert conf.get_string('database/port') == '5432'
        assert conf.get_int('database/port') == 5432
        assert conf.get_string('database/debug') == 'true'

    def test_array_index(self, json_path):
        """Test array elements are addressed by index."""
        conf = JsonBackend(json_path)
        assert conf.get_string('database/replicas/1') == 'b'
        assert conf.get_string('database/replicas/5') is None
        assert conf.get_string('database/replicas/x') is None

    def test_missing_and_branches(self, json_path):
        """Test missing paths and objects are absent."""
        conf = JsonBackend(json_path)
        assert conf.get_string('database') is None
        assert conf.get_string('cache/ttl') is None
        assert conf.get_string('name/x') is None

    def test_prefix_and_separator(self, json_path):
        """Test prefix with a custom separator."""
        conf = JsonBackend(json_path)
        conf.set_prefix('/database')
        conf.set_path_separator('.')
        assert conf.get_string('replicas.0') == 'a'


class TestJsonBackendRecursive:
    """Tests for recursive retrieval."""

    def test_recursive_map(self, json_path):
        """Test every scalar below the path is returned."""
        assert JsonBackend(json_path).get_recursive_map('database') == {
            'database/host': 'localhost',
            'database/port': '5432',
            'database/debug': 'true',
            'database/replicas/0': 'a',
            'database/replicas/1': 'b',
        }

    def test_recursive_leaf(self, json_path):
        """Test querying a scalar returns just that key."""
        assert JsonBackend(json_path).get_recursive_map('name') == {'name': 'app'}

    def test_recursive_tree(self, json_path):
        """Test the tree mirrors the document."""
        tree = JsonBackend(json_path).get_recursive('')
        assert tree.keys() == ['database', 'name']
        assert tree['database/replicas/1'] == 'b'

    def test_recursive_with_prefix(self, json_path):
        """Test keys are relative to the prefix."""
        conf = JsonBackend(json_path)
        conf.set_prefix('database')
        assert conf.get_recursive_map('replicas') == {'replicas/0': 'a', 'replicas/1': 'b'}

    def test_recursive_missing(self, json_path):
        """Test a missing path gives an empty map."""
        assert JsonBackend(json_path).get_recursive_map('cache') == {}


class TestJsonBackendPut:
    """Tests for writing values."""

    def test_put_persists(self, json_path):
        """Test puts are written to the file."""
        JsonBackend(json_path).put_string('database/user', 'admin')
        document = json.loads(json_path.read_text())
        assert document['database']['user'] == 'admin'
        assert document['database']['port'] == 5432

    def test_put_creates_objects(self, json_path):
        """Test intermediate objects are created."""
        conf = JsonBackend(json_path)
        conf.put_float('cache/ratio', 0.75)
        assert JsonBackend(json_path).get_float('cache/ratio') == 0.75

    def test_put_array_element(self, json_path):
        """Test existing array elements can be replaced."""
        conf = JsonBackend(json_path)
        conf.put_string('database/replicas/0', 'z')
        assert JsonBackend(json_path).get_string('database/replicas/0') == 'z'

    def test_put_array_out_of_range_raises(self, json_path):
        """Test arrays do not grow on put."""
        with pytest.raises(PathConflictError, match="out of range"):
            JsonBackend(json_path).put_string('database/replicas/9', 'z')

    def test_put_below_scalar_raises(self, json_path):
        """Test a scalar cannot become a branch."""
        with pytest.raises(PathConflictError, match="is a value"):
            JsonBackend(json_path).put_string('name/first', 'x')

    def test_put_on_object_raises(self, json_path):
        """Test an object cannot become a scalar."""
        with pytest.raises(PathConflictError, match="is a branch"):
            JsonBackend(json_path).put_string('database', 'x')

    def test_missing_file_created_on_put(self, tmp_path):
        """Test a missing file is empty until the first put."""
        path = tmp_path / 'new.json'
        conf = JsonBackend(path)
        assert conf.get_recursive_map('') == {}
        conf.put_string('a/b', '1')
        assert json.loads(path.read_text()) == {'a': {'b': '1'}}


class TestJsonBackendErrors:
    """Tests for load errors."""

    def test_malformed_json(self, tmp_path):
        """Test invalid JSON raises ParseError."""
        path = tmp_path / 'bad.json'
        path.write_text('{"a": ')
        with pytest.raises(ParseError, match="line 1"):
            JsonBackend(path)

    def test_top_level_must_be_object(self, tmp_path):
        """Test a top-level array is rejected."""
        path = tmp_path / 'list.json'
        path.write_text('[1, 2]')
        with pytest.raises(ParseError, match="must be an object"):
            JsonBackend(path)
