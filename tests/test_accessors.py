"""
Tests for generated accessors

Tests which public operations each access mode exposes.
"""

import pytest

from easy_attrs import AccessMode
from easy_attrs.accessors import HiddenField, build_accessor


class TestBuildAccessor:
    """Test the descriptors produced per access mode"""

    def test_read_only_has_getter_only(self):
        accessor = build_accessor("id", AccessMode.READ_ONLY)
        assert accessor.fget is not None
        assert accessor.fset is None

    def test_write_only_has_setter_only(self):
        accessor = build_accessor("id", AccessMode.WRITE_ONLY)
        assert accessor.fget is None
        assert accessor.fset is not None

    def test_read_write_has_both(self):
        accessor = build_accessor("id", AccessMode.READ_WRITE)
        assert accessor.fget is not None
        assert accessor.fset is not None

    def test_internal_only_is_hidden(self):
        assert isinstance(build_accessor("id", AccessMode.INTERNAL_ONLY), HiddenField)


class TestReaders:
    """Test fields declared with `readers`"""

    def test_reflects_storage(self, dummy_class):
        instance = dummy_class({"id": 7})
        assert instance.id == 7

    def test_unset_reads_none(self, dummy_class):
        assert dummy_class().id is None

    def test_cannot_be_written(self, dummy_class):
        instance = dummy_class({"id": 7})
        with pytest.raises(AttributeError):
            instance.id = 8
        assert instance.id == 7


class TestWriters:
    """Test fields declared with `writers`"""

    def test_cannot_be_read(self, dummy_class):
        instance = dummy_class({"special_flag": True})
        assert not hasattr(instance, "special_flag")

    def test_write_reaches_storage(self, dummy_class):
        instance = dummy_class()
        instance.special_flag = False
        assert instance._read("special_flag") is False


class TestAccessors:
    """Test fields declared with `accessors`"""

    def test_read_and_write(self, dummy_class):
        instance = dummy_class({"name": "before"})
        assert instance.name == "before"
        instance.name = "after"
        assert instance.name == "after"
        assert instance._storage["name"] == "after"


class TestInternalOnly:
    """Test fields declared with `internal_only`"""

    def test_no_public_read(self, dummy_class):
        instance = dummy_class({"data_needing_transformation": {"a": 1}})
        assert not hasattr(instance, "data_needing_transformation")

    def test_no_public_write(self, dummy_class):
        instance = dummy_class({"data_needing_transformation": {"a": 1}})
        with pytest.raises(AttributeError):
            instance.data_needing_transformation = {}
        assert instance._read("data_needing_transformation") == {"a": 1}

    def test_storage_populated_from_input(self, dummy_class):
        instance = dummy_class({"dataNeedingTransformation": {"a": 1}})
        assert instance._storage["data_needing_transformation"] == {"a": 1}

    def test_own_methods_can_use_it(self, item_class):
        item = item_class({"nested_data": {"elements": ["a", "b"]}})
        assert item.elements() == ["A", "B"]
