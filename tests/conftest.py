"""
Pytest configuration and fixtures for easy_attrs tests
"""

import pytest

from easy_attrs import EasyAttrs, FieldRegistry


@pytest.fixture
def field_registry():
    """A registry isolated from the one EasyAttrs uses"""
    return FieldRegistry()


@pytest.fixture
def item_class():
    """The item from the package docs: public, write-capable and internal fields"""

    class Item(EasyAttrs, readers=("id", "category"), accessors=("name",), internal_only=("nested_data",)):
        def elements(self):
            return [e.upper() for e in self._read("nested_data")["elements"]]

    return Item


@pytest.fixture
def dummy_class():
    """One field per access mode"""

    class Dummy(EasyAttrs):
        pass

    Dummy.readers("id")
    Dummy.writers("special_flag")
    Dummy.accessors("name", "price")
    Dummy.instance_variables_only("data_needing_transformation")
    return Dummy


@pytest.fixture
def attributes():
    return {
        "id": 1,
        "special_flag": True,
        "name": "dummy",
        "price": 45,
        "data_needing_transformation": {
            "nested_coconuts": {"non_nested_coconuts": 5},
        },
        "totally_irrelevant_key": {"booooh": True},
    }


@pytest.fixture
def camel_attributes():
    return {
        "Id": 1,
        "SpecialFlag": True,
        "Name": "dummy",
        "Price": 45,
        "DataNeedingTransformation": {
            "NestedCoconuts": {"NonNestedCoconuts": 5},
        },
        "TotallyIrrelevantKey": {"Booooh": True},
    }


@pytest.fixture
def expected_storage():
    return {
        "id": 1,
        "special_flag": True,
        "name": "dummy",
        "price": 45,
        "data_needing_transformation": {
            "nested_coconuts": {"non_nested_coconuts": 5},
        },
    }
