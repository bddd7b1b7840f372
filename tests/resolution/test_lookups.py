"""
Tests for the lookup backends.
"""

from collections import OrderedDict

from stachetree.resolution.lookups import (
    MISS,
    AttributeLookup,
    MappingLookup,
    MethodLookup,
)


class Person:
    species = "human"

    def __init__(self, first, last):
        self.first = first
        self.last = last
        self._secret = "hidden"

    @property
    def initials(self):
        return f"{self.first[0]}{self.last[0]}"

    def full_name(self):
        return f"{self.first} {self.last}"

    def get_age(self):
        return 42

    def is_admin(self):
        return False

    def greet(self, other):
        return f"hi {other}"

    def _private(self):
        return "private"


class TestMappingLookup:
    """Test key lookup in mappings."""

    def test_finds_present_key(self):
        """Present keys are found, including falsy values."""
        lookup = MappingLookup()

        assert lookup.find({"name": "Ada"}, "name") == (True, "Ada")
        assert lookup.find({"count": 0}, "count") == (True, 0)
        assert lookup.find({"value": None}, "value") == (True, None)

    def test_missing_key_is_miss(self):
        """Absent keys miss."""
        assert MappingLookup().find({"other": 1}, "name") == MISS

    def test_any_mapping_type(self):
        """Mapping subclasses are supported."""
        assert MappingLookup().find(OrderedDict(a=1), "a") == (True, 1)

    def test_non_mapping_is_miss(self):
        """Objects are left to the other backends."""
        assert MappingLookup().find(Person("Ada", "Lovelace"), "first") == MISS


class TestAttributeLookup:
    """Test plain attribute and property lookup."""

    def test_instance_and_class_attributes(self):
        """Instance and class attributes are found."""
        lookup = AttributeLookup()
        person = Person("Ada", "Lovelace")

        assert lookup.find(person, "first") == (True, "Ada")
        assert lookup.find(person, "species") == (True, "human")

    def test_property(self):
        """Properties are evaluated."""
        assert AttributeLookup().find(Person("Ada", "Lovelace"), "initials") == (True, "AL")

    def test_methods_are_left_to_method_lookup(self):
        """Callables are not returned as attribute values."""
        assert AttributeLookup().find(Person("Ada", "Lovelace"), "full_name") == MISS

    def test_private_names_never_exposed(self):
        """Leading underscore names miss."""
        assert AttributeLookup().find(Person("Ada", "Lovelace"), "_secret") == MISS

    def test_mapping_keys_not_treated_as_attributes(self):
        """Dict methods such as 'items' are not attributes for templates."""
        assert AttributeLookup().find({"a": 1}, "items") == MISS


class TestMethodLookup:
    """Test zero-argument accessor methods."""

    def test_calls_plain_accessor(self):
        """name() is called."""
        assert MethodLookup().find(Person("Ada", "Lovelace"), "full_name") == (
            True,
            "Ada Lovelace",
        )

    def test_getter_prefixes(self):
        """get_name() and is_name() are tried after name()."""
        lookup = MethodLookup()
        person = Person("Ada", "Lovelace")

        assert lookup.find(person, "age") == (True, 42)
        assert lookup.find(person, "admin") == (True, False)

    def test_method_with_arguments_is_miss(self):
        """Methods requiring arguments are not accessors."""
        assert MethodLookup().find(Person("Ada", "Lovelace"), "greet") == MISS

    def test_private_methods_never_called(self):
        """Leading underscore methods miss."""
        assert MethodLookup().find(Person("Ada", "Lovelace"), "_private") == MISS

    def test_unknown_name_is_miss(self):
        """Unknown names miss."""
        assert MethodLookup().find(Person("Ada", "Lovelace"), "nothing") == MISS


def test_backends_have_display_names():
    """Each backend names itself."""
    assert [lookup.get_name() for lookup in (MappingLookup(), AttributeLookup(), MethodLookup())] == [
        "mapping",
        "attribute",
        "method",
    ]
