"""Tests for module coordinate parsing."""

import pytest

from resolution_strategy.coordinates import ModuleCoordinate
from resolution_strategy.coordinates import parse_coordinate
from resolution_strategy.coordinates import parse_module_id
from resolution_strategy.errors import InvalidArgumentError


class TestParseCoordinate:
    def test_parses_text(self):
        coordinate = parse_coordinate("org.foo:bar:1.0")
        assert coordinate == ModuleCoordinate("org.foo", "bar", "1.0")
        assert coordinate.module_id == "org.foo:bar"
        assert str(coordinate) == "org.foo:bar:1.0"

    def test_parses_mapping_ignoring_extra_keys(self):
        coordinate = parse_coordinate({"group": "g", "name": "n", "version": "1", "transitive": False})
        assert coordinate == ModuleCoordinate("g", "n", "1")

    def test_passes_through_coordinate(self):
        coordinate = ModuleCoordinate("g", "n", "1")
        assert parse_coordinate(coordinate) is coordinate

    @pytest.mark.parametrize("notation", ["org:foo", "org:foo:1.0:extra", "org::1.0", ":foo:1.0", ""])
    def test_rejects_malformed_text(self, notation):
        with pytest.raises(InvalidArgumentError):
            parse_coordinate(notation)

    def test_rejects_incomplete_mapping(self):
        with pytest.raises(InvalidArgumentError, match="version"):
            parse_coordinate({"group": "g", "name": "n"})

    def test_rejects_other_types(self):
        with pytest.raises(InvalidArgumentError):
            parse_coordinate(42)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            parse_coordinate("nope")


class TestModuleCoordinate:
    def test_is_immutable(self):
        coordinate = ModuleCoordinate("g", "n", "1")
        with pytest.raises(AttributeError):
            coordinate.version = "2"

    def test_matches_module_ignores_version(self):
        assert ModuleCoordinate("g", "n", "1").matches_module(ModuleCoordinate("g", "n", "2"))
        assert not ModuleCoordinate("g", "n", "1").matches_module(ModuleCoordinate("g", "other", "1"))

    def test_with_version(self):
        assert ModuleCoordinate("g", "n", "1").with_version("2") == ModuleCoordinate("g", "n", "2")


class TestParseModuleId:
    def test_parses(self):
        assert parse_module_id("org:foo") == ("org", "foo")

    @pytest.mark.parametrize("notation", ["org", "org:foo:1.0", "org:"])
    def test_rejects(self, notation):
        with pytest.raises(InvalidArgumentError):
            parse_module_id(notation)
