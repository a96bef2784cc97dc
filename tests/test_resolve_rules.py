"""Tests for resolve details and rule composition."""

from unittest.mock import Mock

import pytest

from resolution_strategy.coordinates import ModuleCoordinate
from resolution_strategy.errors import InvalidArgumentError
from resolution_strategy.resolve_rules import CompositeResolveRule
from resolution_strategy.resolve_rules import DependencyResolveDetails
from resolution_strategy.resolve_rules import ForcedVersionRule
from resolution_strategy.resolve_rules import VersionSelectionReason
from resolution_strategy.resolve_rules import compose_resolve_rule
from resolution_strategy.resolve_rules import no_op_rule

REQUESTED = ModuleCoordinate("org", "foo", "1.0")


class TestDependencyResolveDetails:
    def test_initial_state(self):
        details = DependencyResolveDetails(REQUESTED)
        assert details.target == REQUESTED
        assert details.selection_reason is None
        assert not details.updated

    def test_use_version_defaults_to_rule_reason(self):
        details = DependencyResolveDetails(REQUESTED)
        details.use_version("2.0")

        assert details.target == ModuleCoordinate("org", "foo", "2.0")
        assert details.requested == REQUESTED
        assert details.selection_reason == VersionSelectionReason.SELECTED_BY_RULE
        assert details.updated

    def test_re_choosing_requested_version_counts_as_update(self):
        details = DependencyResolveDetails(REQUESTED)
        details.use_version("1.0", VersionSelectionReason.FORCED)

        assert details.target == REQUESTED
        assert details.updated

    @pytest.mark.parametrize("version", [None, ""])
    def test_rejects_empty_version(self, version):
        with pytest.raises(InvalidArgumentError):
            DependencyResolveDetails(REQUESTED).use_version(version)


class TestComposeResolveRule:
    def test_returns_no_op_without_rules(self):
        assert compose_resolve_rule([], []) is no_op_rule

    def test_forced_rule_comes_first(self):
        user_rule = Mock()
        rule = compose_resolve_rule([ModuleCoordinate("org", "foo", "2.0")], [user_rule])

        assert isinstance(rule, CompositeResolveRule)
        assert isinstance(rule.rules[0], ForcedVersionRule)
        assert rule.rules[1] is user_rule

    def test_composition_is_a_snapshot(self):
        user_rules = [Mock()]
        rule = compose_resolve_rule([], user_rules)
        user_rules.append(Mock())

        rule(DependencyResolveDetails(REQUESTED))

        user_rules[0].assert_called_once()
        user_rules[1].assert_not_called()


class TestForcedVersionRule:
    def test_keeps_first_version_per_module(self):
        rule = ForcedVersionRule(
            [ModuleCoordinate("org", "foo", "2.0"), ModuleCoordinate("org", "foo", "3.0")]
        )
        assert rule.forced_versions == {"org:foo": "2.0"}

    def test_ignores_other_modules(self):
        rule = ForcedVersionRule([ModuleCoordinate("org", "bar", "2.0")])
        details = DependencyResolveDetails(REQUESTED)

        rule(details)

        assert not details.updated
