"""Tests for mutation guards."""

from unittest.mock import Mock

import pytest

from resolution_strategy.errors import MutationNotAllowedError
from resolution_strategy.mutation import FreezingMutationValidator
from resolution_strategy.mutation import MutationGuard
from resolution_strategy.mutation import MutationType


class TestMutationGuard:
    def test_empty_guard_allows_everything(self):
        guard = MutationGuard()
        guard.check()
        assert guard.validator is None

    def test_consults_attached_validator(self):
        validator = Mock()
        guard = MutationGuard()
        guard.attach(validator)

        guard.check()

        validator.validate_mutation.assert_called_once_with(MutationType.STRATEGY)

    def test_validator_errors_propagate(self):
        validator = Mock()
        validator.validate_mutation.side_effect = MutationNotAllowedError(MutationType.STRATEGY)

        with pytest.raises(MutationNotAllowedError):
            MutationGuard(validator).check()


class TestFreezingMutationValidator:
    def test_allows_until_frozen(self):
        validator = FreezingMutationValidator("compile")
        validator.validate_mutation(MutationType.STRATEGY)

        validator.freeze()

        with pytest.raises(MutationNotAllowedError) as exc_info:
            validator.validate_mutation(MutationType.STRATEGY)
        assert exc_info.value.owner == "compile"
        assert exc_info.value.mutation_type is MutationType.STRATEGY
        assert "resolution strategy of 'compile'" in str(exc_info.value)

    def test_message_without_owner(self):
        validator = FreezingMutationValidator()
        validator.freeze()

        with pytest.raises(MutationNotAllowedError, match="the owning configuration"):
            validator.validate_mutation(MutationType.STRATEGY)
