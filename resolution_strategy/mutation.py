"""Mutation guard for the live resolution strategy.

The guard holds an optional validator and consults it before every public
mutation. Copies taken for resolution carry an empty guard.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from .errors import MutationNotAllowedError

logger = logging.getLogger(__name__)


class MutationType(str, Enum):
    """Kind of change being validated."""

    STRATEGY = "resolution strategy"


class MutationValidator(Protocol):
    def validate_mutation(self, mutation_type: MutationType) -> None: ...


class MutationGuard:
    """Optional validator attached to a strategy."""

    def __init__(self, validator: MutationValidator | None = None):
        self.validator = validator

    def attach(self, validator: MutationValidator | None) -> None:
        self.validator = validator

    def check(self, mutation_type: MutationType = MutationType.STRATEGY) -> None:
        if self.validator is not None:
            self.validator.validate_mutation(mutation_type)


class FreezingMutationValidator:
    """Allows mutations until frozen, then rejects them.

    Attributes:
        owner: Name of the configuration that owns the strategy
        frozen: Whether the freeze point has been reached
    """

    def __init__(self, owner: str | None = None):
        self.owner = owner
        self.frozen = False

    def freeze(self) -> None:
        if not self.frozen:
            logger.debug(f"[strategy:freeze] {self.owner or 'configuration'} frozen")
        self.frozen = True

    def validate_mutation(self, mutation_type: MutationType) -> None:
        if self.frozen:
            raise MutationNotAllowedError(mutation_type, self.owner)
