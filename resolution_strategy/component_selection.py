"""Component selection rules.

Rules inspect a candidate component and may reject it with a reason. They
run in registration order and evaluation stops at the first rejection.
A rule may declare inputs (metadata descriptors); these are resolved through a
metadata provider and passed to the rule after the selection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Hashable
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .coordinates import ModuleCoordinate
from .coordinates import parse_module_id
from .errors import InvalidArgumentError
from .mutation import MutationGuard

logger = logging.getLogger(__name__)

MetadataProvider = Callable[[ModuleCoordinate, Hashable], Any]


class ComponentSelection:
    """A candidate component under evaluation."""

    def __init__(self, candidate: ModuleCoordinate):
        self.candidate = candidate
        self.rejection_reason: str | None = None

    @property
    def rejected(self) -> bool:
        return self.rejection_reason is not None

    def reject(self, reason: str) -> None:
        self.rejection_reason = reason

    def __repr__(self) -> str:
        state = f"rejected: {self.rejection_reason}" if self.rejected else "accepted"
        return f"ComponentSelection({self.candidate}, {state})"


@dataclass(frozen=True)
class ComponentSelectionRule:
    """One registered rule.

    Attributes:
        action: Called as ``action(selection, *resolved_inputs)``
        inputs: Metadata keys resolved before invocation
        module_id: ``group:name`` the rule is scoped to, None for every candidate
    """

    action: Callable[..., None]
    inputs: tuple[Hashable, ...] = ()
    module_id: str | None = None

    def applies_to(self, candidate: ModuleCoordinate) -> bool:
        return self.module_id is None or self.module_id == candidate.module_id

    def execute(self, selection: ComponentSelection, metadata_provider: MetadataProvider | None = None) -> None:
        if self.inputs and metadata_provider is None:
            raise InvalidArgumentError(
                f"Component selection rule requires inputs {list(self.inputs)} but no metadata provider was given"
            )
        resolved = [metadata_provider(selection.candidate, key) for key in self.inputs] if self.inputs else []
        self.action(selection, *resolved)


class ComponentSelectionRules:
    """Ordered, guarded set of component selection rules."""

    def __init__(self, guard: MutationGuard | None = None, rules: Iterable[ComponentSelectionRule] = ()):
        self._guard = guard if guard is not None else MutationGuard()
        self._rules: list[ComponentSelectionRule] = list(rules)

    @property
    def rules(self) -> tuple[ComponentSelectionRule, ...]:
        return tuple(self._rules)

    def add_rule(self, rule: ComponentSelectionRule) -> ComponentSelectionRules:
        self._guard.check()
        self._rules.append(rule)
        return self

    def all(self, action: Callable[..., None], *inputs: Hashable) -> ComponentSelectionRules:
        """Register a rule evaluated for every candidate."""
        return self.add_rule(ComponentSelectionRule(action, tuple(inputs)))

    def with_module(self, module_id: str, action: Callable[..., None], *inputs: Hashable) -> ComponentSelectionRules:
        """Register a rule evaluated only for candidates of ``group:name``."""
        group, name = parse_module_id(module_id)
        return self.add_rule(ComponentSelectionRule(action, tuple(inputs), f"{group}:{name}"))

    def configure(self, action: Callable[[ComponentSelectionRules], Any]) -> ComponentSelectionRules:
        """Run a configuration block against this rule set."""
        action(self)
        return self

    def apply(self, selection: ComponentSelection, metadata_provider: MetadataProvider | None = None) -> bool:
        """Evaluate the rules against one candidate.

        Returns:
            True if the candidate is accepted
        """
        for rule in self._rules:
            if not rule.applies_to(selection.candidate):
                continue
            rule.execute(selection, metadata_provider)
            if selection.rejected:
                logger.debug(f"[selection:reject] {selection.candidate}: {selection.rejection_reason}")
                return False
        return True

    def copy(self, guard: MutationGuard | None = None) -> ComponentSelectionRules:
        return ComponentSelectionRules(guard, self._rules)

    def __len__(self) -> int:
        return len(self._rules)
