"""Exception types raised by the resolution strategy core."""


class StrategyError(Exception):
    """Base class for resolution strategy errors."""


class InvalidArgumentError(StrategyError, ValueError):
    """Malformed coordinate notation, unknown time unit or invalid setting."""


class MutationNotAllowedError(StrategyError):
    """Raised by a mutation guard when the strategy may no longer change."""

    def __init__(self, mutation_type, owner: str | None = None):
        self.mutation_type = mutation_type
        self.owner = owner
        target = f"'{owner}'" if owner else "the owning configuration"
        super().__init__(
            f"Cannot change {mutation_type.value} of {target} after it has been resolved."
        )
