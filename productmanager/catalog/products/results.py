"""Outcome of a product write, passed from the repositories up to the views."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class Outcome(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationResult:
    outcome: Outcome
    value: Any = None
    errors: Dict[str, List[str]] = field(default_factory=dict)
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK

    @classmethod
    def success(cls, value=None):
        return cls(Outcome.OK, value=value)

    @classmethod
    def not_found(cls, reason=""):
        return cls(Outcome.NOT_FOUND, reason=reason)

    @classmethod
    def invalid(cls, errors):
        return cls(Outcome.INVALID, errors=dict(errors))

    @classmethod
    def failure(cls, reason):
        return cls(Outcome.FAILED, reason=reason)

    def with_value(self, value):
        return OperationResult(self.outcome, value=value, errors=self.errors, reason=self.reason)
