"""Post-extraction sanity rules.

These are policy, not structural correctness: they run after extraction as a
separate, replaceable list so a new level cap never touches the parser.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import fields

from graveyard.config.settings import Settings
from graveyard.ingestion.document import is_number
from graveyard.ingestion.exceptions import BusinessRuleError
from graveyard.ingestion.models import ExtractedDeathPayload


class BusinessRule(ABC):
    """Contract for a single payload check."""

    name: str = "business_rule"

    @abstractmethod
    def check(self, payload: ExtractedDeathPayload) -> None:
        """Raise BusinessRuleError when ``payload`` violates the rule."""


class LevelCapRule(BusinessRule):
    name = "level_cap"

    def __init__(self, cap: int) -> None:
        self._cap = cap

    def check(self, payload: ExtractedDeathPayload) -> None:
        if payload.level > self._cap:
            raise BusinessRuleError(self.name, f"Level cannot exceed {self._cap}.")


class PositiveDamageRule(BusinessRule):
    name = "positive_damage"

    def check(self, payload: ExtractedDeathPayload) -> None:
        if payload.damage_taken <= 0:
            raise BusinessRuleError(self.name, "Damage taken must be greater than 0.")


class NonNegativeRule(BusinessRule):
    """No scalar numeric field may be negative. Skill ids are hashes and are not checked."""

    name = "non_negative"

    def check(self, payload: ExtractedDeathPayload) -> None:
        for f in fields(payload):
            value = getattr(payload, f.name)
            if is_number(value) and value < 0:
                raise BusinessRuleError(
                    self.name,
                    f"Save file contains negative values ({f.name}).",
                )


class BusinessRuleValidator:
    """Runs rules in order and stops at the first violation."""

    def __init__(self, rules: Sequence[BusinessRule]) -> None:
        self._rules = list(rules)

    @property
    def rules(self) -> list[BusinessRule]:
        return list(self._rules)

    def validate(self, payload: ExtractedDeathPayload) -> ExtractedDeathPayload:
        for rule in self._rules:
            rule.check(payload)
        return payload


def default_business_rules(settings: Settings) -> list[BusinessRule]:
    return [
        LevelCapRule(settings.level_cap),
        PositiveDamageRule(),
        NonNegativeRule(),
    ]
