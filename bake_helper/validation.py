"""
Validation rule translation.

Turns declarative validation rules into the method chain fragments of a
generated validator, e.g. ``->notEmpty('title')``.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from .logging_config import get_logger

logger = get_logger(__name__)

AllowEmpty = Union[bool, str, None]


@dataclass(frozen=True)
class ValidationRule:
    """One validation rule as detected from the schema."""

    rule: Optional[str] = None
    provider: Optional[str] = None

    # None: no directive, bool: allow/forbid, str: allow with this message
    allow_empty: AllowEmpty = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ValidationRule":
        """Build a rule from a dict using ``allowEmpty`` or ``allow_empty``."""
        allow_empty = data.get("allowEmpty", data.get("allow_empty"))
        return cls(
            rule=data.get("rule") or None,
            provider=data.get("provider"),
            allow_empty=allow_empty,
        )


def _coerce(rule: Union[ValidationRule, Mapping[str, Any]]) -> ValidationRule:
    if isinstance(rule, ValidationRule):
        return rule
    return ValidationRule.from_dict(rule)


class ValidationTranslator:
    """Builds validator method chains for a field."""

    def rule_method(self, field: str, rule_name: str, rule: ValidationRule) -> Optional[str]:
        """Fragment applying the rule itself, or None if the record names no rule."""
        if not rule.rule:
            return None
        if rule.provider is None:
            return f"->{rule.rule}('{field}')"
        return (
            f"->add('{field}', '{rule_name}', "
            f"['rule' => '{rule.rule}', 'provider' => '{rule.provider}'])"
        )

    def allow_empty_methods(self, field: str, allow_empty: AllowEmpty) -> List[str]:
        """Fragments for the emptiness directive of a rule."""
        if allow_empty is None:
            return []
        if isinstance(allow_empty, str):
            return [f"->allowEmpty('{field}', '{allow_empty}')"]
        if allow_empty:
            return [f"->allowEmpty('{field}')"]
        return [
            f"->requirePresence('{field}', 'create')",
            f"->notEmpty('{field}')",
        ]

    def get_validation_methods(
        self, field: str, rules: Mapping[str, Union[ValidationRule, Dict[str, Any]]]
    ) -> List[str]:
        """
        Translate the rules of one field into method chain fragments.

        Fragments follow rule order; within a rule the rule fragment comes
        before its emptiness fragments. Records carrying neither a rule nor
        an emptiness directive contribute nothing.

        Args:
            field: Field name
            rules: Rule name to rule record

        Returns:
            Ordered list of fragments
        """
        methods: List[str] = []

        for rule_name, raw_rule in rules.items():
            rule = _coerce(raw_rule)

            rule_method = self.rule_method(field, rule_name, rule)
            if rule_method:
                methods.append(rule_method)

            methods.extend(self.allow_empty_methods(field, rule.allow_empty))

        logger.debug("Translated %d rules for %s into %d methods", len(rules), field, len(methods))
        return methods


def get_validation_methods(
    field: str, rules: Mapping[str, Union[ValidationRule, Dict[str, Any]]]
) -> List[str]:
    """Convenience wrapper around ValidationTranslator.get_validation_methods."""
    return ValidationTranslator().get_validation_methods(field, rules)
