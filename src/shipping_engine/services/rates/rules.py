"""Promotional shipping rules evaluated against an order."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import RuleConditions, RuleOutcome, ShippingRule, ShippingZone

RULE_ACTIONS = {"free", "discount", "fixed"}


def _matches(conditions: RuleConditions, subtotal: float, zone: ShippingZone, weight: float) -> bool:
    if conditions.min_subtotal is not None and subtotal < conditions.min_subtotal:
        return False
    if conditions.max_subtotal is not None and subtotal > conditions.max_subtotal:
        return False
    if conditions.min_weight is not None and weight < conditions.min_weight:
        return False
    if conditions.max_weight is not None and weight > conditions.max_weight:
        return False
    if conditions.zones is not None and zone not in conditions.zones:
        return False
    return True


def apply_shipping_rules(
    subtotal: float,
    zone: ShippingZone,
    weight: float,
    rules: Sequence[ShippingRule],
) -> RuleOutcome:
    """Apply the highest-priority active rule whose conditions all hold.

    Only the first matching rule takes effect.
    """
    for rule in sorted(rules, key=lambda item: item.priority, reverse=True):
        if not rule.is_active:
            continue
        if rule.action.type not in RULE_ACTIONS:
            raise ValueError(f"Unknown rule action '{rule.action.type}' in rule '{rule.name}'.")
        if not _matches(rule.conditions, subtotal, zone, weight):
            continue
        if rule.action.type == "free":
            return RuleOutcome(discount=0.0, free_shipping=True, rule_name=rule.name)
        return RuleOutcome(discount=rule.action.value, free_shipping=False, rule_name=rule.name)
    return RuleOutcome(discount=0.0, free_shipping=False)
