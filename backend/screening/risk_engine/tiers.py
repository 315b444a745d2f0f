from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType

from screening.choices import RecommendedAction, RiskLevel
from screening.risk_engine.types import EvaluationState

TIER_ORDER = (RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH)

ACTION_FOR_TIER = MappingProxyType({
    RiskLevel.LOW: RecommendedAction.MONITOR,
    RiskLevel.MEDIUM: RecommendedAction.REQUEST_VERIFICATION,
    RiskLevel.HIGH: RecommendedAction.ESCALATE,
})


def tier_rank(level: str) -> int:
    return TIER_ORDER.index(RiskLevel(level))


def raise_to(current: str, target: str) -> RiskLevel:
    """Return the stricter of two tiers. A tier never moves back down."""
    current_level = RiskLevel(current)
    target_level = RiskLevel(target)
    if tier_rank(target_level) > tier_rank(current_level):
        return target_level
    return current_level


def action_for(level: str) -> RecommendedAction:
    return ACTION_FOR_TIER[RiskLevel(level)]


def escalate(state: EvaluationState, target: str) -> EvaluationState:
    # Tier and action always move together so they cannot disagree.
    level = raise_to(state.risk_level, target)
    return replace(state, risk_level=level, recommended_action=action_for(level))
