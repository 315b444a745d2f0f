from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Mapping

from screening.risk_engine.narratives import narrative_for
from screening.risk_engine.rules import DEFAULT_RULES
from screening.risk_engine.rules.base import BaseRiskRule
from screening.risk_engine.types import (
    MAX_SCORE,
    MIN_SCORE,
    EngineResult,
    EvaluationState,
    RiskSignals,
    RiskVerdict,
)


def _default_rules() -> list[BaseRiskRule]:
    return [rule_class() for rule_class in DEFAULT_RULES]


@dataclass
class RiskEngine:
    rules: list[BaseRiskRule] = field(default_factory=_default_rules)
    version: int = 1

    def run(self, signals: RiskSignals) -> EngineResult:
        state = reduce(
            lambda current, rule: rule.apply(current, signals),
            self.rules,
            EvaluationState(),
        )

        risk_score = max(MIN_SCORE, min(MAX_SCORE, state.risk_score))
        narrative = narrative_for(state.risk_level)

        verdict = RiskVerdict(
            risk_level=str(state.risk_level),
            risk_score=risk_score,
            risk_signals=state.risk_signals,
            triggered_policies=state.triggered_policies,
            recommended_action=str(state.recommended_action),
            explanation=narrative.explanation,
            why_not_low=narrative.why_not_low,
            risk_reduction_tips=narrative.risk_reduction_tips,
            business_impact=narrative.business_impact,
            recommendation_impact=narrative.recommendation_impact,
            confidence_score=narrative.confidence_score,
        )
        return EngineResult(verdict=verdict, fired_rules=list(state.fired_rules), version=self.version)


_default_engine = RiskEngine()


def evaluate(signals: RiskSignals | Mapping[str, Any] | None = None) -> RiskVerdict:
    """Evaluate one account's signals and return its verdict.

    Plain mappings are read with ``RiskSignals.from_payload``: missing or null
    fields count as 0, negative counts are clamped to 0 (with a warning) and
    values that are not whole numbers raise ``InvalidInput``, as does a
    payload that is not a mapping at all.
    """
    if not isinstance(signals, RiskSignals):
        signals = RiskSignals.from_payload(signals)
    return _default_engine.run(signals).verdict
