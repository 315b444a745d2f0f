from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
import logging
from typing import Any, Mapping

from screening.choices import RecommendedAction, RiskLevel

logger = logging.getLogger(__name__)

SIGNAL_FIELDS = (
    'account_age_days',
    'withdrawal_attempts',
    'geo_switches',
    'profile_changes',
)

BASELINE_SCORE = 15
MIN_SCORE = 0
MAX_SCORE = 99


class InvalidInput(ValueError):
    """Raised when a supplied signal cannot be read as a whole-number count."""

    def __init__(self, field_name: str, value: Any, message: str = ''):
        self.field_name = field_name
        self.value = value
        super().__init__(message or f'{field_name} must be a non-negative integer, got {value!r}.')


def _coerce_count(field_name: str, value: Any) -> int:
    if value is None:
        return 0

    # bool is an int subclass; a flag is never a count.
    if isinstance(value, bool):
        raise InvalidInput(field_name, value)

    if isinstance(value, int):
        count = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise InvalidInput(field_name, value)
        count = int(value)
    elif isinstance(value, str):
        try:
            count = int(value.strip())
        except ValueError as exc:
            raise InvalidInput(field_name, value) from exc
    else:
        raise InvalidInput(field_name, value)

    return count


@dataclass(frozen=True)
class RiskSignals:
    account_age_days: int = 0
    withdrawal_attempts: int = 0
    geo_switches: int = 0
    profile_changes: int = 0

    def __post_init__(self):
        for name in SIGNAL_FIELDS:
            count = getattr(self, name)
            if count < 0:
                logger.warning('Negative %s (%s) clamped to 0 before evaluation.', name, count)
                object.__setattr__(self, name, 0)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> RiskSignals:
        data = {} if payload is None else payload
        if not isinstance(data, Mapping):
            raise InvalidInput(
                'payload',
                payload,
                f'Signals payload must be an object of named counts, got {payload!r}.',
            )
        return cls(**{name: _coerce_count(name, data.get(name)) for name in SIGNAL_FIELDS})

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class TriggeredPolicy:
    id: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {'id': self.id, 'name': self.name}


@dataclass(frozen=True)
class EvaluationState:
    """Running state threaded through the rule fold."""

    risk_level: str = RiskLevel.LOW
    risk_score: int = BASELINE_SCORE
    recommended_action: str = RecommendedAction.MONITOR
    risk_signals: tuple[str, ...] = ()
    triggered_policies: tuple[TriggeredPolicy, ...] = ()
    fired_rules: tuple[str, ...] = ()

    def add_score(self, points: int) -> EvaluationState:
        return replace(self, risk_score=self.risk_score + points)

    def floor_score(self, minimum: int) -> EvaluationState:
        return replace(self, risk_score=max(self.risk_score, minimum))

    def add_signal(self, signal: str) -> EvaluationState:
        return replace(self, risk_signals=self.risk_signals + (signal,))

    def add_policy(self, policy: TriggeredPolicy) -> EvaluationState:
        return replace(self, triggered_policies=self.triggered_policies + (policy,))

    def record_rule(self, rule_name: str) -> EvaluationState:
        return replace(self, fired_rules=self.fired_rules + (rule_name,))


@dataclass(frozen=True)
class RiskVerdict:
    risk_level: str
    risk_score: int
    risk_signals: tuple[str, ...]
    triggered_policies: tuple[TriggeredPolicy, ...]
    recommended_action: str
    explanation: str
    why_not_low: str
    risk_reduction_tips: tuple[str, ...]
    business_impact: str
    recommendation_impact: str
    confidence_score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            'risk_level': self.risk_level,
            'risk_score': self.risk_score,
            'risk_signals': list(self.risk_signals),
            'triggered_policies': [policy.to_dict() for policy in self.triggered_policies],
            'recommended_action': self.recommended_action,
            'explanation': self.explanation,
            'why_not_low': self.why_not_low,
            'risk_reduction_tips': list(self.risk_reduction_tips),
            'business_impact': self.business_impact,
            'recommendation_impact': self.recommendation_impact,
            'confidence_score': self.confidence_score,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RiskVerdict:
        return cls(
            risk_level=str(RiskLevel(data['risk_level'])),
            risk_score=int(data['risk_score']),
            risk_signals=tuple(str(item) for item in data.get('risk_signals') or ()),
            triggered_policies=tuple(
                TriggeredPolicy(id=str(item['id']), name=str(item['name']))
                for item in data.get('triggered_policies') or ()
            ),
            recommended_action=str(RecommendedAction(data['recommended_action'])),
            explanation=str(data['explanation']),
            why_not_low=str(data.get('why_not_low') or ''),
            risk_reduction_tips=tuple(str(item) for item in data.get('risk_reduction_tips') or ()),
            business_impact=str(data['business_impact']),
            recommendation_impact=str(data['recommendation_impact']),
            confidence_score=float(data['confidence_score']),
        )


@dataclass
class EngineResult:
    verdict: RiskVerdict
    fired_rules: list[str] = field(default_factory=list)
    version: int = 1
