from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from screening.choices import RiskLevel


@dataclass(frozen=True)
class TierNarrative:
    explanation: str
    why_not_low: str
    risk_reduction_tips: tuple[str, ...]
    business_impact: str
    recommendation_impact: str
    confidence_score: float


NARRATIVES = MappingProxyType({
    RiskLevel.HIGH: TierNarrative(
        explanation=(
            'Critical risk detected due to multiple high-severity signals suggesting '
            'account compromise or policy abuse.'
        ),
        why_not_low=(
            'Presence of critical risk vector (Velocity/Geo) prevents Low classification '
            'regardless of other factors.'
        ),
        risk_reduction_tips=(
            'Verify User Identity via Video Call',
            'Place temporary hold on withdrawals',
        ),
        business_impact='High potential for chargeback loss and AML non-compliance fines ($50k+ exposure).',
        recommendation_impact='Potential Fraud Loss Prevention: ~$15,000',
        confidence_score=0.99,
    ),
    RiskLevel.MEDIUM: TierNarrative(
        explanation=(
            'Elevated risk profile driven by behavioral anomalies that deviate from '
            'established user baselines.'
        ),
        why_not_low="Recent anomalous activity (Geo/Profile) exceeds 'Low' threshold variants.",
        risk_reduction_tips=(
            'Request specialized proof of address',
            'Phone verification of recent changes',
        ),
        business_impact='Elevated manual review cost. Potential friction for legitimate user.',
        recommendation_impact='Reduce False Positive Rate by 40% via targeted verification.',
        confidence_score=0.88,
    ),
    RiskLevel.LOW: TierNarrative(
        explanation=(
            'User behavior falls within expected normal operating parameters. '
            'No significant risk indicators present.'
        ),
        why_not_low='N/A - Risk is already considered Low.',
        risk_reduction_tips=('Continue standard monitoring',),
        business_impact='Standard operational overhead only.',
        recommendation_impact='Maintain frictionless user experience (0s delay).',
        confidence_score=0.995,
    ),
})


def narrative_for(level: str) -> TierNarrative:
    return NARRATIVES[RiskLevel(level)]
