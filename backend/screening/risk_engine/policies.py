from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from screening.choices import PolicyCategory
from screening.risk_engine.types import TriggeredPolicy


@dataclass(frozen=True)
class PolicyDefinition:
    id: str
    name: str
    category: str
    description: str
    threshold: str

    def as_trigger(self) -> TriggeredPolicy:
        return TriggeredPolicy(id=self.id, name=self.name)

    def to_dict(self) -> dict[str, str]:
        return {
            'id': self.id,
            'name': self.name,
            'category': str(self.category),
            'description': self.description,
            'threshold': self.threshold,
        }


VELOCITY_NEW_ACCOUNT = PolicyDefinition(
    id='POL-AML-001',
    name='Velocity Limits Exceeded (New Account)',
    category=PolicyCategory.AML,
    description='Detects structuring behavior: multiple withdrawals designed to evade reporting thresholds.',
    threshold='account_age_days < 7 AND withdrawal_attempts >= 3',
)

GEO_HOPPING = PolicyDefinition(
    id='POL-GEO-055',
    name='Impossible Travel / Geo-Hopping',
    category=PolicyCategory.GEO,
    description='Identifies impossible travel patterns suggesting credential compromise or proxy usage.',
    threshold='geo_switches >= 2',
)

EXCESSIVE_PROFILE_EDITS = PolicyDefinition(
    id='POL-KYC-102',
    name='Excessive Profile Edits',
    category=PolicyCategory.KYC,
    description='Flags repeated identity or contact detail edits that can indicate an attempt to bypass onboarding checks.',
    threshold='profile_changes >= 3',
)

EARLY_LIFECYCLE = PolicyDefinition(
    id='POL-EARLY-003',
    name='Early Lifecycle Risk Indicators',
    category=PolicyCategory.LIFECYCLE,
    description='Withdrawals combined with location changes before the account has an established baseline.',
    threshold='account_age_days < 30 AND geo_switches >= 1 AND withdrawal_attempts >= 1',
)

POLICY_CATALOGUE = MappingProxyType({
    policy.id: policy
    for policy in (
        VELOCITY_NEW_ACCOUNT,
        GEO_HOPPING,
        EXCESSIVE_PROFILE_EDITS,
        EARLY_LIFECYCLE,
    )
})


def get_policy(policy_id: str) -> PolicyDefinition | None:
    return POLICY_CATALOGUE.get((policy_id or '').strip().upper())
