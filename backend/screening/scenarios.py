from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from screening.risk_engine.types import RiskSignals


@dataclass(frozen=True)
class Scenario:
    id: str
    name: str
    date: str
    signals: RiskSignals

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'date': self.date,
            'signals': self.signals.to_dict(),
        }


SCENARIOS = MappingProxyType({
    scenario.id: scenario
    for scenario in (
        Scenario(
            id='new_account_withdrawals',
            name='New account with frequent withdrawals',
            date='2024-02-12',
            signals=RiskSignals(account_age_days=3, withdrawal_attempts=4, geo_switches=1, profile_changes=3),
        ),
        Scenario(
            id='geo_switching',
            name='Rapid geo-location switching',
            date='2024-02-11',
            signals=RiskSignals(account_age_days=45, withdrawal_attempts=1, geo_switches=3, profile_changes=0),
        ),
        Scenario(
            id='normal_user',
            name='Normal stable user',
            date='2024-02-10',
            signals=RiskSignals(account_age_days=180, withdrawal_attempts=0, geo_switches=0, profile_changes=0),
        ),
        Scenario(
            id='velocity_check',
            name='High velocity transaction volume',
            date='2024-02-14',
            signals=RiskSignals(account_age_days=120, withdrawal_attempts=8, geo_switches=0, profile_changes=0),
        ),
        Scenario(
            id='account_takeover',
            name='Potential Account Takeover',
            date='2024-02-14',
            signals=RiskSignals(account_age_days=365, withdrawal_attempts=5, geo_switches=4, profile_changes=2),
        ),
        Scenario(
            id='policy_violation_kyc',
            name='KYC Document Mismatch',
            date='2024-02-13',
            signals=RiskSignals(account_age_days=1, withdrawal_attempts=0, geo_switches=1, profile_changes=5),
        ),
        Scenario(
            id='dormant_reactivation',
            name='Dormant Account Reactivation',
            date='2024-02-09',
            signals=RiskSignals(account_age_days=700, withdrawal_attempts=1, geo_switches=0, profile_changes=0),
        ),
    )
})


def get_scenario(scenario_id: str) -> Scenario | None:
    return SCENARIOS.get((scenario_id or '').strip().lower())
