from screening.choices import RiskLevel
from screening.risk_engine.policies import EARLY_LIFECYCLE
from screening.risk_engine.rules.base import BaseRiskRule
from screening.risk_engine.tiers import escalate


class EarlyLifecycleActivityRule(BaseRiskRule):
    name = 'Early Lifecycle Activity'
    signal = 'Sensitive activity detected early in account lifecycle'
    policy = EARLY_LIFECYCLE
    max_account_age_days = 30
    min_geo_switches = 1
    min_withdrawal_attempts = 1
    score_floor = 85

    def matches(self, signals):
        return (
            signals.account_age_days < self.max_account_age_days
            and signals.geo_switches >= self.min_geo_switches
            and signals.withdrawal_attempts >= self.min_withdrawal_attempts
        )

    def effect(self, state, signals):
        state = escalate(state, RiskLevel.HIGH).floor_score(self.score_floor)
        return self.flag(state)
