from screening.choices import RiskLevel
from screening.risk_engine.rules.base import BaseRiskRule
from screening.risk_engine.tiers import escalate


class ConcurrentRiskBehaviorRule(BaseRiskRule):
    name = 'Concurrent Risk Behavior'
    signal = 'Concurrent profile changes and withdrawal attempts'
    min_withdrawal_attempts = 2
    min_profile_changes = 2
    score_floor = 65

    def matches(self, signals):
        return (
            signals.withdrawal_attempts >= self.min_withdrawal_attempts
            and signals.profile_changes >= self.min_profile_changes
        )

    def effect(self, state, signals):
        if state.risk_level == RiskLevel.LOW:
            state = escalate(state, RiskLevel.MEDIUM).floor_score(self.score_floor)
        return self.flag(state)
