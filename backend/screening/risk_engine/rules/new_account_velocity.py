from screening.choices import RiskLevel
from screening.risk_engine.policies import VELOCITY_NEW_ACCOUNT
from screening.risk_engine.rules.base import BaseRiskRule
from screening.risk_engine.tiers import escalate


class NewAccountVelocityRule(BaseRiskRule):
    name = 'New Account Velocity'
    signal = 'New account with multiple withdrawal attempts'
    policy = VELOCITY_NEW_ACCOUNT
    max_account_age_days = 7
    min_withdrawal_attempts = 3
    risk_points = 60

    def matches(self, signals):
        return (
            signals.account_age_days < self.max_account_age_days
            and signals.withdrawal_attempts >= self.min_withdrawal_attempts
        )

    def effect(self, state, signals):
        state = escalate(state, RiskLevel.HIGH).add_score(self.risk_points)
        return self.flag(state)
