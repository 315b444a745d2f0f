from dataclasses import replace

from screening.risk_engine.rules.base import BaseRiskRule


class StabilityBonusRule(BaseRiskRule):
    """Score-only reduction for long-lived, quiet accounts. Never touches tier or action."""

    name = 'Stability Bonus'
    signal = 'Long-term stable behavior observed'
    min_account_age_days = 180
    score_reduction = 20
    score_floor = 5

    def matches(self, signals):
        return (
            signals.account_age_days >= self.min_account_age_days
            and signals.withdrawal_attempts == 0
            and signals.geo_switches == 0
        )

    def effect(self, state, signals):
        reduced = max(self.score_floor, state.risk_score - self.score_reduction)
        return self.flag(replace(state, risk_score=reduced))
