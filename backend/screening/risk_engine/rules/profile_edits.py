from screening.risk_engine.policies import EXCESSIVE_PROFILE_EDITS
from screening.risk_engine.rules.base import BaseRiskRule


class ExcessiveProfileEditsRule(BaseRiskRule):
    name = 'Excessive Profile Edits'
    signal = 'Frequent profile information changes'
    policy = EXCESSIVE_PROFILE_EDITS
    min_profile_changes = 3
    risk_points = 20

    def matches(self, signals):
        return signals.profile_changes >= self.min_profile_changes

    def effect(self, state, signals):
        return self.flag(state.add_score(self.risk_points))
