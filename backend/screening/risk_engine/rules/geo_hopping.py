from screening.choices import RiskLevel
from screening.risk_engine.policies import GEO_HOPPING
from screening.risk_engine.rules.base import BaseRiskRule
from screening.risk_engine.tiers import escalate


class GeoHoppingRule(BaseRiskRule):
    name = 'Geo-Hopping'
    signal = 'Rapid geo-location switching'
    policy = GEO_HOPPING
    min_geo_switches = 2
    risk_points = 30

    def matches(self, signals):
        return signals.geo_switches >= self.min_geo_switches

    def effect(self, state, signals):
        # Lifts Low to Medium; an earlier High (and its Escalate) is kept.
        state = escalate(state, RiskLevel.MEDIUM).add_score(self.risk_points)
        return self.flag(state)
