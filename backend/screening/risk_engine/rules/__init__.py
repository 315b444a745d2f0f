from screening.risk_engine.rules.concurrent_activity import ConcurrentRiskBehaviorRule
from screening.risk_engine.rules.early_lifecycle import EarlyLifecycleActivityRule
from screening.risk_engine.rules.geo_hopping import GeoHoppingRule
from screening.risk_engine.rules.new_account_velocity import NewAccountVelocityRule
from screening.risk_engine.rules.profile_edits import ExcessiveProfileEditsRule
from screening.risk_engine.rules.stability_bonus import StabilityBonusRule

# Evaluation order is significant: score and signal order both depend on it.
DEFAULT_RULES = [
    NewAccountVelocityRule,
    GeoHoppingRule,
    ExcessiveProfileEditsRule,
    EarlyLifecycleActivityRule,
    ConcurrentRiskBehaviorRule,
    StabilityBonusRule,
]
