from __future__ import annotations

from screening.risk_engine.policies import PolicyDefinition
from screening.risk_engine.types import EvaluationState, RiskSignals


class BaseRiskRule:
    name = ''
    signal = ''
    policy: PolicyDefinition | None = None

    def matches(self, signals: RiskSignals) -> bool:
        raise NotImplementedError

    def effect(self, state: EvaluationState, signals: RiskSignals) -> EvaluationState:
        raise NotImplementedError

    def apply(self, state: EvaluationState, signals: RiskSignals) -> EvaluationState:
        if not self.matches(signals):
            return state
        return self.effect(state, signals).record_rule(self.name)

    def flag(self, state: EvaluationState) -> EvaluationState:
        state = state.add_signal(self.signal)
        if self.policy is not None:
            state = state.add_policy(self.policy.as_trigger())
        return state
