from __future__ import annotations

import logging
from typing import Any

from screening.risk_engine.engine import RiskEngine
from screening.risk_engine.policies import POLICY_CATALOGUE
from screening.risk_engine.types import EngineResult, RiskSignals
from screening.scenarios import SCENARIOS, Scenario

logger = logging.getLogger(__name__)

DISCLAIMER_TEXT = 'Risk verdicts are decision support only and require human review before action.'


def run_evaluation(signals: RiskSignals) -> EngineResult:
    result = RiskEngine().run(signals)
    verdict = result.verdict
    logger.info(
        'Risk evaluation complete (level=%s, score=%s, policies=%s).',
        verdict.risk_level,
        verdict.risk_score,
        [policy.id for policy in verdict.triggered_policies] or 'none',
    )
    return result


def build_verdict_response(signals: RiskSignals) -> dict[str, Any]:
    return run_evaluation(signals).verdict.to_dict()


def build_scenario_response(scenario: Scenario, include_trace: bool = False) -> dict[str, Any]:
    result = run_evaluation(scenario.signals)
    payload = {
        'scenario': scenario.to_dict(),
        'verdict': result.verdict.to_dict(),
        'disclaimer': DISCLAIMER_TEXT,
    }
    if include_trace:
        payload['fired_rules'] = list(result.fired_rules)
        payload['engine_version'] = result.version
    return payload


def list_scenarios() -> list[dict[str, Any]]:
    return [scenario.to_dict() for scenario in SCENARIOS.values()]


def list_policies() -> list[dict[str, str]]:
    return [policy.to_dict() for policy in POLICY_CATALOGUE.values()]
