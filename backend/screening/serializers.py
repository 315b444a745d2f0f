from rest_framework import serializers

from screening.choices import RecommendedAction, RiskLevel
from screening.risk_engine.types import RiskSignals, RiskVerdict


def _count_field():
    return serializers.IntegerField(required=False, allow_null=True, min_value=0, default=0)


class RiskSignalsSerializer(serializers.Serializer):
    account_age_days = _count_field()
    withdrawal_attempts = _count_field()
    geo_switches = _count_field()
    profile_changes = _count_field()

    def to_signals(self) -> RiskSignals:
        return RiskSignals.from_payload(self.validated_data)


class TriggeredPolicySerializer(serializers.Serializer):
    id = serializers.CharField(max_length=32)
    name = serializers.CharField(max_length=255)


class RiskVerdictSerializer(serializers.Serializer):
    risk_level = serializers.ChoiceField(choices=RiskLevel.choices)
    risk_score = serializers.IntegerField(min_value=0, max_value=99)
    risk_signals = serializers.ListField(child=serializers.CharField(), allow_empty=True)
    triggered_policies = TriggeredPolicySerializer(many=True)
    recommended_action = serializers.ChoiceField(choices=RecommendedAction.choices)
    explanation = serializers.CharField()
    why_not_low = serializers.CharField(required=False, allow_blank=True)
    risk_reduction_tips = serializers.ListField(child=serializers.CharField(), allow_empty=True)
    business_impact = serializers.CharField()
    recommendation_impact = serializers.CharField()
    confidence_score = serializers.FloatField(min_value=0.0, max_value=1.0)

    def to_verdict(self) -> RiskVerdict:
        return RiskVerdict.from_dict(self.validated_data)
