import logging

from django.conf import settings
from django.http import Http404
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from screening.risk_engine.policies import get_policy
from screening.scenarios import get_scenario
from screening.serializers import RiskSignalsSerializer, RiskVerdictSerializer
from screening.services import build_scenario_response, build_verdict_response, list_policies, list_scenarios

logger = logging.getLogger(__name__)


def _include_trace(request) -> bool:
    return (request.query_params.get('trace') or '').strip().lower() in {'1', 'true', 'yes'}


class HealthAPIView(APIView):
    throttle_scope = 'default'
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'ok', 'timestamp': timezone.now(), 'version': settings.APP_VERSION})


class EvaluateAPIView(APIView):
    throttle_scope = 'evaluate'
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RiskSignalsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        signals = serializer.to_signals()

        try:
            payload = build_verdict_response(signals)
        except Exception:
            logger.exception('Unexpected risk evaluation failure (signals=%s).', signals.to_dict())
            return Response(
                {
                    'error': 'server_error',
                    'detail': 'Risk evaluation failed. Please try again.',
                },
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(RiskVerdictSerializer(payload).data, status=status.HTTP_200_OK)


class PolicyListAPIView(APIView):
    throttle_scope = 'lookup'
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'results': list_policies()})


class PolicyDetailAPIView(APIView):
    throttle_scope = 'lookup'
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, policy_id: str):
        policy = get_policy(policy_id)
        if policy is None:
            raise Http404('Policy not found')
        return Response(policy.to_dict())


class ScenarioListAPIView(APIView):
    throttle_scope = 'lookup'
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'results': list_scenarios()})


class ScenarioDetailAPIView(APIView):
    throttle_scope = 'lookup'
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, scenario_id: str):
        scenario = get_scenario(scenario_id)
        if scenario is None:
            raise Http404('Scenario not found')
        return Response(build_scenario_response(scenario, include_trace=_include_trace(request)))
