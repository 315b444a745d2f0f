from unittest.mock import patch

from django.test import SimpleTestCase
from rest_framework.test import APIClient

from screening.risk_engine.types import RiskVerdict
from screening.serializers import RiskVerdictSerializer

VERDICT_FIELDS = {
    'risk_level',
    'risk_score',
    'risk_signals',
    'triggered_policies',
    'recommended_action',
    'explanation',
    'why_not_low',
    'risk_reduction_tips',
    'business_impact',
    'recommendation_impact',
    'confidence_score',
}


class EvaluateApiTests(SimpleTestCase):
    def setUp(self):
        self.client = APIClient()

    def test_evaluate_returns_verdict_payload(self):
        response = self.client.post(
            '/api/evaluate',
            {
                'account_age_days': 3,
                'withdrawal_attempts': 4,
                'geo_switches': 1,
                'profile_changes': 3,
            },
            format='json',
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(set(response.data.keys()), VERDICT_FIELDS)
        self.assertEqual(response.data['risk_level'], 'High')
        self.assertEqual(response.data['recommended_action'], 'Escalate')
        self.assertGreaterEqual(response.data['risk_score'], 85)
        self.assertIn(
            {'id': 'POL-AML-001', 'name': 'Velocity Limits Exceeded (New Account)'},
            [dict(item) for item in response.data['triggered_policies']],
        )

    def test_empty_object_is_baseline(self):
        response = self.client.post('/api/evaluate', {}, format='json')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['risk_level'], 'Low')
        self.assertEqual(response.data['risk_score'], 15)
        self.assertEqual(response.data['recommended_action'], 'Monitor')
        self.assertEqual(response.data['why_not_low'], 'N/A - Risk is already considered Low.')

    def test_null_fields_are_treated_as_zero(self):
        response = self.client.post(
            '/api/evaluate',
            {'account_age_days': None, 'geo_switches': 2},
            format='json',
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['risk_level'], 'Medium')
        self.assertEqual(response.data['risk_score'], 45)

    def test_negative_values_are_rejected(self):
        response = self.client.post('/api/evaluate', {'withdrawal_attempts': -1}, format='json')

        self.assertEqual(response.status_code, 400)
        self.assertIn('withdrawal_attempts', response.data)

    def test_non_numeric_values_are_rejected(self):
        for value in ('lots', 2.5, True, [1]):
            with self.subTest(value=value):
                response = self.client.post('/api/evaluate', {'geo_switches': value}, format='json')
                self.assertEqual(response.status_code, 400)
                self.assertIn('geo_switches', response.data)

    def test_non_object_body_is_rejected(self):
        response = self.client.post('/api/evaluate', [1, 2, 3], format='json')
        self.assertEqual(response.status_code, 400)

    def test_response_round_trips_through_verdict_serializer(self):
        response = self.client.post(
            '/api/evaluate',
            {'account_age_days': 60, 'withdrawal_attempts': 2, 'profile_changes': 2},
            format='json',
        )
        self.assertEqual(response.status_code, 200)

        serializer = RiskVerdictSerializer(data=response.json())
        self.assertTrue(serializer.is_valid(), serializer.errors)
        verdict = serializer.to_verdict()

        self.assertIsInstance(verdict, RiskVerdict)
        self.assertEqual(verdict.to_dict(), response.json())

    @patch('screening.views.build_verdict_response', side_effect=RuntimeError('boom'))
    def test_unexpected_failure_returns_server_error(self, _mock):
        with self.assertLogs('screening.views', level='ERROR'):
            response = self.client.post('/api/evaluate', {}, format='json')

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data['error'], 'server_error')


class CatalogueApiTests(SimpleTestCase):
    def setUp(self):
        self.client = APIClient()

    def test_policy_list_is_in_rule_order(self):
        response = self.client.get('/api/policies')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            [item['id'] for item in response.data['results']],
            ['POL-AML-001', 'POL-GEO-055', 'POL-KYC-102', 'POL-EARLY-003'],
        )

    def test_policy_detail_is_case_insensitive(self):
        response = self.client.get('/api/policies/pol-geo-055')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['name'], 'Impossible Travel / Geo-Hopping')
        self.assertEqual(response.data['category'], 'GEO')

    def test_unknown_policy_is_404(self):
        response = self.client.get('/api/policies/POL-NOPE-000')
        self.assertEqual(response.status_code, 404)

    def test_scenario_list_contains_presets(self):
        response = self.client.get('/api/scenarios')

        self.assertEqual(response.status_code, 200)
        ids = [item['id'] for item in response.data['results']]
        self.assertIn('new_account_withdrawals', ids)
        self.assertIn('dormant_reactivation', ids)
        self.assertEqual(len(ids), 7)

    def test_scenario_detail_includes_verdict_and_optional_trace(self):
        response = self.client.get('/api/scenarios/geo_switching')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['scenario']['signals']['geo_switches'], 3)
        self.assertEqual(response.data['verdict']['risk_level'], 'Medium')
        self.assertNotIn('fired_rules', response.data)
        self.assertNotIn('engine_version', response.data)

        traced = self.client.get('/api/scenarios/geo_switching?trace=1')
        self.assertEqual(traced.data['fired_rules'], ['Geo-Hopping'])
        self.assertEqual(traced.data['engine_version'], 1)

    def test_unknown_scenario_is_404(self):
        response = self.client.get('/api/scenarios/does-not-exist')
        self.assertEqual(response.status_code, 404)

    def test_health_endpoint(self):
        response = self.client.get('/api/health')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['status'], 'ok')
        self.assertIn('version', response.data)
