from django.test import SimpleTestCase

from screening.risk_engine.engine import evaluate
from screening.risk_engine.types import InvalidInput, RiskSignals


class RiskSignalsPayloadTests(SimpleTestCase):
    def test_missing_and_null_fields_default_to_zero(self):
        signals = RiskSignals.from_payload({'account_age_days': 12, 'geo_switches': None})
        self.assertEqual(signals, RiskSignals(account_age_days=12))

    def test_numeric_strings_and_integral_floats_are_accepted(self):
        signals = RiskSignals.from_payload({
            'account_age_days': '40',
            'withdrawal_attempts': 2.0,
            'geo_switches': ' 1 ',
        })
        self.assertEqual(signals.account_age_days, 40)
        self.assertEqual(signals.withdrawal_attempts, 2)
        self.assertEqual(signals.geo_switches, 1)

    def test_non_numeric_values_raise_invalid_input(self):
        for value in ('many', 2.5, True, [3], {'count': 1}, float('nan')):
            with self.subTest(value=value):
                with self.assertRaises(InvalidInput) as ctx:
                    RiskSignals.from_payload({'withdrawal_attempts': value})
                self.assertEqual(ctx.exception.field_name, 'withdrawal_attempts')

    def test_invalid_input_is_a_value_error(self):
        self.assertTrue(issubclass(InvalidInput, ValueError))

    def test_negative_values_are_clamped_and_logged(self):
        with self.assertLogs('screening.risk_engine.types', level='WARNING') as logs:
            signals = RiskSignals.from_payload({'withdrawal_attempts': -4})

        self.assertEqual(signals.withdrawal_attempts, 0)
        self.assertIn('withdrawal_attempts', logs.output[0])

    def test_negative_age_is_read_as_zero(self):
        with self.assertLogs('screening.risk_engine.types', level='WARNING'):
            verdict = evaluate({'account_age_days': -10, 'withdrawal_attempts': 5})
        self.assertEqual(verdict.risk_level, 'High')
        self.assertEqual(verdict.risk_score, 75)

    def test_non_mapping_payload_raises_invalid_input(self):
        for payload in ([1, 2], 'abc', 7):
            with self.subTest(payload=payload):
                with self.assertRaises(InvalidInput) as ctx:
                    RiskSignals.from_payload(payload)
                self.assertEqual(ctx.exception.field_name, 'payload')

                with self.assertRaises(InvalidInput):
                    evaluate(payload)

    def test_directly_built_signals_clamp_negatives(self):
        with self.assertLogs('screening.risk_engine.types', level='WARNING') as logs:
            signals = RiskSignals(account_age_days=-5, withdrawal_attempts=3)

        self.assertEqual(signals.account_age_days, 0)
        self.assertIn('account_age_days', logs.output[0])

        with self.assertLogs('screening.risk_engine.types', level='WARNING'):
            verdict = evaluate(RiskSignals(account_age_days=-5, withdrawal_attempts=3))
        self.assertEqual(verdict.risk_level, 'High')
        self.assertEqual(verdict.risk_score, 75)
