from __future__ import annotations

import json

from django.core.management.base import BaseCommand, CommandError

from screening.scenarios import SCENARIOS, get_scenario
from screening.services import run_evaluation


class Command(BaseCommand):
    help = 'Evaluate the preset dashboard scenarios and print their verdicts.'

    def add_arguments(self, parser):
        parser.add_argument('--scenario', type=str, default='', help='Only evaluate one scenario id.')
        parser.add_argument('--json', action='store_true', help='Print full verdicts as JSON.')
        parser.add_argument('--trace', action='store_true', help='List the rules that fired for each scenario.')

    def handle(self, *args, **options):
        scenario_id = (options['scenario'] or '').strip()
        as_json = bool(options['json'])
        trace = bool(options['trace'])

        if scenario_id:
            scenario = get_scenario(scenario_id)
            if scenario is None:
                raise CommandError(f'Unknown scenario: {scenario_id}')
            scenarios = [scenario]
        else:
            scenarios = list(SCENARIOS.values())

        results = []
        for scenario in scenarios:
            result = run_evaluation(scenario.signals)
            verdict = result.verdict

            if as_json:
                entry = {'scenario': scenario.id, 'verdict': verdict.to_dict()}
                if trace:
                    entry['fired_rules'] = result.fired_rules
                    entry['engine_version'] = result.version
                results.append(entry)
                continue

            self.stdout.write(
                f'{scenario.id}: {verdict.risk_level} ({verdict.risk_score}) -> {verdict.recommended_action}'
            )
            if trace:
                fired = ', '.join(result.fired_rules) or 'none'
                self.stdout.write(f'  rules: {fired}')

        if as_json:
            self.stdout.write(json.dumps(results, indent=2))
            return

        self.stdout.write(self.style.SUCCESS(f'Evaluated {len(scenarios)} scenario(s).'))
