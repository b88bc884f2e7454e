import json

import pytest
import responses
from responses import matchers

from alerts_client.conditions import Condition, ConditionTerm, ConditionUserDefined
from alerts_client.exceptions import NotFoundError

POLICY_ID = 111111
LIST_URL = 'https://api.newrelic.com/v2/alerts_conditions.json'

CONDITION_JSON = {
    'id': 123,
    'type': 'apm_app_metric',
    'name': 'Apdex (High)',
    'enabled': True,
    'entities': ['321'],
    'metric': 'apdex',
    'runbook_url': 'https://example.com/runbook',
    'terms': [
        {'duration': '5', 'operator': 'below', 'priority': 'critical', 'threshold': '0.9', 'time_function': 'all'},
    ],
    'user_defined': {'metric': '', 'value_function': ''},
    'condition_scope': 'application',
    'violation_close_timer': 24,
}


def test_list_conditions_sends_policy_id(alerts, mocked):
    mocked.add(
        responses.GET, LIST_URL,
        json={'conditions': [CONDITION_JSON]},
        match=[matchers.query_param_matcher({'policy_id': str(POLICY_ID)})],
    )
    conditions = alerts.list_conditions(POLICY_ID)
    assert len(conditions) == 1
    term = conditions[0].terms[0]
    assert term.duration == 5
    assert term.threshold == 0.9
    assert conditions[0].user_defined.value_function == ''


def test_get_condition_by_scan(alerts, mocked):
    other = dict(CONDITION_JSON, id=124, name='Error rate')
    mocked.add(responses.GET, LIST_URL, json={'conditions': [other, CONDITION_JSON]})
    condition = alerts.get_condition(POLICY_ID, 123)
    assert condition.name == 'Apdex (High)'


def test_get_condition_missing(alerts, mocked):
    mocked.add(responses.GET, LIST_URL, json={'conditions': [CONDITION_JSON]})
    with pytest.raises(NotFoundError):
        alerts.get_condition(POLICY_ID, 999)


def test_create_condition_round_trip(alerts, mocked):
    url = f'https://api.newrelic.com/v2/alerts_conditions/policies/{POLICY_ID}.json'
    mocked.add_callback(responses.POST, url, callback=lambda request: (201, {}, request.body))
    condition = Condition(
        type='apm_app_metric',
        name='Response time',
        enabled=True,
        entities=['1', '2'],
        metric='response_time_web',
        terms=[ConditionTerm(duration=10, operator='above', priority='warning', threshold=1.5, time_function='any')],
        user_defined=ConditionUserDefined(metric='Custom/foo', value_function='average'),
        violation_close_timer=72,
    )

    created = alerts.create_condition(POLICY_ID, condition)

    sent = json.loads(mocked.calls[0].request.body)
    assert sent['condition']['terms'][0]['duration'] == '10'
    assert sent['condition']['terms'][0]['threshold'] == '1.5'
    assert created == condition


def test_integral_threshold_sent_without_fraction(alerts, mocked):
    url = f'https://api.newrelic.com/v2/alerts_conditions/policies/{POLICY_ID}.json'
    mocked.add(responses.POST, url, json={'condition': CONDITION_JSON})
    alerts.create_condition(POLICY_ID, Condition(name='x', terms=[ConditionTerm(duration=5, threshold=3.0)]))
    assert json.loads(mocked.calls[0].request.body)['condition']['terms'][0]['threshold'] == '3'


def test_update_condition(alerts, mocked):
    mocked.add(responses.PUT, 'https://api.newrelic.com/v2/alerts_conditions/123.json',
               json={'condition': dict(CONDITION_JSON, enabled=False)})
    updated = alerts.update_condition(Condition(id=123, name='Apdex (High)', enabled=False))
    assert updated.enabled is False


def test_delete_condition(alerts, mocked):
    mocked.add(responses.DELETE, 'https://api.newrelic.com/v2/alerts_conditions/123.json',
               json={'condition': CONDITION_JSON})
    assert alerts.delete_condition(123).id == 123
