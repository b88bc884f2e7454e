import logging

import pytest

from alerts_client.alerts import Alerts
from alerts_client.config import Config, Credential, CredentialKind, Region
from alerts_client.exceptions import ConfigurationError

ENV_VARS = [
    'NEW_RELIC_API_KEY', 'NEW_RELIC_API_KEY_VERSION', 'NEW_RELIC_ADMIN_API_KEY',
    'NEW_RELIC_REGION', 'NEW_RELIC_TIMEOUT', 'NEW_RELIC_LOG_LEVEL',
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_region_urls():
    assert Region.US.rest_url('/alerts_policies.json') == 'https://api.newrelic.com/v2/alerts_policies.json'
    assert Region.EU.rest_url('alerts_policies.json') == 'https://api.eu.newrelic.com/v2/alerts_policies.json'
    assert Region.US.infrastructure_url('/alerts/conditions') == 'https://infra-api.newrelic.com/v2/alerts/conditions'
    assert Region.EU.infrastructure_url('/alerts/conditions/1') == 'https://infra-api.eu.newrelic.com/v2/alerts/conditions/1'


def test_region_parse():
    assert Region.parse(None) is Region.US
    assert Region.parse('') is Region.US
    assert Region.parse('eu') is Region.EU
    with pytest.raises(ConfigurationError):
        Region.parse('APAC')


def test_from_env_personal_key_defaults_to_v2(monkeypatch):
    monkeypatch.setenv('NEW_RELIC_API_KEY', 'NRAK-123')
    monkeypatch.setenv('NEW_RELIC_REGION', 'EU')
    monkeypatch.setenv('NEW_RELIC_TIMEOUT', '5')
    cfg = Config.from_env()
    assert cfg.credential.kind is CredentialKind.PERSONAL_V2
    assert cfg.credential.key == 'NRAK-123'
    assert cfg.region is Region.EU
    assert cfg.timeout == 5


def test_from_env_personal_key_v1(monkeypatch):
    monkeypatch.setenv('NEW_RELIC_API_KEY', 'abc')
    monkeypatch.setenv('NEW_RELIC_API_KEY_VERSION', '1')
    assert Config.from_env().credential.kind is CredentialKind.PERSONAL_V1


def test_from_env_admin_key_is_rest_credential(monkeypatch):
    monkeypatch.setenv('NEW_RELIC_ADMIN_API_KEY', 'admin-key')
    cfg = Config.from_env()
    assert cfg.credential.kind is CredentialKind.REST
    assert cfg.region is Region.US


def test_from_env_without_keys_has_no_credential():
    assert Config.from_env().credential is None


def test_invalid_values_raise(monkeypatch):
    monkeypatch.setenv('NEW_RELIC_TIMEOUT', 'soon')
    with pytest.raises(ConfigurationError):
        Config.from_env()
    monkeypatch.setenv('NEW_RELIC_TIMEOUT', '10')
    monkeypatch.setenv('NEW_RELIC_API_KEY', 'abc')
    monkeypatch.setenv('NEW_RELIC_API_KEY_VERSION', '3')
    with pytest.raises(ConfigurationError):
        Config.from_env()


@pytest.mark.parametrize('timeout', ['0', '-5'])
def test_non_positive_timeout_raises(timeout):
    with pytest.raises(ConfigurationError):
        Config.from_mapping({'admin_api_key': 'k', 'timeout': timeout})
    with pytest.raises(ConfigurationError):
        Config(timeout=int(timeout))


def test_unknown_log_level_raises_at_construction():
    with pytest.raises(ConfigurationError):
        Config.from_mapping({'admin_api_key': 'k', 'log_level': 'verbose'})
    with pytest.raises(ConfigurationError):
        Config(log_level='VERBOSE')
    assert Config(log_level='warning').log_level_value == logging.WARNING


def test_building_clients_leaves_logger_level_alone():
    logger = logging.getLogger('alerts_client')
    before = logger.level
    Alerts(Config(credential=Credential(CredentialKind.REST, 'k'), log_level='DEBUG'))
    Alerts(Config(credential=Credential(CredentialKind.REST, 'k'), log_level='ERROR'))
    assert logger.level == before
    assert Config(log_level='DEBUG').get_logger() is logger


def test_from_yaml(tmp_path):
    path = tmp_path / 'alerts.yaml'
    path.write_text('admin_api_key: xyz\nregion: eu\ntimeout: 12\nlog_level: debug\n', encoding='utf-8')
    cfg = Config.from_yaml(path)
    assert cfg.credential.kind is CredentialKind.REST
    assert cfg.region is Region.EU
    assert cfg.timeout == 12
    assert cfg.log_level_value == logging.DEBUG


def test_from_yaml_missing_or_malformed(tmp_path):
    with pytest.raises(ConfigurationError):
        Config.from_yaml(tmp_path / 'nope.yaml')
    path = tmp_path / 'list.yaml'
    path.write_text('- a\n- b\n', encoding='utf-8')
    with pytest.raises(ConfigurationError):
        Config.from_yaml(path)


def test_config_is_frozen():
    cfg = Config()
    with pytest.raises(AttributeError):
        cfg.timeout = 1
