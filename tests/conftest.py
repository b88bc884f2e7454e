import pytest
import responses

from alerts_client import Alerts, Config, Credential, CredentialKind

TEST_API_KEY = 'NRAK-TESTKEY0000000000000000'


@pytest.fixture
def config():
    return Config(credential=Credential(CredentialKind.PERSONAL_V2, TEST_API_KEY))


@pytest.fixture
def alerts(config):
    return Alerts(config)


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps
