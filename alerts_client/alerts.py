from __future__ import annotations
from typing import Optional

import requests

from .authorizers import PersonalApiKeyCapableV2Authorizer
from .client import Client
from .conditions import ConditionsMixin
from .config import Config
from .infrastructure_conditions import InfrastructureConditionsMixin
from .models import InfrastructureErrorResponse
from .pager import LinkHeaderPager, Pager
from .plugins_conditions import PluginsConditionsMixin
from .policies import PoliciesMixin


class Alerts(PoliciesMixin, ConditionsMixin, PluginsConditionsMixin, InfrastructureConditionsMixin):
    """Entry point for the Alerts API.

    Holds one client for the core Alerts endpoints and one for the
    infrastructure endpoints, which report errors in a different shape.
    """

    def __init__(self, config: Config, session: Optional[requests.Session] = None, pager: Optional[Pager] = None):
        self.config = config
        self.logger = config.get_logger()
        self.client = Client(config, auth_strategy=PersonalApiKeyCapableV2Authorizer, session=session)
        self.infra_client = Client(
            config,
            auth_strategy=PersonalApiKeyCapableV2Authorizer,
            error_model=InfrastructureErrorResponse,
            session=session,
        )
        self.pager = pager or LinkHeaderPager()

    @classmethod
    def from_env(cls) -> 'Alerts':
        return cls(Config.from_env())
