from __future__ import annotations
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .models import AlertsModel, EpochMillis
from .resources import Resource, ResourceOperations


class IncidentPreference(str, Enum):
    PER_POLICY = 'PER_POLICY'
    PER_CONDITION = 'PER_CONDITION'
    PER_CONDITION_AND_TARGET = 'PER_CONDITION_AND_TARGET'


class Policy(AlertsModel):
    """A named group of conditions sharing incident behaviour."""
    id: Optional[int] = None
    name: Optional[str] = None
    incident_preference: Optional[IncidentPreference] = None
    created_at: Optional[EpochMillis] = None
    updated_at: Optional[EpochMillis] = None


class PoliciesEnvelope(AlertsModel):
    policies: List[Policy] = []


class PolicyEnvelope(AlertsModel):
    policy: Optional[Policy] = None


class PolicyListParams(AlertsModel):
    name: Optional[str] = Field(default=None, alias='filter[name]')


POLICIES = Resource(
    name='policy',
    list_envelope=PoliciesEnvelope,
    list_key='policies',
    item_envelope=PolicyEnvelope,
    item_key='policy',
    direct_get=False,
)


class PoliciesMixin(ResourceOperations):

    def list_policies(self, name: Optional[str] = None) -> List[Policy]:
        """Return every alert policy, optionally filtered by (partial) name."""
        url = self.config.region.rest_url('/alerts_policies.json')
        return self._list_all(self.client, POLICIES, url, PolicyListParams(name=name))

    def get_policy(self, policy_id: int) -> Policy:
        return self._get_one(
            self.client, POLICIES, f"policy ID {policy_id}",
            list_url=self.config.region.rest_url('/alerts_policies.json'),
            match=lambda p: p.id == policy_id,
        )

    def create_policy(self, policy: Policy) -> Policy:
        url = self.config.region.rest_url('/alerts_policies.json')
        return self._create_one(self.client, POLICIES, url, policy)

    def update_policy(self, policy: Policy) -> Policy:
        url = self.config.region.rest_url(f"/alerts_policies/{policy.id}.json")
        return self._update_one(self.client, POLICIES, url, policy)

    def delete_policy(self, policy_id: int) -> Optional[Policy]:
        url = self.config.region.rest_url(f"/alerts_policies/{policy_id}.json")
        return self._delete_one(self.client, POLICIES, url)
