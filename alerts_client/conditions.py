from __future__ import annotations
from typing import List, Optional

from .models import AlertsModel, StringFloat, StringInt
from .resources import Resource, ResourceOperations


class ConditionTerm(AlertsModel):
    """Threshold term; duration and threshold travel as strings on the wire."""
    duration: Optional[StringInt] = None
    operator: str = 'above'
    priority: str = 'critical'
    threshold: StringFloat = 0.0
    time_function: str = 'all'


class ConditionUserDefined(AlertsModel):
    metric: Optional[str] = None
    value_function: Optional[str] = None


class Condition(AlertsModel):
    """APM, browser, mobile or servers metric condition."""
    id: Optional[int] = None
    type: Optional[str] = None
    name: Optional[str] = None
    enabled: bool = False
    entities: Optional[List[str]] = None
    metric: Optional[str] = None
    runbook_url: Optional[str] = None
    terms: Optional[List[ConditionTerm]] = None
    user_defined: Optional[ConditionUserDefined] = None
    condition_scope: Optional[str] = None
    gc_metric: Optional[str] = None
    violation_close_timer: Optional[int] = None


class ConditionsEnvelope(AlertsModel):
    conditions: List[Condition] = []


class ConditionEnvelope(AlertsModel):
    condition: Optional[Condition] = None


CONDITIONS = Resource(
    name='condition',
    list_envelope=ConditionsEnvelope,
    list_key='conditions',
    item_envelope=ConditionEnvelope,
    item_key='condition',
    direct_get=False,
)


class ConditionsMixin(ResourceOperations):

    def list_conditions(self, policy_id: int) -> List[Condition]:
        url = self.config.region.rest_url('/alerts_conditions.json')
        return self._list_all(self.client, CONDITIONS, url, {'policy_id': policy_id})

    def get_condition(self, policy_id: int, condition_id: int) -> Condition:
        return self._get_one(
            self.client, CONDITIONS, f"policy {policy_id} and condition ID {condition_id}",
            list_url=self.config.region.rest_url('/alerts_conditions.json'),
            list_params={'policy_id': policy_id},
            match=lambda c: c.id == condition_id,
        )

    def create_condition(self, policy_id: int, condition: Condition) -> Condition:
        url = self.config.region.rest_url(f"/alerts_conditions/policies/{policy_id}.json")
        return self._create_one(self.client, CONDITIONS, url, condition)

    def update_condition(self, condition: Condition) -> Condition:
        url = self.config.region.rest_url(f"/alerts_conditions/{condition.id}.json")
        return self._update_one(self.client, CONDITIONS, url, condition)

    def delete_condition(self, condition_id: int) -> Optional[Condition]:
        url = self.config.region.rest_url(f"/alerts_conditions/{condition_id}.json")
        return self._delete_one(self.client, CONDITIONS, url)
