from __future__ import annotations
from typing import List, Optional

from .conditions import ConditionTerm
from .models import AlertsModel
from .resources import Resource, ResourceOperations


class AlertPlugin(AlertsModel):
    id: Optional[str] = None
    guid: Optional[str] = None


class PluginsCondition(AlertsModel):
    """Alert condition on a plugin metric."""
    id: Optional[int] = None
    name: Optional[str] = None
    enabled: bool = False
    entities: Optional[List[str]] = None
    metric: Optional[str] = None
    metric_description: Optional[str] = None
    runbook_url: Optional[str] = None
    terms: Optional[List[ConditionTerm]] = None
    value_function: Optional[str] = None
    plugin: Optional[AlertPlugin] = None


class PluginsConditionsEnvelope(AlertsModel):
    plugins_conditions: List[PluginsCondition] = []


class PluginsConditionEnvelope(AlertsModel):
    plugins_condition: Optional[PluginsCondition] = None


PLUGINS_CONDITIONS = Resource(
    name='plugins condition',
    list_envelope=PluginsConditionsEnvelope,
    list_key='plugins_conditions',
    item_envelope=PluginsConditionEnvelope,
    item_key='plugins_condition',
    direct_get=False,
)


class PluginsConditionsMixin(ResourceOperations):

    def list_plugins_conditions(self, policy_id: int) -> List[PluginsCondition]:
        url = self.config.region.rest_url('/alerts_plugins_conditions.json')
        return self._list_all(self.client, PLUGINS_CONDITIONS, url, {'policy_id': policy_id})

    def get_plugins_condition(self, policy_id: int, condition_id: int) -> PluginsCondition:
        return self._get_one(
            self.client, PLUGINS_CONDITIONS, f"policy {policy_id} and condition ID {condition_id}",
            list_url=self.config.region.rest_url('/alerts_plugins_conditions.json'),
            list_params={'policy_id': policy_id},
            match=lambda c: c.id == condition_id,
        )

    def create_plugins_condition(self, policy_id: int, condition: PluginsCondition) -> PluginsCondition:
        url = self.config.region.rest_url(f"/alerts_plugins_conditions/policies/{policy_id}.json")
        return self._create_one(self.client, PLUGINS_CONDITIONS, url, condition)

    def update_plugins_condition(self, condition: PluginsCondition) -> PluginsCondition:
        url = self.config.region.rest_url(f"/alerts_plugins_conditions/{condition.id}.json")
        return self._update_one(self.client, PLUGINS_CONDITIONS, url, condition)

    def delete_plugins_condition(self, condition_id: int) -> Optional[PluginsCondition]:
        url = self.config.region.rest_url(f"/alerts_plugins_conditions/{condition_id}.json")
        return self._delete_one(self.client, PLUGINS_CONDITIONS, url)
