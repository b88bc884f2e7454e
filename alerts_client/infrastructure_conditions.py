from __future__ import annotations
from typing import List, Optional

from pydantic import Field

from .models import AlertsModel, EpochMillis
from .resources import Resource, ResourceOperations


class InfrastructureConditionThreshold(AlertsModel):
    duration: Optional[int] = Field(default=None, alias='duration_minutes')
    function: Optional[str] = Field(default=None, alias='time_function')
    value: Optional[float] = None


class InfrastructureCondition(AlertsModel):
    """Condition evaluated by the infrastructure product (host, process, integration)."""
    comparison: Optional[str] = None
    created_at: Optional[EpochMillis] = Field(default=None, alias='created_at_epoch_millis')
    critical: Optional[InfrastructureConditionThreshold] = Field(default=None, alias='critical_threshold')
    enabled: bool = False
    event: Optional[str] = Field(default=None, alias='event_type')
    id: Optional[int] = None
    integration_provider: Optional[str] = None
    name: Optional[str] = None
    policy_id: Optional[int] = None
    process_where: Optional[str] = Field(default=None, alias='process_where_clause')
    runbook_url: Optional[str] = None
    select: Optional[str] = Field(default=None, alias='select_value')
    type: Optional[str] = None
    updated_at: Optional[EpochMillis] = Field(default=None, alias='updated_at_epoch_millis')
    violation_close_timer: Optional[int] = None
    warning: Optional[InfrastructureConditionThreshold] = Field(default=None, alias='warning_threshold')
    where: Optional[str] = Field(default=None, alias='where_clause')


class InfrastructureConditionsEnvelope(AlertsModel):
    data: List[InfrastructureCondition] = []


class InfrastructureConditionEnvelope(AlertsModel):
    data: Optional[InfrastructureCondition] = None


INFRASTRUCTURE_CONDITIONS = Resource(
    name='infrastructure condition',
    list_envelope=InfrastructureConditionsEnvelope,
    list_key='data',
    item_envelope=InfrastructureConditionEnvelope,
    item_key='data',
    direct_get=True,
)


class InfrastructureConditionsMixin(ResourceOperations):

    def list_infrastructure_conditions(self, policy_id: int) -> List[InfrastructureCondition]:
        url = self.config.region.infrastructure_url('/alerts/conditions')
        return self._list_all(self.infra_client, INFRASTRUCTURE_CONDITIONS, url, {'policy_id': policy_id})

    def get_infrastructure_condition(self, condition_id: int) -> InfrastructureCondition:
        return self._get_one(
            self.infra_client, INFRASTRUCTURE_CONDITIONS, f"condition ID {condition_id}",
            item_url=self.config.region.infrastructure_url(f"/alerts/conditions/{condition_id}"),
        )

    def create_infrastructure_condition(self, condition: InfrastructureCondition) -> InfrastructureCondition:
        url = self.config.region.infrastructure_url('/alerts/conditions')
        return self._create_one(self.infra_client, INFRASTRUCTURE_CONDITIONS, url, condition)

    def update_infrastructure_condition(self, condition: InfrastructureCondition) -> InfrastructureCondition:
        url = self.config.region.infrastructure_url(f"/alerts/conditions/{condition.id}")
        return self._update_one(self.infra_client, INFRASTRUCTURE_CONDITIONS, url, condition)

    def delete_infrastructure_condition(self, condition_id: int) -> None:
        url = self.config.region.infrastructure_url(f"/alerts/conditions/{condition_id}")
        self._delete_one(self.infra_client, INFRASTRUCTURE_CONDITIONS, url)
