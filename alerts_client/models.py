"""Shared pydantic base, wire-format field types and the service error payloads."""
from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _from_epoch_millis(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return EPOCH + timedelta(milliseconds=value)
    return value


def _to_epoch_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // timedelta(milliseconds=1)


def _float_to_str(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


# Epoch milliseconds on the wire, aware UTC datetime in Python.
EpochMillis = Annotated[datetime, BeforeValidator(_from_epoch_millis), PlainSerializer(_to_epoch_millis, return_type=int)]

# Numbers the core Alerts API sends and expects as JSON strings.
StringInt = Annotated[int, PlainSerializer(str, return_type=str)]
StringFloat = Annotated[float, PlainSerializer(_float_to_str, return_type=str)]


class AlertsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode='json')


class ErrorDetail(AlertsModel):
    title: str = ''
    messages: List[str] = []


class ErrorResponse(AlertsModel):
    """Core Alerts error body: {"error": {"title": ...}}."""
    error: Optional[ErrorDetail] = None

    def error_message(self) -> str:
        if self.error is None:
            return ''
        parts = [self.error.title] + list(self.error.messages)
        return ', '.join(p for p in parts if p)

    def error_code(self) -> Optional[str]:
        return None

    def is_not_found(self) -> bool:
        return 'not found' in self.error_message().lower()


class InfrastructureErrorDetail(AlertsModel):
    status: Annotated[str, BeforeValidator(str)] = ''
    detail: str = ''


class InfrastructureErrorResponse(AlertsModel):
    """Infrastructure error body: {"errors": [{"status": ..., "detail": ...}]}."""
    errors: List[InfrastructureErrorDetail] = []
    description: str = ''

    def error_message(self) -> str:
        details = [e.detail for e in self.errors if e.detail]
        if self.description:
            details.insert(0, self.description)
        return ', '.join(details)

    def error_code(self) -> Optional[str]:
        for e in self.errors:
            if e.status:
                return e.status
        return None

    def is_not_found(self) -> bool:
        return any(e.status == '404' for e in self.errors) or 'not found' in self.error_message().lower()
