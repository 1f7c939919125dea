"""Parsing and validation of the parameters sent by the Zabbix media type.

The alerting engine hands over a flat JSON object of strings. ``parse_params``
turns it into an immutable :class:`AlertParameters`; every later stage only
ever sees that validated value.
"""
import json
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .constants import (
    AUTOSCALER_EVENT_TYPES,
    EVENT_SOURCES,
    RESOLVED_SEVERITY,
    SEVERITY_COLORS,
)
from .exceptions import ParameterError
from .utils import equals_number, is_present, is_true, parse_int_prefix


@dataclass(frozen=True)
class AlertParameters:
    autoscaler_endpoint: str
    autoscaler_event_type: str
    zabbix_url: str
    event_source: str
    event_id: str
    severity_index: int
    use_default_message: bool
    event_value: Optional[str] = None
    event_update_status: Optional[str] = None
    autoscaler_source: Optional[str] = None
    autoscaler_resource_name: Optional[str] = None
    autoscaler_desired_state_name: Optional[str] = None
    alert_subject: Optional[str] = None
    alert_message: Optional[str] = None
    event_name: Optional[str] = None
    event_severity: Optional[str] = None
    event_opdata: Optional[str] = None
    event_tags: Optional[str] = None
    event_time: Optional[str] = None
    event_date: Optional[str] = None
    event_recovery_time: Optional[str] = None
    event_recovery_date: Optional[str] = None
    event_update_time: Optional[str] = None
    event_update_date: Optional[str] = None
    event_update_user: Optional[str] = None
    event_update_action: Optional[str] = None
    event_update_message: Optional[str] = None
    host_name: Optional[str] = None
    host_ip: Optional[str] = None
    trigger_id: Optional[str] = None
    trigger_description: Optional[str] = None
    http_proxy: Optional[str] = None

    @property
    def is_trigger_event(self) -> bool:
        return self.event_source == '0'

    @property
    def is_resolved(self) -> bool:
        return equals_number(self.event_value, 0) and equals_number(self.event_update_status, 0)

    @property
    def is_problem(self) -> bool:
        return equals_number(self.event_value, 1) and equals_number(self.event_update_status, 0)

    @property
    def is_update(self) -> bool:
        return equals_number(self.event_update_status, 1)

    @property
    def severity_color(self) -> str:
        return SEVERITY_COLORS[self.severity_index]


_CANONICAL_INT = re.compile(r'0|[1-9][0-9]*')

# Optional keys copied as-is; parameter name -> AlertParameters field
_OPTIONAL_KEYS = {
    'autoscaler_source': 'autoscaler_source',
    'autoscaler_resource_name': 'autoscaler_resource_name',
    'autoscaler_desired_state_name': 'autoscaler_desired_state_name',
    'alert_subject': 'alert_subject',
    'alert_message': 'alert_message',
    'event_name': 'event_name',
    'event_severity': 'event_severity',
    'event_opdata': 'event_opdata',
    'event_tags': 'event_tags',
    'event_time': 'event_time',
    'event_date': 'event_date',
    'event_recovery_time': 'event_recovery_time',
    'event_recovery_date': 'event_recovery_date',
    'event_update_time': 'event_update_time',
    'event_update_date': 'event_update_date',
    'event_update_user': 'event_update_user',
    'event_update_action': 'event_update_action',
    'event_update_message': 'event_update_message',
    'host_name': 'host_name',
    'host_ip': 'host_ip',
    'trigger_id': 'trigger_id',
    'trigger_description': 'trigger_description',
    'HTTPProxy': 'http_proxy',
}


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return value if isinstance(value, str) else str(value)


def _normalize(raw: Mapping[str, Any]) -> dict:
    return {str(key): _as_text(value) for key, value in raw.items()}


def _valid_severity_index(value: Optional[str]) -> Optional[int]:
    # Only canonical integers index the table: "3" is valid, "03" or "3.0" are not
    if value is None or not _CANONICAL_INT.fullmatch(value):
        return None
    index = int(value)
    if index >= len(SEVERITY_COLORS):
        return None
    return index


def parse_params(raw: Mapping[str, Any]) -> AlertParameters:
    """Validate the raw parameter mapping, raising ParameterError on the first problem."""
    params = _normalize(raw)

    endpoint = params.get('autoscaler_endpoint')
    if not endpoint:
        raise ParameterError('Cannot get autoscaler_endpoint')

    event_type = params.get('autoscaler_event_type')
    if event_type not in AUTOSCALER_EVENT_TYPES:
        raise ParameterError(
            f'Incorrect "autoscaler_event_type" parameter given: "{event_type}".\n'
            'Must be "up" or "down".'
        )

    zabbix_url = params.get('zabbix_url')
    if zabbix_url is None:
        raise ParameterError('Cannot get zabbix_url')

    event_source = params.get('event_source')
    if parse_int_prefix(event_source) not in EVENT_SOURCES:
        raise ParameterError(
            f'Incorrect "event_source" parameter given: "{event_source}".\nMust be 0-3.'
        )

    event_id = params.get('event_id')
    if event_id is None:
        raise ParameterError('Cannot get event_id')

    use_default_message = params.get('use_default_message')
    nseverity = params.get('event_nseverity')

    # Non trigger-based events always use the default message
    if event_source != '0':
        use_default_message = 'true'
        nseverity = '0'

    event_value = params.get('event_value')
    if event_value not in ('0', '1') and event_source in ('0', '3'):
        raise ParameterError(
            f'Incorrect "event_value" parameter given: "{event_value}".\nMust be 0 or 1.'
        )

    event_update_status = params.get('event_update_status')
    if event_update_status not in ('0', '1') and event_source == '0':
        raise ParameterError(
            f'Incorrect "event_update_status" parameter given: "{event_update_status}".\n'
            'Must be 0 or 1.'
        )

    if equals_number(event_value, 0):
        nseverity = RESOLVED_SEVERITY

    severity_index = _valid_severity_index(nseverity)
    if severity_index is None:
        raise ParameterError(
            f'Incorrect "event_nseverity" parameter given: {nseverity}\nMust be 0-5.'
        )

    optional = {
        field: params.get(key)
        for key, field in _OPTIONAL_KEYS.items()
        if is_present(params.get(key))
    }

    return AlertParameters(
        autoscaler_endpoint=endpoint,
        autoscaler_event_type=event_type,
        zabbix_url=zabbix_url,
        event_source=event_source,
        event_id=event_id,
        severity_index=severity_index,
        use_default_message=is_true(use_default_message),
        event_value=event_value,
        event_update_status=event_update_status,
        **optional,
    )


def load_params(value: str) -> AlertParameters:
    """Parse the stringified JSON object handed over by the alerting engine."""
    try:
        raw = json.loads(value)
    except (TypeError, ValueError) as exc:
        raise ParameterError(f'Cannot parse parameters: {exc}') from exc
    if not isinstance(raw, dict):
        raise ParameterError('Cannot parse parameters: expected a JSON object')
    return parse_params(raw)
