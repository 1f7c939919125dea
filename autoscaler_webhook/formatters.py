from .constants import (
    DEFAULT_AUTOSCALER_RESOURCE_NAME,
    DEFAULT_AUTOSCALER_SOURCE,
    DESCRIPTION_MAX_LENGTH,
    FIELD_VALUE_MAX_LENGTH,
    FOOTER_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)
from .models import EmbedMessage
from .params import AlertParameters
from .utils import string_truncate, strip_trailing_slash, text_or_empty


def build_autoscaler_url(params: AlertParameters) -> str:
    # Values are concatenated verbatim, the caller supplies URL-safe text
    source = params.autoscaler_source or DEFAULT_AUTOSCALER_SOURCE
    resource_name = params.autoscaler_resource_name or DEFAULT_AUTOSCALER_RESOURCE_NAME
    endpoint = strip_trailing_slash(params.autoscaler_endpoint)

    url = f"{endpoint}/{params.autoscaler_event_type}?source={source}&resource_name={resource_name}"
    if params.autoscaler_desired_state_name:
        url += f"&desired-state-name={params.autoscaler_desired_state_name}"
    return url


def parse_color(hex_color: str) -> int:
    try:
        return int(hex_color.replace('#', ''), 16)
    except (AttributeError, ValueError):
        return 0


def build_event_url(params: AlertParameters) -> str:
    zabbix_url = strip_trailing_slash(params.zabbix_url)
    if params.is_trigger_event:
        return (
            f"{zabbix_url}/tr_events.php?triggerid={text_or_empty(params.trigger_id)}"
            f"&eventid={params.event_id}"
        )
    return zabbix_url


def _when(time_value, date_value) -> str:
    return f"{text_or_empty(time_value)} {text_or_empty(date_value)}"


def _apply_default_message(embed: EmbedMessage, params: AlertParameters) -> None:
    embed.title = string_truncate(text_or_empty(params.alert_subject), TITLE_MAX_LENGTH)
    embed.description = string_truncate(text_or_empty(params.alert_message), DESCRIPTION_MAX_LENGTH)


def _apply_event_fields(embed: EmbedMessage, params: AlertParameters) -> None:
    event_name = text_or_empty(params.event_name)

    embed.add_field('Host', f"{text_or_empty(params.host_name)} [{text_or_empty(params.host_ip)}]")

    if params.is_resolved:
        embed.title = string_truncate(f"OK: {event_name}", TITLE_MAX_LENGTH)
        embed.add_field(
            'Recovery time',
            _when(params.event_recovery_time, params.event_recovery_date),
            inline=True,
        )
    elif params.is_problem:
        embed.title = string_truncate(f"PROBLEM: {event_name}", TITLE_MAX_LENGTH)
        embed.add_field('Event time', _when(params.event_time, params.event_date), inline=True)
    elif params.is_update:
        embed.title = string_truncate(f"UPDATE: {event_name}", TITLE_MAX_LENGTH)
        description = (
            f"{text_or_empty(params.event_update_user)} {text_or_empty(params.event_update_action)}."
        )
        if params.event_update_message:
            description += f" Comment:\n>>> {params.event_update_message}"
        embed.description = string_truncate(description, DESCRIPTION_MAX_LENGTH)
        embed.add_field(
            'Event update time',
            _when(params.event_update_time, params.event_update_date),
            inline=True,
        )

    embed.add_field('Severity', text_or_empty(params.event_severity), inline=True)

    if params.event_opdata:
        embed.add_field(
            'Operational data',
            string_truncate(params.event_opdata, FIELD_VALUE_MAX_LENGTH),
            inline=True,
        )

    if params.is_problem and params.trigger_description:
        embed.add_field(
            'Trigger description',
            string_truncate(params.trigger_description, FIELD_VALUE_MAX_LENGTH),
        )

    footer = f"Event ID: {params.event_id}"
    if params.event_tags:
        footer += f"\nEvent tags: {params.event_tags}"
    embed.footer = string_truncate(footer, FOOTER_MAX_LENGTH)


def build_embed(params: AlertParameters) -> EmbedMessage:
    """
    Build the embed for one alert.

    Non trigger-based events and ``use_default_message=true`` produce a plain
    title/description message from {ALERT.SUBJECT} and {ALERT.MESSAGE}. Every
    other event gets the host/time/severity field layout.
    """
    embed = EmbedMessage(
        color=parse_color(params.severity_color),
        url=build_event_url(params),
    )
    if params.use_default_message:
        _apply_default_message(embed, params)
    else:
        _apply_event_fields(embed, params)
    return embed
