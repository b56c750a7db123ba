"""
Eventmaster translation helpers

Moves values between the protobuf messages and the canonical models, and
between raw JSON bytes and decoded documents. Store ids are turned into
display names here, through a resolver, and nowhere else.
"""

import json
from typing import Any, Dict, Optional, Protocol, Union

from .errors import DecodeError, EncodeError
from .models import (
    DC, Event, Query, ResolvedEvent, TimeQuery, Topic, UnaddedEvent, UNBOUNDED,
)
from .proto import eventmaster_pb2


class NameResolver(Protocol):
    """Read-only id -> display name lookup"""

    def dc_name(self, dc_id: str) -> str: ...

    def topic_name(self, topic_id: str) -> str: ...


# ==================== JSON ====================

def decode_json_object(raw: Optional[Union[bytes, str]], what: str = "data") -> Dict[str, Any]:
    """Decode a JSON object; absent or empty input decodes to {}."""
    if not raw:
        return {}
    try:
        document = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(f"json decode of {what}: {e}") from e
    if not isinstance(document, dict):
        raise DecodeError(f"json decode of {what}: expected an object, got {type(document).__name__}")
    return document


def encode_json(document: Optional[Dict[str, Any]], what: str = "data") -> bytes:
    """Encode a document to JSON bytes; None encodes to {}."""
    if document is None:
        return b"{}"
    try:
        return json.dumps(document, allow_nan=False, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodeError(f"json encode of {what}: {e}") from e


# ==================== Name resolution ====================

def resolve_event(event: Event, resolver: NameResolver) -> ResolvedEvent:
    return ResolvedEvent(
        event_id=event.event_id,
        parent_event_id=event.parent_event_id,
        event_time=event.event_time,
        dc=resolver.dc_name(event.dc_id),
        topic_name=resolver.topic_name(event.topic_id),
        tags=list(event.tags),
        host=event.host,
        target_hosts=list(event.target_hosts),
        user=event.user,
        data=event.data,
    )


# ==================== Events ====================

def unadded_event_from_proto(message) -> UnaddedEvent:
    """Build an UnaddedEvent from an eventmaster.Event, validating its data"""
    return UnaddedEvent(
        parent_event_id=message.parent_event_id,
        event_time=message.event_time,
        dc=message.dc,
        topic_name=message.topic_name,
        tags=list(message.tag_set),
        host=message.host,
        target_hosts=list(message.target_host_set),
        user=message.user,
        data=decode_json_object(message.data, "data"),
    )


def event_to_proto(event: ResolvedEvent):
    return eventmaster_pb2.Event(
        event_id=event.event_id,
        parent_event_id=event.parent_event_id,
        event_time=event.event_time,
        dc=event.dc,
        topic_name=event.topic_name,
        tag_set=event.tags,
        host=event.host,
        target_host_set=event.target_hosts,
        user=event.user,
        data=encode_json(event.data, "data"),
    )


# ==================== Queries ====================

def _time_bound(value: int) -> int:
    # proto3 cannot tell an unset int64 from 0; earlier bounds pass through
    if value in (0, UNBOUNDED):
        return UNBOUNDED
    return value


# Query fields passed through to the store without interpretation
_EXTRA_QUERY_FIELDS = (
    "parent_event_id",
    "target_host_set",
    "tag_set",
    "user",
    "exclude_tags",
    "data",
    "tag_and_operator",
    "target_host_and_operator",
    "sort_field",
    "sort_ascending",
    "start",
    "limit",
)


def query_from_proto(message) -> Query:
    extra: Dict[str, Any] = {}
    for name in _EXTRA_QUERY_FIELDS:
        value = getattr(message, name)
        if hasattr(value, "extend"):
            value = list(value)
        if value:
            extra[name] = value

    return Query(
        dc=list(message.dc),
        host=list(message.host),
        topic_name=list(message.topic_name),
        time_start=_time_bound(message.start_event_time),
        time_end=_time_bound(message.end_event_time),
        extra=extra,
    )


def time_query_from_proto(message) -> TimeQuery:
    return TimeQuery(
        start_event_time=_time_bound(message.start_event_time),
        end_event_time=_time_bound(message.end_event_time),
        limit=message.limit,
        ascending=message.ascending,
    )


# ==================== Topics / DCs ====================

def topic_from_proto(message) -> Topic:
    return Topic(
        name=message.topic_name,
        data_schema=decode_json_object(message.data_schema, "data schema"),
    )


def topic_to_proto(topic: Topic):
    return eventmaster_pb2.Topic(
        id=topic.id,
        topic_name=topic.name,
        data_schema=encode_json(topic.data_schema, "schema"),
    )


def dc_from_proto(message) -> DC:
    return DC(name=message.dc_name)


def dc_to_proto(dc: DC):
    return eventmaster_pb2.DC(id=dc.id, dc_name=dc.name)
