"""
Eventmaster Service - Mock Dependencies

Mock implementations for component testing.
Records every store call so tests can assert which calls happened.
"""
from typing import Any, Dict, List, Optional

import grpc

from microservices.eventmaster_service.event_store import EventStore, EventIDSink
from microservices.eventmaster_service.models import DC, Event, Query, TimeQuery, Topic, UnaddedEvent


class MockEventStore(EventStore):
    """Mock event store for component testing

    Returns canned data set through the set_* helpers. set_error makes the
    next call of a given method raise.
    """

    def __init__(self):
        self._events: List[Event] = []
        self._topics: List[Topic] = []
        self._dcs: List[DC] = []
        self._dc_names: Dict[str, str] = {}
        self._topic_names: Dict[str, str] = {}
        self._stream_ids: List[str] = []
        self._stream_error: Optional[Exception] = None
        self._errors: Dict[str, Exception] = {}
        self._next_id = "id-1"
        self._call_log: List[Dict[str, Any]] = []

    # ==================== Setup helpers ====================

    def set_events(self, events: List[Event]):
        self._events = list(events)

    def set_topics(self, topics: List[Topic]):
        self._topics = list(topics)
        self._topic_names.update({t.id: t.name for t in topics})

    def set_dcs(self, dcs: List[DC]):
        self._dcs = list(dcs)
        self._dc_names.update({dc.id: dc.name for dc in dcs})

    def set_stream(self, ids: List[str], error: Optional[Exception] = None):
        self._stream_ids = list(ids)
        self._stream_error = error

    def set_next_id(self, object_id: str):
        self._next_id = object_id

    def set_error(self, method: str, error: Exception):
        self._errors[method] = error

    # ==================== Call log ====================

    def _record(self, method: str, **kwargs):
        self._call_log.append({"method": method, **kwargs})
        if method in self._errors:
            raise self._errors[method]

    def calls(self, method: str) -> List[Dict[str, Any]]:
        return [c for c in self._call_log if c["method"] == method]

    def assert_called(self, method: str):
        assert self.calls(method), f"Expected {method} to be called"

    def assert_not_called(self, method: str):
        assert not self.calls(method), f"Expected {method} not to be called"

    # ==================== EventStore ====================

    def add_event(self, event: UnaddedEvent) -> str:
        self._record("add_event", event=event)
        return self._next_id

    def find_event_by_id(self, event_id: str) -> Event:
        self._record("find_event_by_id", event_id=event_id)
        for event in self._events:
            if event.event_id == event_id:
                return event
        raise AssertionError(f"no canned event {event_id}")

    def find_events(self, query: Query) -> List[Event]:
        self._record("find_events", query=query)
        return list(self._events)

    def stream_event_ids(self, query: TimeQuery, emit: EventIDSink) -> None:
        self._record("stream_event_ids", query=query)
        for event_id in self._stream_ids:
            emit(event_id)
        if self._stream_error is not None:
            raise self._stream_error

    def add_topic(self, topic: Topic) -> str:
        self._record("add_topic", topic=topic)
        return self._next_id

    def update_topic(self, old_name: str, topic: Topic) -> str:
        self._record("update_topic", old_name=old_name, topic=topic)
        return self._next_id

    def delete_topic(self, name: str) -> None:
        self._record("delete_topic", name=name)

    def get_topics(self) -> List[Topic]:
        self._record("get_topics")
        return list(self._topics)

    def add_dc(self, dc: DC) -> str:
        self._record("add_dc", dc=dc)
        return self._next_id

    def update_dc(self, old_name: str, dc: DC) -> str:
        self._record("update_dc", old_name=old_name, dc=dc)
        return self._next_id

    def get_dcs(self) -> List[DC]:
        self._record("get_dcs")
        return list(self._dcs)

    def dc_name(self, dc_id: str) -> str:
        if "dc_name" in self._errors:
            raise self._errors["dc_name"]
        return self._dc_names.get(dc_id, "")

    def topic_name(self, topic_id: str) -> str:
        if "topic_name" in self._errors:
            raise self._errors["topic_name"]
        return self._topic_names.get(topic_id, "")


class FakeAbort(Exception):
    """Raised by FakeServicerContext.abort, like grpc does"""

    def __init__(self, code: grpc.StatusCode, details: str):
        super().__init__(f"{code}: {details}")
        self.code = code
        self.details = details


class FakeServicerContext:
    """Stand-in for grpc.ServicerContext that records the abort status"""

    def __init__(self):
        self.code: Optional[grpc.StatusCode] = None
        self.details: Optional[str] = None

    def abort(self, code: grpc.StatusCode, details: str):
        self.code = code
        self.details = details
        raise FakeAbort(code, details)

    def set_code(self, code: grpc.StatusCode):
        self.code = code

    def set_details(self, details: str):
        self.details = details
