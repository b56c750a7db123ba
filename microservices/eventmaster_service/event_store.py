"""
Event Store

The contract the gateway calls into, and a process-local implementation of
it. Every call is synchronous and may block. Implementations raise
NotFoundError for unknown ids and StoreError (or any other exception) for
everything else.
"""

import logging
import threading
import time
import uuid
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from .errors import NotFoundError, StoreError
from .models import DC, Event, Query, TimeQuery, Topic, UnaddedEvent, UNBOUNDED

logger = logging.getLogger(__name__)

# Receives one event id per call; raising stops the producing store call
EventIDSink = Callable[[str], None]


class EventStore(ABC):
    """Store contract consumed by the gateway"""

    # ==================== Events ====================

    @abstractmethod
    def add_event(self, event: UnaddedEvent) -> str:
        """Persist an event and return its new id"""

    @abstractmethod
    def find_event_by_id(self, event_id: str) -> Event:
        """Return one event, raising NotFoundError if it does not exist"""

    @abstractmethod
    def find_events(self, query: Query) -> List[Event]:
        """Return all events matching the query, in store order"""

    @abstractmethod
    def stream_event_ids(self, query: TimeQuery, emit: EventIDSink) -> None:
        """Call emit once per matching event id, without materializing the result"""

    # ==================== Topics ====================

    @abstractmethod
    def add_topic(self, topic: Topic) -> str: ...

    @abstractmethod
    def update_topic(self, old_name: str, topic: Topic) -> str:
        """Replace the topic named old_name with the given name and schema"""

    @abstractmethod
    def delete_topic(self, name: str) -> None: ...

    @abstractmethod
    def get_topics(self) -> List[Topic]: ...

    # ==================== DCs ====================

    @abstractmethod
    def add_dc(self, dc: DC) -> str: ...

    @abstractmethod
    def update_dc(self, old_name: str, dc: DC) -> str:
        """Rename the datacenter named old_name"""

    @abstractmethod
    def get_dcs(self) -> List[DC]: ...

    # ==================== Name resolution ====================

    @abstractmethod
    def dc_name(self, dc_id: str) -> str: ...

    @abstractmethod
    def topic_name(self, topic_id: str) -> str: ...


class InMemoryEventStore(EventStore):
    """Event store held in process memory.

    Not durable. Used for local runs and tests; a production deployment
    supplies its own EventStore.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._events: Dict[str, Event] = {}
        self._topics: Dict[str, Topic] = {}
        self._dcs: Dict[str, DC] = {}

    @staticmethod
    def _new_id() -> str:
        return uuid.uuid4().hex

    def _topic_by_name(self, name: str) -> Optional[Topic]:
        for topic in self._topics.values():
            if topic.name == name:
                return topic
        return None

    def _dc_by_name(self, name: str) -> Optional[DC]:
        for dc in self._dcs.values():
            if dc.name == name:
                return dc
        return None

    # ==================== Events ====================

    def add_event(self, event: UnaddedEvent) -> str:
        with self._lock:
            dc = self._dc_by_name(event.dc)
            if dc is None:
                raise StoreError(f"dc {event.dc!r} does not exist")
            topic = self._topic_by_name(event.topic_name)
            if topic is None:
                raise StoreError(f"topic {event.topic_name!r} does not exist")

            stored = Event(
                event_id=self._new_id(),
                parent_event_id=event.parent_event_id,
                event_time=event.event_time,
                dc_id=dc.id,
                topic_id=topic.id,
                tags=list(event.tags),
                host=event.host,
                target_hosts=list(event.target_hosts),
                user=event.user,
                data=event.data,
                received_time=int(time.time()),
            )
            self._events[stored.event_id] = stored

        logger.debug(f"Event {stored.event_id} added to topic {event.topic_name}")
        return stored.event_id

    def find_event_by_id(self, event_id: str) -> Event:
        with self._lock:
            event = self._events.get(event_id)
        if event is None:
            raise NotFoundError(f"event {event_id!r} not found")
        return event

    def find_events(self, query: Query) -> List[Event]:
        with self._lock:
            dc_ids = {dc.id for dc in self._dcs.values() if dc.name in query.dc}
            topic_ids = {t.id for t in self._topics.values() if t.name in query.topic_name}
            candidates = list(self._events.values())

        extra = query.extra
        results = []
        for event in candidates:
            if query.dc and event.dc_id not in dc_ids:
                continue
            if query.topic_name and event.topic_id not in topic_ids:
                continue
            if query.host and event.host not in query.host:
                continue
            if query.time_start != UNBOUNDED and event.event_time < query.time_start:
                continue
            if query.time_end != UNBOUNDED and event.event_time > query.time_end:
                continue
            if not self._matches_extra(event, extra):
                continue
            results.append(event)

        ascending = bool(extra.get("sort_ascending") and extra["sort_ascending"][0])
        results.sort(key=lambda e: e.event_time, reverse=not ascending)

        start = extra.get("start", 0)
        limit = extra.get("limit", 0)
        if limit:
            return results[start:start + limit]
        return results[start:]

    @staticmethod
    def _matches_extra(event: Event, extra: Dict) -> bool:
        tags = extra.get("tag_set")
        if tags:
            if extra.get("tag_and_operator"):
                if not all(tag in event.tags for tag in tags):
                    return False
            elif not any(tag in event.tags for tag in tags):
                return False

        target_hosts = extra.get("target_host_set")
        if target_hosts:
            if extra.get("target_host_and_operator"):
                if not all(host in event.target_hosts for host in target_hosts):
                    return False
            elif not any(host in event.target_hosts for host in target_hosts):
                return False

        excluded = extra.get("exclude_tags")
        if excluded and any(tag in event.tags for tag in excluded):
            return False
        if extra.get("user") and event.user not in extra["user"]:
            return False
        if extra.get("parent_event_id") and event.parent_event_id not in extra["parent_event_id"]:
            return False
        return True

    def stream_event_ids(self, query: TimeQuery, emit: EventIDSink) -> None:
        with self._lock:
            matched = [
                e for e in self._events.values()
                if (query.start_event_time == UNBOUNDED or e.event_time >= query.start_event_time)
                and (query.end_event_time == UNBOUNDED or e.event_time <= query.end_event_time)
            ]
        matched.sort(key=lambda e: e.event_time, reverse=not query.ascending)
        if query.limit:
            matched = matched[:query.limit]

        for event in matched:
            emit(event.event_id)

    # ==================== Topics ====================

    def add_topic(self, topic: Topic) -> str:
        with self._lock:
            if not topic.name:
                raise StoreError("topic name must not be empty")
            if self._topic_by_name(topic.name) is not None:
                raise StoreError(f"topic {topic.name!r} already exists")
            stored = Topic(id=self._new_id(), name=topic.name, data_schema=topic.data_schema)
            self._topics[stored.id] = stored
        return stored.id

    def update_topic(self, old_name: str, topic: Topic) -> str:
        with self._lock:
            existing = self._topic_by_name(old_name)
            if existing is None:
                raise NotFoundError(f"topic {old_name!r} not found")
            clash = self._topic_by_name(topic.name)
            if clash is not None and clash.id != existing.id:
                raise StoreError(f"topic {topic.name!r} already exists")
            self._topics[existing.id] = Topic(
                id=existing.id, name=topic.name or old_name, data_schema=topic.data_schema
            )
        return existing.id

    def delete_topic(self, name: str) -> None:
        with self._lock:
            existing = self._topic_by_name(name)
            if existing is None:
                raise NotFoundError(f"topic {name!r} not found")
            del self._topics[existing.id]

    def get_topics(self) -> List[Topic]:
        with self._lock:
            return list(self._topics.values())

    # ==================== DCs ====================

    def add_dc(self, dc: DC) -> str:
        with self._lock:
            if not dc.name:
                raise StoreError("dc name must not be empty")
            if self._dc_by_name(dc.name) is not None:
                raise StoreError(f"dc {dc.name!r} already exists")
            stored = DC(id=self._new_id(), name=dc.name)
            self._dcs[stored.id] = stored
        return stored.id

    def update_dc(self, old_name: str, dc: DC) -> str:
        with self._lock:
            existing = self._dc_by_name(old_name)
            if existing is None:
                raise NotFoundError(f"dc {old_name!r} not found")
            clash = self._dc_by_name(dc.name)
            if clash is not None and clash.id != existing.id:
                raise StoreError(f"dc {dc.name!r} already exists")
            self._dcs[existing.id] = DC(id=existing.id, name=dc.name)
        return existing.id

    def get_dcs(self) -> List[DC]:
        with self._lock:
            return list(self._dcs.values())

    # ==================== Name resolution ====================

    def dc_name(self, dc_id: str) -> str:
        dc = self._dcs.get(dc_id)
        return dc.name if dc else ""

    def topic_name(self, topic_id: str) -> str:
        topic = self._topics.get(topic_id)
        return topic.name if topic else ""
