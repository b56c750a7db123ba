"""
Eventmaster Client

gRPC client for the event gateway. Returns plain dicts and lists so callers
don't need the protobuf classes.
"""

import json
import logging
from typing import Any, Dict, Iterator, List, Optional

from core.grpc_client_base import BaseGRPCClient

from ..proto import eventmaster_pb2, eventmaster_pb2_grpc

logger = logging.getLogger(__name__)


def _event_to_dict(message) -> Dict[str, Any]:
    return {
        "event_id": message.event_id,
        "parent_event_id": message.parent_event_id,
        "event_time": message.event_time,
        "dc": message.dc,
        "topic_name": message.topic_name,
        "tags": list(message.tag_set),
        "host": message.host,
        "target_hosts": list(message.target_host_set),
        "user": message.user,
        "data": json.loads(message.data) if message.data else {},
    }


class EventMasterClient(BaseGRPCClient):
    """Eventmaster gRPC client"""

    def _create_stub(self):
        return eventmaster_pb2_grpc.EventMasterStub(self.channel)

    def service_name(self) -> str:
        return "EventMaster"

    def default_port(self) -> int:
        return 50052

    # ==================== Events ====================

    def add_event(
        self,
        topic_name: str,
        dc: str,
        host: str = "",
        event_time: int = 0,
        tags: Optional[List[str]] = None,
        target_hosts: Optional[List[str]] = None,
        user: str = "",
        data: Optional[Dict[str, Any]] = None,
        parent_event_id: str = "",
    ) -> str:
        """Add an event and return its id"""
        request = eventmaster_pb2.Event(
            parent_event_id=parent_event_id,
            event_time=event_time,
            dc=dc,
            topic_name=topic_name,
            tag_set=tags or [],
            host=host,
            target_host_set=target_hosts or [],
            user=user,
            data=json.dumps(data).encode("utf-8") if data is not None else b"",
        )
        return self._call(self._stub().AddEvent, request).id

    def get_event_by_id(self, event_id: str) -> Dict[str, Any]:
        response = self._call_with_retry(self._stub().GetEventByID, eventmaster_pb2.EventID(event_id=event_id))
        return _event_to_dict(response)

    def get_events(
        self,
        dc: Optional[List[str]] = None,
        host: Optional[List[str]] = None,
        topic_name: Optional[List[str]] = None,
        start_event_time: int = 0,
        end_event_time: int = 0,
        **filters: Any,
    ) -> Iterator[Dict[str, Any]]:
        """Stream events matching the query; extra keyword filters map to Query fields"""
        request = eventmaster_pb2.Query(
            dc=dc or [],
            host=host or [],
            topic_name=topic_name or [],
            start_event_time=start_event_time,
            end_event_time=end_event_time,
            **filters,
        )
        for message in self._call(self._stub().GetEvents, request):
            yield _event_to_dict(message)

    def get_event_ids(
        self,
        start_event_time: int = 0,
        end_event_time: int = 0,
        limit: int = 0,
        ascending: bool = False,
    ) -> Iterator[str]:
        request = eventmaster_pb2.TimeQuery(
            start_event_time=start_event_time,
            end_event_time=end_event_time,
            limit=limit,
            ascending=ascending,
        )
        for message in self._call(self._stub().GetEventIDs, request):
            yield message.event_id

    # ==================== Topics ====================

    def add_topic(self, name: str, schema: Optional[Dict[str, Any]] = None) -> str:
        request = eventmaster_pb2.Topic(
            topic_name=name,
            data_schema=json.dumps(schema).encode("utf-8") if schema is not None else b"",
        )
        return self._call(self._stub().AddTopic, request).id

    def update_topic(self, old_name: str, new_name: str, schema: Optional[Dict[str, Any]] = None) -> str:
        request = eventmaster_pb2.UpdateTopicRequest(
            old_name=old_name,
            new_name=new_name,
            data_schema=json.dumps(schema).encode("utf-8") if schema is not None else b"",
        )
        return self._call(self._stub().UpdateTopic, request).id

    def delete_topic(self, name: str) -> None:
        self._call(self._stub().DeleteTopic, eventmaster_pb2.DeleteTopicRequest(topic_name=name))

    def get_topics(self) -> List[Dict[str, Any]]:
        response = self._call_with_retry(self._stub().GetTopics, eventmaster_pb2.EmptyRequest())
        return [
            {
                "id": topic.id,
                "name": topic.topic_name,
                "schema": json.loads(topic.data_schema) if topic.data_schema else {},
            }
            for topic in response.results
        ]

    # ==================== DCs ====================

    def add_dc(self, name: str) -> str:
        return self._call(self._stub().AddDC, eventmaster_pb2.DC(dc_name=name)).id

    def update_dc(self, old_name: str, new_name: str) -> str:
        request = eventmaster_pb2.UpdateDCRequest(old_name=old_name, new_dc_name=new_name)
        return self._call(self._stub().UpdateDC, request).id

    def get_dcs(self) -> List[Dict[str, Any]]:
        response = self._call_with_retry(self._stub().GetDCs, eventmaster_pb2.EmptyRequest())
        return [{"id": dc.id, "name": dc.dc_name} for dc in response.results]

    # ==================== Health ====================

    def healthcheck(self) -> str:
        return self._call_with_retry(self._stub().Healthcheck, eventmaster_pb2.HealthcheckRequest()).response

    def _stub(self):
        self._ensure_connected()
        return self.stub
