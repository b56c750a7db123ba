"""
Eventmaster gRPC Server

Implements the eventmaster.EventMaster service on top of an EventStore.
Every handler records latency and an outcome counter under its own name;
writes go through perform_operation.
"""

import logging
from concurrent import futures
from typing import Callable, Tuple

import grpc

from core.metrics import GatewayMetrics

from .errors import (
    DecodeError, EncodeError, NotFoundError, OperationError, ValidationError, root_cause,
)
from .event_store import EventStore
from .instrumentation import perform_operation, track
from .models import DC, Topic
from .proto import eventmaster_pb2, eventmaster_pb2_grpc
from .streaming import EventIDStream
from .translation import (
    dc_from_proto, dc_to_proto, decode_json_object, event_to_proto, query_from_proto, resolve_event,
    time_query_from_proto, topic_from_proto, topic_to_proto, unadded_event_from_proto,
)

logger = logging.getLogger(__name__)


def grpc_status_for(error: BaseException) -> grpc.StatusCode:
    """Map a gateway failure to the status code sent to the client"""
    cause = root_cause(error)
    if isinstance(cause, (DecodeError, ValidationError)):
        return grpc.StatusCode.INVALID_ARGUMENT
    if isinstance(cause, NotFoundError):
        return grpc.StatusCode.NOT_FOUND
    if isinstance(cause, EncodeError):
        return grpc.StatusCode.INTERNAL
    return grpc.StatusCode.UNKNOWN


class EventMasterServicer(eventmaster_pb2_grpc.EventMasterServicer):
    """gRPC front end of the event gateway"""

    def __init__(self, store: EventStore, metrics: GatewayMetrics,
                 stream_buffer_size: int = 1000, stream_workers: int = 10):
        self.store = store
        self.metrics = metrics
        self.stream_buffer_size = stream_buffer_size
        # Runs the store side of GetEventIDs; caps concurrent id scans
        self.stream_executor = futures.ThreadPoolExecutor(
            max_workers=stream_workers, thread_name_prefix="event-id-stream"
        )

    def close(self):
        """Stop the id stream workers; call after the server has stopped"""
        self.stream_executor.shutdown(wait=False)

    # ==================== Helpers ====================

    def _abort(self, context, method: str, error: BaseException):
        """End the call with a status derived from the error class. Always raises."""
        if not isinstance(error, OperationError):
            logger.error(f"Error performing {method}: {error}")
            error = OperationError(method, error)
        context.abort(grpc_status_for(error), str(error))

    def _write(self, context, method: str, op: Callable[[], str]):
        try:
            ack = perform_operation(self.metrics.grpc, method, op)
        except OperationError as e:
            self._abort(context, method, e)
        return eventmaster_pb2.WriteResponse(id=ack.id)

    # ==================== Events ====================

    def AddEvent(self, request, context):
        return self._write(
            context, "AddEvent",
            lambda: self.store.add_event(unadded_event_from_proto(request)),
        )

    def GetEventByID(self, request, context):
        name = "GetEventByID"
        with track(self.metrics.grpc, name):
            try:
                event = self.store.find_event_by_id(request.event_id)
                return event_to_proto(resolve_event(event, self.store))
            except Exception as e:
                self._abort(context, name, e)

    def GetEvents(self, request, context):
        name = "GetEvents"
        with track(self.metrics.grpc, name):
            try:
                events = self.store.find_events(query_from_proto(request))
            except Exception as e:
                self._abort(context, name, e)

            for event in events:
                try:
                    message = event_to_proto(resolve_event(event, self.store))
                except Exception as e:
                    self._abort(context, name, e)
                yield message

    def GetEventIDs(self, request, context):
        name = "GetEventIDs"
        with track(self.metrics.grpc, name):
            try:
                stream = EventIDStream(
                    self.store, time_query_from_proto(request),
                    self.stream_executor, self.stream_buffer_size,
                ).start()
            except Exception as e:
                self._abort(context, name, e)

            for event_id in stream:
                yield eventmaster_pb2.EventID(event_id=event_id)
            if stream.error is not None:
                self._abort(context, name, stream.error)

    # ==================== Topics ====================

    def AddTopic(self, request, context):
        return self._write(
            context, "AddTopic",
            lambda: self.store.add_topic(topic_from_proto(request)),
        )

    def UpdateTopic(self, request, context):
        def op():
            schema = decode_json_object(request.data_schema, "data schema")
            return self.store.update_topic(
                request.old_name, Topic(name=request.new_name, data_schema=schema)
            )
        return self._write(context, "UpdateTopic", op)

    def DeleteTopic(self, request, context):
        def op():
            self.store.delete_topic(request.topic_name)
            return ""
        return self._write(context, "DeleteTopic", op)

    def GetTopics(self, request, context):
        name = "GetTopics"
        with track(self.metrics.grpc, name):
            try:
                topics = self.store.get_topics()
                return eventmaster_pb2.TopicResult(results=[topic_to_proto(t) for t in topics])
            except Exception as e:
                self._abort(context, name, e)

    # ==================== DCs ====================

    def AddDC(self, request, context):
        return self._write(
            context, "AddDC",
            lambda: self.store.add_dc(dc_from_proto(request)),
        )

    def UpdateDC(self, request, context):
        return self._write(
            context, "UpdateDC",
            lambda: self.store.update_dc(request.old_name, DC(name=request.new_dc_name)),
        )

    def GetDCs(self, request, context):
        name = "GetDCs"
        with track(self.metrics.grpc, name):
            try:
                dcs = self.store.get_dcs()
                return eventmaster_pb2.DCResult(results=[dc_to_proto(dc) for dc in dcs])
            except Exception as e:
                self._abort(context, name, e)

    # ==================== Health ====================

    def Healthcheck(self, request, context):
        with track(self.metrics.grpc, "Healthcheck"):
            return eventmaster_pb2.HealthcheckResponse(response="OK")


def create_grpc_server(servicer: EventMasterServicer, address: str,
                       max_workers: int = 10) -> Tuple[grpc.Server, int]:
    """
    Build a gRPC server for the servicer, bound but not started.

    Returns:
        (server, bound port); the port differs from the requested one when
        the address asks for port 0
    """
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers))
    eventmaster_pb2_grpc.add_EventMasterServicer_to_server(servicer, server)
    port = server.add_insecure_port(address)
    logger.info(f"gRPC server bound to {address} (port {port})")
    return server, port
