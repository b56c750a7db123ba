"""
Eventmaster Generated Proto Golden Tests

🔒 GOLDEN: These tests document the wire contract of the generated
   eventmaster_pb2 / eventmaster_pb2_grpc modules.

Usage:
    pytest tests/unit/golden -v
"""
import pytest

from microservices.eventmaster_service.proto import eventmaster_pb2, eventmaster_pb2_grpc

pytestmark = [pytest.mark.unit, pytest.mark.golden]

# (method, request, response, server streaming)
EXPECTED_METHODS = [
    ("AddEvent", "Event", "WriteResponse", False),
    ("GetEventByID", "EventID", "Event", False),
    ("GetEvents", "Query", "Event", True),
    ("GetEventIDs", "TimeQuery", "EventID", True),
    ("AddTopic", "Topic", "WriteResponse", False),
    ("UpdateTopic", "UpdateTopicRequest", "WriteResponse", False),
    ("DeleteTopic", "DeleteTopicRequest", "WriteResponse", False),
    ("GetTopics", "EmptyRequest", "TopicResult", False),
    ("AddDC", "DC", "WriteResponse", False),
    ("UpdateDC", "UpdateDCRequest", "WriteResponse", False),
    ("GetDCs", "EmptyRequest", "DCResult", False),
    ("Healthcheck", "HealthcheckRequest", "HealthcheckResponse", False),
]


class RecordingChannel:
    """Channel stand-in that records which call shape each method gets"""

    def __init__(self):
        self.calls = {}

    def unary_unary(self, path, request_serializer=None, response_deserializer=None, **kwargs):
        self.calls[path] = ("unary_unary", request_serializer, response_deserializer)
        return path

    def unary_stream(self, path, request_serializer=None, response_deserializer=None, **kwargs):
        self.calls[path] = ("unary_stream", request_serializer, response_deserializer)
        return path


class TestDescriptorChar:
    """Characterization: file descriptor generated from eventmaster.proto"""

    def test_package_and_file(self):
        assert eventmaster_pb2.DESCRIPTOR.name == "eventmaster.proto"
        assert eventmaster_pb2.DESCRIPTOR.package == "eventmaster"

    def test_service_methods(self):
        service = eventmaster_pb2.DESCRIPTOR.services_by_name["EventMaster"]

        methods = [(m.name, m.input_type.name, m.output_type.name) for m in service.methods]

        assert methods == [(name, req, resp) for name, req, resp, _ in EXPECTED_METHODS]

    def test_event_field_numbers(self):
        fields = {f.name: f.number for f in eventmaster_pb2.Event.DESCRIPTOR.fields}
        assert fields == {
            "event_id": 1, "parent_event_id": 2, "event_time": 3, "dc": 4, "topic_name": 5,
            "tag_set": 6, "host": 7, "target_host_set": 8, "user": 9, "data": 10,
        }

    def test_event_wire_bytes(self):
        """CHAR: Encoding matches protoc output for the same field values"""
        message = eventmaster_pb2.Event(event_id="e1", event_time=1, data=b"{}")
        assert message.SerializeToString() == b"\n\x02e1\x18\x01R\x02{}"


class TestGrpcBindingsChar:
    """Characterization: generated stub and server registration"""

    def test_stub_call_shapes(self):
        channel = RecordingChannel()
        eventmaster_pb2_grpc.EventMasterStub(channel)

        for name, req, resp, streaming in EXPECTED_METHODS:
            kind, serializer, deserializer = channel.calls[f"/eventmaster.EventMaster/{name}"]
            assert kind == ("unary_stream" if streaming else "unary_unary"), name
            assert serializer == getattr(eventmaster_pb2, req).SerializeToString
            assert deserializer == getattr(eventmaster_pb2, resp).FromString

    def test_servicer_base_covers_every_method(self):
        for name, _, _, _ in EXPECTED_METHODS:
            assert callable(getattr(eventmaster_pb2_grpc.EventMasterServicer, name))
