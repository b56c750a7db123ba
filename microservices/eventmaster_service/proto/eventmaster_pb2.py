# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: eventmaster.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x11\x65ventmaster.proto\x12\x0b\x65ventmaster\"\xba\x01\n\x05\x45vent\x12\x10\n\x08\x65vent_id\x18\x01 \x01(\t\x12\x17\n\x0fparent_event_id\x18\x02 \x01(\t\x12\x12\n\nevent_time\x18\x03 \x01(\x03\x12\n\n\x02\x64\x63\x18\x04 \x01(\t\x12\x12\n\ntopic_name\x18\x05 \x01(\t\x12\x0f\n\x07tag_set\x18\x06 \x03(\t\x12\x0c\n\x04host\x18\x07 \x01(\t\x12\x17\n\x0ftarget_host_set\x18\x08 \x03(\t\x12\x0c\n\x04user\x18\t \x01(\t\x12\x0c\n\x04\x64\x61ta\x18\n \x01(\x0c\"\x1b\n\x07\x45ventID\x12\x10\n\x08\x65vent_id\x18\x01 \x01(\t\"\xe2\x02\n\x05Query\x12\x17\n\x0fparent_event_id\x18\x01 \x03(\t\x12\n\n\x02\x64\x63\x18\x02 \x03(\t\x12\x0c\n\x04host\x18\x03 \x03(\t\x12\x17\n\x0ftarget_host_set\x18\x04 \x03(\t\x12\x12\n\ntopic_name\x18\x05 \x03(\t\x12\x0f\n\x07tag_set\x18\x06 \x03(\t\x12\x0c\n\x04user\x18\x07 \x03(\t\x12\x0c\n\x04\x64\x61ta\x18\x08 \x01(\t\x12\x18\n\x10start_event_time\x18\t \x01(\x03\x12\x16\n\x0e\x65nd_event_time\x18\n \x01(\x03\x12\x14\n\x0c\x65xclude_tags\x18\x0b \x03(\t\x12\x18\n\x10tag_and_operator\x18\x0c \x01(\x08\x12 \n\x18target_host_and_operator\x18\r \x01(\x08\x12\x12\n\nsort_field\x18\x0e \x03(\t\x12\x16\n\x0esort_ascending\x18\x0f \x03(\x08\x12\r\n\x05start\x18\x10 \x01(\x05\x12\r\n\x05limit\x18\x11 \x01(\x05\"_\n\tTimeQuery\x12\x18\n\x10start_event_time\x18\x01 \x01(\x03\x12\x16\n\x0e\x65nd_event_time\x18\x02 \x01(\x03\x12\r\n\x05limit\x18\x03 \x01(\x05\x12\x11\n\tascending\x18\x04 \x01(\x08\"\x1b\n\rWriteResponse\x12\n\n\x02id\x18\x01 \x01(\t\"<\n\x05Topic\x12\n\n\x02id\x18\x01 \x01(\t\x12\x12\n\ntopic_name\x18\x02 \x01(\t\x12\x13\n\x0b\x64\x61ta_schema\x18\x03 \x01(\x0c\"M\n\x12UpdateTopicRequest\x12\x10\n\x08old_name\x18\x01 \x01(\t\x12\x10\n\x08new_name\x18\x02 \x01(\t\x12\x13\n\x0b\x64\x61ta_schema\x18\x03 \x01(\x0c\"(\n\x12\x44\x65leteTopicRequest\x12\x12\n\ntopic_name\x18\x01 \x01(\t\"2\n\x0bTopicResult\x12#\n\x07results\x18\x01 \x03(\x0b\x32\x12.eventmaster.Topic\"!\n\x02\x44\x43\x12\n\n\x02id\x18\x01 \x01(\t\x12\x0f\n\x07\x64\x63_name\x18\x02 \x01(\t\"8\n\x0fUpdateDCRequest\x12\x10\n\x08old_name\x18\x01 \x01(\t\x12\x13\n\x0bnew_dc_name\x18\x02 \x01(\t\",\n\x08\x44\x43Result\x12 \n\x07results\x18\x01 \x03(\x0b\x32\x0f.eventmaster.DC\"\x0e\n\x0c\x45mptyRequest\"\x14\n\x12HealthcheckRequest\"\'\n\x13HealthcheckResponse\x12\x10\n\x08response\x18\x01 \x01(\t2\xb1\x06\n\x0b\x45ventMaster\x12<\n\x08\x41\x64\x64\x45vent\x12\x12.eventmaster.Event\x1a\x1a.eventmaster.WriteResponse\"\x00\x12:\n\x0cGetEventByID\x12\x14.eventmaster.EventID\x1a\x12.eventmaster.Event\"\x00\x12\x37\n\tGetEvents\x12\x12.eventmaster.Query\x1a\x12.eventmaster.Event\"\x00\x30\x01\x12?\n\x0bGetEventIDs\x12\x16.eventmaster.TimeQuery\x1a\x14.eventmaster.EventID\"\x00\x30\x01\x12<\n\x08\x41\x64\x64Topic\x12\x12.eventmaster.Topic\x1a\x1a.eventmaster.WriteResponse\"\x00\x12L\n\x0bUpdateTopic\x12\x1f.eventmaster.UpdateTopicRequest\x1a\x1a.eventmaster.WriteResponse\"\x00\x12L\n\x0b\x44\x65leteTopic\x12\x1f.eventmaster.DeleteTopicRequest\x1a\x1a.eventmaster.WriteResponse\"\x00\x12\x42\n\tGetTopics\x12\x19.eventmaster.EmptyRequest\x1a\x18.eventmaster.TopicResult\"\x00\x12\x36\n\x05\x41\x64\x64\x44\x43\x12\x0f.eventmaster.DC\x1a\x1a.eventmaster.WriteResponse\"\x00\x12\x46\n\x08UpdateDC\x12\x1c.eventmaster.UpdateDCRequest\x1a\x1a.eventmaster.WriteResponse\"\x00\x12<\n\x06GetDCs\x12\x19.eventmaster.EmptyRequest\x1a\x15.eventmaster.DCResult\"\x00\x12R\n\x0bHealthcheck\x12\x1f.eventmaster.HealthcheckRequest\x1a .eventmaster.HealthcheckResponse\"\x00\x62\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'eventmaster_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _EVENT._serialized_start=35
  _EVENT._serialized_end=221
  _EVENTID._serialized_start=223
  _EVENTID._serialized_end=250
  _QUERY._serialized_start=253
  _QUERY._serialized_end=607
  _TIMEQUERY._serialized_start=609
  _TIMEQUERY._serialized_end=704
  _WRITERESPONSE._serialized_start=706
  _WRITERESPONSE._serialized_end=733
  _TOPIC._serialized_start=735
  _TOPIC._serialized_end=795
  _UPDATETOPICREQUEST._serialized_start=797
  _UPDATETOPICREQUEST._serialized_end=874
  _DELETETOPICREQUEST._serialized_start=876
  _DELETETOPICREQUEST._serialized_end=916
  _TOPICRESULT._serialized_start=918
  _TOPICRESULT._serialized_end=968
  _DC._serialized_start=970
  _DC._serialized_end=1003
  _UPDATEDCREQUEST._serialized_start=1005
  _UPDATEDCREQUEST._serialized_end=1061
  _DCRESULT._serialized_start=1063
  _DCRESULT._serialized_end=1107
  _EMPTYREQUEST._serialized_start=1109
  _EMPTYREQUEST._serialized_end=1123
  _HEALTHCHECKREQUEST._serialized_start=1125
  _HEALTHCHECKREQUEST._serialized_end=1145
  _HEALTHCHECKRESPONSE._serialized_start=1147
  _HEALTHCHECKRESPONSE._serialized_end=1186
  _EVENTMASTER._serialized_start=1189
  _EVENTMASTER._serialized_end=2006
# @@protoc_insertion_point(module_scope)
