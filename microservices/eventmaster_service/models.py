"""
Eventmaster Service Models

Canonical in-process representations of events, topics, datacenters and
queries. Both front ends translate into these; none of the protobuf or HTML
field names appear here.
"""

from typing import Optional, Dict, Any, List
from pydantic import BaseModel, Field, ConfigDict

# Sentinel for an unset time bound
UNBOUNDED = -1


# ==================== Event models ====================

class UnaddedEvent(BaseModel):
    """Event as submitted by a client, before the store assigns an id.

    DC and topic are referenced by name; the store resolves them to ids.
    """
    parent_event_id: str = Field("", description="Causal parent event id, not validated")
    event_time: int = Field(0, description="Event time in Unix seconds")
    dc: str = Field(..., description="Datacenter name")
    topic_name: str = Field(..., description="Topic name")
    tags: List[str] = Field(default_factory=list, description="Free-form tags, display order kept")
    host: str = Field("", description="Originating host")
    target_hosts: List[str] = Field(default_factory=list, description="Hosts the event concerns")
    user: str = Field("", description="Attributed actor")
    data: Dict[str, Any] = Field(default_factory=dict, description="Decoded JSON payload")


class Event(BaseModel):
    """Stored event. DC and topic are store ids, not display names."""
    model_config = ConfigDict(from_attributes=True)

    event_id: str = Field(..., description="Store-assigned id")
    parent_event_id: str = ""
    event_time: int = 0
    dc_id: str = Field(..., description="Datacenter store id")
    topic_id: str = Field(..., description="Topic store id")
    tags: List[str] = Field(default_factory=list)
    host: str = ""
    target_hosts: List[str] = Field(default_factory=list)
    user: str = ""
    data: Dict[str, Any] = Field(default_factory=dict)
    received_time: int = Field(0, description="Unix seconds the store accepted the event")


class ResolvedEvent(BaseModel):
    """Event with DC and topic ids resolved to display names"""
    event_id: str
    parent_event_id: str = ""
    event_time: int = 0
    dc: str = ""
    topic_name: str = ""
    tags: List[str] = Field(default_factory=list)
    host: str = ""
    target_hosts: List[str] = Field(default_factory=list)
    user: str = ""
    data: Dict[str, Any] = Field(default_factory=dict)


# ==================== Topic / DC ====================

class Topic(BaseModel):
    """Event topic"""
    id: str = Field("", description="Store-assigned id")
    name: str = Field(..., description="Unique topic name")
    data_schema: Optional[Dict[str, Any]] = Field(None, description="JSON document describing Event.data")


class DC(BaseModel):
    """Datacenter"""
    id: str = Field("", description="Store-assigned id")
    name: str = Field(..., description="Datacenter name")


# ==================== Queries ====================

class Query(BaseModel):
    """Event filter.

    Empty lists match anything. Time bounds use UNBOUNDED when unset.
    `extra` holds additional filter fields passed through to the store
    untouched.
    """
    dc: List[str] = Field(default_factory=list)
    host: List[str] = Field(default_factory=list)
    topic_name: List[str] = Field(default_factory=list)
    time_start: int = UNBOUNDED
    time_end: int = UNBOUNDED
    extra: Dict[str, Any] = Field(default_factory=dict)


class TimeQuery(BaseModel):
    """Event-time range for id streaming"""
    start_event_time: int = UNBOUNDED
    end_event_time: int = UNBOUNDED
    limit: int = 0
    ascending: bool = False


# ==================== Responses ====================

class WriteResponse(BaseModel):
    """Acknowledgment of a write, carrying the store-assigned id"""
    id: str = ""
