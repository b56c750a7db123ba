"""
Eventmaster UI Routes

Browser-facing pages: list every event, filter events with a query form,
and create an event from a form. All pages render main.html with a form
partial; failures come back as plain-text error bodies.
"""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Callable, List

from fastapi import APIRouter, Form, Query as QueryParam, Request
from fastapi.responses import PlainTextResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from core.metrics import GatewayMetrics

from .errors import DecodeError, GatewayError, NotFoundError, ValidationError, root_cause
from .event_store import EventStore
from .instrumentation import track
from .models import Event, Query, UnaddedEvent, UNBOUNDED
from .translation import decode_json_object, resolve_event

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d %H:%M:%S")

# strptime alone accepts unpadded fields such as 2023-1-1
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_DATETIME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}(:[0-9]{2})?")


# ==================== Form parsing ====================

def parse_date_bound(value: str, field: str) -> int:
    """Calendar date -> Unix seconds at UTC midnight; empty -> UNBOUNDED"""
    if not value:
        return UNBOUNDED
    if not _DATE_RE.fullmatch(value):
        raise ValidationError(f"invalid {field} {value!r}: expected YYYY-MM-DD")
    try:
        parsed = datetime.strptime(value, DATE_FORMAT)
    except ValueError as e:
        raise ValidationError(f"invalid {field} {value!r}: {e}") from e
    return int(parsed.replace(tzinfo=timezone.utc).timestamp())


def parse_event_time(date: str, time_of_day: str) -> int:
    """Combine the date and time fields into Unix seconds (UTC)"""
    if not date:
        raise ValidationError("date cannot be empty")
    if not time_of_day:
        raise ValidationError("time cannot be empty")

    full_time = f"{date} {time_of_day}"
    if not _DATETIME_RE.fullmatch(full_time):
        raise ValidationError(f"invalid date entered: {full_time!r}")
    for fmt in DATETIME_FORMATS:
        try:
            parsed = datetime.strptime(full_time, fmt)
        except ValueError:
            continue
        return int(parsed.replace(tzinfo=timezone.utc).timestamp())
    raise ValidationError(f"invalid date entered: {full_time!r}")


def split_tags(tags: str) -> List[str]:
    """Comma-separated tags -> list; empty string -> []"""
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


def build_query(dc: str, host: str, topic: str, start_date: str, end_date: str) -> Query:
    return Query(
        dc=[dc] if dc else [],
        host=[host] if host else [],
        topic_name=[topic] if topic else [],
        time_start=parse_date_bound(start_date, "startDate"),
        time_end=parse_date_bound(end_date, "endDate"),
    )


def build_event(topic: str, dc: str, tags: str, host: str, user: str,
                data: str, date: str, time_of_day: str) -> UnaddedEvent:
    event_time = parse_event_time(date, time_of_day)
    return UnaddedEvent(
        event_time=event_time,
        dc=dc,
        topic_name=topic,
        tags=split_tags(tags),
        host=host,
        user=user,
        data=decode_json_object(data, "data"),
    )


def http_status_for(error: BaseException) -> int:
    cause = root_cause(error)
    if isinstance(cause, (ValidationError, DecodeError)):
        return 400
    if isinstance(cause, NotFoundError):
        return 404
    return 500


# ==================== Template filters ====================

def format_time(timestamp: int) -> str:
    if timestamp is None or timestamp < 0:
        return ""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def to_json(document: Any) -> str:
    return json.dumps(document, sort_keys=True, default=str)


def create_templates(directory: str) -> Jinja2Templates:
    templates = Jinja2Templates(directory=directory)
    templates.env.filters["format_time"] = format_time
    templates.env.filters["to_json"] = to_json
    return templates


# ==================== Router ====================

def create_ui_router(store: EventStore, metrics: GatewayMetrics, templates: Jinja2Templates) -> APIRouter:
    """Build the HTML form routes over a store"""
    router = APIRouter(tags=["ui"])

    def handle(route: str, handler: Callable[[], Response]) -> Response:
        try:
            with track(metrics.http, route):
                return handler()
        except GatewayError as e:
            status_code = http_status_for(e)
            log = logger.warning if status_code < 500 else logger.error
            log(f"{route} failed: {e}")
            return PlainTextResponse(str(e), status_code=status_code)
        except Exception as e:
            logger.error(f"{route} failed: {e}")
            return PlainTextResponse(f"error handling request: {e}", status_code=500)

    def render(request: Request, form_template: str, events: List[Event]) -> Response:
        return templates.TemplateResponse(request, "main.html", {
            "form_template": form_template,
            "events": [resolve_event(e, store) for e in events],
            "topics": [t.name for t in store.get_topics()],
            "dcs": [dc.name for dc in store.get_dcs()],
        })

    @router.get("/", response_class=Response)
    def main_page(request: Request):
        """List every event"""
        return handle("ui_main", lambda: render(request, "query_form.html", store.find_events(Query())))

    @router.get("/query", response_class=Response)
    def query_page(
        request: Request,
        dc: str = QueryParam(""),
        host: str = QueryParam(""),
        topic: str = QueryParam(""),
        start_date: str = QueryParam("", alias="startDate"),
        end_date: str = QueryParam("", alias="endDate"),
    ):
        """List events matching the query form"""
        def handler():
            query = build_query(dc, host, topic, start_date, end_date)
            return render(request, "query_form.html", store.find_events(query))
        return handle("ui_query", handler)

    @router.get("/create", response_class=Response)
    def create_page(request: Request):
        """Empty event creation form"""
        return handle("ui_create_page", lambda: render(request, "create_form.html", []))

    @router.post("/add_event", response_class=Response)
    def add_event(
        topic: str = Form(""),
        dc: str = Form(""),
        tags: str = Form(""),
        host: str = Form(""),
        user: str = Form(""),
        data: str = Form(""),
        date: str = Form(""),
        time: str = Form(""),
    ):
        """Create an event from the form, then go back to the listing"""
        def handler():
            event = build_event(topic, dc, tags, host, user, data, date, time)
            event_id = store.add_event(event)
            logger.info(f"Event {event_id} created from form")
            return RedirectResponse("/", status_code=303)
        return handle("ui_add_event", handler)

    return router
