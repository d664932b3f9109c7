from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Optional, Union

from .builder import MessageBuilder
from .errors import StreamError
from .models import Channel, Message, SlackMessage, TeamContext
from .parser import parse_message

logger = logging.getLogger(__name__)

MessageCallback = Callable[[Message, TeamContext], None]

_LIFECYCLE_TYPES = frozenset({"hello", "reconnect_url", "goodbye"})


@dataclass(frozen=True)
class HelloEvent:
    type: str = "hello"


@dataclass(frozen=True)
class MessageEvent:
    channel: str
    message: dict
    subtype: str = ""
    submessage: Optional[dict] = None


@dataclass(frozen=True)
class StreamErrorEvent:
    code: int = 0
    msg: str = ""


@dataclass(frozen=True)
class InvalidAuthEvent:
    pass


@dataclass(frozen=True)
class UnknownEvent:
    type: str
    data: dict = field(default_factory=dict)


Event = Union[HelloEvent, MessageEvent, StreamErrorEvent, InvalidAuthEvent, UnknownEvent]


def parse_event(raw: dict) -> Event:
    """Map a raw RTM payload onto one of the known event types."""
    type_ = raw.get("type", "")
    if type_ in _LIFECYCLE_TYPES:
        return HelloEvent(type=type_)
    if type_ == "message":
        return MessageEvent(
            channel=raw.get("channel", ""),
            message=raw,
            subtype=raw.get("subtype") or "",
            submessage=raw.get("message"),
        )
    if type_ == "error":
        error = raw.get("error") or {}
        return StreamErrorEvent(code=error.get("code", 0), msg=error.get("msg", ""))
    if type_ == "invalid_auth":
        return InvalidAuthEvent()
    return UnknownEvent(type=type_, data=raw)


def edited_message(event: MessageEvent) -> Optional[SlackMessage]:
    """Apply the subtype transform of a message event.

    Returns None when the event should not be displayed.
    """
    if event.subtype == "message_changed":
        msg = parse_message(event.submessage or {})
        msg.text = f"{msg.text} (edited)"
        return msg
    if event.subtype == "message_replied":
        return None
    return parse_message(event.message)


class EventDispatcher:
    """Feed messages from the live event stream to a presentation callback."""

    def __init__(self, builder: MessageBuilder, team: TeamContext) -> None:
        self.builder = builder
        self.team = team

    def handle_message(
        self, event: MessageEvent, watch: Mapping[str, Channel]
    ) -> Optional[Message]:
        channel = watch.get(event.channel)
        if channel is None:
            return None
        msg = edited_message(event)
        if msg is None:
            return None
        return self.builder.build_one(msg, channel)

    def listen(
        self,
        stream: Iterable[dict],
        watch: Mapping[str, Channel],
        callback: MessageCallback,
    ) -> None:
        """Dispatch messages until the stream ends.

        Raises StreamError on a fatal stream error or invalid credentials.
        """
        for raw in stream:
            event = parse_event(raw)
            if isinstance(event, HelloEvent):
                continue
            elif isinstance(event, MessageEvent):
                message = self.handle_message(event, watch)
                if message is not None:
                    callback(message, self.team)
            elif isinstance(event, StreamErrorEvent):
                raise StreamError(f"Error: {event.msg}")
            elif isinstance(event, InvalidAuthEvent):
                raise StreamError("Invalid credentials")
            else:
                logger.debug("Ignoring %s event", event.type or "untyped")
