"""Remote collaborator interface and its slack_sdk implementation."""

from __future__ import annotations

import logging
import queue
from collections.abc import Iterator, Sequence
from typing import Optional, Protocol, runtime_checkable

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.rtm_v2 import RTMClient
from slack_sdk.web import SlackResponse

from .errors import FetchError

logger = logging.getLogger(__name__)

CONVERSATION_TYPES = ("public_channel", "private_channel", "im", "mpim")

_CLOSED = object()


@runtime_checkable
class SlackTransport(Protocol):
    """Operations the mirror needs from the remote workspace.

    Every method raises FetchError when the remote call fails.
    """

    def auth_test(self) -> dict: ...

    def list_users(self, cursor: str = "") -> tuple[list[dict], str]: ...

    def list_conversations(
        self,
        cursor: str = "",
        *,
        types: Sequence[str] = CONVERSATION_TYPES,
        exclude_archived: bool = True,
        limit: int = 1000,
    ) -> tuple[list[dict], str]: ...

    def list_conversation_history(self, channel_id: str, limit: int) -> list[dict]: ...

    def list_conversation_replies(
        self, channel_id: str, thread_ts: str, cursor: str = "", limit: int = 200
    ) -> tuple[list[dict], bool, str]: ...

    def get_user_info(self, user_id: str) -> dict: ...

    def get_user_presence(self, user_id: str) -> str: ...

    def get_team_info(self) -> dict: ...

    def mark_channel_read(self, channel_id: str, ts: str) -> None: ...

    def events(self) -> Iterator[dict]: ...


def _next_cursor(resp: SlackResponse) -> str:
    return (resp.get("response_metadata") or {}).get("next_cursor") or ""


class SlackWebTransport:
    """SlackTransport backed by the Slack Web API and the RTM websocket."""

    def __init__(self, token: str, client: Optional[WebClient] = None) -> None:
        self.token = token
        self.client = client or WebClient(token=token)
        self._events: queue.Queue = queue.Queue()
        self._rtm: Optional[RTMClient] = None

    def _call(self, method: str, **kwargs) -> SlackResponse:
        try:
            return getattr(self.client, method)(**kwargs)
        except (SlackClientError, OSError) as exc:
            raise FetchError(f"{method} failed: {exc}") from exc

    def auth_test(self) -> dict:
        return dict(self._call("auth_test").data)

    def list_users(self, cursor: str = "") -> tuple[list[dict], str]:
        kwargs: dict = {"limit": 1000}
        if cursor:
            kwargs["cursor"] = cursor
        resp = self._call("users_list", **kwargs)
        return list(resp.get("members", [])), _next_cursor(resp)

    def list_conversations(
        self,
        cursor: str = "",
        *,
        types: Sequence[str] = CONVERSATION_TYPES,
        exclude_archived: bool = True,
        limit: int = 1000,
    ) -> tuple[list[dict], str]:
        kwargs: dict = {
            "types": ",".join(types),
            "exclude_archived": exclude_archived,
            "limit": limit,
        }
        if cursor:
            kwargs["cursor"] = cursor
        resp = self._call("conversations_list", **kwargs)
        return list(resp.get("channels", [])), _next_cursor(resp)

    def list_conversation_history(self, channel_id: str, limit: int) -> list[dict]:
        resp = self._call(
            "conversations_history", channel=channel_id, limit=limit, inclusive=False
        )
        return list(resp.get("messages", []))

    def list_conversation_replies(
        self, channel_id: str, thread_ts: str, cursor: str = "", limit: int = 200
    ) -> tuple[list[dict], bool, str]:
        kwargs: dict = {"channel": channel_id, "ts": thread_ts, "limit": limit}
        if cursor:
            kwargs["cursor"] = cursor
        resp = self._call("conversations_replies", **kwargs)
        return (
            list(resp.get("messages", [])),
            bool(resp.get("has_more")),
            _next_cursor(resp),
        )

    def get_user_info(self, user_id: str) -> dict:
        return dict(self._call("users_info", user=user_id)["user"])

    def get_user_presence(self, user_id: str) -> str:
        return self._call("users_getPresence", user=user_id).get("presence", "")

    def get_team_info(self) -> dict:
        return dict(self._call("team_info")["team"])

    def mark_channel_read(self, channel_id: str, ts: str) -> None:
        self._call("conversations_mark", channel=channel_id, ts=ts)

    def _on_message(self, client: RTMClient, event: dict) -> None:
        self._events.put(event)

    def _on_error(self, client: RTMClient, exc: Exception) -> None:
        self._events.put({"type": "error", "error": {"msg": str(exc)}})

    def events(self) -> Iterator[dict]:
        """Connect to RTM and yield incoming events until close() is called."""
        self._rtm = RTMClient(
            token=self.token,
            on_message_listeners=[self._on_message],
            on_error_listeners=[self._on_error],
            logger=logger,
        )
        try:
            self._rtm.connect()
        except SlackApiError as exc:
            if exc.response.get("error") == "invalid_auth":
                yield {"type": "invalid_auth"}
            else:
                yield {"type": "error", "error": {"msg": str(exc)}}
            return
        except (SlackClientError, OSError) as exc:
            yield {"type": "error", "error": {"msg": str(exc)}}
            return

        while True:
            event = self._events.get()
            if event is _CLOSED:
                return
            yield event

    def close(self) -> None:
        if self._rtm is not None:
            self._rtm.close()
            self._rtm = None
        self._events.put(_CLOSED)
