from __future__ import annotations

import threading

import pytest

from slack_mirror.errors import FetchError


class FakeTransport:
    """In-memory SlackTransport serving canned pages."""

    def __init__(self) -> None:
        self.user_pages: list[list[dict]] = [[]]
        self.user_info: dict[str, dict] = {}
        self.conversation_pages: list[list[dict]] = [[]]
        self.reply_pages: dict[str, list[list[dict]]] = {}
        self.history: dict[str, list[dict]] = {}
        self.presence: dict[str, str] = {}
        self.team = {"id": "T001", "name": "Acme"}
        self.auth = {"user_id": "U001"}
        self.stream: list[dict] = []
        self.failing: set[str] = set()
        self.fail_on_page: dict[str, int] = {}
        self.calls: list[tuple] = []
        self._lock = threading.Lock()

    def _record(self, method: str, *args) -> None:
        with self._lock:
            self.calls.append((method, *args))
        if method in self.failing:
            raise FetchError(f"{method} failed")

    def calls_to(self, method: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == method]

    @staticmethod
    def _page(pages: list[list[dict]], cursor: str) -> tuple[list[dict], str]:
        index = int(cursor or 0)
        next_cursor = str(index + 1) if index + 1 < len(pages) else ""
        return pages[index], next_cursor

    def auth_test(self) -> dict:
        self._record("auth_test")
        return self.auth

    def list_users(self, cursor=""):
        self._record("list_users", cursor)
        return self._page(self.user_pages, cursor)

    def list_conversations(self, cursor="", *, types=(), exclude_archived=True, limit=1000):
        self._record("list_conversations", cursor, tuple(types), exclude_archived, limit)
        if self.fail_on_page.get("list_conversations") == int(cursor or 0):
            raise FetchError("list_conversations failed")
        return self._page(self.conversation_pages, cursor)

    def list_conversation_history(self, channel_id, limit):
        self._record("list_conversation_history", channel_id, limit)
        return self.history.get(channel_id, [])[:limit]

    def list_conversation_replies(self, channel_id, thread_ts, cursor="", limit=200):
        self._record("list_conversation_replies", channel_id, thread_ts, cursor, limit)
        page, next_cursor = self._page(self.reply_pages.get(thread_ts, [[]]), cursor)
        return page, bool(next_cursor), next_cursor

    def get_user_info(self, user_id):
        self._record("get_user_info", user_id)
        if user_id not in self.user_info:
            raise FetchError("user_not_found")
        return self.user_info[user_id]

    def get_user_presence(self, user_id):
        self._record("get_user_presence", user_id)
        if user_id not in self.presence:
            raise FetchError("presence failed")
        return self.presence[user_id]

    def get_team_info(self):
        self._record("get_team_info")
        return self.team

    def mark_channel_read(self, channel_id, ts):
        self._record("mark_channel_read", channel_id, ts)

    def events(self):
        self._record("events")
        yield from self.stream


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
