from __future__ import annotations

import pytest

from slack_mirror.builder import MessageBuilder
from slack_mirror.cache import IdentityCache
from slack_mirror.errors import FetchError, ReplyFetchError
from slack_mirror.models import AttachmentKind, Channel
from slack_mirror.parser import parse_message

CHANNEL = Channel(id="C001", name="general")


@pytest.fixture
def users() -> IdentityCache:
    cache = IdentityCache()
    cache.set("U001", "alice")
    return cache


@pytest.fixture
def builder(transport, users) -> MessageBuilder:
    return MessageBuilder(transport, users)


class TestResolveAuthor:
    def test_cached_user(self, builder, transport):
        assert builder.resolve_author(parse_message({"user": "U001", "ts": "1"})) == "alice"
        assert transport.calls_to("get_user_info") == []

    def test_live_lookup(self, builder, transport, users):
        transport.user_info["U002"] = {"id": "U002", "name": "bob"}
        assert builder.resolve_author(parse_message({"user": "U002", "ts": "1"})) == "bob"
        assert users.get("U002") == ("bob", True)

    def test_failed_lookup(self, builder, users):
        assert builder.resolve_author(parse_message({"user": "U404", "ts": "1"})) == "unknown"
        assert users.get("U404") == ("unknown", True)

    def test_bot_uses_username(self, builder, transport, users):
        msg = parse_message({"bot_id": "B001", "username": "deploybot", "ts": "1"})
        assert builder.resolve_author(msg) == "deploybot"
        assert users.get("B001") == ("deploybot", True)
        assert transport.calls_to("get_user_info") == []

    def test_bot_cached(self, builder, users):
        users.set("B001", "ci")
        msg = parse_message({"bot_id": "B001", "username": "renamed", "ts": "1"})
        assert builder.resolve_author(msg) == "ci"

    def test_bot_without_username(self, builder, users):
        msg = parse_message({"bot_id": "B002", "ts": "1"})
        assert builder.resolve_author(msg) == "unknown"
        assert users.get("B002") == ("unknown", True)

    def test_no_author(self, builder, users):
        assert builder.resolve_author(parse_message({"ts": "1"})) == "unknown"
        assert len(users) == 1


class TestBuildOne:
    def test_root_message(self, builder):
        msg = builder.build_one(
            parse_message({"user": "U001", "text": "hi :wave:", "ts": "1705307400.000100"}),
            CHANNEL,
        )
        assert msg.thread_ts == "1705307400.000100"
        assert msg.channel is CHANNEL
        assert msg.name == "alice"
        assert msg.content == "hi 👋"
        assert msg.time.hour == 8
        assert msg.attachments == ()
        assert not msg.is_reply

    def test_reply(self, builder):
        msg = builder.build_one(
            parse_message({"user": "U001", "text": "yes", "ts": "2.0", "thread_ts": "1.0"}),
            CHANNEL,
        )
        assert msg.thread_ts == "1.0"
        assert msg.is_reply

    def test_mentions_resolved(self, builder, transport):
        transport.user_info["U002"] = {"name": "bob"}
        msg = builder.build_one(
            parse_message({"user": "U001", "text": "ping <@U002|bob>", "ts": "1"}),
            CHANNEL,
        )
        assert msg.content == "ping @bob"

    def test_unresolvable_mention(self, builder, users):
        msg = builder.build_one(
            parse_message({"user": "U001", "text": "hi <@U404>", "ts": "1"}), CHANNEL
        )
        assert msg.content == "hi @unknown"
        assert users.get("U404") == ("unknown", True)

    def test_hashable_value(self, builder):
        raw = parse_message({"user": "U001", "text": "hi", "ts": "1"})
        first = builder.build_one(raw, CHANNEL)
        second = builder.build_one(raw, Channel(id="C001", name="general", presence="away"))
        assert first == second
        assert hash(first) == hash(second)

    def test_attachments(self, builder):
        msg = builder.build_one(
            parse_message(
                {
                    "user": "U001",
                    "ts": "1",
                    "attachments": [{"title": "<https://x.io|x>"}],
                    "files": [{"name": "a.png", "url_private": "https://f/a.png"}],
                }
            ),
            CHANNEL,
        )
        assert [(a.kind, a.content) for a in msg.attachments] == [
            (AttachmentKind.TITLE, "< https://x.io |x>"),
            (AttachmentKind.LINK, "a.png ⇒ https://f/a.png"),
        ]


class TestBuild:
    def test_message_without_replies(self, builder, transport):
        messages = builder.build({"user": "U001", "text": "hi", "ts": "1.0"}, CHANNEL)
        assert len(messages) == 1
        assert transport.calls_to("list_conversation_replies") == []

    def test_expands_thread_without_duplicating_root(self, builder, transport):
        root = {"user": "U001", "text": "root", "ts": "1.0", "thread_ts": "1.0", "reply_count": 2}
        transport.reply_pages["1.0"] = [
            [
                root,
                {"user": "U001", "text": "first", "ts": "2.0", "thread_ts": "1.0"},
            ],
            [
                {"user": "U001", "text": "second", "ts": "3.0", "thread_ts": "1.0"},
            ],
        ]
        messages = builder.build(root, CHANNEL)
        assert [m.content for m in messages] == ["root", "first", "second"]
        assert [m.is_reply for m in messages] == [False, True, True]
        assert all(m.thread_ts == "1.0" for m in messages)

        calls = transport.calls_to("list_conversation_replies")
        assert calls == [
            ("list_conversation_replies", "C001", "1.0", "", 200),
            ("list_conversation_replies", "C001", "1.0", "1", 200),
        ]

    def test_reply_fetch_failure(self, builder, transport):
        transport.failing.add("list_conversation_replies")
        root = {"user": "U001", "ts": "1.0", "thread_ts": "1.0", "reply_count": 1}
        with pytest.raises(ReplyFetchError) as excinfo:
            builder.build(root, CHANNEL)
        assert isinstance(excinfo.value, FetchError)
        assert isinstance(excinfo.value, LookupError)
