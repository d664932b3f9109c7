from __future__ import annotations

from slack_mirror.models import SlackField
from slack_mirror.parser import parse_conversation, parse_message


class TestParseConversation:
    def test_channel(self):
        conv = parse_conversation(
            {
                "id": "C001",
                "name": "general",
                "is_channel": True,
                "is_member": True,
                "topic": {"value": "General"},
            }
        )
        assert conv.id == "C001"
        assert conv.name == "general"
        assert conv.topic == "General"
        assert conv.is_channel and conv.is_member
        assert not conv.is_im

    def test_im(self):
        conv = parse_conversation({"id": "D001", "is_im": True, "user": "U002"})
        assert conv.is_im
        assert conv.user == "U002"
        assert conv.name == ""
        assert conv.topic == ""

    def test_null_fields(self):
        conv = parse_conversation({"id": "G001", "name": None, "topic": None})
        assert conv.name == ""
        assert conv.topic == ""


class TestParseMessage:
    def test_plain_message(self):
        msg = parse_message({"user": "U001", "text": "hi", "ts": "1705307400.000"})
        assert msg.user == "U001"
        assert msg.text == "hi"
        assert msg.thread_ts == ""
        assert not msg.has_replies

    def test_bot_message(self):
        msg = parse_message(
            {"bot_id": "B001", "username": "deploybot", "subtype": "bot_message", "ts": "1"}
        )
        assert msg.bot_id == "B001"
        assert msg.username == "deploybot"
        assert msg.subtype == "bot_message"

    def test_thread_parent(self):
        msg = parse_message(
            {"ts": "1.0", "thread_ts": "1.0", "reply_count": 2, "text": "parent"}
        )
        assert msg.thread_ts == "1.0"
        assert msg.has_replies

    def test_legacy_replies(self):
        msg = parse_message({"ts": "1.0", "replies": [{"user": "U002", "ts": "2.0"}]})
        assert msg.has_replies

    def test_attachments_and_files(self):
        msg = parse_message(
            {
                "ts": "1.0",
                "attachments": [
                    {
                        "title": "PR #1",
                        "fields": [{"title": "Status", "value": "open"}],
                    }
                ],
                "files": [
                    {"name": "a.png", "url_private": "https://files/a.png", "preview": "p"}
                ],
            }
        )
        assert msg.attachments[0].title == "PR #1"
        assert msg.attachments[0].fields == [SlackField("Status", "open")]
        assert msg.files[0].name == "a.png"
        assert msg.files[0].preview == "p"


class TestNullFields:
    def test_null_field_parts(self):
        msg = parse_message(
            {
                "ts": None,
                "attachments": [
                    {"title": None, "text": None, "fields": [{"title": None, "value": "2"}]}
                ],
                "files": [{"name": None, "url_private": "https://f/a", "preview": None}],
            }
        )
        assert msg.ts == ""
        assert msg.attachments[0].title == ""
        assert msg.attachments[0].text == ""
        assert msg.attachments[0].fields == [SlackField("", "2")]
        assert msg.files[0].name == ""
        assert msg.files[0].preview == ""
