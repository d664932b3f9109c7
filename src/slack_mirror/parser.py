from __future__ import annotations

from .models import (
    Conversation,
    SlackAttachment,
    SlackField,
    SlackFile,
    SlackMessage,
)


def parse_conversation(raw: dict) -> Conversation:
    """Parse a conversations.list entry into a Conversation object."""
    topic = raw.get("topic") or {}
    return Conversation(
        id=raw["id"],
        name=raw.get("name") or "",
        topic=topic.get("value", "") if isinstance(topic, dict) else str(topic),
        user=raw.get("user") or "",
        is_channel=bool(raw.get("is_channel")),
        is_group=bool(raw.get("is_group")),
        is_mpim=bool(raw.get("is_mpim")),
        is_im=bool(raw.get("is_im")),
        is_member=bool(raw.get("is_member")),
        is_open=bool(raw.get("is_open")),
    )


def _parse_attachment(raw: dict) -> SlackAttachment:
    return SlackAttachment(
        author_name=raw.get("author_name") or "",
        title=raw.get("title") or "",
        title_link=raw.get("title_link") or "",
        text=raw.get("text") or "",
        fields=[
            SlackField(title=f.get("title") or "", value=f.get("value") or "")
            for f in raw.get("fields") or []
        ],
    )


def parse_message(raw: dict) -> SlackMessage:
    """Parse a raw message dict (history, replies or RTM event) into a SlackMessage."""
    files = [
        SlackFile(
            name=f.get("name") or "",
            url_private=f.get("url_private") or "",
            preview=f.get("preview") or "",
        )
        for f in raw.get("files") or []
    ]
    return SlackMessage(
        ts=raw.get("ts") or "",
        text=raw.get("text") or "",
        user=raw.get("user") or "",
        bot_id=raw.get("bot_id") or "",
        username=raw.get("username") or "",
        thread_ts=raw.get("thread_ts") or "",
        subtype=raw.get("subtype") or "",
        reply_count=int(raw.get("reply_count") or 0),
        replies=list(raw.get("replies") or []),
        attachments=[_parse_attachment(a) for a in raw.get("attachments") or []],
        files=files,
    )
