from __future__ import annotations

import logging

from .cache import UNKNOWN, IdentityCache
from .errors import FetchError, ReplyFetchError
from .formatter import format_attachments, normalize_text, parse_time
from .models import Channel, Message, SlackMessage
from .parser import parse_message
from .transport import SlackTransport

logger = logging.getLogger(__name__)

REPLIES_PAGE_SIZE = 200


class MessageBuilder:
    """Turn raw Slack messages into canonical Message objects.

    A single raw message can yield several messages: the message itself
    followed by its thread replies.
    """

    def __init__(self, transport: SlackTransport, users: IdentityCache) -> None:
        self.transport = transport
        self.users = users

    def _fetch_user_name(self, user_id: str) -> str:
        return self.transport.get_user_info(user_id).get("name", "")

    def resolve_user(self, user_id: str) -> str:
        return self.users.resolve(user_id, self._fetch_user_name)

    def resolve_author(self, msg: SlackMessage) -> str:
        """Find the display name of the message author."""
        if msg.user:
            name, found = self.users.get(msg.user)
            if found:
                return name or UNKNOWN

        if msg.bot_id:
            name, found = self.users.get(msg.bot_id)
            if not found:
                # Not a user we know of, bots carry their own username
                name = msg.username or UNKNOWN
                self.users.set(msg.bot_id, name)
            return name or UNKNOWN

        if msg.user:
            return self.resolve_user(msg.user)

        return msg.username or UNKNOWN

    def build_one(self, msg: SlackMessage, channel: Channel) -> Message:
        """Build a single Message, without fetching thread replies."""
        return Message(
            thread_ts=msg.thread_ts or msg.ts,
            channel=channel,
            time=parse_time(msg.ts),
            name=self.resolve_author(msg),
            content=normalize_text(msg.text, self.resolve_user),
            attachments=tuple(format_attachments(msg.attachments, msg.files)),
            is_reply=bool(msg.thread_ts) and msg.thread_ts != msg.ts,
        )

    def build(self, raw: dict | SlackMessage, channel: Channel) -> list[Message]:
        """Build the message and, when it starts a thread, all of its replies."""
        msg = raw if isinstance(raw, SlackMessage) else parse_message(raw)
        messages = [self.build_one(msg, channel)]

        if msg.has_replies:
            thread_ts = msg.thread_ts or msg.ts
            for reply in self.fetch_replies(channel.id, thread_ts):
                # conversations.replies returns the whole thread, parent included
                if reply.thread_ts and reply.thread_ts == reply.ts:
                    continue
                messages.append(self.build_one(reply, channel))

        return messages

    def fetch_replies(self, channel_id: str, thread_ts: str) -> list[SlackMessage]:
        """Retrieve every message of a thread, following the cursor."""
        replies: list[SlackMessage] = []
        cursor = ""
        while True:
            try:
                page, _, cursor = self.transport.list_conversation_replies(
                    channel_id, thread_ts, cursor, REPLIES_PAGE_SIZE
                )
            except FetchError as exc:
                raise ReplyFetchError(
                    f"Could not fetch replies of {thread_ts} in {channel_id}: {exc}"
                ) from exc

            replies.extend(parse_message(raw) for raw in page)
            if not cursor:
                break

        logger.debug("Fetched %d messages of thread %s", len(replies), thread_ts)
        return replies
