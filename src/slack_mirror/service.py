from __future__ import annotations

import logging
import time
from collections.abc import Mapping

from .builder import MessageBuilder
from .cache import UNKNOWN, IdentityCache
from .errors import FetchError
from .events import EventDispatcher, MessageCallback
from .models import Channel, Conversation, Message, TeamContext
from .sync import ConversationSynchronizer
from .transport import SlackTransport

logger = logging.getLogger(__name__)


def load_users(transport: SlackTransport, users: IdentityCache) -> set[str]:
    """Seed the identity cache with every non-deleted workspace member.

    Returns the IDs of deleted members.
    """
    deleted: set[str] = set()
    cursor = ""
    while True:
        members, cursor = transport.list_users(cursor)
        for member in members:
            if member.get("deleted"):
                deleted.add(member["id"])
                continue
            users.set(member["id"], member.get("name") or UNKNOWN)
        if not cursor:
            break
    return deleted


class SlackService:
    """Entry point for the terminal front-end."""

    def __init__(
        self,
        transport: SlackTransport,
        team: TeamContext,
        users: IdentityCache | None = None,
        deleted_users: frozenset[str] = frozenset(),
    ) -> None:
        self.transport = transport
        self.team = team
        self.users = users if users is not None else IdentityCache()
        self.builder = MessageBuilder(transport, self.users)
        self.synchronizer = ConversationSynchronizer(
            transport, self.users, deleted_users
        )
        self.dispatcher = EventDispatcher(self.builder, team)

    @classmethod
    def connect(cls, transport: SlackTransport) -> SlackService:
        """Authenticate, warm the user cache and load team information."""
        try:
            auth = transport.auth_test()
        except FetchError as exc:
            raise FetchError(
                "not able to authorize client, check your connection "
                "and if your slack-token is set correctly"
            ) from exc
        user_id = auth["user_id"]

        users = IdentityCache()
        deleted = load_users(transport, users)
        logger.debug("Cached %d users, %d deleted", len(users), len(deleted))

        team = transport.get_team_info()
        username, found = users.get(user_id)
        if not found:
            try:
                username = transport.get_user_info(user_id).get("name", "")
            except FetchError:
                logger.warning("Could not look up current user %s", user_id)
        context = TeamContext(user_id=user_id, username=username or UNKNOWN, team=team)
        return cls(transport, context, users, frozenset(deleted))

    @property
    def channels(self) -> list[Channel]:
        return self.synchronizer.channels

    @property
    def conversations(self) -> list[Conversation]:
        return self.synchronizer.conversations

    def get_channels(self) -> list[Channel]:
        return self.synchronizer.sync()

    def get_user_presence(self, user_id: str) -> str:
        return self.transport.get_user_presence(user_id)

    def get_team_info(self) -> dict:
        return self.transport.get_team_info()

    def create_message(self, raw: dict, channel: Channel) -> list[Message]:
        return self.builder.build(raw, channel)

    def get_messages(self, channel: Channel, count: int) -> list[Message]:
        """Messages of a channel, newest first, thread replies after their parent."""
        messages: list[Message] = []
        for raw in self.transport.list_conversation_history(channel.id, count):
            messages.extend(self.builder.build(raw, channel))
        return messages

    def mark_as_read(self, channel_id: str) -> None:
        ts = f"{time.time():f}"
        try:
            self.transport.mark_channel_read(channel_id, ts)
        except FetchError as exc:
            logger.warning("Could not mark %s as read: %s", channel_id, exc)

    def listen(self, watch: Mapping[str, Channel], callback: MessageCallback) -> None:
        self.dispatcher.listen(self.transport.events(), watch, callback)
