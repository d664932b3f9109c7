from __future__ import annotations

import logging
from collections.abc import Collection
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from .cache import IdentityCache
from .errors import FetchError
from .models import Bucket, Channel, Conversation
from .parser import parse_conversation
from .transport import CONVERSATION_TYPES, SlackTransport

logger = logging.getLogger(__name__)

CONVERSATIONS_PAGE_SIZE = 1000
DEFAULT_PRESENCE = "away"


def classify(conversation: Conversation) -> Optional[Bucket]:
    """Return the bucket a conversation belongs to, or None for unknown kinds."""
    if conversation.is_im:
        return Bucket.IM
    # Multi-person DMs are flagged as groups too
    if conversation.is_mpim:
        return Bucket.MPIM
    if conversation.is_group:
        return Bucket.GROUP
    if conversation.is_channel:
        return Bucket.CHANNEL
    return None


def include(
    bucket: Bucket,
    conversation: Conversation,
    users: IdentityCache,
    deleted_users: Collection[str] = frozenset(),
) -> bool:
    """Whether a classified conversation should appear in the channel list."""
    if bucket is Bucket.IM:
        # A deleted peer can still be cached if one of its messages was resolved
        if conversation.user in deleted_users:
            return False
        _, found = users.get(conversation.user)
        return found
    if bucket is Bucket.MPIM:
        return conversation.is_member and conversation.is_open
    return conversation.is_member


def channel_item(conversation: Conversation) -> Channel:
    return Channel(
        id=conversation.id,
        name=conversation.name,
        topic=conversation.topic,
        user_id=conversation.user,
    )


class ConversationSynchronizer:
    """Mirror the remote conversation list into an ordered list of channels."""

    def __init__(
        self,
        transport: SlackTransport,
        users: IdentityCache,
        deleted_users: Collection[str] = frozenset(),
    ) -> None:
        self.transport = transport
        self.users = users
        self.deleted_users = deleted_users
        self.channels: list[Channel] = []
        self.conversations: list[Conversation] = []

    def fetch_conversations(self) -> list[Conversation]:
        """Page through every non-archived conversation.

        Any failing page aborts the whole fetch.
        """
        conversations: list[Conversation] = []
        cursor = ""
        while True:
            page, cursor = self.transport.list_conversations(
                cursor,
                types=CONVERSATION_TYPES,
                exclude_archived=True,
                limit=CONVERSATIONS_PAGE_SIZE,
            )
            conversations.extend(parse_conversation(raw) for raw in page)
            if not cursor:
                break
        return conversations

    def _fetch_presence(self, channel: Channel) -> None:
        try:
            channel.presence = self.transport.get_user_presence(channel.user_id)
        except FetchError as exc:
            logger.warning(
                "Could not fetch presence of %s, assuming away: %s",
                channel.user_id,
                exc,
            )
            channel.presence = DEFAULT_PRESENCE

    def sync(self) -> list[Channel]:
        conversations = self.fetch_conversations()

        buckets: dict[Bucket, list[tuple[Channel, Conversation]]] = {
            bucket: [] for bucket in Bucket
        }
        for conversation in conversations:
            bucket = classify(conversation)
            if bucket is None:
                logger.debug("Skipping unclassified conversation %s", conversation.id)
                continue
            if not include(bucket, conversation, self.users, self.deleted_users):
                continue

            item = channel_item(conversation)
            if bucket is Bucket.IM:
                item.name, _ = self.users.get(conversation.user)
            buckets[bucket].append((item, conversation))

        direct = [item for item, _ in buckets[Bucket.IM]]
        if direct:
            with ThreadPoolExecutor(max_workers=len(direct)) as pool:
                list(pool.map(self._fetch_presence, direct))

        channels: list[Channel] = []
        ordered: list[Conversation] = []
        for bucket in sorted(buckets):
            for item, conversation in sorted(buckets[bucket], key=lambda t: t[0].name):
                channels.append(item)
                ordered.append(conversation)

        self.channels = channels
        self.conversations = ordered
        logger.debug(
            "Synced %d channels out of %d conversations",
            len(channels),
            len(conversations),
        )
        return channels
