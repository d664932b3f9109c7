from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime


class AttachmentKind(str, enum.Enum):
    OTHER = "other"
    TITLE = "title"
    LINK = "link"
    TEXT = "text"


class Bucket(enum.IntEnum):
    """Conversation categories, in display order."""

    CHANNEL = 0
    GROUP = 1
    MPIM = 2
    IM = 3


@dataclass
class Channel:
    id: str
    name: str
    topic: str = ""
    user_id: str = ""
    presence: str = ""


@dataclass(frozen=True)
class Attachment:
    content: str
    kind: AttachmentKind = AttachmentKind.OTHER


@dataclass(frozen=True)
class Message:
    thread_ts: str
    channel: Channel = field(compare=False, hash=False)
    time: datetime
    name: str
    content: str
    attachments: tuple[Attachment, ...] = ()
    is_reply: bool = False


@dataclass(frozen=True)
class TeamContext:
    user_id: str
    username: str
    team: dict = field(default_factory=dict)

    @property
    def team_name(self) -> str:
        return self.team.get("name", "")


# Raw records as delivered by the Slack Web API, see parser.py


@dataclass
class SlackField:
    title: str = ""
    value: str = ""


@dataclass
class SlackAttachment:
    author_name: str = ""
    title: str = ""
    title_link: str = ""
    text: str = ""
    fields: list[SlackField] = field(default_factory=list)


@dataclass
class SlackFile:
    name: str = ""
    url_private: str = ""
    preview: str = ""


@dataclass
class SlackMessage:
    ts: str
    text: str = ""
    user: str = ""
    bot_id: str = ""
    username: str = ""
    thread_ts: str = ""
    subtype: str = ""
    reply_count: int = 0
    replies: list[dict] = field(default_factory=list)
    attachments: list[SlackAttachment] = field(default_factory=list)
    files: list[SlackFile] = field(default_factory=list)

    @property
    def has_replies(self) -> bool:
        return bool(self.replies) or self.reply_count > 0


@dataclass
class Conversation:
    id: str
    name: str = ""
    topic: str = ""
    user: str = ""
    is_channel: bool = False
    is_group: bool = False
    is_mpim: bool = False
    is_im: bool = False
    is_member: bool = False
    is_open: bool = False
