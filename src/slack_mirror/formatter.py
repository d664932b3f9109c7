from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from .emoji import EMOJI_CODEMAP
from .models import Attachment, AttachmentKind, SlackAttachment, SlackFile

_EMOJI_RE = re.compile(r":[\w+-]+:")
_MENTION_RE = re.compile(r"<@(\w+)(?:\|[^>]*)?>")
_LINK_RE = re.compile(r"(<)(https://.*?)([|>])")


def parse_time(ts: str) -> datetime:
    """Convert a Slack timestamp to a UTC datetime, truncated to seconds."""
    try:
        seconds = int(float(ts))
    except (TypeError, ValueError):
        seconds = 0
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def normalize_emoji(text: str) -> str:
    """Replace :emoji: codes with their Unicode equivalent."""
    return _EMOJI_RE.sub(lambda m: EMOJI_CODEMAP.get(m.group(0), m.group(0)), text)


def normalize_mentions(text: str, resolve: Callable[[str], str]) -> str:
    """Replace mention placeholders with ``@name``.

    Mentions look like ``<@U12345|erroneousboat>`` or ``<@U12345>``.
    """

    def replace_user_mention(m: re.Match) -> str:
        return "@" + resolve(m.group(1))

    return _MENTION_RE.sub(replace_user_mention, text)


def sanitize_links(text: str) -> str:
    """Pad the URL of ``<https://...|label>`` links with spaces.

    Keeps the terminal from gluing the URL to the surrounding brackets.
    """
    return _LINK_RE.sub(r"\1 \2 \3", text)


def normalize_text(text: str, resolve: Callable[[str], str]) -> str:
    return normalize_mentions(normalize_emoji(text), resolve)


def format_attachments(
    attachments: Iterable[SlackAttachment], files: Iterable[SlackFile]
) -> list[Attachment]:
    """Flatten message attachments and files into displayable entries."""
    result: list[Attachment] = []
    for att in attachments:
        if att.author_name:
            result.append(Attachment(att.author_name, AttachmentKind.OTHER))
        if att.title:
            result.append(Attachment(sanitize_links(att.title), AttachmentKind.TITLE))
        if att.title_link:
            result.append(
                Attachment(sanitize_links(att.title_link), AttachmentKind.LINK)
            )
        if att.text:
            result.append(Attachment(sanitize_links(att.text), AttachmentKind.TEXT))

        for f in reversed(att.fields):
            result.append(Attachment(f"{f.title} {f.value}", AttachmentKind.LINK))

    for f in files:
        result.append(Attachment(f"{f.name} ⇒ {f.url_private}", AttachmentKind.LINK))
        if f.preview:
            result.append(Attachment(f.preview, AttachmentKind.LINK))

    return result
