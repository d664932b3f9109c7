from __future__ import annotations


class SlackMirrorError(Exception):
    """Base class for errors raised by slack-mirror."""


class FetchError(SlackMirrorError):
    """A remote read (paginated or single-shot) failed."""


class ReplyFetchError(FetchError, LookupError):
    """The replies of a thread could not be retrieved while building messages."""


class StreamError(SlackMirrorError, ConnectionError):
    """The live event stream reported a fatal condition."""
