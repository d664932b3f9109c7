from __future__ import annotations

import argparse
import logging
import os

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .errors import FetchError, StreamError
from .formatter import parse_time
from .models import Channel, Message, TeamContext
from .service import SlackService
from .transport import SlackWebTransport

console = Console()
err_console = Console(stderr=True)

_PRESENCE_MARKERS = {"active": "[green]●[/]", "away": "[grey50]○[/]"}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _channel_label(channel: Channel) -> str:
    if channel.user_id:
        marker = _PRESENCE_MARKERS.get(channel.presence, "○")
        return f"{marker} {escape(channel.name)}"
    return f"# {escape(channel.name)}"


def print_message(message: Message, team: TeamContext) -> None:
    """Print a message as ``[23:59] <erroneousboat> Hello world!``."""
    style = "bold cyan" if message.name == team.username else "bold"
    prefix = "  ↳ " if message.is_reply else ""
    console.print(
        f"{prefix}[grey50][{message.time:%H:%M}][/] "
        f"[{style}]<{escape(message.name)}>[/] {escape(message.content)}"
    )
    indent = " " * (len(prefix) + 4)
    for attachment in message.attachments:
        console.print(f"{indent}[dim]{attachment.kind.value}:[/] {escape(attachment.content)}")


def _find_channel(service: SlackService, name: str) -> Channel:
    for channel in service.channels:
        if channel.name == name or channel.id == name:
            return channel
    err_console.print(f"[red bold]Error:[/] channel not found: {escape(name)}")
    raise SystemExit(1)


def _cmd_channels(service: SlackService, args: argparse.Namespace) -> None:
    for channel in service.channels:
        console.print(_channel_label(channel))


def _cmd_history(service: SlackService, args: argparse.Namespace) -> None:
    channel = _find_channel(service, args.channel)
    messages = service.get_messages(channel, args.count)
    # oldest thread first, replies under their parent
    for message in sorted(messages, key=lambda m: (parse_time(m.thread_ts), m.time)):
        print_message(message, service.team)
    service.mark_as_read(channel.id)


def _cmd_watch(service: SlackService, args: argparse.Namespace) -> None:
    if args.channels:
        selected = [_find_channel(service, name.strip()) for name in args.channels]
    else:
        selected = service.channels
    watch = {channel.id: channel for channel in selected}
    console.print(
        f"[green]Watching[/] {len(watch)} channels on "
        f"[bold]{escape(service.team.team_name)}[/] as {escape(service.team.username)}"
    )
    service.listen(watch, print_message)


def main() -> None:
    """Mirror a Slack workspace in the terminal."""
    parser = argparse.ArgumentParser(
        description="Mirror a Slack workspace in the terminal.",
    )
    parser.add_argument(
        "-t",
        "--token",
        default=os.environ.get("SLACK_TOKEN", ""),
        help="Slack API token (default: $SLACK_TOKEN).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    channels = subparsers.add_parser("channels", help="List synced channels.")
    channels.set_defaults(func=_cmd_channels)

    history = subparsers.add_parser("history", help="Show recent messages.")
    history.add_argument("-c", "--channel", required=True, help="Channel name or ID.")
    history.add_argument(
        "-n",
        "--count",
        type=int,
        default=50,
        help="Number of messages to fetch (default: 50).",
    )
    history.set_defaults(func=_cmd_history)

    watch = subparsers.add_parser("watch", help="Follow new messages live.")
    watch.add_argument(
        "-c",
        "--channel",
        dest="channels",
        action="append",
        help="Channel name to watch (repeatable). Defaults to all channels.",
    )
    watch.set_defaults(func=_cmd_watch)

    args = parser.parse_args()
    _setup_logging(args.verbose)

    if not args.token:
        err_console.print("[red bold]Error:[/] no Slack token, set SLACK_TOKEN or use --token")
        raise SystemExit(1)

    transport = SlackWebTransport(args.token)
    try:
        with err_console.status("Syncing workspace..."):
            service = SlackService.connect(transport)
            service.get_channels()
        args.func(service, args)
    except (FetchError, StreamError) as exc:
        err_console.print(f"[red bold]Error:[/] {escape(str(exc))}")
        raise SystemExit(1)
    except KeyboardInterrupt:
        pass
    finally:
        transport.close()
