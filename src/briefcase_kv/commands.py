"""Command catalog and dispatch for the briefcase CLI.

Handlers never raise: filesystem and naming errors are turned into a
failing ``CommandResult`` where they happen, and the shell layer decides how
to print the result and which exit code to use.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from briefcase_kv.config import BriefcaseConfig
from briefcase_kv.locator import locate, resolve_storage_dir
from briefcase_kv.store import EntryStore, InvalidEntryNameError, validate_entry_name

logger = logging.getLogger(__name__)

VERSION = "0.0.1"
FORCE_ARGUMENT = "force"
CONFIRM_REPLY = "y"
PURGE_PROMPT = "Are you sure you want to delete all briefcase data? (y/n)"

Prompt = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class CommandArgs:
    name: str = ""
    value: str = ""


@dataclass(frozen=True, slots=True)
class CommandResult:
    ok: bool
    message: str = ""
    output: str | bytes = ""

    @classmethod
    def success(cls, message: str = "", output: str | bytes = "") -> CommandResult:
        return cls(ok=True, message=message, output=output)

    @classmethod
    def failure(cls, message: str) -> CommandResult:
        return cls(ok=False, message=message)


Handler = Callable[..., CommandResult]


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: Handler
    description: str
    usage: str


def version(
    args: CommandArgs,
    *,
    environ: Mapping[str, str] | None = None,
    prompt: Prompt | None = None,
    config: BriefcaseConfig | None = None,
) -> CommandResult:
    return CommandResult.success(output=f"Briefcase {VERSION}\n")


def info(
    args: CommandArgs,
    *,
    environ: Mapping[str, str] | None = None,
    prompt: Prompt | None = None,
    config: BriefcaseConfig | None = None,
) -> CommandResult:
    location = locate(environ, config)
    try:
        entries = str(EntryStore(location.directory).count())
    except OSError as exc:
        logger.warning("info count failed directory=%s error=%s", location.directory, exc)
        entries = "unavailable"

    lines = [
        f"\tTemp Dir: {location.root}",
        f"\tSourced From: {location.source}",
        f"\tBriefcase Directory Name: {location.dirname}",
        f"\tBriefcase Directory: {location.directory}",
        f"\tEntries: {entries}",
    ]
    return CommandResult.success(output="\n".join(lines) + "\n")


def set_entry(
    args: CommandArgs,
    *,
    environ: Mapping[str, str] | None = None,
    prompt: Prompt | None = None,
    config: BriefcaseConfig | None = None,
) -> CommandResult:
    if not args.name or not args.value:
        return _usage_failure("set")
    try:
        validate_entry_name(args.name)
    except InvalidEntryNameError as exc:
        return CommandResult.failure(_error(exc))

    store = _store(environ, config)
    notes: list[str] = []
    try:
        store.ensure_directory()
    except OSError as exc:
        # Reported, but the write is still attempted.
        logger.warning("set mkdir failed directory=%s error=%s", store.directory, exc)
        notes.append(_error(exc))

    try:
        store.write(args.name, args.value)
    except OSError as exc:
        notes.append(_error(exc))
        return CommandResult.failure("\n".join(notes))
    return CommandResult.success(message="\n".join(notes))


def get_entry(
    args: CommandArgs,
    *,
    environ: Mapping[str, str] | None = None,
    prompt: Prompt | None = None,
    config: BriefcaseConfig | None = None,
) -> CommandResult:
    if not args.name:
        return _usage_failure("get")
    try:
        data = _store(environ, config).get(args.name)
    except InvalidEntryNameError as exc:
        return CommandResult.failure(_error(exc))
    except FileNotFoundError:
        return CommandResult.failure(_error(f"entry not found: {args.name}"))
    except OSError as exc:
        return CommandResult.failure(_error(exc))
    return CommandResult.success(output=data)


def remove_entry(
    args: CommandArgs,
    *,
    environ: Mapping[str, str] | None = None,
    prompt: Prompt | None = None,
    config: BriefcaseConfig | None = None,
) -> CommandResult:
    if not args.name:
        return _usage_failure("remove")
    try:
        _store(environ, config).remove(args.name)
    except InvalidEntryNameError as exc:
        return CommandResult.failure(_error(exc))
    except FileNotFoundError:
        return CommandResult.failure(_error(f"entry not found: {args.name}"))
    except OSError as exc:
        return CommandResult.failure(_error(exc))
    return CommandResult.success()


def list_entries(
    args: CommandArgs,
    *,
    environ: Mapping[str, str] | None = None,
    prompt: Prompt | None = None,
    config: BriefcaseConfig | None = None,
) -> CommandResult:
    try:
        names = _store(environ, config).list_entries()
    except OSError as exc:
        return CommandResult.failure(_error(exc))
    return CommandResult.success(output="".join(f"{name}\n" for name in names))


def purge(
    args: CommandArgs,
    *,
    environ: Mapping[str, str] | None = None,
    prompt: Prompt | None = None,
    config: BriefcaseConfig | None = None,
) -> CommandResult:
    if args.name == FORCE_ARGUMENT:
        reply = CONFIRM_REPLY
    else:
        ask = prompt or input
        try:
            reply = ask(PURGE_PROMPT)
        except EOFError:
            reply = ""

    if reply != CONFIRM_REPLY:
        logger.info("purge declined reply=%r", reply)
        return CommandResult.success(message="Exiting without deleting data")

    store = _store(environ, config)
    try:
        store.purge()
    except OSError as exc:
        return CommandResult.failure(_error(exc))
    return CommandResult.success(message="Briefcase data purged successfully")


COMMANDS: Mapping[str, Command] = MappingProxyType(
    {
        command.name: command
        for command in (
            Command("version", version, "Show the version of briefcase", "briefcase version"),
            Command(
                "info",
                info,
                "Show information about the temp directory used by briefcase",
                "briefcase info",
            ),
            Command("set", set_entry, "Set a briefcase variable", "briefcase set <variable> <value>"),
            Command("get", get_entry, "Get a briefcase variable", "briefcase get <variable>"),
            Command("purge", purge, "Purge briefcase data", "briefcase purge [force]"),
            Command("remove", remove_entry, "Remove a briefcase variable", "briefcase remove <variable>"),
            Command("list", list_entries, "List briefcase entries", "briefcase list"),
        )
    }
)


def help_text() -> str:
    blocks = [
        f"{command.name}\n\tDescription: {command.description}\n\tUsage: {command.usage}\n"
        for command in COMMANDS.values()
    ]
    return "\n" + "".join(blocks)


def parse_args(tokens: Sequence[str]) -> tuple[str | None, CommandArgs]:
    """Split raw tokens into a command name, an entry name and a value.

    Everything after the entry name is joined with single spaces, so
    ``set greeting hello world`` stores ``hello world``.
    """
    if not tokens:
        return None, CommandArgs()
    name = tokens[1] if len(tokens) > 1 else ""
    value = " ".join(tokens[2:])
    return tokens[0], CommandArgs(name=name, value=value)


def dispatch(
    tokens: Sequence[str],
    *,
    environ: Mapping[str, str] | None = None,
    prompt: Prompt | None = None,
    config: BriefcaseConfig | None = None,
) -> CommandResult:
    command_name, args = parse_args(tokens)
    command = COMMANDS.get(command_name) if command_name else None
    if command is None:
        logger.info("dispatch command=%s reason=unknown", command_name)
        return CommandResult.success(output=help_text())

    logger.info("dispatch command=%s", command.name)
    return command.handler(args, environ=environ, prompt=prompt, config=config)


def _error(detail: object) -> str:
    return f"Error: {detail}"


def _usage_failure(command_name: str) -> CommandResult:
    command = COMMANDS[command_name]
    return CommandResult.failure(_error(f"Incorrect {command.name} usage\nUsage: {command.usage}"))


def _store(environ: Mapping[str, str] | None, config: BriefcaseConfig | None) -> EntryStore:
    return EntryStore(resolve_storage_dir(environ, config))
