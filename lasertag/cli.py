"""Command-line entry point for the laser tag simulation."""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import fields

from lasertag.arena import SEPARATOR, Arena
from lasertag.config import Config

__all__ = ["UsageError", "parse_args", "usage", "main"]

_OPTIONS: dict[str, tuple[str, ...]] = {
    "j": ("players_per_team",),
    "g": ("group_min", "group_max"),
    "d": ("damage_min", "damage_max", "damage_heal"),
    "c": ("delay_min", "delay_max", "delay_manager", "delay_cleaner"),
    "p": ("matches_max", "match_time_max"),
    "s": ("seed",),
}

_USAGE = """\
You can configure the following options:
\t-j players_per_team
\t-g group_min group_max
\t-d damage_min damage_max damage_heal
\t-c delay_min delay_max delay_manager delay_cleaner
\t-p matches_max match_time_max
\t-s seed
\t-h print this help."""

_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    """Raised for a bad command line or when help is requested."""

    def __init__(
        self, message: str, index: int | None = None, help_requested: bool = False
    ) -> None:
        super().__init__(message)
        self.message = message
        self.index = index
        self.help_requested = help_requested


def _to_int(text: str) -> int:
    """Leading integer of ``text``, or 0 when it has none."""
    found = _INTEGER_PREFIX.match(text)
    return int(found.group(1)) if found else 0


def parse_args(argv: list[str] | None = None) -> Config:
    """Build a configuration from command-line options."""
    args = list(sys.argv[1:] if argv is None else argv)
    values: dict[str, int] = {}
    position = 0
    while position < len(args):
        arg = args[position]
        if not arg.startswith("-"):
            raise UsageError(f"parameter {position} is incorrect", position)
        flag = arg[1:2]
        if flag == "h":
            raise UsageError("help requested", help_requested=True)
        names = _OPTIONS.get(flag)
        if names is None:
            raise UsageError(f"parameter {position} is incorrect", position)
        for name in names:
            position += 1
            if position == len(args):
                raise UsageError(f"parameter {position} is missing", position)
            values[name] = _to_int(args[position])
        position += 1
    try:
        return Config(**values)
    except ValueError as exc:
        raise UsageError(str(exc)) from exc


def usage() -> str:
    """Help text listing the options."""
    return _USAGE


def _describe(config: Config) -> str:
    lines = [SEPARATOR, "[main][params] Run parameters:"]
    lines.extend(
        f"[main][params] {field.name + ':':<22} {getattr(config, field.name)}"
        for field in fields(config)
    )
    lines.append(SEPARATOR)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run the simulation; return the process exit status."""
    try:
        config = parse_args(argv)
    except UsageError as exc:
        if exc.help_requested:
            print(usage())
        else:
            print(f"[main] {exc.message}", file=sys.stderr)
            print(usage(), file=sys.stderr)
        return 1

    package_logger = logging.getLogger("lasertag")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous_level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.INFO)
    try:
        print(_describe(config))
        arena = Arena(config)
        arena.run()
        print(arena.report())
        print("[main] Program finished successfully!")
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)
    return 0


if __name__ == "__main__":
    sys.exit(main())