"""Parsing of the repeatable ``-L NAME=LEVEL`` CLI option.

Values arrive either as a tuple (one item per ``-L``) or as a single string
from ``MAILINGLIST_LOGGER_LEVELS``, where pairs are separated by commas or
whitespace.
"""

import logging
import re

import click

#: Library loggers quieted unless overridden.
DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "uvicorn.access": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_pairs(value: str | list[str] | tuple[str, ...]) -> list[str]:
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL pairs into a name -> level mapping.

    Starts from DEFAULT_LIB_LEVELS; later pairs override earlier ones. Level
    names are case-insensitive.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_pairs(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelNamesMapping().get(level_name.strip().upper())
        if level is None:
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
