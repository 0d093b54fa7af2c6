"""Terminal message helpers for the MAILINGLIST CLI.

Status lines go to stderr, so stdout carries only the JSON records printed by
the ``email`` commands and stays pipeable. Emoji markers fall back to ASCII on
terminals that cannot encode them.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
FAILURE = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on the current stderr.

    The stream is looked up on every call, so redirections made after import
    (e.g. by ``CliRunner``) are honored.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(marker: tuple[str, str]) -> str:
    """Pick the emoji of an ``(emoji, ascii)`` marker, or its ASCII fallback."""
    emoji, fallback = marker
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  MAILINGLIST_DB_URL points at an in-memory database.``
    """
    click.secho(f"{glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Subscriber table ready.``
    """
    click.secho(f"{glyph(SUCCESS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Cannot connect to database.``
    """
    click.secho(f"{glyph(FAILURE)}  {msg}", fg="red", bold=True, err=True)
