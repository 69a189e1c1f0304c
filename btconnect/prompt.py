"""Interactive choice between several matching devices."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

import typer

from btconnect import render
from btconnect.core.errors import InvalidSelection
from btconnect.core.model import Device

_NUMBER_RE = re.compile(r"[0-9]+")


def disambiguate(
    matches: Sequence[Device],
    *,
    ask: Callable[[str], str] | None = None,
    color: bool = True,
) -> Device:
    """Ask the user to pick one of ``matches`` by its 1-based number.

    The answer is read once. Anything other than a listed number raises
    ``InvalidSelection``; there is no re-prompt and no default.
    """
    if ask is None:
        ask = _ask

    typer.echo("Multiple devices found. Please choose one:")
    for index, device in enumerate(matches, start=1):
        typer.echo(f"  {index}. {render.device_line(device, color=color)}")

    answer = ask(f"Select a device [1-{len(matches)}]").strip()
    if not _NUMBER_RE.fullmatch(answer):
        raise InvalidSelection(f"'{answer}' is not a number between 1 and {len(matches)}")

    choice = int(answer)
    if not 1 <= choice <= len(matches):
        raise InvalidSelection(f"{choice} is not between 1 and {len(matches)}")
    return matches[choice - 1]


def _ask(text: str) -> str:
    return typer.prompt(text, type=str, default="", show_default=False)
