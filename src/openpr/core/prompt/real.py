"""Click-based prompts."""

import click

from openpr.cli.output import user_output
from openpr.core.prompt.abc import Prompter

CANCEL_WORDS = frozenset({"q", "quit", "esc"})


def parse_selection(raw: str, choices: list[str]) -> list[str] | None:
    """Parse a picker answer like "3, 1" into the chosen items.

    Args:
        raw: Comma or space separated 1-based indices; blank for none;
            "q" to cancel
        choices: Items being picked from

    Returns:
        Chosen items in the order given (duplicates dropped), or None on cancel

    Raises:
        ValueError: If an entry is not a valid index
    """
    answer = raw.strip()
    if answer.lower() in CANCEL_WORDS:
        return None

    selected: list[str] = []
    for token in answer.replace(",", " ").split():
        if not token.isdigit() or not 1 <= int(token) <= len(choices):
            raise ValueError(f"'{token}' is not a number between 1 and {len(choices)}")
        choice = choices[int(token) - 1]
        if choice not in selected:
            selected.append(choice)
    return selected


class ClickPrompter(Prompter):
    """Prompts rendered with click on stderr."""

    def select_many(self, message: str, choices: list[str]) -> list[str] | None:
        user_output(message)
        for index, choice in enumerate(choices, start=1):
            user_output(f"  {index}) {choice}")

        while True:
            try:
                raw = click.prompt(
                    "Numbers (comma separated, blank for none, q to cancel)",
                    default="",
                    show_default=False,
                    err=True,
                )
            except click.Abort:
                return None

            try:
                return parse_selection(raw, choices)
            except ValueError as e:
                user_output(click.style(f"Invalid selection: {e}", fg="yellow"))

    def confirm(self, message: str) -> bool:
        try:
            return click.confirm(message, default=True, err=True)
        except click.Abort:
            return False
