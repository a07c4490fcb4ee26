"""Helpers shared by the CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import click

from ftsbench.errors import FtsBenchError
from ftsbench.utils.logger import get_logger


def parse_k_values(value: str | None) -> list[int] | None:
    """Parse ``"3,5,10"`` into ``[3, 5, 10]``; None passes through.

    Raises:
        click.BadParameter: On non-integer or non-positive values.
    """
    if value is None:
        return None
    try:
        k_values = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(
            f"expected comma-separated integers, got '{value}'"
        ) from None
    if not k_values or any(k <= 0 for k in k_values):
        raise click.BadParameter(f"k values must be positive, got '{value}'")
    return k_values


@contextmanager
def handle_errors(debug: bool = False) -> Iterator[None]:
    """Turn ftsbench errors into clean CLI failures (exit code 1).

    With ``debug`` the original exception propagates with its traceback.
    """
    try:
        yield
    except FtsBenchError as e:
        if debug:
            raise
        get_logger("cli").debug("Command failed", exc_info=True)
        raise click.ClickException(str(e)) from e
