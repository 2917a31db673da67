"""Translate domain errors and unexpected faults into click failures."""

from __future__ import annotations

import logging

import click

from ims.domain.exceptions import DomainException, EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Most specific first; the first match wins.
EXIT_CODES: list[tuple[type[DomainException], int]] = [
    (EntityNotFoundError, 2),
    (ValidationError, 1),
]


class DomainClickException(click.ClickException):

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def to_click_exception(exc: DomainException) -> click.ClickException:
    exit_code = 1
    for kind, code in EXIT_CODES:
        if isinstance(exc, kind):
            exit_code = code
            break
    logger.warning("%s: %s", type(exc).__name__, exc, extra={"error_code": type(exc).__name__})
    return DomainClickException(str(exc), exit_code)


class GuardedGroup(click.Group):
    """Command group that turns any unexpected fault into a generic failure.

    Domain errors are already converted by the commands themselves; what
    reaches this point is a store or programming fault. The details go to
    the log, never to the user.
    """

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception:
            logger.exception("Unhandled error in command '%s'", ctx.invoked_subcommand)
            raise click.ClickException("Something went wrong. Please try again later.")
