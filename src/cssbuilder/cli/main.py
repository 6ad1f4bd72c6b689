"""cssbuilder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys
from typing import IO

import click

from cssbuilder import __version__
from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.selector import COMBINATORS, Combination, Selector
from cssbuilder.serialization import to_json
from cssbuilder.shapes import Rectangle

# STEP prefix -> Selector method
_STEP_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(level: str, stream: IO[str] | None = None) -> None:
    """Send cssbuilder log records to *stream* (stderr by default) at *level*.

    Handlers installed by an earlier call are closed and replaced.
    """
    logger = logging.getLogger("cssbuilder")
    logger.setLevel(level)
    for old in logger.handlers:
        old.close()
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    logger.handlers = [handler]


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=CssBuilderConfig.log_level,
    show_default=True,
    help="Logging level",
)
@click.option(
    "--json-indent",
    type=int,
    default=CssBuilderConfig.json_indent,
    help="Indentation for JSON output (compact when omitted)",
)
@click.option(
    "--sort-keys/--no-sort-keys",
    default=CssBuilderConfig.sort_keys,
    show_default=True,
    help="Sort keys in JSON output",
)
@click.pass_context
def cli(
    ctx: click.Context, log_level: str, json_indent: int | None, sort_keys: bool
) -> None:
    """cssbuilder - build CSS selectors and shape records."""
    config = CssBuilderConfig(
        log_level=log_level.upper(), json_indent=json_indent, sort_keys=sort_keys
    )
    configure_logging(config.log_level)
    ctx.obj = config


def _build(steps: tuple[str, ...]) -> Selector | Combination:
    result: Selector | Combination | None = None
    current: Selector | None = None
    combinator: str | None = None

    for step in steps:
        if step in COMBINATORS:
            if current is None:
                raise click.BadParameter(
                    f"combinator {step!r} must follow a selector", param_hint="STEP"
                )
            result = current if result is None else Combination(result, combinator, current)
            current, combinator = None, step
            continue

        kind, sep, value = step.partition("=")
        if not sep or kind not in _STEP_METHODS:
            raise click.BadParameter(
                f"{step!r} is not KIND=VALUE with KIND one of "
                f"{', '.join(_STEP_METHODS)}",
                param_hint="STEP",
            )
        if current is None:
            current = Selector()
        current = getattr(current, _STEP_METHODS[kind])(value)

    if current is None:
        raise click.BadParameter("selector cannot end with a combinator", param_hint="STEP")
    if result is None:
        return current
    return Combination(result, combinator, current)


@cli.command()
@click.argument("steps", nargs=-1, required=True)
def render(steps: tuple[str, ...]) -> None:
    """Build a selector from STEPS and print it.

    Each STEP is KIND=VALUE (element, id, class, attr, pseudo-class,
    pseudo-element) or a combinator: '+', '~', '>' or ' '.

    \b
    Example:
      cssbuilder render element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        selector = _build(steps)
    except (SelectorError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())


def _number(ctx: click.Context, param: click.Parameter, value: str) -> int | float:
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a number") from None


# Unknown options are passed through so negative sizes like -5 reach WIDTH/HEIGHT.
@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("width", callback=_number)
@click.argument("height", callback=_number)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def rectangle(
    config: CssBuilderConfig,
    width: int | float,
    height: int | float,
    as_json: bool,
) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width, height)
    if as_json:
        try:
            output = to_json(rect, indent=config.json_indent, sort_keys=config.sort_keys)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)
        click.echo(output)
    else:
        click.echo(rect.get_area())
