"""PALISADE CLI entry point.

Defines the top-level ``palisade`` command (via Click-Extra) and registers the
check subcommands.

Currently available commands
- ``palisade uri VALUE``: URI format check.
- ``palisade record VALUE``: record existence / uniqueness check against
  ``PALISADE_DB_URL``.

Examples
    $ palisade uri "https://example.com/a?b#c"
    $ palisade uri --no-relative "../docs"
    $ palisade record ada@example.com -t users -f email --absent --exclude-field id --exclude-value 7
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from palisade import __version__
from palisade.bootstrap import uri_handler_registry
from palisade.logging import config_console_handler, config_flight_recorder, log_startup

from .check import record, uri
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """PALISADE command-line interface.

    Run PALISADE validators against single values: check that a string is a
    URI allowed by an absolute/relative policy, or that a value does (or does
    not) already exist in a database table.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  RFC 3986: " + hyperlink("https://www.rfc-editor.org/rfc/rfc3986"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path the flight recorder writes to.",
    default=Path(user_log_dir("palisade", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="PALISADE_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="PALISADE_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity and write them to "
        "--log-path when a WARNING or ERROR occurs. Console verbosity is unchanged."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Write the flight recorder buffer to --log-path on exit even when no "
        "WARNING or ERROR occurred."
    ),
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum LEVEL for specific loggers (NAME=LEVEL). Applies to "
        "both console and flight recorder. Repeatable (e.g. -L sqlalchemy=INFO) "
        "or via PALISADE_LOGGER_LEVELS (comma/space list)."
    ),
    envvar="PALISADE_LOGGER_LEVELS",
    default=("sqlalchemy=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def palisade(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """PALISADE command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
        uri_handlers=uri_handler_registry,
    )

    ctx.call_on_close(logging.shutdown)


palisade.add_command(uri)
palisade.add_command(record)
