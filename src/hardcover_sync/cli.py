import logging
import sys
from pathlib import Path

import click

from hardcover_sync.errors import GraphQLResponseError, HardcoverSyncError
from hardcover_sync.sync import format_duration, run_sync

ABORT_EXIT_CODE = 3

logger = logging.getLogger("hardcover_sync")


class SyncAborted(click.ClickException):
    exit_code = ABORT_EXIT_CODE


def configure_logging(debug):
    """Routes package logs to stdout, DEBUG when `debug` is set and WARNING otherwise."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)


@click.command(
    name="hardcover-data-sync",
    help="Download all user data from Hardcover into a folder for backup",
)
@click.option("--debug", is_flag=True, hidden=True)
@click.option(
    "--bearer",
    metavar="TOKEN",
    required=True,
    envvar="HARDCOVER_TOKEN",
    help="Bearer token for HTTP 'Authorization' header",
)
@click.argument("output_dir", metavar="DIR", type=click.Path(file_okay=False, path_type=Path))
@click.pass_context
def main(ctx, debug, bearer, output_dir):
    """Entry point of the hardcover-data-sync command."""
    configure_logging(debug)

    try:
        result = run_sync(bearer, output_dir, debug=debug)
    except GraphQLResponseError as e:
        click.echo(e.errors_json(), err=True)
        ctx.exit(1)
    except (HardcoverSyncError, OSError) as e:
        raise SyncAborted(str(e)) from e

    click.echo(f"Done at {result.finished_at.isoformat()} took {format_duration(result.took)}")
