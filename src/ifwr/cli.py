"""Click entry point."""

import sys

import click

from ifwr import __version__, supervisor
from ifwr.config import Configuration


@click.command(
    context_settings={"allow_interspersed_args": False},
    epilog="Both -1 and -2 may be set. If neither are specified, -2 is set implicitly.",
)
@click.version_option(version=__version__, prog_name="ifwr")
@click.option("-1", "track_stdout", is_flag=True, help="Fail if stdout is written")
@click.option("-2", "track_stderr", is_flag=True, help="Fail if stderr is written")
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx, track_stdout, track_stderr, command):
    """Run COMMAND and fail if it writes to stdout or stderr.

    Output is passed through unchanged. If COMMAND exits non-zero, that
    code is returned. If it exits 0 but wrote to a watched stream, the
    exit code is 255. If it cannot be run, the exit code is 254.
    """
    if not command:
        click.echo("No command given", err=True)
        click.echo(ctx.get_help(), err=True)
        sys.exit(2)
    config = Configuration.from_flags(track_stdout, track_stderr, command)
    code = supervisor.run(config)
    sys.exit(code)


if __name__ == "__main__":
    main()
