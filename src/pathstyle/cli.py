"""Command-line interface for pathstyle."""
import logging
import sys
from typing import Tuple

import click

from .core.factory import available_styles
from .core.models import Config
from .utils.console import ConsoleManager
from .utils.console_base import THEMES


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(name)s: %(message)s' if debug else '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


class Session:
    """Per-invocation state shared by the sub-commands."""

    def __init__(self, config: Config, console: ConsoleManager):
        self.config = config
        self.console = console
        self.style = config.path_style()


pass_session = click.make_pass_decorator(Session)


@click.group()
@click.option('--style', '-s', type=click.Choice(available_styles(), case_sensitive=False),
              help='Path syntax to use (default: $PATHSTYLE_STYLE or posix)')
@click.option('--theme', '-t', type=click.Choice(list(THEMES)), help='Terminal color theme')
@click.option('--plain', is_flag=True, help='Disable colored output')
@click.option('--debug', is_flag=True, help='Log debug information to stderr')
@click.version_option(package_name='pathstyle')
@click.pass_context
def main(ctx: click.Context, style: str, theme: str, plain: bool, debug: bool) -> None:
    """
    Manipulate POSIX and Windows path strings without touching the disk.

    Examples:

        pathstyle normalize a/./b/../c

        pathstyle --style nt long 'C:\\a\\..\\b'

        pathstyle join /usr/ /local/ bin
    """
    config = Config(debug=debug)
    setup_logging(config.debug)

    if style:
        config.style = style
    if theme:
        config.theme = theme

    console = ConsoleManager(theme=config.theme, force_plain=plain)
    try:
        ctx.obj = Session(config, console)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--style' / PATHSTYLE_STYLE")


@main.command()
@click.argument('path')
@pass_session
def normalize(session: Session, path: str) -> None:
    """Collapse separators, '.' and '..' segments in PATH."""
    session.console.print_result(session.style.normalize(path))


@main.command()
@click.argument('parts', nargs=-1)
@pass_session
def join(session: Session, parts: Tuple[str, ...]) -> None:
    """Join PARTS with single separators (no normalization)."""
    session.console.print_result(session.style.join(*parts))


@main.command()
@click.argument('root')
@click.argument('path')
@pass_session
def resolve(session: Session, root: str, path: str) -> None:
    """Resolve PATH against ROOT."""
    session.console.print_result(session.style.resolve(root, path))


@main.command()
@click.argument('path')
@pass_session
def dirname(session: Session, path: str) -> None:
    """Print the directory portion of PATH."""
    session.console.print_result(session.style.dirname(path))


@main.command()
@click.argument('path')
@click.option('--ext', '-e', help='Extension to strip from the result')
@pass_session
def basename(session: Session, path: str, ext: str) -> None:
    """Print the last segment of PATH."""
    session.console.print_result(session.style.basename(path, ext))


@main.command()
@click.argument('path')
@pass_session
def extname(session: Session, path: str) -> None:
    """Print the extension of PATH."""
    session.console.print_result(session.style.extname(path))


@main.command('is-absolute')
@click.argument('path')
@click.pass_context
def is_absolute(ctx: click.Context, path: str) -> None:
    """Print whether PATH is absolute; exit status 1 when it is not."""
    session = ctx.find_object(Session)
    absolute = session.style.is_absolute(path)
    session.console.print_result('true' if absolute else 'false')
    ctx.exit(0 if absolute else 1)


@main.command()
@click.argument('path', required=False)
@pass_session
def root(session: Session, path: str) -> None:
    """Print the root of PATH, or the style's default root."""
    session.console.print_result(session.style.get_root(path))


@main.command()
@pass_session
def sep(session: Session) -> None:
    """Print the path separator."""
    session.console.print_result(session.style.get_sep())


@main.command('long')
@click.argument('path')
@pass_session
def make_long(session: Session, path: str) -> None:
    """Print the long-path form of PATH (Windows only; unchanged on POSIX)."""
    session.console.print_result(session.style.make_long(path))


@main.command()
@click.argument('path')
@pass_session
def inspect(session: Session, path: str) -> None:
    """Show the result of every operation for PATH."""
    style = session.style
    rows = [
        ('style', session.config.style),
        ('absolute', 'true' if style.is_absolute(path) else 'false'),
        ('root', style.get_root(path)),
        ('normalize', style.normalize(path)),
        ('dirname', style.dirname(path)),
        ('basename', style.basename(path)),
        ('extname', style.extname(path)),
        ('long', style.make_long(path)),
    ]
    session.console.print_table(path, rows)


if __name__ == '__main__':
    main()
