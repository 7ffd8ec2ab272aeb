"""
Advent Harness CLI.

Runs puzzle units for a year, downloading and caching each day's input.
"""

import json
from pathlib import Path
from typing import Optional, Tuple

import click

from . import __version__
from .config import CACHE_DIR, DB_PATH, DEFAULT_GROUP, FIRST_UNIT, LAST_UNIT
from .db import RunHistory
from .fetch import ArtifactFetcher, Environment, SessionError, forget_session
from .log import configure_logging
from .runner import STATUS_FAILED, STATUS_OK, InvalidRange, RangeRunner, validate_range
from .schemas import RunReport, UnitRunInfo
from .solutions import GROUPS, build_registry


def prompt_for_session() -> Optional[str]:
    click.echo(
        "In order to download the inputs from the Advent of Code website, "
        "this program requires your session cookie."
    )
    click.echo(
        "Please log into the Advent of Code website, then check your browser "
        "cookies and enter the value of the 'session' cookie now."
    )
    return click.prompt("Session cookie", default="", show_default=False)


def resolve_range(first: Optional[int], last: Optional[int]) -> Tuple[int, int]:
    """No bounds means every day, one bound means that day only."""
    if first is None:
        return FIRST_UNIT, LAST_UNIT
    if last is None:
        return first, first
    return first, last


year_option = click.option(
    "-y", "--year", default=DEFAULT_GROUP, show_default=True, help="Year (group) of puzzles to run."
)


@click.group()
@click.version_option(__version__)
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=CACHE_DIR,
    show_default=True,
    help="Directory holding cached inputs and the session token.",
)
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="SQLite file recording run history. Defaults to history.db in the cache directory.",
)
@click.option("-q", "--quiet", count=True, help="Decrease verbosity.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity.")
@click.pass_context
def cli(ctx, cache_dir, db_path, quiet, verbose):
    """Advent Harness - run two-part daily puzzles against your inputs."""
    ctx.ensure_object(dict)
    ctx.obj["cache_dir"] = cache_dir
    if db_path is None:
        db_path = DB_PATH if cache_dir == CACHE_DIR else cache_dir / "history.db"
    ctx.obj["db_path"] = db_path
    configure_logging(verbose - quiet)


@cli.command()
@click.argument("first", type=int, required=False)
@click.argument("last", type=int, required=False)
@year_option
@click.option("--no-trial", is_flag=True, help="Skip the self-test against example input.")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON report to stdout.")
@click.option("--no-history", is_flag=True, help="Don't record this run.")
@click.pass_context
def run(ctx, first, last, year, no_trial, as_json, no_history):
    """Run days FIRST to LAST (default: every day).

    Each day is first checked against its example, if it has one, then run
    against the real input, which is downloaded on first use.
    """
    first, last = resolve_range(first, last)
    try:
        validate_range(first, last)
    except InvalidRange as e:
        raise click.BadParameter(str(e), param_hint="FIRST/LAST") from e
    registry = build_registry(year)
    try:
        env = Environment.initialise(ctx.obj["cache_dir"], prompt=prompt_for_session)
    except SessionError as e:
        raise click.ClickException(e.message) from e

    echo = (lambda s: click.echo(s, err=True)) if as_json else click.echo
    history = None if no_history else RunHistory(ctx.obj["db_path"])
    try:
        with ArtifactFetcher(env) as fetcher:
            runner = RangeRunner(
                registry,
                fetcher,
                trial=not no_trial,
                echo=echo,
                history=history,
                group=year,
            )
            outcomes = runner.run(first, last)
    finally:
        if history is not None:
            history.close()

    if as_json:
        click.echo(RunReport.from_outcomes(year, outcomes).model_dump_json(indent=2))


@cli.command()
@click.argument("first", type=int, required=False)
@click.argument("last", type=int, required=False)
@year_option
def trial(first, last, year):
    """Check days FIRST to LAST against their examples only."""
    first, last = resolve_range(first, last)
    runner = RangeRunner(build_registry(year))
    try:
        outcomes = runner.trial_range(first, last)
    except InvalidRange as e:
        raise click.BadParameter(str(e), param_hint="FIRST/LAST") from e
    if any(o.status == STATUS_FAILED for o in outcomes):
        raise SystemExit(1)


@cli.command()
@year_option
def units(year):
    """List the days implemented for a year."""
    registry = build_registry(year)
    if not len(registry):
        known = ", ".join(sorted(GROUPS)) or "none"
        click.echo(f"No units registered for {year} (known years: {known})")
        return
    for number in registry.numbers():
        unit = registry.create(number)
        click.echo(f"{number:2d}  {unit.title or type(unit).__name__}")


@cli.command()
@click.option("-y", "--year", default=None, help="Only show this year.")
@click.option("-d", "--day", type=int, default=None, help="Only show this day.")
@click.option("-n", "--limit", type=int, default=20, show_default=True)
@click.option("--best", is_flag=True, help="Show the fastest successful run of each day instead.")
@click.option("--json", "as_json", is_flag=True, help="Print JSON.")
@click.pass_context
def history(ctx, year, day, limit, best, as_json):
    """Show recent runs, or the fastest run of each day with --best."""
    store = RunHistory(ctx.obj["db_path"])
    try:
        if best:
            group = year or DEFAULT_GROUP
            days = [day] if day is not None else range(FIRST_UNIT, LAST_UNIT + 1)
            found = [store.best(group, n) for n in days]
            runs = [r for r in found if r is not None]
        else:
            runs = store.recent(limit, group=year, unit=day)
        rows = [UnitRunInfo.model_validate(r) for r in runs]
    finally:
        store.close()

    if as_json:
        click.echo(json.dumps([r.model_dump(mode="json") for r in rows], indent=2))
        return
    if not rows:
        click.echo("No runs recorded.")
        return
    for r in rows:
        when = r.created_at.strftime("%Y-%m-%d %H:%M:%S")
        if r.status == STATUS_OK:
            click.echo(
                f"{when}  {r.group} day {r.unit:2d}  "
                f"part 1: {r.part1} ({r.part1_ms} ms)  part 2: {r.part2} ({r.part2_ms} ms)"
            )
        else:
            click.echo(f"{when}  {r.group} day {r.unit:2d}  {r.status}: {r.error}")


@cli.command()
@click.pass_context
def logout(ctx):
    """Delete the stored session cookie."""
    if forget_session(ctx.obj["cache_dir"]):
        click.echo("Session cookie removed.")
    else:
        click.echo("No session cookie stored.")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
