"""Main CLI entry point for the eadrone package."""

import click
import logging
from pathlib import Path
from typing import Optional, Tuple

from ..configs.config_loader import config_loader
from ..core.mission import evaluate_mission, format_breakdown, format_report
from ..core.optimizer import InvalidModelParameters
from ..core.waypoints import parse_coordinates
from ..data.loaders import load_waypoints


@click.group()
@click.version_option(package_name='eadrone')
@click.pass_context
def main(ctx):
    """EAD - Energy Aware Drone

    Total route distance and energy estimate for a drone flying through
    an ordered sequence of 3D waypoints.
    """
    ctx.ensure_object(dict)


@main.command()
@click.option('--config', '-C', 'config_name',
              default='reference',
              help='Built-in scenario name or path to a JSON scenario file (default: reference)')
@click.option('--waypoints', '-w', 'waypoints_file',
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='JSON, CSV or TSV file with waypoints, replacing the scenario route')
@click.option('--point', '-p', 'points', multiple=True,
              help='Route waypoint as x,y,z; repeat in flight order to replace the scenario route')
@click.option('-a', type=float, help='Override velocity coefficient a')
@click.option('-b', type=float, help='Override altitude coefficient b')
@click.option('-c', type=float, help='Override baseline coefficient c')
@click.option('--breakdown', is_flag=True,
              help='Also print distance and energy per route segment')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose logging')
@click.option('--list-configs', is_flag=True,
              help='List all available built-in scenarios')
def run(config_name: str, waypoints_file: Optional[Path], points: Tuple[str, ...],
        a: Optional[float], b: Optional[float], c: Optional[float], breakdown: bool,
        verbose: bool, list_configs: bool):
    """Estimate distance and energy for a waypoint mission.

    Examples:

    \b
    # Reference scenario
    eadrone run

    \b
    # Own route with a different velocity coefficient
    eadrone run --waypoints route.csv -a 0.2

    \b
    # Inline route
    eadrone run --point 0,0,100 --point 100,100,150
    """
    if list_configs:
        click.echo("Built-in scenarios:")
        for name, desc in config_loader.list_configs():
            click.echo(f"  {name}: {desc}")
        return

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    logger = logging.getLogger(__name__)

    if waypoints_file and points:
        raise click.UsageError("Use either --waypoints or --point, not both")

    try:
        config = config_loader.load_config(config_name)
        if waypoints_file:
            config.waypoints = load_waypoints(waypoints_file)
        elif points:
            config.waypoints = tuple(parse_coordinates(p) for p in points)
        config = config.with_coefficients(a=a, b=b, c=c)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e))

    logger.debug(f"Scenario '{config.name}': {len(config.waypoints)} waypoints, "
                 f"a={config.coefficients.a}, b={config.coefficients.b}, c={config.coefficients.c}")

    try:
        report = evaluate_mission(config.waypoints, config.coefficients)
    except InvalidModelParameters as e:
        raise click.ClickException(str(e))

    for line in format_report(report):
        click.echo(line)

    if breakdown:
        for line in format_breakdown(report):
            click.echo(line)


@main.command()
def version():
    """Show version information."""
    from ..__version__ import __version__
    click.echo(f"eadrone version {__version__}")


if __name__ == '__main__':
    main()
