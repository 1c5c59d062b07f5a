"""
lambert_et CLI Interface

Command-line interface for single-point latent heat flux estimates.
"""

import sys
import click

from lambert_et import __version__
from lambert_et.config.settings import (
    DEFAULT_LOG_LEVEL,
    VERBOSE_LOG_LEVEL,
    DEFAULT_PRESSURE,
    DEFAULT_STORAGE_CONDUCTANCE,
    DEFAULT_RADIATIVE_CONDUCTANCE,
    OUTPUT_PRECISION,
)
from lambert_et.core.humidity import calc_q_sat
from lambert_et.et.analytical_et import estimate_ET, estimate_ET_and_Ts
from lambert_et.utils.exceptions import LambertETError, create_error_context
from lambert_et.utils.logger import Logger


def _format(value: float) -> str:
    return f"{value:.{OUTPUT_PRECISION}g}"


def _fail(error: LambertETError, context: dict) -> None:
    """Report a library error and exit with status 1."""
    Logger.error(f"{type(error).__name__}: {error.message}")
    Logger.debug(f"Error context: {create_error_context(error, context)}")
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


# ============================================================================
# Main CLI Group
# ============================================================================

@click.group()
@click.option('--verbose', '-v', is_flag=True, default=False, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Custom log file path')
@click.version_option(version=__version__, prog_name='lambert-et')
@click.pass_context
def cli(ctx, verbose, log_file):
    """
    lambert-et - Latent heat flux from the Lambert W alternative to Penman-Monteith.

    \b
    Common commands:
      \b
      lambert-et estimate   Estimate latent heat flux (and surface temperature)
      lambert-et qsat       Saturation specific humidity

    For help on a specific command, run: lambert-et COMMAND --help
    """
    ctx.ensure_object(dict)

    level = VERBOSE_LOG_LEVEL if verbose else DEFAULT_LOG_LEVEL
    Logger.setup(log_file=log_file, level=level)
    Logger.debug('Verbose logging enabled')
    if log_file:
        Logger.info(f'Logging to file: {log_file}')

    ctx.obj['verbose'] = verbose


# ============================================================================
# Estimate Command
# ============================================================================

@cli.command()
@click.option('--ta', type=float, required=True, help='Near-surface air temperature (K)')
@click.option('--qa', type=float, required=True, help='Near-surface specific humidity (-)')
@click.option('--gs', type=float, required=True, help='Surface conductance (m/s)')
@click.option('--ga', type=float, required=True, help='Aerodynamic conductance (m/s)')
@click.option('--rn', type=float, required=True, help='Net radiation, Rn* if gr > 0 (W/m²)')
@click.option('--g', 'ground', type=float, required=True, help='Ground heat flux, G* if gg > 0 (W/m²)')
@click.option('--p', 'pressure', type=float, default=DEFAULT_PRESSURE, show_default=True, help='Air pressure (Pa)')
@click.option('--gg', type=float, default=DEFAULT_STORAGE_CONDUCTANCE, show_default=True, help='Storage conductance (m/s)')
@click.option('--gr', type=float, default=DEFAULT_RADIATIVE_CONDUCTANCE, show_default=True, help='Radiative conductance (m/s)')
@click.option('--surface-temperature', '-t', is_flag=True, default=False, help='Also print the surface temperature estimate')
def estimate(ta, qa, gs, ga, rn, ground, pressure, gg, gr, surface_temperature):
    """
    Estimate latent heat flux for one set of observations.

    \b
    Examples:
      \b
      lambert-et estimate --ta 293.15 --qa 0.008 --gs 0.005 --ga 0.02 --rn 200 --g 20
      lambert-et estimate --ta 293.15 --qa 0.008 --gs 0.005 --ga 0.02 --rn 180 --g 15 --gg 0.002 --gr 0.005 -t

    With --gg 0 --gr 0 (default) the radiatively uncoupled equation is
    used. With positive gg or gr, pass Rn* and G* as --rn and --g.
    """
    inputs = dict(Ta=ta, qa=qa, gs=gs, ga=ga, Rn=rn, G=ground, P=pressure, gg=gg, gr=gr)

    try:
        if surface_temperature:
            le, ts = estimate_ET_and_Ts(**inputs)
        else:
            le, ts = estimate_ET(**inputs), None
    except LambertETError as e:
        _fail(e, inputs)

    click.echo(f'LE: {_format(le)} W/m2')
    if ts is not None:
        click.echo(f'Ts: {_format(ts)} K')


# ============================================================================
# Saturation Humidity Command
# ============================================================================

@cli.command()
@click.option('--t', 'temperature', type=float, required=True, help='Air temperature (K)')
@click.option('--p', 'pressure', type=float, default=DEFAULT_PRESSURE, show_default=True, help='Air pressure (Pa)')
def qsat(temperature, pressure):
    """
    Print saturation specific humidity for a temperature and pressure.

    \b
    Example:
      lambert-et qsat --t 293.15 --p 101325
    """
    try:
        q = calc_q_sat(temperature, pressure)
    except LambertETError as e:
        _fail(e, {"T": temperature, "P": pressure})

    click.echo(f'q*: {_format(q)}')


if __name__ == '__main__':
    cli()
