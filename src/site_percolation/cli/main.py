"""
Command-line interface for site_percolation.

Commands:
    site-perc demo                                   - Replay the 3x3 example grid
    site-perc open -n 5 --site 1 1 --site 2 1 --show - Open sites and print the grid
    site-perc stats -n 200 -t 100 --seed 42          - Monte-Carlo threshold estimate
    site-perc stats --config config/stats_example.yaml
"""

import click


def _render_grid(perc) -> str:
    """ASCII rendering: '#' blocked, '.' open, '*' full."""
    rows = []
    for i in range(1, perc.n + 1):
        row = []
        for j in range(1, perc.n + 1):
            if perc.is_full(i, j):
                row.append('*')
            elif perc.is_open(i, j):
                row.append('.')
            else:
                row.append('#')
        rows.append(''.join(row))
    return '\n'.join(rows)


def _percolation_status(perc) -> str:
    return "Percolated" if perc.percolates() else "Not percolated"


@click.group()
@click.version_option(package_name='site_percolation')
def cli():
    """Site Percolation - connectivity tracking and threshold estimation."""
    pass


@cli.command('demo')
def demo():
    """Open a fixed sequence on a 3x3 grid and report percolation."""
    from ..percolation import Percolation

    perc = Percolation(3)
    for i, j in [(1, 1), (2, 1), (2, 3), (3, 3)]:
        perc.open(i, j)
    click.echo(_percolation_status(perc))

    perc.open(2, 2)
    click.echo(_percolation_status(perc))


@cli.command('open')
@click.option('-n', 'n', required=True, type=int, help='Grid side length')
@click.option('--site', '-s', 'sites', multiple=True, type=(int, int),
              help='Site to open as ROW COL (1-based, repeatable)')
@click.option('--show/--no-show', default=False, help='Print the grid after opening')
def open_sites(n, sites, show):
    """Open sites on a fresh N-by-N grid."""
    from ..percolation import Percolation, InvalidGridSizeError, SiteOutOfRangeError

    try:
        perc = Percolation(n)
    except InvalidGridSizeError as e:
        raise click.BadParameter(str(e), param_hint='-n')

    for i, j in sites:
        try:
            perc.open(i, j)
        except SiteOutOfRangeError as e:
            raise click.BadParameter(f"({i}, {j}): {e}", param_hint='--site')

    click.echo(f"Opened {perc.number_of_open_sites()} of {n * n} sites")
    if show:
        click.echo(_render_grid(perc))
    click.echo(_percolation_status(perc))


@cli.command('stats')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='Run config YAML (overrides the options below)')
@click.option('-n', 'n', type=int, help='Grid side length')
@click.option('--trials', '-t', type=int, help='Number of trials')
@click.option('--seed', type=int, help='Random seed')
@click.option('--confidence', default=0.95, show_default=True, help='Confidence level')
@click.option('--output', '-o', 'output_file', type=click.Path(),
              help='CSV file for per-trial thresholds')
@click.option('--verbose/--quiet', default=False, help='Print trial progress')
def stats(config_file, n, trials, seed, confidence, output_file, verbose):
    """Estimate the percolation threshold by Monte-Carlo simulation."""
    from ..simulation import StatsConfig, PercolationStats

    if config_file:
        try:
            config = StatsConfig.from_yaml(config_file)
            runner = config.build_stats()
        except ValueError as e:
            raise click.UsageError(f"{config_file}: {e}")
        click.echo(f"Run: {config.run_name}")
        if output_file is None and config.output_csv is not None:
            output_file = config.output_csv
    else:
        if n is None or trials is None:
            raise click.UsageError("Either --config or both -n and --trials are required")
        try:
            runner = PercolationStats(n, trials, seed=seed, confidence=confidence)
        except ValueError as e:
            raise click.UsageError(str(e))

    click.echo(f"Running {runner.trials} trials on a {runner.n}x{runner.n} grid")
    runner.run(verbose=verbose)

    summary = runner.summary()
    click.echo(f"mean                    = {summary['mean']}")
    click.echo(f"stddev                  = {summary['stddev']}")
    click.echo(f"{summary['confidence']:.0%} confidence interval = "
               f"[{summary['confidence_lo']}, {summary['confidence_hi']}]")
    click.echo(f"elapsed                 = {summary['elapsed_seconds']:.2f}s")

    if output_file:
        saved = runner.save(output_file)
        click.echo(f"✓ Saved thresholds to {saved}")


if __name__ == '__main__':
    cli()
