"""Command-line interface for sitepattern."""

import logging
import sys
from pathlib import Path

import click

from . import __version__, export, io, stats, viz
from .exceptions import SitePatternError
from .geometry import Window
from .params import SimulationParameters, validate_parameters


# Configure logging
def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _fail(message: str):
    click.echo(f"ERROR: {message}", err=True)
    sys.exit(1)


def _check_sites(sites, window=None):
    is_valid, messages = io.validate_sites(sites, window=window)
    if not is_valid:
        _fail("; ".join(msg for msg in messages if msg.startswith("ERROR")))


def _load_sites(sites_file, x_col, y_col):
    sites = io.load_sites(sites_file, x_col=x_col, y_col=y_col)
    _check_sites(sites)
    return sites


def _load_points(sites_file, x_col, y_col):
    return io.sites_to_points(_load_sites(sites_file, x_col, y_col))


def _resolve_window(points, bounds, buffer):
    if bounds:
        return Window.from_bounds(*bounds)
    return Window.from_points(points, buffer=buffer)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(verbose):
    """sitepattern: nearest-neighbour tests for archaeological site patterns."""
    setup_logging(verbose)


@main.command()
@click.argument("sites_file", type=click.Path(exists=True))
@click.option("--x-col", default=None, help="X coordinate column [default: auto-detect]")
@click.option("--y-col", default=None, help="Y coordinate column [default: auto-detect]")
def ann(sites_file, x_col, y_col):
    """
    Compute the average nearest-neighbour distance of a site table.

    SITES_FILE: Path to CSV file with site coordinates
    """
    try:
        points = _load_points(sites_file, x_col, y_col)
        value = stats.compute_ann(points)
    except (SitePatternError, ValueError) as e:
        _fail(str(e))

    click.echo(f"Sites: {len(points)}")
    click.echo(f"Observed ANN: {value:.4f}")


@main.command()
@click.argument("sites_file", type=click.Path(exists=True))
@click.option("--trials", type=int, default=1000, help="Number of simulations")
@click.option("--seed", type=int, default=None, help="Random seed")
@click.option("--n-jobs", type=int, default=1, help="Worker threads for simulations")
@click.option("--buffer", type=float, default=0.0, help="Buffer added around the site extent")
@click.option(
    "--bounds",
    type=float,
    nargs=4,
    default=None,
    metavar="XMIN XMAX YMIN YMAX",
    help="Explicit window bounds [default: site extent]",
)
@click.option("--x-col", default=None, help="X coordinate column [default: auto-detect]")
@click.option("--y-col", default=None, help="Y coordinate column [default: auto-detect]")
@click.option("--output-dir", "-o", type=click.Path(), default=None, help="Output directory")
@click.option("--plot", is_flag=True, help="Save a histogram of the null distribution")
def simulate(
    sites_file, trials, seed, n_jobs, buffer, bounds, x_col, y_col, output_dir, plot
):
    """
    Run the Monte Carlo nearest-neighbour test.

    SITES_FILE: Path to CSV file with site coordinates
    """
    logger = logging.getLogger(__name__)

    params = SimulationParameters(
        trials=trials, seed=seed, n_jobs=n_jobs, window_buffer=buffer
    )
    is_valid, errors = validate_parameters(params)
    if not is_valid:
        _fail("; ".join(errors))
    if plot and output_dir is None:
        _fail("--plot requires --output-dir")

    try:
        sites = _load_sites(sites_file, x_col, y_col)
        points = io.sites_to_points(sites)
        window = _resolve_window(points, bounds, params.window_buffer)
        _check_sites(sites, window=window)
        result = stats.run_significance_test(
            points,
            window,
            trials=params.trials,
            seed=params.seed,
            n_jobs=params.n_jobs,
        )
        summary = stats.summarize_test(result, points=points)
    except (SitePatternError, ValueError) as e:
        _fail(str(e))

    click.echo("\n=== Nearest-Neighbour Test ===")
    click.echo(f"Sites: {result.n_points}")
    click.echo(f"Simulations: {result.trials} (seed {result.seed})")
    click.echo(f"Observed ANN: {summary['observed_ann']:.4f}")
    click.echo(
        f"Simulated ANN: mean {summary['null']['mean']:.4f}, "
        f"95% range [{summary['null']['percentile_2_5']:.4f}, "
        f"{summary['null']['percentile_97_5']:.4f}]"
    )
    click.echo(f"Percentile rank: {summary['percentile_rank']:.1f}")
    click.echo(
        f"p (clustered): {summary['p_values']['clustered']:.4f}  "
        f"p (dispersed): {summary['p_values']['dispersed']:.4f}"
    )
    click.echo(f"Clark-Evans R: {summary['clark_evans']['clark_evans_r']:.4f}")

    if output_dir is None:
        return

    exported = export.export_all(result, summary, output_dir)

    if plot:
        fig = viz.plot_null_distribution(result)
        plot_file = Path(output_dir) / "null_distribution.png"
        fig.savefig(plot_file, dpi=150, bbox_inches="tight")
        exported["plot"] = str(plot_file)

    manifest = export.create_manifest(
        result,
        input_files=[sites_file],
        parameters=params.to_dict(),
        summary=summary,
    )
    manifest_file = Path(output_dir) / "run_manifest.json"
    export.save_manifest(manifest, str(manifest_file))
    logger.info(f"Outputs written to {output_dir}")

    click.echo("\n=== Exported Files ===")
    for key, path in exported.items():
        click.echo(f"  {key}: {path}")
    click.echo(f"  manifest: {manifest_file}")


@main.command()
@click.argument("sites_file", type=click.Path(exists=True))
@click.option("--output", "-o", type=click.Path(), required=True, help="Output PNG file")
@click.option("--bandwidth", type=float, default=None, help="Kernel bandwidth [default: Scott's rule]")
@click.option("--gridsize", type=int, default=200, help="Grid cells per axis")
@click.option("--buffer", type=float, default=0.0, help="Buffer added around the site extent")
@click.option("--x-col", default=None, help="X coordinate column [default: auto-detect]")
@click.option("--y-col", default=None, help="Y coordinate column [default: auto-detect]")
def density(sites_file, output, bandwidth, gridsize, buffer, x_col, y_col):
    """
    Plot a kernel density surface of site locations.

    SITES_FILE: Path to CSV file with site coordinates
    """
    try:
        points = _load_points(sites_file, x_col, y_col)
        window = Window.from_points(points, buffer=buffer)
        X, Y, Z = stats.kernel_density_surface(
            points, window, bandwidth=bandwidth, gridsize=gridsize
        )
    except (SitePatternError, ValueError) as e:
        _fail(str(e))

    fig = viz.plot_density_surface(X, Y, Z, points=points, window=window)
    fig.savefig(output, dpi=150, bbox_inches="tight")

    click.echo(f"Density surface: {output}")


if __name__ == "__main__":
    main()
