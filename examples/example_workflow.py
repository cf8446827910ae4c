"""
Example workflow demonstrating the sitepattern pipeline.

This script shows how to:
1. Load site locations from CSV
2. Validate the site table and derive an analysis window
3. Compute the observed average nearest-neighbour distance
4. Run the Monte Carlo significance test
5. Summarize and plot the result
6. Estimate a kernel density surface
7. Export results and a run manifest
"""

import logging
from pathlib import Path

from sitepattern import export, geometry, io, stats, viz
from sitepattern.params import SimulationParameters

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    """Run the example workflow."""

    params = SimulationParameters(trials=1000, seed=42, n_jobs=4, window_buffer=500.0)

    # ==================== 1. Load Data ====================
    logger.info("Step 1: Loading site locations")

    input_file = "data/sites.csv"  # Replace with your file
    sites = io.load_sites(input_file)

    # ==================== 2. Validate & Derive Window ====================
    logger.info("Step 2: Validating sites and deriving the analysis window")

    is_valid, messages = io.validate_sites(sites)
    if not is_valid:
        logger.error("Validation failed!")
        for msg in messages:
            logger.error(msg)
        return

    points = io.sites_to_points(sites)
    window = geometry.Window.from_points(points, buffer=params.window_buffer)

    # ==================== 3. Observed ANN ====================
    logger.info("Step 3: Computing observed ANN")

    observed = stats.compute_ann(points)
    logger.info(f"Observed ANN: {observed:.2f}")

    # ==================== 4. Monte Carlo Test ====================
    logger.info("Step 4: Simulating random site placements")

    result = stats.run_significance_test(
        points,
        window,
        trials=params.trials,
        seed=params.seed,
        n_jobs=params.n_jobs,
    )

    # ==================== 5. Summarize & Plot ====================
    logger.info("Step 5: Summarizing")

    summary = stats.summarize_test(result, points=points)
    logger.info(
        f"Observed ANN is at percentile {summary['percentile_rank']:.1f}; "
        f"Clark-Evans R = {summary['clark_evans']['clark_evans_r']:.3f}"
    )

    output_dir = Path("results")
    output_dir.mkdir(parents=True, exist_ok=True)

    fig = viz.plot_null_distribution(result)
    fig.savefig(output_dir / "null_distribution.png", dpi=150, bbox_inches="tight")

    site_fig = viz.plot_sites(points, window=window)
    site_fig.write_html(str(output_dir / "sites.html"))

    # ==================== 6. Density Surface ====================
    logger.info("Step 6: Estimating site density")

    X, Y, Z = stats.kernel_density_surface(
        points, window, bandwidth=params.kde_bandwidth, gridsize=params.kde_gridsize
    )
    density_fig = viz.plot_density_surface(X, Y, Z, points=points, window=window)
    density_fig.savefig(output_dir / "density.png", dpi=150, bbox_inches="tight")

    # ==================== 7. Export Results ====================
    logger.info("Step 7: Exporting results")

    export.export_all(result, summary, str(output_dir))

    manifest = export.create_manifest(
        result,
        input_files=[input_file],
        parameters=params.to_dict(),
        summary=summary,
    )
    export.save_manifest(manifest, str(output_dir / "run_manifest.json"))

    logger.info("Workflow complete!")
    logger.info(f"Results exported to {output_dir}/")


if __name__ == "__main__":
    main()
