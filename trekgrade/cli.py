"""
CLI interface for the grade engine.

Usage:
    trekgrade profile track.gpx
    trekgrade profile track.gpx --preset precise --output json
    trekgrade multiplier 12.5
    trekgrade presets
"""

import logging
import sys
from pathlib import Path

import click

from trekgrade.config import settings
from trekgrade.features.grade import (
    GRADE_PRESETS,
    GradeMultiplierSchema,
    GradePreset,
    GradeProfileSchema,
    GradeProfileService,
    grade_multiplier,
)
from trekgrade.services import GPXParserService
from trekgrade.shared.formatters import (
    format_confidence,
    format_distance_km,
    format_elevation,
    format_grade,
)

logger = logging.getLogger(__name__)

PRESET_CHOICES = [p.value for p in GradePreset]


def _setup_logging():
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


@click.group()
def cli():
    """Terrain grade tools."""
    _setup_logging()


@cli.command()
@click.argument("gpx_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--preset",
    default=None,
    type=click.Choice(PRESET_CHOICES),
    help="Configuration preset (default: GRADE_PRESET setting)"
)
@click.option(
    "--vertical-accuracy",
    default=None,
    type=float,
    help="Assumed vertical accuracy of GPX points in meters (negative = unknown)"
)
@click.option(
    "--output",
    default="console",
    type=click.Choice(["console", "json"]),
    help="Output format"
)
@click.option("--results/--no-results", default=False, help="Include per-pair results in JSON")
def profile(gpx_file, preset, vertical_accuracy, output, results):
    """Replay a GPX track and report grade and elevation statistics."""
    preset = GradePreset(preset) if preset else settings.grade_preset
    if vertical_accuracy is None:
        vertical_accuracy = settings.gpx_vertical_accuracy_m

    try:
        samples = GPXParserService.extract_samples(
            gpx_file.read_bytes(), vertical_accuracy=vertical_accuracy
        )
    except ValueError as e:
        raise click.ClickException(str(e))

    report = GradeProfileService(preset).analyze(samples)
    schema = GradeProfileSchema.from_profile(report, include_results=results)

    if output == "json":
        click.echo(schema.model_dump_json(indent=2))
        return

    click.echo(f"Track: {gpx_file.name} ({len(samples)} samples, preset: {preset.value})")
    click.echo("-" * 50)
    click.echo(f"Distance:        {format_distance_km(schema.distance_m / 1000)}")
    click.echo(f"Elevation gain:  {format_elevation(schema.elevation_gain_m)}")
    click.echo(f"Elevation loss:  {format_elevation(-schema.elevation_loss_m)}")
    click.echo(
        f"Average grade:   {format_grade(schema.average_grade)} "
        f"(confidence {format_confidence(schema.average_confidence)})"
    )
    click.echo(f"Grade range:     {format_grade(schema.min_grade)} .. {format_grade(schema.max_grade)}")
    click.echo(f"Grade variance:  {schema.grade_variance:.2f}")
    click.echo(f"Energy cost:     x{schema.energy_cost_index:.3f}")


@cli.command()
@click.argument("grade", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print as JSON")
def multiplier(grade, as_json):
    """Metabolic and mechanical cost multipliers for GRADE (%)."""
    result = grade_multiplier(grade)

    if as_json:
        click.echo(GradeMultiplierSchema.model_validate(result).model_dump_json(indent=2))
        return

    click.echo(f"Grade:      {format_grade(result.grade)}")
    click.echo(f"Metabolic:  x{result.metabolic_multiplier:.3f}")
    click.echo(f"Mechanical: x{result.mechanical_multiplier:.1f}")


@cli.command()
def presets():
    """List configuration presets."""
    click.echo(
        f"{'Preset':10} | {'Min dist':>8} | {'Min dElev':>9} | "
        f"{'Window':>6} | {'Max grade':>9} | {'Noise':>5}"
    )
    click.echo("-" * 64)
    for preset, config in GRADE_PRESETS.items():
        marker = "*" if preset == settings.grade_preset else " "
        click.echo(
            f"{preset.value:9}{marker} | {config.min_distance_for_grade:>7.1f}m | "
            f"{config.min_elevation_change:>8.2f}m | {config.smoothing_window_size:>6} | "
            f"{config.max_grade_percent:>8.0f}% | {config.grade_noise_threshold:>4.1f}m"
        )


if __name__ == "__main__":
    cli()
