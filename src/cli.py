"""Command-line interface for the SkyCMS Tailwind distribution builder."""

import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger

from src.bundler import run_build
from src.config_loader import load_config, ensure_directories
from src.errors import BuildError, EXIT_FAILURE


def setup_logging(config: dict):
    """Setup logging configuration."""
    log_config = config.get("logging", {})
    level = log_config.get("level", "INFO")
    log_file = log_config.get("file", "logs/skycms-build.log")

    # Ensure log directory exists
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(
        sys.stdout,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | {message}",
    )
    logger.add(
        log_file,
        level=level,
        rotation=log_config.get("rotation", "1 week"),
        retention=log_config.get("retention", "1 month"),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} | {message}",
    )


@click.group()
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, config: Optional[str], verbose: bool):
    """SkyCMS Tailwind - self-hosted Tailwind runtime and theme distribution."""
    ctx.ensure_object(dict)

    try:
        cfg = load_config(config)
        if verbose:
            cfg.setdefault("logging", {})["level"] = "DEBUG"
        ctx.obj["config"] = cfg
        ctx.obj["config_path"] = config

        ensure_directories(cfg)
        setup_logging(cfg)

    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(EXIT_FAILURE)


@cli.command()
@click.option(
    "--root",
    "project_root",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory holding tailwind.js and tailwind-config.js",
)
@click.pass_context
def build(ctx, project_root: Optional[str]):
    """Build the SkyCMS Tailwind distribution into dist/skycms."""
    config = ctx.obj["config"]

    try:
        result = run_build(config=config, project_root=project_root)
    except BuildError as e:
        logger.error(f"Build failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_FAILURE)
    except Exception as e:
        logger.exception("Build failed")
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_FAILURE)

    files = result["files"]
    click.echo(f"\n{'='*60}")
    click.echo("BUILD COMPLETE")
    click.echo("="*60)
    click.echo(f"Output directory: {result['output_dir_name']}")
    click.echo("\nDistribution files:")
    click.echo(f"  - {Path(files['runtime']).name} (with banner)")
    click.echo(f"  - {Path(files['config']).name} (minified + banner)")
    click.echo(f"  - {Path(files['bundle']).name} (minified + banner)")
    click.echo(f"  - {Path(files['readme']).name}")
    click.echo(f"  - {Path(files['example']).name}")
    click.echo("\nNext steps:")
    click.echo(f"  1. Deploy {result['output_dir_name']}/ to your web server")
    click.echo(f"  2. Use {Path(files['example']).name} as your SkyCMS page template")
    click.echo("  3. Configure cache headers for optimal performance")
    click.echo("="*60)


if __name__ == "__main__":
    cli()
