#!/usr/bin/env python3
"""
Command-line interface for versionbanner.
"""

import click
import logging
import sys
import yaml
from rich.console import Console
from rich.markup import escape

from .config import Config
from .constants import DEMO_OPTIONS
from .utils import logger
from .banner import version

console = Console()


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True), help='Config file path')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Quiet output')
@click.pass_context
def cli(ctx, config, verbose, quiet):
    """versionbanner - Version information for command line programs"""
    ctx.ensure_object(dict)
    ctx.obj['config'] = Config(config)

    if verbose:
        logger.setLevel('DEBUG')
    elif quiet:
        logger.setLevel('ERROR')
    else:
        level = ctx.obj['config'].config.logging.level.upper()
        logger.setLevel(getattr(logging, level, logging.INFO))


@cli.command()
@click.option('--app-version', help='Version of the program')
@click.option('--copyright-name', help='Copyright holder')
@click.option('--license-url', help='Website where the license can be found')
@click.option('--cr-year', help='Year(s) the copyright applies from')
@click.pass_context
def show(ctx, app_version, copyright_name, license_url, cr_year):
    """Show the version banner."""
    options = ctx.obj['config'].version_options(
        version=app_version,
        copyright_name=copyright_name,
        license_url=license_url,
        cr_year=cr_year,
    )
    # Banner text contains '<...>' and '[DEFAULT]' so skip rich markup
    console.print(version(options), markup=False, highlight=False, soft_wrap=True)


@cli.command()
def demo():
    """Show the default and a customised banner."""
    console.print("\nDEFAULT OUTPUT:")
    console.print(version(), markup=False, highlight=False, soft_wrap=True)

    console.print("CUSTOMISED OUTPUT:")
    console.print(version(DEMO_OPTIONS), markup=False, highlight=False, soft_wrap=True)


@cli.command()
@click.option('--output', '-o', type=click.Path(), help='Output file path')
@click.pass_context
def config(ctx, output):
    """Show or save configuration."""
    config = ctx.obj['config']

    if output:
        saved = config.save(output)
        console.print(f"[green]✓[/green] Configuration saved to {escape(str(saved))}", soft_wrap=True)
    else:
        console.print(yaml.dump(config.config_data, default_flow_style=False), markup=False, soft_wrap=True)


def main():
    """Main entry point."""
    try:
        cli(obj={})
    except Exception as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
