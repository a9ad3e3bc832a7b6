#!/usr/bin/env python
import click
import logging

from .logging_setup import setup_logging
from . import CONFIG_DIR, CONFD_PATH, DEPRECATED_CONFIG, ConfigError
from .config import (
    SettingsStore,
    available_integration_configs,
    build_logs_agent_integrations_config,
    get_logs_sources,
)


@click.group()
def cli():
    """Logs Agent Command-Line Interface Tool"""
    pass


@cli.command()
@click.option("--conf-path", default=CONFD_PATH, show_default=True, help="Directory holding the integration YAML files.")
@click.option("-V", "--verbose", is_flag=True, help="Enable verbose (DEBUG level) logging.")
@click.pass_context
def check(ctx, conf_path, verbose):
    """Loads and validates all integration configs."""
    log_level = logging.DEBUG if verbose else logging.INFO
    setup_logging(CONFIG_DIR, level=log_level)
    logger = logging.getLogger("logs_agent")

    store = SettingsStore()
    try:
        build_logs_agent_integrations_config(store, conf_path, DEPRECATED_CONFIG)
    except ConfigError as e:
        logger.error(f"Integrations config in '{conf_path}' is invalid: {e}")
        click.echo(click.style(f"Configuration Error: {e}", fg="red"))
        ctx.exit(1)

    sources = get_logs_sources(store)
    click.echo(click.style(f"Configuration is valid: {len(sources)} log sources", fg="green"))
    for source in sources:
        target = source.path if source.path else f"port {source.port}"
        click.echo(
            f"  - {source.type:<4} {target}  service={source.service or '-'} "
            f"rules={len(source.processing_rules)} tags={source.tags_payload.decode('utf-8')}"
        )


@cli.command(name="list")
@click.option("--conf-path", default=CONFD_PATH, show_default=True, help="Directory holding the integration YAML files.")
@click.pass_context
def list_integrations(ctx, conf_path):
    """Lists the integration configs that would be loaded."""
    try:
        names = available_integration_configs(conf_path, DEPRECATED_CONFIG)
    except ConfigError as e:
        click.echo(click.style(f"Configuration Error: {e}", fg="red"))
        ctx.exit(1)

    if not names:
        click.echo(f"No integration configs found in '{conf_path}'.")
        return

    click.echo(f"{'INTEGRATION':<30} | FILE")
    click.echo("-" * 60)
    for name in names:
        click.echo(f"{name:<30} | {name}.yaml")


if __name__ == "__main__":
    cli()
