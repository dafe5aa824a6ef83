"""
regen — CLI entrypoint.

Usage:
    python -m regen.main --help
    python -m regen.main build grammars --ext lalrpop --processor mypkg.gen:Generator
    python -m regen.main config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from regen import __version__
from regen.core.observability.logging_config import setup_logging

# Usage and configuration problems, as opposed to failed passes (1)
EXIT_USAGE = 2


@click.group()
@click.version_option(version=__version__, prog_name="regen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to regen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """regen — regenerate stale generated sources."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(debug=debug, verbose=verbose, quiet=quiet)


def _fail_usage(message: str) -> None:
    click.secho(f"❌ {message}", fg="red", err=True)
    sys.exit(EXIT_USAGE)


@cli.command()
@click.argument("root", required=False, type=click.Path(file_okay=False))
@click.option("--ext", "-e", "extension", default=None, help="Input file extension (without dot).")
@click.option("--output-ext", "-o", "output_extension", default=None,
              help="Extension of generated files (default: rs).")
@click.option("--processor", "-p", "processor_ref", default=None,
              help="Processor name or package.module:attribute.")
@click.option("--force", is_flag=True, help="Regenerate every output.")
@click.option("--dry-run", is_flag=True, help="Report stale outputs without regenerating.")
@click.option(
    "--json-output",
    "--json",
    "as_json",
    is_flag=True,
    help="Output the result as JSON instead of the text diagnostic (no source excerpt).",
)
@click.pass_context
def build(
    ctx: click.Context,
    root: str | None,
    extension: str | None,
    output_extension: str | None,
    processor_ref: str | None,
    force: bool,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Regenerate stale outputs under ROOT (default: from regen.yml, else cwd).

    Examples:

        regen build --ext lalrpop --processor mygrammar.build:Generator

        regen build grammars -e tpl -o py --force

        regen build --dry-run
    """
    from regen.adapters.base import ProcessorError
    from regen.adapters.registry import create_default_registry
    from regen.core.config.loader import ConfigError, find_config_file, load_config, resolve_root
    from regen.core.models.config import RegenConfig
    from regen.core.services.diagnostics import report
    from regen.core.use_cases.process import process_dir

    config_path: Path | None = ctx.obj.get("config_path") or find_config_file()
    try:
        config = load_config(config_path) if config_path else RegenConfig()
        overrides = {
            key: value
            for key, value in {
                "extension": extension,
                "output_extension": output_extension,
                "processor": processor_ref,
                "force": force or None,
            }.items()
            if value is not None
        }
        if overrides:
            config = RegenConfig.model_validate({**config.model_dump(), **overrides})
    except ConfigError as e:
        _fail_usage(str(e))
        return
    except ValueError as e:
        _fail_usage(f"Invalid option: {e}")
        return

    if not config.extension:
        _fail_usage("No input extension given. Pass --ext or set 'extension' in regen.yml.")
        return

    try:
        processor = create_default_registry().resolve(config.processor)
    except ProcessorError as e:
        _fail_usage(str(e))
        return

    scan_root = Path(root) if root else resolve_root(config, config_path)

    try:
        result = process_dir(
            scan_root,
            config.extension,
            processor,
            force=config.force,
            output_extension=config.output_extension,
            dry_run=dry_run,
        )
    except ValueError as e:
        _fail_usage(str(e))
        return

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.failed else 0)
        return

    code = report(result)
    if code:
        sys.exit(code)

    if ctx.obj.get("quiet"):
        return

    if dry_run:
        for path in result.rebuilt:
            click.echo(f"would regenerate {path}")
    if ctx.obj.get("verbose") or dry_run:
        click.secho(
            f"✓ {result.scanned} scanned, {len(result.rebuilt)} "
            f"{'stale' if dry_run else 'regenerated'}, {result.skipped} up to date",
            fg="green",
        )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def processors(as_json: bool) -> None:
    """List the built-in processors."""
    from regen.adapters.registry import create_default_registry

    names = create_default_registry().names()
    if as_json:
        click.echo(json.dumps({"processors": names}, indent=2))
        return
    for name in names:
        click.echo(name)


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate regen.yml configuration."""
    from regen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Extension: .{result.config.extension} → .{result.config.output_extension}")
        click.echo(f"   Processor: {result.config.processor}")
        click.echo(f"   Root:      {result.root}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)


if __name__ == "__main__":
    cli()
