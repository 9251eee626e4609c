import logging
from pathlib import Path

import click

from .pipeline import (
    ArtifactValidationError,
    Capability,
    ConfigError,
    GenerationResult,
    ModelNotFoundError,
    ModuleGenerator,
    OutputMode,
    SchemaReadError,
    SchemaSyntaxError,
    load_config,
)

EPILOG = """\b
Examples:
  prisma_to_nest Product
  prisma_to_nest User --schema prisma/schema.prisma
  prisma_to_nest --list
"""

CAPABILITY_LABELS = {
    Capability.RICH: ("(with base classes)", "green"),
    Capability.BASIC: ("(basic CRUD)", "yellow"),
}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_models(generator: ModuleGenerator) -> None:
    models = generator.list_models()
    click.echo(f"\nAvailable models in {generator.schema_path}:\n")
    for model, capability in models:
        label, color = CAPABILITY_LABELS[capability]
        click.echo(f"   {model.name} " + click.style(label, fg=color))
    click.echo("\nUsage: prisma_to_nest <ModelName>")


def _print_next_steps(result: GenerationResult) -> None:
    name = result.model.name
    click.secho(f'\nModule "{name}" generated successfully!', fg="green", bold=True)
    click.echo(f"\nFiles created in: {result.module_dir}/")
    for path in result.skipped:
        click.echo(f"   kept existing {path}")
    click.echo("\nNext steps:")
    click.echo(f"   1. Add {name}Module to your app.module.ts")
    click.echo("   2. Review and customize the generated files")
    click.echo("   3. Add any custom business logic to the service")
    click.echo("   4. Add authentication guards if needed")


def _report_written(path: Path) -> None:
    click.echo(click.style("Generated: ", fg="green") + str(path))


@click.command(context_settings={"help_option_names": ["-h", "--help"]}, epilog=EPILOG)
@click.argument("model_name", required=False)
@click.option("--list", "-l", "list_models", is_flag=True, default=False, help="List the models of the schema")
@click.option("--all", "generate_all", is_flag=True, default=False, help="Generate a module for every model")
@click.option("--schema", "-s", default=None, type=click.Path(dir_okay=False), help="Prisma schema file")
@click.option("--modules-dir", "-o", default=None, type=click.Path(file_okay=False), help="Directory receiving the modules")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True), help="JSON configuration file")
@click.option("--mode", "-m", default=None, type=click.Choice([m.value for m in OutputMode]), help="What to do with existing files")
@click.option("--strict", is_flag=True, default=False, help="Fail on unrecognized schema lines")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Verbose logging")
@click.pass_context
def prisma_to_nest(ctx, model_name, list_models, generate_all, schema, modules_dir, config, mode, strict, verbose):
    """Generate a NestJS module (DTOs, repository, service, controller, module) from a Prisma model."""
    _setup_logging(verbose)

    if model_name is None and not list_models and not generate_all:
        click.echo(ctx.get_help())
        ctx.exit(0)

    try:
        config = load_config(config)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    # CLI flags override config file values
    if schema is not None:
        config.schema_path = schema
    if modules_dir is not None:
        config.modules_path = modules_dir
    if mode is not None:
        config.output.mode = OutputMode(mode)
    if strict:
        config.strict_schema = True

    generator = ModuleGenerator(config)

    try:
        if list_models:
            _print_models(generator)
        elif generate_all:
            for result in generator.generate_all(on_write=_report_written):
                _print_next_steps(result)
        else:
            _print_next_steps(generator.generate_module(model_name, on_write=_report_written))
    except (SchemaReadError, SchemaSyntaxError, ModelNotFoundError, ArtifactValidationError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e
    except OSError as e:
        raise click.ClickException(f"Cannot write generated files: {e}") from e
