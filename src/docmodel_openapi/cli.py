"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from docmodel_openapi.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from docmodel_openapi.schema_conversion import (
    DEFAULT_MAX_DEPTH,
    ConversionOptions,
    DocumentSchemaError,
    document_model,
)
from docmodel_openapi.schema_export import (
    ModelImportError,
    SchemaExportError,
    build_components_document,
    import_model,
    render_json,
    write_schema_document,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="docmodel-openapi")
@click.option("--verbose", is_flag=True, default=False, help="Log conversion details to stderr.")
def cli(verbose: bool) -> None:
    """Document-model to OpenAPI schema converter."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="convert")
@click.argument("model_reference")
@click.option(
    "--metadata-prop",
    "metadata_props",
    multiple=True,
    help="Extra descriptor property to copy into the schema (repeatable)",
)
@click.option(
    "--omit-field",
    "omit_fields",
    multiple=True,
    help="Field name to leave out at every nesting level (repeatable)",
)
@click.option(
    "--keep-internals",
    is_flag=True,
    default=False,
    help="Keep the version key and id virtual in the output.",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_DEPTH,
    show_default=True,
    help="Maximum descriptor nesting depth",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the schema to this file instead of stdout",
)
def convert(
    model_reference: str,
    metadata_props: tuple[str, ...],
    omit_fields: tuple[str, ...],
    keep_internals: bool,
    max_depth: int,
    output_path: str | None,
) -> None:
    """Convert one model (package.module:attribute) into a JSON Schema object."""
    options = ConversionOptions(
        metadata_props=metadata_props,
        omit_fields=omit_fields,
        omit_internals=not keep_internals,
        max_depth=max_depth,
    )
    try:
        document = document_model(import_model(model_reference), options)
        if output_path is None:
            click.echo(render_json(document), nl=False)
            return
        resolved_output = write_schema_document(document, output_path)
    except (ModelImportError, DocumentSchemaError, SchemaExportError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="export")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON export configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the components document to write (overrides the configured output)",
)
def export(config_path: str, output_path: str | None) -> None:
    """Export all configured models as an OpenAPI components document."""
    try:
        configuration = load_configuration(config_path)
        destination = output_path or configuration.output_path
        if destination is None:
            raise CliError("No output path given; set 'output' in the configuration or --output.")
        models = [import_model(reference) for reference in configuration.models]
        document = build_components_document(models, configuration.options)
        resolved_output = write_schema_document(document, destination)
    except (
        ConfigurationError,
        ModelImportError,
        DocumentSchemaError,
        SchemaExportError,
        OSError,
    ) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML export configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML export configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
