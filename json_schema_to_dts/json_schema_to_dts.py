import json
import logging

import click

from .pipeline import GeneratorConfig, generate_module
from .storage import DEFAULT_OUTPUT_PATH, DEFAULT_SCHEMA_PATH, load_schema, write_output

DEFAULT_MODULE_NAME = "DebugProtocol"


@click.command()
@click.option("--name", "-n", default=DEFAULT_MODULE_NAME, type=str, help="Name of the generated module")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--validate/--no-validate", default=True, help="Check the output structure before writing it")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug diagnostics")
@click.argument("path", default=str(DEFAULT_SCHEMA_PATH), type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=str(DEFAULT_OUTPUT_PATH), type=click.Path(resolve_path=True))
def json_schema_to_dts(name, config, validate, verbose, path, output):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    document = load_schema(path)
    out = generate_module(name, document, config)
    write_output(out, output, validate=validate)
