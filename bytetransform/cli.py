"""Command line interface for bytetransform."""

import json
import os

import click
import yaml

from .engine import Engine, normalize_transform_entry
from .errors import BytesTransformError


@click.group()
@click.version_option(package_name="bytetransform")
def cli():
    """bytetransform - Composable transforms over byte buffers."""
    pass


def load_config(config_path):
    """Load a YAML (.yaml/.yml) or JSON pipeline config."""
    _, ext = os.path.splitext(config_path.lower())
    with open(config_path, 'r', encoding='utf-8') as cf:
        if ext in ('.yaml', '.yml'):
            conf = yaml.safe_load(cf) or {}
        else:
            # assume JSON
            conf = json.load(cf) or {}
    if not isinstance(conf, dict):
        raise click.BadParameter("config must be a mapping with a 'transforms' list", param_hint="--config")
    return conf


def _parse_param(option):
    """Split ``NAME.KEY=VALUE`` into (name, key, value); VALUE is decoded as JSON when possible."""
    target, sep, raw = option.partition('=')
    name, dot, key = target.partition('.')
    if not sep or not dot or not name or not key:
        raise click.BadParameter(f"expected NAME.KEY=VALUE, got {option!r}", param_hint="--param")
    try:
        value = json.loads(raw)
    except ValueError:
        value = raw
    return name, key, value


@cli.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--out', '-o', 'output_file', type=click.Path(dir_okay=False), default=None,
              help='Output file path (defaults to INPUT_FILE.out)')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True), default=None,
              help='Path to YAML or JSON configuration file with a transforms list')
@click.option('--transform', '-t', 'extra_transforms', multiple=True,
              help='Transform name to append to the pipeline (repeatable)')
@click.option('--param', '-p', 'param_options', multiple=True,
              help='Parameter for a transform given as NAME.KEY=VALUE; VALUE is read as JSON, else as a string (use 0x.. for hex buffers)')
@click.option('--hex', 'as_hex', is_flag=True, default=False,
              help='Print the result as hex instead of writing a file')
@click.option('--log-level', 'log_level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=True),
              default=None, help='Set logging level for the bytetransform logger')
@click.option('--log-path', 'log_path', type=click.Path(dir_okay=False), default=None,
              help='Append JSONL log records to this file')
def run(input_file, output_file, config_path, extra_transforms, param_options, as_hex, log_level, log_path):
    """Apply a pipeline of transforms to INPUT_FILE.

    Steps come from the config's 'transforms' list followed by any -t options.
    --param values apply to every step with the matching name.
    """
    engine = Engine()
    try:
        file_conf = load_config(config_path) if config_path else {}

        transforms = [normalize_transform_entry(t) for t in file_conf.get('transforms', [])]
        transforms.extend(normalize_transform_entry(t) for t in extra_transforms)
        if not transforms:
            raise click.UsageError("no transforms given; use --config or --transform")

        for option in param_options:
            name, key, value = _parse_param(option)
            matched = [t for t in transforms if t['name'] == name]
            if not matched:
                raise click.BadParameter(f"no transform named {name!r} in the pipeline", param_hint="--param")
            for t in matched:
                t['params'] = dict(t['params'], **{key: value})

        # CLI flags take precedence over the config file
        engine.configure_logging(
            log_level or file_conf.get('log_level', 'INFO'),
            log_path or file_conf.get('log_path'),
        )

        with open(input_file, 'rb') as f:
            data = bytearray(f.read())

        result = engine.apply_pipeline(data, transforms, in_place=True)

        if as_hex:
            click.echo(result.hex())
            return

        output_file = output_file or f"{input_file}.out"
        with open(output_file, 'wb') as f:
            f.write(result)
        click.echo(f"Wrote {len(result)} bytes to {output_file}")

    except BytesTransformError as e:
        click.echo(json.dumps(e.to_dict()), err=True)
        raise click.ClickException(e.message)
    except (OSError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Error during transform: {e}", err=True)
        raise click.Abort()
    finally:
        engine.close()


@cli.command(name='list')
def list_transforms():
    """List available transforms."""
    engine = Engine()
    for name in engine.get_available_transforms():
        click.echo(f"{name}\t{engine.describe(name)}")


if __name__ == '__main__':
    cli()
