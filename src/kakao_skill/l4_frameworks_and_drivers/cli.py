"""CLI entry point for kakao-skill."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from kakao_skill import __version__


@click.group()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '--strict',
    is_flag=True,
    help='Reject unknown button actions and call buttons without phoneNumber.',
)
@click.option('--indent', type=click.IntRange(min=0), default=None, help='Pretty-print JSON with this indent.')
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Append debug logging to this file.',
)
@click.option('-v', '--verbose', is_flag=True, help='Log to stderr at the configured logging level.')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_path, strict, indent, log_file, verbose):
    """kakao-skill -- build, validate and benchmark KakaoTalk skill responses."""
    import yaml  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
    from pydantic import ValidationError  # noqa: PLC0415 -- deferred: pydantic not loaded on --help

    from kakao_skill.l2_use_cases.ports.config_loader import ConfigLoader  # noqa: PLC0415 -- deferred: not needed for --help
    from kakao_skill.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
        deep_merge,
    )
    from kakao_skill.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: not needed for --help
        STRICT_DECODE_OVERRIDES,
        build_app_config,
    )
    from kakao_skill.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
        setup_stderr_logging,
    )

    loader: ConfigLoader = YamlConfigLoader()
    overrides: dict = {}
    if strict:
        deep_merge(overrides, STRICT_DECODE_OVERRIDES)
    if indent is not None:
        overrides['output'] = {'indent': indent}
    if log_file:
        overrides['logging'] = {'file': log_file, 'level': 'DEBUG'}

    try:
        raw = loader.load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
    except (FileNotFoundError, yaml.YAMLError, ValidationError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    if config.logging.file:
        setup_file_logging(Path(config.logging.file), config.logging.level)
    if verbose:
        setup_stderr_logging(config.logging.level)

    ctx.obj = config


@cli.command()
@click.argument('name', required=False, default='listcard')
@click.option('--list', 'list_names', is_flag=True, help='List reference template names and exit.')
@click.pass_obj
def example(config, name, list_names):
    """Print a reference response template (default: listcard)."""
    from kakao_skill.l2_use_cases.reference_templates import (  # noqa: PLC0415 -- deferred: not needed for --help
        REFERENCE_TEMPLATES,
        build_reference,
    )

    if list_names:
        for key in REFERENCE_TEMPLATES:
            click.echo(key)
        return

    try:
        template = build_reference(name)
    except KeyError as e:
        click.echo(f'Error: {e.args[0]}', err=True)
        sys.exit(1)
    click.echo(template.to_json(indent=config.output.indent))


@cli.command()
@click.argument('source', type=click.File('rb'), default='-')
@click.pass_obj
def validate(config, source):
    """Decode a response body from SOURCE (file or '-') and print it canonically."""
    from kakao_skill.l2_use_cases.validate_template_use_case import (  # noqa: PLC0415 -- deferred: not needed for --help
        ValidateTemplateUseCase,
    )

    report = ValidateTemplateUseCase(config.decode).execute(source.read())
    if not report.ok:
        for issue in report.issues:
            click.echo(str(issue), err=True)
        sys.exit(1)
    click.echo(report.template.to_json(indent=config.output.indent))


@cli.command()
@click.option('-n', '--iterations', default=1000, show_default=True, type=click.IntRange(min=1))
@click.option('-e', '--example', 'name', default='listcard', show_default=True, help='Reference template to build.')
@click.option('--decode', is_flag=True, help='Also decode every serialized body.')
def bench(iterations, name, decode):
    """Time building and serializing a reference template."""
    from kakao_skill.l2_use_cases.reference_templates import (  # noqa: PLC0415 -- deferred: not needed for --help
        REFERENCE_TEMPLATES,
    )
    from kakao_skill.l4_frameworks_and_drivers.benchmark import (  # noqa: PLC0415 -- deferred: not needed for --help
        run_benchmark,
    )

    builder = REFERENCE_TEMPLATES.get(name)
    if builder is None:
        click.echo(f"Error: Unknown example '{name}'. Available: {', '.join(REFERENCE_TEMPLATES)}", err=True)
        sys.exit(1)

    result = run_benchmark(name, builder, iterations, decode=decode)
    click.echo(
        f'{result.name}: {result.iterations} iterations in {result.total_seconds:.4f}s '
        f'({result.per_iteration_us:.1f} µs/iter, {result.payload_bytes} bytes/body)'
    )
