"""CLI entry point for voice-minutes."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from voice_minutes import __version__


def _build_overrides(replay_path: str | None, speed: float | None) -> dict:
    replay: dict = {}
    if replay_path:
        replay['script'] = replay_path
    if speed is not None:
        replay['speed'] = speed
    return {'replay': replay} if replay else {}


@click.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '-r',
    '--replay',
    'replay_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Feed the session from a recorded YAML script of recognition events.',
)
@click.option('--speed', default=None, type=float, help='Replay speed multiplier (2 = twice as fast).')
@click.option(
    '-o',
    '--export-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Directory for exported minutes-YYYY-MM-DD.txt files (default: current directory).',
)
@click.option('--headless', is_flag=True, help='No TUI: listen until the engine goes idle, then print the transcript.')
@click.option('--show-draft', is_flag=True, help='Print the saved draft and exit.')
@click.version_option(version=__version__)
def cli(config_path, replay_path, speed, export_dir, headless, show_draft):
    """voice-minutes -- turn continuous speech recognition into editable, durable minutes."""
    from voice_minutes.l1_entities.errors import (  # noqa: PLC0415 -- deferred: not needed for --help
        EngineUnavailableError,
    )
    from voice_minutes.l2_use_cases.persistence_adapter import (  # noqa: PLC0415 -- deferred: not needed for --help
        PersistenceAdapter,
    )
    from voice_minutes.l3_interface_adapters.gateways.paths import LOG_DIR  # noqa: PLC0415 -- deferred: platformdirs
    from voice_minutes.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from voice_minutes.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: not needed for --help
        DependencyContainer,
        build_store,
    )
    from voice_minutes.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
        build_app_config,
    )
    from voice_minutes.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
    )

    try:
        overrides = _build_overrides(replay_path, speed)
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides or None)
        config = build_app_config(raw)
        infra = InfraConfig.model_validate(raw)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    setup_file_logging(Path(config.debug.log_dir).expanduser() if config.debug.log_dir else LOG_DIR)

    if show_draft:
        draft = PersistenceAdapter(build_store(config), key=config.persistence.draft_key).load()
        click.echo(draft, nl=False)
        return

    try:
        container = DependencyContainer(
            config,
            infra=infra,
            export_dir=Path(export_dir) if export_dir else None,
        )
    except EngineUnavailableError as e:
        click.echo(f'Error: {e}', err=True)
        click.echo('Speech recognition is not supported in this setup.', err=True)
        sys.exit(1)

    if headless:
        from voice_minutes.l4_frameworks_and_drivers.headless_runner import (  # noqa: PLC0415 -- deferred: headless mode only
            run_headless,
        )

        transcript = run_headless(container)
        click.echo(transcript, nl=False)
        if export_dir:
            path = container.exporter.export(transcript)
            click.echo(f'Saved {path}', err=True)
        return

    from voice_minutes.l4_frameworks_and_drivers.app import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help or --headless
        App,
    )

    app = App(
        session=container.session,
        channel=container.channel,
        clipboard=container.clipboard,
        exporter=container.exporter,
    )
    try:
        app.run()
    finally:
        container.session.shutdown()
