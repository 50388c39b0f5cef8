"""CLI entry point and note path resolution."""

import logging
from datetime import date, datetime
from pathlib import Path

import click

from .builders.period import PeriodNameBuilder
from .config import Config
from .domain.models import Period, PeriodType
from .parsing.base import DateParserFactory
from .parsing.date_fns import DateFnsParserFactory

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


class NotePathResolver:
    """Compute where the note for a period lives."""

    def __init__(
        self, config: Config, parser_factory: DateParserFactory | None = None
    ):
        self.config = config
        self.parser_factory = parser_factory or DateFnsParserFactory()

    def relative_path(
        self, period: Period, folder: str | None = None, name_format: str | None = None
    ) -> str:
        """Path of the note inside the vault, using the configured templates."""
        settings = self.config.settings_for(period.type)
        return (
            PeriodNameBuilder(self.parser_factory)
            .with_path(settings.folder if folder is None else folder)
            .with_name(settings.format if name_format is None else name_format)
            .with_value(period)
            .build()
        )

    def resolve(
        self, period: Period, folder: str | None = None, name_format: str | None = None
    ) -> str:
        """Path of the note, prefixed with the vault path when one is set."""
        path = self.relative_path(period, folder=folder, name_format=name_format)
        if self.config.vault_path is None:
            return path
        return str(self.config.vault_path / path.lstrip("/"))


def _load_config(config: str) -> Config:
    if not Path(config).exists():
        logger.debug(f"No config file at {config}, using defaults")
        return Config()
    try:
        return Config.from_yaml(config)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


def _parse_date(value: str | None) -> date:
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise click.ClickException(f"Invalid date '{value}', expected YYYY-MM-DD") from e


PERIOD_TYPE = click.Choice([kind.value for kind in PeriodType])


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Periodic Notes - Compute file paths for daily, weekly and other periodic notes."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command()
@click.option("--config", "-c", default="config.yaml", help="Config file path")
@click.option("--type", "-t", "period_type", type=PERIOD_TYPE, default="daily", help="Period type")
@click.option("--date", "-d", "date_str", help="Date inside the period (YYYY-MM-DD), default today")
@click.option("--folder", help="Folder template, overrides the config")
@click.option("--format", "name_format", help="Name template, overrides the config")
def path(
    config: str,
    period_type: str,
    date_str: str | None,
    folder: str | None,
    name_format: str | None,
) -> None:
    """Print the path of the note for one period."""
    resolver = NotePathResolver(_load_config(config))
    period = Period.containing(_parse_date(date_str), PeriodType(period_type))

    try:
        click.echo(resolver.resolve(period, folder=folder, name_format=name_format))
    except ValueError as e:
        raise click.ClickException(str(e)) from e


@cli.command(name="range")
@click.option("--config", "-c", default="config.yaml", help="Config file path")
@click.option("--type", "-t", "period_type", type=PERIOD_TYPE, default="daily", help="Period type")
@click.option("--date-from", required=True, help="Start date (YYYY-MM-DD)")
@click.option("--date-to", required=True, help="End date (YYYY-MM-DD)")
def range_(config: str, period_type: str, date_from: str, date_to: str) -> None:
    """Print note paths for every period between two dates."""
    resolver = NotePathResolver(_load_config(config))
    start = _parse_date(date_from)
    end = datetime.combine(_parse_date(date_to), datetime.min.time())

    if start > end.date():
        raise click.ClickException("--date-from must not be after --date-to")

    period = Period.containing(start, PeriodType(period_type))
    try:
        while period.date <= end:
            click.echo(resolver.resolve(period))
            period = period.next()
    except ValueError as e:
        raise click.ClickException(str(e)) from e


@cli.command(name="show-config")
@click.option("--config", "-c", default="config.yaml", help="Config file path")
def show_config(config: str) -> None:
    """Show the effective note templates."""
    cfg = _load_config(config)

    click.echo(f"Vault: {cfg.vault_path or '(not set)'}")
    for kind in PeriodType:
        settings = cfg.settings_for(kind)
        click.echo(f"  {kind.value}: folder={settings.folder!r} format={settings.format!r}")


if __name__ == "__main__":
    cli()
