# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import NoReturn

import click
import yaml

from specimen_types.cli.debugging import META_IPDB_FLAG, SpecimenGroup
from specimen_types.config.app import configure_logging
from specimen_types.lib.exceptions import SpecError
from specimen_types.lib.scolor import SColor
from specimen_types.lib.sdatetime import SDatetime
from specimen_types.lib.swysiwyg import HTMLGenerator, SWysiwyg
from specimen_types.types import COLOR_FORMATS, load_specs, spec_tag


@click.group(
    name="specimen",
    invoke_without_command=False,
    help="inspect field specs and their data",
    cls=SpecimenGroup,
)
@click.option(
    "--ipdb/--no-ipdb",
    "use_ipdb",
    default=False,
    show_default=True,
    help="Drop into ipdb if a command raises an unhandled exception.",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override SPECIMEN_LOG_LEVEL.",
)
def specimen(use_ipdb: bool, log_level: str | None) -> None:
    """Inspect field specs and their data."""

    ctx = click.get_current_context()
    ctx.meta[META_IPDB_FLAG] = use_ipdb
    configure_logging(log_level)


@specimen.command(name="check", help="validate a YAML spec file")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def specimen_check(path: Path) -> None:
    """Load every spec of a YAML file and list them."""

    try:
        specs = load_specs(path)
    except SpecError as exc:
        raise click.ClickException(str(exc)) from exc

    if not specs:
        click.echo(f"No specs found in {path}.")
        return

    columns = (("field", "Field"), ("type", "Type"), ("title", "Title"))
    rows = [
        {"field": name, "type": spec_tag(spec), "title": spec.title}
        for name, spec in specs.items()
    ]

    widths: dict[str, int] = {}
    for key, header in columns:
        widths[key] = max(len(header), *(len(str(row[key])) for row in rows))

    header_line = "  ".join(f"{label:<{widths[key]}}" for key, label in columns)
    click.echo(header_line)
    click.echo("-" * len(header_line))

    for row in rows:
        click.echo(
            "  ".join(f"{str(row[key]):<{widths[key]}}" for key, _ in columns).rstrip()
        )


@specimen.command(name="color", help="normalize a colour value")
@click.argument("value")
@click.option(
    "--format",
    "format_",
    default="hex",
    show_default=True,
    type=click.Choice(COLOR_FORMATS),
    help="Format the colour is re-encoded in.",
)
def specimen_color(value: str, format_: str) -> None:
    """Print the channels of a colour and its re-encoded string."""

    data: dict = {"value": value}
    try:
        color = SColor({"format": format_}, data)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    for key in ("r", "g", "b", "a", "h", "s", "l", "hex", "hexa"):
        click.echo(f"{key:<5} {data[key]}")
    click.echo(f"{format_:<5} {color.to_string()}")


@specimen.command(name="datetime", help="normalize a date with a token format")
@click.argument("format_", metavar="FORMAT")
@click.option("--value", default=None, help="Date written in FORMAT.")
@click.option("--iso", default=None, help="ISO 8601 instant.")
@click.option(
    "--disabled",
    multiple=True,
    help="Disabled entry (year, month, weekday, week, weekend or ISO instant).",
)
def specimen_datetime(
    format_: str, value: str | None, iso: str | None, disabled: tuple[str, ...]
) -> None:
    """Print the normalized data of a date and whether it is disabled."""

    data: dict = {"value": value, "format": format_ if value else None, "iso": iso}
    spec = {"format": format_, "disabled": [_year_or_name(item) for item in disabled]}
    try:
        dt = SDatetime(spec, data)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"date needed  {dt.date_needed}")
    click.echo(f"time needed  {dt.time_needed}")
    click.echo(f"iso          {data['iso']}")
    click.echo(f"value        {data['value']}")
    click.echo(f"disabled     {dt.is_disabled()}")


@specimen.command(name="render", help="render wysiwyg data as HTML")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def specimen_render(path: Path) -> None:
    """Render a wysiwyg data document (YAML or JSON) with HTMLGenerator."""

    with open(path, encoding="utf-8") as stream:
        document = yaml.safe_load(stream)

    if not isinstance(document, Mapping):
        _fail(f"{path}: expected a wysiwyg document")
    # either {"value": root} or the root node itself
    data = document if "value" in document else {"value": document}

    click.echo(SWysiwyg({}, data).to_string(HTMLGenerator()))


def _year_or_name(item: str) -> int | str:
    return int(item) if item.isdigit() else item


def _fail(message: str) -> NoReturn:
    raise click.ClickException(message)


def main() -> None:
    specimen()


if __name__ == "__main__":
    main()


# EOF
