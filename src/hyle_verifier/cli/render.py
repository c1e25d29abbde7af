"""Rendering of decoded records for the terminal."""
from __future__ import annotations

import json
from typing import Any

import click


def _cell(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex() if value else "(empty)"
    if isinstance(value, str):
        return repr(value)
    return str(value)


def echo_record(data: dict[str, Any], *, fmt: str = "json", indent: int | None = None, title: str = "Hyle output") -> None:
    """Print a record dict as JSON on stdout, or as a rich table."""
    if fmt == "json":
        separators = (",", ":") if indent is None else None
        click.echo(json.dumps(data, indent=indent, separators=separators))
        return

    from rich.console import Console
    from rich.table import Table
    from rich.box import ROUNDED

    table = Table(title=title, box=ROUNDED, border_style="cyan", show_header=True, header_style="bold")
    table.add_column("Field", style="white")
    table.add_column("Value", overflow="fold")
    for name, value in data.items():
        if isinstance(value, dict):
            for sub_name, sub_value in value.items():
                table.add_row(f"{name}.{sub_name}", _cell(sub_value))
            continue
        if isinstance(value, list):
            value = bytes(value)
        table.add_row(name, _cell(value))
    Console().print(table)


def echo_error(error: Exception, description: str) -> None:
    code = getattr(error, "code", "E000_INTERNAL")
    click.echo(f"REJECTED [{code}] {description}: {error}", err=True)
