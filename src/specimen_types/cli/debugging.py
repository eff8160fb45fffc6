# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

"""Helpers for specimen CLI debugging."""

from __future__ import annotations

from typing import Any, Optional

import click

from ..config.app import get_bool_env

ENV_FLAG = "SPECIMEN_CLI_IPDB"
META_IPDB_FLAG = "specimen_use_ipdb"


class SpecimenGroup(click.Group):
    """Group that can drop into ipdb when commands crash."""

    def invoke(self, ctx: click.Context) -> Any:  # type: ignore[override]
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as exc:  # noqa: BLE001
            if _should_enter_ipdb(ctx):
                _enter_ipdb(exc)
            raise


def _should_enter_ipdb(ctx: click.Context) -> bool:
    flag_from_ctx = bool(ctx.meta.get(META_IPDB_FLAG, False))
    if flag_from_ctx:
        return True
    return get_bool_env(ENV_FLAG, False)


def _enter_ipdb(exc: BaseException) -> None:
    debugger = _load_ipdb()
    if debugger is None:
        click.echo("ipdb is not installed; reraising exception.", err=True)
        return

    click.echo("ipdb: entering post-mortem debugging session...", err=True)
    debugger.post_mortem(exc.__traceback__)


def _load_ipdb() -> Optional[Any]:
    try:
        import ipdb  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        return None
    return ipdb


# EOF
