"""CLI entrypoint for :mod:`role_acl`."""

from __future__ import annotations

import typer

from role_acl import __version__
from role_acl.exceptions import InvalidMask, InvalidRole
from role_acl.roles import MAX_ROLES, mask_from_roles, roles_from_mask

app = typer.Typer(add_completion=False, help="Encode and decode 128-bit role masks")


def parse_mask(raw: str) -> int:
    text = raw.strip().lower().replace("_", "")
    try:
        if text.startswith("0x"):
            return int(text, 16)
        if text.startswith("0b"):
            return int(text, 2)
        return int(text, 10)
    except ValueError:
        raise typer.BadParameter(f"{raw!r} is not a decimal, 0x-hex or 0b-binary integer.", param_hint="MASK") from None


@app.command("encode")
def encode_command(
    roles: list[int] = typer.Argument(..., help=f"Role indices in [0, {MAX_ROLES})."),
) -> None:
    """Print the permission mask holding ROLES."""

    try:
        mask = mask_from_roles(roles)
    except InvalidRole as exc:
        raise typer.BadParameter(str(exc), param_hint="ROLES") from None

    typer.echo(f"decimal: {mask}")
    typer.echo(f"hex: {mask:#034x}")


@app.command("decode")
def decode_command(
    mask: str = typer.Argument(..., help="Permission mask (decimal, 0x-hex or 0b-binary)."),
) -> None:
    """Print the roles held in MASK."""

    value = parse_mask(mask)
    try:
        held = roles_from_mask(value)
    except InvalidMask as exc:
        raise typer.BadParameter(str(exc), param_hint="MASK") from None

    if not held:
        typer.echo("(no roles)")
        return
    typer.echo(" ".join(str(role) for role in held))


@app.command("version")
def version_command() -> None:
    """Print the installed version."""

    typer.echo(__version__)


def main() -> None:  # pragma: no cover - thin wrapper
    app()


__all__ = ["app", "main", "parse_mask"]
