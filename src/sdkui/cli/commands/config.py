"""Config command implementation."""

from pathlib import Path

import click

from sdkui.cli.ensure import Ensure
from sdkui.cli.output import machine_output, user_output
from sdkui.core.context import SdkuiContext
from sdkui.core.global_config import CONFIG_KEYS, GlobalConfig


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def _parse_boolean_value(value: str, field_name: str) -> bool:
    """Parse "true" or "false" (case-insensitive), exiting on anything else."""
    Ensure.invariant(
        value.lower() in ("true", "false"), f"Invalid boolean value for {field_name}: {value}"
    )
    return value.lower() == "true"


def _parse_float_value(value: str, field_name: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        Ensure.fail(f"Invalid number for {field_name}: {value}")
    Ensure.invariant(parsed > 0, f"{field_name} must be greater than zero")
    return parsed


def _parse_value(key: str, value: str) -> object:
    if key == "use_pager":
        return _parse_boolean_value(value, key)
    if key == "timeout":
        return _parse_float_value(value, key)
    if key == "candidates_dir":
        return Path(value).expanduser()
    Ensure.invariant(bool(value.strip()), f"Value for {key} cannot be empty")
    return value


def _ensure_known_key(key: str) -> None:
    Ensure.invariant(
        key in CONFIG_KEYS, f"Invalid key: {key} (expected one of: {', '.join(CONFIG_KEYS)})"
    )


def _load(ctx: SdkuiContext) -> GlobalConfig:
    try:
        return ctx.config_store.load()
    except ValueError as e:
        Ensure.fail(str(e))


def _update(ctx: SdkuiContext, key: str, value: object | None) -> None:
    try:
        ctx.config_store.update(key, value)
    except ValueError as e:
        Ensure.fail(str(e))


@click.group("config")
def config_group() -> None:
    """Manage sdkui configuration (~/.sdkui/config.toml)."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: SdkuiContext) -> None:
    """Print stored configuration and the effective settings."""
    config = _load(ctx)

    machine_output(click.style("Global configuration:", bold=True))
    stored = [(key, getattr(config, key)) for key in CONFIG_KEYS]
    stored = [(key, value) for key, value in stored if value is not None]
    if not stored:
        machine_output("  (none)")
    for key, value in stored:
        machine_output(f"  {key}={_format_value(value)}")

    machine_output(click.style("Effective settings:", bold=True))
    for key in CONFIG_KEYS:
        value = getattr(ctx.settings, key)
        machine_output(f"  {key}={_format_value(value) if value is not None else ''}")


@config_group.command("get")
@click.argument("key")
@click.pass_obj
def config_get(ctx: SdkuiContext, key: str) -> None:
    """Print the stored value of KEY."""
    _ensure_known_key(key)
    value = getattr(_load(ctx), key)
    if value is None:
        Ensure.fail(f"Key not set: {key}")
    machine_output(_format_value(value))


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
def config_set(ctx: SdkuiContext, key: str, value: str) -> None:
    """Store VALUE for KEY."""
    _ensure_known_key(key)
    parsed = _parse_value(key, value)
    _update(ctx, key, parsed)
    user_output(f"Set {key}={_format_value(parsed)}")


@config_group.command("unset")
@click.argument("key")
@click.pass_obj
def config_unset(ctx: SdkuiContext, key: str) -> None:
    """Remove KEY so its default applies again."""
    _ensure_known_key(key)
    _update(ctx, key, None)
    user_output(f"Unset {key}")


@config_group.command("path")
@click.pass_obj
def config_path(ctx: SdkuiContext) -> None:
    """Print the location of the config file."""
    machine_output(str(ctx.config_store.path()))
