"""Rendering configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

# Colour names understood by `click.style`.
COLOR_NAMES = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
)


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for rendering marked-up text to the terminal.

    Attributes:
        number_color: Foreground colour for digits and decimal points.
        single_quote_color: Foreground colour for single-quoted strings.
        double_quote_color: Foreground colour for double-quoted strings.
        highlight_color: Background colour for backtick highlights.
        color: Force (True) or suppress (False) ANSI styling on output; None
            lets click decide based on whether stdout is a terminal.
        max_file_size: Maximum file size in bytes that will be rendered.

    Examples:
        RenderConfig(number_color="magenta", color=True)
    """

    # Palette
    number_color: str = "cyan"
    single_quote_color: str = "green"
    double_quote_color: str = "yellow"
    highlight_color: str = "bright_black"

    # Output
    color: bool | None = None

    # Limits
    max_file_size: int = 10 * 1024 * 1024


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_file_size` must be a positive integer")
    """


_PALETTE_FIELDS = ("number_color", "single_quote_color", "double_quote_color", "highlight_color")


def validate_config(config: RenderConfig) -> None:
    """Validate a `RenderConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If a palette entry is not a known colour name, `color` is
            not a boolean or None, or `max_file_size` is not a positive integer.

    Examples:
        validate_config(RenderConfig(highlight_color="blue"))
    """
    for name in _PALETTE_FIELDS:
        value = getattr(config, name)
        if value not in COLOR_NAMES:
            raise ConfigError(f"`{name}` must be one of: {', '.join(COLOR_NAMES)} (got {value!r})")

    if config.color is not None and not isinstance(config.color, bool):
        raise ConfigError("`color` must be a boolean")

    if isinstance(config.max_file_size, bool) or not isinstance(config.max_file_size, int):
        raise ConfigError("`max_file_size` must be an integer")
    if config.max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")


def apply_overrides(config: RenderConfig, **overrides: object) -> RenderConfig:
    """Apply override values to a `RenderConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        RenderConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        ConfigError: If an override name is not defined on `RenderConfig`.

    Examples:
        updated = apply_overrides(config, number_color="magenta", color=False)
    """
    known = {field.name for field in fields(RenderConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(**overrides: object) -> RenderConfig:
    """Override and validate the default configuration.

    Args:
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        RenderConfig: Validated configuration ready for rendering.

    Raises:
        ConfigError: If an override is unknown or validation fails.

    Examples:
        config = build_config(color=True, max_file_size=4096)
    """
    config = apply_overrides(RenderConfig(), **overrides)
    validate_config(config)
    return config
