"""Rendering configuration."""

from __future__ import annotations

from dataclasses import dataclass

from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .constants import DEFAULT_LANGUAGE, DEFAULT_THEME


@dataclass(frozen=True)
class RenderConfig:
    """Highlighting choices fixed when a render call starts.

    Attributes:
        language: Pygments lexer alias used for every code block.
        theme: Pygments style name used for code block colours.

    Examples:
        RenderConfig(language="python", theme="nord")
    """

    language: str = DEFAULT_LANGUAGE
    theme: str = DEFAULT_THEME


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("Unknown theme: nope")
    """


def validate_config(config: RenderConfig) -> None:
    """Validate a `RenderConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If a field is not a non-empty string, or the language or
            theme is not known to Pygments.

    Examples:
        validate_config(RenderConfig(language="python"))
    """
    for key in ("language", "theme"):
        value = getattr(config, key)
        if not isinstance(value, str):
            raise ConfigError(f"`{key}` must be a string")
        if not value.strip():
            raise ConfigError(f"`{key}` must not be empty")

    try:
        get_lexer_by_name(config.language)
    except ClassNotFound as error:
        raise ConfigError(f"Unknown language: {config.language}") from error

    try:
        get_style_by_name(config.theme)
    except ClassNotFound as error:
        raise ConfigError(f"Unknown theme: {config.theme}") from error
