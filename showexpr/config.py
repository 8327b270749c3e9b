"""
Parser configuration.

The grammar has no tunables; configuration only covers what a caller layers
around it: an optional nesting limit, whether to keep warnings, and the name
shown in diagnostics.

Settings are read from SHOWEXPR_* environment variables when a ParserConfig
is constructed; keyword arguments take precedence over the environment.

Author: xwest
"""

from typing import Optional

from pydantic import PositiveInt, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .lexer.errors import ShowExprError


ENV_PREFIX = "SHOWEXPR_"
MAX_DEPTH_ENV = ENV_PREFIX + "MAX_DEPTH"

# Used by the command line when nothing else is given; the library default is no limit
CLI_DEFAULT_MAX_DEPTH = 200


class ConfigError(ShowExprError):
    """Raised for invalid configuration values."""


class ParserConfig(BaseSettings):
    """
    Options for parse_string / parse_file.

    Attributes:
        max_depth: Deepest bracket nesting allowed, or None for no limit
            (env: SHOWEXPR_MAX_DEPTH)
        collect_warnings: Keep warnings for degraded input in the result
            (env: SHOWEXPR_COLLECT_WARNINGS)
        filename: Name reported in warning and error locations
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_ignore_empty=True, frozen=True)

    max_depth: Optional[PositiveInt] = None
    collect_warnings: bool = True
    filename: str = "<string>"

    def __init__(self, **values):
        try:
            super().__init__(**values)
        except ValidationError as e:
            raise ConfigError(_describe(e)) from None

    @field_validator("max_depth", mode="before")
    @classmethod
    def _no_bool_depth(cls, v):
        # bool is an int subclass and would otherwise pass as 1
        if isinstance(v, bool):
            raise ValueError("must be an integer, not a boolean")
        return v

    @classmethod
    def from_env(cls, **overrides) -> 'ParserConfig':
        """
        Build a config from the environment, then apply keyword overrides.

        Overrides that are None are ignored so unset command line options
        leave the environment value in place.
        """
        return cls(**{key: value for key, value in overrides.items() if value is not None})

    def with_filename(self, filename: str) -> 'ParserConfig':
        return self.model_copy(update={"filename": filename})

    def with_max_depth(self, max_depth: int) -> 'ParserConfig':
        return type(self)(
            max_depth=max_depth,
            collect_warnings=self.collect_warnings,
            filename=self.filename,
        )


def _describe(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        name = ".".join(str(part) for part in item["loc"])
        problems.append(f"{name} ({ENV_PREFIX}{name.upper()}): {item['msg']}")
    return "Invalid configuration: " + "; ".join(problems)


# Library default: no limit, and independent of the environment
DEFAULT_CONFIG = ParserConfig.model_construct()
