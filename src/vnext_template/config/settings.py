"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``VNEXT_*`` prefix
  3. Code defaults

The domain's own ``vnext.config.json`` is data served by the accessors,
not CLI settings, and is deliberately not merged here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings


class VntSettings(BaseSettings):
    """Settings for the vnext-template CLI.

    Stored in ``click.Context.obj`` (via :class:`AppContext`) at the CLI
    root level.

    Attributes:
        root: Working root scanned for the domain directory.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "VNEXT_",
    }

    root: Path = Field(default_factory=Path.cwd)

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> VntSettings:
        """Build settings from Click parameters.

        Flags left at None (or False for boolean switches) are dropped so
        that environment variables still apply underneath them.
        """
        overrides = {k: v for k, v in cli_flags.items() if v is not None and v is not False}
        if "root" in overrides:
            overrides["root"] = Path(overrides["root"])
        return cls(**overrides)
