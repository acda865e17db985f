"""
structedit.config: Runtime configuration.

The only switch is the environment name, read from STRUCTEDIT_ENV:

    development (default)   invalid indices raise InvalidIndexError
    production              invalid indices are a logged no-op

Settings are loaded once at import.  Tests and embedding applications can
swap them with `configure`, which hands back the previous settings.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_VAR = "STRUCTEDIT_ENV"
DEFAULT_ENV = "development"
PRODUCTION = "production"


@dataclass(frozen=True)
class Settings:
    env: str = DEFAULT_ENV

    @property
    def production(self) -> bool:
        return self.env == PRODUCTION


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the process environment (or the given mapping)."""
    if environ is None:
        environ = os.environ
    env = environ.get(ENV_VAR, "").strip().lower() or DEFAULT_ENV
    return Settings(env=env)


_settings = load_settings()


def get_settings() -> Settings:
    return _settings


def configure(**changes) -> Settings:
    """
    Replace the active settings, returning the ones they replaced.

        previous = configure(env="production")
        ...
        configure(env=previous.env)
    """
    global _settings
    previous = _settings
    _settings = replace(previous, **changes)
    logger.debug("structedit settings changed: %r -> %r", previous, _settings)
    return previous
