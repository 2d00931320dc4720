"""Process-wide configuration held in a ContextVar.

Tests and scripts swap the configuration with :func:`with_context`; the HTTP
app captures it once in :func:`contact_api.api.http.app.create_app`.
"""

import os
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel

from contact_api.runtime.config.config_data import ConfigData
from contact_api.runtime.config.config_template import load_templated_yaml

CONFIG_FILE_ENV_VAR = "APP_CONFIG_FILE"


@dataclass(frozen=True)
class AppContext:
    config: ConfigData


def load_default_config() -> ConfigData:
    """Load ``config.yaml`` (or ``$APP_CONFIG_FILE``), falling back to model defaults."""
    path = Path(os.getenv(CONFIG_FILE_ENV_VAR, "config.yaml"))
    if not path.exists():
        logger.warning("Configuration file {} not found; using defaults", path)
        return ConfigData()
    return load_templated_yaml(path)


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=AppContext(config=load_default_config())
)


def get_context() -> AppContext:
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    return _app_context.set(context)


def _overlay(base: dict[str, Any], override: BaseModel) -> dict[str, Any]:
    """Write the explicitly set fields of ``override`` over ``base``.

    Nested models recurse, so ``JWTConfig(clock_skew=5)`` leaves the other
    JWT settings of ``base`` alone.
    """
    merged = dict(base)
    for name in override.model_fields_set:
        value = getattr(override, name)
        if isinstance(value, BaseModel) and isinstance(merged.get(name), dict):
            merged[name] = _overlay(merged[name], value)
        else:
            merged[name] = value
    return merged


def merge_configs(base_config: ConfigData, override_config: ConfigData) -> ConfigData:
    return ConfigData.model_validate(_overlay(base_config.model_dump(), override_config))


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily layer ``config_override`` over the current configuration.

    Example:
        with with_context(ConfigData(jwt=JWTConfig(expiration_time_ms=1000))):
            assert get_config().jwt.expiration_time_ms == 1000
    """
    if config_override is None:
        yield
        return
    if not isinstance(config_override, ConfigData):
        raise TypeError(f"config_override must be ConfigData or None, got {type(config_override)}")

    merged = merge_configs(get_config(), config_override)
    token = set_context(replace(get_context(), config=merged))
    try:
        yield
    finally:
        _app_context.reset(token)


def get_config() -> ConfigData:
    return get_context().config
