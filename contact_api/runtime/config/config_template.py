"""Render ``config.yaml`` with environment placeholders and validate it.

Placeholders follow shell parameter expansion:

- ``${NAME}`` must be set
- ``${NAME:-fallback}`` uses ``fallback`` when ``NAME`` is unset
- ``${NAME:?reason}`` must be set, ``reason`` ends up in the error
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic_core import ValidationError

from contact_api.runtime.config.config_data import ConfigData

PLACEHOLDER = re.compile(r"\$\{(?P<name>[^}:]+)(?:(?P<op>:[-?])(?P<arg>[^}]*))?\}")
ENVIRONMENT_VARIABLE = "APP_ENVIRONMENT"


def _resolve(match: re.Match[str]) -> str:
    name, op, arg = match.group("name", "op", "arg")
    value = os.environ.get(name)
    if value is not None:
        return value
    if op == ":-":
        return arg
    if op == ":?":
        raise ValueError(f"Required environment variable {name}: {arg}")
    raise ValueError(f"Required environment variable {name} not set")


def substitute_env_vars(text: str) -> str:
    """Replace every ``${...}`` placeholder in ``text``."""
    return PLACEHOLDER.sub(_resolve, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Promote ``<ENV>_``-prefixed variables to their unprefixed names.

    With ``APP_ENVIRONMENT=production``, ``PRODUCTION_JWT_SECRET_KEY`` becomes
    ``JWT_SECRET_KEY`` before the YAML template is rendered.
    """
    prefix = f"{env_mode.upper()}_"
    promoted = {
        name.removeprefix(prefix): value
        for name, value in os.environ.items()
        if name.startswith(prefix) and name != prefix
    }
    if promoted:
        logger.info("Applying {} overrides: {}", env_mode, sorted(promoted))
    os.environ.update(promoted)


def _parse(rendered: str) -> dict[str, Any]:
    try:
        document = yaml.safe_load(rendered)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not isinstance(document, dict):
        raise ValueError("Configuration file must contain a mapping")
    return document.get("config") or {}


def load_templated_yaml(file_path: Path) -> ConfigData:
    """Load ``file_path`` into a validated :class:`ConfigData`.

    Raises:
        FileNotFoundError: the file does not exist
        ValueError: a required variable is missing, the YAML is broken,
            or a value fails validation
    """
    env_mode = os.getenv(ENVIRONMENT_VARIABLE, "development")
    logger.info("Loading configuration {} for environment {}", file_path, env_mode)
    apply_environment_overrides(env_mode)

    section = _parse(substitute_env_vars(Path(file_path).read_text()))
    try:
        return ConfigData(**section)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
