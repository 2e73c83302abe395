"""Resolve ``extends`` references to rule configuration mappings."""


import json
import logging
import pprint
from importlib.resources import files
from typing import Any

from .constants import (
    CORE_RULESET_PATTERN,
    CORE_RULESETS_DIRNAME,
    RULESET_FILE_PREFIX,
    SHARABLE_CONFIG_PREFIX,
)
from .errors import ConfigError, ModuleAcquisitionError
from .modules import DEFAULT_RESOLVER, ModuleResolver
from .plugins import get_field
from .schema import validate_sharable_config

logger = logging.getLogger(__name__)


def is_core_ruleset(upstream: str) -> bool:
    """Return whether ``upstream`` names a builtin ruleset such as ``lintguard:all``."""
    return CORE_RULESET_PATTERN.fullmatch(upstream) is not None


def _read_core_ruleset(identifier: str) -> dict[str, Any]:
    """Read the packaged ruleset file for ``identifier``."""
    resource = files("lint_guard").joinpath(
        f"{CORE_RULESETS_DIRNAME}/{RULESET_FILE_PREFIX}{identifier}.json"
    )
    payload = json.loads(resource.read_text(encoding="utf-8"))
    return dict(payload["rules"])


def _install_guidance(config_name: str) -> str:
    return (
        f'The sharable config "{config_name}" is not installed. '
        "If lint-guard is installed globally, install the config globally using "
        f'"pipx inject lint-guard {config_name}". Else install locally using '
        f'"pip install {config_name}".'
    )


def resolve_upstream(
    upstream: str, resolver: ModuleResolver | None = None
) -> dict[str, Any]:
    """Return the rule configs exported by a core ruleset or sharable config.

    Args:
        upstream: Either ``lintguard:<identifier>`` or the short name of a
            ``lint-guard-config-*`` package.
        resolver: Module resolver used for sharable configs. Defaults to
            importing from the current environment.

    Raises:
        ConfigError: If the ruleset is unknown, not installed, fails to load,
            or does not pass schema validation.
    """
    if is_core_ruleset(upstream):
        identifier = upstream.split(":")[1]
        try:
            return _read_core_ruleset(identifier)
        except Exception as exc:
            logger.debug("Core ruleset %s could not be read", upstream, exc_info=exc)
            raise ConfigError(f'"{upstream}" is not a core ruleset.') from exc

    config_name = SHARABLE_CONFIG_PREFIX + upstream
    active_resolver = DEFAULT_RESOLVER if resolver is None else resolver

    try:
        config = active_resolver.acquire(config_name)
    except ModuleNotFoundError as exc:
        logger.debug("Sharable config %s not found", config_name, exc_info=exc)
        raise ConfigError(_install_guidance(config_name)) from exc
    except ModuleAcquisitionError as exc:
        logger.debug("Sharable config %s failed to load", config_name, exc_info=exc)
        raise ConfigError(
            f'The sharable config "{config_name}" could not be loaded: {exc}'
        ) from exc

    result = validate_sharable_config(config)
    if result.valid:
        return dict(get_field(config, "rules"))

    raise ConfigError(
        f'Invalid sharable config "{config_name}". Validation errors:\n'
        + pprint.pformat(list(result.errors))
    )
