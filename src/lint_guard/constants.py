"""Namespace tokens shared by resolution and config merging."""


import re

NAMESPACE = "lintguard"

RULESET_ALL = f"{NAMESPACE}:all"
RULESET_RECOMMENDED = f"{NAMESPACE}:recommended"

CORE_RULES_DIRNAME = "rules"
CORE_RULES_DIRPATH = f"lint_guard/{CORE_RULES_DIRNAME}"

CORE_RULESETS_DIRNAME = "rulesets"
RULESET_FILE_PREFIX = f"{NAMESPACE}-"

PLUGIN_PREFIX = "lint-guard-plugin-"
SHARABLE_CONFIG_PREFIX = "lint-guard-config-"

CORE_RULESET_PATTERN = re.compile(rf"{NAMESPACE}:[a-z_]+")

__all__ = [
    "CORE_RULESETS_DIRNAME",
    "CORE_RULESET_PATTERN",
    "CORE_RULES_DIRNAME",
    "CORE_RULES_DIRPATH",
    "NAMESPACE",
    "PLUGIN_PREFIX",
    "RULESET_ALL",
    "RULESET_FILE_PREFIX",
    "RULESET_RECOMMENDED",
    "SHARABLE_CONFIG_PREFIX",
]
