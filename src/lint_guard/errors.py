"""Exception types raised while resolving rule configuration."""


class LintGuardError(Exception):
    """Base class for user-facing resolution failures."""


class ConfigError(LintGuardError):
    """An upstream ruleset or sharable config is unknown, missing, or invalid."""


class PluginLoadError(LintGuardError):
    """A plugin-qualified rule names a plugin that is not available."""


class RuleLoadError(LintGuardError):
    """A core rule name does not match any builtin rule."""


class ModuleAcquisitionError(Exception):
    """A module was found but raised while being imported."""

    def __init__(self, specifier: str, cause: BaseException) -> None:
        super().__init__(str(cause))
        self.specifier = specifier
        self.cause = cause
