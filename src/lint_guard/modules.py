"""Module acquisition for sharable configs and plugins."""


import importlib
import logging
from typing import Protocol

from .errors import ModuleAcquisitionError

logger = logging.getLogger(__name__)


class ModuleResolver(Protocol):
    """Load a module by package name.

    Implementations raise ``ModuleNotFoundError`` when the requested package
    does not exist and ``ModuleAcquisitionError`` when it exists but fails
    while loading. Callers rely on the two being distinct.
    """

    def acquire(self, specifier: str) -> object:
        """Return the loaded module for ``specifier``."""
        ...


def import_name_for(package_name: str) -> str:
    """Map a distribution name such as ``lint-guard-config-x`` to its import name."""
    return package_name.replace("-", "_")


def _names_target(missing: str | None, module_name: str) -> bool:
    """Return whether a missing module is ``module_name`` or one of its parents."""
    if missing is None:
        return False
    return missing == module_name or module_name.startswith(missing + ".")


class ImportlibModuleResolver:
    """Resolve packages installed in the running interpreter's environment."""

    def acquire(self, specifier: str) -> object:
        """Import ``specifier`` and separate missing packages from broken ones."""
        module_name = import_name_for(specifier)
        logger.debug("Importing %s as %s", specifier, module_name)
        try:
            return importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            # A missing transitive import means the target itself was found.
            if _names_target(exc.name, module_name):
                raise
            raise ModuleAcquisitionError(specifier, exc) from exc
        except Exception as exc:
            raise ModuleAcquisitionError(specifier, exc) from exc


DEFAULT_RESOLVER = ImportlibModuleResolver()
