"""Version helpers for package and CLI metadata."""

from importlib.metadata import version

PACKAGE_NAME = "lint-guard"
PACKAGE_VERSION: str = version(PACKAGE_NAME)
