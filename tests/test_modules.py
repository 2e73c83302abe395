"""Tests for importing sharable configs and plugins from the environment."""

from __future__ import annotations

import importlib
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from lint_guard.config import load_plugins
from lint_guard.errors import ConfigError, ModuleAcquisitionError, PluginLoadError
from lint_guard.modules import ImportlibModuleResolver, import_name_for
from lint_guard.upstream import resolve_upstream


@pytest.fixture
def module_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Put ``tmp_path`` on ``sys.path`` and forget test modules afterwards."""
    monkeypatch.syspath_prepend(str(tmp_path))
    before = set(sys.modules)
    yield tmp_path
    for name in set(sys.modules) - before:
        if name.startswith("lint_guard_config_") or name.startswith("lint_guard_plugin_"):
            del sys.modules[name]


def _write_module(directory: Path, name: str, source: str) -> None:
    (directory / f"{name}.py").write_text(source, encoding="utf-8")
    importlib.invalidate_caches()


def test_import_name_replaces_dashes() -> None:
    """Distribution names map onto importable module names."""
    assert import_name_for("lint-guard-config-acme") == "lint_guard_config_acme"


def test_acquire_imports_installed_module(module_dir: Path) -> None:
    """Installed packages are imported by their distribution name."""
    _write_module(module_dir, "lint_guard_config_tmpok", 'rules = {"quotes": "error"}\n')

    module = ImportlibModuleResolver().acquire("lint-guard-config-tmpok")

    assert module.rules == {"quotes": "error"}


def test_acquire_missing_module_raises_not_found(module_dir: Path) -> None:
    """A missing target surfaces as ``ModuleNotFoundError``."""
    with pytest.raises(ModuleNotFoundError):
        ImportlibModuleResolver().acquire("lint-guard-config-tmpabsent")


def test_acquire_missing_dotted_module_raises_not_found(module_dir: Path) -> None:
    """A missing parent package of a dotted name still means not installed."""
    with pytest.raises(ModuleNotFoundError):
        ImportlibModuleResolver().acquire("lint-guard-config-tmpacme.strict")


def test_missing_dotted_sharable_config_gives_install_guidance(
    module_dir: Path,
) -> None:
    """Dotted sharable config names get install help, not a load failure."""
    with pytest.raises(ConfigError) as raised:
        resolve_upstream("tmpacme.strict")

    message = str(raised.value)
    assert '"lint-guard-config-tmpacme.strict" is not installed' in message
    assert "pipx inject lint-guard lint-guard-config-tmpacme.strict" in message


def test_missing_dotted_plugin_is_plugin_load_error(module_dir: Path) -> None:
    """Plugin imports classify a missing parent package the same way."""
    with pytest.raises(PluginLoadError, match="pip install lint-guard-plugin-tmpsec.extra"):
        load_plugins(["tmpsec.extra"])


def test_acquire_missing_dependency_is_acquisition_error(module_dir: Path) -> None:
    """A missing transitive import means the target itself was found."""
    _write_module(module_dir, "lint_guard_config_tmpdep", "import lint_guard_tmp_no_such_dependency\n")

    with pytest.raises(ModuleAcquisitionError) as raised:
        ImportlibModuleResolver().acquire("lint-guard-config-tmpdep")

    assert raised.value.specifier == "lint-guard-config-tmpdep"
    assert isinstance(raised.value.cause, ModuleNotFoundError)


def test_resolve_upstream_with_real_import(module_dir: Path) -> None:
    """Sharable configs resolve end to end through ``importlib``."""
    _write_module(module_dir, "lint_guard_config_tmpteam", 'rules = {"max-len": ["warning", 100]}\n')
    _write_module(module_dir, "lint_guard_config_tmpraise", 'raise RuntimeError("config exploded")\n')

    assert resolve_upstream("tmpteam") == {"max-len": ["warning", 100]}
    with pytest.raises(ConfigError, match="could not be loaded: config exploded"):
        resolve_upstream("tmpraise")
