import importlib
import subprocess
import sys
from pathlib import Path

import pytest

import envkit


def test_lazy_exports_resolve() -> None:
    from envkit import runtime_env

    assert envkit.get_list is runtime_env.get_list
    assert envkit.EnvAccessor is runtime_env.EnvAccessor
    assert envkit.EnvNotSetError is importlib.import_module("envkit.errors").EnvNotSetError


def test_every_export_is_resolvable() -> None:
    for name in envkit.__all__:
        assert getattr(envkit, name) is not None


def test_unknown_attribute_raises() -> None:
    with pytest.raises(AttributeError):
        envkit.not_a_real_export  # noqa: B018


def test_accessors_import_without_colorama() -> None:
    root = Path(__file__).parent.parent
    code = "import sys, envkit.runtime_env; print('colorama' in sys.modules)"
    result = subprocess.run(
        [sys.executable, "-c", code],
        cwd=root,
        capture_output=True,
        text=True,
        check=True,
    )
    assert result.stdout.strip() == "False"


def test_colorama_is_declared_for_windows_only() -> None:
    tomllib = pytest.importorskip("tomllib")
    root = Path(__file__).parent.parent
    with open(root / "pyproject.toml", "rb") as fh:
        project = tomllib.load(fh)["project"]
    colorama = [d for d in project["dependencies"] if d.startswith("colorama")]
    assert colorama
    assert all('sys_platform == "win32"' in d for d in colorama)
