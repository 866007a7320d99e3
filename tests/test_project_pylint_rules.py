"""Tests for custom project pylint rules."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

_SRC_DIR = Path(__file__).resolve().parents[1] / "src"


def _run_pylint(*, target: Path, enable: str) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = str(_SRC_DIR)
    return subprocess.run(
        [
            sys.executable,
            "-m",
            "pylint",
            str(target),
            "-rn",
            "-sn",
            "--disable=all",
            f"--enable={enable}",
            "--load-plugins=project_pylint_rules",
        ],
        check=False,
        capture_output=True,
        text=True,
        env=env,
    )


def _run_pylint_for_source(
    *,
    tmp_path: Path,
    source: str,
    enable: str,
) -> subprocess.CompletedProcess[str]:
    file_path = tmp_path / "lint_target.py"
    file_path.write_text(source, encoding="utf-8")
    return _run_pylint(target=file_path, enable=enable)


def test_prefer_optional_rule_triggers_for_pipe_none(tmp_path: Path) -> None:
    """The custom rule should reject ``T | None`` syntax."""
    result = _run_pylint_for_source(
        tmp_path=tmp_path,
        source=("from __future__ import annotations\nvalue: str | None = None\n"),
        enable="prefer-optional",
    )
    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode != 0, combined_output
    assert "prefer-optional" in combined_output, combined_output


def test_no_object_annotation_rule_triggers(tmp_path: Path) -> None:
    """Dynamic values are annotated ``Any``, not ``object``."""
    result = _run_pylint_for_source(
        tmp_path=tmp_path,
        source=("def convert(value: object) -> None:\n    return None\n"),
        enable="no-object-annotation",
    )
    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode != 0, combined_output
    assert "no-object-annotation" in combined_output, combined_output


def test_int_check_before_bool_triggers(tmp_path: Path) -> None:
    """An ``int`` test ahead of the ``bool`` test on the same name is reported."""
    result = _run_pylint_for_source(
        tmp_path=tmp_path,
        source=(
            "def classify(value):\n"
            "    if isinstance(value, int):\n"
            "        return 'number'\n"
            "    if isinstance(value, bool):\n"
            "        return 'boolean'\n"
            "    return 'other'\n"
        ),
        enable="int-check-before-bool",
    )
    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode != 0, combined_output
    assert "int-check-before-bool" in combined_output, combined_output


def test_bool_check_before_int_passes(tmp_path: Path) -> None:
    """Testing ``bool`` first is the expected order."""
    result = _run_pylint_for_source(
        tmp_path=tmp_path,
        source=(
            "def classify(value):\n"
            "    if isinstance(value, bool):\n"
            "        return 'boolean'\n"
            "    if isinstance(value, (int, float)):\n"
            "        return 'number'\n"
            "    return 'other'\n"
        ),
        enable="int-check-before-bool",
    )
    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode == 0, combined_output


def test_package_sources_follow_project_rules() -> None:
    """The converter package itself passes every project rule."""
    result = _run_pylint(
        target=_SRC_DIR / "json_dynamic_converter",
        enable="prefer-optional,no-object-annotation,int-check-before-bool",
    )
    combined_output = f"{result.stdout}\n{result.stderr}"
    assert result.returncode == 0, combined_output
