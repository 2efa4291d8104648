"""Tests for configuration loading."""

import pytest

from build_husky.core.config import load_config
from build_husky.errors import ConfigError
from build_husky.models.config import HuskyConfig


def test_defaults_without_pyproject(temp_dir):
    """No pyproject.toml means pre-push running the tests."""
    config = load_config(temp_dir)

    assert config == HuskyConfig()
    assert config.hook_names == ["pre-push"]
    assert [g.label for g in config.command_groups] == ["pytest"]


def test_pyproject_without_table(temp_dir):
    """A pyproject.toml without our table yields defaults."""
    (temp_dir / "pyproject.toml").write_text('[project]\nname = "demo"\n')
    assert load_config(temp_dir) == HuskyConfig()


def test_reads_tool_table(temp_dir):
    """Hyphenated keys in [tool.build-husky] are honoured."""
    (temp_dir / "pyproject.toml").write_text(
        "[tool.build-husky]\n"
        "prepush-hook = false\n"
        "precommit-hook = true\n"
        "postmerge-hook = true\n"
        "run-lint = true\n"
        'test-command = "pytest -x"\n'
    )
    config = load_config(temp_dir)

    assert config.hook_names == ["pre-commit", "post-merge"]
    assert [g.commands for g in config.command_groups] == [
        ["pytest -x"],
        ["ruff check ."],
    ]


def test_fixed_group_order():
    """Groups always run tests, lint, format regardless of how they were set."""
    config = HuskyConfig(run_format=True, run_lint=True, run_tests=True)
    assert [g.label for g in config.command_groups] == [
        "pytest",
        "ruff check .",
        "ruff format --check .",
    ]


def test_overrides_win(temp_dir):
    """Explicit overrides replace file values; None leaves them alone."""
    (temp_dir / "pyproject.toml").write_text(
        "[tool.build-husky]\nrun-lint = true\nprecommit-hook = true\n"
    )
    config = load_config(temp_dir, {"run_lint": False, "precommit_hook": None})

    assert config.run_lint is False
    assert config.precommit_hook is True


def test_unknown_key_rejected(temp_dir):
    """Typos in the table are reported rather than ignored."""
    (temp_dir / "pyproject.toml").write_text("[tool.build-husky]\nprecomit-hook = true\n")

    with pytest.raises(ConfigError, match="Invalid"):
        load_config(temp_dir)


def test_invalid_toml(temp_dir):
    """Broken TOML is a ConfigError."""
    (temp_dir / "pyproject.toml").write_text("[tool.build-husky\n")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(temp_dir)


def test_table_must_be_a_table(temp_dir):
    """A scalar under the tool name is rejected."""
    (temp_dir / "pyproject.toml").write_text('[tool]\nbuild-husky = "yes"\n')

    with pytest.raises(ConfigError, match="must be a table"):
        load_config(temp_dir)


def test_hook_specs_share_groups():
    """Every enabled hook gets the same command groups."""
    specs = HuskyConfig(precommit_hook=True, run_lint=True).hook_specs()

    assert [s.name for s in specs] == ["pre-push", "pre-commit"]
    assert specs[0].groups == specs[1].groups
