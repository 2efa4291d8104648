"""Load build-husky settings from a project's pyproject.toml."""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from build_husky import TOOL_NAME
from build_husky.errors import ConfigError
from build_husky.models.config import HuskyConfig

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"


def read_tool_table(pyproject: Path) -> Dict[str, Any]:
    """Return the ``[tool.build-husky]`` table, or an empty dict."""
    if not pyproject.is_file():
        return {}
    try:
        with open(pyproject, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {pyproject}: {e}") from e

    table = data.get("tool", {}).get(TOOL_NAME, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{TOOL_NAME}] in {pyproject} must be a table")
    return table


def load_config(
    project_root: Path, overrides: Optional[Dict[str, Any]] = None
) -> HuskyConfig:
    """Build a HuskyConfig from pyproject.toml plus explicit overrides.

    Overrides use field names (``run_lint``) and win over the file; a value
    of None leaves the file's setting in place.
    """
    pyproject = Path(project_root) / PYPROJECT
    table = read_tool_table(pyproject)
    logger.debug("Loaded [tool.%s] from %s: %s", TOOL_NAME, pyproject, table)

    try:
        config = HuskyConfig.model_validate(table)
    except ValidationError as e:
        raise ConfigError(f"Invalid [tool.{TOOL_NAME}] in {pyproject}:\n{e}") from e

    if overrides:
        updates = {k: v for k, v in overrides.items() if v is not None}
        config = config.model_copy(update=updates)
    return config
