"""Build Husky - install git hooks from a project's build step."""

__version__ = "0.3.0"
__homepage__ = "https://github.com/build-husky/build-husky"

TOOL_NAME = "build-husky"

from build_husky.core.installer import install_hook, install_hooks  # noqa: E402
from build_husky.core.resolver import read_out_dir, resolve_metadata_dir  # noqa: E402
from build_husky.core.script import render_script  # noqa: E402
from build_husky.core.config import load_config  # noqa: E402

__all__ = [
    "TOOL_NAME",
    "__version__",
    "install_hook",
    "install_hooks",
    "load_config",
    "read_out_dir",
    "render_script",
    "resolve_metadata_dir",
]
