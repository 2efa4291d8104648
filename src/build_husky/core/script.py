"""Render the shell script written into a git hook."""

from pathlib import Path
from typing import Iterable, Optional, Union

from build_husky import TOOL_NAME, __homepage__, __version__
from build_husky.models.hook import CommandGroup

# Line index of the marker comment; installed hooks are recognised by it.
MARKER_LINE = 2

SCRIPT_TEMPLATE = """#!/bin/sh
#
# This hook was set by {tool} v{version}: {homepage}
# Generated by script {generator}
# Output at {out_dir}
#

set -e
{body}
"""


def marker(version: str = __version__) -> str:
    """The substring identifying a hook installed by this version."""
    return f"set by {TOOL_NAME} v{version}:"


def default_generator() -> Path:
    """Path of the module that generates hook scripts."""
    return Path(__file__).resolve()


def render_script(
    groups: Iterable[CommandGroup],
    *,
    version: str = __version__,
    homepage: str = __homepage__,
    generator: Optional[Union[str, Path]] = None,
    out_dir: Union[str, Path] = "",
) -> str:
    """Produce the full text of a hook script.

    The third line carries the ``set by build-husky v<version>: <homepage>``
    marker, followed by ``set -e`` and, for each group in order, an echo of
    its label and its commands.
    """
    if generator is None:
        generator = default_generator()

    body = "".join(
        "\n" + "\n".join(group.render()) for group in groups
    )
    return SCRIPT_TEMPLATE.format(
        tool=TOOL_NAME,
        version=version,
        homepage=homepage,
        generator=generator,
        out_dir=out_dir,
        body=body,
    )
