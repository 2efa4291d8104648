"""Locate the git metadata directory enclosing a build output directory.

The search starts at the build output directory (``OUT_DIR``), not the
current working directory, and walks up towards the filesystem root. A
``.git`` entry may be the metadata directory itself or, for worktrees and
submodules, a file whose single line points at the real one.
"""

import logging
from pathlib import Path
from typing import Mapping

from build_husky.errors import EnvironmentUnreadable, HuskyIOError, MetadataNotFound

logger = logging.getLogger(__name__)

OUT_DIR_VAR = "OUT_DIR"
GITDIR_PREFIX = "gitdir:"


def read_out_dir(environ: Mapping[str, str], var: str = OUT_DIR_VAR) -> Path:
    """Return the build output directory named by ``var`` in ``environ``."""
    try:
        value = environ[var]
    except KeyError:
        raise EnvironmentUnreadable(var, "is not set") from None

    # os.environ hands undecodable bytes back as lone surrogates
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EnvironmentUnreadable(var, f"is not valid text: {value!r}") from e

    if not value:
        raise EnvironmentUnreadable(var, "is empty")
    return Path(value)


def _follow_gitdir_file(gitfile: Path, start: Path) -> Path:
    """Dereference a ``.git`` file to the directory it points at."""
    try:
        content = gitfile.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MetadataNotFound(start, f"{gitfile} is not a text file") from e
    except OSError as e:
        raise HuskyIOError(gitfile, e) from e

    # Only the line terminator is trimmed, trailing spaces belong to the path.
    reference = content.rstrip("\r\n")
    if reference.startswith(GITDIR_PREFIX):
        reference = reference[len(GITDIR_PREFIX):].lstrip()

    target = Path(reference)
    if not target.is_absolute():
        target = (gitfile.parent / target).resolve()

    if not reference or not target.is_dir():
        raise MetadataNotFound(start, f"{gitfile} points to '{reference}'")

    logger.debug("Followed %s to %s", gitfile, target)
    return target


def resolve_metadata_dir(start: Path) -> Path:
    """Find the git metadata directory at or above ``start``.

    Args:
        start: Directory to begin the search from, usually the build output
            directory.

    Returns:
        Absolute path of the ``.git`` directory, or of the directory a
        ``.git`` file refers to.

    Raises:
        MetadataNotFound: Nothing was found up to the filesystem root, or a
            ``.git`` file points somewhere that is not a directory.
    """
    start = Path(start)
    current = start if start.is_absolute() else start.resolve()

    while True:
        candidate = current / ".git"
        if candidate.is_dir():
            logger.debug("Found git directory %s", candidate)
            return candidate
        if candidate.is_file():
            return _follow_gitdir_file(candidate, start)

        parent = current.parent
        if parent == current:
            raise MetadataNotFound(start)
        current = parent
