"""Install generated hook scripts into a git metadata directory."""

import logging
import os
from itertools import islice
from pathlib import Path
from typing import List, Optional, Protocol, TextIO, Union

from build_husky import __version__
from build_husky.core.resolver import resolve_metadata_dir
from build_husky.core.script import MARKER_LINE, marker, render_script
from build_husky.errors import HuskyIOError
from build_husky.models.config import HuskyConfig
from build_husky.models.hook import HookSpec, HookState, InstallResult

logger = logging.getLogger(__name__)

HOOK_MODE = 0o755


class ExecutableFileCreator(Protocol):
    """Creates (truncating) a file that git is able to execute."""

    def create(self, path: Path) -> TextIO:
        ...


class PosixFileCreator:
    """Creates hook files with mode 0755."""

    def create(self, path: Path) -> TextIO:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, HOOK_MODE)
        # The mode only applies to new files, and the umask may strip bits.
        try:
            os.fchmod(fd, HOOK_MODE)
        except OSError:
            os.close(fd)
            raise
        return os.fdopen(fd, "w", encoding="utf-8", newline="\n")


class PlainFileCreator:
    """Creates hook files on platforms without POSIX permission bits."""

    def create(self, path: Path) -> TextIO:
        return open(path, "w", encoding="utf-8", newline="\n")


def default_creator() -> ExecutableFileCreator:
    """Pick the file creator for the running platform."""
    if os.name == "posix":
        return PosixFileCreator()
    return PlainFileCreator()


def hook_path(metadata_dir: Path, name: str) -> Path:
    """Path of hook ``name`` inside ``metadata_dir``."""
    return Path(metadata_dir) / "hooks" / name


def _marker_line(path: Path) -> Optional[str]:
    try:
        with open(path, encoding="utf-8") as f:
            return next(islice(f, MARKER_LINE, MARKER_LINE + 1), None)
    except (OSError, UnicodeDecodeError):
        return None


def hook_already_installed(path: Path, version: str = __version__) -> bool:
    """Check whether ``path`` holds a hook installed by this version.

    Only the marker line is inspected. An unreadable or short file counts
    as not installed.
    """
    line = _marker_line(path)
    return line is not None and marker(version) in line


def hook_status(metadata_dir: Path, name: str, version: str = __version__) -> HookState:
    """Classify the hook file ``name`` for reporting."""
    path = hook_path(metadata_dir, name)
    if not path.exists():
        return HookState.MISSING
    if hook_already_installed(path, version):
        return HookState.CURRENT
    return HookState.FOREIGN


def install_hook(
    metadata_dir: Path,
    spec: HookSpec,
    *,
    version: str = __version__,
    out_dir: Union[str, Path] = "",
    creator: Optional[ExecutableFileCreator] = None,
) -> InstallResult:
    """Write the script for ``spec`` unless this version already installed it.

    Raises:
        HuskyIOError: The hooks directory or the script could not be written.
    """
    path = hook_path(metadata_dir, spec.name)

    if hook_already_installed(path, version):
        logger.info("Hook %s already installed by v%s, leaving it", path, version)
        return InstallResult(name=spec.name, path=path, written=False)

    script = render_script(spec.groups, version=version, out_dir=out_dir)
    creator = creator or default_creator()

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with creator.create(path) as f:
            f.write(script)
    except OSError as e:
        raise HuskyIOError(path, e) from e

    logger.info("Installed %s hook at %s", spec.name, path)
    return InstallResult(name=spec.name, path=path, written=True)


def install_hooks(
    start: Path,
    config: Optional[HuskyConfig] = None,
    *,
    version: str = __version__,
    creator: Optional[ExecutableFileCreator] = None,
) -> List[InstallResult]:
    """Install every hook enabled in ``config`` into the repository above ``start``.

    Args:
        start: Build output directory the metadata search begins from.
        config: Enabled hooks and command groups; defaults to HuskyConfig().
        version: Version written into, and looked for in, the marker line.
        creator: File creator override, mostly for tests.

    Returns:
        One InstallResult per enabled hook, in install order.
    """
    config = config or HuskyConfig()
    specs = config.hook_specs()
    if not specs:
        logger.info("No hooks enabled, nothing to install")
        return []

    metadata_dir = resolve_metadata_dir(start)
    return [
        install_hook(
            metadata_dir, spec, version=version, out_dir=start, creator=creator
        )
        for spec in specs
    ]
