"""Hook models describing what gets written into .git/hooks."""

from enum import Enum
from pathlib import Path
from typing import List

from pydantic import BaseModel


class CommandGroup(BaseModel):
    """A labelled block of shell commands run by a hook."""

    label: str
    commands: List[str]

    def render(self) -> List[str]:
        """Shell lines for this group: an echoed label, then the commands."""
        label = self.label.replace("'", "'\\''")
        return [f"echo '+{label}'", *self.commands]


class HookSpec(BaseModel):
    """A hook name and the command groups its script runs, in order."""

    name: str
    groups: List[CommandGroup] = []


class HookState(str, Enum):
    """State of a hook file as seen by this version of build-husky."""

    MISSING = "missing"
    CURRENT = "current"
    FOREIGN = "foreign"


class InstallResult(BaseModel):
    """Outcome of installing a single hook."""

    name: str
    path: Path
    written: bool

