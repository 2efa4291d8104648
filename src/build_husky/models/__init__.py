"""Data models for Build Husky."""

from .config import HuskyConfig
from .hook import CommandGroup, HookSpec, HookState, InstallResult

__all__ = ["CommandGroup", "HookSpec", "HookState", "HuskyConfig", "InstallResult"]
