"""Feature toggles selecting which hooks and command groups to install."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .hook import CommandGroup, HookSpec


class HuskyConfig(BaseModel):
    """Settings read from ``[tool.build-husky]`` in pyproject.toml."""

    prepush_hook: bool = Field(True, alias="prepush-hook")
    precommit_hook: bool = Field(False, alias="precommit-hook")
    postmerge_hook: bool = Field(False, alias="postmerge-hook")

    run_tests: bool = Field(True, alias="run-tests")
    run_lint: bool = Field(False, alias="run-lint")
    run_format: bool = Field(False, alias="run-format")

    test_command: str = Field("pytest", alias="test-command")
    lint_command: str = Field("ruff check .", alias="lint-command")
    format_command: str = Field("ruff format --check .", alias="format-command")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @property
    def hook_names(self) -> List[str]:
        """Enabled hook names in install order."""
        names = []
        if self.prepush_hook:
            names.append("pre-push")
        if self.precommit_hook:
            names.append("pre-commit")
        if self.postmerge_hook:
            names.append("post-merge")
        return names

    @property
    def command_groups(self) -> List[CommandGroup]:
        """Enabled command groups in the order the hook runs them."""
        groups = []
        if self.run_tests:
            groups.append(CommandGroup(label=self.test_command, commands=[self.test_command]))
        if self.run_lint:
            groups.append(CommandGroup(label=self.lint_command, commands=[self.lint_command]))
        if self.run_format:
            groups.append(
                CommandGroup(label=self.format_command, commands=[self.format_command])
            )
        return groups

    def hook_specs(self) -> List[HookSpec]:
        """One HookSpec per enabled hook, all sharing the enabled groups."""
        groups = self.command_groups
        return [HookSpec(name=name, groups=groups) for name in self.hook_names]
