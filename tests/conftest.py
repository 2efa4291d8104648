"""Shared fixtures for build-husky tests."""

import tempfile
from pathlib import Path

import pytest
from git import Repo


@pytest.fixture
def temp_dir():
    """A resolved temporary directory."""
    with tempfile.TemporaryDirectory() as temp:
        yield Path(temp).resolve()


@pytest.fixture
def temp_git_project(temp_dir):
    """Create a temporary git project with one commit."""
    project_path = temp_dir / "repo"
    project_path.mkdir()

    repo = Repo.init(project_path)
    with repo.config_writer() as config:
        config.set_value("user", "name", "Test User")
        config.set_value("user", "email", "test@example.com")

    (project_path / "main.py").write_text("print('hello')\n")
    repo.index.add(["main.py"])
    repo.index.commit("Initial commit")

    yield project_path


@pytest.fixture
def out_dir(temp_git_project):
    """A nested build output directory inside the git project."""
    path = temp_git_project / "build" / "lib" / "pkg-abc" / "out"
    path.mkdir(parents=True)
    return path
