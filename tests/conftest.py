"""Shared pytest fixtures for Grove tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from grove.core.repository import Repository


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep ~/.groveconfig and GROVE_* settings from leaking into tests."""
    home = tmp_path / 'home'
    home.mkdir()
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.delenv('GROVE_COLOR_UI', raising=False)
    monkeypatch.delenv('GROVE_CORE_LOGLEVEL', raising=False)
    return home


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def write_file(repo):
    """Write a file into the repository work tree and return its path."""
    def _write(name, content):
        path = repo.work_tree / name
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def repo_with_commits(repo, write_file):
    """
    Repository with two commits.
    
    First commit: a.txt = "hello\\n"
    Second commit: a.txt = "hello\\nworld\\n", b.txt = "new file\\n"
    """
    repo.add(write_file('a.txt', 'hello\n'))
    first = repo.commit('first', timestamp='2026-01-01T00:00:00.000Z')
    
    repo.add(write_file('a.txt', 'hello\nworld\n'))
    repo.add(write_file('b.txt', 'new file\n'))
    second = repo.commit('second', timestamp='2026-01-02T00:00:00.000Z')
    
    repo.commit_hashes = [first, second]
    return repo
