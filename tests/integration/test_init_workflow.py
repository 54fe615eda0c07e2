"""Integration tests for grove init."""

import pytest
from click.testing import CliRunner
from grove.cli.main import cli


def test_init_creates_grove_directory(temp_dir):
    runner = CliRunner()
    result = runner.invoke(cli, ['init', str(temp_dir)])
    
    assert result.exit_code == 0
    assert 'Initialized empty Grove repository' in result.output
    assert (temp_dir / '.grove' / 'objects').is_dir()
    assert (temp_dir / '.grove' / 'HEAD').read_text() == ''
    assert (temp_dir / '.grove' / 'index').read_text() == '[]'


def test_init_twice_is_informational(temp_dir):
    runner = CliRunner()
    runner.invoke(cli, ['init', str(temp_dir)])
    result = runner.invoke(cli, ['init', str(temp_dir)])
    
    assert result.exit_code == 0
    assert 'Already initialized' in result.output


def test_init_creates_missing_directory(temp_dir):
    target = temp_dir / 'new-project'
    result = CliRunner().invoke(cli, ['init', str(target)])
    
    assert result.exit_code == 0
    assert (target / '.grove').is_dir()


def test_commands_outside_repository_fail(temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    result = CliRunner().invoke(cli, ['log'])
    
    assert result.exit_code != 0
    assert 'Not a grove repository' in result.output
