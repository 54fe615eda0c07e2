"""Integration tests for grove config."""

import pytest
from click.testing import CliRunner
from grove.cli.main import cli


@pytest.fixture
def runner(repo, monkeypatch):
    monkeypatch.chdir(repo.work_tree)
    return CliRunner()


def test_config_set_and_get(runner):
    result = runner.invoke(cli, ['config', 'set', 'color.ui', 'false'])
    assert result.exit_code == 0
    
    result = runner.invoke(cli, ['config', 'get', 'color.ui'])
    assert result.output.strip() == 'false'


def test_config_get_default(runner):
    result = runner.invoke(cli, ['config', 'get', 'core.loglevel'])
    assert result.output.strip() == 'WARNING'


def test_config_get_nonexistent(runner):
    result = runner.invoke(cli, ['config', 'get', 'nonexistent.key'])
    assert result.exit_code != 0
    assert 'Config key not found' in result.output


def test_config_set_global(runner, isolated_home):
    result = runner.invoke(cli, ['config', 'set', '--global', 'color.ui', 'false'])
    assert result.exit_code == 0
    assert (isolated_home / '.groveconfig').exists()


def test_config_unset(runner):
    runner.invoke(cli, ['config', 'set', 'test.key', 'value'])
    result = runner.invoke(cli, ['config', 'unset', 'test.key'])
    assert result.exit_code == 0
    
    result = runner.invoke(cli, ['config', 'get', 'test.key'])
    assert result.exit_code != 0


def test_config_list(runner):
    runner.invoke(cli, ['config', 'set', 'test.key', 'value'])
    result = runner.invoke(cli, ['config', 'list'])
    assert 'test.key=value' in result.output


def test_broken_repo_config_does_not_break_log(runner, repo):
    repo.config_file.write_text('garbage without section\n')
    result = runner.invoke(cli, ['log'])
    
    assert result.exit_code == 0
    assert 'No commits yet' in result.output


def test_broken_global_config_does_not_break_status(runner, isolated_home):
    (isolated_home / '.groveconfig').write_text('garbage without section\n')
    result = runner.invoke(cli, ['status'])
    
    assert result.exit_code == 0
    assert 'Nothing staged' in result.output


def test_config_get_reports_broken_config(runner, repo):
    repo.config_file.write_text('garbage without section\n')
    result = runner.invoke(cli, ['config', 'get', 'color.ui'])
    
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert 'Cannot parse config file' in result.output
