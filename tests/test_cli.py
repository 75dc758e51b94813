import json

import pytest

from btrfsreport import cli
from btrfsreport.collector import BtrfsCollector


@pytest.fixture
def patched(monkeypatch, tool):
    monkeypatch.setattr(cli, 'get_config', lambda host: {})
    monkeypatch.setattr(cli, 'check_installed', lambda command: True)
    monkeypatch.setattr(cli, 'BtrfsCollector',
                        lambda paths, config, log: BtrfsCollector(paths=paths, config=config, tool=tool, log=log))


def test_flat_human_output(patched, capsys):
    cli.main(['--flat', '--human', '/mnt/data'])
    data = json.loads(capsys.readouterr().out)
    key = 'btrfs.filesystem.b7c23711-6b9e-46a8-b451-4b3f79c7bc46'
    assert data[key + '.total_bytes'] == {'value': '80.00GiB', 'type': 'bytes'}
    assert data[key + '.df.Data.single.level'] == {'value': 'single', 'type': 'string'}


def test_structured_output(patched, capsys):
    cli.main(['/mnt/data'])
    data = json.loads(capsys.readouterr().out)
    filesystem = data['btrfs']['filesystem']['b7c23711-6b9e-46a8-b451-4b3f79c7bc46']
    assert filesystem['device']['1']['size'] == {'value': 42949672960, 'type': 'bytes'}


def test_verbose_echoes_report(patched, capsys):
    cli.main(['--verbose', '/mnt/data'])
    assert "Btrfs v3.12" in capsys.readouterr().err


def test_no_paths(patched):
    with pytest.raises(SystemExit) as e:
        cli.main([])
    assert e.value.code == 1


def test_btrfs_not_installed(patched, monkeypatch, capsys):
    monkeypatch.setattr(cli, 'check_installed', lambda command: False)
    with pytest.raises(SystemExit) as e:
        cli.main(['/mnt/data'])
    assert e.value.code == 1
    assert "btrfs command not found" in capsys.readouterr().err
