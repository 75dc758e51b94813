#!/usr/bin/python3

import os.path

from btrfsreport.common import CommandException, run
from btrfsreport.parsers.df import parse_fs_df
from btrfsreport.parsers.show import parse_fs_show, parse_version
from btrfsreport.parsers.subvolume import parse_subvolume_list, parse_subvolume_show


class BtrfsTool():

    def __init__(self, command='btrfs', sudo=False, runner=run):
        self.command = command
        self.sudo = sudo
        self.runner = runner

    @classmethod
    def from_config(cls, config, runner=run):
        btrfs_config = config.get('btrfs') or {}
        return cls(
            command=btrfs_config.get('command', 'btrfs'),
            sudo=bool(btrfs_config.get('sudo', False)),
            runner=runner,
        )

    def execute(self, *args):
        command = [self.command] + list(args)
        if self.sudo:
            command = ['sudo'] + command
        stdout, stderr = self.runner(command)
        # Anything on stderr means the report can't be trusted
        if stderr:
            raise CommandException(None, "\n".join(stderr))
        return stdout

    def show(self, path):
        return self.execute('filesystem', 'show', path)

    def df(self, path):
        return self.execute('filesystem', 'df', path)

    def subvolume_list(self, path):
        return self.execute('subvolume', 'list', path)

    def subvolume_show(self, path):
        return self.execute('subvolume', 'show', path)

    def version(self):
        return self.execute('--version')


def get_filesystem(path, tool=None, log=None):
    if path is None or path.strip() == '':
        raise ValueError("path cannot be empty")
    if tool is None:
        tool = BtrfsTool()

    fs = parse_fs_show(tool.show(path), log=log)
    if fs.version is None:
        fs = fs.with_version(parse_version(tool.version()))

    fs = fs.with_df(parse_fs_df(tool.df(path), log=log))

    subvolumes = []
    for subvolume_path in parse_subvolume_list(tool.subvolume_list(path), log=log):
        lines = tool.subvolume_show(os.path.join(path, subvolume_path))
        subvolumes.append(parse_subvolume_show(lines, path=subvolume_path, log=log))

    return fs.with_subvolumes(subvolumes)
