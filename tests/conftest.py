import pytest

from btrfsreport.filesystem import BtrfsTool


SHOW = """Label: none  uuid: b7c23711-6b9e-46a8-b451-4b3f79c7bc46
\tTotal devices 2 FS bytes used 14.67GiB
\tdevid    1 size 40.00GiB used 16.01GiB path /dev/sdc1
\tdevid    2 size 40.00GiB used 16.01GiB path /dev/sdd1

Btrfs v3.12""".split("\n")

DF = """Data, single: total=9.00GiB, used=8.67GiB
System, DUP: total=32.00MiB, used=16.00KiB
Metadata, DUP: total=1.00GiB, used=466.88MiB
GlobalReserve, single: total=16.00MiB, used=0.00B""".split("\n")

SUBVOLUME_LIST = """ID 256 gen 8 top level 5 path docker
ID 257 gen 10 top level 256 path docker/volumes""".split("\n")

SUBVOLUME_SHOW_DOCKER = """/mnt/data/docker
\tName: \t\t\tdocker
\tuuid: \t\t\t0ee5e4d4-4e0f-8c44-a2ba-ad2a6ff4b5c3
\tParent uuid: \t\t-
\tCreation time: \t\t2014-05-14 10:38:48
\tObject ID: \t\t256
\tGeneration (Gen): \t8
\tGen at creation: \t7
\tParent: \t\t5
\tTop Level: \t\t5
\tFlags: \t\t\t-
\tSnapshot(s):
\t\t\t\tsnapshots/docker-1""".split("\n")

SUBVOLUME_SHOW_VOLUMES = """/mnt/data/docker/volumes
\tName: \t\t\tvolumes
\tUUID: \t\t\t5d1a3c2e-0b7f-4a44-9e1c-7f0c2a1b9d10
\tParent UUID: \t\t-
\tReceived UUID: \t\t-
\tCreation time: \t\t2023-01-02 03:04:05 +0100
\tSubvolume ID: \t\t257
\tGeneration: \t\t10
\tGen at creation: \t9
\tParent ID: \t\t256
\tTop level ID: \t\t256
\tFlags: \t\t\t-
\tSnapshot(s):""".split("\n")


class FakeRunner():

    def __init__(self, outputs):
        self.outputs = outputs
        self.calls = []

    def __call__(self, args):
        self.calls.append(list(args))
        return self.outputs[tuple(args)]


def report_outputs(path='/mnt/data', show=SHOW, df=DF):
    return {
        ('btrfs', 'filesystem', 'show', path): (show, []),
        ('btrfs', 'filesystem', 'df', path): (df, []),
        ('btrfs', 'subvolume', 'list', path): (SUBVOLUME_LIST, []),
        ('btrfs', 'subvolume', 'show', path + '/docker'): (SUBVOLUME_SHOW_DOCKER, []),
        ('btrfs', 'subvolume', 'show', path + '/docker/volumes'): (SUBVOLUME_SHOW_VOLUMES, []),
        ('btrfs', '--version'): (['btrfs-progs v6.6.3'], []),
    }


@pytest.fixture
def runner():
    return FakeRunner(report_outputs())


@pytest.fixture
def tool(runner):
    return BtrfsTool(runner=runner)
