#!/usr/bin/python3

from btrfsreport.errors import InsufficientOutputError, UnexpectedFormatError
from btrfsreport.model import Device, FileSystem
from btrfsreport.sizes import parse_size


devices_missing_line = '*** Some devices missing'


def parse_fs_show(lines, log=None):
    # Expected output of "btrfs filesystem show <path>":
    #   Label: none  uuid: b7c23711-6b9e-46a8-b451-4b3f79c7bc46
    #       Total devices 2 FS bytes used 14.67GiB
    #       devid    1 size 40.00GiB used 16.01GiB path /dev/sdc1
    #       devid    2 size 40.00GiB used 16.01GiB path /dev/sdd1
    #
    #   Btrfs v3.12
    # Newer releases drop the version line.
    lines = [line.strip() for line in lines]
    if log is not None:
        for line in lines:
            log(line)
    while lines and lines[-1] == '':
        lines.pop()
    if len(lines) < 2:
        raise InsufficientOutputError("Unexpected output from btrfs filesystem show", lines)

    label, uuid = parse_label_line(lines[0])
    total_devices, used_bytes = parse_total_line(lines[1])

    version = None
    devices_missing = False
    devices = []
    device_lines = lines[2:]
    last = device_lines[-1] if device_lines else None
    if last is not None and last.split()[0] != 'devid' and last != devices_missing_line:
        version = parse_version_line(device_lines.pop())

    for line in device_lines:
        if line == '':
            continue
        if line == devices_missing_line:
            devices_missing = True
            continue
        devices.append(parse_device_line(line))

    return FileSystem(
        label=label,
        uuid=uuid,
        total_devices=total_devices,
        used_bytes=used_bytes,
        version=version,
        devices_missing=devices_missing,
        devices=tuple(devices),
    )

def parse_label_line(line):
    fields = line.split()
    if not fields or fields[0] != 'Label:':
        raise UnexpectedFormatError("Expected label and uuid", line)
    if len(fields) != 4 or fields[2] != 'uuid:':
        raise UnexpectedFormatError("Unexpected fields for filesystem info", line)
    label = fields[1]
    if len(label) > 1 and label[0] == label[-1] == "'":
        label = label[1:-1]
    return label, fields[3]

def parse_total_line(line):
    fields = line.split()
    if fields[0:2] != ['Total', 'devices']:
        raise UnexpectedFormatError("Expected total devices", line)
    if len(fields) != 7:
        raise UnexpectedFormatError("Unexpected fields for total devices", line)
    if not fields[2].isdecimal():
        raise UnexpectedFormatError("Unexpected device count", line)
    return int(fields[2]), parse_size(fields[6])

def parse_device_line(line):
    fields = line.split()
    if fields[0] != 'devid':
        raise UnexpectedFormatError("Expected btrfs device", line)
    if len(fields) != 8 or (fields[2], fields[4], fields[6]) != ('size', 'used', 'path'):
        raise UnexpectedFormatError("Unexpected fields for device", line)
    return Device(devid=fields[1], size=parse_size(fields[3]), used=parse_size(fields[5]), path=fields[7])

def parse_version_line(line):
    fields = line.split()
    if fields[0] != 'Btrfs':
        raise UnexpectedFormatError("Expected btrfs version", line)
    if len(fields) != 2:
        raise UnexpectedFormatError("Unexpected fields for version", line)
    return fields[1]

def parse_version(lines):
    # "btrfs-progs v6.6.3"
    for line in lines:
        fields = line.split()
        if len(fields) == 2 and fields[0] in ('btrfs-progs', 'Btrfs'):
            return fields[1]
    raise UnexpectedFormatError("Expected btrfs version", "\n".join(lines))
