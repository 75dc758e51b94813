#!/usr/bin/python3

from btrfsreport.errors import InsufficientOutputError, UnexpectedFormatError
from btrfsreport.model import DFData
from btrfsreport.sizes import parse_size


data_types = ('Data', 'System', 'Metadata', 'GlobalReserve')


def parse_fs_df(lines, log=None):
    # Expected output of "btrfs filesystem df <path>":
    #   Data, single: total=9.00GiB, used=8.67GiB
    #   System, DUP: total=32.00MiB, used=16.00KiB
    #   Metadata, DUP: total=1.00GiB, used=466.88MiB
    #   GlobalReserve, single: total=16.00MiB, used=0.00B
    lines = [line.strip() for line in lines]
    if log is not None:
        for line in lines:
            log(line)
    if len(lines) < 3:
        raise InsufficientOutputError("Unexpected output from btrfs filesystem df", lines)

    return tuple(parse_df_line(line) for line in lines)

def parse_df_line(line):
    fields = line.split()
    if not fields or fields[0].rstrip(',') not in data_types:
        raise UnexpectedFormatError("Expected btrfs data type", line)
    if len(fields) != 4:
        raise UnexpectedFormatError("Unexpected fields for df line", line)
    return DFData(
        data_type=fields[0].rstrip(','),
        level=fields[1].rstrip(':').lower(),
        total=parse_size_field(fields[2], 'total', line),
        used=parse_size_field(fields[3], 'used', line),
    )

def parse_size_field(field, key, line):
    name, sep, value = field.rstrip(',').partition('=')
    if sep != '=' or name != key:
        raise UnexpectedFormatError("Expected {}=<size>".format(key), line)
    return parse_size(value)
