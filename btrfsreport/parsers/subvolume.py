#!/usr/bin/python3

from datetime import datetime

from btrfsreport.common import datetime_format
from btrfsreport.errors import MalformedFieldError, UnexpectedFormatError
from btrfsreport.model import Subvolume


max_uint32 = 2 ** 32 - 1


def parse_subvolume_list(lines, log=None):
    # Each line of "btrfs subvolume list <path>":
    #   ID 256 gen 8 top level 5 path docker/volumes
    paths = []
    for line in lines:
        line = line.strip()
        if log is not None:
            log(line)
        if line == '':
            continue
        fields = line.split()
        if len(fields) != 9:
            raise UnexpectedFormatError("Unexpected fields for subvolume", line)
        if (fields[0], fields[2], fields[4], fields[5], fields[7]) != ('ID', 'gen', 'top', 'level', 'path'):
            raise UnexpectedFormatError("Expected subvolume", line)
        paths.append(fields[8])
    return tuple(paths)


def parse_text(value):
    return value

def parse_uint32(value):
    if not value.isdecimal() or int(value) > max_uint32:
        raise ValueError("not an unsigned 32 bit integer: {!r}".format(value))
    return int(value)

def parse_creation_time(value):
    if value == '-':
        return None
    try:
        return datetime.strptime(value, datetime_format + ' %z')
    except ValueError:
        return datetime.strptime(value, datetime_format)

def ignore(value):
    return None


# Field labels of "btrfs subvolume show", old and new spellings
fields = {
    'Name': ('name', parse_text),
    'uuid': ('uuid', parse_text),
    'UUID': ('uuid', parse_text),
    'Parent uuid': ('parent_uuid', parse_text),
    'Parent UUID': ('parent_uuid', parse_text),
    'Creation time': ('creation_time', parse_creation_time),
    'Object ID': ('id', parse_text),
    'Subvolume ID': ('id', parse_text),
    'Generation (Gen)': ('gen', parse_uint32),
    'Generation': ('gen', parse_uint32),
    'Gen at creation': ('gen_at_creation', parse_uint32),
    'Parent': ('parent', parse_uint32),
    'Parent ID': ('parent', parse_uint32),
    'Top Level': ('top_level', parse_uint32),
    'Top level ID': ('top_level', parse_uint32),
    # TODO: model flags and the snapshot list
    'Flags': (None, ignore),
    'Snapshot(s)': (None, ignore),
}


def parse_subvolume_show(lines, path='', log=None):
    """Parse "btrfs subvolume show <path>" output into a Subvolume.

    The first line repeats the subvolume path and is skipped; the rest are
    "Key: value" lines. Unknown keys, and lines without a colon such as the
    entries under "Snapshot(s):", are ignored.
    """
    if log is not None:
        for line in lines:
            log(line.strip())
    values = {'path': path}
    for line in lines[1:]:
        line = line.strip()
        key, sep, value = line.partition(':')
        if sep != ':' or key.strip() not in fields:
            continue
        attribute, parser = fields[key.strip()]
        try:
            parsed = parser(value.strip())
        except ValueError:
            raise MalformedFieldError("Could not parse {}".format(key.strip()), line)
        if attribute is not None:
            values[attribute] = parsed
    return Subvolume(**values)
