#!/usr/bin/python3

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

from btrfsreport.errors import MalformedSizeError


size_regex = re.compile(r'^\s*(\d[\d,]*(?:\.\d*)?|\.\d+)\s*([a-zA-Z]*)\s*$')

# Bare and SI suffixes are powers of 1000, "i" suffixes powers of 1024
units = {
    '': 1,
    'b': 1,
    'byte': 1,
    'bytes': 1,
}
for power, prefix in enumerate('kmgtpe', 1):
    units[prefix] = 1000 ** power
    units[prefix + 'b'] = 1000 ** power
    units[prefix + 'i'] = 1024 ** power
    units[prefix + 'ib'] = 1024 ** power

binary_suffixes = ('B', 'KiB', 'MiB', 'GiB', 'TiB', 'PiB', 'EiB')


def parse_size(size):
    """Convert a size as printed by btrfs ("40.00GiB", "16.00KiB", "0.00B")
    into a number of bytes, rounded to the nearest byte."""
    match = size_regex.match(size)
    if not match:
        raise MalformedSizeError("Could not parse size", size)
    number, unit = match.groups()
    unit = unit.lower()
    if unit not in units:
        raise MalformedSizeError("Unknown size unit {!r}".format(unit), size)
    try:
        value = Decimal(number.replace(',', ''))
    except InvalidOperation:
        raise MalformedSizeError("Could not parse size", size)
    return int((value * units[unit]).to_integral_value(rounding=ROUND_HALF_UP))

def format_size(count, precision=2):
    value = Decimal(count)
    suffix = binary_suffixes[0]
    for s in binary_suffixes[1:]:
        if abs(value) < 1024:
            break
        value = value / 1024
        suffix = s
    return "{0:.{1}f}{2}".format(value, precision, suffix)
