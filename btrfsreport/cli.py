#!/usr/bin/python3

import argparse
import json
from btrfsreport.common import *
from btrfsreport.collector import BtrfsCollector
from btrfsreport.sizes import format_size


def main(argv=None):
    parser = argparse.ArgumentParser(prog='btrfsreport')
    parser.add_argument('paths', nargs='*', help='mounted btrfs filesystem paths, defaults to the configured filesystems')
    parser.add_argument('--host', dest='host', default='localhost', help='config section to read')
    parser.add_argument('--flat', dest='flat', action='store_true', default=False, help='output dotted keys rather than nested data')
    parser.add_argument('--human', dest='human', action='store_true', default=False, help='output byte counts as human readable sizes')
    parser.add_argument('--verbose', dest='verbose', action='store_true', default=False, help='echo the raw btrfs output to stderr')
    args = parser.parse_args(argv)

    config = get_config(args.host)
    paths = args.paths or config.get('filesystems') or []
    if not paths:
        fail("No btrfs filesystem paths given or configured")
    command = (config.get('btrfs') or {}).get('command', 'btrfs')
    if not check_installed(command):
        fail("btrfs command not found:", command)

    log = err if args.verbose else None
    collector = BtrfsCollector(paths=paths, config=config, log=log)
    data = collector.collect(structured_data=False)

    if args.human:
        data = humanize_data(data)
    if not args.flat:
        data = structure_data(data)
    print(json.dumps(data, cls=DateTimeEncoder, sort_keys=True, indent=4), flush=True)

def humanize_data(data):
    result = {}
    for key, measurement in data.items():
        if measurement.type == 'bytes':
            measurement = Measurement(format_size(measurement.value), 'bytes', measurement.unit)
        result[key] = measurement
    return result


if __name__ == '__main__':
    main()
