#!/usr/bin/python3

from datetime import *
import json
import os.path
import subprocess
import sys
import yaml


datetime_format = '%Y-%m-%d %H:%M:%S'

config_files = [
    '~/.config/btrfsreport.yml',
    '/usr/local/etc/btrfsreport.yml',
    '/etc/btrfsreport.yml',
]


class Measurement():

    def __init__(self, value, value_type, unit=None):
        self.value = value
        self.type = value_type
        self.unit = unit

    def json(self):
        res = {
            'value': self.value,
            'type': self.type,
        }
        if self.unit is not None:
            res['unit'] = self.unit
        return res

    def __eq__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return (self.value, self.type, self.unit) == (other.value, other.type, other.unit)

    def __repr__(self):
        return "Measurement({!r}, {!r}, {!r})".format(self.value, self.type, self.unit)


class CommandException(Exception):

    def __init__(self, code, error):
        self.code = code
        self.error = error
        super().__init__("Command returned code {} - {}".format(code, error))


class DateTimeEncoder(json.JSONEncoder):

    def default(self, obj):
        if isinstance(obj, (date, datetime, timedelta)):
            return str(obj)
        if isinstance(obj, Measurement):
            return obj.json()
        return super().default(obj)


def get_config(host, files=None):
    if files is None:
        files = config_files
    for config_file in files:
        config_file = os.path.expanduser(config_file)
        if os.path.exists(config_file):
            with open(config_file, 'r') as fh:
                config = yaml.safe_load(fh)
            if config and host in config:
                return config[host] or {}
            return {}
    return {}

def run(args):
    # communicate() drains stdout and stderr together, so a chatty tool
    # can't block on a full pipe
    result = subprocess.run(args, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    stdout = result.stdout.decode('utf-8', errors='replace').rstrip("\n")
    stderr = result.stderr.decode('utf-8', errors='replace').rstrip("\n")
    if result.returncode != 0:
        raise CommandException(result.returncode, stderr)
    return split_lines(stdout), split_lines(stderr)

def split_lines(text):
    if text == '':
        return []
    return text.split("\n")

def check_installed(command):
    try:
        run(['sh', '-c', 'command -v "$0"', command])
    except (CommandException, OSError):
        return False
    return True

def err(*messages):
    print(' '.join([str(m) for m in messages]), flush=True, file=sys.stderr)

def fail(*messages):
    err(*messages)
    sys.exit(1)

def structure_data(data):
    structured_data = {}

    for key, value_data in data.items():
        keys = key.split('.')
        p = structured_data
        for k in keys[0:-1]:
            if k not in p:
                p[k] = {}
            p = p[k]

        p[keys[-1]] = value_data

    return structured_data
