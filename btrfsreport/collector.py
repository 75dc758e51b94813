#!/usr/bin/python3

from btrfsreport.common import *
from btrfsreport.errors import BtrfsError
from btrfsreport.filesystem import BtrfsTool, get_filesystem


class BtrfsCollector():

    def __init__(self, paths=None, config=None, tool=None, log=None):
        if config is None:
            config = get_config('localhost')
        self.config = config
        if paths is None:
            paths = config.get('filesystems') or []
        self.paths = list(paths)
        if tool is None:
            tool = BtrfsTool.from_config(config)
        self.tool = tool
        self.log = log

    def collect(self, structured_data=True):
        data = dict()

        for path in self.paths:
            try:
                fs = get_filesystem(path, tool=self.tool, log=self.log)
            except CommandException as e:
                err("btrfs command failed for {}:".format(path), e.error)
                continue
            except BtrfsError as e:
                err("Could not read btrfs output for {}:".format(path), e)
                continue
            except (ValueError, OSError) as e:
                err("Could not report btrfs filesystem {!r}:".format(path), e)
                continue
            self.data_filesystem(data, fs)

        # Return data, structured hierarchically if required
        if structured_data:
            return structure_data(data)
        return data

    def data_filesystem(self, data, fs):
        key = "btrfs.filesystem.{0}".format(fs.uuid)
        data["{0}.label".format(key)] = Measurement(fs.label, 'string')
        data["{0}.version".format(key)] = Measurement(fs.version, 'string')
        data["{0}.total_devices".format(key)] = Measurement(fs.total_devices, 'raw')
        data["{0}.devices_missing".format(key)] = Measurement(fs.devices_missing, 'bool')
        data["{0}.bytes_used".format(key)] = Measurement(fs.used_bytes, 'bytes')
        data["{0}.total_bytes".format(key)] = Measurement(fs.total_bytes(), 'bytes')
        data["{0}.allocated_bytes".format(key)] = Measurement(fs.allocated_bytes(), 'bytes')
        try:
            data["{0}.used_bytes".format(key)] = Measurement(fs.get_used_bytes(), 'bytes')
        except BtrfsError as e:
            err("Could not account used bytes for {}:".format(fs.uuid), e)

        for device in fs.devices:
            device_key = "{0}.device.{1}".format(key, device.devid)
            data["{0}.path".format(device_key)] = Measurement(device.path, 'string')
            data["{0}.size".format(device_key)] = Measurement(device.size, 'bytes')
            data["{0}.used".format(device_key)] = Measurement(device.used, 'bytes')

        for df in fs.df:
            df_key = "{0}.df.{1}.{2}".format(key, df.data_type, df.level)
            data["{0}.level".format(df_key)] = Measurement(df.level, 'string')
            data["{0}.total".format(df_key)] = Measurement(df.total, 'bytes')
            data["{0}.used".format(df_key)] = Measurement(df.used, 'bytes')
            try:
                data["{0}.used_total".format(df_key)] = Measurement(df.used_total(), 'bytes')
            except BtrfsError as e:
                err("Could not account used bytes for {} {} {}:".format(fs.uuid, df.data_type, df.level), e)

        for subvolume in fs.subvolumes:
            # Reports without an id line still need a unique key
            subvolume_key = "{0}.subvolume.{1}".format(key, subvolume.id or subvolume.path)
            data["{0}.name".format(subvolume_key)] = Measurement(subvolume.name, 'string')
            data["{0}.path".format(subvolume_key)] = Measurement(subvolume.path, 'string')
            data["{0}.uuid".format(subvolume_key)] = Measurement(subvolume.uuid, 'string')
            data["{0}.parent_uuid".format(subvolume_key)] = Measurement(subvolume.parent_uuid, 'string')
            data["{0}.creation_time".format(subvolume_key)] = Measurement(subvolume.creation_time, 'date')
            data["{0}.generation".format(subvolume_key)] = Measurement(subvolume.gen, 'raw')
            data["{0}.gen_at_creation".format(subvolume_key)] = Measurement(subvolume.gen_at_creation, 'raw')
            data["{0}.parent".format(subvolume_key)] = Measurement(subvolume.parent, 'raw')
            data["{0}.top_level".format(subvolume_key)] = Measurement(subvolume.top_level, 'raw')
