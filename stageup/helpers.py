"""Helpers for working with lists of config entries."""

from collections.abc import MutableMapping
from copy import deepcopy

from stageup.config import Config

C_SEP = "."  # name segment separator


def join_name(*parts):
    """Join name segments into a dotted config name, skipping empty segments."""
    return C_SEP.join(part for part in parts if part)


def name_prefix(name):
    """Return the config bean prefix of a dotted name.

    e.g. ``conf.dataFormatConfig.avroSchema`` -> ``conf.dataFormatConfig``
    A name without a separator has an empty prefix.
    """
    if C_SEP not in name:
        return ""
    return name.rsplit(C_SEP, 1)[0]


def find_by_name(configs, name):
    """Return the first config whose name ends with `name`, or None if there isn't one."""
    # NOTE: plain suffix match, not segment aware. "myschemaInMessage" matches
    # "schemaInMessage" too. Upgraders rely on this to find fields under any prefix.
    for config in configs:
        if config.name.endswith(name):
            return config
    return None


def entries_from_dict(nested_dict, parent_key=""):
    """Flatten a nested dictionary into a list of config entries.

    {
        'conf': {
            'avroSchema': '{...}',
            'schemaInMessage': True,
        }
    }
    becomes
    [
        Config('conf.avroSchema', '{...}'),
        Config('conf.schemaInMessage', True),
    ]
    Lists are kept as values.
    """
    entries = []
    for key, value in nested_dict.items():
        new_key = join_name(parent_key, key)
        if isinstance(value, dict):
            entries.extend(entries_from_dict(value, new_key))
        else:
            entries.append(Config(new_key, value))
    return entries


def entries_to_dict(configs):
    """Fold a list of config entries back into a nested dictionary.

    Later entries with the same name override earlier ones.
    """
    result = {}
    for config in configs:
        *parents, field = config.name.split(C_SEP)
        curr_chunk = result
        for parent in parents:
            curr_chunk = curr_chunk.setdefault(parent, {})
        curr_chunk[field] = config.value
    return result


def merge_dicts(dict1, dict2):
    """Merge two nested dictionaries together, values from dict2 win.

    :return: merged dictionary
    """
    merged = deepcopy(dict(dict1))
    for key, value in dict2.items():
        if isinstance(merged.get(key), MutableMapping) and isinstance(value, MutableMapping):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged
