"""


.. currentmodule:: phenology.utilities.yaml

YAML loading and dumping with support for OrderedDicts.

The loader and dumper classes are private subclasses of the PyYaml safe
loader and dumper, so that the global PyYaml configuration is untouched.

"""
from collections import OrderedDict as _OrderedDict

import yaml as _yaml

from phenology.version._version import __version__

__all__ = ["Loader", "Dumper", "load", "dump", "YAMLError"]

YAMLError = _yaml.YAMLError

# note that we will use the default mapping tag,
# which means that all maps are loaded as OrderedDicts
_mapping_tag = _yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG


class Loader(_yaml.SafeLoader):
    pass


class Dumper(_yaml.SafeDumper):
    pass


def dict_representer(dumper, data):
    return dumper.represent_mapping(_mapping_tag, iter(data.items()))


def dict_constructor(loader, node):
    return _OrderedDict(loader.construct_pairs(node))


Dumper.add_representer(_OrderedDict, dict_representer)
Loader.add_constructor(_mapping_tag, dict_constructor)


def load(stream):
    """Load single YAML document as OrderedDict."""
    return _yaml.load(stream, Loader=Loader)


def dump(data, stream=None, **kwargs):
    """Dump data as YAML, preserving the order of OrderedDicts."""
    kwargs.setdefault("default_flow_style", False)
    return _yaml.dump(data, stream, Dumper=Dumper, **kwargs)
