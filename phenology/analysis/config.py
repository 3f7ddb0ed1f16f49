"""
==================================================
Analysis options (:mod:`phenology.analysis.config`)
==================================================

.. currentmodule:: phenology.analysis.config

Reading, writing and checking of analysis options. Options are stored
as YAML mappings with the keyword arguments of `analyze` as keys.

Example option file::

    window: [60, 300]
    bandwidth: 10
    quantiles_boxplot: [0.1, 0.2, 0.5, 0.8, 0.9]
    nsamples: 2000
    seed: 1

.. autosummary::
    :toctree: generated/

    default_options
    check_options
    load_options
    dump_options

"""
import collections
import pathlib

import phenology.statistics.circular as circ
import phenology.utilities.yaml as yaml
from phenology.utilities.errors import ValidationError
from phenology.version._version import __version__

from .phenology import DEFAULT_OPTIONS

__all__ = ["default_options", "check_options", "load_options", "dump_options"]


def _sequence(value, key, length=None):
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise ValidationError("Option '{}' should be a sequence.".format(key))
    if length is not None and len(value) != length:
        raise ValidationError(
            "Option '{}' should have {} elements, got {}.".format(key, length, len(value))
        )
    return tuple(value)


def _number(value, key, kind=float, positive=True):
    if isinstance(value, bool):
        raise ValidationError("Option '{}' should be a number.".format(key))
    try:
        value = kind(value)
    except (TypeError, ValueError) as e:
        raise ValidationError("Option '{}' should be a number.".format(key)) from e
    if positive and not value > 0:
        raise ValidationError(
            "Option '{}' should be larger than zero, got {}.".format(key, value)
        )
    return value


def default_options():
    """Default analysis options.

    Returns
    -------
    OrderedDict

    """
    return collections.OrderedDict(DEFAULT_OPTIONS)


def check_options(options):
    """Check analysis options.

    Parameters
    ----------
    options : mapping
        Analysis options. Missing options are set to their default value.

    Returns
    -------
    OrderedDict

    """
    unknown = set(options) - set(DEFAULT_OPTIONS)
    if unknown:
        raise ValidationError(
            "Unknown options: {}.".format(", ".join(sorted(unknown)))
        )

    result = default_options()
    result.update(options)

    result["window"] = _sequence(result["window"], "window", length=2)

    if result["bandwidth"] != "taylor":
        result["bandwidth"] = _number(result["bandwidth"], "bandwidth")

    result["step_size"] = _number(result["step_size"], "step_size")
    result["quantiles"] = _sequence(result["quantiles"], "quantiles")
    result["quantiles_boxplot"] = _sequence(
        result["quantiles_boxplot"], "quantiles_boxplot", length=5
    )
    result["alpha"] = _number(result["alpha"], "alpha")
    result["nsamples"] = _number(result["nsamples"], "nsamples", kind=int)
    result["grid_size"] = _number(result["grid_size"], "grid_size", kind=int)

    if not result["strategy"] in circ.STRATEGIES:
        raise ValidationError(
            "Option 'strategy' should be one of {}.".format(", ".join(circ.STRATEGIES))
        )

    if not result["rotation"] in circ.ROTATIONS:
        raise ValidationError(
            "Option 'rotation' should be one of {}.".format(", ".join(circ.ROTATIONS))
        )

    for key in ("bias", "unique"):
        if not isinstance(result[key], bool):
            raise ValidationError("Option '{}' should be true or false.".format(key))

    if result["seed"] is not None:
        result["seed"] = _number(result["seed"], "seed", kind=int, positive=False)

    return result


def load_options(source):
    """Load analysis options from YAML.

    Parameters
    ----------
    source : str, path or file-like object
        Path to YAML file or open stream.

    Returns
    -------
    OrderedDict
        Checked options, which can be passed as keyword arguments to
        `analyze`.

    """
    try:
        if isinstance(source, (str, pathlib.Path)):
            with open(source, "r") as f:
                data = yaml.load(f)
        else:
            data = yaml.load(source)
    except yaml.YAMLError as e:
        raise ValidationError("Invalid YAML in option file: {}".format(e)) from e

    if data is None:
        data = collections.OrderedDict()
    elif not isinstance(data, dict):
        raise ValidationError("Option file should contain a mapping.")

    return check_options(data)


def dump_options(options, stream=None):
    """Write analysis options as YAML.

    Parameters
    ----------
    options : mapping
    stream : None or file-like object
        If None, the YAML document is returned as a string.

    """
    options = check_options(options)

    data = collections.OrderedDict(
        (k, list(v) if isinstance(v, tuple) else v) for k, v in options.items()
    )

    return yaml.dump(data, stream)
