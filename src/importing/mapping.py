"""Line-to-record mappers.

How a line of an imported file becomes a record is application-defined: a
mapper is any callable taking the line text and returning an aggregate
instance registered with the target domain.
"""

from collections.abc import Callable
from importlib import import_module
from typing import Any

LineMapper = Callable[[str], Any]


def load_line_mapper(path: str) -> LineMapper:
    """Resolve a ``"package.module:function"`` path to a mapper callable."""
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Line mapper must look like 'package.module:function', got {path!r}")

    mapper = getattr(import_module(module_name), attr)
    if not callable(mapper):
        raise TypeError(f"Line mapper {path!r} is not callable")
    return mapper
