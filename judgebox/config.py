"""Read numeric limits from an XML configuration file."""

from __future__ import annotations

import re
import sys
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from os import PathLike

ROOT_NAME = "Configuration"
VALUE_NAME = "Value"
SETTING_NAMES = (
    "Max_data_number",
    "Max_data_length",
    "Max_cache_size",
    "Max_Buffer_length",
    "Max_B_array_size",
    "Max_L_structure_size",
    "Max_W_structure_size",
    "Max_gamma_tree_size",
)

_NUMBER = re.compile(r"[0-9]+")

Setting = tuple[str, int]


class ConfigurationError(Exception):
    """Base class for problems with a configuration file."""


class InvalidFileError(ConfigurationError):
    """The file could not be read or is not well-formed XML."""


class InvalidRootError(ConfigurationError):
    """The document's root element is not ``Configuration``."""


class MissingValueError(ConfigurationError):
    """A known setting has no usable numeric ``Value``.

    ``entries`` holds the settings read before the faulty one.
    """

    def __init__(self, name: str, entries: list[Setting]) -> None:
        super().__init__(f"setting {name!r} has no numeric value")
        self.name = name
        self.entries = entries


def _local_name(tag: object) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _setting_value(element: ET.Element) -> int | None:
    value_node = next(
        (child for child in element if _local_name(child.tag) == VALUE_NAME), None
    )
    if value_node is None:
        return None
    text = value_node.text
    # The first child of the Value element must be text.
    if not text:
        return None
    match = _NUMBER.search(text)
    if match is None:
        return None
    return int(match.group())


def read_configuration(path: str | PathLike[str]) -> list[Setting]:
    """Known settings in document order as ``(name, value)`` pairs.

    The value is the first run of digits in the setting's ``Value`` text.
    """
    try:
        root = ET.parse(path).getroot()
    except (ET.ParseError, OSError) as err:
        raise InvalidFileError(f"invalid configuration file {path}") from err
    if _local_name(root.tag) != ROOT_NAME:
        raise InvalidRootError(f"root element is not {ROOT_NAME!r}")

    entries: list[Setting] = []
    for element in root:
        name = _local_name(element.tag)
        if name not in SETTING_NAMES:
            continue
        value = _setting_value(element)
        if value is None:
            raise MissingValueError(name, entries)
        entries.append((name, value))
    return entries


def main(argv: Sequence[str] | None = None) -> int:
    """Print each known setting of the file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    path = args[0]
    try:
        entries = read_configuration(path)
    except InvalidFileError:
        print(f"error: Invalid Configuration File {path}")
        return 1
    except InvalidRootError:
        print("Invalid Configuration!")
        return 1
    except MissingValueError as err:
        for name, value in err.entries:
            print(f"{name}: {value}")
        print("Fail to retrieve the configuration!")
        return 0
    for name, value in entries:
        print(f"{name}: {value}")
    return 0