"""
Deterministic lexical cleaning rules.

This file exists to make non-goals explicit and enforceable:
no filesystem access, no symlink resolution, no working directory.
"""

from enum import Enum


class EmptyPathPolicy(str, Enum):
    CUR_DIR = "cur_dir"  # empty result becomes "."
    EMPTY = "empty"  # empty result stays empty


class Flavor(str, Enum):
    POSIX = "posix"
    WINDOWS = "windows"


CUR_DIR_TEXT = "."
PARENT_DIR_TEXT = ".."

SEPARATORS = {
    Flavor.POSIX: ("/",),
    Flavor.WINDOWS: ("\\", "/"),
}

# First entry is the one used when rendering.
PRIMARY_SEPARATOR = {flavor: seps[0] for flavor, seps in SEPARATORS.items()}

DEFAULT_EMPTY_PATH_POLICY = EmptyPathPolicy.CUR_DIR
DEFAULT_FLAVOR = Flavor.POSIX
