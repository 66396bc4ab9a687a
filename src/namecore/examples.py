"""
Example names used by the demo script and tests.

    "oss.cs.fau.de"  four components, delimiter '.'
    "///"            four empty components, delimiter '/'
    "Oh\\.\\.\\."    one component containing three literal dots
"""
from typing import Dict

from namecore.model import Name


def build_example_names() -> Dict[str, Name]:
    return {
        "host": Name(["oss", "cs", "fau", "de"]),
        "empty_path": Name(["", "", "", ""], "/"),
        "escaped": Name(["Oh\\.\\.\\."]),
    }
