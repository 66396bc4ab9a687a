"""
Serialization helpers for Name objects.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Components are written in masked form together with the delimiter they are
masked for, so nothing is re-escaped on the way in or out.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict

import yaml

from namecore.masking import DEFAULT_DELIMITER, MaskingError, is_masked
from namecore.model import Name

logger = logging.getLogger(__name__)


def name_to_dict(n: Name) -> Dict[str, Any]:
    return {"delimiter": n.delimiter, "components": list(n.components)}


def name_from_dict(d: Any) -> Name:
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported name payload type: {type(d)}")
    components = d.get("components", [])
    if not isinstance(components, list) or not all(isinstance(c, str) for c in components):
        raise TypeError(f"Name components must be a list of strings, got {components!r}")
    delimiter = d.get("delimiter", DEFAULT_DELIMITER)
    if not isinstance(delimiter, str):
        raise TypeError(f"Name delimiter must be a string, got {delimiter!r}")
    malformed = [c for c in components if not is_masked(c, delimiter)]
    if malformed:
        raise MaskingError(f"Components not masked for delimiter {delimiter!r}: {malformed!r}")
    logger.debug("Loaded name with %d components, delimiter %r", len(components), delimiter)
    return Name(components, delimiter)


def name_to_json(n: Name) -> str:
    return json.dumps(name_to_dict(n), sort_keys=True)


def name_from_json(s: str) -> Name:
    d = json.loads(s)
    return name_from_dict(d)


def name_to_yaml(n: Name) -> str:
    return yaml.safe_dump(name_to_dict(n))


def name_from_yaml(s: str) -> Name:
    d = yaml.safe_load(s)
    return name_from_dict(d)
