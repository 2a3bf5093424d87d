"""Save and load system parameters as JSON files."""

import json
from pathlib import Path
from typing import Union

from tmdsim.core.errors import InvalidParameter
from tmdsim.core.state import SystemParameters


def save_parameters(params: SystemParameters, path: Union[str, Path]) -> None:
    """
    Write params to a JSON object keyed by field name.
    Parent directories are created as needed.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(params.to_dict(), f, indent=2)


def load_parameters(path: Union[str, Path]) -> SystemParameters:
    """
    Read parameters from a JSON object.

    Keys may be snake_case or the camelCase forceAmplitude/forceFrequency
    used by front ends. Raises InvalidParameter for anything else.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise InvalidParameter(f"{path}: expected a JSON object, got {type(data).__name__}")
    return SystemParameters.from_dict(data)
