"""
policies/file_policy.py
-----------------------
Loads template option strings from a YAML file.
"""

import logging
from pathlib import Path
from typing import List, Union

import yaml

logger = logging.getLogger(__name__)


def load_option_file(path: Union[str, Path]) -> List[str]:
    """
    Read option strings from a YAML option file.

    Expected YAML structure:
        version: 1
        options:
          - missingkey=error
          - onpanic=nop

    The strings are returned in file order and are not resolved here; pass
    them to :meth:`Template.option` or :func:`apply_options`.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError:        If the file is not a valid option file.
    """
    option_path = Path(path)
    if not option_path.exists():
        raise FileNotFoundError(f"Option file not found: {option_path}")

    try:
        with open(option_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse option YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError("Option file must be a YAML dictionary.")

    if "version" not in data:
        raise ValueError("Option file missing top-level 'version' key.")

    options = data.get("options", [])
    if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
        raise ValueError("Option file 'options' must be a list of strings.")

    logger.debug("Loaded %d option(s) from %s", len(options), option_path)
    return options
