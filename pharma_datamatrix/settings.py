"""
Runtime settings.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "PHARMA_DM_SETTINGS"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "near_expiry_months": 6,
    "openfda_url": "https://api.fda.gov/drug/ndc.json",
    "openfda_limit": 5,
    "openfda_timeout": 10.0,  # seconds, per query
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file layered over DEFAULT_SETTINGS.

    When no path is given, the file named by $PHARMA_DM_SETTINGS is used if
    set. Unknown keys are ignored. A missing or malformed file raises.
    """
    settings = dict(DEFAULT_SETTINGS)

    if path is None:
        env_path = os.environ.get(SETTINGS_ENV_VAR)
        if not env_path:
            return settings
        path = Path(env_path)

    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a JSON object: {path}")

    for key, value in data.items():
        if key not in DEFAULT_SETTINGS:
            logger.warning("Ignoring unknown setting %r in %s", key, path)
            continue
        settings[key] = value

    logger.debug("Loaded settings from %s", path)
    return settings
