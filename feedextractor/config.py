"""
Retriever defaults.

Values come from built-in defaults, an optional JSON config file and
environment variables, in increasing order of precedence.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64; rv:109.0) Gecko/20100101 Firefox/115.0"
)
DEFAULT_TIMEOUT = 30.0


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Loads retriever configuration."""
    config: Dict[str, Any] = {
        "user_agent": DEFAULT_USER_AGENT,
        "timeout": DEFAULT_TIMEOUT,
    }

    config_path = config_path or os.environ.get("FEEDEXTRACTOR_CONFIG")
    if config_path:
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config.update(json.load(f))
        except FileNotFoundError:
            logger.warning(
                "Config file not found at %s. Using defaults.", config_path
            )

    # Env Vars
    user_agent = os.environ.get("FEEDEXTRACTOR_USER_AGENT")
    if user_agent:
        config["user_agent"] = user_agent
    timeout = os.environ.get("FEEDEXTRACTOR_TIMEOUT")
    if timeout:
        config["timeout"] = float(timeout)

    return config
