"""
Provider Environment Variable Export.

Pydantic AI's OpenAI provider reads its credentials from the official
``OPENAI_API_KEY``/``OPENAI_BASE_URL`` environment variables. Settings may be
loaded from a ``.env`` file that never reaches ``os.environ``, so the values
are exported explicitly before the chat client is first used.
"""

import os
from typing import Dict

from .config import OpenAIConfig


def export_openai_env_vars(config: OpenAIConfig) -> Dict[str, bool]:
    """Export the OpenAI API key and base URL to the official variables.

    Only values present in ``config`` are written; existing variables are
    left untouched otherwise.

    Returns:
        Mapping of variable name to whether it was set.
    """
    results = {"OPENAI_API_KEY": False, "OPENAI_BASE_URL": False}

    if config.api_key is not None and config.api_key.get_secret_value():
        os.environ["OPENAI_API_KEY"] = config.api_key.get_secret_value()
        results["OPENAI_API_KEY"] = True

    if config.base_url:
        os.environ["OPENAI_BASE_URL"] = config.base_url
        results["OPENAI_BASE_URL"] = True

    return results
