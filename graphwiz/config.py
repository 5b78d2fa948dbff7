import logging
import os
from dotenv import dotenv_values

# Values from .env fill in what the environment does not set;
# os.environ itself is left untouched
_settings = {**dotenv_values(), **os.environ}


def _setting(name: str, default: str) -> str:
    return _settings.get(name) or default


GRAPHWIZ_INDENT = int(_setting("GRAPHWIZ_INDENT", "4"))

GRAPHWIZ_LOG_LEVEL = _setting("GRAPHWIZ_LOG_LEVEL", "WARNING").upper()
if not isinstance(logging.getLevelName(GRAPHWIZ_LOG_LEVEL), int):
    GRAPHWIZ_LOG_LEVEL = "WARNING"
