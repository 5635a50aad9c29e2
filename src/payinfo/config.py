"""
Configuration constants and environment setup.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# =============================================================================
# INPUT
# =============================================================================

# Pay stub dumps are read whole; undecodable bytes count as an unreadable file
INPUT_ENCODING = os.environ.get("PAYINFO_ENCODING", "utf-8")

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("PAYINFO_LOG_LEVEL", "WARNING").upper()
# Unknown level names fall back to the default
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
