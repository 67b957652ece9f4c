"""Configuration settings for SU Reference."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
BASE_DIR = Path(__file__).parent.parent
DATA_ROOT = Path(os.getenv("SU_DATA_ROOT", BASE_DIR))
SCHEMA_INDEX_PATH = Path(os.getenv("SU_SCHEMA_INDEX", DATA_ROOT / "schemas" / "index.json"))

# Search settings
SUGGESTION_LIMIT = int(os.getenv("SU_SUGGESTION_LIMIT", "10"))

# Logging
LOG_LEVEL = os.getenv("SU_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# API server settings
API_HOST = os.getenv("SU_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("SU_API_PORT", "5000"))
API_DEBUG = os.getenv("SU_API_DEBUG", "false").lower() == "true"
