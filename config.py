# config.py
import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent
# Templates ship inside the keypub package next to this module
TEMPLATES_DIR = BASE_DIR / "keypub" / "site"

# Server listening host
# "127.0.0.1" means only accessible from the local machine
# "0.0.0.0" means accessible from other machines on the network
HOST = os.environ.get("KEYPUB_HOST", "127.0.0.1")

# Server listening port
PORT = int(os.environ.get("KEYPUB_PORT", "3003"))

# Public hostname used to build the shareable link shown on a key page.
# The link is always https://{WEBSITE_NAME}/k/{id}, so set this to the
# domain the site is served under behind the reverse proxy.
WEBSITE_NAME = os.environ.get("WEBSITE_NAME", "jiming.cleanyong.familybankbank.com")

# SQLite database file, opened relative to the working directory and
# created on first start.
DB_URL = "sqlite://pubkeys.db"

# Logging level for Uvicorn and the application
# Options: "debug", "info", "warning", "error", "critical"
LOG_LEVEL = os.environ.get("KEYPUB_LOG_LEVEL", "info")

# Submission limits
MAX_KEY_BYTES = 1000
ED25519_KEY_BYTES = 32
MAX_NOTE_BYTES = 100
