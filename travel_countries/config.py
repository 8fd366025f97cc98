"""Configuration: .env loading, constants."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project root = parent of travel_countries/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# --- Classification ---
MULTI_DAY_THRESHOLD_HOURS = 24  # location-only events must span longer than this

# --- Assembly ---
MERGE_BUFFER_DAYS = 7  # entries for one country closer than this are one visit
TITLE_SEPARATOR = "; "

# --- Progress / background runs ---
PROGRESS_INTERVAL_SECONDS = float(os.getenv("PROGRESS_INTERVAL_SECONDS", "0.1"))
WORKER_THREADS = int(os.getenv("WORKER_THREADS", "1"))
