# city_search_lab/core/config.py
# Tunables (overridable via environment variables), in the same spirit as benchmarks/run_all.py
from __future__ import annotations

import os
from pathlib import Path

# ---- Paths -------------------------------------------------------------------
PACKAGE_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PACKAGE_ROOT / "data"
CITIES_PATH = Path(os.getenv("CITIES_PATH", str(DATA_DIR / "cities.json")))

# ---- Animation ---------------------------------------------------------------
# Delay between two yield points of a visual run. Pacing only; tests run with 0.
ANIMATION_DELAY_MS = float(os.getenv("SEARCH_DELAY_MS", "500"))
# How often a paused run re-checks for cancellation while it waits.
PAUSE_POLL_S = 0.1

# ---- Search ------------------------------------------------------------------
DEFAULT_DEPTH_LIMIT = int(os.getenv("DLS_LIMIT", "5"))
# Demo cap for iterative deepening; earlier revisions of the app used 20.
MAX_ITERATIVE_DEPTH = int(os.getenv("IDDFS_MAX_DEPTH", "5"))

# ---- Geography ---------------------------------------------------------------
EARTH_RADIUS_KM = 6371.0

# ---- Demo defaults (bundled Sri Lanka map) -----------------------------------
DEFAULT_START = "Colombo"
DEFAULT_GOAL = "Meegoda"
