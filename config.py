"""Configuration settings for the Cattery demo."""

import json
import string

# --- Local Overrides ---
# Optional overrides from a private JSON file, e.g. {"FAVORITES_API_URL": "..."}
OVERRIDES_FILE_PATH = "cattery.json"
_overrides = {}
try:
    with open(OVERRIDES_FILE_PATH, "r", encoding="utf-8") as f:
        _overrides = json.load(f)
except FileNotFoundError:
    pass
except json.JSONDecodeError as e:
    print(f"Warning: Could not load overrides from {OVERRIDES_FILE_PATH}: {e}")


# DNA Configuration (for cats/cat.py)
DNA_LENGTH = 32
DNA_ALPHABET = string.ascii_uppercase
# Only this many leading characters of each parent reach the kitten
MATE_PREFIX_LENGTH = 16

# Page Configuration (for web_app.py and core/cattery.py)
ORIGINAL_CAT_COUNT = _overrides.get("ORIGINAL_CAT_COUNT", 4)
MAX_RANDOM_CATS = _overrides.get("MAX_RANDOM_CATS", 32)

# Favorites REST endpoint (for utils/favorites_api.py)
FAVORITES_API_URL = _overrides.get("FAVORITES_API_URL", "http://localhost:3000")
REQUEST_TIMEOUT = _overrides.get("REQUEST_TIMEOUT", 10)

# Placeholder images, deterministic by DNA (for utils/cat_images.py)
CAT_IMAGE_URL_TEMPLATE = _overrides.get(
    "CAT_IMAGE_URL_TEMPLATE", "https://robohash.org/{dna}?set=set4"
)
IMAGE_SAVE_DIR = _overrides.get("IMAGE_SAVE_DIR", "cat_images")

# List of relative paths from project root to directories containing favorite JSON files
CAT_DATA_DIRS = _overrides.get("CAT_DATA_DIRS", ["data"])

# When set, the favorites store is written here after every change.
FAVORITES_SAVE_FILE = _overrides.get("FAVORITES_SAVE_FILE")
