import os
from pathlib import Path

FORMATS = ["T20I", "ODI", "Both"]

# Overs per innings for the formats that can be played
OVERS = {"T20I": 20, "ODI": 50}

DATA_FILES = {
    "T20I": {
        "matches": "nepal_t20i_matches.csv",
        "batsmen": "nepal_t20i_batsmen.csv",
        "bowlers": "nepal_t20i_bowlers.csv",
    },
    "ODI": {
        "matches": "nepal_odi_matches.csv",
        "batsmen": "nepal_odi_batsmen.csv",
        "bowlers": "nepal_odi_bowlers.csv",
    },
    "Both": {
        "matches": "nepal_all_matches.csv",
        "batsmen": "nepal_top_batsmen.csv",
        "bowlers": "nepal_top_bowlers.csv",
    },
}

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[1] / "data"
DEFAULT_KEEPER = "Aasif Sheikh"
DEFAULT_PREDICTION_DELAY = 1.5


def data_dir():
    return Path(os.environ.get("NEPAL_CRICKET_DATA_DIR", DEFAULT_DATA_DIR))


def keeper_name():
    # A blank name would match every player
    return os.environ.get("NEPAL_CRICKET_KEEPER", "").strip() or DEFAULT_KEEPER


def prediction_delay():
    return float(os.environ.get("NEPAL_CRICKET_PREDICTION_DELAY", DEFAULT_PREDICTION_DELAY))


def log_level():
    return os.environ.get("NEPAL_CRICKET_LOG_LEVEL", "INFO").upper()


def check_format(fmt):
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format {fmt!r}, expected one of {FORMATS}")
    return fmt


def data_path(fmt, kind):
    """Path of the CSV holding `kind` (matches, batsmen or bowlers) for a format."""
    check_format(fmt)
    return data_dir() / DATA_FILES[fmt][kind]
