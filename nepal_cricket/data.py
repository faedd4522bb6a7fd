import logging
import concurrent.futures
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from nepal_cricket import config

logger = logging.getLogger(__name__)

MATCH_COLUMNS = [
    'format', 'date', 'opponent', 'venue', 'result',
    'nepal_runs', 'nepal_wickets_lost', 'opponent_runs', 'opponent_wickets_lost',
]

PLAYER_COLUMNS = [
    'Player', 'Matches', 'Innings', 'Not Outs', 'Runs', 'Highest Score',
    'Average', 'Strike Rate', 'Balls Faced', '100s', '50s', 'Fours', 'Sixes',
    'T20I Matches', 'T20I Runs', 'T20I Wickets',
    'ODI Matches', 'ODI Runs', 'ODI Wickets',
    'Balls', 'Wickets', 'Best Bowling', 'Economy', 'Maidens', '4W', '5W',
]


class DataLoadError(Exception):
    """Raised when a CSV file is missing or cannot be parsed."""

    def __init__(self, path, reason):
        super().__init__(f"Could not load {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass
class DashboardData:
    matches: pd.DataFrame = field(default_factory=lambda: empty_frame(MATCH_COLUMNS))
    batsmen: pd.DataFrame = field(default_factory=lambda: empty_frame(PLAYER_COLUMNS))
    bowlers: pd.DataFrame = field(default_factory=lambda: empty_frame(PLAYER_COLUMNS))


def empty_frame(columns):
    return pd.DataFrame(columns=columns)


def read_csv(path, columns):
    logger.info(f"Loading {path}")
    try:
        df = pd.read_csv(path, skip_blank_lines=True)
    except FileNotFoundError as e:
        raise DataLoadError(path, "file not found") from e
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DataLoadError(path, str(e)) from e

    # Optional columns are absent from some files
    for col in columns:
        if col not in df.columns:
            df[col] = np.nan
    logger.info(f"Loaded {len(df)} rows from {path.name}")
    return df


def load_matches(fmt):
    df = read_csv(config.data_path(fmt, 'matches'), MATCH_COLUMNS)
    df['opponent'] = df['opponent'].astype(str).str.strip()
    df['result'] = df['result'].astype(str).str.strip()
    return df


def load_batsmen(fmt):
    return read_csv(config.data_path(fmt, 'batsmen'), PLAYER_COLUMNS)


def load_bowlers(fmt):
    return read_csv(config.data_path(fmt, 'bowlers'), PLAYER_COLUMNS)


def load_all(fmt, kinds=('matches', 'batsmen', 'bowlers')):
    """Load the requested tables for a format in parallel and wait for all of them."""
    loaders = {
        'matches': load_matches,
        'batsmen': load_batsmen,
        'bowlers': load_bowlers,
    }
    config.check_format(fmt)
    with concurrent.futures.ThreadPoolExecutor(max_workers=len(kinds)) as executor:
        futures = {kind: executor.submit(loaders[kind], fmt) for kind in kinds}
        frames = {kind: future.result() for kind, future in futures.items()}
    return DashboardData(**frames)


def load_or_empty(fmt, kinds=('matches', 'batsmen', 'bowlers'), loader=load_all):
    """Return (data, error); a failed load gives empty tables and the error."""
    try:
        return loader(fmt, kinds), None
    except DataLoadError as e:
        logger.error(f"Error loading data: {e}", exc_info=True)
        return DashboardData(), e
