import numpy as np
import pandas as pd
import pytest

from nepal_cricket.data import MATCH_COLUMNS, PLAYER_COLUMNS


def player_frame(rows):
    df = pd.DataFrame(rows)
    for col in PLAYER_COLUMNS:
        if col not in df.columns:
            df[col] = np.nan
    return df


@pytest.fixture
def matches():
    return pd.DataFrame([
        ['T20I', '2024-01-01', 'India', 'Kirtipur', 'Won', 150, 5, 140, 10],
        ['T20I', '2024-01-03', 'UAE', 'Kirtipur', 'Lost', 120, 10, 121, 3],
        ['T20I', '2024-01-05', 'India', 'Mulpani', 'Lost', 90, 10, 95, 2],
        ['T20I', '2024-01-07', 'Oman', 'Mulpani', 'No Result', 0, 0, np.nan, np.nan],
        ['T20I', '2024-01-09', 'UAE', 'Kirtipur', 'Won', 180, 4, 170, 9],
    ], columns=MATCH_COLUMNS)


@pytest.fixture
def batsmen():
    return player_frame([
        {'Player': 'Aasif Sheikh', 'Matches': 39, 'Runs': 804, 'T20I Runs': 500, 'Average': 25,
         'Strike Rate': 110, '100s': 0, '50s': 2},
        {'Player': 'Kushal Bhurtel', 'Matches': 45, 'Runs': 1240, 'T20I Runs': 1000, 'Average': 30,
         'Strike Rate': 120, '100s': 1, '50s': 5},
        {'Player': 'Rohit Paudel', 'Matches': 46, 'Runs': 1063, 'T20I Runs': 800, 'Average': 28,
         'Strike Rate': 115, '100s': 0, '50s': 5},
        {'Player': 'Dipendra Airee', 'Matches': 60, 'Runs': 1427, 'T20I Runs': 700, 'Average': 30,
         'Strike Rate': 130, '100s': 0, '50s': 3},
        {'Player': 'Kushal Malla', 'Matches': 42, 'Runs': 1102, 'T20I Runs': 600, 'Average': 25,
         'Strike Rate': 140, '100s': 1, '50s': 2},
        {'Player': 'Gulsan Jha', 'Matches': 35, 'Runs': 534, 'T20I Runs': 300, 'Average': 20,
         'Strike Rate': 120, '100s': 0, '50s': 1},
        {'Player': 'Bhim Sharki', 'Matches': 14, 'Runs': 221, 'T20I Runs': 200, 'Average': 18,
         'Strike Rate': 90, '100s': 0, '50s': 1},
    ])


@pytest.fixture
def bowlers():
    return player_frame([
        {'Player': 'Sandeep Lamichhane', 'Matches': 53, 'Wickets': 100, 'T20I Wickets': 100,
         'Average': 12, 'Economy': 6, '4W': 5, '5W': 2},
        {'Player': 'Dipendra Airee', 'Matches': 60, 'Wickets': 40, 'T20I Wickets': 40,
         'Average': 17, 'Economy': 6.5, '4W': 1, '5W': 0},
        {'Player': 'Karan KC', 'Matches': 41, 'Wickets': 50, 'T20I Wickets': 50,
         'Average': 18, 'Economy': 7, '4W': 1, '5W': 1},
        {'Player': 'Lalit Rajbanshi', 'Matches': 15, 'Wickets': 15, 'T20I Wickets': 15,
         'Average': 20, 'Economy': 5, '4W': 0, '5W': 0},
        {'Player': 'Sompal Kami', 'Matches': 42, 'Wickets': 45, 'T20I Wickets': 45,
         'Average': 19, 'Economy': 6.8, '4W': 1, '5W': 0},
        {'Player': 'Gulsan Jha', 'Matches': 35, 'Wickets': 5, 'T20I Wickets': 5,
         'Average': 40, 'Economy': 9, '4W': 0, '5W': 0},
        {'Player': 'Abinash Bohara', 'Matches': 20, 'Wickets': 25, 'T20I Wickets': 25,
         'Average': 17, 'Economy': 7, '4W': 0, '5W': 1},
        {'Player': 'Kushal Malla', 'Matches': 42, 'Wickets': 10, 'T20I Wickets': 10,
         'Average': 25, 'Economy': 6, '4W': 0, '5W': 0},
    ])


@pytest.fixture
def data_dir(tmp_path, monkeypatch, matches, batsmen, bowlers):
    """A data directory holding every format's CSV files."""
    matches.to_csv(tmp_path / 'nepal_all_matches.csv', index=False)
    matches.to_csv(tmp_path / 'nepal_t20i_matches.csv', index=False)
    # ODI file written without the optional opponent columns
    matches.drop(columns=['opponent_runs', 'opponent_wickets_lost']).assign(format='ODI') \
        .to_csv(tmp_path / 'nepal_odi_matches.csv', index=False)
    for prefix in ('top', 't20i', 'odi'):
        batsmen.dropna(axis=1, how='all').to_csv(tmp_path / f'nepal_{prefix}_batsmen.csv', index=False)
        bowlers.dropna(axis=1, how='all').to_csv(tmp_path / f'nepal_{prefix}_bowlers.csv', index=False)
    monkeypatch.setenv('NEPAL_CRICKET_DATA_DIR', str(tmp_path))
    return tmp_path
