import numpy as np
import pandas as pd

from nepal_cricket.stats import surname

MAX_COMPARED = 3
RADAR_METRICS = ['Batting Avg', 'Strike Rate', 'Runs', 'Wickets', 'Economy']


def merge_players(batsmen, bowlers):
    """One row per player; a batsman's row wins over the same player's bowling row."""
    extra = bowlers[~bowlers['Player'].isin(batsmen['Player'])]
    merged = pd.concat([batsmen, extra], ignore_index=True)
    return merged.drop_duplicates('Player', keep='first').reset_index(drop=True)


def selected_players(players, names):
    """Rows for the chosen names, in selection order, ignoring blanks and repeats."""
    chosen = []
    for name in names[:MAX_COMPARED]:
        if name and name not in chosen and name in set(players['Player']):
            chosen.append(name)
    by_name = players.drop_duplicates('Player').set_index('Player')
    return by_name.loc[chosen].reset_index()


def _value(player, column):
    value = pd.to_numeric(player.get(column, np.nan), errors='coerce')
    return 0.0 if pd.isna(value) else float(value)


def radar_scores(player):
    economy = _value(player, 'Economy')
    return {
        'Batting Avg': min(100.0, _value(player, 'Average') * 2),
        'Strike Rate': min(100.0, _value(player, 'Strike Rate') * 0.5),
        'Runs': min(100.0, _value(player, 'Runs') / 50),
        'Wickets': min(100.0, _value(player, 'Wickets') * 0.5),
        'Economy': min(100.0, (10 - economy) * 10) if economy else 0.0,
    }


def radar_data(players):
    """Metric rows with one 0-100 column per player."""
    data = pd.DataFrame({'Metric': RADAR_METRICS})
    for _, player in players.iterrows():
        scores = radar_scores(player)
        data[player['Player']] = [scores[m] for m in RADAR_METRICS]
    return data


def bar_data(players):
    return pd.DataFrame({
        'Name': [surname(p) for p in players['Player']],
        'Runs': [_value(p, 'Runs') for _, p in players.iterrows()],
        'Wickets (x10)': [_value(p, 'Wickets') * 10 for _, p in players.iterrows()],
        'Matches': [_value(p, 'Matches') for _, p in players.iterrows()],
    })
