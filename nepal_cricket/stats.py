from dataclasses import dataclass

import pandas as pd

from nepal_cricket.config import OVERS


@dataclass(frozen=True)
class TeamStats:
    total_matches: int
    wins: int
    losses: int
    no_results: int
    win_percentage: float
    avg_runs_scored: float
    avg_wickets_lost: float
    run_rate: float


def _positive_mean(series):
    values = pd.to_numeric(series, errors='coerce')
    values = values[values > 0]
    return float(values.mean()) if len(values) > 0 else 0.0


def calculate_team_stats(matches):
    """Aggregate win/loss counts and scoring averages over a set of matches.

    Run rate is an estimate: the average total divided by the full quota of
    overs for the format of the first match.
    """
    total_matches = len(matches)
    wins = int((matches['result'] == 'Won').sum())
    losses = int((matches['result'] == 'Lost').sum())
    no_results = int((matches['result'] == 'No Result').sum())

    win_percentage = (wins / total_matches) * 100 if total_matches > 0 else 0.0
    avg_runs_scored = _positive_mean(matches['nepal_runs'])
    avg_wickets_lost = _positive_mean(matches['nepal_wickets_lost'])

    first_format = matches['format'].iloc[0] if total_matches > 0 else None
    run_rate = avg_runs_scored / OVERS['T20I' if first_format == 'T20I' else 'ODI']

    return TeamStats(
        total_matches=total_matches,
        wins=wins,
        losses=losses,
        no_results=no_results,
        win_percentage=win_percentage,
        avg_runs_scored=avg_runs_scored,
        avg_wickets_lost=avg_wickets_lost,
        run_rate=run_rate,
    )


def opponent_head_to_head(matches, limit=10):
    """Head-to-head record against each opponent, most played first."""
    columns = ['Opponent', 'Played', 'Won', 'Lost', 'NR', 'Runs', 'Win Rate', 'Avg Runs']
    if matches.empty:
        return pd.DataFrame(columns=columns)

    runs = pd.to_numeric(matches['nepal_runs'], errors='coerce').fillna(0)
    frame = pd.DataFrame({
        'Opponent': matches['opponent'],
        'won': (matches['result'] == 'Won').astype(int),
        'lost': (matches['result'] == 'Lost').astype(int),
        'runs': runs,
    })
    frame['nr'] = 1 - frame['won'] - frame['lost']

    h2h = frame.groupby('Opponent', sort=False).agg(
        Played=('won', 'size'),
        Won=('won', 'sum'),
        Lost=('lost', 'sum'),
        NR=('nr', 'sum'),
        Runs=('runs', 'sum'),
    ).reset_index()
    h2h['Win Rate'] = h2h['Won'] / h2h['Played'] * 100
    h2h['Avg Runs'] = h2h['Runs'] / h2h['Played']

    # Stable sort keeps first-appearance order among opponents played equally often
    h2h = h2h.sort_values('Played', ascending=False, kind='stable').head(limit)
    return h2h[columns].reset_index(drop=True)


def result_distribution(matches):
    names = ['Won', 'Lost', 'No Result']
    return pd.DataFrame({
        'Result': names,
        'Count': [int((matches['result'] == name).sum()) for name in names],
    })


def recent_form(matches, n=10):
    recent = matches.tail(n)
    runs = pd.to_numeric(recent['nepal_runs'], errors='coerce').fillna(0)
    return pd.DataFrame({
        'Match': [f"Match {i + 1}" for i in range(len(recent))],
        'Runs': runs.values,
        'Won': (recent['result'] == 'Won').astype(int).values,
    })


def top_players(players, n=10):
    # Files are already ordered by the leading statistic
    return players.head(n).reset_index(drop=True)


def surname(name):
    parts = str(name).split()
    return parts[-1] if parts else ''


def top_run_scorers(batsmen, n=5):
    top = batsmen.head(n)
    return pd.DataFrame({
        'Name': [surname(p) for p in top['Player']],
        'Runs': pd.to_numeric(top['Runs'], errors='coerce').fillna(0).values,
    })
