import logging

import numpy as np
import pandas as pd

from nepal_cricket import config

logger = logging.getLogger(__name__)

XI_SIZE = 11
ALL_ROUNDER_THRESHOLD = 100
MAX_ALL_ROUNDERS = 2
PURE_BATSMEN = 4
PURE_BOWLERS = 4


def _num(player, column):
    """Numeric value of a stat, 0 when missing or unparsable."""
    value = pd.to_numeric(player.get(column, np.nan), errors='coerce')
    if pd.isna(value):
        return 0.0
    return float(value)


def batting_score(player, fmt):
    runs = _num(player, f'{fmt} Runs')
    score = runs * 0.4 + _num(player, 'Average') * 5 + _num(player, 'Strike Rate') * 2
    score += _num(player, '100s') * 50
    score += _num(player, '50s') * 20
    return score


def bowling_score(player, fmt):
    score = _num(player, f'{fmt} Wickets') * 10
    average = _num(player, 'Average')
    if average:
        score += (50 - average) * 2
    economy = _num(player, 'Economy')
    if economy:
        score += (10 - economy) * 5
    score += _num(player, '4W') * 30
    score += _num(player, '5W') * 50
    return score


def score_players(players, fmt, batting):
    """Return a copy of `players` with a `score` column, best first."""
    scorer = batting_score if batting else bowling_score
    scored = players.copy()
    scored['score'] = [scorer(row, fmt) for _, row in players.iterrows()]
    return scored.sort_values('score', ascending=False, kind='stable').reset_index(drop=True)


def player_role(name, batsmen, bowlers, keeper=None):
    keeper = keeper or config.keeper_name()
    is_batsman = name in set(batsmen['Player'])
    is_bowler = name in set(bowlers['Player'])
    if keeper in name:
        return 'WK'
    if is_batsman and is_bowler:
        return 'AR'
    if is_bowler:
        return 'Bowler'
    return 'Batsman'


def select_best_xi(batsmen, bowlers, fmt, keeper=None):
    # Keeper, four batsmen, up to two all-rounders and four bowlers, no repeats
    if fmt not in config.OVERS:
        raise ValueError(f"Best XI needs T20I or ODI, got {fmt!r}")
    keeper = keeper or config.keeper_name()

    # Sorted best first, so a repeated player keeps their highest-scoring row
    scored_batsmen = score_players(batsmen, fmt, batting=True).drop_duplicates('Player')
    scored_bowlers = score_players(bowlers, fmt, batting=False).drop_duplicates('Player')
    if scored_batsmen.empty:
        logger.warning("No batsmen available, cannot build an XI")
        return scored_batsmen.assign(Role=pd.Series(dtype=object))

    keeper_rows = scored_batsmen[scored_batsmen['Player'].str.contains(keeper, regex=False, na=False)]
    keeper_row = keeper_rows.iloc[0] if not keeper_rows.empty else scored_batsmen.iloc[0]
    keeper_player = keeper_row['Player']

    bowler_scores = dict(zip(scored_bowlers['Player'], scored_bowlers['score']))
    all_rounders = [
        name for name in scored_batsmen['Player']
        if name != keeper_player and bowler_scores.get(name, 0) > ALL_ROUNDER_THRESHOLD
    ][:MAX_ALL_ROUNDERS]

    pure_batsmen = [
        name for name in scored_batsmen['Player']
        if name != keeper_player and name not in all_rounders
    ][:PURE_BATSMEN]

    picked = [keeper_player] + pure_batsmen + all_rounders
    pure_bowlers = [name for name in scored_bowlers['Player'] if name not in picked][:PURE_BOWLERS]

    batting_rows = scored_batsmen.set_index('Player')
    bowling_rows = scored_bowlers.set_index('Player')
    rows = [batting_rows.loc[name] for name in picked] + [bowling_rows.loc[name] for name in pure_bowlers]

    xi = pd.DataFrame(rows).infer_objects().rename_axis('Player').reset_index()
    xi['Role'] = [player_role(name, batsmen, bowlers, keeper) for name in xi['Player']]
    logger.info(f"Selected {len(xi)} players for the {fmt} XI")
    return xi


def team_rating(team):
    # Mean score over 10, capped at 100
    if len(team) == 0:
        return 0.0
    return round(min(100.0, float(team['score'].mean()) / 10), 1)


def score_manual_xi(names, batsmen, bowlers, fmt, keeper=None):
    # Batting score if the player is in the batting table, else bowling score
    if len(names) > XI_SIZE:
        raise ValueError(f"A playing XI has at most {XI_SIZE} players, got {len(names)}")
    keeper = keeper or config.keeper_name()

    scored_batsmen = score_players(batsmen, fmt, batting=True).drop_duplicates('Player').set_index('Player')
    scored_bowlers = score_players(bowlers, fmt, batting=False).drop_duplicates('Player').set_index('Player')

    rows = []
    for name in names:
        if name in scored_batsmen.index:
            rows.append(scored_batsmen.loc[name])
        elif name in scored_bowlers.index:
            rows.append(scored_bowlers.loc[name])
        else:
            raise KeyError(f"Unknown player: {name}")

    if not rows:
        return pd.DataFrame(columns=['Player', 'score', 'Role'])
    team = pd.DataFrame(rows).infer_objects().rename_axis('Player').reset_index()
    team['Role'] = [player_role(name, batsmen, bowlers, keeper) for name in team['Player']]
    return team
