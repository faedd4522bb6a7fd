import pytest

from nepal_cricket.comparison import (
    merge_players, selected_players, radar_scores, radar_data, bar_data,
)


def test_merge_players_prefers_batting_rows(batsmen, bowlers):
    merged = merge_players(batsmen, bowlers)

    assert merged['Player'].is_unique
    assert len(merged) == 7 + 5
    airee = merged.set_index('Player').loc['Dipendra Airee']
    assert airee['Runs'] == 1427
    # bowler-only players come after every batsman
    assert list(merged['Player'][7:]) == ['Sandeep Lamichhane', 'Karan KC', 'Lalit Rajbanshi', 'Sompal Kami',
                                       'Abinash Bohara']


def test_selected_players(batsmen, bowlers):
    pool = merge_players(batsmen, bowlers)

    chosen = selected_players(pool, ['Karan KC', '', 'Rohit Paudel'])
    assert list(chosen['Player']) == ['Karan KC', 'Rohit Paudel']

    # repeats and unknown names are dropped, only the first three slots count
    chosen = selected_players(pool, ['Karan KC', 'Karan KC', 'Nobody', 'Rohit Paudel'])
    assert list(chosen['Player']) == ['Karan KC']


def test_radar_scores_for_batsman(batsmen):
    player = batsmen.iloc[1].copy()
    player['Strike Rate'] = 250
    player['Runs'] = 6000
    scores = radar_scores(player)

    assert scores == pytest.approx({
        'Batting Avg': 60.0,
        'Strike Rate': 100.0,
        'Runs': 100.0,
        'Wickets': 0.0,
        'Economy': 0.0,
    })


def test_radar_scores_for_bowler(bowlers):
    scores = radar_scores(bowlers.iloc[0])

    assert scores['Batting Avg'] == pytest.approx(24.0)
    assert scores['Wickets'] == pytest.approx(50.0)
    assert scores['Economy'] == pytest.approx(40.0)


def test_radar_data_has_a_column_per_player(batsmen, bowlers):
    pool = merge_players(batsmen, bowlers)
    radar = radar_data(selected_players(pool, ['Kushal Bhurtel', 'Sandeep Lamichhane']))

    assert list(radar.columns) == ['Metric', 'Kushal Bhurtel', 'Sandeep Lamichhane']
    assert list(radar['Metric']) == ['Batting Avg', 'Strike Rate', 'Runs', 'Wickets', 'Economy']


def test_bar_data(batsmen, bowlers):
    pool = merge_players(batsmen, bowlers)
    bars = bar_data(selected_players(pool, ['Kushal Bhurtel', 'Sandeep Lamichhane']))

    assert list(bars['Name']) == ['Bhurtel', 'Lamichhane']
    assert list(bars['Runs']) == [1240, 0]
    assert list(bars['Wickets (x10)']) == [0, 1000]
    assert list(bars['Matches']) == [45, 53]
