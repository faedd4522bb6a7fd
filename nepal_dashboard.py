import time
import logging

import streamlit as st
import pandas as pd

from nepal_cricket import config
from nepal_cricket import charts
from nepal_cricket.data import load_all, load_or_empty
from nepal_cricket.stats import (
    calculate_team_stats, opponent_head_to_head, result_distribution,
    recent_form, top_players, top_run_scorers,
)
from nepal_cricket.playing_xi import select_best_xi, team_rating, score_manual_xi, XI_SIZE
from nepal_cricket.prediction import simulate_prediction
from nepal_cricket.comparison import (
    merge_players, selected_players, radar_data, bar_data, MAX_COMPARED,
)

logging.basicConfig(level=config.log_level())

# Set page configuration
st.set_page_config(page_title="Nepal Cricket Analytics", page_icon="🏏", layout="wide")


# Failed loads raise, so they are never cached and the next rerun retries
@st.cache_data
def cached_load(fmt, kinds):
    return load_all(fmt, kinds)


def load_data(fmt, kinds=('matches', 'batsmen', 'bowlers')):
    data, error = load_or_empty(fmt, kinds, loader=cached_load)
    if error is not None:
        st.error(f"Error loading data: {error}")
    return data


def format_number(value, digits=2):
    return "N/A" if pd.isna(value) else f"{value:.{digits}f}"


# App Title
st.title("🏆 Nepal Cricket Analytics")
st.caption("Team and player statistics across T20I and ODI cricket")

# Sidebar for format selection
st.sidebar.title("Filters")
selected_format = st.sidebar.selectbox("Format:", config.FORMATS, index=config.FORMATS.index("Both"),
                                       format_func=lambda f: "Both Formats" if f == "Both" else f)

overview_tab, predictions_tab, opposition_tab, xi_tab, comparison_tab = st.tabs(
    ["Data Overview", "ML Predictions", "Opposition Analysis", "Best Playing XI", "Player Comparison"]
)

with overview_tab:
    data = load_data(selected_format)
    stats = calculate_team_stats(data.matches)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Matches", stats.total_matches, help=f"{selected_format} format")
    col2.metric("Win Rate", f"{stats.win_percentage:.1f}%", help=f"{stats.wins} wins, {stats.losses} losses")
    col3.metric("Avg Runs Scored", f"{stats.avg_runs_scored:.0f}", help="Per match")
    col4.metric("Run Rate", f"{stats.run_rate:.2f}", help="Runs per over")

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(charts.recent_performance_chart(recent_form(data.matches)), use_container_width=True)
    with col2:
        st.plotly_chart(charts.top_scorers_chart(top_run_scorers(data.batsmen)), use_container_width=True)

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Top Batsmen")
        st.caption(f"Leading run scorers in {selected_format} cricket")
        top_batsmen = top_players(data.batsmen)
        st.table(pd.DataFrame({
            'Player': top_batsmen['Player'],
            'Runs': top_batsmen['Runs'].fillna(0).astype(int),
            'Avg': top_batsmen['Average'].map(format_number),
            'SR': top_batsmen['Strike Rate'].map(format_number),
        }))
    with col2:
        st.subheader("Top Bowlers")
        st.caption(f"Leading wicket takers in {selected_format} cricket")
        top_bowlers = top_players(data.bowlers)
        st.table(pd.DataFrame({
            'Player': top_bowlers['Player'],
            'Wickets': top_bowlers['Wickets'].fillna(0).astype(int),
            'Avg': top_bowlers['Average'].map(format_number),
            'Econ': top_bowlers['Economy'].map(format_number),
        }))

with predictions_tab:
    st.header("ML-Powered Run Prediction")
    st.caption("Predict Nepal's expected total")

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        prediction_format = st.selectbox("Prediction Format", ["T20I", "ODI"])
    with col2:
        opponent = st.text_input("Opponent", placeholder="e.g., India")
    with col3:
        venue = st.text_input("Venue", placeholder="e.g., Kathmandu")
    with col4:
        toss_won = st.selectbox("Toss Won", ["Yes", "No"])

    if st.button("Generate Prediction"):
        with st.spinner("Running ML Model..."):
            time.sleep(config.prediction_delay())
            st.session_state['prediction'] = simulate_prediction(
                prediction_format, opponent, venue, toss_won == "Yes"
            )

    prediction = st.session_state.get('prediction')
    if prediction is not None:
        col1, col2 = st.columns(2)
        with col1:
            st.subheader("Prediction Results")
            st.caption(f"Insights for {prediction.format} format")
            c1, c2 = st.columns(2)
            c1.metric("Expected Total", f"{prediction.total_runs} runs")
            c2.metric("Run Rate", f"{prediction.run_rate:.2f} per over")
            st.write(f"**Confidence Score**: {prediction.confidence:.1f}%")
            st.progress(prediction.confidence / 100)
            st.write(f"**Opponent**: {prediction.opponent}")
            st.write(f"**Venue**: {prediction.venue}")
            st.write(f"**Toss**: {'Yes' if prediction.toss_won else 'No'}")
        with col2:
            st.plotly_chart(charts.wicket_progression_chart(prediction.wicket_progression), use_container_width=True)

with opposition_tab:
    data = load_data(selected_format, ('matches',))
    h2h = opponent_head_to_head(data.matches)

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(charts.head_to_head_chart(h2h), use_container_width=True)
    with col2:
        st.plotly_chart(charts.result_pie_chart(result_distribution(data.matches)), use_container_width=True)

    st.subheader("Detailed Opposition Statistics")
    st.table(pd.DataFrame({
        'Opponent': h2h['Opponent'],
        'Played': h2h['Played'],
        'Won': h2h['Won'],
        'Lost': h2h['Lost'],
        'Win Rate': h2h['Win Rate'].map(lambda v: f"{v:.1f}%"),
        'Avg Runs': h2h['Avg Runs'].map(lambda v: f"{v:.0f}"),
    }))

# Best XI and Player Comparison always use the combined player lists
with xi_tab:
    players = load_data("Both", ('batsmen', 'bowlers'))
    auto_tab, manual_tab = st.tabs(["Auto Suggested XI", "Manual XI Builder"])

    with auto_tab:
        st.subheader("Best Playing XI")
        st.caption("Selection weighted on batting average, strike rate, wickets and economy")
        xi_format = st.selectbox("XI Format", ["T20I", "ODI"], key="xi_format")
        if st.button("Generate Best XI"):
            st.session_state['best_xi'] = select_best_xi(players.batsmen, players.bowlers, xi_format)

        xi = st.session_state.get('best_xi')
        if xi is not None and not xi.empty:
            st.metric("Team Rating", f"{team_rating(xi)}/100")
            cols = st.columns(3)
            for i, (_, player) in enumerate(xi.iterrows()):
                with cols[i % 3]:
                    st.markdown(f"**{player['Player']}** `{player['Role']}`")
                    st.caption(f"{format_number(player['Matches'], 0)} matches")
                    if player['Role'] != 'Bowler' and pd.notna(player['Runs']):
                        st.write(f"Runs: {player['Runs']:.0f} | Avg: {format_number(player['Average'], 1)} | "
                                 f"SR: {format_number(player['Strike Rate'], 1)}")
                    if player['Role'] in ('Bowler', 'AR') and pd.notna(player['Wickets']):
                        st.write(f"Wickets: {player['Wickets']:.0f} | Econ: {format_number(player['Economy'])}")
        elif xi is not None:
            st.warning("No player data available to build an XI.")

    with manual_tab:
        st.subheader("Manual XI Builder")
        st.caption("Select your own playing XI and see the team rating")
        manual_format = st.selectbox("XI Format", ["T20I", "ODI"], key="manual_format")
        pool = merge_players(players.batsmen, players.bowlers)
        picks = st.multiselect("Players", list(pool['Player']), max_selections=XI_SIZE)
        if picks:
            team = score_manual_xi(picks, players.batsmen, players.bowlers, manual_format)
            st.metric("Team Rating", f"{team_rating(team)}/100", help=f"{len(picks)} of {XI_SIZE} selected")
            st.dataframe(team[['Player', 'Role', 'score']].round(1), use_container_width=True)

with comparison_tab:
    st.header("Player Comparison Tool")
    st.caption("Compare up to 3 players across T20I and ODI formats")
    players = load_data("Both", ('batsmen', 'bowlers'))
    pool = merge_players(players.batsmen, players.bowlers)
    options = [""] + list(pool['Player'])

    cols = st.columns(MAX_COMPARED)
    names = []
    for i, col in enumerate(cols):
        with col:
            names.append(st.selectbox(f"Player {i + 1}", options, key=f"compare_{i}"))

    compared = selected_players(pool, names)
    if len(compared) >= 2:
        col1, col2 = st.columns(2)
        with col1:
            st.plotly_chart(charts.radar_chart(radar_data(compared)), use_container_width=True)
        with col2:
            st.plotly_chart(charts.comparison_bar_chart(bar_data(compared)), use_container_width=True)

        cols = st.columns(len(compared))
        for col, (_, player) in zip(cols, compared.iterrows()):
            with col:
                st.subheader(player['Player'])
                st.caption(f"T20I: {format_number(player['T20I Matches'], 0)} matches | "
                           f"ODI: {format_number(player['ODI Matches'], 0)} matches")
                st.write(f"**Total Runs**: {0 if pd.isna(player['Runs']) else int(player['Runs'])}")
                st.write(f"**Batting Avg**: {format_number(player['Average'])}")
                st.write(f"**Strike Rate**: {format_number(player['Strike Rate'])}")
                if pd.notna(player['Wickets']) and player['Wickets']:
                    st.write(f"**Wickets**: {int(player['Wickets'])}")
                    if pd.notna(player['Economy']) and player['Economy']:
                        st.write(f"**Economy**: {player['Economy']:.2f}")
                if pd.notna(player['100s']):
                    st.write(f"**100s/50s**: {format_number(player['100s'], 0)}/{format_number(player['50s'], 0)}")
                if pd.notna(player['Highest Score']):
                    st.write(f"**Highest**: {player['Highest Score']}")
    else:
        st.info("Select at least two players to compare.")

# Footer
st.sidebar.markdown("---")
st.sidebar.markdown("Data: Nepal T20I and ODI records (static CSV files)")
