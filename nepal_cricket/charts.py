import plotly.express as px
import plotly.graph_objects as go

RESULT_COLORS = {'Won': '#2e7d32', 'Lost': '#c62828', 'No Result': '#9e9e9e'}
PLAYER_COLORS = ['#1f77b4', '#ff7f0e', '#2ca02c']


def recent_performance_chart(form):
    fig = px.line(form, x='Match', y='Runs', markers=True, title='Last 10 Matches Run Trend')
    fig.update_layout(xaxis_title="Match", yaxis_title="Runs Scored")
    return fig


def top_scorers_chart(scorers):
    fig = px.bar(scorers, x='Name', y='Runs', title='Top Run Scorers')
    fig.update_layout(xaxis_title="Player", yaxis_title="Runs")
    return fig


def head_to_head_chart(h2h, limit=8):
    h2h = h2h.head(limit)
    fig = go.Figure()
    fig.add_trace(go.Bar(x=h2h['Opponent'], y=h2h['Won'], name='Won', marker_color=RESULT_COLORS['Won']))
    fig.add_trace(go.Bar(x=h2h['Opponent'], y=h2h['Lost'], name='Lost', marker_color=RESULT_COLORS['Lost']))
    fig.update_layout(
        title='Head-to-Head Records',
        xaxis_title='Opponent',
        yaxis_title='Matches',
        xaxis_tickangle=-45,
        barmode='group'
    )
    return fig


def result_pie_chart(distribution):
    fig = px.pie(distribution, values='Count', names='Result', color='Result',
                 color_discrete_map=RESULT_COLORS, title='Overall Result Distribution')
    fig.update_traces(textinfo='label+percent')
    return fig


def wicket_progression_chart(progression):
    fig = px.line(progression, x='Wicket', y='Runs', markers=True, title='Wicket-wise Run Progression')
    fig.update_layout(xaxis_title="Wickets", yaxis_title="Runs")
    return fig


def radar_chart(radar):
    metrics = list(radar['Metric'])
    fig = go.Figure()
    for i, player in enumerate(radar.columns[1:]):
        # Repeat the first point to close the polygon
        values = list(radar[player]) + [radar[player].iloc[0]]
        fig.add_trace(go.Scatterpolar(
            r=values,
            theta=metrics + metrics[:1],
            fill='toself',
            opacity=0.6,
            name=player,
            line_color=PLAYER_COLORS[i % len(PLAYER_COLORS)]
        ))
    fig.update_layout(
        title='Performance Radar',
        polar=dict(radialaxis=dict(visible=True, range=[0, 100]))
    )
    return fig


def comparison_bar_chart(bars):
    fig = px.bar(bars, x='Name', y=['Runs', 'Wickets (x10)', 'Matches'], barmode='group',
                 title='Statistical Comparison')
    fig.update_layout(xaxis_title="Player", yaxis_title="Value", legend_title_text="")
    return fig
