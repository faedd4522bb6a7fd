import math
from dataclasses import dataclass

import numpy as np
import pandas as pd

from nepal_cricket.config import OVERS

BASE_RUNS = {"T20I": 140, "ODI": 220}
TOSS_BONUS = 10


@dataclass
class Prediction:
    format: str
    opponent: str
    venue: str
    toss_won: bool
    total_runs: int
    run_rate: float
    confidence: float
    wicket_progression: pd.DataFrame


def round_half_up(x):
    return int(math.floor(x + 0.5))


def wicket_progression(total_runs, rng):
    # Runs on the board at the fall of wickets 0 to 10
    runs = []
    runs_at_wicket = 0
    for wicket in range(11):
        if wicket == 0:
            runs_at_wicket = 0
        elif wicket == 10:
            runs_at_wicket = total_runs
        else:
            runs_at_wicket += round_half_up(total_runs / 12 + rng.uniform(-10, 10))
        runs.append(min(runs_at_wicket, total_runs))
    return pd.DataFrame({'Wicket': range(11), 'Runs': runs})


def simulate_prediction(fmt, opponent="", venue="", toss_won=True, rng=None):
    if fmt not in BASE_RUNS:
        raise ValueError(f"Prediction needs T20I or ODI, got {fmt!r}")
    rng = rng if rng is not None else np.random.default_rng()

    variation = rng.uniform(-20, 20)
    bonus = TOSS_BONUS if toss_won else 0
    total_runs = round_half_up(BASE_RUNS[fmt] + variation + bonus)

    progression = wicket_progression(total_runs, rng)
    confidence = min(95.0, 70 + rng.uniform(0, 20))

    return Prediction(
        format=fmt,
        opponent=opponent.strip() or "Not specified",
        venue=venue.strip() or "Not specified",
        toss_won=toss_won,
        total_runs=total_runs,
        run_rate=round(total_runs / OVERS[fmt], 2),
        confidence=round(confidence, 1),
        wicket_progression=progression,
    )
