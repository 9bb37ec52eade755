import argparse
import datetime
import math
import os
import random
import sys

import numpy as np
import pandas as pd

# Add src to path to import the live-feed header
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from src.monitoring.domain import TRAFFIC_COLUMNS

# Simulation Configuration
NUM_SAMPLES = 288 # One day of 5-minute bins
START = datetime.datetime(2024, 1, 1)
MODEL_NAME = "lstm"

def daily_profile(minute_of_day: int) -> float:
    """Two rush-hour peaks (08:00 and 17:30) over a night-time floor."""
    hour = minute_of_day / 60.0
    morning = math.exp(-((hour - 8.0) ** 2) / 2.0)
    evening = math.exp(-((hour - 17.5) ** 2) / 3.0)
    return 0.15 + 0.85 * max(morning, evening)

def generate_traffic(num_samples: int = NUM_SAMPLES) -> pd.DataFrame:
    rows = []
    for i in range(num_samples):
        timestamp = START + datetime.timedelta(minutes=5 * i)
        load = daily_profile(timestamp.hour * 60 + timestamp.minute)

        lane1_flow = max(0, int(np.random.normal(60 * load, 4)))
        lane2_flow = max(0, int(np.random.normal(50 * load, 4)))
        # Speed drops as the road fills up
        lane1_speed = round(max(5.0, np.random.normal(68 - 30 * load, 2)), 1)
        lane2_speed = round(max(5.0, np.random.normal(64 - 30 * load, 2)), 1)
        total_flow = lane1_flow + lane2_flow
        avg_speed = round((lane1_speed + lane2_speed) / 2, 1)

        rows.append([
            timestamp.strftime("%m/%d/%Y %H:%M"),
            lane1_flow,
            lane2_flow,
            lane1_speed,
            lane2_speed,
            total_flow,
            avg_speed,
            2,
            random.choice([100, 100, 100, 50]),
        ])
    return pd.DataFrame(rows, columns=TRAFFIC_COLUMNS)

def generate_predictions(traffic: pd.DataFrame) -> pd.DataFrame:
    """
    Headerless log: timestamp, model, predicted, actual, latency (s), global time (s).
    """
    actual = traffic["Flow (Veh/5 Minutes)"].astype(float)
    predicted = (actual * np.random.normal(1.0, 0.08, len(actual))).round(2)
    latency = np.random.uniform(0.005, 0.05, len(actual)).round(4)
    global_time = np.cumsum(latency).round(4)
    return pd.DataFrame({
        0: traffic["5 Minutes"],
        1: MODEL_NAME,
        2: predicted,
        3: actual,
        4: latency,
        5: global_time,
    })

def main():
    parser = argparse.ArgumentParser(description="Generate synthetic live-feed and prediction files")
    parser.add_argument("--samples", type=int, default=NUM_SAMPLES)
    parser.add_argument("--traffic-file", default="data/traffic_feed.csv")
    parser.add_argument("--prediction-file", default="data/prediction_results.csv")
    args = parser.parse_args()

    print(f"Generating {args.samples} synthetic traffic records...")
    traffic = generate_traffic(args.samples)
    predictions = generate_predictions(traffic)

    for path in (args.traffic_file, args.prediction_file):
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    traffic.to_csv(args.traffic_file, index=False)
    predictions.to_csv(args.prediction_file, index=False, header=False)
    print(traffic.head())
    print(f"Live feed saved to {args.traffic_file}")
    print(f"Prediction log saved to {args.prediction_file}")

if __name__ == "__main__":
    main()
