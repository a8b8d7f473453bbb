import os


class BenchmarkConfig:
    # --- Experiment Settings ---
    DENSITIES = [0.0, 0.10, 0.20, 0.30]   # Obstacle densities to test
    NUM_TRIALS = 20                       # Number of trials per density
    RANDOM_SEED_BASE = 1000               # Base seed for reproducibility

    # --- Map Parameters ---
    MAP_WIDTH = 60                        # cells
    MAP_HEIGHT = 40                       # cells

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "benchmarks")
