import os
import sys
import time

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

# --- 路径设置 ---
# 确保能找到 storenav 包
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from storenav.map.grid_map import GridMap
from storenav.planning.heuristics import ManhattanHeuristic, ZeroHeuristic
from storenav.planning.planners import AStarPlanner
from storenav.types import Coordinate
from storenav.visualization.observers import ExperimentObserver
from experiments.benchmark_config import BenchmarkConfig as cfg


def make_random_grid(width, height, density, seed, start, goal):
    """随机障碍栅格，起终点强制为空地"""
    rng = np.random.default_rng(seed)
    blocked = (rng.random((height, width)) < density).astype(np.int8)
    blocked[start.y, start.x] = 0
    blocked[goal.y, goal.x] = 0
    return GridMap(blocked)


def run_benchmark():
    start = Coordinate(0, 0)
    goal = Coordinate(cfg.MAP_WIDTH - 1, cfg.MAP_HEIGHT - 1)

    planners = {
        'A* (Manhattan)': AStarPlanner(heuristic=ManhattanHeuristic()),
        'Dijkstra (h=0)': AStarPlanner(heuristic=ZeroHeuristic()),
    }

    rows = []
    print(f"{'Density':<10} | {'Algo':<16} | {'Success%':<10} | {'Time(ms)':<10} | {'Nodes':<10} | {'Len':<10}")
    print("-" * 80)

    for density in cfg.DENSITIES:
        for trial in range(cfg.NUM_TRIALS):
            seed = cfg.RANDOM_SEED_BASE + trial + int(density * 1000)
            grid_map = make_random_grid(cfg.MAP_WIDTH, cfg.MAP_HEIGHT, density, seed, start, goal)

            lengths = {}
            for algo, planner in planners.items():
                observer = ExperimentObserver()
                t0 = time.perf_counter()
                path = planner.plan(start, goal, grid_map, debugger=observer)
                t1 = time.perf_counter()

                lengths[algo] = len(path)
                rows.append({
                    'Density': density,
                    'Trial': trial,
                    'Algorithm': algo,
                    'Success': bool(path),
                    'TimeMs': (t1 - t0) * 1000,
                    'Nodes': len(observer.expanded_nodes),
                    'Length': len(path) - 1 if path else np.nan,
                })

            # 两种启发式都可采纳，最短路长度必须一致
            if len(set(lengths.values())) != 1:
                print(f"[WARN] Path length mismatch at density={density}, seed={seed}: {lengths}")

    df = pd.DataFrame(rows)
    summary = (df.groupby(['Density', 'Algorithm'])
                 .agg(SuccessRate=('Success', 'mean'),
                      TimeMean=('TimeMs', 'mean'),
                      NodesMean=('Nodes', 'mean'),
                      LengthMean=('Length', 'mean'))
                 .reset_index())
    summary['SuccessRate'] *= 100

    for _, r in summary.iterrows():
        print(f"{r['Density']:<10.2f} | {r['Algorithm']:<16} | {r['SuccessRate']:<10.1f} | "
              f"{r['TimeMean']:<10.2f} | {r['NodesMean']:<10.1f} | {r['LengthMean']:<10.2f}")

    return df, summary


def plot_comparisons(summary, save_path=None):
    """可视化对比图表"""
    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    metrics = [
        ('TimeMean', 'Computation Time (ms)', 'Time Complexity'),
        ('NodesMean', 'Expanded Nodes', 'Space Complexity'),
        ('LengthMean', 'Path Length (steps)', 'Optimality'),
    ]

    for i, (metric, ylabel, title) in enumerate(metrics):
        ax = axes[i]
        for algo, marker in zip(summary['Algorithm'].unique(), ['o-', 's-']):
            data = summary[summary['Algorithm'] == algo]
            ax.plot(data['Density'], data[metric], marker, label=algo)
        ax.set_xlabel('Obstacle Density')
        ax.set_ylabel(ylabel)
        ax.set_title(title)
        ax.grid(True, linestyle=':', alpha=0.6)
        if i == 0:
            ax.legend()

    plt.tight_layout()
    if save_path:
        plt.savefig(save_path)
        print(f"Saved plot to {save_path}")
        plt.close(fig)
    else:
        plt.show()


if __name__ == "__main__":
    print("=== 开始启发式对比实验 (Manhattan vs Zero) ===")
    df_results, df_summary = run_benchmark()

    os.makedirs(cfg.LOG_DIR, exist_ok=True)
    timestamp = time.strftime("%Y%m%d_%H%M%S")
    csv_path = os.path.join(cfg.LOG_DIR, f"heuristics_{timestamp}.csv")
    df_results.to_csv(csv_path, index=False)
    print(f"\nRaw results written to {csv_path}")

    plot_comparisons(df_summary, save_path=os.path.join(cfg.LOG_DIR, f"heuristics_{timestamp}.png"))
