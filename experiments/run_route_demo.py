import argparse
import logging
import os
import sys

# --- Path Setup ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from storenav.config import GlobalConfig
from storenav.map.store_layout import build_store_grid, zones_for_items
from storenav.planning.route_builder import RouteBuilder
from storenav.simulation.narrator import Narrator
from storenav.visualization.observers import DebugObserver, ExperimentObserver
from experiments.store_config import StoreConfig as cfg


def run_demo(items, mute=False, plot_path=None, debug=False, strict=False):
    print(f"=== Generating Route (Items={', '.join(items)}) ===")

    # 1. Store layout & selected zones
    grid_map = build_store_grid(cfg.WIDTH, cfg.HEIGHT, cfg.ZONES)
    zones = zones_for_items(items, cfg.CATALOG, cfg.ZONES)
    if not zones:
        print("No known items selected, nothing to do.")
        return None
    print(f"Zones to visit: {' -> '.join(z.name for z in zones)}")

    # 2. Plan
    observer = DebugObserver(log_dir=cfg.LOG_DIR) if debug else ExperimentObserver()
    builder = RouteBuilder(grid_map, config=GlobalConfig(strict=strict, debug_mode=debug))
    result = builder.build(cfg.ENTRANCE, zones, cfg.CHECKOUT, debugger=observer)

    # 3. Report
    print(f"Estimated Time: {result.estimated_time} min | Total Distance: {result.total_distance} steps"
          f" | Turns: {result.turns}")
    if not result.complete:
        print(f"WARNING: route incomplete (skipped={[z.name for z in result.skipped_zones]}, "
              f"unreachable={result.unreachable_segments})")

    narrator = Narrator(speak=lambda text: print(f"  [Voice] {text}"), muted=mute)
    for i, line in enumerate(narrator.script(result.steps), start=1):
        print(f"Step {i:>3}: {line}")
    spoken = narrator.play(result.steps)
    print(f"Narrated {spoken} instruction(s)")

    if debug:
        print(f"Debug log written to {observer.log_file}")
        observer.close()

    # 4. Visualize
    if plot_path:
        import matplotlib
        matplotlib.use("Agg")
        from storenav.visualization.plotter import RoutePlotter

        plotter = RoutePlotter(grid_map, cfg.ZONES)
        plotter.draw(result.steps, observer=observer, title="Store Route")
        plotter.save(plot_path)
        print(f"Saved visualization to {plot_path}")

    return result


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Plan a walking route through the demo store.")
    parser.add_argument("items", nargs="*", default=["milk", "bread", "apples"],
                        help=f"Item ids, known: {', '.join(sorted(cfg.CATALOG))}")
    parser.add_argument("--mute", action="store_true", help="Do not narrate the instructions")
    parser.add_argument("--plot", metavar="PNG", help="Save a route plot to this file")
    parser.add_argument("--debug", action="store_true", help="Write a detailed search log")
    parser.add_argument("--strict", action="store_true", help="Fail if any zone is unreachable")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')

    run_demo(args.items, mute=args.mute, plot_path=args.plot, debug=args.debug, strict=args.strict)
