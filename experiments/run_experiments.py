"""
experiments/run_experiments.py

Experiment harness that loads the baseline config, applies scenario overrides,
runs each scenario to completion, and prints the per-step trajectory, the
event log, and a KPI summary. Optionally saves an occupancy plot per scenario.
"""

from __future__ import annotations
import logging, os, sys
from typing import Dict, List, Optional, Tuple
try:
    # When executed as a module: python -m experiments.run_experiments
    from .scenarios import SCENARIOS  # type: ignore
except ImportError:  # pragma: no cover
    # When run as a script in VSCode/terminal
    ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if ROOT not in sys.path:
        sys.path.insert(0, ROOT)
    from experiments.scenarios import SCENARIOS  # type: ignore

from queuesim.config import apply_overrides, load_cfg, queue_params
from queuesim.simulation import run_from_config

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

ROW = "{0: >10} {1: >10} {2: >10}"


def print_row(state):
    print(ROW.format(state.time, state.buffer_count, state.server_count))


def print_events(events: List[Tuple[int, str]]):
    for t, kind in events:
        print(f"  ({t}, {kind})")


def plot_trajectory(trajectory: List[Tuple[int, int, int]], scenario_name: str) -> Optional[str]:
    """
    Persist a PNG step plot of buffer and server occupancy versus time.
    Returns the output path, or None when the trajectory is empty.
    """
    if not trajectory:
        return None
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt  # type: ignore
    x = [t for t, _, _ in trajectory]
    y_buffer = [b for _, b, _ in trajectory]
    y_server = [s for _, _, s in trajectory]
    plt.figure(figsize=(9, 5))
    plt.step(x, y_buffer, where="post", label="Buffer", color="#2563eb")
    plt.step(x, y_server, where="post", label="Server", color="#d97706")
    plt.xlabel("Time")
    plt.ylabel("Occupancy")
    plt.title(f"{scenario_name}: occupancy trajectory")
    plt.legend()
    plt.grid(True, linestyle="--", alpha=0.4)
    out_dir = os.path.join(ROOT, "experiments", "output")
    os.makedirs(out_dir, exist_ok=True)
    safe_name = scenario_name.lower().replace(" ", "_")
    out_path = os.path.join(out_dir, f"{safe_name}_trajectory.png")
    plt.tight_layout()
    plt.savefig(out_path, dpi=160)
    plt.close()
    return out_path


def run_scenario(cfg: Dict, sc: Dict) -> Dict:
    """Run one scenario and print its trajectory, log, and KPIs."""
    sc_cfg = apply_overrides(cfg, sc["overrides"])
    exp_cfg = sc_cfg.get("experiments", {})
    buffer_capacity, server_capacity, server_duration = queue_params(sc_cfg)
    print(f"Scenario: {sc['name']} (buffer={buffer_capacity}, "
          f"servers={server_capacity}, duration={server_duration})")
    on_step = None
    if exp_cfg.get("print_trajectory", True):
        print(ROW.format("Time", "Buffer", "Server"))
        on_step = print_row
    res = run_from_config(sc_cfg, on_step=on_step)
    if exp_cfg.get("print_log", True):
        print("  Event log:")
        print_events(res["events"])
    print(f"  Arrivals: {res['arrivals']} (admitted {res['admitted']}, discarded {res['discarded']})")
    print(f"  Served: {res['served']}, completed: {res['completed']}")
    print(f"  End time: {res['end_time']}")
    print(f"  Avg buffer occupancy: {res['avg_buffer']:.3f} (max {res['max_buffer']})")
    print(f"  Avg busy servers: {res['avg_server']:.3f} (max {res['max_server']})")
    print(f"  Server utilization: {res['server_utilization'] * 100.0:.1f}%")
    if exp_cfg.get("plot", False):
        plot_path = plot_trajectory(res["trajectory"], sc["name"])
        if plot_path:
            print(f"  Occupancy plot saved to: {plot_path}")
    print("-")
    return res


def main():
    """Entry point: drive all scenarios and report trajectories and KPIs."""
    logging.basicConfig(
        level=os.environ.get("QUEUESIM_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    cfg = load_cfg()
    for sc in SCENARIOS:
        run_scenario(cfg, sc)


if __name__ == "__main__":
    main()
