#!/usr/bin/env python3
"""
═══════════════════════════════════════════════════════════════════════════════
  PROJECTILE TRAJECTORY SIMULATOR — Main Runner
═══════════════════════════════════════════════════════════════════════════════

  Interactive menu:
    1. Run test     : random v0 ∈ [10, 500] m/s, α0 ∈ [6, 89]°; saves the
                      velocity/position curves, the animated trajectory and
                      appends the computed quantities to output/log.txt
    2. Clean log    : empties output/log.txt
    3. Exit

  Usage:
    python main.py                # Interactive menu
    python main.py --quick        # Skip animation (faster)
    python main.py --runs 3       # Tests per "Run test" selection
    python main.py --seed 42      # Reproducible random launches
    python main.py --validate     # Drag-free check against closed forms, then exit
═══════════════════════════════════════════════════════════════════════════════
"""

import sys
import os
import time
import numpy as np

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from projectile_trajectory.parameters import derive_parameters
from projectile_trajectory.projectile import SimulationError
from projectile_trajectory.simulation import simulate, random_launch
from projectile_trajectory.reporting import format_summary, append_report, clear_log
from projectile_trajectory.validation import validate_against_vacuum
from projectile_trajectory.visualization import (
    plot_results, create_trajectory_animation, ensure_output_dir,
)

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt


OUTPUT_DIR = 'output'
IMAGES_DIR = os.path.join(OUTPUT_DIR, 'images')
LOG_FILE = os.path.join(OUTPUT_DIR, 'log.txt')

GREEN, BLUE, RED, NC = '\033[0;32m', '\033[0;34m', '\033[0;31m', '\033[0m'


def banner():
    print(f"""
╔═══════════════════════════════════════════════════════════════════════╗
║                  {GREEN}PROJECTILE TRAJECTORY SIMULATION{NC}                     ║
╠═══════════════════════════════════════════════════════════════════════╣
║  Point mass · gravity · linear (Stokes) + quadratic (form) drag       ║
║  Random launch per test: v0 ∈ [10, 500] m/s, α0 ∈ [6, 89]°            ║
║  Options: {GREEN}run test{NC}, {BLUE}clean up log{NC}, or {RED}exit{NC}                          ║
╚═══════════════════════════════════════════════════════════════════════╝
""")


def section(title):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def _arg_value(name, default, cast):
    """Value following a --flag on the command line."""
    if name in sys.argv:
        idx = sys.argv.index(name)
        if idx + 1 < len(sys.argv):
            return cast(sys.argv[idx + 1])
    return default


def run_test(index, rng, params, quick=False):
    """Simulate one random launch and write its figures and log entry."""
    v0, alpha0 = random_launch(rng)
    section(f"TEST {index}: v0 = {v0} m/s, α0 = {alpha0}°")

    try:
        trajectory, metrics = simulate(v0, alpha0, params)
    except SimulationError as exc:
        print(f"  {RED}✗ Simulation failed: {exc}{NC}")
        return None

    print(format_summary(metrics, v0, alpha0))
    if trajectory.truncated:
        print(f"  {RED}⚠ Step budget exhausted before ground contact "
              f"(y = {trajectory.y[-1]:.2f} m at t = {trajectory.time[-1]:.2f} s){NC}")

    suffix = '' if index == 1 else f'_{index}'

    curves_path = os.path.join(IMAGES_DIR, f'velocity_position_curve{suffix}.png')
    fig = plot_results(trajectory, save_path=curves_path)
    plt.close(fig)
    print(f"  ✓ Saved: {curves_path}")

    if not quick:
        anim_path = os.path.join(IMAGES_DIR, f'trajectory_animation{suffix}.gif')
        create_trajectory_animation(trajectory, save_path=anim_path, frames=120)
        print(f"  ✓ Saved: {anim_path}")

    append_report(metrics, LOG_FILE)
    print(f"  ✓ Logged: {LOG_FILE}")
    return metrics


def main():
    quick = '--quick' in sys.argv
    runs = _arg_value('--runs', 1, int)
    seed = _arg_value('--seed', None, int)

    if '--validate' in sys.argv:
        results = validate_against_vacuum(verbose=True)
        return 0 if all(r.within_grid for r in results) else 1

    banner()
    ensure_output_dir(IMAGES_DIR)
    rng = np.random.default_rng(seed)
    params = derive_parameters()

    while True:
        print()
        print("Select an option:")
        print(f"1. {GREEN}Run test{NC}")
        print(f"2. {BLUE}Clean up log file{NC}")
        print(f"3. {RED}Exit{NC}")

        try:
            choice = input().strip()
        except EOFError:
            choice = '3'

        if choice == '1':
            print(f"{GREEN}Running test...{NC}")
            start_time = time.time()
            for i in range(1, runs + 1):
                run_test(i, rng, params, quick=quick)
            print(f"\n  Total runtime: {time.time() - start_time:.1f} seconds")
        elif choice == '2':
            print(f"{BLUE}Cleaning up log file...{NC}")
            clear_log(LOG_FILE)
        elif choice == '3':
            print(f"{RED}Exiting...{NC}")
            return 0
        else:
            print(f"{RED}Invalid option{NC}")


if __name__ == "__main__":
    sys.exit(main())
