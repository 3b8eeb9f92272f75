#!/usr/bin/env python3
"""
League History Demo - Simulate years of league history from scratch.

Builds a fresh 32-team league, simulates N seasons (games, playoffs and
the full offseason each year) and prints a summary per season.

Usage:
    # 20 years of history leading into 2025
    python league_history_demo.py

    # Reproducible 5-year run
    python league_history_demo.py --years 5 --seed 42

    # Custom tunables and JSON output
    python league_history_demo.py --settings sim.json --output history.json
"""

import sys
import json
import argparse
import random
import signal
import time
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from config.simulation_settings import SimulationSettings
from constants.league_structure import get_team_name
from league_history import LeagueHistorySimulator, SimulationCancelledException
from league_history.history_models import HistorySimulationResult
from logging_config import get_logger, log_exception, setup_logging
from shared.exceptions import LeagueSimException


def print_progress(year_index: int, total_years: int, phase: str) -> None:
    if phase == "season":
        print(f"  [{year_index:>2}/{total_years}] simulating season...", end="\r", flush=True)


def print_summaries(result: HistorySimulationResult) -> None:
    print("\n" + "=" * 70)
    print("SEASON SUMMARIES")
    print("=" * 70)
    for summary in result.season_summaries:
        champion = get_team_name(summary.champion_id) if summary.champion_id else "-"
        runner_up = get_team_name(summary.runner_up_id) if summary.runner_up_id else "-"
        first_pick = get_team_name(summary.draft_order[0]) if summary.draft_order else "-"
        print(f"{summary.year}: {champion} ({summary.champion_record_string}) "
              f"def. {runner_up} | #1 pick: {first_pick}")

    titles = sorted(result.championships_by_team().items(), key=lambda item: (-item[1], item[0]))
    if titles:
        print("\nChampionships:")
        for team_id, count in titles:
            print(f"  {get_team_name(team_id):<28} {count}")

    print("\nTotals:")
    for key, value in result.summary().items():
        print(f"  {key.replace('_', ' '):<22} {value}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Simulate multi-year league history",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python league_history_demo.py --years 10 --seed 7
  python league_history_demo.py --start-year 2030 --log-level DEBUG
        """
    )
    parser.add_argument('--years', type=int, default=20, help='Seasons of history to simulate (default: 20)')
    parser.add_argument('--start-year', type=int, default=2025,
                        help='Season the league is handed over at (default: 2025)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for a reproducible run')
    parser.add_argument('--settings', help='Path to a SimulationSettings JSON file')
    parser.add_argument('--output', help='Write season summaries to this JSON file')
    parser.add_argument('--log-level', default='WARNING', help='Console log level (default: WARNING)')
    parser.add_argument('--log-file', action='store_true', help='Also write rotating log files to logs/')
    args = parser.parse_args()

    setup_logging(level=args.log_level, enable_file=args.log_file, format_style="simple")
    logger = get_logger(__name__)

    settings = SimulationSettings.from_json(args.settings) if args.settings else SimulationSettings()
    is_valid, errors = settings.validate()
    if not is_valid:
        for error in errors:
            print(f"Invalid settings: {error}", file=sys.stderr)
        return 2

    rng = random.Random(args.seed)
    simulator = LeagueHistorySimulator(rng=rng, settings=settings)

    print("=" * 70)
    print(f"LEAGUE HISTORY - {args.years} seasons leading into {args.start_year}")
    print("=" * 70)

    # Ctrl-C stops the run at the next season/offseason boundary
    interrupted = []
    signal.signal(signal.SIGINT, lambda signum, frame: interrupted.append(signum))

    started = time.perf_counter()
    state = simulator.create_initial_league(args.start_year)
    try:
        result = simulator.simulate_history(
            state,
            args.years,
            start_year=args.start_year,
            progress_callback=print_progress,
            should_cancel=lambda: bool(interrupted),
        )
    except SimulationCancelledException as e:
        print(f"\nSimulation cancelled at year {e.year_index}/{e.total_years} ({e.phase})")
        return 1
    except LeagueSimException as e:
        log_exception(logger, e, context={"years": args.years, "seed": args.seed})
        print(json.dumps(e.to_dict(), indent=2, default=str), file=sys.stderr)
        return 1
    finally:
        signal.signal(signal.SIGINT, signal.default_int_handler)
    elapsed = time.perf_counter() - started
    logger.info(f"History simulated in {elapsed:.1f}s")

    print_summaries(result)
    print(f"\nCompleted in {elapsed:.1f}s; league ready for {result.state.year}")

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(
                {
                    'summary': result.summary(),
                    'seasons': [s.to_dict() for s in result.season_summaries],
                },
                f,
                indent=2,
            )
        print(f"Summaries written to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
