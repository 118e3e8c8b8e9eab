#!/usr/bin/env python3
"""
HYROX Analyzer CLI.

Race analysis, benchmark tables and training plans from the terminal.

Usage:
    hyrox-analyzer analyze race.json
    hyrox-analyzer analyze race.json --no-ai --json
    hyrox-analyzer benchmarks --gender female
    hyrox-analyzer plan --level intermediate --weakness sledPush --weeks 8
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .benchmarks import LEVEL_ORDER, RUN_BENCHMARKS, get_benchmarks
from .exceptions import HyroxAnalyzerError
from .models.analysis import AnalysisResult
from .models.race import STATION_KEYS, station_display_name
from .models.training import PlanLevel, TrainingPlan
from .services.analysis_service import AnalysisService, create_analysis_service
from .services.training_plan import generate_training_plan
from .services.validation import normalize_split_entries, validate_analysis_payload
from .utils.time_format import format_time


# ANSI color codes
class Colors:
    RED = "\033[91m"
    YELLOW = "\033[93m"
    GREEN = "\033[92m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def get_level_color(level: str) -> str:
    """Get color for a performance level."""
    colors = {
        "elite": Colors.GREEN,
        "intermediate": Colors.BLUE,
        "beginner": Colors.YELLOW,
    }
    return colors.get(level, Colors.RESET)


def format_score(score: int) -> str:
    """Format overall score with color."""
    if score >= 85:
        color = Colors.GREEN
    elif score >= 65:
        color = Colors.YELLOW
    else:
        color = Colors.RED
    return f"{color}{score}/100{Colors.RESET}"


def load_race_file(path: Path) -> Dict[str, Any]:
    """
    Read a race JSON file and normalize its split values to seconds.

    Splits may be written as integer seconds or "M:SS" strings.
    """
    with open(path) as f:
        payload = json.load(f)

    if isinstance(payload, dict) and isinstance(payload.get("splits"), dict):
        payload["splits"] = normalize_split_entries(payload["splits"])
    return payload


def print_report(result: AnalysisResult) -> None:
    level = result.level.value
    print()
    print(f"{Colors.BOLD}HYROX Race Analysis{Colors.RESET}")
    print("=" * 40)
    print(f"  Total time: {Colors.BOLD}{result.formatted_total_time}{Colors.RESET}")
    print(f"  Level:      {get_level_color(level)}{level.capitalize()}{Colors.RESET}")
    print(f"  Score:      {format_score(result.overall_score)}")
    print()

    print(f"{Colors.BOLD}Weaknesses{Colors.RESET}")
    if not result.weaknesses:
        print(f"  {Colors.GREEN}None - every station at or under benchmark{Colors.RESET}")
    for w in result.weaknesses:
        print(
            f"  {Colors.RED}{w.display_name:<18}{Colors.RESET} {w.formatted_time:>6}  "
            f"+{format_time(round(w.gap))} ({w.gap_percent}%)"
        )
    print()

    print(f"{Colors.BOLD}Strengths{Colors.RESET}")
    if not result.strengths:
        print("  None")
    for s in result.strengths:
        print(
            f"  {Colors.GREEN}{s.display_name:<18}{Colors.RESET} {s.formatted_time:>6}  "
            f"-{format_time(round(s.advantage))}"
        )
    print()

    print(f"{Colors.BOLD}Pacing{Colors.RESET}")
    for run in result.pacing_analysis.runs:
        marker = Colors.RED if run.trend.value == "slowing" else Colors.RESET
        print(
            f"  Run {run.run_number}: {run.formatted_time:>6}  "
            f"{marker}{run.vs_first_run:+d}s {run.trend.value}{Colors.RESET}"
        )
    print(f"  {Colors.CYAN}{result.pacing_analysis.summary}{Colors.RESET}")
    print()

    print(f"{Colors.BOLD}Recommendations{Colors.RESET}")
    for rec in result.recommendations:
        print(f"  {rec.priority}. [{rec.area}] {rec.suggestion} ({rec.expected_improvement})")
    print()

    print(f"{Colors.BOLD}Summary{Colors.RESET}")
    print(f"  {result.ai_summary}")
    print(f"  {Colors.CYAN}{result.predicted_improvement}{Colors.RESET}")
    print()


def cmd_analyze(args) -> int:
    """Analyze a race from a JSON file."""
    path = Path(args.file)
    try:
        payload = load_race_file(path)
    except FileNotFoundError:
        print(f"{Colors.RED}File not found: {path}{Colors.RESET}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"{Colors.RED}Invalid JSON in {path}: {e}{Colors.RESET}", file=sys.stderr)
        return 1

    try:
        splits, athlete_info = validate_analysis_payload(payload)
        service = AnalysisService() if args.no_ai else create_analysis_service()
        result = asyncio.run(service.analyze(splits, athlete_info))
    except HyroxAnalyzerError as e:
        print(f"{Colors.RED}Error: {e.message}{Colors.RESET}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_report(result)
    return 0


def cmd_benchmarks(args) -> int:
    """Print the benchmark table for a gender."""
    table = get_benchmarks(args.gender)

    print()
    print(f"{Colors.BOLD}HYROX Benchmarks ({args.gender}){Colors.RESET}")
    print("=" * 40)
    for level in LEVEL_ORDER:
        benchmarks = table[level]
        total = benchmarks.total_time
        runs = RUN_BENCHMARKS[level]
        print()
        print(
            f"{get_level_color(level.value)}{level.value.capitalize()}{Colors.RESET} "
            f"(total {format_time(total.min)} - {format_time(total.max)})"
        )
        for station in STATION_KEYS:
            station_range = benchmarks.stations.get(station)
            if station_range is None:
                continue
            print(
                f"  {station_display_name(station):<18} "
                f"{format_time(station_range.min)} - {format_time(station_range.max)}"
            )
        print(f"  {'Run (1km)':<18} {format_time(runs.min)} - {format_time(runs.max)}")
    print()
    return 0


def print_plan(plan: TrainingPlan) -> None:
    print()
    print(f"{Colors.BOLD}{plan.name}{Colors.RESET}")
    print("=" * 40)
    print(f"  Goal: {plan.goal}")
    for week in plan.weeks:
        print()
        print(
            f"{Colors.BOLD}Week {week.week_number}{Colors.RESET} "
            f"[{week.phase.value}] {week.focus}"
        )
        for day in week.days:
            if day.type.value == "rest":
                print(f"  Day {day.day_number}: {Colors.CYAN}{day.title}{Colors.RESET}")
                continue
            print(
                f"  Day {day.day_number}: {day.title} "
                f"({day.duration} min, {day.intensity.value})"
            )
    print()


def cmd_plan(args) -> int:
    """Generate a training plan."""
    try:
        plan = generate_training_plan(
            level=args.level,
            weaknesses=args.weakness or [],
            weeks=args.weeks,
        )
    except HyroxAnalyzerError as e:
        print(f"{Colors.RED}Error: {e.message}{Colors.RESET}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(plan.to_dict(), indent=2))
    else:
        print_plan(plan)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hyrox-analyzer",
        description="HYROX Analyzer - race analysis and training plans",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hyrox-analyzer analyze race.json
  hyrox-analyzer analyze race.json --no-ai --json
  hyrox-analyzer benchmarks --gender female
  hyrox-analyzer plan --level intermediate --weakness sledPush --weeks 8
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze command
    analyze_p = subparsers.add_parser("analyze", help="Analyze a race from a JSON file")
    analyze_p.add_argument("file", help='JSON file with "splits" and "athleteInfo"')
    analyze_p.add_argument(
        "--no-ai", action="store_true", help="Skip AI enrichment"
    )
    analyze_p.add_argument(
        "--json", action="store_true", help="Print the raw JSON result"
    )

    # Benchmarks command
    bench_p = subparsers.add_parser("benchmarks", help="Show benchmark ranges")
    bench_p.add_argument(
        "--gender", "-g", choices=["male", "female"], default="male",
        help="Benchmark division",
    )

    # Plan command
    plan_p = subparsers.add_parser("plan", help="Generate a training plan")
    plan_p.add_argument(
        "--level", "-l",
        choices=[level.value for level in PlanLevel],
        default="intermediate",
        help="Athlete level",
    )
    plan_p.add_argument(
        "--weakness", "-w", action="append", choices=list(STATION_KEYS),
        help="Weak station (repeat for several, worst first)",
    )
    plan_p.add_argument(
        "--weeks", type=int, default=8, help="Plan length in weeks (1-52)"
    )
    plan_p.add_argument(
        "--json", action="store_true", help="Print the raw JSON plan"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s - %(name)s - %(message)s",
    )

    # Route to appropriate command
    if args.command == "analyze":
        return cmd_analyze(args)
    elif args.command == "benchmarks":
        return cmd_benchmarks(args)
    elif args.command == "plan":
        return cmd_plan(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
