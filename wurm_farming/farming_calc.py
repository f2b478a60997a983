"""
Farming Difficulty Calculator (console)
=======================================
Prints the farming panel for the given skills: modified skill, optimal
difficulty and crops to farm.

Usage:
    wurm-farming SKILL TOOL_QL TOOL_SKILL PARENT_SKILL [--scan]
    wurm-farming --solve MODIFIED_SKILL
"""

import argparse
import io
import sys

from .core import (
    scan_difficulty_candidates,
    solver_target,
    solve_difficulty_from_skill,
    classify,
)
from .report import build_farming_report, validate_skill_inputs, format_fixed


def print_report(skill, tool_quality, tool_skill, parent_skill, show_scan=False):
    """Print the calculator panel for one set of inputs."""
    report = build_farming_report(skill, tool_quality, tool_skill, parent_skill)

    print("=" * 60)
    print("FARMING DIFFICULTY")
    print("=" * 60)
    for line in report.lines():
        print(line)

    if show_scan:
        candidates = scan_difficulty_candidates(skill, tool_quality, tool_skill, parent_skill)
        print()
        print(f"{'Diff':<6} {'Bonus':<8} {'Eff':<8} {'Gain':<10} {'|Gain-20|':<10}")
        print("-" * 46)
        for c in candidates[1:]:
            marker = " <" if c.difficulty == report.result.difficulty else ""
            print(f"{c.difficulty:<6} {c.bonus:<8.2f} {c.eff:<8.2f} {c.mean:<10.3f} {c.order:<10.3f}{marker}")

    return report


def print_solve(modified_skill):
    """Print the cubic-solver difficulty for a modified skill."""
    difficulty = solve_difficulty_from_skill(modified_skill)
    group = classify(difficulty)

    print("=" * 60)
    print("DIFFICULTY FROM MODIFIED SKILL")
    print("=" * 60)
    print(f"{'Modified skill:':<18}{format_fixed(modified_skill)}")
    print(f"{'Cubic target:':<18}{solver_target(modified_skill):,.0f}")
    print(f"{'Difficulty:':<18}{difficulty:.3f}")
    print(f"{'Easy:':<18}{group.easy}")
    print(f"{'Challenge:':<18}{group.challenge}")
    print(f"{'Hard:':<18}{group.hard}")
    return difficulty


def main(argv=None):
    # Force UTF-8 output on Windows
    if sys.platform == 'win32':
        sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')

    parser = argparse.ArgumentParser(description="Wurm farming difficulty calculator")
    parser.add_argument("skills", nargs="*", type=float,
                        metavar="VALUE", help="Farming skill, tool QL, tool skill, parent skill")
    parser.add_argument("--scan", action="store_true", help="Show every scanned difficulty")
    parser.add_argument("--solve", type=float, metavar="MODIFIED_SKILL",
                        help="Solve difficulty directly from a modified skill")
    args = parser.parse_args(argv)

    if args.solve is not None:
        print_solve(args.solve)
        return 0

    if len(args.skills) != 4:
        parser.error("expected 4 values: SKILL TOOL_QL TOOL_SKILL PARENT_SKILL")

    try:
        validate_skill_inputs(*args.skills)
    except ValueError as e:
        parser.error(str(e))

    print_report(*args.skills, show_scan=args.scan)
    return 0


if __name__ == "__main__":
    sys.exit(main())
