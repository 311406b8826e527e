#!/usr/bin/env python3
"""
Plan a breadth-first path across an obstacle map.

Runs either the built-in walled-arena demo or a JSON scenario file,
prints a summary and optionally streams the search to Rerun.
"""

import argparse
import logging
import sys
from pathlib import Path

from gridplan import (
    BreadthFirstSearchPlanner,
    ConfigurationError,
    PlannerConfig,
    RenderConfig,
    RerunSearchRenderer,
    build_demo_scenario,
    load_scenario,
    save_plan,
)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Breadth-first path planning on a 2D occupancy grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Built-in demo arena
  python plan_path.py
  
  # Scenario file with a finer grid
  python plan_path.py -s warehouse.json --resolution 0.5
  
  # Watch the search in Rerun and export the path
  python plan_path.py --visualize -o plan.json
        """
    )
    parser.add_argument("-s", "--scenario", type=Path, help="JSON scenario file (default: demo arena)")
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file for the plan")
    parser.add_argument("--start", nargs=2, type=float, help="Start position (x y)")
    parser.add_argument("--goal", nargs=2, type=float, help="Goal position (x y)")
    parser.add_argument("--resolution", type=float, help="Grid resolution in world units")
    parser.add_argument("--robot-radius", type=float, help="Robot clearance radius")
    parser.add_argument("--visualize", action="store_true", help="Stream the search to Rerun")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        scenario = load_scenario(args.scenario) if args.scenario else build_demo_scenario()
        config = PlannerConfig(
            resolution=args.resolution if args.resolution is not None else scenario.config.resolution,
            robot_radius=(args.robot_radius if args.robot_radius is not None
                          else scenario.config.robot_radius),
            bounds=scenario.config.bounds,
        ).validate()
        observer = RerunSearchRenderer(RenderConfig()) if args.visualize else None
        planner = BreadthFirstSearchPlanner.from_config(
            scenario.obstacle_x, scenario.obstacle_y, config, observer=observer
        )
    except ConfigurationError as e:
        print(f"Error: {e}")
        return 2

    start = tuple(args.start) if args.start else scenario.start
    goal = tuple(args.goal) if args.goal else scenario.goal

    grid = planner.grid
    print(f"Grid size: {grid.width} x {grid.height} (resolution {grid.resolution})")
    print(f"Free cells: {grid.free_cell_count():,} of {grid.width * grid.height:,}")
    print(f"Planning from {start} to {goal}...")

    result = planner.plan(start[0], start[1], goal[0], goal[1])

    if args.output:
        if save_plan(result, args.output):
            print(f"Exported plan to {args.output}")

    if not result.found:
        print(f"No path found ({result.expanded} nodes expanded)")
        return 1

    print(f"Found path with {len(result.path)} waypoints")
    print(f"Path cost: {result.cost:.2f}, nodes expanded: {result.expanded}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
