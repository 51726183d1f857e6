import argparse
import dataclasses
import logging
import os
import sys
from typing import List, Optional

from .errors import SchedulingError
from .metrics import average_times, format_comparison, print_report
from .models import SimulationConfig
from .plotting import plot_average_comparison, plot_gantt
from .schedulers import run_all
from .workload import DEFAULT_INPUT, generate_workload, load_workload

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog='cpu-scheduling-sim',
		description="Simulate FCFS, SRT and Round Robin CPU scheduling on one workload",
	)
	parser.add_argument('input', nargs='?', default=DEFAULT_INPUT,
						help=f"Workload file: 'context_switch quantum' then 'pid arrival burst' records (default: {DEFAULT_INPUT})")
	parser.add_argument('-a', '--algorithm', action='append', type=str.lower, choices=['fcfs', 'srt', 'rr'],
						help='Algorithm to run, may be repeated (default: all three)')
	parser.add_argument('--quantum', type=int, default=None, help='Override the Round Robin time quantum')
	parser.add_argument('--context-switch', type=int, default=None, help='Override the context switch time')
	parser.add_argument('--random', type=int, default=None, metavar='N',
						help='Simulate N randomly generated processes instead of reading a file')
	parser.add_argument('--seed', type=int, default=42, help='Random seed for --random (default: 42)')
	parser.add_argument('--plot', action='store_true', help='Show matplotlib Gantt and comparison charts')
	parser.add_argument('--save-plots', type=str, default=None, metavar='DIR', help='Save charts as PNG files in DIR')
	parser.add_argument('-v', '--verbose', action='store_true', help='Log every scheduling decision')
	return parser


def _apply_overrides(config: SimulationConfig, args: argparse.Namespace) -> SimulationConfig:
	if args.quantum is not None:
		config = dataclasses.replace(config, quantum=args.quantum)
	if args.context_switch is not None:
		config = dataclasses.replace(config, context_switch_time=args.context_switch)
	return config.validate()


def _plot_results(results, save_dir: Optional[str]):
	if save_dir:
		os.makedirs(save_dir, exist_ok=True)
	for name, result in results.items():
		path = os.path.join(save_dir, f"{name.lower()}_gantt.png") if save_dir else None
		plot_gantt(result.timeline, f"{name} Gantt Chart", save_path=path)
	averages = {name: average_times(result.records) for name, result in results.items()}
	path = os.path.join(save_dir, 'comparison.png') if save_dir else None
	plot_average_comparison(averages, save_path=path)


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.INFO,
		format='%(asctime)s - %(levelname)s - %(message)s',
		stream=sys.stderr,
	)

	try:
		if args.random is not None:
			config = SimulationConfig()
			processes = generate_workload(args.random, seed=args.seed)
		else:
			config, processes = load_workload(args.input)
		config = _apply_overrides(config, args)

		results = run_all(processes, config, args.algorithm)
		for name, result in results.items():
			print_report(name, result)
		print(format_comparison(results))

		if args.plot or args.save_plots:
			_plot_results(results, args.save_plots)
	except SchedulingError as e:
		logger.error("%s: %s", type(e).__name__, e)
		return EXIT_FAILURE
	except ZeroDivisionError as e:
		logger.error("Cannot report results: %s", e)
		return EXIT_FAILURE
	return EXIT_OK
