from typing import Dict, List, Tuple

from .models import ProcessRecord, ScheduleResult, Timeline

RULE = '-' * 43


def average_times(records: List[ProcessRecord]) -> Tuple[float, float]:
	"""Return (average waiting time, average turnaround time).

	An empty process set has no meaningful average and raises ZeroDivisionError.
	"""
	if not records:
		raise ZeroDivisionError("Cannot average timing metrics over an empty process set")
	avg_wait = sum(p.waiting_time for p in records) / len(records)
	avg_turn = sum(p.turnaround_time for p in records) / len(records)
	return avg_wait, avg_turn


def format_gantt_chart(timeline: Timeline, algorithm: str) -> str:
	bar = ''.join(f"| {segment.label} " for segment in timeline) + '|'
	ruler = ' '.join(str(mark) for mark in timeline.boundaries())
	lines = [
		f"Gantt Chart for {algorithm}:",
		RULE,
		bar,
		RULE,
		ruler,
	]
	return '\n'.join(lines)


def format_results(records: List[ProcessRecord], algorithm: str) -> str:
	avg_wait, avg_turn = average_times(records)
	header = f"{'PID':>4} {'Start':>6} {'Finish':>7} {'Waiting':>8} {'Turnaround':>11}"
	lines = [f"Results for {algorithm}:", RULE, header, '-' * len(header)]
	for p in sorted(records, key=lambda x: x.pid):
		lines.append(f"{p.pid:>4} {p.start_time:>6} {p.finish_time:>7} {p.waiting_time:>8} {p.turnaround_time:>11}")
	lines.append(RULE)
	lines.append(f"Average Waiting Time: {avg_wait:.2f}")
	lines.append(f"Average Turnaround Time: {avg_turn:.2f}")
	lines.append(RULE)
	return '\n'.join(lines)


def format_comparison(results: Dict[str, ScheduleResult]) -> str:
	header = f"{'Algorithm':<10} {'Avg Waiting':>12} {'Avg Turnaround':>15}"
	lines = ["=== Algorithm Comparison ===", header, '-' * len(header)]
	for name, result in results.items():
		avg_wait, avg_turn = average_times(result.records)
		lines.append(f"{name:<10} {avg_wait:>12.2f} {avg_turn:>15.2f}")
	return '\n'.join(lines)


def print_report(algorithm: str, result: ScheduleResult):
	print(format_gantt_chart(result.timeline, algorithm))
	print()
	print(format_results(result.records, algorithm))
	print()
