import heapq
import logging
from collections import deque
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .errors import ConfigError, InvariantViolation
from .models import ProcessRecord, ScheduleResult, SimulationConfig, Timeline, fresh_copies

logger = logging.getLogger(__name__)

ALGORITHMS = ('FCFS', 'SRT', 'RR')


def validate_processes(processes: Sequence[ProcessRecord]):
	"""Reject process sets the schedulers cannot run.

	Processes must have positive bursts, non-negative arrivals, unique pids and
	be sorted by arrival time (ties keep their input order).
	"""
	seen = set()
	previous_arrival = 0
	for p in processes:
		if p.burst_time <= 0:
			raise InvariantViolation(f"Process {p.pid} has non-positive burst time: {p.burst_time}")
		if p.arrival_time < 0:
			raise InvariantViolation(f"Process {p.pid} has negative arrival time: {p.arrival_time}")
		if p.pid in seen:
			raise InvariantViolation(f"Duplicate process ID found: {p.pid}")
		if p.arrival_time < previous_arrival:
			raise InvariantViolation(f"Process {p.pid} is out of arrival order")
		seen.add(p.pid)
		previous_arrival = p.arrival_time


def _check_switch_time(context_switch_time: int):
	if context_switch_time < 0:
		raise ConfigError(f"Context switch time must be non-negative, got {context_switch_time}")


def _admit_arrivals(procs: List[ProcessRecord], cursor: int, time: int, admit: Callable[[int], None]) -> int:
	# start_time records when a process became ready, not its first dispatch
	while cursor < len(procs) and procs[cursor].arrival_time <= time:
		procs[cursor].start_time = time
		admit(cursor)
		cursor += 1
	return cursor


def simulate_fcfs(processes: List[ProcessRecord], context_switch_time: int = 0) -> ScheduleResult:
	_check_switch_time(context_switch_time)
	validate_processes(processes)
	procs = fresh_copies(processes)
	timeline = Timeline()
	time = 0

	for i, p in enumerate(procs):
		# Idle until the next arrival, no segment recorded
		if time < p.arrival_time:
			time = p.arrival_time
		p.start_time = time
		p.remaining_time = 0
		time += p.burst_time
		p.complete(time)
		timeline.add_run(p.pid, p.burst_time)
		logger.debug("[FCFS] P%d runs %d -> %d", p.pid, p.start_time, p.finish_time)
		if i < len(procs) - 1:
			timeline.add_switch(context_switch_time)
			time += context_switch_time

	logger.info("[FCFS] %d processes finished at time %d", len(procs), time)
	return ScheduleResult(procs, timeline)


def simulate_srt(processes: List[ProcessRecord], context_switch_time: int = 0) -> ScheduleResult:
	_check_switch_time(context_switch_time)
	validate_processes(processes)
	procs = fresh_copies(processes)
	timeline = Timeline()
	# Entries are (remaining, arrival, index); index breaks the remaining ties
	# by input order once arrival times are equal as well
	ready: List[Tuple[int, int, int]] = []
	time = 0
	cursor = 0

	def admit(index: int):
		p = procs[index]
		heapq.heappush(ready, (p.remaining_time, p.arrival_time, index))

	while cursor < len(procs) or ready:
		cursor = _admit_arrivals(procs, cursor, time, admit)
		if not ready:
			time += 1
			continue

		_, _, index = heapq.heappop(ready)
		current = procs[index]
		current.remaining_time -= 1
		time += 1
		timeline.add_run(current.pid, 1)

		if current.remaining_time > 0:
			heapq.heappush(ready, (current.remaining_time, current.arrival_time, index))
			# Switch only when something else is competing for the CPU
			if len(ready) > 1:
				timeline.add_switch(context_switch_time)
				time += context_switch_time
		else:
			current.complete(time)
			logger.debug("[SRT] P%d finished at %d", current.pid, time)

	logger.info("[SRT] %d processes finished at time %d", len(procs), time)
	return ScheduleResult(procs, timeline)


def simulate_rr(processes: List[ProcessRecord], context_switch_time: int = 0, quantum: int = 1) -> ScheduleResult:
	_check_switch_time(context_switch_time)
	if quantum <= 0:
		raise ConfigError(f"Time quantum must be a positive integer, got {quantum}")
	validate_processes(processes)
	procs = fresh_copies(processes)
	timeline = Timeline()
	ready = deque()
	time = 0
	cursor = 0

	while cursor < len(procs) or ready:
		cursor = _admit_arrivals(procs, cursor, time, ready.append)
		if not ready:
			time += 1
			continue

		index = ready.popleft()
		current = procs[index]
		run_time = min(quantum, current.remaining_time)
		current.remaining_time -= run_time
		time += run_time
		timeline.add_run(current.pid, run_time)
		logger.debug("[RR] P%d runs %d -> %d, remaining %d", current.pid, time - run_time, time, current.remaining_time)

		if current.remaining_time > 0:
			# Arrivals up to the preemption point queue ahead of the preempted process
			cursor = _admit_arrivals(procs, cursor, time, ready.append)
			timeline.add_switch(context_switch_time)
			time += context_switch_time
			ready.append(index)
		else:
			current.complete(time)
			logger.debug("[RR] P%d finished at %d", current.pid, time)

	logger.info("[RR] %d processes finished at time %d (quantum %d)", len(procs), time, quantum)
	return ScheduleResult(procs, timeline)


def run_all(processes: List[ProcessRecord], config: SimulationConfig,
			algorithms: Optional[Sequence[str]] = None) -> Dict[str, ScheduleResult]:
	config.validate()
	results: Dict[str, ScheduleResult] = {}
	for name in algorithms or ALGORITHMS:
		name = name.upper()
		if name == 'FCFS':
			results[name] = simulate_fcfs(processes, config.context_switch_time)
		elif name == 'SRT':
			results[name] = simulate_srt(processes, config.context_switch_time)
		elif name == 'RR':
			results[name] = simulate_rr(processes, config.context_switch_time, config.quantum)
		else:
			raise ConfigError(f"Unknown scheduling algorithm: {name}")
	return results
