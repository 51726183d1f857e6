from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Tuple

from .errors import ConfigError

UNSET = -1
SWITCH_LABEL = 'CS'


@dataclass
class ProcessRecord:
	pid: int
	arrival_time: int
	burst_time: int
	remaining_time: int = 0
	# Derived fields stay UNSET until the scheduler fills them in
	start_time: int = UNSET
	finish_time: int = UNSET
	waiting_time: int = UNSET
	turnaround_time: int = UNSET

	def initialize(self):
		self.remaining_time = self.burst_time
		self.start_time = UNSET
		self.finish_time = UNSET
		self.waiting_time = UNSET
		self.turnaround_time = UNSET

	def complete(self, time: int):
		self.finish_time = time
		self.turnaround_time = self.finish_time - self.arrival_time
		self.waiting_time = self.turnaround_time - self.burst_time

	def is_complete(self) -> bool:
		return self.remaining_time == 0

	@property
	def label(self) -> str:
		return process_label(self.pid)


def process_label(pid: int) -> str:
	return f'P{pid}'


def fresh_copies(processes: List[ProcessRecord]) -> List[ProcessRecord]:
	new_list = []
	for p in processes:
		new_p = ProcessRecord(pid=p.pid, arrival_time=p.arrival_time, burst_time=p.burst_time)
		new_p.initialize()
		new_list.append(new_p)
	return new_list


class TimelineSegment(NamedTuple):
	duration: int
	label: str

	@property
	def is_switch(self) -> bool:
		return self.label == SWITCH_LABEL


class Timeline:
	"""Append-only sequence of execution and context-switch segments.

	Idle gaps are not recorded, so the ruler produced by boundaries() counts
	only time the CPU spent running a process or switching between them.
	"""

	def __init__(self):
		self._segments: List[TimelineSegment] = []

	def add_run(self, pid: int, duration: int):
		if duration > 0:
			self._segments.append(TimelineSegment(duration, process_label(pid)))

	def add_switch(self, duration: int):
		if duration > 0:
			self._segments.append(TimelineSegment(duration, SWITCH_LABEL))

	@property
	def segments(self) -> List[TimelineSegment]:
		return list(self._segments)

	def __len__(self):
		return len(self._segments)

	def __iter__(self):
		return iter(self._segments)

	def total_time(self) -> int:
		return sum(s.duration for s in self._segments)

	def boundaries(self) -> List[int]:
		marks = [0]
		for segment in self._segments:
			marks.append(marks[-1] + segment.duration)
		return marks

	def intervals(self) -> List[Tuple[str, int, int]]:
		# (label, start, end) triples on the cumulative ruler, for plotting
		marks = self.boundaries()
		return [(s.label, marks[i], marks[i + 1]) for i, s in enumerate(self._segments)]

	def busy_time(self) -> Dict[str, int]:
		totals: Dict[str, int] = {}
		for segment in self._segments:
			totals[segment.label] = totals.get(segment.label, 0) + segment.duration
		return totals


class ScheduleResult(NamedTuple):
	records: List[ProcessRecord]
	timeline: Timeline


@dataclass(frozen=True)
class SimulationConfig:
	context_switch_time: int = 0
	quantum: int = 1

	def validate(self) -> 'SimulationConfig':
		if self.context_switch_time < 0:
			raise ConfigError(f"Context switch time must be non-negative, got {self.context_switch_time}")
		if self.quantum <= 0:
			raise ConfigError(f"Time quantum must be a positive integer, got {self.quantum}")
		return self
