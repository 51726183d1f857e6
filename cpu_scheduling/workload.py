import logging
import random
from typing import List, Tuple

from .errors import ConfigError
from .models import ProcessRecord, SimulationConfig
from .schedulers import validate_processes

logger = logging.getLogger(__name__)

DEFAULT_INPUT = 'input.txt'


def _tokens(text: str) -> List[int]:
	values = []
	for line_number, line in enumerate(text.splitlines(), start=1):
		for token in line.split('#', 1)[0].split():
			try:
				values.append(int(token))
			except ValueError:
				raise ConfigError(f"Line {line_number}: invalid integer value '{token}'") from None
	return values


def parse_input(text: str) -> Tuple[SimulationConfig, List[ProcessRecord]]:
	"""Parse a workload description.

	The first two integers are the context switch time and the quantum, every
	following group of three is a `pid arrival burst` process record. Anything
	after a '#' on a line is ignored. Processes come back sorted by arrival
	time, ties keeping their input order.
	"""
	values = _tokens(text)
	if len(values) < 2:
		raise ConfigError("Input must start with the context switch time and the time quantum")
	config = SimulationConfig(context_switch_time=values[0], quantum=values[1]).validate()

	fields = values[2:]
	if len(fields) % 3:
		raise ConfigError(
			f"Process record {len(fields) // 3 + 1} is incomplete. "
			"Expected format: PID ARRIVAL_TIME BURST_TIME"
		)

	processes = []
	for i in range(0, len(fields), 3):
		pid, arrival_time, burst_time = fields[i:i + 3]
		p = ProcessRecord(pid=pid, arrival_time=arrival_time, burst_time=burst_time)
		p.initialize()
		processes.append(p)

	processes.sort(key=lambda p: p.arrival_time)
	validate_processes(processes)
	if not processes:
		logger.warning("Workload defines no processes")
	logger.info("Loaded %d processes (context switch %d, quantum %d)",
				len(processes), config.context_switch_time, config.quantum)
	return config, processes


def load_workload(path: str = DEFAULT_INPUT) -> Tuple[SimulationConfig, List[ProcessRecord]]:
	try:
		with open(path, 'r') as file:
			text = file.read()
	except OSError as e:
		raise ConfigError(f"Input file '{path}' could not be read: {e}") from e
	return parse_input(text)


def generate_workload(num_processes: int, max_arrival: int = 10, max_burst: int = 10, seed: int = 42) -> List[ProcessRecord]:
	"""Generate a random workload with pids 1..num_processes, sorted by arrival."""
	if num_processes < 0 or max_arrival < 0 or max_burst < 1:
		raise ConfigError("Random workload needs num_processes >= 0, max_arrival >= 0 and max_burst >= 1")
	random.seed(seed)
	processes: List[ProcessRecord] = []
	for pid in range(1, num_processes + 1):
		arrival_time = random.randint(0, max_arrival)
		burst_time = random.randint(1, max_burst)
		p = ProcessRecord(pid=pid, arrival_time=arrival_time, burst_time=burst_time)
		p.initialize()
		processes.append(p)
	# Sort by arrival time for the schedulers
	processes.sort(key=lambda p: p.arrival_time)
	return processes
