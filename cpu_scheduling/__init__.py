from .errors import ConfigError, InvariantViolation, SchedulingError
from .metrics import average_times, format_comparison, format_gantt_chart, format_results, print_report
from .models import ProcessRecord, ScheduleResult, SimulationConfig, Timeline, TimelineSegment, fresh_copies
from .schedulers import ALGORITHMS, run_all, simulate_fcfs, simulate_rr, simulate_srt, validate_processes
from .workload import generate_workload, load_workload, parse_input
