"""Errors raised while loading or simulating a workload."""


class SchedulingError(Exception):
	"""Base class for simulator errors."""
	pass


class ConfigError(SchedulingError):
	"""Missing or malformed input, or an invalid configuration value."""
	pass


class InvariantViolation(SchedulingError):
	"""A process set that breaks the scheduler preconditions."""
	pass
