import io
import unittest
from contextlib import redirect_stdout

from cpu_scheduling.metrics import average_times, format_comparison, format_gantt_chart, format_results, print_report
from cpu_scheduling.models import ProcessRecord
from cpu_scheduling.schedulers import simulate_fcfs, simulate_rr


def example_processes():
	processes = []
	for pid, arrival, burst in [(1, 0, 5), (2, 1, 3), (3, 2, 1)]:
		p = ProcessRecord(pid=pid, arrival_time=arrival, burst_time=burst)
		p.initialize()
		processes.append(p)
	return processes


class TestAverages(unittest.TestCase):

	def test_arithmetic_mean(self):
		"""Averages equal the mean of the per-process fields"""
		records, _ = simulate_rr(example_processes(), 1, 2)
		avg_wait, avg_turn = average_times(records)
		self.assertAlmostEqual(avg_wait, sum(p.waiting_time for p in records) / 3)
		self.assertAlmostEqual(avg_turn, sum(p.turnaround_time for p in records) / 3)
		self.assertAlmostEqual(avg_wait, 6.0)
		self.assertAlmostEqual(avg_turn, 9.0)

	def test_empty_set_raises(self):
		"""An empty process set is reported, not averaged to zero"""
		with self.assertRaises(ZeroDivisionError):
			average_times([])


class TestFormatting(unittest.TestCase):

	def setUp(self):
		self.result = simulate_fcfs(example_processes(), 1)

	def test_gantt_chart(self):
		chart = format_gantt_chart(self.result.timeline, 'FCFS')
		lines = chart.splitlines()
		self.assertEqual(lines[0], 'Gantt Chart for FCFS:')
		self.assertEqual(lines[2], '| P1 | CS | P2 | CS | P3 |')
		self.assertEqual(lines[4], '0 5 6 9 10 11')

	def test_results_table(self):
		table = format_results(self.result.records, 'FCFS')
		self.assertIn('Results for FCFS:', table)
		self.assertIn(f"{2:>4} {6:>6} {9:>7} {5:>8} {8:>11}", table)
		self.assertIn('Average Waiting Time: 4.33', table)
		self.assertIn('Average Turnaround Time: 7.33', table)

	def test_results_sorted_by_pid(self):
		records = list(reversed(self.result.records))
		rows = format_results(records, 'FCFS').splitlines()[4:7]
		self.assertEqual([int(row.split()[0]) for row in rows], [1, 2, 3])

	def test_comparison(self):
		results = {'FCFS': self.result, 'RR': simulate_rr(example_processes(), 1, 2)}
		text = format_comparison(results)
		self.assertIn('FCFS', text)
		self.assertIn(f"{'RR':<10} {6.0:>12.2f} {9.0:>15.2f}", text)

	def test_print_report(self):
		buffer = io.StringIO()
		with redirect_stdout(buffer):
			print_report('FCFS', self.result)
		output = buffer.getvalue()
		self.assertIn('Gantt Chart for FCFS:', output)
		self.assertIn('Average Turnaround Time:', output)


if __name__ == '__main__':
	unittest.main()
