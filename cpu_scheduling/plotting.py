from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt

from .models import SWITCH_LABEL, Timeline

SWITCH_COLOR = 'lightgray'


def _finish(fig, save_path: Optional[str]):
	fig.tight_layout()
	if save_path:
		fig.savefig(save_path)
		plt.close(fig)
	else:
		plt.show()


def plot_gantt(timeline: Timeline, title: str, save_path: Optional[str] = None):
	fig, ax = plt.subplots(figsize=(10, 3))
	y = 0
	for label, start, end in timeline.intervals():
		color = SWITCH_COLOR if label == SWITCH_LABEL else None
		ax.barh(y, end - start, left=start, height=0.6, align='center', color=color, edgecolor='black')
		ax.text((start + end) / 2, y, label, va='center', ha='center', fontsize=8)
	ax.set_xlabel('Time')
	ax.set_ylabel('CPU')
	ax.set_title(title)
	ax.set_yticks([])
	ax.grid(axis='x', linestyle='--', alpha=0.4)
	_finish(fig, save_path)
	return fig


def plot_average_comparison(averages: Dict[str, Tuple[float, float]], save_path: Optional[str] = None):
	"""Grouped bars of (average waiting, average turnaround) per algorithm."""
	fig, ax = plt.subplots(figsize=(6, 4))
	algos = list(averages.keys())
	width = 0.35
	x = range(len(algos))
	waits = [averages[a][0] for a in algos]
	turns = [averages[a][1] for a in algos]
	ax.bar([i - width / 2 for i in x], waits, width, label='Waiting', color='steelblue')
	ax.bar([i + width / 2 for i in x], turns, width, label='Turnaround', color='seagreen')
	for i, (w, t) in enumerate(zip(waits, turns)):
		ax.text(i - width / 2, w + 0.1, f"{w:.2f}", ha='center', fontsize=8)
		ax.text(i + width / 2, t + 0.1, f"{t:.2f}", ha='center', fontsize=8)
	ax.set_xticks(list(x))
	ax.set_xticklabels(algos)
	ax.set_ylabel('Average Time')
	ax.set_title('Scheduler Average Time Comparison')
	ax.legend()
	_finish(fig, save_path)
	return fig
