import sys
import time
import numpy
from enum import Enum
from dataclasses import dataclass, field

@dataclass(frozen=True)
class HleConfig:
	"""Parameters for a single health-lost duel"""
	my_dice_count: int
	their_dice_count: int
	rounds: int

	def __post_init__(self):
		for name in ('my_dice_count', 'their_dice_count', 'rounds'):
			value = getattr(self, name)
			if value < 0:
				raise ValueError(f"{name} cannot be negative: {value}")

	def __str__(self):
		return f"HleConfig {{ my_dice_count: {self.my_dice_count}, their_dice_count: {self.their_dice_count}, rounds: {self.rounds} }}"

@dataclass(frozen=True)
class SimulationParams:
	"""Parameters for a Monte Carlo batch of duels"""
	config: HleConfig
	simulations: int

	def __post_init__(self):
		if self.simulations <= 0:
			raise ValueError(f"Need at least one simulation, got {self.simulations}")

@dataclass
class SweepParams:
	"""Ranges swept by the batch report, all bounds inclusive"""
	my_dice: range = field(default_factory=lambda: range(3, 8 + 1))
	their_dice: range = field(default_factory=lambda: range(1, 6 + 1))
	rounds: range = field(default_factory=lambda: range(1, 10 + 1))
	simulations: int = 100_000
	counts_per_symbol: int = 2_000

	def configs(self):
		for my_dice_count in self.my_dice:
			for their_dice_count in self.their_dice:
				for rounds in self.rounds:
					yield HleConfig(my_dice_count, their_dice_count, rounds)

class Processor(Enum):
	SERIAL = 'Serial'
	CPU = 'CPU'

def time_str(seconds):
	mins = int(seconds // 60)
	secs = seconds % 60
	return f"{mins}m {secs:.1f}s" if mins else f"{secs:.1f}s"

def monitor_progress(get_progress, total, poll=1.0):
	start_time = time.time()
	while True:
		elapsed = time.time() - start_time

		progress = get_progress()
		percent_complete = min((progress / total) * 100, 100)
		estimate = (elapsed * (100 - percent_complete) / percent_complete) if percent_complete > 0 else 0

		sys.stdout.write(f"\rProgress: {percent_complete:.2f}% - Elapsed: {time_str(elapsed)} - Remaining: {time_str(estimate)}     ")
		sys.stdout.flush()

		if progress >= total: return
		time.sleep(poll)

Magnitude = {
	'b': 1_000_000_000,
	'm': 1_000_000,
	'k': 1_000,
	 '': 1,
}
def simulations_label(value: int) -> str:
	for suffix, multiplier in Magnitude.items():
		if value >= multiplier and value % multiplier == 0:
			return f"{value // multiplier}{suffix}"
	return str(value)
def simulations_value(label: str) -> int:
	label = label.lower().strip()
	suffix = label[-1] if label and label[-1] in Magnitude else ''
	number = label[:-1] if suffix else label
	return int(number) * Magnitude[suffix]

def parse_processor(name: str) -> Processor:
	try:
		return next(p for p in Processor if p.value.lower() == name.strip().lower())
	except StopIteration:
		raise ValueError(f"Unknown processor: {name}")

def run_simulation(params: SimulationParams, processor: Processor = Processor.SERIAL) -> numpy.ndarray:
	from procs.experiment import run_simulation_serial
	from procs.sim_cpu import run_simulation_cpu

	runner = {
		Processor.SERIAL: run_simulation_serial,
		Processor.CPU: run_simulation_cpu,
	}[processor]

	return runner(params)
