import argparse
import numpy
from matplotlib import pyplot
from procs.histogram import Histogram
from utils.params import HleConfig, Processor, SimulationParams, SweepParams, parse_processor, run_simulation, simulations_label, simulations_value

def report(config: HleConfig, samples: numpy.ndarray, counts_per_symbol: int) -> Histogram:
	histogram = Histogram.from_counts(numpy.bincount(samples))
	print(config)
	print(histogram.render(counts_per_symbol))
	print()
	return histogram

def sweep(params: SweepParams, processor: Processor = Processor.SERIAL):
	for config in params.configs():
		samples = run_simulation(SimulationParams(config, params.simulations), processor)
		report(config, samples, params.counts_per_symbol)

class HealthLostSimulator:
	def __init__(self):
		self.simulations = 100_000
		self.counts_per_symbol = 2_000
		self.config = HleConfig(my_dice_count=5, their_dice_count=5, rounds=3)
		self.last = None

	def _ask_int(self, prompt, current, parse=int, label=str):
		answer = input(f"{prompt} [{label(current)}]: ").strip()
		if not answer:
			return current
		try:
			value = parse(answer)
		except ValueError:
			print(f"Invalid {prompt.lower()}")
			return current
		if value < 0:
			print(f"Invalid {prompt.lower()}")
			return current
		return value

	def edit_params(self):
		print("\nEdit Simulation Parameters (press Enter to keep current value)")

		simulations = self._ask_int("Simulations", self.simulations, simulations_value, simulations_label)
		self.simulations = simulations if simulations > 0 else self.simulations
		my_dice = self._ask_int("My dice", self.config.my_dice_count)
		their_dice = self._ask_int("Their dice", self.config.their_dice_count)
		rounds = self._ask_int("Rounds", self.config.rounds)
		self.config = HleConfig(my_dice, their_dice, rounds)

		print(f"\nCurrent parameters: {simulations_label(self.simulations)} simulations, {self.config}")

	def run_sim(self, processor: Processor):
		params = SimulationParams(self.config, self.simulations)
		print(f"Running {simulations_label(self.simulations)} duels...")
		samples = run_simulation(params, processor)
		self.last = (self.config, report(self.config, samples, self.counts_per_symbol))

	def run_sweep(self, processor: Processor):
		sweep(SweepParams(simulations=self.simulations, counts_per_symbol=self.counts_per_symbol), processor)

	def print_last(self):
		if not self.last:
			print("\nNothing has been run yet")
			return
		config, histogram = self.last
		print(config)
		print(histogram.render(self.counts_per_symbol))

	def graph_last(self):
		if not self.last:
			print("\nNothing has been run yet")
			return

		print("\nGraph types:")
		print("1: Normalized probability")
		print("2: Cumulative distribution")
		choice = input("Select graph type (1-2): ").strip()

		config, histogram = self.last
		normalized = histogram.proportions()
		pyplot.figure(figsize=(12, 7))

		match choice:
			case '1':
				pyplot.bar(range(len(normalized)), normalized, color='#ED1C24', alpha=0.5, label=str(config))
				pyplot.ylabel("Probability")
				pyplot.title("Health Lost - Normalized Probability")
			case '2':
				pyplot.plot(range(len(normalized)), numpy.cumsum(normalized), color='#0071C5', linewidth=2, label=str(config))
				pyplot.ylabel("Cumulative Probability")
				pyplot.title("Health Lost - Cumulative Distribution")
			case _:
				pyplot.close()
				print("Invalid choice")
				return

		pyplot.xlabel("Health Lost")
		pyplot.legend()
		pyplot.grid(True, alpha=0.3)
		pyplot.show()

	def run(self):
		commands = {
			'params': self.edit_params,
			'print': self.print_last,
			'graph': self.graph_last,
		}
		help_line = "Commands: params, run [serial|cpu], sweep [serial|cpu], print, graph, exit"

		print("Health Lost Simulator")
		print(help_line)

		while True:
			try:
				cmd = input("\n> ").strip().lower()

				if not cmd:
					continue

				if cmd == 'exit':
					break

				name, _, processor_name = cmd.partition(' ')
				if name in ('run', 'sweep'):
					processor = parse_processor(processor_name) if processor_name else Processor.SERIAL
					if name == 'run':
						self.run_sim(processor)
					else:
						self.run_sweep(processor)
					continue

				handler = commands.get(cmd)
				if handler:
					handler()
				else:
					print(help_line)

			except KeyboardInterrupt:
				print("\n\nExiting...")
				break
			except Exception as e:
				print(f"Error: {e}")

def main(argv=None):
	parser = argparse.ArgumentParser(description="Monte Carlo estimate of health lost in a colored dice duel")
	parser.add_argument('--sweep', action='store_true', help="run the full parameter sweep instead of the interactive prompt")
	parser.add_argument('--processor', default='serial', choices=[p.value.lower() for p in Processor])
	parser.add_argument('--simulations', default='100k', help="samples per configuration, e.g. 100k")
	args = parser.parse_args(argv)

	if args.sweep:
		sweep(SweepParams(simulations=simulations_value(args.simulations)), parse_processor(args.processor))
	else:
		HealthLostSimulator().run()

if __name__ == "__main__":
	main()
