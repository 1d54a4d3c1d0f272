import numpy

class Histogram:
	"""Occurrence counts of non-negative integer outcomes, one bucket per value"""
	symbol = '#'

	def __init__(self):
		self.buckets: list[int] = []

	@classmethod
	def from_counts(cls, counts):
		histogram = cls()
		histogram.buckets = [int(c) for c in counts]
		if any(c < 0 for c in histogram.buckets):
			raise ValueError("Bucket counts cannot be negative")
		return histogram

	@classmethod
	def from_samples(cls, samples):
		histogram = cls()
		histogram.extend(samples)
		return histogram

	def add(self, sample):
		sample = int(sample)
		if sample < 0:
			raise ValueError(f"Samples must be non-negative, got {sample}")
		while len(self.buckets) <= sample:
			self.buckets.append(0)
		self.buckets[sample] += 1

	def extend(self, samples):
		for sample in samples:
			self.add(sample)

	@property
	def total(self) -> int:
		return sum(self.buckets)

	def proportions(self) -> numpy.ndarray:
		total = self.total
		if total == 0:
			raise ValueError("Histogram is empty, cannot compute proportions")
		return numpy.array(self.buckets, dtype=numpy.float64) / total

	def rows(self, counts_per_symbol: int):
		"""Yield (value, count, proportion, bar) for each bucket in value order"""
		if counts_per_symbol <= 0:
			raise ValueError(f"counts_per_symbol must be positive, got {counts_per_symbol}")
		for value, (count, proportion) in enumerate(zip(self.buckets, self.proportions())):
			yield value, count, float(proportion), self.symbol * (count // counts_per_symbol)

	def render(self, counts_per_symbol: int) -> str:
		lines = [
			"value | count   | propo. | ascii histogram",
			"------+---------+--------+----------------",
		]
		for value, count, proportion, bar in self.rows(counts_per_symbol):
			lines.append(f"{value:>5} | {count:>7} | {proportion:.4f} |{bar}")
		return '\n'.join(lines)

def plot_histo(counts_per_symbol: int, samples) -> Histogram:
	histogram = Histogram.from_samples(samples)
	print(histogram.render(counts_per_symbol))
	return histogram
