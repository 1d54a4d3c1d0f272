from __future__ import annotations
import numpy
from dataclasses import dataclass
from dice.colors import DieColor

@dataclass(frozen=True)
class ColoredDice:
	"""A run of dice sharing one color"""
	color: DieColor
	count: int

class ColorPool:
	"""Dice counts per color, one slot for each of the five colors"""
	counts: numpy.ndarray

	def __init__(self, counts=None):
		if counts is None:
			self.counts = numpy.zeros(len(DieColor), dtype=numpy.int64)
		else:
			self.counts = numpy.array(counts, dtype=numpy.int64)
		if self.counts.shape != (len(DieColor),):
			raise ValueError(f"Expected {len(DieColor)} color counts, got {self.counts.shape}")
		if (self.counts < 0).any():
			raise ValueError(f"Dice counts cannot be negative: {self.counts.tolist()}")

	def __getitem__(self, color: DieColor) -> int:
		return int(self.counts[color.to_idx()])

	def __setitem__(self, color: DieColor, count: int):
		if count < 0:
			raise ValueError(f"Dice counts cannot be negative: {color.name}={count}")
		self.counts[color.to_idx()] = count

	def __iter__(self):
		"""Yield (color, count) pairs in color order"""
		return ((color, self[color]) for color in DieColor.domain())

	def __eq__(self, other):
		if not isinstance(other, ColorPool):
			return NotImplemented
		return bool(numpy.array_equal(self.counts, other.counts))

	def __repr__(self):
		entries = ', '.join(f"{color.name}: {count}" for color, count in self)
		return f"{{{entries}}}"

	def copy(self) -> ColorPool:
		return ColorPool(self.counts)

	def count(self) -> int:
		return int(self.counts.sum())

	def chosen_match(self, other: ColorPool) -> ColoredDice | None:
		"""
		Find the color where both pools show the same, non-zero number of dice.

		Colors are scanned in domain order. The first tie found is taken, and each
		later tie replaces it unless the one already taken has fewer dice. When
		several colors tie, this settles on the smallest (or latest equal) count.
		"""
		best = None
		for color in DieColor.domain():
			mine = self[color]
			if mine > 0 and mine == other[color]:
				if best is not None and best.count < mine:
					continue
				best = ColoredDice(color, mine)
		return best

	def with_n_random_more(self, rng: numpy.random.Generator, count: int) -> ColorPool:
		for _ in range(count):
			self.counts[DieColor.random(rng).to_idx()] += 1
		return self

	def col_rerolled(self, color: DieColor, rng: numpy.random.Generator) -> ColorPool:
		"""Pick up every die of one color and throw them back in"""
		count = self[color]
		self[color] = 0
		return self.with_n_random_more(rng, count)

	def rerolled(self, rng: numpy.random.Generator) -> ColorPool:
		return ColorPool.random(rng, self.count())

	@classmethod
	def random(cls, rng: numpy.random.Generator, count: int) -> ColorPool:
		if count < 0:
			raise ValueError(f"Cannot roll a negative number of dice: {count}")
		return cls().with_n_random_more(rng, count)
