from __future__ import annotations
import numpy
from enum import Enum

class DieColor(Enum):
	Red = 0
	Blue = 1
	Black = 2
	Yellow = 3
	Green = 4

	@classmethod
	def domain(cls):
		"""Yield every color in declaration order"""
		return (cls.from_idx(i) for i in range(len(cls)))

	def to_idx(self) -> int:
		return self.value

	@classmethod
	def from_idx(cls, idx: int) -> DieColor:
		if not 0 <= idx < len(cls):
			raise ValueError(f"No die color at index {idx}")
		return cls(idx)

	@classmethod
	def random(cls, rng: numpy.random.Generator) -> DieColor:
		"""
		Roll one die face.

		The die has six faces but only five colors: faces 4 and 5 are both Green,
		so Green comes up twice as often as any other color (1:1:1:1:2).
		"""
		match int(rng.integers(0, 6)):
			case 0:
				return cls.Red
			case 1:
				return cls.Blue
			case 2:
				return cls.Black
			case 3:
				return cls.Yellow
			case _:
				return cls.Green
