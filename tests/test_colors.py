import numpy
import pytest
from dice.colors import DieColor

def test_domain_order():
	assert list(DieColor.domain()) == [DieColor.Red, DieColor.Blue, DieColor.Black, DieColor.Yellow, DieColor.Green]

def test_index_round_trip():
	for i, color in enumerate(DieColor.domain()):
		assert color.to_idx() == i
		assert DieColor.from_idx(i) is color

@pytest.mark.parametrize('idx', [-1, 5, 6])
def test_from_idx_out_of_range(idx):
	with pytest.raises(ValueError):
		DieColor.from_idx(idx)

class FixedRng:
	"""Hands out preset die faces"""
	def __init__(self, faces):
		self.faces = iter(faces)

	def integers(self, low, high):
		assert (low, high) == (0, 6)
		return next(self.faces)

def test_six_faces_map_to_five_colors():
	rng = FixedRng(range(6))
	rolled = [DieColor.random(rng) for _ in range(6)]
	assert rolled == [DieColor.Red, DieColor.Blue, DieColor.Black, DieColor.Yellow, DieColor.Green, DieColor.Green]

def test_green_is_twice_as_likely():
	rng = numpy.random.default_rng(1234)
	draws = 120_000
	counts = numpy.zeros(5)
	for _ in range(draws):
		counts[DieColor.random(rng).to_idx()] += 1
	expected = numpy.array([1, 1, 1, 1, 2]) / 6
	assert numpy.allclose(counts / draws, expected, atol=0.01)
