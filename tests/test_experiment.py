import numpy
import pytest
from dice.pool import ColorPool
from procs.experiment import health_lost_experiment, run_simulation_serial
from utils.params import HleConfig, SimulationParams

def test_zero_rounds_loses_nothing():
	rng = numpy.random.default_rng()
	for _ in range(50):
		assert health_lost_experiment(rng, HleConfig(5, 5, 0)) == 0

@pytest.mark.parametrize('seed', [0, 1, 42, 2024])
def test_single_round_replays_from_seed(seed):
	lost = health_lost_experiment(numpy.random.default_rng(seed), HleConfig(5, 5, 1))

	rng = numpy.random.default_rng(seed)
	mine = ColorPool.random(rng, 5)
	theirs = ColorPool.random(rng, 5)
	matched = mine.chosen_match(theirs)
	assert lost == (matched.count if matched else 0)

def test_loss_bounded_by_rounds_and_dice():
	rng = numpy.random.default_rng(3)
	config = HleConfig(4, 6, 5)
	for _ in range(200):
		lost = health_lost_experiment(rng, config)
		assert 0 <= lost <= config.rounds * config.my_dice_count

def test_serial_batch():
	params = SimulationParams(HleConfig(3, 2, 4), 500)
	results = run_simulation_serial(params, numpy.random.default_rng(9))
	assert results.shape == (500,)
	assert results.min() >= 0
	assert numpy.array_equal(results, run_simulation_serial(params, numpy.random.default_rng(9)))
