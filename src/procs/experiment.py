import numpy
from dice.pool import ColorPool
from utils.params import HleConfig, SimulationParams

def health_lost_experiment(rng: numpy.random.Generator, config: HleConfig) -> int:
	"""Play one duel and return the total number of matched dice lost"""
	mine = ColorPool.random(rng, config.my_dice_count)
	health_lost = 0
	for _ in range(config.rounds):
		theirs = ColorPool.random(rng, config.their_dice_count)
		matched = mine.chosen_match(theirs)
		if matched is not None:
			health_lost += matched.count
			mine = mine.col_rerolled(matched.color, rng)
		else:
			mine = mine.rerolled(rng)
	return health_lost

def run_simulation_serial(params: SimulationParams, rng: numpy.random.Generator | None = None) -> numpy.ndarray:
	if rng is None:
		rng = numpy.random.default_rng()
	results = numpy.empty(params.simulations, dtype=numpy.int32)
	for i in range(params.simulations):
		results[i] = health_lost_experiment(rng, params.config)
	return results
