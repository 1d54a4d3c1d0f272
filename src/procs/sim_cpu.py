import numpy
import multiprocessing
from multiprocessing import Manager
from multiprocessing.synchronize import Lock
from multiprocessing.managers import ValueProxy
from procs.experiment import health_lost_experiment
from utils.params import HleConfig, SimulationParams, monitor_progress

# Workers must be top level functions so the pool can pickle them
def worker(config: HleConfig, batch_size: int, seed: numpy.random.SeedSequence, update_interval: int, shared_progress: ValueProxy, lock: Lock) -> numpy.ndarray:
	rng = numpy.random.default_rng(seed)
	results = numpy.empty(batch_size, dtype=numpy.int32)

	last_reported = -1 # Init at 0 would imply we reported index 0
	for i in range(batch_size):
		results[i] = health_lost_experiment(rng, config)
		unreported = i - last_reported
		if unreported >= update_interval:
			with lock:
				shared_progress.value += unreported
			last_reported = i

	# Update any remaining progress
	last_index = batch_size - 1
	if last_reported < last_index:
		with lock:
			shared_progress.value += last_index - last_reported

	return results

# CPU Simulation
def run_simulation_cpu(params: SimulationParams, num_workers: int | None = None, seed: int | None = None) -> numpy.ndarray:
	num_workers = num_workers or multiprocessing.cpu_count()
	batch_size = params.simulations // num_workers
	remainder = params.simulations % num_workers
	update_interval = max(1, batch_size // 100)

	# One independent stream per worker, plus one for the remainder
	main_seed, *worker_seeds = numpy.random.SeedSequence(seed).spawn(num_workers + 1)

	# Handle remainder simulations in main process
	remainder_results = numpy.empty(remainder, dtype=numpy.int32)
	rng = numpy.random.default_rng(main_seed)
	for i in range(remainder):
		remainder_results[i] = health_lost_experiment(rng, params.config)

	manager = Manager()
	shared_progress = manager.Value('i', remainder)
	lock = manager.Lock()

	jobs = [(params.config, batch_size, worker_seed, update_interval, shared_progress, lock) for worker_seed in worker_seeds]
	with multiprocessing.Pool(num_workers) as pool:
		results = pool.starmap_async(worker, jobs)
		monitor_progress(get_progress=lambda: shared_progress.value, total=params.simulations)
		print("\nCPU Simulation complete!")
		all_results = numpy.concatenate([remainder_results, *results.get()])

	manager.shutdown()
	return all_results
