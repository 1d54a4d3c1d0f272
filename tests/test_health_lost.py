import health_lost
from health_lost import HealthLostSimulator, sweep
from utils.params import HleConfig, SweepParams

def test_sweep_prints_each_config(capsys):
	params = SweepParams(my_dice=range(3, 4), their_dice=range(1, 3), rounds=range(0, 2), simulations=50, counts_per_symbol=10)
	sweep(params)
	out = capsys.readouterr().out
	assert out.count("HleConfig {") == 4
	assert out.count("value | count   | propo. | ascii histogram") == 4
	# No rounds means nothing is ever lost
	assert "HleConfig { my_dice_count: 3, their_dice_count: 1, rounds: 0 }\nvalue | count   | propo. | ascii histogram\n------+---------+--------+----------------\n    0 |      50 | 1.0000 |#####\n" in out

def feed(monkeypatch, answers):
	answers = iter(answers)
	monkeypatch.setattr('builtins.input', lambda prompt='': next(answers))

def test_repl_edit_run_and_exit(monkeypatch, capsys):
	feed(monkeypatch, ['params', '1k', '4', 'x', '0', 'run', 'print', 'bogus', 'run cuda', 'exit'])
	simulator = HealthLostSimulator()
	simulator.run()
	out = capsys.readouterr().out

	assert simulator.config == HleConfig(4, 5, 0)
	assert simulator.simulations == 1_000
	assert "Invalid their dice" in out
	assert "Running 1k duels..." in out
	assert out.count("    0 |    1000 | 1.0000 |") == 2
	assert "Commands: params" in out
	assert "Error: Unknown processor: cuda" in out

def test_cli_sweep(monkeypatch):
	called = {}
	monkeypatch.setattr(health_lost, 'sweep', lambda params, processor: called.update(params=params, processor=processor))
	health_lost.main(['--sweep', '--simulations', '2k'])
	assert called['params'].simulations == 2_000
