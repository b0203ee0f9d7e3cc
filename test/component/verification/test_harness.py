import numpy as np
import pytest

from dgverify import errors
from dgverify.general import ModeType
import dgverify.verification.harness as harness

rtol = 1e-14
atol = 1e-14


class FakeRunner():
	'''
	Returns prescribed errors per (ndims, level) and records the level
	configurations it was called with.
	'''
	def __init__(self, errors_by_dim, mass_delta=None, norm_ratio=1.):
		self.errors_by_dim = errors_by_dim
		self.mass_delta = mass_delta
		self.norm_ratio = norm_ratio
		self.calls = []

	def __call__(self, params, ndims, level_config, dtype, mode):
		level = sum(1 for c in self.calls if c[0] == ndims)
		self.calls.append((ndims, level_config, dtype, mode))
		return harness.LevelResult(level=None,
				num_elems=level_config["NumElems"],
				dt=level_config["TimeStepSize"],
				num_time_steps=level_config["NumTimeSteps"],
				error=self.errors_by_dim[ndims][level],
				mass_delta=self.mass_delta, norm_ratio=self.norm_ratio)


def get_deck(**verification):
	deck = {
		"TimeStepping" : {
			"FinalTime" : 1.,
			"TimeStepSize" : 1e-2,
		},
		"Mesh" : {
			"Dims" : [2, 3],
		},
		"InitialCondition" : {
			"Function" : "IsentropicVortex",
		},
		"AuxiliaryState" : {
			"Function" : "BackgroundOffset",
		},
		"Verification" : {
			"ExpectedErrors" : {
				"float64" : {
					2 : [0.5, 0.05],
				},
			},
		},
		"Randomized" : {
			"Mesh" : {
				"NumElems" : [3, 4, 5],
			},
			"Verification" : {
				"NumLevels" : 1,
				"ScaleTimeStep" : False,
			},
		},
	}
	deck["Verification"].update(verification)
	return deck


def test_compute_rates():
	rates = harness.compute_rates([1., 0.125, 1./128.])

	np.testing.assert_allclose(rates, [3., 4.], rtol, atol)


def test_level_config_brick():
	'''
	This tests the element counts and the time step of each level.
	'''
	params = harness.driver.overwrite_params(get_deck())

	config = harness.get_level_config(params, 3, 2)

	num_time_steps = int(np.ceil(1./(1e-2/20)))
	assert config["NumElems"] == (20, 20, 4)
	assert config["NumTimeSteps"] == num_time_steps
	np.testing.assert_allclose(config["TimeStepSize"], 1./num_time_steps,
			rtol, atol)
	np.testing.assert_allclose(config["TimeStepSize"], 5e-4, 1e-6, 0.)


def test_level_config_rounds_steps_up():
	params = harness.driver.overwrite_params({
		"TimeStepping" : {"FinalTime" : 1., "TimeStepSize" : 0.3},
		"Verification" : {"ScaleTimeStep" : False},
	})

	config = harness.get_level_config(params, 2, 0)

	assert config["NumTimeSteps"] == 4
	np.testing.assert_allclose(config["TimeStepSize"], 0.25, rtol, atol)


def test_level_config_sphere():
	params = harness.driver.overwrite_params({
		"TimeStepping" : {"TimeStepSize" : 0.05},
		"Mesh" : {"Topology" : "StackedCubedSphere"},
	})

	config = harness.get_level_config(params, 3, 1)

	assert config["NumElems"] == (4, 4)
	assert config["NumTimeSteps"] == int(np.ceil(1./(0.05/4)))


def test_level_config_cumulative():
	'''
	This tests that Cumulative refinement divides the previous level's
	time step by the new horizontal element count.
	'''
	params = harness.driver.overwrite_params({
		"TimeStepping" : {"TimeStepSize" : 0.05},
		"Mesh" : {"Topology" : "StackedCubedSphere"},
		"Verification" : {"TimeStepRefinement" : "Cumulative"},
	})

	num_time_steps = [harness.get_level_config(params, 3, level)[
			"NumTimeSteps"] for level in range(3)]

	assert num_time_steps == [40, 160, 1280]


def test_level_config_advection_sphere_deck():
	params = harness.driver.overwrite_params(
			harness.driver.import_deck("advection_sphere"))

	configs = [harness.get_level_config(params, 3, level)
			for level in range(3)]

	assert [c["NumElems"] for c in configs] == [(2, 2), (4, 4), (8, 8)]
	assert [c["NumTimeSteps"] for c in configs] == [40, 160, 1280]
	np.testing.assert_allclose(configs[2]["TimeStepSize"], 1./1280., rtol,
			atol)


def test_study_passes():
	runner = FakeRunner({2: [0.5, 0.05, 0.002], 3: [1., 0.1, 0.005]})
	study = harness.ConvergenceStudy(get_deck(MinRate=4.), runner=runner)

	results = study.run()

	assert sorted(results) == [("float64", 2), ("float64", 3)]
	assert [r.level for r in results[("float64", 2)]] == [0, 1, 2]
	assert [c[1]["NumElems"] for c in runner.calls[:3]] == [(5, 5),
			(10, 10), (20, 20)]
	assert all(c[2] == np.float64 for c in runner.calls)


def test_study_reference_mismatch():
	runner = FakeRunner({2: [0.5, 0.06, 0.002], 3: [1., 0.1, 0.005]})
	study = harness.ConvergenceStudy(get_deck(), runner=runner)

	with pytest.raises(errors.VerificationError, match="reference"):
		study.run()


def test_study_errors_not_decreasing():
	runner = FakeRunner({2: [0.5, 0.05, 0.002], 3: [1., 0.1, 0.2]})
	study = harness.ConvergenceStudy(get_deck(), runner=runner)

	with pytest.raises(errors.VerificationError, match="3D"):
		study.run()


def test_study_rate_too_low():
	'''
	This tests that only the rate between the two finest levels is held
	to MinRate.
	'''
	runner = FakeRunner({2: [0.5, 0.05, 0.01], 3: [1., 0.5, 0.01]})
	study = harness.ConvergenceStudy(get_deck(MinRate=4.), runner=runner)

	with pytest.raises(errors.VerificationError) as excinfo:
		study.run()

	assert "2D" in str(excinfo.value)
	assert "3D" not in str(excinfo.value)


def test_study_mass_drift():
	runner = FakeRunner({2: [0.5, 0.05, 0.002], 3: [1., 0.1, 0.005]},
			mass_delta=1e-9)
	study = harness.ConvergenceStudy(get_deck(TrackMass=True),
			runner=runner)

	with pytest.raises(errors.VerificationError, match="mass"):
		study.run()


def test_study_non_finite_error():
	runner = FakeRunner({2: [0.5, np.nan, 0.002], 3: [1., 0.1, 0.005]})
	study = harness.ConvergenceStudy(get_deck(), runner=runner)

	with pytest.raises(errors.VerificationError, match="non-finite"):
		study.run()


def test_randomized_study():
	'''
	This tests that Randomized mode applies the deck's overrides and only
	checks the norm ratio.
	'''
	runner = FakeRunner({2: [10.], 3: [10.]}, norm_ratio=0.999998)
	study = harness.ConvergenceStudy(get_deck(), ModeType.Randomized,
			runner=runner)

	study.run()

	assert [c[1]["NumElems"] for c in runner.calls] == [(3, 4), (3, 4, 5)]
	assert all(c[3] == ModeType.Randomized for c in runner.calls)


def test_randomized_norm_ratio():
	runner = FakeRunner({2: [10.], 3: [10.]}, norm_ratio=0.9)
	study = harness.ConvergenceStudy(get_deck(), ModeType.Randomized,
			runner=runner)

	with pytest.raises(errors.VerificationError, match="norm ratio"):
		study.run()


def test_vortex_coarsest_level():
	'''
	This runs the coarsest 2D isentropic vortex level and checks the
	mass-weighted error against the recorded value.
	'''
	params = harness.driver.overwrite_params(
			harness.driver.import_deck("isentropic_vortex"))
	level_config = harness.get_level_config(params, 2, 0)

	result = harness.run_level(params, 2, level_config, np.float64)

	np.testing.assert_allclose(result.error, 5.7115689019456284e-01, 1e-8,
			0.)


def test_sphere_coarsest_level():
	'''
	This runs the coarsest advection sphere level and checks the relative
	error against the recorded value and the mass conservation.
	'''
	params = harness.driver.overwrite_params(
			harness.driver.import_deck("advection_sphere"))
	level_config = harness.get_level_config(params, 3, 0)

	result = harness.run_level(params, 3, level_config, np.float64)

	np.testing.assert_allclose(result.error, 2.1747884619563834e-01, 1e-3,
			0.)
	assert result.mass_delta < 1e-13


def test_unknown_precision():
	deck = get_deck()
	deck["Numerics"] = {"Precisions" : ["float16"]}
	study = harness.ConvergenceStudy(deck, runner=FakeRunner({}))

	with pytest.raises(errors.IncompatibleError):
		study.run()
