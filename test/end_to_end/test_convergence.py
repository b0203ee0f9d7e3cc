import numpy as np
import pytest

from dgverify import driver
from dgverify.general import ModeType
import dgverify.verification.harness as harness


def get_deck(name, **verification):
	deck = driver.import_deck(name)
	deck["Verification"].update(verification)
	return deck


# Markers distinguish tests into different categories
@pytest.mark.e2e
def test_isentropic_vortex_2D():
	'''
	This runs the three levels of the 2D isentropic vortex. The study
	itself checks the errors against the recorded values with the deck's
	tolerance, their monotonic decrease, and the finest rate.
	'''
	deck = get_deck("isentropic_vortex")
	deck["Mesh"]["Dims"] = [2]
	study = harness.ConvergenceStudy(deck)

	results = study.run()[("float64", 2)]

	errs = [r.error for r in results]
	rtol = study.params["Verification"]["ReferenceRtol"]
	np.testing.assert_allclose(errs, [5.7115689019456284e-01,
			6.9418982796501105e-02, 3.2927550219120443e-03], rtol)
	assert errs[0] > errs[1] > errs[2]
	# The finest rate reaches the polynomial order
	assert harness.compute_rates(errs)[-1] >= \
			study.params["Numerics"]["SolutionOrder"]


@pytest.mark.e2e
def test_advection_sphere():
	'''
	This runs the three levels of the advection sphere and checks the
	relative errors, the mass conservation of the zero-flux shells, and
	the error at the finest level.
	'''
	study = harness.ConvergenceStudy(driver.import_deck("advection_sphere"))

	results = study.run()[("float64", 3)]

	errs = [r.error for r in results]
	rtol = study.params["Verification"]["ReferenceRtol"]
	np.testing.assert_allclose(errs, [2.1747884619563834e-01,
			1.2161683394578116e-02, 2.2529850289795472e-04], rtol)
	assert results[-1].num_elems == (8, 8)
	assert errs[-1] < 1e-3
	assert harness.compute_rates(errs)[-1] >= 4.
	for r in results:
		assert r.mass_delta < 1e-13


@pytest.mark.e2e
@pytest.mark.parametrize("name", ["isentropic_vortex", "advection_sphere"])
def test_randomized_smoke(name):
	'''
	This runs the short randomized configuration of each deck.
	'''
	study = harness.ConvergenceStudy(driver.import_deck(name),
			ModeType.Randomized)

	results = study.run()

	for level_results in results.values():
		assert len(level_results) == 1
		assert np.isfinite(level_results[0].error)
		assert level_results[0].num_time_steps == 2
