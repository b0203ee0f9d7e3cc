import numpy as np
import pytest

from dgverify import driver, errors
from dgverify.general import ModeType
import dgverify.solver.callbacks as callbacks


def test_import_bundled_decks():
	deck = driver.import_deck("isentropic_vortex")
	assert deck["InitialCondition"]["Function"] == "IsentropicVortex"
	assert deck["TimeStepping"]["TimeStepper"] == "LSRK"

	deck = driver.import_deck("advection_sphere")
	assert deck["Mesh"]["Topology"] == "StackedCubedSphere"
	assert sorted(deck["BoundaryConditions"]) == ["inner", "outer"]


def test_import_deck_from_file(tmp_path):
	deck_file = tmp_path/"my_deck.py"
	deck_file.write_text("Mesh = {'Dims' : [3]}\nunrelated = 1\n")

	deck = driver.import_deck(str(deck_file))

	assert deck == {"Mesh": {"Dims": [3]}}


def test_import_missing_deck():
	with pytest.raises(errors.DoesNotExistError):
		driver.import_deck("no_such_case")


def test_bundled_decks_are_valid():
	'''
	This tests that both bundled decks merge over the defaults in both
	modes.
	'''
	for name in ["isentropic_vortex", "advection_sphere"]:
		params = driver.overwrite_params(driver.import_deck(name))
		driver.apply_randomized(params)


def test_overwrite_params():
	params = driver.overwrite_params({
		"Mesh" : {"Dims" : [3]},
		"InitialCondition" : {"Function" : "IsentropicVortex", "vs" : 4.},
	})

	assert params["Mesh"]["Dims"] == [3]
	assert params["Mesh"]["xmin"] == -5.
	assert params["TimeStepping"]["TimeStepper"] == "LSRK4"
	# The exact solution defaults to the initial condition
	assert params["ExactSolution"] == {"Function" : "IsentropicVortex",
			"vs" : 4.}


def test_overwrite_params_does_not_alias_defaults():
	params = driver.overwrite_params({})
	params["Mesh"]["NumElems"].append(7)

	assert driver.overwrite_params({})["Mesh"]["NumElems"] == [5, 5, 1]


def test_overwrite_params_unknown_key():
	with pytest.raises(KeyError):
		driver.overwrite_params({"Mesh" : {"NumElem" : [2, 2]}})


def test_overwrite_params_unknown_section():
	with pytest.raises(KeyError):
		driver.overwrite_params({"Solver" : {}})


def test_apply_randomized():
	params = driver.overwrite_params({
		"Verification" : {"NumLevels" : 3},
		"Randomized" : {"Verification" : {"NumLevels" : 1}},
	})

	params_rand = driver.apply_randomized(params)

	assert params_rand["Verification"]["NumLevels"] == 1
	assert params["Verification"]["NumLevels"] == 3


def test_apply_randomized_unknown_key():
	params = driver.overwrite_params({
		"Randomized" : {"Mesh" : {"Ne" : [1, 2]}},
	})

	with pytest.raises(KeyError):
		driver.apply_randomized(params)


def test_create_mesh():
	params = driver.overwrite_params({})

	mesh = driver.create_mesh(params, 2, [3, 4])

	assert mesh.num_elems == 12
	np.testing.assert_allclose(mesh.elem_node_coords.min(), -5.)
	np.testing.assert_allclose(mesh.elem_node_coords.max(), 5.)


def test_create_mesh_sphere_needs_3D():
	params = driver.overwrite_params({
		"Mesh" : {"Topology" : "StackedCubedSphere"},
	})

	with pytest.raises(errors.IncompatibleError):
		driver.create_mesh(params, 2, [2, 2])

	mesh = driver.create_mesh(params, 3, [2, 3])
	assert mesh.num_elems == 6*2*2*3


def test_set_physics():
	params = driver.overwrite_params(driver.import_deck("advection_sphere"))

	physics = driver.set_physics(params, 3)

	assert physics.NUM_STATE_VARS == 1
	assert sorted(physics.BCs) == ["inner", "outer"]
	assert physics.exact_soln is not None


def test_set_physics_unknown_type():
	params = driver.overwrite_params({"Physics" : {"Type" : "NavierStokes"}})

	with pytest.raises(errors.DoesNotExistError):
		driver.set_physics(params, 2)


def test_set_physics_randomized():
	params = driver.overwrite_params(driver.import_deck("isentropic_vortex"))
	rng = np.random.default_rng(0)

	physics = driver.set_physics(params, 2, ModeType.Randomized, rng)
	Uq = physics.initial_condition(np.zeros([3, 3]))

	assert np.all(Uq[:, 0] >= 10.)


class Solver():
	class Mesh():
		ndims = 3

	mesh = Mesh()


@pytest.mark.parametrize("track_mass, write_vtk, num_callbacks", [
	(False, False, 1),
	(True, False, 2),
	(True, True, 3),
])
def test_set_callbacks(track_mass, write_vtk, num_callbacks):
	params = driver.overwrite_params({"Output" : {"WriteVTK" : write_vtk}})

	callback_list = driver.set_callbacks(Solver(), params, None, track_mass)

	assert len(callback_list) == num_callbacks
	assert isinstance(callback_list[0], callbacks.EveryXWallTimeSeconds)
