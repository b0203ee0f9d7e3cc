import numpy as np
import pytest

from dgverify import errors
from dgverify.general import ModeType
import dgverify.physics.euler.euler as euler
import dgverify.physics.scalar.scalar as scalar

rtol = 1e-14
atol = 1e-14


def test_zero_flux_boundary():
	physics = scalar.AdvectionScalar(3)
	physics.set_BC("outer", "ZeroFlux")
	Uq = np.ones([2, 3, 1])
	aux = np.ones([2, 3, 3])
	normals = np.zeros([2, 3, 3])
	normals[..., 2] = 1.

	Fb = physics.boundary_flux("outer", normals, Uq, aux)

	np.testing.assert_allclose(Fb, 0., rtol, atol)
	assert Fb.shape == Uq.shape


def test_extrapolate_boundary():
	'''
	This tests that the extrapolated boundary flux is the one-sided
	physical flux.
	'''
	physics = scalar.AdvectionScalar(3)
	physics.set_conv_num_flux("Rusanov")
	physics.set_BC("outer", "Extrapolate")
	Uq = np.full([1, 1, 1], 3.)
	aux = np.array([[[0., 2., 0.]]])
	normals = np.array([[[0., 1., 0.]]])

	Fb = physics.boundary_flux("outer", normals, Uq, aux)

	np.testing.assert_allclose(Fb, 6., rtol, atol)


def test_missing_boundary_condition():
	physics = scalar.AdvectionScalar(3)
	with pytest.raises(errors.DoesNotExistError):
		physics.boundary_flux("inner", np.zeros([1, 1, 3]),
				np.zeros([1, 1, 1]), np.zeros([1, 1, 3]))


def test_unknown_function():
	physics = euler.Euler(2)
	with pytest.raises(errors.DoesNotExistError):
		physics.set_IC("GaussianBump")


def test_randomized_needs_generator():
	physics = euler.Euler(2)
	with pytest.raises(errors.IncompatibleError):
		physics.set_IC("IsentropicVortex", ModeType.Randomized)


def test_randomized_euler_state():
	'''
	This tests that randomized Euler states have positive density and
	energy well above the fluctuations, and that the offset stays
	deterministic.
	'''
	rng = np.random.default_rng(0)
	physics = euler.Euler(3)
	physics.set_aux("BackgroundOffset", ModeType.Randomized, rng)
	physics.set_IC("IsentropicVortex", ModeType.Randomized, rng)
	x = np.random.default_rng(3).random([4, 6, 3])

	Uq = physics.initial_condition(x)
	aux = physics.auxiliary_state_init(x)

	assert Uq.shape == (4, 6, 5)
	assert np.all(Uq[..., 0] >= 10.) and np.all(Uq[..., 0] < 11.)
	assert np.all(Uq[..., 4] >= 10.) and np.all(Uq[..., 4] < 11.)
	assert np.all((Uq[..., 1:4] >= 0.) & (Uq[..., 1:4] < 1.))

	physics_ref = euler.Euler(3)
	physics_ref.set_aux("BackgroundOffset")
	np.testing.assert_allclose(aux, physics_ref.auxiliary_state_init(x),
			rtol, atol)


def test_randomized_is_reproducible():
	x = np.random.default_rng(3).random([5, 3])
	states = []
	for _ in range(2):
		rng = np.random.default_rng(7)
		physics = scalar.AdvectionScalar(3)
		physics.set_aux("SolidBodyRotation", ModeType.Randomized, rng)
		physics.set_IC("GaussianBump", ModeType.Randomized, rng)
		states.append((physics.auxiliary_state_init(x),
				physics.initial_condition(x)))

	np.testing.assert_array_equal(states[0][0], states[1][0])
	np.testing.assert_array_equal(states[0][1], states[1][1])
	assert np.all(states[0][1] >= 10.)


def test_exact_solution_stays_deterministic():
	rng = np.random.default_rng(0)
	physics = scalar.AdvectionScalar(3)
	physics.set_IC("GaussianBump", ModeType.Randomized, rng)
	physics.set_exact("GaussianBump")
	x = np.array([[1., 0., 0.]])

	np.testing.assert_allclose(physics.exact_solution(x, 0.), 1., rtol,
			atol)
