import numpy as np
import warnings
import pytest

import dgverify.physics.scalar.scalar as scalar

rtol = 1e-14
atol = 1e-14


def get_physics():
	physics = scalar.AdvectionScalar(3)
	physics.set_conv_num_flux("Rusanov")
	physics.set_aux("SolidBodyRotation")
	physics.set_IC("GaussianBump")
	physics.set_exact("GaussianBump")
	return physics


def test_convective_flux():
	'''
	This tests that the advective flux is the velocity times the scalar.
	'''
	physics = get_physics()
	Uq = np.array([[[2.]]])
	aux = np.array([[[0.5, -1., 3.]]])

	F, preflux = physics.get_conv_flux_interior(Uq, aux)

	np.testing.assert_allclose(F[0, 0, 0], [1., -2., 6.], rtol, atol)
	np.testing.assert_allclose(preflux.P, 0., rtol, atol)
	np.testing.assert_allclose(preflux.velocity[0, 0], aux[0, 0], rtol,
			atol)


def test_flux_of_vanishing_scalar_single_precision():
	'''
	This tests that a scalar that has decayed to zero or into the float32
	subnormal range gives a finite flux without floating point warnings.
	'''
	physics = get_physics()
	Uq = np.array([[[0.], [1e-42], [1.]]], dtype=np.float32)
	aux = np.ones([1, 3, 3], dtype=np.float32)

	with warnings.catch_warnings():
		warnings.simplefilter("error")
		F, preflux = physics.get_conv_flux_interior(Uq, aux)

	assert np.all(np.isfinite(F))
	np.testing.assert_allclose(F[0, 2, 0], [1., 1., 1.], rtol, atol)


def test_max_wavespeed():
	physics = get_physics()
	Uq = np.array([[[2.]]])
	aux = np.array([[[0.5, -1., 3.]]])
	normals = np.array([[[0., 0.6, -0.8]]])

	a = physics.get_max_wavespeed(normals, Uq, aux)

	np.testing.assert_allclose(a, 3., rtol, atol)


def test_numerical_flux_upwind():
	'''
	This tests that the Rusanov flux with a single velocity is the upwind
	flux.
	'''
	physics = get_physics()
	aux = np.array([[[1., 0., 0.]]])
	normals = np.array([[[1., 0., 0.]]])
	UqM = np.array([[[2.]]])
	UqP = np.array([[[5.]]])

	Fn = physics.numerical_flux(normals, UqM, aux, UqP, aux)
	np.testing.assert_allclose(Fn, 2., rtol, atol)

	Fn = physics.numerical_flux(-normals, UqP, aux, UqM, aux)
	np.testing.assert_allclose(Fn, -2., rtol, atol)


def test_solid_body_rotation_is_tangent():
	'''
	This tests that the rotation has no radial component and the
	expected magnitude 2*pi*r*cos(phi).
	'''
	physics = get_physics()
	rng = np.random.default_rng(1)
	x = rng.normal(size=[20, 3])

	vel = physics.auxiliary_state_init(x)

	np.testing.assert_allclose(np.sum(vel*x, axis=-1), 0., 1e-12, 1e-12)
	rxy = np.sqrt(x[:, 0]**2 + x[:, 1]**2)
	np.testing.assert_allclose(np.linalg.norm(vel, axis=-1),
			2.*np.pi*rxy, 1e-12, 1e-12)


def test_gaussian_bump():
	physics = get_physics()
	x = np.array([
		[1., 0., 0.],    # center of the bump
		[0., 1.5, 0.],   # lambda = pi/2
		[-2., 0., 0.],   # lambda = pi
	])

	Uq = physics.initial_condition(x)

	np.testing.assert_allclose(Uq[:, 0], [1., np.exp(-(1.5*np.pi)**2),
			np.exp(-(3.*np.pi)**2)], 1e-12, 1e-300)


@pytest.mark.parametrize("t", [0.25, 0.5, 1.])
def test_gaussian_bump_exact_solution_rotates(t):
	'''
	This tests that the exact solution at time t is the initial bump
	rotated by 2*pi*t in longitude.
	'''
	physics = get_physics()
	rng = np.random.default_rng(2)
	x = rng.normal(size=[10, 3])

	c, s = np.cos(2.*np.pi*t), np.sin(2.*np.pi*t)
	xrot = np.stack([c*x[:, 0] - s*x[:, 1], s*x[:, 0] + c*x[:, 1],
			x[:, 2]], axis=-1)

	np.testing.assert_allclose(physics.exact_solution(xrot, t),
			physics.initial_condition(x), 1e-12, 1e-12)
