import numpy as np
import pytest

import dgverify.meshing.tools as mesh_tools

rtol = 1e-14
atol = 1e-14


def test_cartesian_to_spherical_axes():
	x = np.array([1., 0., 0., -2.])
	y = np.array([0., 3., 0., 0.])
	z = np.array([0., 0., -4., 0.])

	r, lam, phi = mesh_tools.cartesian_to_spherical(x, y, z)

	np.testing.assert_allclose(r, [1., 3., 4., 2.], rtol, atol)
	np.testing.assert_allclose(lam, [0., np.pi/2., 0., np.pi], rtol, atol)
	np.testing.assert_allclose(phi, [0., 0., -np.pi/2., 0.], rtol, atol)


def test_cartesian_to_spherical_degrees():
	r, lam, phi = mesh_tools.cartesian_to_spherical(np.array([1.]),
			np.array([1.]), np.array([np.sqrt(2.)]), radians=False)

	np.testing.assert_allclose(r, 2., rtol, atol)
	np.testing.assert_allclose(lam, 45., 1e-12, 1e-12)
	np.testing.assert_allclose(phi, 45., 1e-12, 1e-12)


def test_cartesian_to_spherical_round_trip():
	rng = np.random.default_rng(4)
	x, y, z = rng.normal(size=[3, 50])

	r, lam, phi = mesh_tools.cartesian_to_spherical(x, y, z)

	np.testing.assert_allclose(r*np.cos(phi)*np.cos(lam), x, 1e-12, 1e-12)
	np.testing.assert_allclose(r*np.cos(phi)*np.sin(lam), y, 1e-12, 1e-12)
	np.testing.assert_allclose(r*np.sin(phi), z, 1e-12, 1e-12)


@pytest.mark.parametrize("R", [1., 2.5])
def test_cubed_shell_warp(R):
	'''
	This tests that points on a cube surface land on the sphere of the
	same half-width, with panel centers and corners fixed in direction.
	'''
	x = R*np.array([
		[1., 0., 0.],
		[0., -1., 0.],
		[1., 1., 1.],
		[0.5, -0.3, 1.],
		[-1., 0.2, -0.7],
	])

	xw = mesh_tools.cubed_shell_warp(x)

	np.testing.assert_allclose(np.linalg.norm(xw, axis=-1), R, rtol, atol)
	np.testing.assert_allclose(xw[:2], x[:2], rtol, atol)
	np.testing.assert_allclose(xw[2], R*np.ones(3)/np.sqrt(3.), rtol, atol)
	# The panel coordinate keeps its sign
	assert xw[3, 2] > 0. and xw[4, 0] < 0.


def test_cubed_shell_warp_equiangular():
	'''
	This tests that equally spaced points along a panel edge are equally
	spaced in angle.
	'''
	s = np.linspace(-1., 1., 5)
	x = np.stack([np.ones_like(s), s, np.zeros_like(s)], axis=-1)

	xw = mesh_tools.cubed_shell_warp(x)
	angles = np.arctan2(xw[:, 1], xw[:, 0])

	np.testing.assert_allclose(angles, np.pi/4.*s, 1e-14, 1e-14)
