import numpy as np
import pytest

from dgverify import errors
import dgverify.meshing.common as mesh_common
import dgverify.numerics.basis.basis as basis_defs
import dgverify.solver.DG as DG

rtol = 1e-13
atol = 1e-13


def get_ranges(num_elems, xmin=-5., xmax=5.):
	return [np.linspace(xmin, xmax, n + 1) for n in num_elems]


def test_brick_periodic_2D():
	mesh = mesh_common.mesh_brick(get_ranges([5, 5]), [True, True])

	assert mesh.num_elems == 25
	assert mesh.num_nodes == 25
	assert mesh.num_interior_faces == 50
	assert mesh.boundary_groups == {}


def test_brick_bounded_2D():
	'''
	This tests the boundary groups of a non-periodic 2 x 3 brick.
	'''
	mesh = mesh_common.mesh_brick(get_ranges([2, 3]))

	assert mesh.num_nodes == 12
	assert mesh.num_interior_faces == 7
	counts = {bname: bgroup.num_boundary_faces for bname, bgroup in
			mesh.boundary_groups.items()}
	assert counts == {"x1": 3, "x2": 3, "y1": 2, "y2": 2}

	for bface in mesh.boundary_groups["x2"].boundary_faces:
		assert bface.face_ID == 1
		coords = mesh.elem_node_coords[bface.elem_ID]
		np.testing.assert_allclose(np.max(coords[:, 0]), 5., rtol, atol)


def test_brick_single_periodic_element_3D():
	'''
	This tests a 5 x 5 x 1 brick, where the single element in z is its
	own neighbor through the periodic faces.
	'''
	mesh = mesh_common.mesh_brick(get_ranges([5, 5, 1]), [True]*3)

	assert mesh.num_elems == 25
	assert mesh.num_interior_faces == 75
	assert mesh.boundary_groups == {}
	self_faces = [f for f in mesh.interior_faces if f.elemL_ID == f.elemR_ID]
	assert len(self_faces) == 25
	assert all({f.faceL_ID, f.faceR_ID} == {4, 5} for f in self_faces)


def test_brick_two_single_periodic_elements():
	with pytest.raises(errors.IncompatibleError):
		mesh_common.mesh_brick(get_ranges([1, 1, 4]), [True]*3)


def test_brick_wrong_dimension():
	with pytest.raises(errors.IncompatibleError):
		mesh_common.mesh_brick(get_ranges([4]))


def test_brick_coordinates():
	mesh = mesh_common.mesh_brick(get_ranges([2, 2], 0., 1.), [True, False])
	x = mesh.ref_to_phys(np.array([[0., 0.], [1., 1.]]))

	# Element 1 is the second element in x
	np.testing.assert_allclose(x[1], [[0.75, 0.25], [1., 0.5]], rtol, atol)


def test_cubed_sphere_faces():
	'''
	This tests the face connectivity of a cubed-sphere shell: only the
	inner and outer shells are boundaries.
	'''
	num_horiz = 2
	radii = [1., 1.5, 2.]
	mesh = mesh_common.mesh_stacked_cubed_sphere(num_horiz, radii)

	assert mesh.num_elems == 48
	assert sorted(mesh.boundary_groups) == ["inner", "outer"]
	for bgroup in mesh.boundary_groups.values():
		assert bgroup.num_boundary_faces == 6*num_horiz**2
	assert mesh.num_interior_faces == (48*6 - 2*24)//2
	# Shared vertices of the cube graph
	assert mesh.num_nodes == 3*(6*num_horiz**2 + 2)


def test_cubed_sphere_vertices_on_shells():
	radii = [1., 1.25, 2.]
	mesh = mesh_common.mesh_stacked_cubed_sphere(3, radii)

	corners = np.array([[-1., -1., -1.], [1., 1., 1.]])
	x = mesh.ref_to_phys(corners) # [ne, 2, 3]
	r = np.linalg.norm(x, axis=-1)

	assert set(np.round(r.ravel(), 12)) <= set(radii)
	assert np.all(r[:, 0] < r[:, 1])


def test_cubed_sphere_volume():
	'''
	This tests the positive Jacobian and the shell volume computed from
	the element helpers.
	'''
	mesh = mesh_common.mesh_stacked_cubed_sphere(4, [1., 2.])
	basis = basis_defs.LagrangeGLL(4, 3)

	elem_helpers = DG.ElemHelpers()
	elem_helpers.compute_helpers(mesh, basis, np.float64)

	assert np.all(elem_helpers.djac_elems > 0.)
	np.testing.assert_allclose(np.sum(elem_helpers.wJ_elems),
			4./3.*np.pi*7., 1e-3, 0.)


def test_cubed_sphere_too_small():
	with pytest.raises(errors.IncompatibleError):
		mesh_common.mesh_stacked_cubed_sphere(0, [1., 2.])
