# ------------------------------------------------------------------------ #
#
#       quail: A lightweight discontinuous Galerkin code for
#              teaching and prototyping
#		<https://github.com/IhmeGroup/quail>
#
#		Copyright (C) 2020-2021
#
#       This program is distributed under the terms of the GNU
#		General Public License v3.0. You should have received a copy
#       of the GNU General Public License along with this program.
#		If not, see <https://www.gnu.org/licenses/>.
#
# ------------------------------------------------------------------------ #

# ------------------------------------------------------------------------ #
#
#       File : dgverify/meshing/common.py
#
#       Contains functions for generating structured bricks and stacked
#       cubed-sphere shells.
#
# ------------------------------------------------------------------------ #
import itertools
import numpy as np

from dgverify import errors
import dgverify.meshing.meshbase as mesh_defs
import dgverify.meshing.tools as mesh_tools


BRICK_BOUNDARY_NAMES = ["x1", "x2", "y1", "y2", "z1", "z2"]


def mesh_brick(ranges, periodic=None):
	'''
	This function generates a structured mesh of quadrilaterals (2D) or
	hexahedra (3D). Boundary groups are named x1/x2, y1/y2, z1/z2 for the
	min/max side in each direction; periodic directions have none.

	Inputs:
	-------
		ranges: list of 1D arrays of vertex coordinates in each direction
		periodic: list of bools, periodicity in each direction

	Outputs:
	--------
		mesh: mesh object
	'''
	ndims = len(ranges)
	if ndims not in (2, 3):
		raise errors.IncompatibleError("Brick meshes must be 2D or 3D")
	if periodic is None:
		periodic = [False]*ndims

	num_elems_dir = [len(r) - 1 for r in ranges]
	# A single periodic element is its own neighbor. Faces are matched by
	# vertex IDs, which is only unambiguous for one such direction.
	num_single = sum([p and n == 1 for n, p in zip(num_elems_dir, periodic)])
	if num_single > 1:
		raise errors.IncompatibleError("At most one periodic direction may "
				"have a single element")

	# Periodic directions do not duplicate the last vertex
	num_nodes_dir = [n if p else n + 1 for n, p in zip(num_elems_dir,
			periodic)]

	num_elems = int(np.prod(num_elems_dir))
	mesh = mesh_defs.Mesh(ndims=ndims, num_elems=num_elems)
	mesh.num_nodes = int(np.prod(num_nodes_dir))

	# Element multi-indices, first direction fastest
	elem_index = np.array(np.unravel_index(np.arange(num_elems),
			num_elems_dir, order='F')) # [ndims, num_elems]

	for v in range(mesh.num_nodes_per_elem):
		corner = np.array([(v >> d) & 1 for d in range(ndims)])
		vert_index = elem_index + corner[:, None]
		for d in range(ndims):
			mesh.elem_node_coords[:, v, d] = ranges[d][vert_index[d]]
			if periodic[d]:
				vert_index[d] %= num_elems_dir[d]
		mesh.elem_to_node_IDs[:, v] = np.ravel_multi_index(vert_index,
				num_nodes_dir, order='F')

	mesh.create_faces(lambda elem_ID, face_ID:
			BRICK_BOUNDARY_NAMES[face_ID])

	return mesh


def mesh_stacked_cubed_sphere(num_horiz, radii):
	'''
	This function generates a spherical shell made of six stacked
	cubed-sphere panels. Each panel has num_horiz x num_horiz columns of
	len(radii) - 1 hexahedra. The vertices are placed on nested cube
	surfaces and mapped to the spheres by the equiangular warp.

	The third reference direction of every element points radially
	outward, so local faces 4 and 5 form the "inner" and "outer"
	boundary groups.

	Inputs:
	-------
		num_horiz: number of elements along each panel edge
		radii: increasing radii of the element layers [num_vert + 1]

	Outputs:
	--------
		mesh: mesh object
	'''
	radii = np.asarray(radii, dtype=float)
	num_vert = radii.shape[0] - 1
	if num_horiz < 1 or num_vert < 1:
		raise errors.IncompatibleError("Cubed sphere needs at least one "
				"element in each direction")

	num_elems = 6*num_horiz*num_horiz*num_vert
	mesh = mesh_defs.Mesh(ndims=3, num_elems=num_elems,
			warp=mesh_tools.cubed_shell_warp)

	s = np.linspace(-1., 1., num_horiz + 1)
	i, j, k = [idx.ravel(order='F') for idx in np.meshgrid(
			np.arange(num_horiz), np.arange(num_horiz),
			np.arange(num_vert), indexing='ij')]
	num_elems_panel = i.shape[0]

	elem_ID = 0
	for fdim, sign in itertools.product(range(3), (-1, 1)):
		d1 = (fdim + 1) % 3
		d2 = (fdim + 2) % 3
		# Swap the tangential axes on negative panels so that the
		# reference-to-physical map keeps a positive Jacobian
		if sign < 0:
			d1, d2 = d2, d1
		elems = slice(elem_ID, elem_ID + num_elems_panel)
		for v in range(mesh.num_nodes_per_elem):
			bi, bj, bk = v & 1, (v >> 1) & 1, (v >> 2) & 1
			r = radii[k + bk]
			mesh.elem_node_coords[elems, v, fdim] = sign*r
			mesh.elem_node_coords[elems, v, d1] = r*s[i + bi]
			mesh.elem_node_coords[elems, v, d2] = r*s[j + bj]
		elem_ID += num_elems_panel

	# Vertices shared between panels have identical cube coordinates
	flat_coords = mesh.elem_node_coords.reshape(-1, 3)
	_, node_IDs = np.unique(np.round(flat_coords, decimals=12), axis=0,
			return_inverse=True)
	mesh.elem_to_node_IDs = node_IDs.reshape(num_elems,
			mesh.num_nodes_per_elem)
	mesh.num_nodes = int(node_IDs.max()) + 1

	def get_boundary_name(elem_ID, face_ID):
		if face_ID == 4:
			return "inner"
		elif face_ID == 5:
			return "outer"
		raise errors.IncompatibleError("Unmatched side face in cubed sphere")

	mesh.create_faces(get_boundary_name)

	return mesh
