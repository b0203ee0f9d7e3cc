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
#       File : dgverify/solver/DG.py
#
#       Contains class definitions for the nodal DG solver on tensor-product
#       elements with Gauss-Lobatto-Legendre collocation.
#
# ------------------------------------------------------------------------ #
import logging
import numpy as np

from dgverify import errors
import dgverify.numerics.basis.basis as basis_defs
import dgverify.numerics.timestepping.tools as stepper_tools
import dgverify.solver.tools as solver_tools

logger = logging.getLogger(__name__)


class ElemHelpers():
	'''
	The ElemHelpers class contains the element geometry needed by the
	volume integral and the mass matrix. Nodes and quadrature points
	coincide, so everything is evaluated at the GLL nodes.

	Attributes:
	-----------
	x_elems: numpy array
		physical coordinates of the element nodes, padded to three
		components [num_elems, nb, 3]
	djac_elems: numpy array
		determinant of the Jacobian at each node [num_elems, nb]
	ijac_elems: numpy array
		inverse Jacobian, ijac[..., d, a] = dxi_d/dx_a
		[num_elems, nb, ndims, ndims]
	wJ_elems: numpy array
		quadrature weights times Jacobian determinant, i.e. the diagonal
		of the mass matrix [num_elems, nb]
	vgeo_elems: numpy array
		wJ times inverse Jacobian [num_elems, nb, ndims, ndims]
	iMM_elems: numpy array
		inverse of the diagonal mass matrix [num_elems, nb]
	'''
	def __init__(self):
		self.x_elems = np.zeros(0)
		self.djac_elems = np.zeros(0)
		self.ijac_elems = np.zeros(0)
		self.wJ_elems = np.zeros(0)
		self.vgeo_elems = np.zeros(0)
		self.iMM_elems = np.zeros(0)

	def compute_helpers(self, mesh, basis, dtype):
		'''
		Computes the isoparametric metric terms from the nodal
		coordinates. Geometry is evaluated in double precision and then
		cast to the solver precision.

		Inputs:
		-------
			mesh: mesh object
			basis: basis object
			dtype: floating point type of the solver
		'''
		ndims = mesh.ndims
		x = mesh.ref_to_phys(basis.nodes) # [ne, nb, ndims]

		# jac[e, n, a, d] = dx_a/dxi_d
		jac = np.einsum('dnm, ema -> enad', basis.D, x)
		djac = np.linalg.det(jac)
		if np.any(djac <= 0.):
			raise ValueError("Non-positive Jacobian in mesh")
		ijac = np.linalg.inv(jac)

		wJ = basis.weights[None, :]*djac

		x_elems = np.zeros(x.shape[:2] + (3,))
		x_elems[..., :ndims] = x

		self.x_elems = x_elems.astype(dtype)
		self.djac_elems = djac
		self.ijac_elems = ijac
		self.wJ_elems = wJ.astype(dtype)
		self.vgeo_elems = (wJ[..., None, None]*ijac).astype(dtype)
		self.iMM_elems = (1./wJ).astype(dtype)


class FaceHelpers():
	'''
	The FaceHelpers class contains the face node indices, unit normals,
	and surface quadrature weights for a set of element faces, seen from
	one side.

	Attributes:
	-----------
	elem_IDs: numpy array
		element on the owning side of each face [nf]
	face_IDs: numpy array
		local face ID within that element [nf]
	idx: numpy array
		flat node indices (elem_ID*nb + node) on the owning side [nf, nfq]
	normals: numpy array
		outward unit normals, padded to three components [nf, nfq, 3]
	wsJ: numpy array
		face quadrature weights times surface Jacobian [nf, nfq]
	'''
	def __init__(self):
		self.elem_IDs = np.zeros(0, dtype=int)
		self.face_IDs = np.zeros(0, dtype=int)
		self.idx = np.zeros([0, 0], dtype=int)
		self.normals = np.zeros([0, 0, 3])
		self.wsJ = np.zeros([0, 0])

	def compute_helpers(self, basis, elem_helpers, elem_IDs, face_IDs, dtype):
		'''
		Computes the face geometry on the given element faces.

		Inputs:
		-------
			basis: basis object
			elem_helpers: ElemHelpers object
			elem_IDs: element IDs [nf]
			face_IDs: local face IDs [nf]
			dtype: floating point type of the solver
		'''
		elem_IDs = np.asarray(elem_IDs, dtype=int)
		face_IDs = np.asarray(face_IDs, dtype=int)
		self.elem_IDs = elem_IDs
		self.face_IDs = face_IDs

		nb = basis.nb
		node_IDs = basis.face_node_IDs[face_IDs] # [nf, nfq]
		self.idx = elem_IDs[:, None]*nb + node_IDs

		# Outward normal: J * grad(xi_d), signed by the face side
		d = face_IDs//2
		sign = 2.*(face_IDs % 2) - 1.
		ijac = elem_helpers.ijac_elems[elem_IDs[:, None], node_IDs,
				d[:, None], :] # [nf, nfq, ndims]
		djac = elem_helpers.djac_elems[elem_IDs[:, None], node_IDs]
		n_vec = sign[:, None, None]*djac[..., None]*ijac

		sJ = np.linalg.norm(n_vec, axis=-1)
		normals = np.zeros(n_vec.shape[:2] + (3,))
		normals[..., :n_vec.shape[-1]] = n_vec/sJ[..., None]

		face_wts = basis.weights[node_IDs]/basis.weights_1D[0]

		self.normals = normals.astype(dtype)
		self.wsJ = (face_wts*sJ).astype(dtype)


class InteriorFaceHelpers(FaceHelpers):
	'''
	Face helpers for interior faces, seen from the left element. The
	right element's node indices are permuted to match the left nodes.

	Additional Attributes:
	----------------------
	idxR: numpy array
		flat node indices on the right side, matched to idx [nf, nfq]
	'''
	def __init__(self):
		super().__init__()
		self.idxR = np.zeros([0, 0], dtype=int)

	def compute_interior_helpers(self, mesh, basis, elem_helpers, dtype):
		int_faces = mesh.interior_faces
		elemL_IDs = np.array([f.elemL_ID for f in int_faces], dtype=int)
		faceL_IDs = np.array([f.faceL_ID for f in int_faces], dtype=int)
		elemR_IDs = np.array([f.elemR_ID for f in int_faces], dtype=int)
		faceR_IDs = np.array([f.faceR_ID for f in int_faces], dtype=int)

		self.compute_helpers(basis, elem_helpers, elemL_IDs, faceL_IDs, dtype)

		nb = basis.nb
		x = elem_helpers.x_elems.astype(float).reshape(-1, 3)
		node_IDs_R = basis.face_node_IDs[faceR_IDs]
		idxR = elemR_IDs[:, None]*nb + node_IDs_R

		perm = solver_tools.match_face_nodes(x[self.idx], x[idxR])
		self.idxR = np.take_along_axis(idxR, perm, axis=1)


class DG():
	'''
	Nodal discontinuous Galerkin solver in weak form:

		M dU/dt = sum_d D_d^T (W J dxi_d/dx . F) - sum_faces w sJ F*

	The mass matrix M = diag(W J) is diagonal. Each interior face flux is
	computed once and applied with opposite signs to both neighbors, so
	the scheme is discretely conservative.

	Attributes:
	-----------
	params: dict
		solver parameters
	physics: physics object
		provides physical_flux, numerical_flux, boundary_flux,
		auxiliary_state_init, and initial_condition
	mesh: mesh object
	dtype: numpy floating point type
	basis: LagrangeGLL object
	time: float
		current simulation time
	itime: int
		number of steps taken
	state_coeffs: numpy array
		nodal solution [num_elems, nb, ns]
	aux: numpy array
		nodal auxiliary state [num_elems, nb, 3]
	stepper: StepperBase object
	'''
	def __init__(self, params, physics, mesh, dtype=np.float64):
		self.params = params
		self.physics = physics
		self.mesh = mesh
		self.dtype = dtype

		self.order = params["SolutionOrder"]
		self.basis = basis_defs.LagrangeGLL(self.order, mesh.ndims)
		self.time = params["InitialTime"]
		self.itime = 0

		self.check_compatibility()
		self.precompute_matrix_helpers()

		x = self.elem_helpers.x_elems
		self.aux = np.asarray(physics.auxiliary_state_init(x), dtype=dtype)
		self.state_coeffs = self.init_state_from_fcn(self.time)

		self.stepper = stepper_tools.set_stepper(params, self.state_coeffs)
		stepper_tools.set_time_stepping_approach(self.stepper, params)

	def __repr__(self):
		return '{self.__class__.__name__}(order={self.order}, ' \
				'physics={self.physics}, mesh={self.mesh})'.format(self=self)

	def check_compatibility(self):
		'''
		Checks that every boundary group has a boundary condition.
		'''
		for bname in self.mesh.boundary_groups:
			if bname not in self.physics.BCs:
				raise errors.DoesNotExistError("No boundary condition set "
						"for boundary %s" % bname)

	def precompute_matrix_helpers(self):
		mesh = self.mesh
		basis = self.basis

		self.elem_helpers = ElemHelpers()
		self.elem_helpers.compute_helpers(mesh, basis, self.dtype)

		self.int_face_helpers = InteriorFaceHelpers()
		self.int_face_helpers.compute_interior_helpers(mesh, basis,
				self.elem_helpers, self.dtype)

		self.bface_helpers = {}
		for bname, bgroup in mesh.boundary_groups.items():
			bface_helpers = FaceHelpers()
			bface_helpers.compute_helpers(basis, self.elem_helpers,
					[bf.elem_ID for bf in bgroup.boundary_faces],
					[bf.face_ID for bf in bgroup.boundary_faces], self.dtype)
			self.bface_helpers[bname] = bface_helpers

	def init_state_from_fcn(self, t):
		'''
		Interpolates the initial condition to the nodes.
		'''
		x = self.elem_helpers.x_elems
		return np.asarray(self.physics.initial_condition(x, t),
				dtype=self.dtype)

	def get_exact_state(self, t):
		'''
		Evaluates the exact solution at the nodes at time t.
		'''
		x = self.elem_helpers.x_elems
		return np.asarray(self.physics.exact_solution(x, t),
				dtype=self.dtype)

	def get_residual(self, U, res):
		'''
		Calculates the residual (right-hand side times the mass matrix).

		Inputs:
		-------
			U: solution array [num_elems, nb, ns]
			res: residual array to fill [num_elems, nb, ns]

		Outputs:
		--------
			res: residual array [num_elems, nb, ns]
		'''
		physics = self.physics
		elem_helpers = self.elem_helpers
		ndims = self.mesh.ndims
		t = self.time
		aux = self.aux
		ns = U.shape[-1]

		# Volume contribution
		Fq = physics.physical_flux(U, aux, t) # [ne, nb, ns, 3]
		Fxi = np.einsum('enda, ensa -> ensd', elem_helpers.vgeo_elems,
				Fq[..., :ndims])
		res[:] = np.einsum('dmn, emsd -> ens', self.basis.D, Fxi)

		Uf = U.reshape(-1, ns)
		auxf = aux.reshape(-1, aux.shape[-1])
		resf = res.reshape(-1, ns)

		# Interior faces
		fh = self.int_face_helpers
		Fn = physics.numerical_flux(fh.normals, Uf[fh.idx], auxf[fh.idx],
				Uf[fh.idxR], auxf[fh.idxR], t)*fh.wsJ[..., None]
		np.add.at(resf, fh.idx, -Fn)
		np.add.at(resf, fh.idxR, Fn)

		# Boundary faces
		for bname, bh in self.bface_helpers.items():
			Fb = physics.boundary_flux(bname, bh.normals, Uf[bh.idx],
					auxf[bh.idx], t)*bh.wsJ[..., None]
			np.add.at(resf, bh.idx, -Fb)

		return res # [num_elems, nb, ns]

	def solve(self, callbacks=()):
		'''
		Advances the solution to FinalTime.

		Inputs:
		-------
			callbacks: [OPTIONAL] callables invoked with the solver after
				each time step

		Outputs:
		--------
			self.state_coeffs: updated in place
		'''
		stepper = self.stepper
		t0 = self.time

		for callback in callbacks:
			callback.initialize(self)

		logger.debug("Taking %d time steps with %s", stepper.num_time_steps,
				stepper.__class__.__name__)
		for itime in range(stepper.num_time_steps):
			stepper.dt = stepper.get_time_step(stepper, self)
			stepper.take_time_step(self)

			self.itime += 1
			# Avoid accumulating round-off in the time
			self.time = t0 + (itime + 1)*stepper.dt

			for callback in callbacks:
				callback(self)

			if self.params["Progress"]:
				solver_tools.update_progress((itime + 1)/
						stepper.num_time_steps)
