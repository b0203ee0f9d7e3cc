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
#       File : dgverify/processing/post.py
#
#       Contains functions for computing norms, errors, and integrated
#       quantities of the solution.
#
# ------------------------------------------------------------------------ #
import numpy as np


def get_norm(solver, U):
	'''
	Computes the L2 norm of the solution, weighted by the diagonal mass
	matrix, sqrt(sum(WJ U^2)), summed over all state variables.

	Inputs:
	-------
		solver: solver object
		U: solution array [num_elems, nb, ns]

	Outputs:
	--------
		norm: scalar norm
	'''
	wJ = solver.elem_helpers.wJ_elems

	return np.sqrt(np.sum(wJ[:, :, None]*U*U))


def euclidean_distance(solver, U, Ue):
	'''
	Computes the weighted L2 distance between two solution arrays.

	Inputs:
	-------
		solver: solver object
		U: solution array [num_elems, nb, ns]
		Ue: reference solution array [num_elems, nb, ns]

	Outputs:
	--------
		dist: scalar distance
	'''
	return get_norm(solver, U - Ue)


def weighted_sum(solver, U):
	'''
	Integrates the solution over the domain with the mass-matrix weights,
	summed over all state variables.

	Inputs:
	-------
		solver: solver object
		U: solution array [num_elems, nb, ns]

	Outputs:
	--------
		total: integral of U
	'''
	wJ = solver.elem_helpers.wJ_elems

	return np.sum(wJ[:, :, None]*U)


def get_mass_delta(solver, U, Uref):
	'''
	Computes the relative change in the integral of the solution,
	|sum(WJ U) - sum(WJ Uref)| / sum(WJ Uref).
	'''
	mref = weighted_sum(solver, Uref)

	return np.abs(weighted_sum(solver, U) - mref)/mref
