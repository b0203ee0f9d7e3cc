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
#       File : dgverify/solver/tools.py
#
#       Contains additional methods (tools) for the DG solver class
#
# ------------------------------------------------------------------------ #
import sys
import numpy as np


def mult_inv_mass_matrix(mesh, solver, dt, res):
	'''
	Multiplies the residual array with the inverse mass matrix. The mass
	matrix of the collocated GLL basis is diagonal.

	Inputs:
		mesh: mesh object
		solver: solver object
		dt: time step
		res: residual array [num_elems, nb, ns]

	Outputs:
		dU: change in solution array [num_elems, nb, ns]
	'''
	iMM_elems = solver.elem_helpers.iMM_elems

	return dt*iMM_elems[:, :, None]*res


def match_face_nodes(xL, xR, chunk_size=1024):
	'''
	Finds, for each node on the left side of a face, the node on the right
	side occupying the same position. Coordinates are compared relative to
	the face centroid, which removes periodic shifts.

	Inputs:
	-------
		xL: left face node coordinates [nf, nfq, ndims]
		xR: right face node coordinates [nf, nfq, ndims]
		chunk_size: [OPTIONAL] number of faces processed at once

	Outputs:
	--------
		perm: index into the right face nodes for each left node [nf, nfq]
	'''
	xL = xL - xL.mean(axis=1, keepdims=True)
	xR = xR - xR.mean(axis=1, keepdims=True)

	nf = xL.shape[0]
	perm = np.zeros(xL.shape[:2], dtype=int)
	for start in range(0, nf, chunk_size):
		faces = slice(start, start + chunk_size)
		dist = np.linalg.norm(xL[faces, :, None, :] - xR[faces, None, :, :],
				axis=-1) # [nchunk, nfq, nfq]
		perm[faces] = np.argmin(dist, axis=-1)

	return perm


def update_progress(progress):
	'''
	Displays or updates a console progress bar.
	Accepts a float between 0 and 1. Any int will be converted to a float.
	A value under 0 represents a 'halt'.
	A value at 1 or bigger represents 100%.

	Inputs:
	-------
		progress: value representing the progress, scaled from 0 to 1
	'''
	# Length of the progress bar
	bar_length = 55

	status = ""
	# Convert ints
	if isinstance(progress, int):
		progress = float(progress)
	# Less than 0 'halts' the progress
	if progress < 0:
		progress = 0
		status = "Halt...\r\n"
	# Cap the progress at 100%
	if progress >= 1:
		progress = 1
		status = "Done...\r\n"

	# Compute number of blocks
	block = int(round(bar_length*progress))
	text = '\rPercent: [{0}] {1}% {2}'.format("#"*block + "-"*(bar_length -
			block), int(round(progress*100)), status)
	sys.stdout.write(text)
	sys.stdout.flush()
