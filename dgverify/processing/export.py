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
#       File : dgverify/processing/export.py
#
#       Contains functions for exporting nodal solution values to VTK files.
#
# ------------------------------------------------------------------------ #
import logging
import os
import numpy as np

from pyevtk.hl import pointsToVTK

logger = logging.getLogger(__name__)


def get_point_data(solver, include_aux=True):
	'''
	Collects the nodal state (and auxiliary state) into flat arrays keyed
	by variable name.

	Inputs:
	-------
		solver: solver object
		include_aux: if True, also export the auxiliary state

	Outputs:
	--------
		data: dict of contiguous float64 arrays [num_elems*nb]
	'''
	physics = solver.physics
	U = solver.state_coeffs

	data = {}
	for i, var in enumerate(physics.StateVariables):
		data[var.name] = np.ascontiguousarray(U[..., i].ravel(),
				dtype=np.float64)
	if include_aux:
		for i, name in enumerate(physics.AuxVariables):
			data[name] = np.ascontiguousarray(solver.aux[..., i].ravel(),
					dtype=np.float64)

	return data


def export_points(solver, file_name='export', include_aux=True):
	'''
	This function exports the nodal values as a VTK point cloud. Export
	is best-effort: file system errors are logged and never interrupt the
	run.

	Inputs:
	-------
		solver: solver object
		file_name: path of the VTK file, without extension
		include_aux: if True, also export the auxiliary state

	Outputs:
	--------
		path: path of the written file, or None on failure
	'''
	x = solver.elem_helpers.x_elems.reshape(-1, 3)
	coords = [np.ascontiguousarray(x[:, d], dtype=np.float64)
			for d in range(3)]
	data = get_point_data(solver, include_aux)

	try:
		dir_name = os.path.dirname(file_name)
		if dir_name:
			os.makedirs(dir_name, exist_ok=True)
		path = pointsToVTK(file_name, *coords, data=data)
	except OSError as e:
		logger.warning("VTK export to %s failed: %s", file_name, e)
		return None

	logger.debug("Wrote VTK output %s", path)
	return path


class PointWriter():
	'''
	Callback function that writes numbered VTK point clouds named
	<prefix>_stepXXXX.
	'''
	def __init__(self, prefix, include_aux=True):
		self.prefix = prefix
		self.include_aux = include_aux
		self.count = 0

	def __call__(self, solver):
		export_points(solver, "%s_step%04d" % (self.prefix, self.count),
				self.include_aux)
		self.count += 1
