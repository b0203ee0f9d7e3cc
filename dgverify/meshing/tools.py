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
#       File : dgverify/meshing/tools.py
#
#       Contains helper functions for mesh geometry and coordinate systems.
#
# ------------------------------------------------------------------------ #
import numpy

from dgverify.backend import np
from dgverify.general import pi


def cartesian_to_spherical(x, y, z, radians=True):
	'''
	Converts Cartesian coordinates to spherical coordinates.

	Inputs:
	-------
		x, y, z: Cartesian coordinates (arrays of any matching shape)
		radians: if False, the angles are returned in degrees

	Outputs:
	--------
		r: radius
		lam: longitude in [-pi, pi]
		phi: latitude in [-pi/2, pi/2]
	'''
	c = 1. if radians else 180./pi

	r = np.sqrt(x*x + y*y + z*z)
	lam = np.arctan2(y, x)*c
	phi = np.arcsin(z/r)*c

	return r, lam, phi


def cubed_shell_warp(x):
	'''
	Equiangular map from nested cube surfaces to concentric spherical
	shells. A point on the surface of the cube [-R, R]^3 is sent to the
	sphere of radius R along the gnomonic direction of its panel.

	Inputs:
	-------
		x: points on cube surfaces [..., 3]

	Outputs:
	--------
		x_warped: points on the spheres [..., 3]
	'''
	absx = numpy.abs(x)
	fdim = numpy.argmax(absx, axis=-1)
	R = numpy.take_along_axis(absx, fdim[..., None], axis=-1)

	xw = numpy.tan(0.25*pi*x/R)
	# Panel direction keeps its sign
	sign = numpy.sign(numpy.take_along_axis(x, fdim[..., None], axis=-1))
	numpy.put_along_axis(xw, fdim[..., None], sign, axis=-1)

	return R*xw/numpy.linalg.norm(xw, axis=-1, keepdims=True)
