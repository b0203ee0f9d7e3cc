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
#       File : dgverify/physics/scalar/functions.py
#
#       Contains definitions of Functions for scalar advection on the sphere.
#
# ------------------------------------------------------------------------ #
from enum import Enum, auto

from dgverify.backend import np
from dgverify.general import pi
from dgverify.meshing.tools import cartesian_to_spherical
from dgverify.physics.base.data import FcnBase


class FcnType(Enum):
	'''
	Enum class that stores the types of analytical functions for initial
	conditions, exact solutions, and/or auxiliary states. These functions
	are specific to scalar advection.
	'''
	GaussianBump = auto()
	SolidBodyRotation = auto()


'''
---------------
State functions
---------------
These classes inherit from the FcnBase class. See FcnBase for detailed
comments of attributes and methods. Information specific to the
corresponding child classes can be found below. These classes should
correspond to the FcnType enum members above.
'''

class SolidBodyRotation(FcnBase):
	'''
	Solid body rotation about the z-axis, case 2 of:
		[1] D.L. Williamson, J.B. Drake, J.J. Hack, R. Jakob, P.N.
		Swarztrauber, "A standard test set for numerical approximations to
		the shallow water equations in spherical geometry," Journal of
		Computational Physics, 102(1):211-224, 1992.

	The zonal velocity is 2*pi*omega*r*cos(phi), so the field completes
	omega revolutions per unit time.

	Attributes:
	-----------
	omega: float
		revolutions per unit time
	'''
	def __init__(self, omega=1.):
		self.omega = omega

	def get_state(self, physics, x, t):
		r, lam, phi = cartesian_to_spherical(x[..., 0], x[..., 1],
				x[..., 2])

		ulam = 2.*pi*self.omega*np.cos(phi)*r
		uphi = np.zeros_like(ulam)

		return np.stack([
				-ulam*np.sin(lam) - uphi*np.cos(lam)*np.sin(phi),
				ulam*np.cos(lam) - uphi*np.sin(lam)*np.sin(phi),
				uphi*np.cos(phi)], axis=-1) # [..., 3]

	def get_random_state(self, physics, x, rng):
		return rng.random(x.shape[:-1] + (3,)).astype(x.dtype)


class GaussianBump(FcnBase):
	'''
	Gaussian bump in longitude/latitude centered at (0, 0), carried by
	the solid body rotation. The exact solution at time t is the initial
	bump rotated by 2*pi*omega*t in longitude.

	Attributes:
	-----------
	width: float
		inverse width of the bump in longitude and latitude
	omega: float
		revolutions per unit time of the carrying rotation
	'''
	def __init__(self, width=3., omega=1.):
		self.width = width
		self.omega = omega

	def get_state(self, physics, x, t):
		_, lam, phi = cartesian_to_spherical(x[..., 0], x[..., 1],
				x[..., 2])

		# Rotate back to the initial longitude, wrapped into [-pi, pi)
		lam0 = np.mod(lam - 2.*pi*self.omega*t + pi, 2.*pi) - pi

		rho = np.exp(-((self.width*lam0)**2 + (self.width*phi)**2))

		return rho[..., None] # [..., 1]

	def get_random_state(self, physics, x, rng):
		return (10. + rng.random(x.shape[:-1] + (1,))).astype(x.dtype)
