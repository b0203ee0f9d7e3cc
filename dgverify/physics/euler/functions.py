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
#       File : dgverify/physics/euler/functions.py
#
#       Contains definitions of Functions for the Euler equations.
#
# ------------------------------------------------------------------------ #
from enum import Enum, auto

from dgverify.backend import np
from dgverify.general import pi
from dgverify.physics.base.data import FcnBase


class FcnType(Enum):
	'''
	Enum class that stores the types of analytical functions for initial
	conditions, exact solutions, and/or auxiliary states. These functions
	are specific to the Euler equations.
	'''
	IsentropicVortex = auto()
	BackgroundOffset = auto()


'''
---------------
State functions
---------------
These classes inherit from the FcnBase class. See FcnBase for detailed
comments of attributes and methods. Information specific to the
corresponding child classes can be found below. These classes should
correspond to the FcnType enum members above.
'''

class IsentropicVortex(FcnBase):
	'''
	Isentropic vortex translating through a doubly periodic box, see
	Example 3 of:
		[1] Y.C. Zhou, G.W. Wei, "High resolution conjugate filters for
		the simulation of flows," Journal of Computational Physics,
		189(1):159-179, 2003.

	The stored momentum includes the background offset given by the
	physics' auxiliary state.

	Attributes:
	-----------
	uinf: float
		free-stream x-velocity
	vinf: float
		free-stream y-velocity
	Tinf: float
		free-stream temperature
	vs: float
		vortex strength
	halfperiod: float
		half the period of the box in x and y
	'''
	def __init__(self, uinf=2., vinf=1., Tinf=1., vs=5., halfperiod=5.):
		'''
		This method initializes the attributes.

		Inputs:
		-------
			uinf: free-stream x-velocity
			vinf: free-stream y-velocity
			Tinf: free-stream temperature
			vs: vortex strength
			halfperiod: half the period of the box

		Outputs:
		--------
		    self: attributes initialized
		'''
		self.uinf = uinf
		self.vinf = vinf
		self.Tinf = Tinf
		self.vs = vs
		self.halfperiod = halfperiod

	def get_state(self, physics, x, t):
		gamma = physics.gamma
		vs = self.vs
		L = self.halfperiod

		# Track center of vortex
		xs = x[..., 0] - self.uinf*t
		ys = x[..., 1] - self.vinf*t

		# Fold into the centered periodic box
		xp = xs - np.floor((xs + L)/(2.*L))*2.*L
		yp = ys - np.floor((ys + L)/(2.*L))*2.*L
		rsq = xp*xp + yp*yp

		# Perturbations
		u = self.uinf - 0.5*vs*np.exp(1. - rsq)*yp/pi
		v = self.vinf + 0.5*vs*np.exp(1. - rsq)*xp/pi
		w = np.zeros_like(u)

		rho = (self.Tinf - (gamma - 1.)*vs*vs*np.exp(2.*(1. - rsq))
				/(gamma*16.*pi*pi))**(1./(gamma - 1.))
		p = rho**gamma

		aux = physics.auxiliary_state_init(x)

		Uq = np.empty(x.shape[:-1] + (physics.NUM_STATE_VARS,),
				dtype=x.dtype)
		Uq[..., 0] = rho
		Uq[..., 1] = rho*u + aux[..., 0]
		Uq[..., 2] = rho*v + aux[..., 1]
		Uq[..., 3] = rho*w + aux[..., 2]
		Uq[..., 4] = p/(gamma - 1.) + 0.5*rho*(u*u + v*v + w*w)

		return Uq # [..., ns]

	def get_random_state(self, physics, x, rng):
		Uq = rng.random(x.shape[:-1] + (physics.NUM_STATE_VARS,))
		Uq[..., 0] += 10.
		Uq[..., 4] += 10.

		return Uq.astype(x.dtype)


class BackgroundOffset(FcnBase):
	'''
	Smooth momentum offset with no physical meaning. It is added to the
	stored momentum to exercise the offset handling of the flux, the
	wavespeed, and the jump. It stays deterministic in randomized runs.
	'''
	def get_state(self, physics, x, t):
		r2 = x[..., 0]**2 + x[..., 1]**2 + x[..., 2]**2

		return np.stack([np.cos(pi*x[..., 0]), np.sin(pi*x[..., 1]),
				np.cos(pi*r2)], axis=-1) # [..., 3]
