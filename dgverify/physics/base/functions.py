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
#       File : dgverify/physics/base/functions.py
#
#       Contains definitions of Functions, boundary conditions, and
#       numerical fluxes shared by all physics types.
#
# ------------------------------------------------------------------------ #
from enum import Enum, auto

from dgverify.backend import np
from dgverify.physics.base.data import FcnBase, BCBase, ConvNumFluxBase


class BCType(Enum):
	'''
	Enum class that stores the types of boundary conditions. These
	boundary conditions are available for all physics types.
	'''
	ZeroFlux = auto()
	Extrapolate = auto()


class ConvNumFluxType(Enum):
	'''
	Enum class that stores the types of convective numerical fluxes. These
	numerical fluxes are available for all physics types.
	'''
	Rusanov = auto()


'''
---------------
State functions
---------------
'''

class Randomized(FcnBase):
	'''
	Wraps a state function so that it returns random values instead of
	the closed-form solution. Used only to smoke-test the solver
	plumbing; the generator is seeded by the caller.

	Attributes:
	-----------
	fcn: FcnBase
		wrapped state function
	rng: numpy.random.Generator
		random number generator
	'''
	def __init__(self, fcn, rng):
		self.fcn = fcn
		self.rng = rng

	def get_state(self, physics, x, t):
		return self.fcn.get_random_state(physics, x, self.rng)


'''
-------------------
Boundary conditions
-------------------
'''

class ZeroFlux(BCBase):
	'''
	Sets the boundary flux to zero. This is an approximate no-flux
	closure, not a full wall model: nothing enters or leaves through the
	boundary, which keeps the total mass exact even when the prescribed
	velocity is not exactly tangential there.
	'''
	def get_boundary_flux(self, physics, UqI, auxI, normals, t):
		return np.zeros_like(UqI)


class Extrapolate(BCBase):
	'''
	Uses the interior state as the exterior state, so the numerical flux
	reduces to the one-sided physical flux.
	'''
	def get_boundary_flux(self, physics, UqI, auxI, normals, t):
		return physics.conv_flux_fcn.compute_flux(physics, UqI, auxI, UqI,
				auxI, normals, t)


'''
---------------------
Convective flux functions
---------------------
'''

class Rusanov(ConvNumFluxBase):
	'''
	Rusanov (local Lax-Friedrichs) flux:

		F* = 0.5 (F(U-) + F(U+)) . n - 0.5 C [U]

	where C is the larger of the two one-sided wavespeeds along n and [U]
	is the plus-minus jump computed by the physics (which removes any
	background offset from both sides first).
	'''
	def compute_flux(self, physics, UqM, auxM, UqP, auxP, normals, t=0.):
		# Primitive variables, shared by flux and wavespeed
		prefluxM = physics.preflux(UqM, auxM, t)
		prefluxP = physics.preflux(UqP, auxP, t)

		# Physical fluxes
		FqM, _ = physics.get_conv_flux_interior(UqM, auxM, t, prefluxM)
		FqP, _ = physics.get_conv_flux_interior(UqP, auxP, t, prefluxP)

		# Max wave speeds at each point
		aM = physics.get_max_wavespeed(normals, UqM, auxM, t, prefluxM)
		aP = physics.get_max_wavespeed(normals, UqP, auxP, t, prefluxP)
		C = np.maximum(aM, aP)

		# Jump
		dUq = physics.compute_jump(UqM, auxM, UqP, auxP)

		# Put together
		Fn = ((FqM + FqP)*normals[..., None, :]).sum(axis=-1)
		return 0.5*Fn - 0.5*C[..., None]*dUq
