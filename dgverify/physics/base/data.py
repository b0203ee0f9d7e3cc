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
#       File : dgverify/physics/base/data.py
#
#       Contains base classes for state functions, boundary conditions,
#       and numerical fluxes, plus the primitive-variable bundle.
#
# ------------------------------------------------------------------------ #
from abc import ABC, abstractmethod
from typing import NamedTuple

from dgverify.backend import np


class Preflux(NamedTuple):
	'''
	Primitive variables derived from a conserved state and its auxiliary
	state. Computed once per evaluation and handed to both the physical
	flux and the wavespeed so that the two never disagree.

	Attributes:
	-----------
	P: pressure [...]
	u, v, w: velocity components [...]
	rhoinv: inverse density [...]
	'''
	P: object
	u: object
	v: object
	w: object
	rhoinv: object

	@property
	def velocity(self):
		return np.stack([self.u, self.v, self.w], axis=-1)


class FcnBase(ABC):
	'''
	This is an abstract base class used to represent analytical functions
	used for initial conditions, exact solutions, and auxiliary states.

	Abstract Methods:
	-----------------
	get_state
		computes the state at the given points and time
	'''
	@abstractmethod
	def get_state(self, physics, x, t):
		'''
		This method computes the state.

		Inputs:
		-------
			physics: physics object
			x: coordinates [..., 3]
			t: time

		Outputs:
		--------
			Uq: state [..., ns]
		'''
		pass

	def get_random_state(self, physics, x, rng):
		'''
		This method fills the state with random values for smoke tests.
		Functions without a randomized form return the deterministic
		state at t = 0.

		Inputs:
		-------
			physics: physics object
			x: coordinates [..., 3]
			rng: numpy random Generator

		Outputs:
		--------
			Uq: state [..., ns]
		'''
		return self.get_state(physics, x, 0.)


class BCBase(ABC):
	'''
	This is an abstract base class used to represent boundary conditions.
	Boundary conditions here act directly on the boundary flux.

	Abstract Methods:
	-----------------
	get_boundary_flux
		computes the boundary flux
	'''
	@abstractmethod
	def get_boundary_flux(self, physics, UqI, auxI, normals, t):
		'''
		This method computes the boundary flux.

		Inputs:
		-------
			physics: physics object
			UqI: interior state [nf, nq, ns]
			auxI: interior auxiliary state [nf, nq, 3]
			normals: outward unit normals [nf, nq, 3]
			t: time

		Outputs:
		--------
			Fq: flux dotted with the normal [nf, nq, ns]
		'''
		pass


class ConvNumFluxBase(ABC):
	'''
	This is an abstract base class used to represent convective numerical
	flux functions.

	Abstract Methods:
	-----------------
	compute_flux
		computes the convective numerical flux
	'''
	@abstractmethod
	def compute_flux(self, physics, UqM, auxM, UqP, auxP, normals, t):
		'''
		This method computes the numerical flux.

		Inputs:
		-------
			physics: physics object
			UqM: "minus" state [..., ns]
			auxM: "minus" auxiliary state [..., 3]
			UqP: "plus" state [..., ns]
			auxP: "plus" auxiliary state [..., 3]
			normals: unit normals pointing from minus to plus [..., 3]
			t: time

		Outputs:
		--------
			Fq: numerical flux dotted with the normal [..., ns]
		'''
		pass
