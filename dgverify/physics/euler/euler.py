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
#       File : dgverify/physics/euler/euler.py
#
#       Contains class definition for the compressible Euler equations with
#       a background momentum offset held in the auxiliary state.
#
# ------------------------------------------------------------------------ #
from enum import Enum
import numpy

from dgverify import general
from dgverify.backend import np

from dgverify.physics.base import base
from dgverify.physics.base.data import Preflux

import dgverify.physics.euler.functions as euler_fcns
from dgverify.physics.euler.functions import FcnType as euler_fcn_type


class Euler(base.PhysicsBase):
    '''
    This class corresponds to the compressible Euler equations for a
    calorically perfect gas with gamma = 7/5. It inherits attributes and
    methods from the PhysicsBase class. See PhysicsBase for detailed
    comments of attributes and methods.

    The state always carries three momentum components, also on 2D
    meshes. The stored momentum includes a background offset equal to the
    auxiliary state; the physical momentum is obtained by subtracting it.
    All derived quantities go through preflux, so flux, wavespeed, and
    jump remove the offset the same way.
    '''
    PHYSICS_TYPE = general.PhysicsType.Euler
    NUM_STATE_VARS = 5
    gamma = 7./5.

    StateVariables = Enum("StateVariables", {
        "Density": "\\rho",
        "XMomentum": "\\rho u",
        "YMomentum": "\\rho v",
        "ZMomentum": "\\rho w",
        "Energy": "\\rho E",
    })
    AuxVariables = ["aU", "aV", "aW"]

    def set_maps(self):
        super().set_maps()

        d = {
            euler_fcn_type.IsentropicVortex : euler_fcns.IsentropicVortex,
        }
        self.IC_fcn_map.update(d)
        self.exact_fcn_map.update(d)

        self.aux_fcn_map.update({
            euler_fcn_type.BackgroundOffset : euler_fcns.BackgroundOffset,
        })

    def get_state_indices(self):
        irho = 0
        srhou = slice(1, 4)
        irhoE = 4

        return irho, srhou, irhoE

    def remove_background(self, Uq, aux):
        '''
        Returns the momentum with the background offset removed.

        Inputs:
        -------
            Uq: state [..., ns]
            aux: auxiliary state [..., 3]

        Outputs:
        --------
            rhou: physical momentum [..., 3]
        '''
        _, srhou, _ = self.get_state_indices()
        return Uq[..., srhou] - aux

    def preflux(self, Uq, aux, t=0.):
        irho, _, irhoE = self.get_state_indices()
        gamma = self.gamma

        rhou = self.remove_background(Uq, aux)
        U, V, W = rhou[..., 0], rhou[..., 1], rhou[..., 2]
        E = Uq[..., irhoE]

        rhoinv = 1./Uq[..., irho]
        P = (gamma - 1.)*(E - rhoinv*(U*U + V*V + W*W)/2.)

        return Preflux(P, rhoinv*U, rhoinv*V, rhoinv*W, rhoinv)

    def get_conv_flux_interior(self, Uq, aux, t=0., preflux=None):
        if preflux is None:
            preflux = self.preflux(Uq, aux, t)
        irho, srhou, irhoE = self.get_state_indices()

        P = preflux.P
        vel = preflux.velocity # [..., 3]
        rhou = self.remove_background(Uq, aux) # [..., 3]

        # Get momentum flux matrix, row j is the flux of the j-th momentum
        momentum_flux = rhou[..., :, None] * vel[..., None, :]
        # Add pressure to the diagonal
        idx_diag = numpy.arange(3)
        momentum_flux[..., idx_diag, idx_diag] += P[..., None]

        # Assemble flux matrix
        F = np.empty(Uq.shape + (3,), dtype=Uq.dtype) # [..., ns, 3]
        F[..., irho, :] = rhou                    # Flux of mass
        F[..., srhou, :] = momentum_flux          # Flux of momentum
        F[..., irhoE, :] = vel*(Uq[..., irhoE] + P)[..., None] # Flux of energy

        return F, preflux

    def get_max_wavespeed(self, normals, Uq, aux, t=0., preflux=None):
        if preflux is None:
            preflux = self.preflux(Uq, aux, t)

        # |u.n| + c
        un = (preflux.u*normals[..., 0] + preflux.v*normals[..., 1]
                + preflux.w*normals[..., 2])
        return np.abs(un) + np.sqrt(preflux.rhoinv*self.gamma*preflux.P)

    def compute_jump(self, UqM, auxM, UqP, auxP):
        _, srhou, _ = self.get_state_indices()

        dUq = UqP - UqM
        dUq[..., srhou] = (self.remove_background(UqP, auxP)
                - self.remove_background(UqM, auxM))

        return dUq
