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
#       File : dgverify/physics/scalar/scalar.py
#
#       Contains class definition for scalar advection by a velocity field
#       prescribed in the auxiliary state.
#
# ------------------------------------------------------------------------ #
from enum import Enum
import numpy

from dgverify import general
from dgverify.backend import np

from dgverify.physics.base import base
from dgverify.physics.base.data import Preflux

import dgverify.physics.scalar.functions as scalar_fcns
from dgverify.physics.scalar.functions import FcnType as scalar_fcn_type


class AdvectionScalar(base.PhysicsBase):
    '''
    This class corresponds to the advection of a scalar quantity by a
    spatially varying velocity field stored in the auxiliary state. It
    inherits attributes and methods from the PhysicsBase class. See
    PhysicsBase for detailed comments of attributes and methods.

    The pressure returned by preflux is an inert zero so that the shared
    flux/wavespeed interface is the same as for the Euler equations.
    '''
    PHYSICS_TYPE = general.PhysicsType.AdvectionScalar
    NUM_STATE_VARS = 1

    StateVariables = Enum("StateVariables", {
        "Scalar": "\\rho",
    })
    AuxVariables = ["u", "v", "w"]

    def set_maps(self):
        super().set_maps()

        d = {
            scalar_fcn_type.GaussianBump : scalar_fcns.GaussianBump,
        }
        self.IC_fcn_map.update(d)
        self.exact_fcn_map.update(d)

        self.aux_fcn_map.update({
            scalar_fcn_type.SolidBodyRotation :
                    scalar_fcns.SolidBodyRotation,
        })

    def preflux(self, Uq, aux, t=0.):
        # The advected scalar decays to zero away from its support, and
        # rhoinv is not used by the advection flux or wavespeed
        with numpy.errstate(divide="ignore", over="ignore"):
            rhoinv = 1./Uq[..., 0]
        P = np.zeros_like(rhoinv)

        return Preflux(P, aux[..., 0], aux[..., 1], aux[..., 2], rhoinv)

    def get_conv_flux_interior(self, Uq, aux, t=0., preflux=None):
        if preflux is None:
            preflux = self.preflux(Uq, aux, t)

        F = preflux.velocity[..., None, :] * Uq[..., :, None]

        return F, preflux # [..., ns, 3]

    def get_max_wavespeed(self, normals, Uq, aux, t=0., preflux=None):
        if preflux is None:
            preflux = self.preflux(Uq, aux, t)

        return np.abs(preflux.u*normals[..., 0] + preflux.v*normals[..., 1]
                + preflux.w*normals[..., 2])
