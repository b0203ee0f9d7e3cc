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
#       File : dgverify/physics/base/base.py
#
#       Contains class definition for the physics base class and the
#       functions it exposes to the solver.
#
# ------------------------------------------------------------------------ #
from abc import ABC, abstractmethod

from dgverify import errors
from dgverify.general import ModeType

import dgverify.physics.base.functions as base_fcns
from dgverify.physics.base.functions import BCType as base_BC_type
from dgverify.physics.base.functions import ConvNumFluxType as \
        base_conv_num_flux_type


def process_map(fcn_type, fcn_map):
    '''
    This function extracts the desired Function class from fcn_map.

    Inputs:
    -------
        fcn_type: Function type (member of corresponding Function enum,
            or its name)
        fcn_map: Function map; dict whose keys are the types of Functions
            and whose values are the corresponding Function classes

    Outputs:
    --------
        fcn_ref: desired Function class (not instantiated)
    '''
    for fcn_key in fcn_map.keys():
        if fcn_key == fcn_type or fcn_key.name == fcn_type:
            return fcn_map[fcn_key]

    raise errors.DoesNotExistError("Function %s not available for this "
            "physics" % (fcn_type,))


class PhysicsBase(ABC):
    '''
    This is a base class for any physics type. Concrete physics classes
    provide the primitive decomposition (preflux), the physical flux, the
    wavespeed, and optionally the state jump. The solver only talks to the
    five contract methods: physical_flux, numerical_flux, boundary_flux,
    auxiliary_state_init, and initial_condition.

    Abstract Constants:
    -------------------
    NUM_STATE_VARS
        number of state variables
    PHYSICS_TYPE
        physics type (general.PhysicsType enum member)
    StateVariables
        enum of the state variable names

    Attributes:
    -----------
    NDIMS: int
        number of spatial dimensions of the mesh
    IC: Function object
        holds information about the initial condition
    exact_soln: Function object
        holds information about the (optional) exact solution
    aux_fcn: Function object
        holds information about the auxiliary state
    conv_flux_fcn: Function object
        holds information about the convective numerical flux
    BCs: dict
        stores BC objects keyed by boundary name
    IC_fcn_map: dict
        maps IC type to Function class
    exact_fcn_map: dict
        maps exact solution type to Function class
    aux_fcn_map: dict
        maps auxiliary state type to Function class
    BC_map: dict
        maps BC type to BC class
    conv_num_flux_map: dict
        maps convective numerical flux type to flux class
    '''
    NUM_AUX_VARS = 3
    AuxVariables = ["a1", "a2", "a3"]

    @property
    @abstractmethod
    def NUM_STATE_VARS(self):
        '''
        Number of state variables
        '''
        pass

    @property
    @abstractmethod
    def PHYSICS_TYPE(self):
        '''
        Physics type (general.PhysicsType enum member)
        '''
        pass

    @property
    @abstractmethod
    def StateVariables(self):
        '''
        Enum of the state variables
        '''
        pass

    def __init__(self, NDIMS):
        self.NDIMS = NDIMS
        self.IC = None
        self.exact_soln = None
        self.aux_fcn = None
        self.conv_flux_fcn = None
        self.BCs = {}

        self.IC_fcn_map = {}
        self.exact_fcn_map = {}
        self.aux_fcn_map = {}
        self.BC_map = {}
        self.conv_num_flux_map = {}

        self.set_maps()

    def __repr__(self):
        return '{self.__class__.__name__}(NDIMS={self.NDIMS})'.format(
                self=self)

    def set_maps(self):
        '''
        This method sets the maps that are shared by all physics types.
        Child classes extend them.
        '''
        self.BC_map.update({
            base_BC_type.ZeroFlux : base_fcns.ZeroFlux,
            base_BC_type.Extrapolate : base_fcns.Extrapolate,
        })

        self.conv_num_flux_map.update({
            base_conv_num_flux_type.Rusanov : base_fcns.Rusanov,
        })

    def _set_fcn(self, fcn_type, fcn_map, mode, rng, **kwargs):
        fcn = process_map(fcn_type, fcn_map)(**kwargs)
        if mode == ModeType.Randomized:
            if rng is None:
                raise errors.IncompatibleError("Randomized mode needs a "
                        "random number generator")
            fcn = base_fcns.Randomized(fcn, rng)

        return fcn

    def set_IC(self, IC_type, mode=ModeType.Deterministic, rng=None,
            **kwargs):
        '''
        This method sets the initial condition.

        Inputs:
        -------
            IC_type: type of initial condition (name or enum member)
            mode: ModeType; Randomized wraps the function in a random
                generator
            rng: numpy random Generator (Randomized mode only)
            kwargs: keyword arguments; depends on specific IC

        Outputs:
        --------
            self.IC: initial condition function object
        '''
        self.IC = self._set_fcn(IC_type, self.IC_fcn_map, mode, rng,
                **kwargs)

    def set_exact(self, exact_type, **kwargs):
        '''
        This method sets the exact solution. Exact solutions are always
        deterministic.

        Inputs:
        -------
            exact_type: type of exact solution (name or enum member)
            kwargs: keyword arguments; depends on specific exact solution

        Outputs:
        --------
            self.exact_soln: exact solution function object
        '''
        self.exact_soln = self._set_fcn(exact_type, self.exact_fcn_map,
                ModeType.Deterministic, None, **kwargs)

    def set_aux(self, aux_type, mode=ModeType.Deterministic, rng=None,
            **kwargs):
        '''
        This method sets the auxiliary state function.

        Inputs:
        -------
            aux_type: type of auxiliary state (name or enum member)
            mode: ModeType
            rng: numpy random Generator (Randomized mode only)
            kwargs: keyword arguments; depends on specific function

        Outputs:
        --------
            self.aux_fcn: auxiliary state function object
        '''
        self.aux_fcn = self._set_fcn(aux_type, self.aux_fcn_map, mode, rng,
                **kwargs)

    def set_BC(self, bname, BC_type, **kwargs):
        '''
        This method sets the boundary condition for a boundary group.

        Inputs:
        -------
            bname: name of boundary group
            BC_type: type of boundary condition (name or enum member)
            kwargs: keyword arguments; depends on specific BC
        '''
        self.BCs[bname] = process_map(BC_type, self.BC_map)(**kwargs)

    def set_conv_num_flux(self, conv_num_flux_type, **kwargs):
        '''
        This method sets the convective numerical flux.

        Inputs:
        -------
            conv_num_flux_type: convective numerical flux type
            kwargs: keyword arguments; depends on specific flux
        '''
        self.conv_flux_fcn = process_map(conv_num_flux_type,
                self.conv_num_flux_map)(**kwargs)

    @abstractmethod
    def preflux(self, Uq, aux, t):
        '''
        This method computes the primitive variables.

        Inputs:
        -------
            Uq: state [..., ns]
            aux: auxiliary state [..., 3]
            t: time

        Outputs:
        --------
            preflux: Preflux named tuple (P, u, v, w, rhoinv), each [...]
        '''
        pass

    @abstractmethod
    def get_conv_flux_interior(self, Uq, aux, t, preflux=None):
        '''
        This method computes the convective analytical flux.

        Inputs:
        -------
            Uq: state [..., ns]
            aux: auxiliary state [..., 3]
            t: time
            preflux: [OPTIONAL] precomputed primitive variables

        Outputs:
        --------
            Fq: flux tensor [..., ns, 3]
            preflux: primitive variables used
        '''
        pass

    @abstractmethod
    def get_max_wavespeed(self, normals, Uq, aux, t, preflux=None):
        '''
        This method computes the maximum signal speed along the normal.

        Inputs:
        -------
            normals: unit normals [..., 3]
            Uq: state [..., ns]
            aux: auxiliary state [..., 3]
            t: time
            preflux: [OPTIONAL] precomputed primitive variables

        Outputs:
        --------
            a: maximum wavespeed [...]
        '''
        pass

    def compute_jump(self, UqM, auxM, UqP, auxP):
        '''
        This method computes the plus-minus jump used by the dissipation
        term of the numerical flux.

        Outputs:
        --------
            dUq: jump [..., ns]
        '''
        return UqP - UqM

    def physical_flux(self, Uq, aux, t=0.):
        Fq, _ = self.get_conv_flux_interior(Uq, aux, t)
        return Fq

    def numerical_flux(self, normals, UqM, auxM, UqP, auxP, t=0.):
        return self.conv_flux_fcn.compute_flux(self, UqM, auxM, UqP, auxP,
                normals, t)

    def boundary_flux(self, bname, normals, Uq, aux, t=0.):
        try:
            BC = self.BCs[bname]
        except KeyError:
            raise errors.DoesNotExistError("No boundary condition set for "
                    "boundary %s" % bname)
        return BC.get_boundary_flux(self, Uq, aux, normals, t)

    def auxiliary_state_init(self, x):
        return self.aux_fcn.get_state(self, x, 0.)

    def initial_condition(self, x, t=0.):
        return self.IC.get_state(self, x, t)

    def exact_solution(self, x, t):
        if self.exact_soln is None:
            raise errors.DoesNotExistError("No exact solution set")
        return self.exact_soln.get_state(self, x, t)
