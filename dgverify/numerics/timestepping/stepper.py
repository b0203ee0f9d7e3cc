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
#       File : dgverify/numerics/timestepping/stepper.py
#
#       Contains class definitions for timestepping methods.
#
# ------------------------------------------------------------------------ #
from abc import ABC, abstractmethod
import numpy as np

from dgverify.general import StepperType

import dgverify.solver.tools as solver_tools


class StepperBase(ABC):
    '''
    This is an abstract base class used to represent time stepping schemes.
    The current build supports the following explicit time schemes:

        - Low storage 4th-order Runge Kutta (LSRK4, alias LSRK)
        - 3-stage strong-stability preserving 3rd-order Runge Kutta
          (SSPRK3, alias SSP33)
        - 4-stage strong-stability preserving 3rd-order Runge Kutta
          (SSPRK3_4S, alias SSP34)

    Abstract Constants
    ------------------
    STEPPER_TYPE
        Defines an enum from StepperType to identify the time scheme.

    Attributes:
    -----------
    res: ndarray
        Residual array of shape ``(num_elems, nb, ns)``.
    dt: float
        Time-step for the solution.
    num_time_steps: int
        Number of time steps for the given solution's FinalTime.
    get_time_step: method
        Method to obtain dt given input decks logic.

    Abstract Methods
    ----------------
    take_time_step
        Method that takes a given time step for the solver depending on the
        selected time-stepping scheme.
    '''
    @property
    @abstractmethod
    def STEPPER_TYPE(self):
        '''
        Stores the StepperType enum to define the element's timestepping
        scheme.
        '''
        pass

    def __init__(self, U):
        self.res = np.zeros_like(U)
        self.dt = 0.
        self.num_time_steps = 0
        self.get_time_step = None

    def __repr__(self):
        return '{self.__class__.__name__}(TimeStep={self.dt})'.format( \
            self=self)

    def __eq__(self, other):
        if not isinstance(other, StepperBase):
            # don't attempt to compare against unrelated types
            return NotImplemented
        return self.STEPPER_TYPE == other.STEPPER_TYPE

    @abstractmethod
    def take_time_step(self, solver):
        '''
        Takes a time step using the specified time-stepping scheme for the
        solution.

        Parameters
        ----------
        solver: DG
            Solver object.

        Returns
        -------
        res: ndarray
            Updated residual vector of shape ``(num_elems, nb, ns)``.
        '''
        pass


class RungeKuttaBase(StepperBase):
    '''
    Base class for explicit Runge-Kutta schemes written in Shu-Osher form.
    '''
    def __init__(self, U):
        super().__init__(U)
        '''
        Additional Attributes
        ---------------------
        nstages: int
            Number of stages in scheme.
        rkcoeff: ndarray
            Coefficients for each Runge-Kutta stage, with shape
            ``(nstages, 4)``.
        '''
        # Runge-Kutta coefficients on U0, U, dU, and dt:
        self.rkcoeff = None
        self.nstages = 0

    def take_time_step(self, solver):
        mesh = solver.mesh
        U = solver.state_coeffs
        U0 = U.copy()

        res = self.res

        Time = solver.time + 0.0
        for istage in range(self.nstages):
            a, b, c, d = self.rkcoeff[istage]
            dt = self.dt

            res = solver.get_residual(U, res)
            dU = solver_tools.mult_inv_mass_matrix(mesh, solver, dt, res)
            solver.time = Time + d*dt

            # In-place update: U = a*U0 + b*U + c*dU
            U *= b
            U += a*U0 + c*dU

        return res # [num_elems, nb, ns]


class SSPRK3(RungeKuttaBase):
    '''
    3rd-order strong stability preserving Runge Kutta (SSPRK3). This scheme is
    stable for CFL <= 1.

    References
    ----------
    Dale E. Durran, “Numerical Methods for Fluid Dynamics”, Springer.
    Second Edition.
    '''
    STEPPER_TYPE = StepperType.SSPRK3

    def __init__(self, U):
        super().__init__(U)
        # Runge-Kutta coefficients on U0, U, dU, and dt:
        self.rkcoeff = np.array([[0.0, 1.0, 1.0, 1.0],
                                 [0.75, 0.25, 0.25, 0.5],
                                 [1.0/3.0, 2.0/3.0, 2.0/3.0, 1.0]])
        self.nstages = 3


class SSPRK3_4S(RungeKuttaBase):
    '''
    Four-stage 3rd-order strong stability preserving Runge Kutta (4s-SSP-RK3).
    This scheme is stable for CFL <= 2.

    References
    ----------
    Dale E. Durran, “Numerical Methods for Fluid Dynamics”, Springer.
    Second Edition.
    '''
    STEPPER_TYPE = StepperType.SSPRK3_4S

    def __init__(self, U):
        super().__init__(U)
        # Runge-Kutta coefficients on U0, U, dU, and dt:
        self.rkcoeff = np.array([[0.5, 0.5, 0.5, 0.5],
                                 [0.0, 1.0, 0.5, 1.0],
                                 [2.0/3.0, 1.0/3.0, 1.0/6.0, 0.5],
                                 [0.0, 1.0, 0.5, 1.0]])
        self.nstages = 4


class LSRK4(StepperBase):
    '''
    Low storage 4th-order Runge Kutta (RK4) method inherits attributes from
    StepperBase. See StepperBase for detailed comments of methods and
    attributes.

    References
    ----------
    M. H. Carpenter, C. Kennedy, "Fourth-order 2N-storage Runge-Kutta
    schemes," NASA Report TM 109112, NASA Langley Research Center, 1994.
    '''
    STEPPER_TYPE = StepperType.LSRK4

    def __init__(self, U):
        super().__init__(U)
        '''
        Additional Attributes
        ---------------------
        rk4a: ndarray
            Coefficients for LSRK4 scheme.
        rk4b: ndarray
            Coefficients for LSRK4 scheme.
        rk4c: ndarray
            Coefficients for LSRK4 scheme.
        nstages: int
            Number of stages in scheme.
        dU: ndarray
            Change in solution array in each stage, with shape
            ``(num_elems, nb, ns)``.
        '''
        self.rk4a = np.array([0.0, -567301805773.0/1357537059087.0,
            -2404267990393.0/2016746695238.0,
            -3550918686646.0/2091501179385.0,
            -1275806237668.0/842570457699.0])
        self.rk4b = np.array([1432997174477.0/9575080441755.0,
            5161836677717.0/13612068292357.0,
            1720146321549.0/2090206949498.0,
            3134564353537.0/4481467310338.0,
            2277821191437.0/14882151754819.0])
        self.rk4c = np.array([0.0, 1432997174477.0/9575080441755.0,
            2526269341429.0/6820363962896.0,
            2006345519317.0/3224310063776.0,
            2802321613138.0/2924317926251.0])
        self.nstages = 5
        self.dU = np.zeros_like(U)

    def take_time_step(self, solver):
        mesh = solver.mesh
        U = solver.state_coeffs

        res = self.res
        dU = self.dU

        Time = solver.time
        for istage in range(self.nstages):
            dt = self.dt
            solver.time = Time + self.rk4c[istage]*dt

            res = solver.get_residual(U, res)
            dUtemp = solver_tools.mult_inv_mass_matrix(mesh, solver, dt, res)

            dU *= self.rk4a[istage]
            dU += dUtemp

            U += self.rk4b[istage]*dU

        solver.time = Time + self.dt

        return res # [num_elems, nb, ns]
