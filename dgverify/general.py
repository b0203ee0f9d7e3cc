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
#       File : dgverify/general.py
#
#       Contains global constants and enums used throughout the code.
#
# ------------------------------------------------------------------------ #
from enum import Enum, auto
import numpy as np

pi = np.pi


class StepperType(Enum):
    '''
    Enum class that stores the types of explicit time steppers. Alternate
    names used by other DG codes are registered as aliases.
    '''
    LSRK4 = 1
    SSPRK3 = 2
    SSPRK3_4S = 3

    LSRK = 1
    SSP33 = 2
    SSP34 = 3


class PhysicsType(Enum):
    '''
    Enum class that stores the types of physics.
    '''
    Euler = auto()
    AdvectionScalar = auto()


class TopologyType(Enum):
    '''
    Enum class that stores the types of mesh topologies.
    '''
    Brick = auto()
    StackedCubedSphere = auto()


class ModeType(Enum):
    '''
    Enum class that stores the run-wide modes for the state generators.
    Deterministic uses the closed-form solutions; Randomized fills the
    state with random values to exercise the plumbing only.
    '''
    Deterministic = auto()
    Randomized = auto()


class ErrorNormType(Enum):
    '''
    Enum class that stores the error measures used by the convergence
    harness.
    '''
    Absolute = auto()
    Relative = auto()


class PrecisionType(Enum):
    '''
    Enum class that maps precision names to numpy floating point types.
    '''
    float64 = np.float64
    float32 = np.float32


class TimeStepRefinementType(Enum):
    '''
    Enum class that stores how the time step follows mesh refinement when
    ScaleTimeStep is set. PerLevel divides the base time step by the
    element count of each level. Cumulative divides the previous level's
    time step by the element count of the new level.
    '''
    PerLevel = auto()
    Cumulative = auto()
