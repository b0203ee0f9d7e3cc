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
#       File : dgverify/verification/cases/isentropic_vortex.py
#
#       Input deck for the isentropic vortex convergence study on periodic
#       bricks with a background momentum offset.
#
# ------------------------------------------------------------------------ #
TimeStepping = {
    "FinalTime" : 1.,
        # divided by the number of elements in x at each level
    "TimeStepSize" : 1e-2,
    "TimeStepper" : "LSRK",
}

Numerics = {
    "SolutionOrder" : 4,
    "Precisions" : ["float64"],
}

Mesh = {
    "Topology" : "Brick",
    "Dims" : [2, 3],
    "NumElems" : [5, 5, 1],
    "xmin" : -5.,
    "xmax" : 5.,
    "Periodic" : True,
}

Physics = {
    "Type" : "Euler",
    "ConvFluxNumerical" : "Rusanov",
}

InitialCondition = {
    "Function" : "IsentropicVortex",
    "uinf" : 2.,
    "vinf" : 1.,
    "Tinf" : 1.,
    "vs" : 5.,
    "halfperiod" : 5.,
}

AuxiliaryState = {
    "Function" : "BackgroundOffset",
}

Output = {
    "Prefix" : "isentropicvortex",
    "InfoWallTimeInterval" : 60.,
    "VTKDirectory" : "vtk",
    "VTKStepInterval" : 100,
}

Verification = {
    "NumLevels" : 3,
    "ErrorNorm" : "Absolute",
    "ExpectedErrors" : {
        "float64" : {
            2 : [5.7115689019456284e-01, 6.9418982796501105e-02,
                    3.2927550219120443e-03],
            3 : [1.8061566743070017e+00, 2.1952209848914694e-01,
                    1.0412605646170595e-02],
        },
    },
    "MinRate" : 4.,
}

# Randomized runs only exercise the plumbing: two short steps from random
# states, checked against the initial norm
Randomized = {
    "TimeStepping" : {
        "FinalTime" : 2e-3,
        "TimeStepSize" : 1e-3,
    },
    "Mesh" : {
        "NumElems" : [3, 4, 5],
    },
    "Verification" : {
        "NumLevels" : 1,
        "ScaleTimeStep" : False,
    },
}
