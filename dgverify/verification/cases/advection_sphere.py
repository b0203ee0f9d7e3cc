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
#       File : dgverify/verification/cases/advection_sphere.py
#
#       Input deck for scalar advection of a Gaussian bump by solid body
#       rotation on a stacked cubed-sphere shell.
#
# ------------------------------------------------------------------------ #
TimeStepping = {
    "FinalTime" : 1.,
        # divided by the number of horizontal elements at each level
    "TimeStepSize" : 0.05,
    "TimeStepper" : "SSP34",
}

Numerics = {
    "SolutionOrder" : 4,
    "Precisions" : ["float64"],
}

Mesh = {
    "Topology" : "StackedCubedSphere",
    "Dims" : [3],
    "NumElemsHorizontal" : 2,
    "NumElemsVertical" : 2,
    "InnerRadius" : 1.,
    "OuterRadius" : 2.,
}

Physics = {
    "Type" : "AdvectionScalar",
    "ConvFluxNumerical" : "Rusanov",
}

InitialCondition = {
    "Function" : "GaussianBump",
}

AuxiliaryState = {
    "Function" : "SolidBodyRotation",
}

# The rotation is tangent to both shells, so the flux through them is
# taken to be zero
BoundaryConditions = {
    "inner" : {
        "BCType" : "ZeroFlux",
    },
    "outer" : {
        "BCType" : "ZeroFlux",
    },
}

Output = {
    "Prefix" : "advection_sphere",
    "InfoWallTimeInterval" : 10.,
    "MassStepInterval" : 1000,
    "VTKDirectory" : "vtk",
    "VTKStepInterval" : 1000,
}

Verification = {
    "NumLevels" : 3,
        # each level divides the previous level's time step by Nh
    "TimeStepRefinement" : "Cumulative",
    "ErrorNorm" : "Relative",
    "TrackMass" : True,
    "MassTolerance" : 1e-13,
    "ExpectedErrors" : {
        "float64" : {
            3 : [2.1747884619563834e-01, 1.2161683394578116e-02,
                    2.2529850289795472e-04],
        },
    },
    "MinRate" : 4.,
}

Randomized = {
    "TimeStepping" : {
        "FinalTime" : 2e-3,
        "TimeStepSize" : 1e-3,
    },
    "Verification" : {
        "NumLevels" : 1,
        "ScaleTimeStep" : False,
        "NormRatioTolerance" : None,
    },
}
