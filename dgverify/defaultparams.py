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
#       File : dgverify/defaultparams.py
#
#       Contains default input parameters. Input decks override these.
#
# ------------------------------------------------------------------------ #


TimeStepping = {
    "InitialTime" : 0.,
    "FinalTime" : 1.,
    "NumTimeSteps" : None,
        # the following option supersedes NumTimeSteps
    "TimeStepSize" : None,
    "TimeStepper" : "LSRK4",
}

Numerics = {
    "SolutionOrder" : 4,
    "Backend" : "numpy",
    "Precisions" : ["float64"],
}

Mesh = {
    "Topology" : "Brick",
    "Dims" : [2],
        # Brick
    "NumElems" : [5, 5, 1],
    "xmin" : -5.,
    "xmax" : 5.,
    "Periodic" : True,
        # StackedCubedSphere
    "NumElemsHorizontal" : 2,
    "NumElemsVertical" : 2,
    "InnerRadius" : 1.,
    "OuterRadius" : 2.,
}

Physics = {
    "Type" : "Euler",
    "ConvFluxNumerical" : "Rusanov",
}

InitialCondition = {
    "Function" : None,
}

ExactSolution = {}

AuxiliaryState = {
    "Function" : None,
}

BoundaryConditions = {}

Output = {
    "Prefix" : "Data",
    "Progress" : False,
    "InfoWallTimeInterval" : 60.,
    "MassStepInterval" : 1000,
    "WriteVTK" : False,
    "VTKDirectory" : "vtk",
    "VTKStepInterval" : 100,
    "WriteFinalSolution" : False,
}

Verification = {
    "NumLevels" : 3,
        # the time step is divided by the number of elements in the
        # first direction (horizontal elements on the sphere)
    "ScaleTimeStep" : True,
        # PerLevel or Cumulative (see TimeStepRefinementType)
    "TimeStepRefinement" : "PerLevel",
    "ErrorNorm" : "Absolute",
    "TrackMass" : False,
    "MassTolerance" : 1e-12,
    "ExpectedErrors" : {},
    "ReferenceRtol" : 1e-2,
        # minimum observed order between the two finest levels
    "MinRate" : None,
    "NormRatioTolerance" : 1e-3,
    "Seed" : 0,
}

Randomized = {}
