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
#       File : dgverify/numerics/timestepping/tools.py
#
#       Contains helper functions for the stepper class.
#
# ------------------------------------------------------------------------ #
import math

from dgverify.general import StepperType
import dgverify.numerics.timestepping.stepper as stepper_defs


def set_stepper(params, U):
	'''
	Given the TimeStepper parameter, set the stepper object

	Inputs:
	-------
		params: list of parameters for solver
		U: solution vector for instantiaing stepper class [num_elems, nb, ns]

	Outputs:
	--------
	    stepper: instantiated stepper object
	'''
	time_stepper = params["TimeStepper"]

	try:
		stepper_type = StepperType[time_stepper]
	except KeyError:
		raise NotImplementedError("Time scheme not supported: %s" %
				time_stepper)

	if stepper_type == StepperType.LSRK4:
		stepper = stepper_defs.LSRK4(U)
	elif stepper_type == StepperType.SSPRK3:
		stepper = stepper_defs.SSPRK3(U)
	elif stepper_type == StepperType.SSPRK3_4S:
		stepper = stepper_defs.SSPRK3_4S(U)
	else:
		raise NotImplementedError("Time scheme not supported")
	return stepper


def set_time_stepping_approach(stepper, params):
	'''
	Sets stepper.get_time_step method given input parameters. The run
	always lands exactly on FinalTime: with a time step size, the number
	of steps is ceil(FinalTime/TimeStepSize) and dt is then recomputed
	from it.

	Inputs:
	-------
		stepper: stepper object (e.g., LSRK4, SSPRK3, etc...)
		params: list of parameters for solver

	Outputs:
	--------
		get_time_step: method selected to calculate dt
		num_time_steps: number of time steps for the solution
	'''
	dt = params["TimeStepSize"]
	num_time_steps = params["NumTimeSteps"]
	tfinal = params["FinalTime"]

	if tfinal is None:
		raise ValueError("FinalTime must be set")
	if num_time_steps is None:
		if dt is None:
			raise ValueError("Either TimeStepSize or NumTimeSteps must be set")
		num_time_steps = math.ceil(tfinal/dt)

	stepper.get_time_step = get_dt_from_num_time_steps
	stepper.num_time_steps = num_time_steps


def get_dt_from_num_time_steps(stepper, solver):
	'''
	Calculates dt from the specified number of time steps

	Inputs:
	-------
		stepper: stepper object (e.g., LSRK4, SSPRK3, etc...)
		solver: solver object

	Outputs:
	--------
		dt: time step for the solver
	'''
	num_time_steps = stepper.num_time_steps
	tfinal = solver.params["FinalTime"]

	# only needs to be set once per simulation
	if stepper.dt == 0.0 and num_time_steps != 0:
		return (tfinal - solver.time) / num_time_steps
	elif num_time_steps == 0:
		return 0.0
	else:
		return stepper.dt
