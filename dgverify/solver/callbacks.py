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
#       File : dgverify/solver/callbacks.py
#
#       Contains callbacks invoked by the solver after each time step,
#       scheduled by wall-clock interval or by step count.
#
# ------------------------------------------------------------------------ #
import time


class CallbackBase():
	'''
	Wraps a function fcn(solver) that is called on a schedule. Callbacks
	are side channels only; they must not modify the solution.

	Attributes:
	-----------
	fcn: callable
		function called with the solver object
	'''
	def __init__(self, fcn):
		self.fcn = fcn

	def initialize(self, solver):
		pass

	def __call__(self, solver):
		if self.is_due(solver):
			self.fcn(solver)

	def is_due(self, solver):
		return True


class EveryXWallTimeSeconds(CallbackBase):
	'''
	Calls the function when at least `interval` seconds of wall-clock
	time have passed since the previous call.
	'''
	def __init__(self, interval, fcn):
		super().__init__(fcn)
		self.interval = interval
		self.last_time = time.perf_counter()

	def initialize(self, solver):
		self.last_time = time.perf_counter()

	def is_due(self, solver):
		now = time.perf_counter()
		if now - self.last_time >= self.interval:
			self.last_time = now
			return True
		return False


class EveryXSimulationSteps(CallbackBase):
	'''
	Calls the function every `interval` time steps.
	'''
	def __init__(self, interval, fcn):
		super().__init__(fcn)
		self.interval = interval

	def is_due(self, solver):
		return solver.itime % self.interval == 0
