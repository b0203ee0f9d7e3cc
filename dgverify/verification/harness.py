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
#       File : dgverify/verification/harness.py
#
#       Contains the convergence study that sweeps precisions, dimensions,
#       and refinement levels, and checks the observed errors.
#
# ------------------------------------------------------------------------ #
from dataclasses import dataclass
import logging
import math
import numpy as np

from dgverify import backend, driver, errors
from dgverify.general import ErrorNormType, ModeType, PrecisionType, \
		TimeStepRefinementType, TopologyType

import dgverify.processing.post as post
import dgverify.processing.readwritedatafiles as readwritedatafiles
import dgverify.solver.DG as DG

logger = logging.getLogger(__name__)


@dataclass
class LevelResult:
	'''
	Outcome of one run of a convergence study.
	'''
	level: int
	num_elems: tuple
	dt: float
	num_time_steps: int
	error: float
	mass_delta: float = None
	norm_ratio: float = None


def compute_rates(errs):
	'''
	Computes the observed orders of accuracy between successive levels,
	log2(e[l]) - log2(e[l+1]).

	Inputs:
	-------
		errs: errors ordered from coarsest to finest level

	Outputs:
	--------
		rates: list of length len(errs) - 1
	'''
	return [math.log2(errs[l]) - math.log2(errs[l+1])
			for l in range(len(errs) - 1)]


def get_num_elems(params, ndims, level):
	'''
	Computes the mesh size of a refinement level. Each level doubles the
	element count in every direction.

	Inputs:
	-------
		params: input parameters
		ndims: number of spatial dimensions
		level: refinement level (0 is the coarsest)

	Outputs:
	--------
		num_elems: list of element counts (per direction for the brick,
			horizontal and vertical for the sphere)
	'''
	mesh_params = params["Mesh"]
	factor = 2**level

	topology = TopologyType[mesh_params["Topology"]]
	if topology == TopologyType.Brick:
		base = mesh_params["NumElems"]
		if len(base) < ndims:
			raise errors.IncompatibleError("NumElems needs %d entries" %
					ndims)
		return [factor*n for n in base[:ndims]]
	else:
		return [factor*mesh_params["NumElemsHorizontal"],
				factor*mesh_params["NumElemsVertical"]]


def get_level_config(params, ndims, level):
	'''
	Computes the mesh size and time step of a refinement level. When
	ScaleTimeStep is set, a time step is divided by the element count in
	the first direction: the base time step for PerLevel refinement, or
	the previous level's time step for Cumulative refinement. The time
	step is then shrunk so that an integer number of steps reaches
	FinalTime.

	Inputs:
	-------
		params: input parameters
		ndims: number of spatial dimensions
		level: refinement level (0 is the coarsest)

	Outputs:
	--------
		level_config: dict with NumElems, TimeStepSize, NumTimeSteps
	'''
	verification = params["Verification"]
	time_params = params["TimeStepping"]
	num_elems = get_num_elems(params, ndims, level)
	tfinal = time_params["FinalTime"] - time_params["InitialTime"]

	dt = time_params["TimeStepSize"]
	if dt is None:
		num_time_steps = time_params["NumTimeSteps"]
		if num_time_steps is None:
			raise errors.IncompatibleError("Need TimeStepSize or "
					"NumTimeSteps")
	elif not verification["ScaleTimeStep"]:
		num_time_steps = int(math.ceil(tfinal/dt))
	else:
		refinement = TimeStepRefinementType[
				verification["TimeStepRefinement"]]
		if refinement == TimeStepRefinementType.Cumulative:
			levels = range(level + 1)
		else:
			levels = [level]
		for l in levels:
			dt = dt/get_num_elems(params, ndims, l)[0]
			num_time_steps = int(math.ceil(tfinal/dt))
			dt = tfinal/num_time_steps
	dt = tfinal/num_time_steps

	return {"NumElems": tuple(num_elems), "TimeStepSize": dt,
			"NumTimeSteps": num_time_steps}


def run_level(params, ndims, level_config, dtype,
		mode=ModeType.Deterministic):
	'''
	Runs one simulation and measures it against the reference state. The
	reference is the exact solution at the final time in Deterministic
	mode and the initial state in Randomized mode.

	Inputs:
	-------
		params: input parameters
		ndims: number of spatial dimensions
		level_config: output of get_level_config
		dtype: numpy floating point type
		mode: ModeType of the state generators

	Outputs:
	--------
		result: LevelResult (level is filled in by the caller)
	'''
	verification = params["Verification"]
	rng = None
	if mode == ModeType.Randomized:
		rng = np.random.default_rng(verification["Seed"])

	mesh = driver.create_mesh(params, ndims, level_config["NumElems"])
	physics = driver.set_physics(params, ndims, mode, rng)
	solver = DG.DG(driver.get_solver_params(params, level_config), physics,
			mesh, dtype)

	U0 = solver.state_coeffs.copy()
	norm0 = post.get_norm(solver, U0)
	logger.info("Starting\n  norm(U0) = %.16e", norm0)

	track_mass = verification["TrackMass"]
	callback_list = driver.set_callbacks(solver, params, U0, track_mass)
	solver.solve(callback_list)

	U = solver.state_coeffs
	if mode == ModeType.Deterministic:
		Uref = solver.get_exact_state(solver.time)
	else:
		Uref = U0

	error = float(post.euclidean_distance(solver, U, Uref))
	if ErrorNormType[verification["ErrorNorm"]] == ErrorNormType.Relative:
		error /= float(post.get_norm(solver, Uref))
	norm_ratio = float(post.get_norm(solver, U)/norm0)
	mass_delta = None
	if track_mass:
		mass_delta = float(post.get_mass_delta(solver, U, U0))

	logger.info("Finished\n  norm(U)            = %.16e\n"
			"  norm(U) / norm(U0) = %.16e\n  error              = %.16e",
			post.get_norm(solver, U), norm_ratio, error)

	output = params["Output"]
	if output["WriteFinalSolution"]:
		readwritedatafiles.write_data_file(solver, "%s_%dD_level%s" %
				(output["Prefix"], ndims, "x".join(str(n) for n in
				level_config["NumElems"])))

	return LevelResult(level=None, num_elems=level_config["NumElems"],
			dt=level_config["TimeStepSize"],
			num_time_steps=level_config["NumTimeSteps"], error=error,
			mass_delta=mass_delta, norm_ratio=norm_ratio)


class ConvergenceStudy():
	'''
	Sweeps precision x dimension x refinement level for one input deck.

	Attributes:
	-----------
	params: dict
		complete input parameters (Randomized overrides applied)
	mode: ModeType
		state generator mode
	runner: callable
		runner(params, ndims, level_config, dtype, mode) -> LevelResult
	results: dict
		lists of LevelResult keyed by (precision name, ndims)
	'''
	def __init__(self, deck, mode=ModeType.Deterministic, runner=None):
		params = driver.overwrite_params(deck)
		if mode == ModeType.Randomized:
			params = driver.apply_randomized(params)
		self.params = params
		self.mode = mode
		self.runner = run_level if runner is None else runner
		self.results = {}

	def run(self):
		'''
		Runs every level of every configuration, then checks the results.

		Outputs:
		--------
			self.results: filled in

		Raises:
		-------
			VerificationError if any check fails
		'''
		params = self.params
		backend.set_backend(params["Numerics"]["Backend"])

		for precision in params["Numerics"]["Precisions"]:
			try:
				dtype = PrecisionType[precision].value
			except KeyError:
				raise errors.IncompatibleError("Precision %s not supported"
						% precision)
			for ndims in params["Mesh"]["Dims"]:
				results = []
				for level in range(params["Verification"]["NumLevels"]):
					level_config = get_level_config(params, ndims, level)
					logger.info("Run configuration\n  precision = %s\n"
							"  dim = %d\n  level = %d\n  Ne = %s\n  dt = %.6e"
							"\n  mode = %s", precision, ndims, level,
							level_config["NumElems"],
							level_config["TimeStepSize"], self.mode.name)
					result = self.runner(params, ndims, level_config, dtype,
							self.mode)
					result.level = level
					results.append(result)

				self.results[(precision, ndims)] = results
				self.log_summary(precision, ndims, results)

		self.verify()

		return self.results

	def log_summary(self, precision, ndims, results):
		errs = [r.error for r in results]
		lines = ["Convergence summary (%s, %dD)" % (precision, ndims)]
		for r in results:
			lines.append("  level %d  Ne = %s  error = %.16e" % (r.level,
					r.num_elems, r.error))
		if self.mode == ModeType.Deterministic and all(e > 0. for e in errs):
			lines.append("  rates = %s" % ", ".join("%.2f" % rate
					for rate in compute_rates(errs)))
		logger.info("\n".join(lines))

	def verify(self):
		'''
		Checks every stored configuration.

		Raises:
		-------
			VerificationError listing every failed check
		'''
		failures = []
		for (precision, ndims), results in self.results.items():
			failures.extend(self.check_results(precision, ndims, results))

		if failures:
			raise errors.VerificationError("\n".join(failures))

	def check_results(self, precision, ndims, results):
		'''
		Checks one configuration's results.

		Inputs:
		-------
			precision: precision name
			ndims: number of spatial dimensions
			results: list of LevelResult, coarsest first

		Outputs:
		--------
			failures: list of failure messages (empty if all checks pass)
		'''
		verification = self.params["Verification"]
		label = "%s %dD" % (precision, ndims)
		errs = [r.error for r in results]
		failures = []

		if not all(np.isfinite(errs)):
			return ["%s: non-finite error in %s" % (label, errs)]

		if verification["TrackMass"]:
			for r in results:
				if not r.mass_delta <= verification["MassTolerance"]:
					failures.append("%s: mass delta %.3e at level %d exceeds "
							"%.1e" % (label, r.mass_delta, r.level,
							verification["MassTolerance"]))

		if self.mode == ModeType.Randomized:
			tol = verification["NormRatioTolerance"]
			for r in results:
				if tol is not None and not abs(r.norm_ratio - 1.) < tol:
					failures.append("%s: norm ratio %.16e at level %d is "
							"not within %.1e of 1" % (label, r.norm_ratio,
							r.level, tol))
			return failures

		for l in range(len(errs) - 1):
			if not errs[l+1] < errs[l]:
				failures.append("%s: errors do not decrease with "
						"refinement: %s" % (label, errs))
				break

		expected = verification["ExpectedErrors"].get(precision, {}).get(
				ndims, [])
		rtol = verification["ReferenceRtol"]
		for r, e in zip(results, expected):
			if not math.isclose(r.error, e, rel_tol=rtol):
				failures.append("%s: error %.16e at level %d does not match "
						"reference %.16e (rtol %.1e)" % (label, r.error,
						r.level, e, rtol))

		min_rate = verification["MinRate"]
		if min_rate is not None and len(errs) >= 3 and all(e > 0.
				for e in errs):
			rate = compute_rates(errs)[-1]
			if rate < min_rate:
				failures.append("%s: observed rate %.2f between the two "
						"finest levels is below %.2f" % (label, rate,
						min_rate))

		return failures
