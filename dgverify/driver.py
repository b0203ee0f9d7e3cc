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
#       File : dgverify/driver.py
#
#       Reads input decks and assembles the mesh, physics, solver, and
#       callbacks for a single run.
#
# ------------------------------------------------------------------------ #
import copy
import importlib
import importlib.util
import logging
import os
import time
import numpy as np

from dgverify import defaultparams, errors
from dgverify.general import ModeType, PhysicsType, TopologyType

import dgverify.meshing.common as mesh_common
import dgverify.physics.euler.euler as euler
import dgverify.physics.scalar.scalar as scalar
import dgverify.processing.export as export
import dgverify.processing.post as post
import dgverify.solver.callbacks as callbacks

logger = logging.getLogger(__name__)

SECTIONS = ["TimeStepping", "Numerics", "Mesh", "Physics",
		"InitialCondition", "ExactSolution", "AuxiliaryState",
		"BoundaryConditions", "Output", "Verification", "Randomized"]

# Sections whose keys are passed through as function arguments
FREEFORM_SECTIONS = ["InitialCondition", "ExactSolution", "AuxiliaryState",
		"BoundaryConditions", "Randomized"]

CASES_PACKAGE = "dgverify.verification.cases"


def import_deck(deck_name):
	'''
	Imports an input deck, given either as the path of a Python file or as
	the name of a bundled case.

	Inputs:
	-------
		deck_name: path to a deck file or bundled case name

	Outputs:
	--------
		deck: dict of input sections
	'''
	if os.path.isfile(deck_name):
		module_name = os.path.splitext(os.path.basename(deck_name))[0]
		spec = importlib.util.spec_from_file_location(module_name, deck_name)
		module = importlib.util.module_from_spec(spec)
		spec.loader.exec_module(module)
	else:
		try:
			module = importlib.import_module("%s.%s" % (CASES_PACKAGE,
					deck_name))
		except ModuleNotFoundError:
			raise errors.DoesNotExistError("Input deck %s not found" %
					deck_name)

	return {sec: copy.deepcopy(getattr(module, sec)) for sec in SECTIONS
			if hasattr(module, sec)}


def overwrite_params(deck):
	'''
	Merges the input deck over the default parameters.

	Inputs:
	-------
		deck: dict of input sections

	Outputs:
	--------
		params: dict of complete input sections
	'''
	for sec in deck:
		if sec not in SECTIONS:
			raise KeyError("Input section %s not valid" % sec)

	params = {}
	for sec in SECTIONS:
		sec_params = copy.deepcopy(getattr(defaultparams, sec))
		user_params = deck.get(sec, {})
		if sec not in FREEFORM_SECTIONS:
			for key in user_params:
				if key not in sec_params:
					raise KeyError("Input parameter %s not valid for "
							"section %s" % (key, sec))
		sec_params.update(copy.deepcopy(user_params))
		params[sec] = sec_params

	if not params["ExactSolution"]:
		params["ExactSolution"] = copy.deepcopy(params["InitialCondition"])

	return params


def apply_randomized(params):
	'''
	Returns a copy of the parameters with the Randomized section's
	per-section overrides applied.
	'''
	params = copy.deepcopy(params)
	for sec, overrides in params["Randomized"].items():
		if sec not in params or sec in FREEFORM_SECTIONS:
			raise KeyError("Randomized overrides not valid for section %s"
					% sec)
		for key in overrides:
			if key not in params[sec]:
				raise KeyError("Input parameter %s not valid for section %s"
						% (key, sec))
		params[sec].update(overrides)

	return params


def get_solver_params(params, level_config):
	'''
	Flattens the solver sections into a single dict, applying the time
	step of the refinement level.
	'''
	solver_params = {**params["TimeStepping"], **params["Numerics"],
			**params["Output"]}
	solver_params["TimeStepSize"] = level_config["TimeStepSize"]
	solver_params["NumTimeSteps"] = level_config["NumTimeSteps"]

	return solver_params


def create_mesh(params, ndims, num_elems):
	'''
	Creates the mesh for a refinement level.

	Inputs:
	-------
		params: input parameters
		ndims: number of spatial dimensions
		num_elems: number of elements per direction (brick) or
			[horizontal, vertical] (cubed sphere)

	Outputs:
	--------
		mesh: mesh object
	'''
	mesh_params = params["Mesh"]
	topology = TopologyType[mesh_params["Topology"]]

	if topology == TopologyType.Brick:
		if len(num_elems) != ndims:
			raise errors.IncompatibleError("Need one element count per "
					"dimension")
		ranges = [np.linspace(mesh_params["xmin"], mesh_params["xmax"],
				n + 1) for n in num_elems]
		periodic = mesh_params["Periodic"]
		if isinstance(periodic, bool):
			periodic = [periodic]*ndims
		mesh = mesh_common.mesh_brick(ranges, periodic)
	elif topology == TopologyType.StackedCubedSphere:
		if ndims != 3:
			raise errors.IncompatibleError("Cubed sphere meshes are 3D")
		num_horiz, num_vert = num_elems
		radii = np.linspace(mesh_params["InnerRadius"],
				mesh_params["OuterRadius"], num_vert + 1)
		mesh = mesh_common.mesh_stacked_cubed_sphere(num_horiz, radii)
	else:
		raise NotImplementedError("Topology not supported")

	return mesh


def set_physics(params, ndims, mode=ModeType.Deterministic, rng=None):
	'''
	Creates the physics object and sets its functions.

	Inputs:
	-------
		params: input parameters
		ndims: number of spatial dimensions
		mode: ModeType of the state generators
		rng: numpy random Generator (Randomized mode only)

	Outputs:
	--------
		physics: physics object
	'''
	physics_params = params["Physics"]
	try:
		physics_type = PhysicsType[physics_params["Type"]]
	except KeyError:
		raise errors.DoesNotExistError("Physics type %s not available" %
				physics_params["Type"])

	if physics_type == PhysicsType.Euler:
		physics = euler.Euler(ndims)
	elif physics_type == PhysicsType.AdvectionScalar:
		physics = scalar.AdvectionScalar(ndims)

	physics.set_conv_num_flux(physics_params["ConvFluxNumerical"])

	aux_params = copy.deepcopy(params["AuxiliaryState"])
	physics.set_aux(aux_params.pop("Function"), mode, rng, **aux_params)

	IC_params = copy.deepcopy(params["InitialCondition"])
	physics.set_IC(IC_params.pop("Function"), mode, rng, **IC_params)

	exact_params = copy.deepcopy(params["ExactSolution"])
	physics.set_exact(exact_params.pop("Function"), **exact_params)

	for bname, BC_params in params["BoundaryConditions"].items():
		BC_params = copy.deepcopy(BC_params)
		physics.set_BC(bname, BC_params.pop("BCType"), **BC_params)

	return physics


def set_callbacks(solver, params, U0, track_mass=False):
	'''
	Creates the progress-report and export callbacks.

	Inputs:
	-------
		solver: solver object
		params: input parameters
		U0: initial solution, reference for the mass drift
		track_mass: if True, report the mass drift instead of the norm

	Outputs:
	--------
		callback_list: list of callback objects
	'''
	output = params["Output"]
	start_time = time.perf_counter()

	def get_runtime():
		return time.strftime("%H:%M:%S", time.gmtime(time.perf_counter()
				- start_time))

	def log_info(solver):
		if track_mass:
			logger.info("Update\n  simtime    = %.16e\n  runtime    = %s\n"
					"  mass delta = %.16e", solver.time, get_runtime(),
					post.get_mass_delta(solver, solver.state_coeffs, U0))
		else:
			logger.info("Update\n  simtime = %.16e\n  runtime = %s\n"
					"  norm(U) = %.16e", solver.time, get_runtime(),
					post.get_norm(solver, solver.state_coeffs))

	def log_mass(solver):
		logger.info("Update\n  mass delta = %.16e",
				post.get_mass_delta(solver, solver.state_coeffs, U0))

	callback_list = [callbacks.EveryXWallTimeSeconds(
			output["InfoWallTimeInterval"], log_info)]
	if track_mass:
		callback_list.append(callbacks.EveryXSimulationSteps(
				output["MassStepInterval"], log_mass))
	if output["WriteVTK"]:
		prefix = os.path.join(output["VTKDirectory"], "%s_%dD" %
				(output["Prefix"], solver.mesh.ndims))
		callback_list.append(callbacks.EveryXSimulationSteps(
				output["VTKStepInterval"], export.PointWriter(prefix)))

	return callback_list
