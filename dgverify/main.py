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
#       File : dgverify/main.py
#
#       Command line entry point that runs the convergence study of an input
#       deck.
#
# ------------------------------------------------------------------------ #
import argparse
import logging
import sys

from dgverify import driver, errors
from dgverify.general import ModeType
from dgverify.verification.harness import ConvergenceStudy

logger = logging.getLogger(__name__)


def parse_args(argv=None):
	parser = argparse.ArgumentParser(description="Run a DG convergence "
			"study and check it against recorded errors")
	parser.add_argument("deck", help="bundled case name (isentropic_vortex, "
			"advection_sphere) or path to an input deck")
	parser.add_argument("--mode", choices=[m.name for m in ModeType],
			default=ModeType.Deterministic.name,
			help="state generator mode [Deterministic]")
	parser.add_argument("--levels", type=int, default=None,
			help="number of refinement levels (overrides the deck)")
	parser.add_argument("--dims", type=int, nargs="+", default=None,
			help="spatial dimensions to run (overrides the deck)")
	parser.add_argument("--precision", nargs="+", default=None,
			help="floating point precisions to run (overrides the deck)")
	parser.add_argument("--vtk", action="store_true", default=False,
			help="write VTK point clouds during the runs")
	parser.add_argument("--log-level", default="INFO",
			help="logging level [INFO]")

	return parser.parse_args(argv)


def main(argv=None):
	args = parse_args(argv)

	logging.basicConfig(
		format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
		level=getattr(logging, args.log_level.upper()))

	deck = driver.import_deck(args.deck)
	study = ConvergenceStudy(deck, ModeType[args.mode])

	params = study.params
	if args.levels is not None:
		params["Verification"]["NumLevels"] = args.levels
	if args.dims is not None:
		params["Mesh"]["Dims"] = args.dims
	if args.precision is not None:
		params["Numerics"]["Precisions"] = args.precision
	if args.vtk:
		params["Output"]["WriteVTK"] = True

	try:
		study.run()
	except errors.VerificationError as e:
		logger.error("Verification failed\n%s", e)
		return 1

	logger.info("Verification passed")
	return 0


if __name__ == "__main__":
	sys.exit(main())
