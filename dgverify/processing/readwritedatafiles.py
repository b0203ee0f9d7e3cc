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
#       File : dgverify/processing/readwritedatafiles.py
#
#       Contains functions for reading and writing data files.
#
# ------------------------------------------------------------------------ #
import logging
import pickle

logger = logging.getLogger(__name__)


def write_data_file(solver, file_name):
	'''
	This function writes a data file (pickle format).

	Inputs:
	-------
		solver: solver object
		file_name: name of the file, without extension

	Outputs:
	--------
		path: path of the written file, or None on failure
	'''
	path = file_name + '.pkl'
	try:
		with open(path, 'wb') as fo:
			pickle.dump(solver, fo, pickle.HIGHEST_PROTOCOL)
	except OSError as e:
		logger.warning("Writing data file %s failed: %s", path, e)
		return None

	return path


def read_data_file(file_name):
	'''
	This function reads a data file (pickle format).

	Inputs:
	-------
		file_name: path of the file

	Outputs:
	--------
		solver: solver object
	'''
	with open(file_name, 'rb') as fo:
		solver = pickle.load(fo)

	return solver
