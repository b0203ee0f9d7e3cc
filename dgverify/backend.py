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
#       File : dgverify/backend.py
#
#       Utilizes autoray to handle swapping different
#       computational backends for array computations in the physics kernels.
#
# ------------------------------------------------------------------------ #
import autoray

set_backend = autoray.set_backend
get_backend = autoray.get_backend
set_backend('numpy')
np = autoray.numpy
