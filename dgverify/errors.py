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
#       File : dgverify/errors.py
#
#       Contains class definitions for custom errors.
#
# ------------------------------------------------------------------------ #


class DoesNotExistError(Exception):
    '''
    Raised when a requested function, boundary condition, or input deck
    does not exist.
    '''
    pass


class IncompatibleError(Exception):
    '''
    Raised when input parameters are incompatible with each other (e.g. a
    cubed-sphere mesh requested in 2D).
    '''
    pass


class VerificationError(AssertionError):
    '''
    Raised when a convergence study does not reproduce the expected
    behavior. The message lists the observed values.
    '''
    pass
