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
#       File : dgverify/numerics/basis/basis.py
#
#       Contains class definitions for the tensor-product Lagrange basis
#       collocated on Gauss-Lobatto-Legendre points.
#
# ------------------------------------------------------------------------ #
import numpy as np
from scipy.special import eval_legendre, roots_jacobi


def get_gll_nodes_weights(order):
    '''
    Computes the Gauss-Lobatto-Legendre nodes and weights on [-1, 1].

    Inputs:
    -------
        order: polynomial order N (number of nodes is N + 1)

    Outputs:
    --------
        nodes: GLL nodes in ascending order [N + 1]
        weights: GLL quadrature weights [N + 1]
    '''
    if order < 1:
        raise ValueError("GLL points require order >= 1")

    # Interior nodes are the roots of P'_N, i.e. of the Jacobi polynomial
    # P^(1,1)_(N-1)
    if order > 1:
        interior, _ = roots_jacobi(order - 1, 1., 1.)
    else:
        interior = np.zeros(0)
    nodes = np.concatenate([[-1.], np.sort(interior), [1.]])

    PN = eval_legendre(order, nodes)
    weights = 2./(order*(order + 1)*PN**2)

    return nodes, weights


def get_gll_derivative_matrix(order, nodes):
    '''
    Computes the 1D differentiation matrix for the Lagrange polynomials
    collocated on the GLL nodes, D[i, j] = l_j'(x_i).

    Inputs:
    -------
        order: polynomial order N
        nodes: GLL nodes [N + 1]

    Outputs:
    --------
        D: differentiation matrix [N + 1, N + 1]
    '''
    nn = order + 1
    PN = eval_legendre(order, nodes)

    D = np.zeros([nn, nn])
    for i in range(nn):
        for j in range(nn):
            if i != j:
                D[i, j] = PN[i]/(PN[j]*(nodes[i] - nodes[j]))
    D[0, 0] = -order*(order + 1)/4.
    D[-1, -1] = order*(order + 1)/4.

    return D


class LagrangeGLL():
    '''
    Tensor-product nodal Lagrange basis on the reference segment, square,
    or cube, with nodes at the GLL points. Nodes are numbered with the
    first reference direction running fastest.

    Attributes:
    -----------
    order: int
        polynomial order
    ndims: int
        number of reference dimensions
    nb: int
        number of basis functions (nodes) per element
    nodes_1D: numpy array
        1D GLL nodes [order + 1]
    weights_1D: numpy array
        1D GLL weights [order + 1]
    D_1D: numpy array
        1D differentiation matrix [order + 1, order + 1]
    nodes: numpy array
        reference coordinates of the element nodes [nb, ndims]
    weights: numpy array
        tensor-product quadrature weights [nb]
    D: numpy array
        derivative operators along each reference direction
        [ndims, nb, nb]
    NFACES: int
        number of element faces
    face_node_IDs: numpy array
        node indices lying on each face [NFACES, nb_face]
    '''
    def __init__(self, order, ndims):
        self.order = order
        self.ndims = ndims
        nn = order + 1
        self.nb = nn**ndims
        self.NFACES = 2*ndims

        self.nodes_1D, self.weights_1D = get_gll_nodes_weights(order)
        self.D_1D = get_gll_derivative_matrix(order, self.nodes_1D)

        # Multi-indices of each node, first direction fastest
        self.node_indices = np.indices([nn]*ndims).reshape(ndims, -1)[::-1]
        self.nodes = self.nodes_1D[self.node_indices].T

        self.weights = np.ones(self.nb)
        for d in range(ndims):
            self.weights *= self.weights_1D[self.node_indices[d]]

        self.D = self.get_derivative_operators()
        self.face_node_IDs = np.array([self.get_face_node_IDs(face_ID)
                for face_ID in range(self.NFACES)])

    def __repr__(self):
        return '{self.__class__.__name__}(order={self.order}, ' \
                'ndims={self.ndims})'.format(self=self)

    def get_derivative_operators(self):
        '''
        Builds the multi-dimensional derivative operators by Kronecker
        products of the 1D differentiation matrix.

        Outputs:
        --------
            D: derivative operators [ndims, nb, nb]
        '''
        nn = self.order + 1
        eye = np.eye(nn)
        D = np.zeros([self.ndims, self.nb, self.nb])
        for d in range(self.ndims):
            # np.kron runs the last factor fastest, so the factor for the
            # first reference direction goes last
            op = np.ones([1, 1])
            for dd in range(self.ndims - 1, -1, -1):
                op = np.kron(op, self.D_1D if dd == d else eye)
            D[d] = op

        return D

    def get_face_node_IDs(self, face_ID):
        '''
        Returns the nodes lying on a given face. Face 2*d is the face at
        xi_d = -1 and face 2*d + 1 is the face at xi_d = +1.

        Inputs:
        -------
            face_ID: local face ID

        Outputs:
        --------
            node_IDs: node indices on the face [nb_face]
        '''
        d, side = divmod(face_ID, 2)
        target = self.order if side == 1 else 0

        return np.where(self.node_indices[d] == target)[0]

    def get_face_weights(self, face_ID):
        '''
        Returns the quadrature weights of the face nodes, i.e. the
        tensor-product weights with the normal direction factored out.
        '''
        node_IDs = self.face_node_IDs[face_ID]

        return self.weights[node_IDs]/self.weights_1D[0]
