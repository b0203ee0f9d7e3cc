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
#       File : dgverify/meshing/meshbase.py
#
#       Contains class definitions for mesh structures.
#
# ------------------------------------------------------------------------ #
import numpy as np


class InteriorFace():
    '''
    This class provides information about a given interior face.

    Attributes:
    -----------
    elemL_ID : int
        ID of "left" element
    faceL_ID : int
        local ID of face from perspective of left element
    elemR_ID : int
        ID of "right" element
    faceR_ID : int
        local ID of face from perspective of right element
    '''
    def __init__(self, elemL_ID=0, faceL_ID=0, elemR_ID=0, faceR_ID=0):
        self.elemL_ID = elemL_ID
        self.faceL_ID = faceL_ID
        self.elemR_ID = elemR_ID
        self.faceR_ID = faceR_ID


class BoundaryFace():
    '''
    This class provides information about a given boundary face.

    Attributes:
    -----------
    elem_ID : int
        ID of adjacent element
    face_ID : int
        local ID of face from perspective of adjacent element
    '''
    def __init__(self, elem_ID=0, face_ID=0):
        self.elem_ID = elem_ID
        self.face_ID = face_ID


class BoundaryGroup():
    '''
    This class stores boundary face objects for a given boundary group.

    Attributes:
    -----------
    name : str
        boundary name
    number : int
        boundary number
    num_boundary_faces : int
        number of faces in boundary group
    boundary_faces : list
        list of BoundaryFace objects
    '''
    def __init__(self):
        self.name = ""
        self.number = -1
        self.num_boundary_faces = 0
        self.boundary_faces = []

    def add_boundary_face(self, elem_ID, face_ID):
        self.boundary_faces.append(BoundaryFace(elem_ID, face_ID))
        self.num_boundary_faces = len(self.boundary_faces)


def no_warp(x):
    return x


class Mesh():
    '''
    This class stores information about a mesh of (possibly warped)
    linear quadrilaterals or hexahedra. Vertices of each element are
    ordered with the first reference direction running fastest, so vertex
    v sits at reference corner ((v >> d) & 1 for each direction d).

    Attributes:
    -----------
    ndims : int
        number of spatial dimensions
    num_nodes : int
        total number of (topological) vertices
    num_elems : int
        total number of elements in mesh
    num_nodes_per_elem : int
        number of vertices per element
    elem_to_node_IDs : numpy array
        maps element ID to global vertex IDs [num_elems, num_nodes_per_elem]
    elem_node_coords : numpy array
        physical coordinates of the element vertices before warping
        [num_elems, num_nodes_per_elem, ndims]; periodic copies of a vertex
        keep their own coordinates
    num_interior_faces : int
        number of interior faces
    interior_faces : list
        list of InteriorFace objects
    num_boundary_groups : int
        number of boundary face groups
    boundary_groups : dict
        dict whose keys are boundary names and values are BoundaryGroup
        objects
    warp : callable
        maps interpolated coordinates [..., ndims] to physical coordinates
    '''
    def __init__(self, ndims=2, num_elems=1, warp=None):
        self.ndims = ndims
        self.num_nodes = 0
        self.num_elems = num_elems
        self.num_nodes_per_elem = 2**ndims
        self.elem_to_node_IDs = np.zeros([num_elems,
                self.num_nodes_per_elem], dtype=int)
        self.elem_node_coords = np.zeros([num_elems,
                self.num_nodes_per_elem, ndims])
        self.num_interior_faces = 0
        self.interior_faces = []
        self.num_boundary_groups = 0
        self.boundary_groups = {}
        self.warp = warp if warp is not None else no_warp

    def __repr__(self):
        return '{self.__class__.__name__}(ndims={self.ndims}, ' \
                'num_elems={self.num_elems})'.format(self=self)

    @property
    def NFACES(self):
        return 2*self.ndims

    def get_face_vertices(self, face_ID):
        '''
        Returns the local vertex indices on a given face. Face 2*d lies at
        xi_d = -1 and face 2*d + 1 at xi_d = +1.
        '''
        d, side = divmod(face_ID, 2)
        return [v for v in range(self.num_nodes_per_elem)
                if (v >> d) & 1 == side]

    def add_boundary_group(self, bname):
        '''
        This method appends a new boundary group to self.boundary_groups

        Inputs:
        -------
            bname: name of boundary

        Outputs:
        --------
            bgroup: new boundary group
            self.boundary groups: updated to contain bgroup
        '''
        if bname in self.boundary_groups:
            raise ValueError("Repeated boundary names")
        bgroup = BoundaryGroup()
        self.boundary_groups[bname] = bgroup
        bgroup.name = bname
        self.num_boundary_groups = len(self.boundary_groups)
        bgroup.number = self.num_boundary_groups - 1

        return bgroup

    def create_faces(self, get_boundary_name):
        '''
        Matches element faces through their sorted vertex IDs. Faces seen
        twice become interior faces; the rest are sorted into boundary
        groups.

        Inputs:
        -------
            get_boundary_name: function (elem_ID, face_ID) -> boundary name

        Outputs:
        --------
            self.interior_faces: list of InteriorFace objects
            self.boundary_groups: filled with BoundaryFace objects
        '''
        face_vertices = [self.get_face_vertices(face_ID)
                for face_ID in range(self.NFACES)]

        open_faces = {}
        self.interior_faces = []
        for elem_ID in range(self.num_elems):
            node_IDs = self.elem_to_node_IDs[elem_ID]
            for face_ID in range(self.NFACES):
                key = tuple(sorted(node_IDs[face_vertices[face_ID]]))
                match = open_faces.pop(key, None)
                if match is None:
                    open_faces[key] = (elem_ID, face_ID)
                else:
                    self.interior_faces.append(InteriorFace(match[0],
                            match[1], elem_ID, face_ID))
        self.num_interior_faces = len(self.interior_faces)

        for elem_ID, face_ID in open_faces.values():
            bname = get_boundary_name(elem_ID, face_ID)
            if bname not in self.boundary_groups:
                self.add_boundary_group(bname)
            self.boundary_groups[bname].add_boundary_face(elem_ID, face_ID)

    def ref_to_phys(self, xi):
        '''
        Maps reference coordinates to physical coordinates in every
        element: multilinear interpolation of the vertices followed by the
        mesh warp.

        Inputs:
        -------
            xi: reference coordinates in [-1, 1] [nq, ndims]

        Outputs:
        --------
            x: physical coordinates [num_elems, nq, ndims]
        '''
        nq = xi.shape[0]
        shape_fcns = np.ones([nq, self.num_nodes_per_elem])
        for v in range(self.num_nodes_per_elem):
            for d in range(self.ndims):
                if (v >> d) & 1:
                    shape_fcns[:, v] *= 0.5*(1. + xi[:, d])
                else:
                    shape_fcns[:, v] *= 0.5*(1. - xi[:, d])

        x = np.einsum('qv, evd -> eqd', shape_fcns, self.elem_node_coords)

        return self.warp(x)
