# SPDX-FileCopyrightText: Copyright (c) 2023 - 2026 NVIDIA CORPORATION & AFFILIATES.
# SPDX-FileCopyrightText: All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Point-based adjacency relationships.

This module provides functions to compute:
- Point-to-cells adjacency (star of each vertex)
- Point-to-points adjacency (vertices sharing a cell)
"""

from typing import TYPE_CHECKING

from meshtopology.neighbors._adjacency import Adjacency

if TYPE_CHECKING:
    from meshtopology.mesh import Mesh


def get_point_to_cells_adjacency(mesh: "Mesh") -> Adjacency:
    """Compute the star of each vertex (all cells containing each point).

    This is connectivity ``0 - D``, the transpose of the cells array.

    Parameters
    ----------
    mesh : Mesh
        Input mesh.

    Returns
    -------
    Adjacency
        Adjacency where adjacency.to_list()[i] contains all cell indices that
        contain point i, ascending. Isolated points have empty lists.

    Examples
    --------
        >>> import torch
        >>> from meshtopology import Mesh
        >>> mesh = Mesh(cells=torch.tensor([[0, 1, 2], [1, 3, 2]]))
        >>> adj = get_point_to_cells_adjacency(mesh)
        >>> adj.to_list()
        [[0], [0, 1], [0, 1], [1]]
    """
    from meshtopology.topology import compute_connectivity

    tdim = mesh.n_manifold_dims
    compute_connectivity(mesh, 0, tdim)
    return mesh.topology.connectivity(0, tdim)


def get_point_to_points_adjacency(mesh: "Mesh") -> Adjacency:
    """Compute point-to-point adjacency (vertices sharing a cell).

    This is connectivity ``0 - 0``. For simplicial meshes every pair of
    vertices in a cell is joined by an edge, so this equals the edge graph.
    For quadrilaterals and hexahedra, diagonal vertex pairs of a cell are
    neighbors too.

    Parameters
    ----------
    mesh : Mesh
        Input mesh.

    Returns
    -------
    Adjacency
        Adjacency where adjacency.to_list()[i] contains all other point
        indices that share a cell with point i. Isolated points have empty lists.

    Examples
    --------
        >>> import torch
        >>> from meshtopology import Mesh
        >>> mesh = Mesh(cells=torch.tensor([[0, 1, 2]]))
        >>> adj = get_point_to_points_adjacency(mesh)
        >>> adj.to_list()
        [[1, 2], [0, 2], [0, 1]]
    """
    from meshtopology.topology import compute_connectivity

    compute_connectivity(mesh, 0, 0)
    return mesh.topology.connectivity(0, 0)
