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

"""Cell-based adjacency relationships.

This module provides functions to compute:
- Cell-to-cells adjacency (cells sharing at least one vertex)
- Cell-to-points adjacency (vertices of each cell)
"""

from typing import TYPE_CHECKING

from meshtopology.neighbors._adjacency import Adjacency

if TYPE_CHECKING:
    from meshtopology.mesh import Mesh


def get_cell_to_cells_adjacency(mesh: "Mesh") -> Adjacency:
    """Compute cells sharing at least one vertex with each cell.

    This is connectivity ``D - D``, the relation the entity generator uses to
    bound its duplicate search.

    Parameters
    ----------
    mesh : Mesh
        Input mesh.

    Returns
    -------
    Adjacency
        Adjacency where adjacency.to_list()[i] lists every other cell sharing
        a vertex with cell i, in order of discovery through its vertices.

    Examples
    --------
        >>> import torch
        >>> from meshtopology import Mesh
        >>> mesh = Mesh(cells=torch.tensor([[0, 1, 2], [1, 3, 2], [3, 4, 5]]))
        >>> get_cell_to_cells_adjacency(mesh).to_list()
        [[1], [0, 2], [1]]
    """
    from meshtopology.topology import compute_connectivity

    tdim = mesh.n_manifold_dims
    compute_connectivity(mesh, tdim, tdim)
    return mesh.topology.connectivity(tdim, tdim)


def get_cell_to_points_adjacency(mesh: "Mesh") -> Adjacency:
    """Return the vertices of each cell (connectivity ``D - 0``).

    Rows follow the local vertex order of the cell type, exactly as in
    ``mesh.cells``.

    Examples
    --------
        >>> import torch
        >>> from meshtopology import Mesh
        >>> mesh = Mesh(cells=torch.tensor([[0, 1, 2], [1, 3, 2]]))
        >>> get_cell_to_points_adjacency(mesh).to_list()
        [[0, 1, 2], [1, 3, 2]]
    """
    return mesh.topology.connectivity(mesh.n_manifold_dims, 0)
