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

"""Strategy selection for computing connectivity between any two dimensions.

Any connectivity ``d0 - d1`` is obtained by combining three building blocks:

1. :func:`compute_entities`: ``d - 0`` and ``D - d`` from ``D - 0``
2. :func:`compute_from_transpose`: ``d0 - d1`` from ``d1 - d0``
3. :func:`compute_from_intersection`: ``d0 - d1`` from ``d0 - d - d1``

Each building block has preconditions, which are satisfied here by recursive
requests. Every request is memoised in the mesh topology, and the dependency
graph over dimension pairs is finite, so the recursion terminates.
"""

import logging
import time
from typing import TYPE_CHECKING

from meshtopology.topology._entities import compute_entities
from meshtopology.topology._errors import TopologyInconsistency
from meshtopology.topology._intersection import compute_from_intersection
from meshtopology.topology._transpose import compute_from_transpose

if TYPE_CHECKING:
    from meshtopology.mesh import Mesh

logger = logging.getLogger(__name__)


def compute_connectivity(mesh: "Mesh", d0: int, d1: int) -> None:
    """Ensure connectivity ``d0 - d1`` exists in the mesh topology.

    Nothing is returned; the result is stored in ``mesh.topology`` and can
    be read with ``mesh.topology.connectivity(d0, d1)``.

    Parameters
    ----------
    mesh : Mesh
        Mesh to compute connectivity for.
    d0, d1 : int
        Topological dimensions, each in ``[0, mesh.n_manifold_dims]``.

    Raises
    ------
    ValueError
        If a dimension is out of range.
    TopologyInconsistency
        If the topology store is found to be inconsistent.

    Examples
    --------
        >>> import torch
        >>> from meshtopology import Mesh
        >>> mesh = Mesh(cells=torch.tensor([[0, 1, 2], [1, 2, 3]]))
        >>> compute_connectivity(mesh, 0, 2)
        >>> mesh.topology.connectivity(0, 2).to_list()
        [[0], [0, 1], [0, 1], [1]]
    """
    logger.debug("Requesting connectivity %d - %d.", d0, d1)

    topology = mesh.topology

    ### Check if connectivity has already been computed
    if topology.has_connectivity(d0, d1):
        return

    ### Compute entities if they don't exist
    compute_entities(mesh, d0)
    compute_entities(mesh, d1)

    ### Entity generation may have produced the connectivity
    if topology.has_connectivity(d0, d1):
        return

    start = time.perf_counter()

    ### Decide how to compute the connectivity
    if d0 < d1:
        # Compute connectivity d1 - d0 and take transpose
        compute_connectivity(mesh, d1, d0)
        compute_from_transpose(mesh, d0, d1)
    else:
        # These connections are a byproduct of entity generation
        if d0 > 0 and d1 == 0:
            raise TopologyInconsistency(
                f"Connectivity {d0} - 0 should have been created together with "
                f"the entities of dimension {d0}.",
                pair=(d0, d1),
            )

        # Vertex-vertex goes through shared cells, everything else through vertices
        d = topology.dim if d0 == 0 and d1 == 0 else 0

        compute_connectivity(mesh, d0, d)
        compute_connectivity(mesh, d, d1)
        compute_from_intersection(mesh, d0, d1, d)

    logger.debug(
        "Computed connectivity %d - %d in %.3f s.",
        d0,
        d1,
        time.perf_counter() - start,
    )


def compute_all_connectivity(mesh: "Mesh") -> None:
    """Compute all entities and every connectivity ``d0 - d1`` of a mesh.

    After this call the topology is complete, so it can be shared by
    read-only consumers without any further mutation.

    Parameters
    ----------
    mesh : Mesh
        Mesh to compute the full topology for.
    """
    tdim = mesh.topology.dim

    for dim in range(tdim + 1):
        compute_entities(mesh, dim)

    for d0 in range(tdim + 1):
        for d1 in range(tdim + 1):
            compute_connectivity(mesh, d0, d1)
