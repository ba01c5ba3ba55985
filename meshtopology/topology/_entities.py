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

"""Generation of mesh entities (edges, faces, ...) from cell-vertex incidence.

Generating the entities of dimension ``dim`` is equivalent to generating the
connectivity ``dim - 0`` (the vertices of each entity) together with the
connectivity ``D - dim`` (the entities of each cell).

Entities are discovered by walking the cells in index order and decomposing
each into its local sub-entities. A sub-entity is new only on its first
occurrence; later occurrences reuse the existing global index. The search for
an existing entity is restricted to cells that share a vertex with the current
cell and have a smaller index, which keeps deduplication local instead of
quadratic in the number of cells.
"""

import logging
import time
from collections.abc import Sequence
from typing import TYPE_CHECKING

from meshtopology.neighbors._adjacency import build_adjacency_from_rows
from meshtopology.topology._containment import has_same_vertices
from meshtopology.topology._errors import TopologyInconsistency

if TYPE_CHECKING:
    from meshtopology.mesh import Mesh

logger = logging.getLogger(__name__)


def _find_entity(
    canonical: tuple[int, ...],
    cell: int,
    neighbor_cells: Sequence[int],
    cell_entities: Sequence[Sequence[int]],
    entity_vertices: Sequence[tuple[int, ...]],
) -> int | None:
    """Look up an entity already recorded on an adjacent, previously visited cell.

    Returns
    -------
    int | None
        Global index of the entity with vertex set ``canonical``, or None if
        no previously visited neighbor of ``cell`` holds it.
    """
    for other_cell in neighbor_cells:
        if other_cell >= cell:
            continue
        for entity in cell_entities[other_cell]:
            if has_same_vertices(entity_vertices[entity], canonical):
                return entity
    return None


def compute_entities(mesh: "Mesh", dim: int) -> int:
    """Compute the entities of topological dimension ``dim``.

    The call is idempotent: if the entities exist, their count is returned
    without recomputation.

    Parameters
    ----------
    mesh : Mesh
        Mesh to compute entities for.
    dim : int
        Topological dimension, ``0 <= dim <= mesh.n_manifold_dims``.

    Returns
    -------
    int
        Number of entities of dimension ``dim``.

    Raises
    ------
    ValueError
        If ``dim`` is out of range.
    TopologyInconsistency
        If entities exist without their connectivity (or vice versa), or if
        the cell type produces a decomposition inconsistent with its counts.

    Examples
    --------
        >>> import torch
        >>> from meshtopology import Mesh
        >>> mesh = Mesh(cells=torch.tensor([[0, 1, 2], [1, 2, 3]]))
        >>> compute_entities(mesh, 1)
        5
        >>> mesh.topology.connectivity(2, 1).to_list()
        [[0, 1, 2], [2, 3, 4]]
    """
    topology = mesh.topology
    tdim = topology.dim
    if not 0 <= dim <= tdim:
        raise ValueError(
            f"Cannot compute entities of dimension {dim=} for a mesh of "
            f"dimension {tdim}."
        )

    has_cell_entity = topology.has_connectivity(tdim, dim)
    has_entity_vertex = topology.has_connectivity(dim, 0)

    ### Check if entities have already been computed
    if topology.has_entities(dim):
        # Make sure we really have the connectivity
        if (not has_cell_entity and dim != tdim) or (
            not has_entity_vertex and dim != 0
        ):
            raise TopologyInconsistency(
                f"Entities of topological dimension {dim} exist but "
                f"connectivity is missing.",
                dim=dim,
            )
        return topology.size(dim)

    ### Make sure connectivity does not already exist
    if has_cell_entity or has_entity_vertex:
        raise TopologyInconsistency(
            f"Connectivity for topological dimension {dim} exists but "
            f"entities are missing.",
            dim=dim,
        )

    ### Candidate duplicates are searched among neighboring cells only
    from meshtopology.topology._connectivity import compute_connectivity

    compute_connectivity(mesh, tdim, tdim)

    logger.debug("Creating mesh entities of dimension %d.", dim)
    start = time.perf_counter()

    cell_type = mesh.cell_type
    local_template = cell_type.local_entities(dim)
    if len(local_template) == 0:
        raise TopologyInconsistency(
            f"Cell type {cell_type.name!r} defines no sub-entities of "
            f"dimension {dim}.",
            dim=dim,
        )
    n_cell_vertices = cell_type.n_vertices
    for local in local_template:
        if any(not 0 <= i < n_cell_vertices for i in local):
            raise TopologyInconsistency(
                f"Cell type {cell_type.name!r} references local vertices {local} "
                f"of dimension {dim}, but cells have {n_cell_vertices} vertices.",
                dim=dim,
            )
    n_local = len(local_template)
    n_local_vertices = len(local_template[0])

    cell_vertices = topology.connectivity(tdim, 0).to_list()
    cell_neighbors = topology.connectivity(tdim, tdim).to_list()

    # Entities of each cell, in the cell type's local order
    cell_entities: list[list[int]] = [[] for _ in range(len(cell_vertices))]
    # Canonical (sorted) vertex set of each entity, indexed by entity
    entity_vertices: list[tuple[int, ...]] = []

    for cell, vertices in enumerate(cell_vertices):
        local_entities = cell_type.decompose(vertices, dim)
        if len(local_entities) != n_local:
            raise TopologyInconsistency(
                f"Cell type {cell_type.name!r} produced {len(local_entities)} "
                f"entities of dimension {dim} for cell {cell}, expected {n_local}.",
                dim=dim,
            )

        for local in local_entities:
            if len(local) != n_local_vertices:
                raise TopologyInconsistency(
                    f"Cell type {cell_type.name!r} produced an entity of dimension "
                    f"{dim} with {len(local)} vertices, expected {n_local_vertices}.",
                    dim=dim,
                )
            canonical = tuple(sorted(local))

            entity = _find_entity(
                canonical, cell, cell_neighbors[cell], cell_entities, entity_vertices
            )
            if entity is None:
                entity = len(entity_vertices)
                entity_vertices.append(canonical)
            cell_entities[cell].append(entity)

    ### Record entities and connectivity in the store
    n_entities = len(entity_vertices)
    topology.init(dim, n_entities)
    topology.set_connectivity(
        tdim, dim, build_adjacency_from_rows(cell_entities, device=mesh.device)
    )
    topology.set_connectivity(
        dim, 0, build_adjacency_from_rows(entity_vertices, device=mesh.device)
    )

    logger.debug(
        "Created %d entities of dimension %d in %.3f s.",
        n_entities,
        dim,
        time.perf_counter() - start,
    )
    return n_entities
