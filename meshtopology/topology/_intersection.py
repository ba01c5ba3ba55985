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

"""Connectivity ``d0 - d1`` from the composition ``d0 - d - d1``."""

import logging
from typing import TYPE_CHECKING

from meshtopology.neighbors._adjacency import build_adjacency_from_rows
from meshtopology.topology._containment import is_subset
from meshtopology.topology._errors import TopologyInconsistency

if TYPE_CHECKING:
    from meshtopology.mesh import Mesh

logger = logging.getLogger(__name__)


def compute_from_intersection(mesh: "Mesh", d0: int, d1: int, d: int) -> None:
    """Compute connectivity ``d0 - d1`` by walking through dimension ``d``.

    For every entity ``e0`` of dimension ``d0``, candidates are collected by
    scanning the ``d``-entities of ``e0`` and then the ``d1``-entities of each,
    both in stored order. A candidate ``e1`` is kept if

    - ``d0 == d1``: ``e1`` is not ``e0`` itself (an entity is not its own
      neighbor), or
    - ``d0 != d1``: every vertex of ``e1`` is a vertex of ``e0``,

    and it has not been collected already. Rows keep insertion order.

    Parameters
    ----------
    mesh : Mesh
        Mesh whose topology holds connectivity ``d0 - d`` and ``d - d1``.
    d0, d1 : int
        Topological dimensions of the requested connectivity, ``d0 >= d1``.
    d : int
        Intermediate dimension.

    Raises
    ------
    TopologyInconsistency
        If ``d0 < d1`` or a required connectivity is missing.
    """
    logger.debug(
        "Computing mesh connectivity %d - %d from intersection %d - %d - %d.",
        d0,
        d1,
        d0,
        d,
        d1,
    )

    topology = mesh.topology

    ### Check preconditions
    if d0 < d1:
        raise TopologyInconsistency(
            f"Intersection requires d0 >= d1, got {d0=} and {d1=}.", pair=(d0, d1)
        )
    for pair in ((d0, d), (d, d1)):
        if not topology.has_connectivity(*pair):
            raise TopologyInconsistency(
                f"Cannot compute connectivity {d0} - {d1} from intersection: "
                f"connectivity {pair[0]} - {pair[1]} is missing.",
                pair=pair,
            )

    e0_to_e = topology.connectivity(d0, d).to_list()
    e_to_e1 = topology.connectivity(d, d1).to_list()

    if d0 != d1:
        # d1 > 0 here, so both vertex relations exist alongside the entities
        e0_vertices = topology.connectivity(d0, 0).to_list()
        e1_vertices = topology.connectivity(d1, 0).to_list()

    rows: list[list[int]] = []
    max_size = 1
    for e0, incident in enumerate(e0_to_e):
        entities: list[int] = []
        for e in incident:
            for e1 in e_to_e1[e]:
                if d0 == d1:
                    if e1 != e0 and e1 not in entities:
                        entities.append(e1)
                elif e1 not in entities and is_subset(e1_vertices[e1], e0_vertices[e0]):
                    entities.append(e1)
        rows.append(entities)
        max_size = max(max_size, len(entities))

    logger.debug(
        "Connectivity %d - %d: %d rows, at most %d entries per row.",
        d0,
        d1,
        len(rows),
        max_size,
    )

    topology.set_connectivity(
        d0, d1, build_adjacency_from_rows(rows, device=mesh.device)
    )
