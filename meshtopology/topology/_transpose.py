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

"""Connectivity ``d0 - d1`` from the transpose of ``d1 - d0``."""

import logging
from typing import TYPE_CHECKING

import torch

from meshtopology.neighbors._adjacency import Adjacency
from meshtopology.topology._errors import TopologyInconsistency

if TYPE_CHECKING:
    from meshtopology.mesh import Mesh

logger = logging.getLogger(__name__)


def transpose_adjacency(adjacency: Adjacency, n_targets: int) -> Adjacency:
    """Invert an adjacency: row ``j`` of the result lists every source containing ``j``.

    The inversion runs in two passes with no dynamic growth:

    1. Count, for each target, how many sources reference it (its degree);
       the exclusive prefix sum of the degrees gives exact row storage.
    2. Walk the sources in increasing order and drop each source index into
       the next free slot of every target it references.

    Each row of the result is therefore sorted ascending, which makes the
    operation deterministic and its own inverse up to row order.

    Parameters
    ----------
    adjacency : Adjacency
        Relation to invert, with ``adjacency.n_sources`` rows.
    n_targets : int
        Number of rows of the result (entities referenced by ``adjacency``).

    Returns
    -------
    Adjacency
        The transposed relation with ``n_targets`` rows.

    Raises
    ------
    TopologyInconsistency
        If ``adjacency`` references an index outside ``[0, n_targets)``.

    Examples
    --------
        >>> import torch
        >>> adj = Adjacency(
        ...     offsets=torch.tensor([0, 3, 6]),
        ...     indices=torch.tensor([0, 1, 2, 1, 2, 3]),
        ... )
        >>> transpose_adjacency(adj, n_targets=4).to_list()
        [[0], [0, 1], [0, 1], [1]]
    """
    device = adjacency.offsets.device
    source_ids, target_ids = adjacency.expand_to_pairs()

    if target_ids.numel() > 0 and (
        target_ids.min().item() < 0 or target_ids.max().item() >= n_targets
    ):
        raise TopologyInconsistency(
            f"Relation references entity indices outside [0, {n_targets}): "
            f"min={target_ids.min().item()}, max={target_ids.max().item()}."
        )

    ### Pass 1: degree of each target, prefix-summed into offsets
    degrees = torch.bincount(target_ids, minlength=n_targets)
    offsets = torch.zeros(n_targets + 1, dtype=torch.int64, device=device)
    offsets[1:] = torch.cumsum(degrees, dim=0)

    ### Pass 2: place sources into their target rows
    # source_ids is non-decreasing, so a stable sort by target keeps sources
    # ascending inside every row (the same order a slot-by-slot fill produces).
    slot_order = torch.argsort(target_ids, stable=True)
    indices = source_ids[slot_order]

    return Adjacency(offsets=offsets, indices=indices)


def compute_from_transpose(mesh: "Mesh", d0: int, d1: int) -> None:
    """Compute connectivity ``d0 - d1`` as the transpose of ``d1 - d0``.

    Parameters
    ----------
    mesh : Mesh
        Mesh whose topology holds connectivity ``d1 - d0``.
    d0, d1 : int
        Topological dimensions of the requested connectivity.

    Raises
    ------
    TopologyInconsistency
        If connectivity ``d1 - d0`` is missing.
    """
    logger.debug("Computing mesh connectivity %d - %d from transpose.", d0, d1)

    topology = mesh.topology
    source = topology.get_connectivity(d1, d0)
    if source is None:
        raise TopologyInconsistency(
            f"Cannot transpose connectivity {d1} - {d0}: it has not been computed.",
            pair=(d1, d0),
        )

    topology.set_connectivity(d0, d1, transpose_adjacency(source, topology.size(d0)))
