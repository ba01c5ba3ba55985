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

"""Topology validation to detect corrupted or inconsistent mesh topology.

Checks are run only over what has already been computed; validation never
triggers new topology computation.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import torch

from meshtopology.neighbors._adjacency import build_adjacency_from_pairs
from meshtopology.topology._errors import TopologyInconsistency

if TYPE_CHECKING:
    from meshtopology.mesh import Mesh


def validate_topology(
    mesh: "Mesh",
    check_consistency: bool = True,
    check_bounds: bool = True,
    check_duplicates: bool = True,
    check_inverses: bool = True,
    raise_on_error: bool = False,
) -> Mapping[str, bool | list]:
    """Validate the computed topology of a mesh.

    Parameters
    ----------
    mesh : Mesh
        Mesh to validate
    check_consistency : bool
        Check that every computed dimension has its connectivity ``d - 0``
        and ``D - d``, and that no connectivity exists without entities
    check_bounds : bool
        Check that every connectivity ``d0 - d1`` references indices in
        ``[0, size(d1))``
    check_duplicates : bool
        Check that no two entities of the same dimension share a vertex set
    check_inverses : bool
        Check that ``d0 - d1`` and ``d1 - d0`` are mutual inverses wherever
        both are computed
    raise_on_error : bool
        If True, raise TopologyInconsistency on first error. If False,
        return dict with all validation results.

    Returns
    -------
    Mapping[str, bool | list]
        Dictionary with validation results:
            - "valid": bool, True if all enabled checks passed
            - "inconsistent_dims": dimensions failing the consistency check
            - "out_of_bounds_pairs": pairs referencing invalid indices
            - "duplicate_entities": ``(dim, e0, e1)`` triples with equal vertex sets
            - "non_inverse_pairs": pairs ``(d0, d1)`` not inverse to ``(d1, d0)``

    Raises
    ------
    TopologyInconsistency
        If raise_on_error=True and validation fails

    Examples
    --------
    >>> import torch
    >>> from meshtopology import Mesh
    >>> mesh = Mesh(cells=torch.tensor([[0, 1, 2], [1, 2, 3]]))
    >>> mesh.compute_all_connectivity()
    >>> report = validate_topology(mesh)
    >>> assert report["valid"] == True
    """
    topology = mesh.topology
    tdim = topology.dim

    results = {"valid": True}

    def _fail(key: str, item, message: str, **kwargs) -> None:
        results["valid"] = False
        results[key].append(item)
        if raise_on_error:
            raise TopologyInconsistency(message, **kwargs)

    ### Entities and their defining connectivity
    if check_consistency:
        results["inconsistent_dims"] = []
        for dim in range(tdim + 1):
            has_entities = topology.has_entities(dim)
            has_cell_entity = dim == tdim or topology.has_connectivity(tdim, dim)
            has_entity_vertex = dim == 0 or topology.has_connectivity(dim, 0)
            if has_entities and not (has_cell_entity and has_entity_vertex):
                _fail(
                    "inconsistent_dims",
                    dim,
                    f"Entities of dimension {dim} exist but connectivity is missing.",
                    dim=dim,
                )
            elif not has_entities and (
                topology.has_connectivity(tdim, dim)
                or topology.has_connectivity(dim, 0)
            ):
                _fail(
                    "inconsistent_dims",
                    dim,
                    f"Connectivity for dimension {dim} exists but entities are "
                    f"missing.",
                    dim=dim,
                )

    ### Index bounds of every computed connectivity
    if check_bounds:
        results["out_of_bounds_pairs"] = []
        for d0, d1 in topology.computed_pairs:
            indices = topology.connectivity(d0, d1).indices
            if indices.numel() == 0:
                continue
            if indices.min().item() < 0 or indices.max().item() >= topology.size(d1):
                _fail(
                    "out_of_bounds_pairs",
                    (d0, d1),
                    f"Connectivity {d0} - {d1} references entities outside "
                    f"[0, {topology.size(d1)}).",
                    pair=(d0, d1),
                )

    ### No two entities share a vertex set
    if check_duplicates:
        results["duplicate_entities"] = []
        for dim in range(1, tdim + 1):
            vertices = topology.get_connectivity(dim, 0)
            if vertices is None:
                continue
            first_seen: dict[frozenset[int], int] = {}
            for entity, row in enumerate(vertices.to_list()):
                key = frozenset(row)
                if key in first_seen:
                    _fail(
                        "duplicate_entities",
                        (dim, first_seen[key], entity),
                        f"Entities {first_seen[key]} and {entity} of dimension "
                        f"{dim} share the vertex set {sorted(key)}.",
                        dim=dim,
                    )
                else:
                    first_seen[key] = entity

    ### d0 - d1 and d1 - d0 are mutual inverses
    if check_inverses:
        results["non_inverse_pairs"] = []
        for d0, d1 in topology.computed_pairs:
            if d0 >= d1 or not topology.has_connectivity(d1, d0):
                continue
            forward = topology.connectivity(d0, d1)
            sources, targets = forward.expand_to_pairs()
            expected = build_adjacency_from_pairs(
                targets, sources, n_sources=topology.size(d1)
            )
            backward = topology.connectivity(d1, d0)
            if not _same_rows_up_to_order(expected.to_list(), backward.to_list()):
                _fail(
                    "non_inverse_pairs",
                    (d0, d1),
                    f"Connectivity {d0} - {d1} and {d1} - {d0} are not inverses.",
                    pair=(d0, d1),
                )

    return results


def _same_rows_up_to_order(a: list[list[int]], b: list[list[int]]) -> bool:
    """Compare two ragged relations row by row, ignoring order within rows."""
    if len(a) != len(b):
        return False
    return all(sorted(row_a) == sorted(row_b) for row_a, row_b in zip(a, b))


def compute_topology_statistics(
    mesh: "Mesh",
) -> Mapping[str, torch.Tensor | int]:
    """Summarize computed entity counts and connectivity degrees.

    Parameters
    ----------
    mesh : Mesh
        Mesh whose computed topology is summarized.

    Returns
    -------
    Mapping[str, torch.Tensor | int]
        ``"n_entities_<d>"`` for each computed dimension and
        ``"max_degree_<d0>_<d1>"`` for each computed connectivity.
    """
    topology = mesh.topology
    stats: dict[str, torch.Tensor | int] = {}
    for dim in topology.computed_dims:
        stats[f"n_entities_{dim}"] = topology.size(dim)
    for d0, d1 in topology.computed_pairs:
        counts = topology.connectivity(d0, d1).counts
        stats[f"max_degree_{d0}_{d1}"] = int(counts.max().item()) if len(counts) else 0
    return stats
