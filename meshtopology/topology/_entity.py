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

"""Lightweight views of single mesh entities and iteration over them."""

from collections.abc import Iterator
from typing import TYPE_CHECKING

import torch

from meshtopology.topology._connectivity import compute_connectivity
from meshtopology.topology._containment import is_subset
from meshtopology.topology._entities import compute_entities

if TYPE_CHECKING:
    from meshtopology.mesh import Mesh


class MeshEntity:
    """View of the entity ``index`` of dimension ``dim`` in ``mesh``.

    The view holds no data of its own; all incidence queries read the
    mesh topology, computing connectivity on first use.

    Parameters
    ----------
    mesh : Mesh
        Owning mesh.
    dim : int
        Topological dimension of the entity.
    index : int
        Index of the entity among entities of dimension ``dim``.

    Examples
    --------
        >>> import torch
        >>> from meshtopology import Mesh
        >>> mesh = Mesh(cells=torch.tensor([[0, 1, 2], [1, 2, 3]]))
        >>> edge = MeshEntity(mesh, 1, 2)
        >>> edge.vertices.tolist()
        [1, 2]
        >>> edge.entities(2).tolist()
        [0, 1]
    """

    __slots__ = ("mesh", "dim", "index")

    def __init__(self, mesh: "Mesh", dim: int, index: int) -> None:
        n_entities = compute_entities(mesh, dim)
        if not 0 <= index < n_entities:
            raise IndexError(
                f"Entity {index=} is out of range for {n_entities} entities "
                f"of dimension {dim}."
            )
        self.mesh = mesh
        self.dim = dim
        self.index = index

    def entities(self, dim: int) -> torch.Tensor:
        """Indices of the incident entities of dimension ``dim``, in stored order."""
        compute_connectivity(self.mesh, self.dim, dim)
        return self.mesh.topology.connectivity(self.dim, dim).row(self.index)

    def n_entities(self, dim: int) -> int:
        """Number of incident entities of dimension ``dim``."""
        return len(self.entities(dim))

    def incident(self, dim: int) -> Iterator["MeshEntity"]:
        """Iterate over views of the incident entities of dimension ``dim``."""
        for index in self.entities(dim).tolist():
            yield MeshEntity(self.mesh, dim, index)

    @property
    def vertices(self) -> torch.Tensor:
        """Vertex indices of this entity."""
        if self.dim == 0:
            # 0 - 0 holds neighboring vertices, not the vertex itself
            return torch.tensor(
                [self.index], dtype=torch.int64, device=self.mesh.device
            )
        return self.entities(0)

    def contains(self, other: "MeshEntity") -> bool:
        """Check whether every vertex of ``other`` is a vertex of this entity."""
        return is_subset(other.vertices.tolist(), self.vertices.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeshEntity):
            return NotImplemented
        return (
            self.mesh is other.mesh
            and self.dim == other.dim
            and self.index == other.index
        )

    def __hash__(self) -> int:
        return hash((id(self.mesh), self.dim, self.index))

    def __repr__(self) -> str:
        return f"MeshEntity(dim={self.dim}, index={self.index})"


def iter_entities(mesh: "Mesh", dim: int) -> Iterator[MeshEntity]:
    """Iterate over all entities of dimension ``dim`` in index order.

    Entities are computed on demand.

    Examples
    --------
        >>> import torch
        >>> from meshtopology import Mesh
        >>> mesh = Mesh(cells=torch.tensor([[0, 1, 2], [1, 2, 3]]))
        >>> [e.index for e in iter_entities(mesh, 2)]
        [0, 1]
    """
    n_entities = compute_entities(mesh, dim)
    for index in range(n_entities):
        yield MeshEntity(mesh, dim, index)
