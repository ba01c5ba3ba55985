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

"""Per-mesh store of entity counts and connectivity.

The store is a compute-once cache: each dimension's entity count and each
ordered pair's connectivity is written exactly once and never modified.
Presence is tracked explicitly, so a dimension with zero entities (e.g. the
edges of an empty mesh) is distinguishable from one that was never computed.
"""

from meshtopology.neighbors._adjacency import Adjacency
from meshtopology.topology._errors import TopologyInconsistency


class TopologyStore:
    """Entity counts and connectivity for a mesh of topological dimension ``dim``.

    Parameters
    ----------
    dim : int
        Topological dimension of the mesh cells (``D``).

    Examples
    --------
    >>> store = TopologyStore(dim=2)
    >>> store.init(2, 1)
    >>> store.has_entities(1)
    False
    >>> store.size(2)
    1
    """

    def __init__(self, dim: int) -> None:
        if dim < 1:
            raise ValueError(f"Topological dimension must be >= 1, got {dim=}.")
        self.dim = dim
        self._sizes: dict[int, int] = {}
        self._connectivity: dict[tuple[int, int], Adjacency] = {}

    def _check_dim(self, dim: int) -> None:
        if not 0 <= dim <= self.dim:
            raise ValueError(
                f"Dimension {dim=} is out of range for a mesh of dimension {self.dim}."
            )

    ### Entities

    def has_entities(self, dim: int) -> bool:
        """Whether entities of ``dim`` have been recorded."""
        self._check_dim(dim)
        return dim in self._sizes

    def size(self, dim: int) -> int:
        """Number of entities of ``dim``, or 0 if they have not been computed."""
        self._check_dim(dim)
        return self._sizes.get(dim, 0)

    def init(self, dim: int, size: int) -> None:
        """Record the number of entities of ``dim``.

        Raises
        ------
        TopologyInconsistency
            If the count for ``dim`` was already recorded.
        """
        self._check_dim(dim)
        if dim in self._sizes:
            raise TopologyInconsistency(
                f"Entities of topological dimension {dim} have already been "
                f"initialized (size {self._sizes[dim]}).",
                dim=dim,
            )
        if size < 0:
            raise ValueError(f"Entity count must be non-negative, got {size=}.")
        self._sizes[dim] = size

    ### Connectivity

    def has_connectivity(self, d0: int, d1: int) -> bool:
        """Whether connectivity ``d0 - d1`` has been computed."""
        self._check_dim(d0)
        self._check_dim(d1)
        return (d0, d1) in self._connectivity

    def get_connectivity(self, d0: int, d1: int) -> Adjacency | None:
        """Return connectivity ``d0 - d1`` if computed, otherwise None."""
        self._check_dim(d0)
        self._check_dim(d1)
        return self._connectivity.get((d0, d1), None)

    def connectivity(self, d0: int, d1: int) -> Adjacency:
        """Return connectivity ``d0 - d1``.

        Raises
        ------
        TopologyInconsistency
            If the connectivity has not been computed.
        """
        adjacency = self.get_connectivity(d0, d1)
        if adjacency is None:
            raise TopologyInconsistency(
                f"Connectivity {d0} - {d1} has not been computed.", pair=(d0, d1)
            )
        return adjacency

    def set_connectivity(self, d0: int, d1: int, adjacency: Adjacency) -> None:
        """Record connectivity ``d0 - d1``.

        Raises
        ------
        TopologyInconsistency
            If the connectivity already exists, if entities of ``d0`` are not
            recorded, or if the number of rows does not match their count.
        """
        self._check_dim(d0)
        self._check_dim(d1)
        if (d0, d1) in self._connectivity:
            raise TopologyInconsistency(
                f"Connectivity {d0} - {d1} has already been computed.", pair=(d0, d1)
            )
        if d0 not in self._sizes:
            raise TopologyInconsistency(
                f"Cannot store connectivity {d0} - {d1} before entities of "
                f"dimension {d0} exist.",
                pair=(d0, d1),
            )
        if adjacency.n_sources != self._sizes[d0]:
            raise TopologyInconsistency(
                f"Connectivity {d0} - {d1} has {adjacency.n_sources} rows but "
                f"there are {self._sizes[d0]} entities of dimension {d0}.",
                pair=(d0, d1),
            )
        self._connectivity[(d0, d1)] = adjacency

    ### Introspection

    @property
    def computed_dims(self) -> list[int]:
        """Dimensions whose entities have been recorded, ascending."""
        return sorted(self._sizes)

    @property
    def computed_pairs(self) -> list[tuple[int, int]]:
        """Connectivity pairs that have been computed, in lexicographic order."""
        return sorted(self._connectivity)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{d}: {self._sizes[d]}" for d in self.computed_dims)
        pairs = ", ".join(f"{d0}-{d1}" for d0, d1 in self.computed_pairs)
        return (
            f"TopologyStore(dim={self.dim}, sizes={{{sizes}}}, "
            f"connectivity=[{pairs}])"
        )
