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

"""Contract between the topology computation and a cell type."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class CellType(ABC):
    """Local decomposition of a reference cell into sub-entities.

    A cell type knows, for every dimension ``d`` between 0 and its own
    dimension, which subsets of its local vertices form its sub-entities of
    dimension ``d``. Subclasses implement :meth:`local_entities`; everything
    else is derived from it.

    Attributes
    ----------
    name : str
        Registry name of the cell type.
    dim : int
        Topological dimension of the cell.
    """

    name: str
    dim: int

    @abstractmethod
    def local_entities(self, dim: int) -> tuple[tuple[int, ...], ...]:
        """Local vertex indices of each sub-entity of dimension ``dim``.

        Parameters
        ----------
        dim : int
            Sub-entity dimension, ``0 <= dim <= self.dim``.

        Returns
        -------
        tuple[tuple[int, ...], ...]
            One tuple per sub-entity, in the cell type's local order.
        """

    def _check_dim(self, dim: int) -> None:
        if not 0 <= dim <= self.dim:
            raise ValueError(
                f"Sub-entity dimension {dim=} is out of range for cell type "
                f"{self.name!r} of dimension {self.dim}."
            )

    @property
    def n_vertices(self) -> int:
        """Number of vertices of the cell."""
        return self.local_count(0)

    def local_count(self, dim: int) -> int:
        """Number of sub-entities of dimension ``dim`` per cell."""
        return len(self.local_entities(dim))

    def local_vertex_count(self, dim: int) -> int:
        """Number of vertices of each sub-entity of dimension ``dim``."""
        return len(self.local_entities(dim)[0])

    def decompose(
        self, cell_vertices: Sequence[int], dim: int
    ) -> list[tuple[int, ...]]:
        """Map a cell's global vertices to its sub-entities of dimension ``dim``.

        Parameters
        ----------
        cell_vertices : Sequence[int]
            Global vertex indices of one cell, in the cell type's local order.
        dim : int
            Sub-entity dimension.

        Returns
        -------
        list[tuple[int, ...]]
            Global vertex indices of each sub-entity, not sorted.

        Raises
        ------
        ValueError
            If ``cell_vertices`` does not have :attr:`n_vertices` entries.
        """
        if len(cell_vertices) != self.n_vertices:
            raise ValueError(
                f"Cell type {self.name!r} expects {self.n_vertices} vertices per "
                f"cell, got {len(cell_vertices)}."
            )
        return [
            tuple(cell_vertices[i] for i in local) for local in self.local_entities(dim)
        ]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, dim={self.dim})"
