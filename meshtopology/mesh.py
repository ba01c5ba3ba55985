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

from collections.abc import Sequence

import torch

from meshtopology.cell_types import CellType, SimplexCell, get_cell_type
from meshtopology.neighbors._adjacency import Adjacency
from meshtopology.topology import (
    MeshEntity,
    TopologyStore,
    compute_all_connectivity,
    compute_connectivity,
    compute_entities,
)
from meshtopology.utilities.mesh_repr import format_mesh_repr


class Mesh:
    r"""An unstructured mesh described only by cell-vertex incidence.

    A ``Mesh`` consists of ``n_cells`` cells of a single :class:`CellType`,
    each listing the indices of its vertices. Vertices are numbered
    ``0 .. n_points - 1``. No coordinates are stored: every quantity derived
    by this class is purely topological.

    **Topological Dimension**

    All cells share the same topological dimension :math:`D`
    (``n_manifold_dims``): 1 for intervals, 2 for triangles and
    quadrilaterals, 3 for tetrahedra and hexahedra. The entities of
    dimension :math:`0 \le d \le D` are the vertices (:math:`d = 0`), edges
    (:math:`d = 1`), faces (:math:`d = 2`) and cells (:math:`d = D`).

    **Topology**

    The mesh owns a :class:`TopologyStore`. At construction it holds only
    the vertex and cell counts and connectivity :math:`D - 0` (the ``cells``
    tensor). All other entities and connectivity are computed on request
    and cached; once computed they are never modified.

    Parameters
    ----------
    cells : torch.Tensor or Sequence[Sequence[int]]
        Cell connectivity with shape :math:`(N_c, V_c)`, where :math:`V_c` is
        the number of vertices per cell. Must be integer dtype.
    cell_type : CellType or str, optional
        Cell type, or the registry name of one. If ``None`` (default), the
        cells are taken to be simplices of dimension :math:`V_c - 1`.
    n_points : int, optional
        Number of vertices. Defaults to one more than the largest vertex
        index in ``cells``. May be larger to include isolated vertices.

    Raises
    ------
    ValueError
        If ``cells`` is not 2D, does not match the cell type's vertex count,
        references vertices outside ``[0, n_points)``, repeats a vertex
        within a cell, or describes 0-dimensional cells.
    TypeError
        If ``cells`` has a floating-point dtype (indices must be integers).

    Examples
    --------
    Two triangles sharing an edge:

    >>> import torch
    >>> mesh = Mesh(cells=torch.tensor([[0, 1, 2], [1, 2, 3]]))
    >>> mesh.n_manifold_dims, mesh.n_points, mesh.n_cells
    (2, 4, 2)
    >>> mesh.compute_entities(1)
    5
    >>> mesh.connectivity(0, 0).to_list()
    [[1, 2], [0, 2, 3], [0, 1, 3], [1, 2]]
    """

    def __init__(
        self,
        cells: torch.Tensor | Sequence[Sequence[int]],
        cell_type: CellType | str | None = None,
        n_points: int | None = None,
    ) -> None:
        cells = torch.as_tensor(cells)

        ### Validate shapes and dtypes
        if cells.ndim != 2:
            raise ValueError(
                f"`cells` must have shape (n_cells, n_vertices_per_cell), "
                f"but got {cells.shape=}."
            )
        if torch.is_floating_point(cells):
            raise TypeError(
                f"`cells` must have an integer dtype, but got {cells.dtype=}."
            )
        cells = cells.to(torch.int64)

        ### Resolve the cell type
        if cell_type is None:
            if cells.shape[1] < 2:
                raise ValueError(
                    f"Cannot infer a cell type from {cells.shape[1]} vertex per "
                    f"cell; meshes must have topological dimension >= 1."
                )
            cell_type = SimplexCell(cells.shape[1] - 1)
        elif isinstance(cell_type, str):
            cell_type = get_cell_type(cell_type)

        if cell_type.dim < 1:
            raise ValueError(
                f"Meshes must have topological dimension >= 1, got {cell_type.dim=}."
            )
        if cells.shape[1] != cell_type.n_vertices:
            raise ValueError(
                f"Cell type {cell_type.name!r} has {cell_type.n_vertices} vertices, "
                f"but `cells` has {cells.shape[1]} columns."
            )

        ### Validate vertex indices
        n_cells = cells.shape[0]
        if n_points is None:
            n_points = int(cells.max().item()) + 1 if n_cells > 0 else 0
        if n_cells > 0 and (cells.min().item() < 0 or cells.max().item() >= n_points):
            raise ValueError(
                f"Cell vertex indices must be in range [0, {n_points}), but got "
                f"{cells.min().item()=} and {cells.max().item()=}."
            )

        ### Reject cells with repeated vertices
        # A cell has duplicates if any adjacent pair in sorted order is equal
        if n_cells > 0:
            sorted_cells = torch.sort(cells, dim=1).values
            has_duplicate = (sorted_cells[:, 1:] == sorted_cells[:, :-1]).any(dim=1)
            if has_duplicate.any():
                invalid_indices = torch.where(has_duplicate)[0]
                raise ValueError(
                    f"Cells must have distinct vertices, but {len(invalid_indices)} "
                    f"cell(s) repeat a vertex: {invalid_indices.tolist()=}."
                )

        self._cells = cells
        self._n_points = n_points
        self.cell_type = cell_type

        ### Seed the topology with vertices, cells, and connectivity D - 0
        tdim = cell_type.dim
        n_vertices_per_cell = cells.shape[1]
        self.topology = TopologyStore(tdim)
        self.topology.init(0, n_points)
        self.topology.init(tdim, n_cells)
        self.topology.set_connectivity(
            tdim,
            0,
            Adjacency(
                offsets=torch.arange(
                    0,
                    n_cells * n_vertices_per_cell + 1,
                    n_vertices_per_cell,
                    dtype=torch.int64,
                    device=cells.device,
                ),
                indices=cells.reshape(-1),
            ),
        )

    @property
    def cells(self) -> torch.Tensor:
        """Cell-vertex connectivity, shape (n_cells, n_vertices_per_cell)."""
        return self._cells

    @property
    def n_cells(self) -> int:
        return self._cells.shape[0]

    @property
    def n_points(self) -> int:
        return self._n_points

    @property
    def n_manifold_dims(self) -> int:
        """Topological dimension of the cells."""
        return self.cell_type.dim

    @property
    def device(self) -> torch.device:
        return self._cells.device

    def compute_entities(self, dim: int) -> int:
        """Compute entities of dimension ``dim`` and return their number.

        See :func:`meshtopology.topology.compute_entities`.
        """
        return compute_entities(self, dim)

    def compute_connectivity(self, d0: int, d1: int) -> None:
        """Compute connectivity ``d0 - d1``.

        See :func:`meshtopology.topology.compute_connectivity`.
        """
        compute_connectivity(self, d0, d1)

    def compute_all_connectivity(self) -> None:
        """Compute all entities and all connectivity of the mesh."""
        compute_all_connectivity(self)

    def connectivity(self, d0: int, d1: int) -> Adjacency:
        """Return connectivity ``d0 - d1``, computing it if necessary."""
        compute_connectivity(self, d0, d1)
        return self.topology.connectivity(d0, d1)

    def entity(self, dim: int, index: int) -> MeshEntity:
        """Return a view of entity ``index`` of dimension ``dim``."""
        return MeshEntity(self, dim, index)

    def __repr__(self) -> str:
        return format_mesh_repr(self)
