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

"""Tests for cell type decompositions and the cell type registry."""

import pytest
import torch

from meshtopology import Mesh
from meshtopology.cell_types import (
    HEXAHEDRON,
    QUADRILATERAL,
    CellTypeRegistry,
    SimplexCell,
    TensorProductCell,
    get_cell_type,
    register_cell_type,
)


@pytest.fixture
def clean_registry():
    """Restore the built-in cell types after a test that mutates the registry."""
    registry = CellTypeRegistry()
    yield registry
    registry.__restore_registry__()


class TestSimplexCell:
    @pytest.mark.parametrize(
        "dim, counts",
        [
            (1, [2, 1]),
            (2, [3, 3, 1]),
            (3, [4, 6, 4, 1]),
        ],
    )
    def test_local_counts(self, dim, counts):
        cell = SimplexCell(dim)
        assert [cell.local_count(d) for d in range(dim + 1)] == counts
        assert [cell.local_vertex_count(d) for d in range(dim + 1)] == [
            d + 1 for d in range(dim + 1)
        ]

    def test_names(self):
        assert SimplexCell(1).name == "interval"
        assert SimplexCell(2).name == "triangle"
        assert SimplexCell(3).name == "tetrahedron"

    def test_lexicographic_order(self):
        assert SimplexCell(3).local_entities(2) == (
            (0, 1, 2),
            (0, 1, 3),
            (0, 2, 3),
            (1, 2, 3),
        )

    def test_decompose(self):
        assert SimplexCell(2).decompose([7, 3, 5], 1) == [(7, 3), (7, 5), (3, 5)]
        assert SimplexCell(2).decompose([7, 3, 5], 2) == [(7, 3, 5)]

    def test_decompose_wrong_vertex_count(self):
        with pytest.raises(ValueError, match="expects 3 vertices"):
            SimplexCell(2).decompose([0, 1], 1)

    def test_invalid_dimension(self):
        with pytest.raises(ValueError):
            SimplexCell(0)
        with pytest.raises(ValueError, match="out of range"):
            SimplexCell(2).local_entities(3)


class TestTensorProductCells:
    def test_quadrilateral(self):
        assert QUADRILATERAL.dim == 2
        assert QUADRILATERAL.n_vertices == 4
        assert QUADRILATERAL.local_count(1) == 4

    def test_hexahedron(self):
        assert HEXAHEDRON.dim == 3
        assert [HEXAHEDRON.local_count(d) for d in range(4)] == [8, 12, 6, 1]
        assert HEXAHEDRON.local_vertex_count(2) == 4

    def test_hexahedron_faces_are_bounded_by_edges(self):
        """Each local face contains exactly four local edges."""
        edges = HEXAHEDRON.local_entities(1)
        for face in HEXAHEDRON.local_entities(2):
            assert sum(set(e) <= set(face) for e in edges) == 4


class TestRegistry:
    def test_builtins(self):
        names = CellTypeRegistry().list_cell_types()
        for name in [
            "interval",
            "triangle",
            "tetrahedron",
            "quadrilateral",
            "hexahedron",
        ]:
            assert name in names

    def test_lookup(self):
        assert get_cell_type("hexahedron") is HEXAHEDRON
        assert get_cell_type("triangle").dim == 2

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="No cell type"):
            get_cell_type("pyramid")

    def test_shared_state(self):
        assert CellTypeRegistry().__dict__ is CellTypeRegistry().__dict__

    def test_register_custom(self, clean_registry, device):
        """A custom cell type can be used by name once registered."""
        ring_segment = TensorProductCell(
            "ring_segment",
            (
                ((0,), (1,), (2,), (3,)),
                ((0, 1), (1, 2), (2, 3), (0, 3)),
                ((0, 1, 2, 3),),
            ),
        )
        register_cell_type(ring_segment)
        mesh = Mesh(
            cells=torch.tensor([[0, 1, 2, 3]], device=device),
            cell_type="ring_segment",
        )
        assert mesh.compute_entities(1) == 4

    def test_register_duplicate(self, clean_registry):
        with pytest.raises(ValueError, match="already in use"):
            register_cell_type(SimplexCell(2))

    def test_restore_drops_custom_types(self, clean_registry):
        register_cell_type(SimplexCell(2), name="custom_triangle")
        assert "custom_triangle" in clean_registry.list_cell_types()
        clean_registry.__restore_registry__()
        assert "custom_triangle" not in clean_registry.list_cell_types()
        assert "triangle" in clean_registry.list_cell_types()


class TestMeshConstruction:
    def test_infers_simplex(self):
        mesh = Mesh(cells=[[0, 1, 2, 3]])
        assert mesh.cell_type.name == "tetrahedron"
        assert mesh.n_manifold_dims == 3

    def test_explicit_type_instance(self):
        mesh = Mesh(cells=torch.tensor([[0, 1, 2, 3]]), cell_type=QUADRILATERAL)
        assert mesh.n_manifold_dims == 2

    def test_column_mismatch(self):
        with pytest.raises(ValueError, match="has 8 vertices"):
            Mesh(cells=torch.tensor([[0, 1, 2, 3]]), cell_type="hexahedron")

    def test_float_cells(self):
        with pytest.raises(TypeError, match="integer dtype"):
            Mesh(cells=torch.tensor([[0.0, 1.0]]))

    def test_not_two_dimensional(self):
        with pytest.raises(ValueError, match="must have shape"):
            Mesh(cells=torch.tensor([0, 1, 2]))

    def test_point_cells_rejected(self):
        with pytest.raises(ValueError, match="dimension >= 1"):
            Mesh(cells=torch.tensor([[0], [1]]))

    def test_vertex_out_of_range(self):
        with pytest.raises(ValueError, match="must be in range"):
            Mesh(cells=torch.tensor([[0, 1, 5]]), n_points=4)

    def test_negative_vertex(self):
        with pytest.raises(ValueError, match="must be in range"):
            Mesh(cells=torch.tensor([[0, -1, 2]]))

    def test_repeated_vertex_rejected(self):
        """A cell listing a vertex twice would yield duplicate entities."""
        with pytest.raises(ValueError, match="distinct vertices"):
            Mesh(cells=[[0, 1, 1]])

    def test_repeated_vertex_reports_cells(self):
        with pytest.raises(ValueError, match=r"\[1, 2\]"):
            Mesh(cells=torch.tensor([[0, 1, 2], [2, 3, 2], [4, 4, 5]]))

    def test_seeded_topology(self):
        mesh = Mesh(cells=torch.tensor([[0, 1, 2], [1, 2, 3]]), n_points=6)
        assert mesh.topology.size(0) == 6
        assert mesh.topology.size(2) == 2
        assert mesh.topology.computed_pairs == [(2, 0)]
