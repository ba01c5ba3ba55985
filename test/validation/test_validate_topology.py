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

"""Tests for topology validation and statistics."""

import pytest
import torch

from meshtopology import Mesh, TopologyInconsistency, validate_topology
from meshtopology.neighbors import build_adjacency_from_rows
from meshtopology.validation import compute_topology_statistics


class TestValidTopology:
    """Computed topology always passes validation."""

    @pytest.mark.parametrize(
        "mesh_fixture",
        [
            "two_triangles",
            "two_tetrahedra",
            "polyline",
            "quad_strip",
            "single_hexahedron",
            "triangle_fan",
        ],
    )
    def test_fully_computed(self, mesh_fixture, request, device):
        mesh = request.getfixturevalue(mesh_fixture)
        mesh.compute_all_connectivity()
        report = validate_topology(mesh, raise_on_error=True)
        assert report["valid"]
        assert report["inconsistent_dims"] == []
        assert report["out_of_bounds_pairs"] == []
        assert report["duplicate_entities"] == []
        assert report["non_inverse_pairs"] == []

    def test_partially_computed(self, two_triangles):
        """Only what has been computed is checked; nothing new is computed."""
        report = validate_topology(two_triangles)
        assert report["valid"]
        assert two_triangles.topology.computed_pairs == [(2, 0)]

    def test_disabled_checks_not_reported(self, two_triangles):
        report = validate_topology(
            two_triangles, check_duplicates=False, check_inverses=False
        )
        assert "duplicate_entities" not in report
        assert "non_inverse_pairs" not in report


class TestCorruptedTopology:
    """Hand-corrupted stores are detected."""

    def test_duplicate_entities(self, two_triangles, device):
        topology = two_triangles.topology
        topology.init(1, 2)
        topology.set_connectivity(
            1, 0, build_adjacency_from_rows([[0, 1], [1, 0]], device=device)
        )
        topology.set_connectivity(
            2, 1, build_adjacency_from_rows([[0, 1], [0, 1]], device=device)
        )
        report = validate_topology(two_triangles)
        assert not report["valid"]
        assert report["duplicate_entities"] == [(1, 0, 1)]

    def test_entities_without_connectivity(self, two_triangles):
        two_triangles.topology.init(1, 5)
        report = validate_topology(two_triangles)
        assert not report["valid"]
        assert report["inconsistent_dims"] == [1]

    def test_out_of_bounds(self, two_triangles, device):
        topology = two_triangles.topology
        topology.init(1, 1)
        topology.set_connectivity(
            1, 0, build_adjacency_from_rows([[0, 7]], device=device)
        )
        topology.set_connectivity(
            2, 1, build_adjacency_from_rows([[0], [0]], device=device)
        )
        report = validate_topology(two_triangles)
        assert report["out_of_bounds_pairs"] == [(1, 0)]

    def test_not_inverse(self, two_triangles, device):
        two_triangles.topology.set_connectivity(
            0, 2, build_adjacency_from_rows([[0], [0], [0, 1], [1]], device=device)
        )
        report = validate_topology(two_triangles)
        assert not report["valid"]
        assert report["non_inverse_pairs"] == [(0, 2)]

    def test_raise_on_error(self, two_triangles):
        two_triangles.topology.init(1, 5)
        with pytest.raises(TopologyInconsistency, match="connectivity is missing"):
            validate_topology(two_triangles, raise_on_error=True)


class TestStatistics:
    def test_counts_and_degrees(self, two_triangles):
        two_triangles.compute_connectivity(0, 2)
        stats = compute_topology_statistics(two_triangles)
        assert stats["n_entities_0"] == 4
        assert stats["n_entities_2"] == 2
        assert stats["max_degree_2_0"] == 3
        assert stats["max_degree_0_2"] == 2

    def test_empty_mesh(self):
        mesh = Mesh(cells=torch.zeros((0, 3), dtype=torch.int64))
        stats = compute_topology_statistics(mesh)
        assert stats["max_degree_2_0"] == 0
