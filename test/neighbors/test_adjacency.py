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

"""Tests for the offset-indices Adjacency structure and its builders."""

import pytest
import torch

from meshtopology.neighbors import (
    Adjacency,
    build_adjacency_from_pairs,
    build_adjacency_from_rows,
)


class TestAdjacency:
    def test_to_list_preserves_order(self, device):
        adj = Adjacency(
            offsets=torch.tensor([0, 3, 3, 5], device=device),
            indices=torch.tensor([2, 0, 1, 4, 3], device=device),
        )
        assert adj.to_list() == [[2, 0, 1], [], [4, 3]]
        assert adj.n_sources == 3
        assert adj.n_total_neighbors == 5
        assert adj.counts.tolist() == [3, 0, 2]

    def test_row(self, device):
        adj = build_adjacency_from_rows([[5, 1], [], [7]], device=device)
        assert adj.row(0).tolist() == [5, 1]
        assert adj.row(1).tolist() == []
        with pytest.raises(IndexError):
            adj.row(3)

    def test_expand_to_pairs(self, device):
        adj = build_adjacency_from_rows([[10, 11], [], [30]], device=device)
        sources, targets = adj.expand_to_pairs()
        assert sources.tolist() == [0, 0, 2]
        assert targets.tolist() == [10, 11, 30]

    @pytest.mark.parametrize(
        "offsets, indices, match",
        [
            ([], [], "length >= 1"),
            ([1, 2], [0, 1], "First offset must be 0"),
            ([0, 3], [0, 1], "Last offset must equal"),
        ],
    )
    def test_invalid_encoding(self, offsets, indices, match):
        with pytest.raises(ValueError, match=match):
            Adjacency(
                offsets=torch.tensor(offsets, dtype=torch.int64),
                indices=torch.tensor(indices, dtype=torch.int64),
            )


class TestBuilders:
    def test_from_rows(self, device):
        adj = build_adjacency_from_rows([[2, 0], [], [1]], device=device)
        assert adj.offsets.tolist() == [0, 2, 2, 3]
        assert adj.indices.dtype == torch.int64
        assert adj.indices.device.type == device

    def test_from_rows_empty(self):
        adj = build_adjacency_from_rows([])
        assert adj.n_sources == 0
        assert adj.to_list() == []

    def test_from_pairs_sorted(self, device):
        sources = torch.tensor([0, 0, 1, 3], device=device)
        targets = torch.tensor([2, 1, 3, 0], device=device)
        adj = build_adjacency_from_pairs(sources, targets, n_sources=4)
        assert adj.to_list() == [[1, 2], [3], [], [0]]

    def test_from_pairs_empty(self, device):
        empty = torch.zeros(0, dtype=torch.int64, device=device)
        adj = build_adjacency_from_pairs(empty, empty, n_sources=2)
        assert adj.to_list() == [[], []]
