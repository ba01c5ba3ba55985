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

"""Tests for the per-mesh topology store."""

import pytest

from meshtopology import TopologyInconsistency
from meshtopology.neighbors import build_adjacency_from_rows
from meshtopology.topology import TopologyStore


class TestEntities:
    def test_initially_empty(self):
        store = TopologyStore(dim=2)
        assert store.computed_dims == []
        assert not store.has_entities(0)
        assert store.size(1) == 0

    def test_init(self):
        store = TopologyStore(dim=3)
        store.init(3, 4)
        store.init(0, 0)
        assert store.size(3) == 4
        assert store.has_entities(0)
        assert store.computed_dims == [0, 3]

    def test_init_twice(self):
        store = TopologyStore(dim=2)
        store.init(1, 5)
        with pytest.raises(TopologyInconsistency, match="already been") as e:
            store.init(1, 5)
        assert e.value.dim == 1

    def test_negative_size(self):
        with pytest.raises(ValueError, match="non-negative"):
            TopologyStore(dim=2).init(1, -1)

    @pytest.mark.parametrize("dim", [-1, 3])
    def test_dimension_out_of_range(self, dim):
        with pytest.raises(ValueError, match="out of range"):
            TopologyStore(dim=2).has_entities(dim)

    def test_zero_dimensional(self):
        with pytest.raises(ValueError, match="must be >= 1"):
            TopologyStore(dim=0)


class TestConnectivity:
    def test_set_and_get(self):
        store = TopologyStore(dim=2)
        store.init(2, 2)
        adjacency = build_adjacency_from_rows([[0, 1, 2], [1, 2, 3]])
        store.set_connectivity(2, 0, adjacency)

        assert store.has_connectivity(2, 0)
        assert store.connectivity(2, 0) is adjacency
        assert store.get_connectivity(0, 2) is None
        assert store.computed_pairs == [(2, 0)]

    def test_missing(self):
        store = TopologyStore(dim=2)
        with pytest.raises(TopologyInconsistency, match="has not been computed") as e:
            store.connectivity(1, 0)
        assert e.value.pair == (1, 0)

    def test_requires_source_entities(self):
        store = TopologyStore(dim=2)
        with pytest.raises(TopologyInconsistency, match="before entities"):
            store.set_connectivity(1, 0, build_adjacency_from_rows([[0, 1]]))

    def test_row_count_mismatch(self):
        store = TopologyStore(dim=2)
        store.init(2, 3)
        with pytest.raises(TopologyInconsistency, match="has 1 rows"):
            store.set_connectivity(2, 0, build_adjacency_from_rows([[0, 1, 2]]))

    def test_write_once(self):
        store = TopologyStore(dim=1)
        store.init(1, 1)
        store.set_connectivity(1, 0, build_adjacency_from_rows([[0, 1]]))
        with pytest.raises(TopologyInconsistency, match="already been computed"):
            store.set_connectivity(1, 0, build_adjacency_from_rows([[1, 0]]))

    def test_repr(self):
        store = TopologyStore(dim=2)
        store.init(0, 3)
        store.init(2, 1)
        store.set_connectivity(2, 0, build_adjacency_from_rows([[0, 1, 2]]))
        assert repr(store) == (
            "TopologyStore(dim=2, sizes={0: 3, 2: 1}, connectivity=[2-0])"
        )
