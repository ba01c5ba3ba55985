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

"""Topology computation for unstructured meshes.

Starting from cell-vertex incidence only, this module derives the entities of
every topological dimension (edges, faces, ...) and the connectivity between
any two dimensions. Everything is computed lazily, at most once per mesh, and
cached in the mesh's :class:`TopologyStore`.
"""

from meshtopology.topology._connectivity import (
    compute_all_connectivity,
    compute_connectivity,
)
from meshtopology.topology._containment import has_same_vertices, is_subset
from meshtopology.topology._entities import compute_entities
from meshtopology.topology._entity import MeshEntity, iter_entities
from meshtopology.topology._errors import TopologyInconsistency
from meshtopology.topology._intersection import compute_from_intersection
from meshtopology.topology._store import TopologyStore
from meshtopology.topology._transpose import (
    compute_from_transpose,
    transpose_adjacency,
)
