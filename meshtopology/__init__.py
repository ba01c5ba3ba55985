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

Given the vertices of each cell, entities of every dimension (edges, faces,
...) and the incidence relations between them are derived lazily and cached
on the mesh.
"""

from meshtopology.cell_types import CellType, get_cell_type, register_cell_type
from meshtopology.mesh import Mesh
from meshtopology.topology import (
    MeshEntity,
    TopologyInconsistency,
    compute_all_connectivity,
    compute_connectivity,
    compute_entities,
    iter_entities,
)
from meshtopology.validation import validate_topology

__version__ = "0.1.0a0"
