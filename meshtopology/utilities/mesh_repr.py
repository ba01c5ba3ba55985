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

"""Utility functions for string-formatting Mesh representations."""


def format_mesh_repr(mesh) -> str:
    """Format a complete Mesh representation.

    The first line lists the key properties of the mesh; the following lines
    summarize what has been computed so far in its topology.

    Parameters
    ----------
    mesh : Mesh
        The Mesh instance to format.

    Returns
    -------
    str
        Formatted string representation of the mesh.
    """
    ### Build the first line with class name and key properties
    class_name = mesh.__class__.__name__
    parts = [
        f"cell_type={mesh.cell_type.name}",
        f"manifold_dim={mesh.n_manifold_dims}",
        f"n_points={mesh.n_points}",
        f"n_cells={mesh.n_cells}",
    ]
    if mesh.device.type != "cpu":
        parts.append(f"device={mesh.device}")

    first_line = f"{class_name}({', '.join(parts)})"

    ### Format the topology fields with aligned colons
    topology = mesh.topology
    fields = {
        "entities": _format_entity_counts(topology),
        "connectivity": _format_connectivity_pairs(topology),
    }
    max_field_len = max(len(field) for field in fields)

    lines = [first_line]
    for field_name, formatted in fields.items():
        padded_field = field_name.ljust(max_field_len)
        lines.append(f"    {padded_field}: {formatted}")

    return "\n".join(lines)


def _format_entity_counts(topology) -> str:
    """Format entity counts as ``{dim: count, ...}`` for computed dimensions."""
    items = [f"{dim}: {topology.size(dim)}" for dim in topology.computed_dims]
    return "{" + ", ".join(items) + "}"


def _format_connectivity_pairs(topology) -> str:
    """Format computed connectivity pairs as ``[d0-d1, ...]``."""
    items = [f"{d0}-{d1}" for d0, d1 in topology.computed_pairs]
    return "[" + ", ".join(items) + "]"
