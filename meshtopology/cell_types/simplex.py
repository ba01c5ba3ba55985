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

"""Simplex cell types (intervals, triangles, tetrahedra, ...).

The sub-entities of dimension ``d`` of an n-simplex are all of its
``(d + 1)``-vertex subsets, of which there are C(n+1, d+1).
"""

from functools import cache
from itertools import combinations

from meshtopology.cell_types._base import CellType

_SIMPLEX_NAMES = {1: "interval", 2: "triangle", 3: "tetrahedron"}


@cache
def _combination_indices(n: int, k: int) -> tuple[tuple[int, ...], ...]:
    """All combinations of k local vertices out of n, in lexicographic order.

    Examples
    --------
    >>> _combination_indices(3, 2)
    ((0, 1), (0, 2), (1, 2))
    """
    return tuple(combinations(range(n), k))


class SimplexCell(CellType):
    """An n-simplex with ``n + 1`` vertices.

    Parameters
    ----------
    dim : int
        Topological dimension of the simplex, ``dim >= 1``.

    Examples
    --------
    >>> triangle = SimplexCell(2)
    >>> triangle.local_count(1), triangle.local_vertex_count(1)
    (3, 2)
    >>> triangle.decompose([7, 3, 5], 1)
    [(7, 3), (7, 5), (3, 5)]
    """

    def __init__(self, dim: int) -> None:
        if dim < 1:
            raise ValueError(f"Simplex dimension must be >= 1, got {dim=}.")
        self.dim = dim
        self.name = _SIMPLEX_NAMES.get(dim, f"simplex{dim}")

    def local_entities(self, dim: int) -> tuple[tuple[int, ...], ...]:
        self._check_dim(dim)
        return _combination_indices(self.dim + 1, dim + 1)
