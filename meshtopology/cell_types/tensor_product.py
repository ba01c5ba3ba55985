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

"""Tensor-product cell types (quadrilaterals and hexahedra).

Vertices use tensor-product numbering: local vertex ``i`` sits at
``(i & 1, (i >> 1) & 1, (i >> 2) & 1)`` of the reference cell, so the
quadrilateral is ordered (0,0), (1,0), (0,1), (1,1) rather than
counter-clockwise.
"""

from meshtopology.cell_types._base import CellType


class TensorProductCell(CellType):
    """Cell type defined by explicit tables of local sub-entities.

    Parameters
    ----------
    name : str
        Registry name of the cell type.
    entities : tuple[tuple[tuple[int, ...], ...], ...]
        ``entities[d]`` lists the local vertices of each sub-entity of
        dimension ``d``; the last entry is the cell itself.
    """

    def __init__(
        self, name: str, entities: tuple[tuple[tuple[int, ...], ...], ...]
    ) -> None:
        self.name = name
        self.dim = len(entities) - 1
        self._entities = entities

    def local_entities(self, dim: int) -> tuple[tuple[int, ...], ...]:
        self._check_dim(dim)
        return self._entities[dim]


QUADRILATERAL = TensorProductCell(
    "quadrilateral",
    (
        ((0,), (1,), (2,), (3,)),
        ((0, 1), (0, 2), (1, 3), (2, 3)),
        ((0, 1, 2, 3),),
    ),
)

HEXAHEDRON = TensorProductCell(
    "hexahedron",
    (
        tuple((i,) for i in range(8)),
        (
            (0, 1),
            (0, 2),
            (0, 4),
            (1, 3),
            (1, 5),
            (2, 3),
            (2, 6),
            (3, 7),
            (4, 5),
            (4, 6),
            (5, 7),
            (6, 7),
        ),
        (
            (0, 1, 2, 3),
            (0, 1, 4, 5),
            (0, 2, 4, 6),
            (1, 3, 5, 7),
            (2, 3, 6, 7),
            (4, 5, 6, 7),
        ),
        ((0, 1, 2, 3, 4, 5, 6, 7),),
    ),
)
