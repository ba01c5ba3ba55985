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

"""Cell types: how a cell decomposes into lower-dimensional sub-entities.

Built-in types are registered under the names ``"interval"``, ``"triangle"``,
``"tetrahedron"``, ``"quadrilateral"`` and ``"hexahedron"``.
"""

from meshtopology.cell_types._base import CellType
from meshtopology.cell_types.registry import (
    CellTypeRegistry,
    get_cell_type,
    register_cell_type,
)
from meshtopology.cell_types.simplex import SimplexCell
from meshtopology.cell_types.tensor_product import (
    HEXAHEDRON,
    QUADRILATERAL,
    TensorProductCell,
)
