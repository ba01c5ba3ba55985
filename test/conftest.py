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

"""Pytest configuration and shared fixtures for meshtopology tests.

All fixtures defined here are automatically available to all test files
without explicit imports.
"""

import pytest
import torch

from meshtopology import Mesh

### Pytest Hooks ###


def pytest_configure(config):
    """Register custom pytest markers used in mesh topology tests."""
    config.addinivalue_line(
        "markers", "cuda: mark test as requiring CUDA (skipped if unavailable)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (for optional exclusion)"
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests marked with 'cuda' if CUDA is not available."""
    if torch.cuda.is_available():
        return  # CUDA available, run all tests

    skip_cuda = pytest.mark.skip(reason="CUDA not available")
    for item in items:
        if "cuda" in item.keywords:
            item.add_marker(skip_cuda)


### Pytest Fixtures ###


@pytest.fixture(
    params=[
        "cpu",
        pytest.param("cuda", marks=pytest.mark.cuda),
    ]
)
def device(request):
    """Parametrize tests over all available devices (CPU, CUDA).

    CUDA tests are automatically skipped if CUDA is not available via
    the pytest_collection_modifyitems hook.
    """
    return request.param


@pytest.fixture
def two_triangles(device):
    """Two triangles sharing the edge {1, 2}."""
    cells = torch.tensor([[0, 1, 2], [1, 2, 3]], device=device, dtype=torch.int64)
    return Mesh(cells=cells)


@pytest.fixture
def two_tetrahedra(device):
    """Two tetrahedra sharing the face {1, 2, 3}."""
    cells = torch.tensor(
        [[0, 1, 2, 3], [1, 2, 3, 4]], device=device, dtype=torch.int64
    )
    return Mesh(cells=cells)


@pytest.fixture
def polyline(device):
    """Three intervals forming an open chain 0 - 1 - 2 - 3."""
    cells = torch.tensor([[0, 1], [1, 2], [2, 3]], device=device, dtype=torch.int64)
    return Mesh(cells=cells)


@pytest.fixture
def quad_strip(device):
    """Two quadrilaterals sharing the edge {1, 4} (tensor-product numbering).

    Vertex layout::

        3 -- 4 -- 5
        |    |    |
        0 -- 1 -- 2
    """
    cells = torch.tensor(
        [[0, 1, 3, 4], [1, 2, 4, 5]], device=device, dtype=torch.int64
    )
    return Mesh(cells=cells, cell_type="quadrilateral")


@pytest.fixture
def single_hexahedron(device):
    """A single hexahedron with vertices 0 .. 7."""
    cells = torch.arange(8, device=device, dtype=torch.int64).unsqueeze(0)
    return Mesh(cells=cells, cell_type="hexahedron")


@pytest.fixture
def triangle_fan(device):
    """Four triangles around the interior vertex 0 (a closed fan)."""
    cells = torch.tensor(
        [[0, 1, 2], [0, 2, 3], [0, 3, 4], [0, 4, 1]],
        device=device,
        dtype=torch.int64,
    )
    return Mesh(cells=cells)
