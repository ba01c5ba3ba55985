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

"""Set-membership tests over vertex-index lists."""

from collections.abc import Sequence


def is_subset(candidate: Sequence[int], reference: Sequence[int]) -> bool:
    """Check whether every vertex of ``candidate`` appears in ``reference``.

    Parameters
    ----------
    candidate : Sequence[int]
        Vertex indices that must all be present.
    reference : Sequence[int]
        Vertex indices to search in. Order does not matter.

    Returns
    -------
    bool
        True if ``candidate`` is contained in ``reference``.

    Examples
    --------
    >>> is_subset([2, 1], [0, 1, 2])
    True
    >>> is_subset([1, 3], [0, 1, 2])
    False
    """
    for vertex in candidate:
        if vertex not in reference:
            return False
    return True


def has_same_vertices(a: Sequence[int], b: Sequence[int]) -> bool:
    """Check whether two vertex lists describe the same unordered vertex set.

    Examples
    --------
    >>> has_same_vertices((1, 2), (2, 1))
    True
    >>> has_same_vertices((1, 2), (1, 2, 3))
    False
    """
    return len(a) == len(b) and is_subset(a, b) and is_subset(b, a)
