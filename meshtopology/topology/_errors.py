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

"""Error type raised when a mesh topology store is internally inconsistent."""

from __future__ import annotations


class TopologyInconsistency(RuntimeError):
    """Raised when entities and connectivity of a mesh disagree.

    This signals an internal error (a corrupted store or a malformed cell
    type), never bad user input, so callers should not retry the computation.

    Parameters
    ----------
    message : str
        Human-readable description of the inconsistency.
    dim : int | None, optional
        Topological dimension involved, if any.
    pair : tuple[int, int] | None, optional
        Connectivity pair ``(d0, d1)`` involved, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        dim: int | None = None,
        pair: tuple[int, int] | None = None,
    ) -> None:
        super().__init__(message)
        self.dim = dim
        self.pair = pair
