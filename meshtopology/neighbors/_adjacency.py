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

"""Core data structure for storing ragged incidence relations between entities.

This module provides the Adjacency tensorclass used for every connectivity
``(d0, d1)`` of a mesh topology: row ``i`` lists the entities of dimension
``d1`` incident to entity ``i`` of dimension ``d0``, in stored order.
"""

from collections.abc import Sequence

import torch
from tensordict import tensorclass


@tensorclass
class Adjacency:
    """Ragged adjacency list stored with offset-indices encoding.

    This structure efficiently represents variable-length neighbor lists using two
    arrays: offsets and indices. Row order is significant and is never changed
    by any method of this class.

    Attributes:
        offsets: Indices into the indices array marking the start of each neighbor list.
            Shape (n_sources + 1,), dtype int64. The i-th source's neighbors are
            indices[offsets[i]:offsets[i+1]].
        indices: Flattened array of all neighbor indices.
            Shape (total_neighbors,), dtype int64.

    Examples
    --------
        >>> # Represent [[0,1,2], [3,4], [5], [6,7,8]]
        >>> adj = Adjacency(
        ...     offsets=torch.tensor([0, 3, 5, 6, 9]),
        ...     indices=torch.tensor([0, 1, 2, 3, 4, 5, 6, 7, 8]),
        ... )
        >>> adj.to_list()
        [[0, 1, 2], [3, 4], [5], [6, 7, 8]]

        >>> # Empty neighbor list for source 2
        >>> adj = Adjacency(
        ...     offsets=torch.tensor([0, 2, 2, 4]),
        ...     indices=torch.tensor([10, 11, 12, 13]),
        ... )
        >>> adj.to_list()
        [[10, 11], [], [12, 13]]
    """

    offsets: torch.Tensor  # shape: (n_sources + 1,), dtype: int64
    indices: torch.Tensor  # shape: (total_neighbors,), dtype: int64

    def __post_init__(self):
        if not torch.compiler.is_compiling():
            ### Validate offsets is non-empty
            # Offsets must have length (n_sources + 1), so minimum length is 1 (for n_sources=0)
            if len(self.offsets) < 1:
                raise ValueError(
                    f"Offsets array must have length >= 1 (n_sources + 1), but got {len(self.offsets)=}. "
                    f"Even for 0 sources, offsets should be [0]."
                )

            ### Validate offsets starts at 0
            if self.offsets[0].item() != 0:
                raise ValueError(
                    f"First offset must be 0, but got {self.offsets[0].item()=}. "
                    f"The offset-indices encoding requires offsets[0] == 0."
                )

            ### Validate last offset equals length of indices
            last_offset = self.offsets[-1].item()
            indices_length = len(self.indices)
            if last_offset != indices_length:
                raise ValueError(
                    f"Last offset must equal length of indices, but got "
                    f"{last_offset=} != {indices_length=}. "
                    f"The offset-indices encoding requires offsets[-1] == len(indices)."
                )

    def to_list(self) -> list[list[int]]:
        """Convert adjacency to a ragged list-of-lists representation.

        The order of neighbors within each sublist is preserved (not sorted).
        The topology builders use this to walk relations row by row.

        Returns
        -------
        list[list[int]]
            Ragged list where result[i] contains all neighbors of source i.
            Empty sublists represent sources with no neighbors.

        Examples
        --------
            >>> adj = Adjacency(
            ...     offsets=torch.tensor([0, 3, 3, 5]),
            ...     indices=torch.tensor([1, 2, 0, 4, 3]),
            ... )
            >>> adj.to_list()
            [[1, 2, 0], [], [4, 3]]
        """
        ### Convert to CPU Python lists once, then slice
        offsets_list = self.offsets.cpu().tolist()
        indices_list = self.indices.cpu().tolist()

        ### Build ragged list structure
        n_sources = len(offsets_list) - 1
        result = []
        for i in range(n_sources):
            start = offsets_list[i]
            end = offsets_list[i + 1]
            result.append(indices_list[start:end])

        return result

    def row(self, source: int) -> torch.Tensor:
        """Return the neighbors of a single source, in stored order.

        Parameters
        ----------
        source : int
            Source index in ``[0, n_sources)``.

        Returns
        -------
        torch.Tensor
            View into ``indices`` holding the neighbors of ``source``.

        Raises
        ------
        IndexError
            If ``source`` is out of range.

        Examples
        --------
            >>> adj = Adjacency(
            ...     offsets=torch.tensor([0, 3, 3, 5]),
            ...     indices=torch.tensor([1, 2, 0, 4, 3]),
            ... )
            >>> adj.row(2).tolist()
            [4, 3]
        """
        if not 0 <= source < self.n_sources:
            raise IndexError(
                f"Source index {source=} is out of range for {self.n_sources=}."
            )
        start = int(self.offsets[source].item())
        end = int(self.offsets[source + 1].item())
        return self.indices[start:end]

    @property
    def n_sources(self) -> int:
        """Number of source entities in the adjacency."""
        return len(self.offsets) - 1

    @property
    def n_total_neighbors(self) -> int:
        """Total number of neighbor relationships across all sources."""
        return len(self.indices)

    @property
    def counts(self) -> torch.Tensor:
        """Number of neighbors for each source element.

        Returns
        -------
        torch.Tensor
            Shape (n_sources,), dtype int64. counts[i] is the number of
            neighbors for source i.

        Example
        -------
        >>> adj = Adjacency(
        ...     offsets=torch.tensor([0, 3, 3, 5]),
        ...     indices=torch.tensor([1, 2, 0, 4, 3]),
        ... )
        >>> adj.counts.tolist()
        [3, 0, 2]
        """
        return self.offsets[1:] - self.offsets[:-1]

    def expand_to_pairs(self) -> tuple[torch.Tensor, torch.Tensor]:
        """Expand offset-indices encoding to (source_idx, target_idx) pairs.

        Pairs are emitted row by row, so ``source_indices`` is non-decreasing
        and targets keep their stored order within each row.

        Returns
        -------
        tuple[torch.Tensor, torch.Tensor]
            Tuple of (source_indices, target_indices), both shape (n_total_neighbors,).

        Examples
        --------
            >>> adj = Adjacency(
            ...     offsets=torch.tensor([0, 2, 4, 5]),
            ...     indices=torch.tensor([10, 11, 20, 21, 30]),
            ... )
            >>> sources, targets = adj.expand_to_pairs()
            >>> sources.tolist()
            [0, 0, 1, 1, 2]
            >>> targets.tolist()
            [10, 11, 20, 21, 30]
        """
        device = self.offsets.device

        ### Handle empty adjacency
        if self.n_total_neighbors == 0:
            return (
                torch.tensor([], dtype=torch.int64, device=device),
                self.indices,
            )

        ### For each position in indices, find which source it belongs to
        # offsets[i] <= position < offsets[i+1] means position belongs to source i
        # searchsorted(offsets, position, right=True) - 1 gives source index
        positions = torch.arange(
            self.n_total_neighbors, dtype=torch.int64, device=device
        )
        source_indices = torch.searchsorted(self.offsets, positions, right=True) - 1

        return source_indices, self.indices


def build_adjacency_from_rows(
    rows: Sequence[Sequence[int]],
    device: torch.device | str | None = None,
) -> Adjacency:
    """Build offset-index adjacency from a ragged list of rows.

    Row order and the order of entries within each row are preserved.

    Parameters
    ----------
    rows : Sequence[Sequence[int]]
        ``rows[i]`` holds the neighbors of source ``i``.
    device : torch.device | str | None, optional
        Device of the resulting tensors.

    Returns
    -------
    Adjacency
        Adjacency with ``adjacency.to_list() == [list(r) for r in rows]``.

    Examples
    --------
        >>> adj = build_adjacency_from_rows([[2, 0], [], [1]])
        >>> adj.offsets.tolist()
        [0, 2, 2, 3]
        >>> adj.to_list()
        [[2, 0], [], [1]]
    """
    counts = torch.tensor([len(r) for r in rows], dtype=torch.int64, device=device)
    offsets = torch.zeros(len(rows) + 1, dtype=torch.int64, device=device)
    if len(rows) > 0:
        offsets[1:] = torch.cumsum(counts, dim=0)

    flat = [index for r in rows for index in r]
    indices = torch.tensor(flat, dtype=torch.int64, device=device)

    return Adjacency(offsets=offsets, indices=indices)


def build_adjacency_from_pairs(
    source_indices: torch.Tensor,  # shape: (n_pairs,)
    target_indices: torch.Tensor,  # shape: (n_pairs,)
    n_sources: int,
) -> Adjacency:
    """Build offset-index adjacency from (source, target) pairs.

    Algorithm:
        1. Sort pairs by source index (then by target for consistency)
        2. Use bincount to count neighbors per source
        3. Use cumsum to compute offsets
        4. Return Adjacency with sorted neighbor lists

    Parameters
    ----------
    source_indices : torch.Tensor
        Source entity indices, shape (n_pairs,)
    target_indices : torch.Tensor
        Target entity (neighbor) indices, shape (n_pairs,)
    n_sources : int
        Total number of source entities (may exceed max(source_indices))

    Returns
    -------
    Adjacency
        Adjacency object where adjacency.to_list()[i] contains all targets
        connected from source i, sorted ascending.

    Examples
    --------
        >>> sources = torch.tensor([0, 0, 1, 3])
        >>> targets = torch.tensor([2, 1, 3, 0])
        >>> adj = build_adjacency_from_pairs(sources, targets, n_sources=4)
        >>> adj.to_list()
        [[1, 2], [3], [], [0]]
    """
    device = source_indices.device

    ### Handle empty pairs
    if len(source_indices) == 0:
        return Adjacency(
            offsets=torch.zeros(n_sources + 1, dtype=torch.int64, device=device),
            indices=torch.zeros(0, dtype=torch.int64, device=device),
        )

    ### Lexicographic sort by (source, target) using two stable argsorts.
    sort_by_target = torch.argsort(target_indices, stable=True)
    sort_indices = sort_by_target[
        torch.argsort(source_indices[sort_by_target], stable=True)
    ]

    sorted_sources = source_indices[sort_indices]
    sorted_targets = target_indices[sort_indices]

    ### Compute offsets for each source
    offsets = torch.zeros(n_sources + 1, dtype=torch.int64, device=device)
    source_counts = torch.bincount(sorted_sources, minlength=n_sources)
    offsets[1:] = torch.cumsum(source_counts, dim=0)

    return Adjacency(
        offsets=offsets,
        indices=sorted_targets,
    )
