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

from __future__ import annotations

from typing import Dict, List, Union

from meshtopology.cell_types._base import CellType
from meshtopology.cell_types.simplex import SimplexCell
from meshtopology.cell_types.tensor_product import HEXAHEDRON, QUADRILATERAL


# Borg singleton pattern: every instance shares the same registry state
class CellTypeRegistry:
    _shared_state = {"_cell_type_registry": None}

    def __new__(cls, *args, **kwargs):
        obj = super(CellTypeRegistry, cls).__new__(cls)
        obj.__dict__ = cls._shared_state
        if cls._shared_state["_cell_type_registry"] is None:
            cls._shared_state["_cell_type_registry"] = cls._construct_registry()
        return obj

    @staticmethod
    def _construct_registry() -> Dict[str, CellType]:
        registry: Dict[str, CellType] = {}
        for cell_type in (
            SimplexCell(1),
            SimplexCell(2),
            SimplexCell(3),
            QUADRILATERAL,
            HEXAHEDRON,
        ):
            registry[cell_type.name] = cell_type
        return registry

    def register(self, cell_type: CellType, name: Union[str, None] = None) -> None:
        """
        Registers a cell type under the provided name. If no name is provided,
        the cell type's ``name`` attribute is used.

        Parameters
        ----------
        cell_type : CellType
            The cell type instance to be registered.
        name : str, optional
            The name to register the cell type under.

        Raises
        ------
        ValueError
            If the provided name is already in use in the registry.
        """
        if name is None:
            name = cell_type.name

        if name in self._cell_type_registry:
            raise ValueError(
                f"Name {name} already in use.\n"
                f"Current registered cell types are: {sorted(self.list_cell_types())}"
            )

        self._cell_type_registry[name] = cell_type

    def factory(self, name: str) -> CellType:
        """
        Returns a registered cell type given its name.

        Parameters
        ----------
        name : str
            The name of the registered cell type.

        Returns
        -------
        CellType
            The registered cell type.

        Raises
        ------
        KeyError
            If no cell type is registered under the provided name.
        """
        cell_type = self._cell_type_registry.get(name)
        if cell_type is None:
            raise KeyError(
                f"No cell type is registered under the name {name!r}.\n"
                f"Current registered cell types are: {sorted(self.list_cell_types())}"
            )
        return cell_type

    def list_cell_types(self) -> List[str]:
        """
        Returns a list of the names of all registered cell types.
        """
        return list(self._cell_type_registry.keys())

    def __restore_registry__(self):
        # NOTE: This is only used for testing purposes
        self._cell_type_registry.clear()
        self._cell_type_registry.update(self._construct_registry())


def get_cell_type(name: str) -> CellType:
    """Look up a registered cell type by name."""
    return CellTypeRegistry().factory(name)


def register_cell_type(cell_type: CellType, name: Union[str, None] = None) -> None:
    """Register a custom cell type so meshes can refer to it by name."""
    CellTypeRegistry().register(cell_type, name)
