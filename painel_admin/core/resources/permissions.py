"""Permission (permissao) collection operations."""
from __future__ import annotations
from typing import List, Optional

from .base import ResourceCollection, build_query


class PermissionService(ResourceCollection):
    """Service for the ``/permissoes`` collection."""

    endpoint = "/permissoes"

    def get_permissions(self) -> None:
        """Replace the local collection with every permission on the server."""
        self._fetch(self.endpoint)

    def search_permission(self, descricao: str = "") -> List[dict]:
        """Search permissions by description.

        Returns:
            Permissions returned by the server (also stored locally)
        """
        return self._fetch(build_query(self.endpoint, [("descricao", descricao)]))

    def add_permission(self, new_permission: dict) -> dict:
        return self._create(new_permission)

    def edit_permission(self, permission_id: str, new_permission: dict) -> dict:
        return self._update(permission_id, new_permission)

    def delete_permission(self, permission_id: str) -> Optional[dict]:
        return self._remove(permission_id)
