"""Administrator collection operations.

Admins share the ``/usuarios`` endpoint with regular users but are tracked
in their own collection, which only add/edit/delete touch.
"""
from __future__ import annotations
from typing import Optional

from .base import ResourceCollection


class AdminService(ResourceCollection):
    endpoint = "/usuarios"

    def add_admin(self, new_admin: dict) -> dict:
        return self._create(new_admin)

    def edit_admin(self, admin_id: str, new_admin: dict) -> dict:
        return self._update(admin_id, new_admin)

    def delete_admin(self, admin_id: str) -> Optional[dict]:
        return self._remove(admin_id)
