"""User collection operations."""
from __future__ import annotations
from typing import List, Optional, Union

from .base import ResourceCollection, build_query


class UserService(ResourceCollection):
    """Service for the ``/usuarios`` collection as seen by the user list."""

    endpoint = "/usuarios"

    def get_users(self) -> None:
        """Replace the local collection with every user on the server."""
        self._fetch(self.endpoint)

    def search_user(
        self,
        username: str = "",
        nome: str = "",
        status: Union[str, bool, None] = "",
    ) -> List[dict]:
        """Search users by username, display name and status.

        Args:
            username: Username filter
            nome: Display name filter
            status: Status code; booleans are sent as "true"/"false"

        Returns:
            Users returned by the server (also stored locally)
        """
        endpoint = build_query(
            self.endpoint,
            [("username", username), ("nome", nome), ("status", status)],
        )
        return self._fetch(endpoint)

    def delete_user(self, user_id: str) -> Optional[dict]:
        return self._remove(user_id)
