"""Shared request building and collection bookkeeping for resource handlers."""
from __future__ import annotations
import json
import logging
from typing import Any, Callable, Iterable, List, Optional, Tuple
from urllib.parse import urlencode

from ..api.client import ApiRequest, RequestConfig
from ..api.exceptions import FailureKind, RequestFailedError

logger = logging.getLogger(__name__)

Transport = Callable[[ApiRequest], Any]

EDIT_APPEND = "append"
EDIT_REPLACE = "replace"
EDIT_STRATEGIES = (EDIT_APPEND, EDIT_REPLACE)


def build_query(endpoint: str, params: Iterable[Tuple[str, Any]]) -> str:
    """Append a query string made of the non-empty parameters.

    String values are trimmed; empty values are left out entirely so an
    omitted filter never turns into ``nome=``.
    """
    pairs = []
    for key, value in params:
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        value = str(value).strip()
        if value:
            pairs.append((key, value))
    if not pairs:
        return endpoint
    return f"{endpoint}?{urlencode(pairs)}"


class ResourceCollection:
    """In-memory collection of one resource kind plus its request helpers.

    Subclasses set ``endpoint`` and expose the actions the backend supports
    for that resource. Every action goes through ``_send`` so failures are
    logged and re-raised the same way, and the collection is only touched
    after a successful response.
    """

    endpoint: str = ""

    def __init__(self, transport: Transport, edit_strategy: str = EDIT_APPEND):
        """Initialize collection handler.

        Args:
            transport: Callable performing the request (e.g. ApiClient)
            edit_strategy: "append" (keep old entry) or "replace" (upsert by id)
        """
        if edit_strategy not in EDIT_STRATEGIES:
            raise ValueError(f"Unknown edit strategy: {edit_strategy!r}")
        self.transport = transport
        self.edit_strategy = edit_strategy
        self._items: List[dict] = []

    @property
    def items(self) -> List[dict]:
        """Copy of the current collection."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    # ─────────────────────────────────────────────────────────────────────
    # Request helpers
    # ─────────────────────────────────────────────────────────────────────

    def _item_endpoint(self, item_id: str) -> str:
        return f"{self.endpoint}/{item_id}"

    def _send(self, request: ApiRequest) -> Any:
        """Run the request through the transport, logging and re-raising failures."""
        try:
            return self.transport(request)
        except RequestFailedError as exc:
            logger.error(exc.message)
            raise
        except Exception as exc:
            logger.error(str(exc))
            raise RequestFailedError(str(exc), endpoint=request.endpoint) from exc

    # ─────────────────────────────────────────────────────────────────────
    # Operations shared by the concrete handlers
    # ─────────────────────────────────────────────────────────────────────

    def _fetch(self, endpoint: str) -> List[dict]:
        result = self._send(ApiRequest(endpoint))
        if result is None:
            result = []
        if not isinstance(result, list):
            message = f"Expected a list from {endpoint}, got {type(result).__name__}"
            logger.error(message)
            raise RequestFailedError(message, FailureKind.PARSE, endpoint=endpoint)
        self._items = list(result)
        return result

    def _create(self, record: dict) -> dict:
        request = ApiRequest(
            self.endpoint,
            RequestConfig(method="POST", data=json.dumps(record)),
        )
        created = self._send(request)
        self._items = self._items + [created]
        return created

    def _update(self, item_id: str, record: dict) -> dict:
        request = ApiRequest(
            self._item_endpoint(item_id),
            RequestConfig(method="PUT", data=json.dumps(record)),
        )
        edited = self._send(request)
        if self.edit_strategy == EDIT_REPLACE:
            self._items = _upsert(self._items, item_id, edited)
        else:
            # Legacy behaviour: the previous entry stays until the next refresh.
            self._items = self._items + [edited]
        return edited

    def _remove(self, item_id: str) -> Optional[Any]:
        deleted = self._send(ApiRequest(self._item_endpoint(item_id), RequestConfig(method="DELETE")))
        self._items = [item for item in self._items if not same_id(item, item_id)]
        return deleted


def same_id(item: Any, item_id: Any) -> bool:
    """Identifiers compare as strings; the backend may send numeric ids.

    Entries that are not records (e.g. ``None`` from an empty 204 body) never match.
    """
    if not isinstance(item, dict):
        return False
    value = item.get("id")
    return value is not None and str(value) == str(item_id)


def _upsert(items: List[dict], item_id: str, edited: dict) -> List[dict]:
    """Put ``edited`` where the first ``item_id`` entry was and drop later duplicates."""
    replaced = False
    result = []
    for item in items:
        if same_id(item, item_id):
            if not replaced:
                result.append(edited)
                replaced = True
            continue
        result.append(item)
    if not replaced:
        result.append(edited)
    return result
