"""Optimistic client-side state for like/pass/push flows.

An action is applied locally as a pending projection first, then either
confirmed with the server's response or rolled back if the call failed.
"""

import itertools
from collections.abc import Callable

from refmatch.core.logger import logger

ACTION_KINDS = ("like", "pass", "push")


class PendingUpdate:
    def __init__(self, handle: str, kind: str, target_id: str, payload: dict | None = None):
        self.handle = handle
        self.kind = kind
        self.target_id = target_id
        self.payload = payload or {}


class OptimisticState:
    def __init__(self):
        self.matches: dict[str, dict] = {}  # confirmed matches by id
        self.hidden_candidates: set[str] = set()  # swiped locally, pending or confirmed
        self._pending: dict[str, PendingUpdate] = {}
        self._counter = itertools.count(1)

    @property
    def pending(self) -> list[PendingUpdate]:
        return list(self._pending.values())

    def apply_pending(self, kind: str, target_id: str, payload: dict | None = None) -> str:
        """Apply the local projection of an action; returns a handle to settle it."""
        if kind not in ACTION_KINDS:
            raise ValueError(f"Unknown action kind: {kind}")

        handle = f"{kind}-{next(self._counter)}"
        self._pending[handle] = PendingUpdate(handle, kind, target_id, payload)
        if kind in ("like", "pass"):
            self.hidden_candidates.add(target_id)
        return handle

    def confirm(self, handle: str, response: dict) -> dict | None:
        """Reconcile a pending action with the server response.

        Returns the match carried by the response, if any.
        """
        update = self._pending.pop(handle)
        match = response.get("match") if response else None
        if match:
            self.matches[match["id"]] = match
        logger.debug("Confirmed {} on {}", update.kind, update.target_id)
        return match

    def rollback(self, handle: str) -> None:
        """Undo the local projection of a failed action."""
        update = self._pending.pop(handle)
        if update.kind in ("like", "pass"):
            still_pending = any(
                p.target_id == update.target_id and p.kind in ("like", "pass")
                for p in self._pending.values()
            )
            if not still_pending:
                self.hidden_candidates.discard(update.target_id)
        logger.warning("Rolled back {} on {}", update.kind, update.target_id)

    def run(self, kind: str, target_id: str, call: Callable[[], dict | None]) -> dict | None:
        """Apply, call the server, then confirm or roll back. Returns the response."""
        handle = self.apply_pending(kind, target_id)
        response = call()
        if response is None:
            self.rollback(handle)
            return None
        self.confirm(handle, response)
        return response

    def visible_candidates(self, candidates: list[dict]) -> list[dict]:
        """Discovery cards minus the ones already swiped locally."""
        return [c for c in candidates if c["id"] not in self.hidden_candidates]
