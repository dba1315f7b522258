"""Policy stores - the authoritative holder of the borrowing policy.

Screens read ``current_policy``, ``is_loading``, ``error_message`` and
``show_animation`` and write only through :meth:`PolicyStore.save_policy`.
State changes are announced to subscribers so widgets can re-render.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import yaml
from pydantic import ValidationError

from lmsadmin.models.policy import Policy

logger = logging.getLogger(__name__)

SaveCompletion = Callable[[bool], None]
StoreListener = Callable[[], None]


class PolicyStoreError(Exception):
    """Base exception for policy store errors."""


class PolicyLoadError(PolicyStoreError):
    """Raised when the policy can't be loaded."""


class PolicySaveError(PolicyStoreError):
    """Raised by a store backend when a save attempt fails."""


class PolicyStore(ABC):
    """Base class for policy stores.

    Subclasses implement :meth:`_persist`; the base class owns the observable
    state and the save protocol.
    """

    def __init__(self, policy: Policy | None = None) -> None:
        self._current_policy: Policy | None = policy
        self._is_loading = False
        self._show_animation = False
        self._error_message: str | None = None
        self._committed: Policy | None = None
        self._listeners: list[StoreListener] = []

    # =========================================================================
    # Observable state
    # =========================================================================

    @property
    def current_policy(self) -> Policy | None:
        """Latest known policy, or None before anything was loaded."""
        return self._current_policy

    @current_policy.setter
    def current_policy(self, policy: Policy | None) -> None:
        self._current_policy = policy
        self._notify()

    @property
    def is_loading(self) -> bool:
        """True while a save is in flight."""
        return self._is_loading

    @property
    def show_animation(self) -> bool:
        """True while the saving overlay should be visible."""
        return self._show_animation

    @property
    def error_message(self) -> str | None:
        """Message of the most recent failed save, if any."""
        return self._error_message

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a state-change listener and return its unsubscribe function."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _set_busy(self, busy: bool) -> None:
        self._is_loading = busy
        self._show_animation = busy
        self._notify()

    # =========================================================================
    # Save protocol
    # =========================================================================

    async def save_policy(
        self,
        policy: Policy,
        completion: SaveCompletion | None = None,
    ) -> bool:
        """Persist ``policy`` and report the outcome.

        ``completion`` is invoked exactly once with the success flag after
        the attempt concludes, including when the caller is cancelled. The
        same flag is returned.
        """
        self._error_message = None
        self._committed = None
        self._set_busy(True)
        try:
            self._commit(await self._persist(policy))
        except PolicySaveError as e:
            self._error_message = str(e) or None
            logger.warning("Policy save failed: %s", e)
        except asyncio.CancelledError:
            logger.warning(
                "Policy save cancelled (committed=%s)", self._committed is not None
            )
            raise
        finally:
            success = self._committed is not None
            self._set_busy(False)
            if completion is not None:
                completion(success)
        return success

    def _commit(self, saved: Policy) -> None:
        """Adopt ``saved`` as the current policy once the backend holds it."""
        self._committed = saved
        self._current_policy = saved
        logger.info(
            "Saved policy: max_books_per_user=%d max_borrow_days=%d",
            saved.max_books_per_user,
            saved.max_borrow_days,
        )

    @abstractmethod
    async def _persist(self, policy: Policy) -> Policy:
        """Write ``policy`` to the backend and return the stored record.

        Raises:
            PolicySaveError: If the backend rejects or fails the write.
        """


class InMemoryPolicyStore(PolicyStore):
    """Store keeping the policy in memory.

    ``fail_with`` makes the next save fail with the given message, which is
    how callers exercise the error path without a real backend.
    """

    def __init__(
        self,
        policy: Policy | None = None,
        *,
        save_delay_seconds: float = 0.0,
    ) -> None:
        super().__init__(policy)
        self.save_delay_seconds = save_delay_seconds
        self.saved_policies: list[Policy] = []
        self._pending_failure: str | None = None

    def fail_with(self, message: str | None) -> None:
        """Fail the next save with ``message``; ``None`` clears a pending failure."""
        self._pending_failure = message

    async def _persist(self, policy: Policy) -> Policy:
        if self.save_delay_seconds > 0:
            await asyncio.sleep(self.save_delay_seconds)
        if self._pending_failure is not None:
            message, self._pending_failure = self._pending_failure, None
            raise PolicySaveError(message)
        self.saved_policies.append(policy)
        return policy


class FilePolicyStore(PolicyStore):
    """Store persisting the policy as a YAML document."""

    def __init__(self, path: Path, *, save_delay_seconds: float = 0.0) -> None:
        super().__init__()
        self.path = path
        self.save_delay_seconds = save_delay_seconds

    def load(self, *, create_missing: bool = False) -> Policy | None:
        """Read the policy file into ``current_policy``.

        Args:
            create_missing: Seed a default policy (in memory only) when the
                file doesn't exist.

        Returns:
            The loaded policy, or None when the file is missing and
            ``create_missing`` is False.

        Raises:
            PolicyLoadError: If the file is unreadable or invalid.
        """
        if not self.path.exists():
            if not create_missing:
                logger.info("No policy file at %s", self.path)
                return None
            logger.info("No policy file at %s, seeding defaults", self.path)
            self.current_policy = Policy()
            return self.current_policy

        try:
            raw = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise PolicyLoadError(f"Cannot read policy file {self.path}: {e}") from e
        if not isinstance(raw, dict):
            raise PolicyLoadError(f"Policy file {self.path} must contain a mapping")
        try:
            policy = Policy.model_validate(raw)
        except ValidationError as e:
            raise PolicyLoadError(f"Invalid policy in {self.path}: {e}") from e

        self.current_policy = policy
        logger.info("Loaded policy from %s", self.path)
        return policy

    async def _persist(self, policy: Policy) -> Policy:
        if self.save_delay_seconds > 0:
            await asyncio.sleep(self.save_delay_seconds)
        stamped = policy.model_copy(update={"updated_at": datetime.now(timezone.utc)})
        write = asyncio.ensure_future(asyncio.to_thread(self._write, stamped))
        try:
            await asyncio.shield(write)
        except asyncio.CancelledError:
            # The writer thread can't be interrupted; memory follows the file.
            await asyncio.wait({write})
            if not write.cancelled() and write.exception() is None:
                self._commit(stamped)
            raise
        return stamped

    def _write(self, policy: Policy) -> None:
        payload = yaml.safe_dump(
            policy.model_dump(mode="json"),
            sort_keys=False,
            default_flow_style=False,
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            raise PolicySaveError(f"Could not write policy file: {e.strerror or e}") from e


__all__ = [
    "FilePolicyStore",
    "InMemoryPolicyStore",
    "PolicyLoadError",
    "PolicySaveError",
    "PolicyStore",
    "PolicyStoreError",
    "SaveCompletion",
]
