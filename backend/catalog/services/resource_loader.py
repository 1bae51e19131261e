"""Resource Loader: one async fetch per mount, with stale-response discarding.

Invariants:
    - status is LOADING from construction until the current fetch resolves,
      then READY or FAILED (exactly one transition per load() call)
    - Last-fetch-wins: each load() takes a new generation token; a result whose
      token is no longer current is discarded without touching state
    - After dispose() no in-flight result is ever applied (no update-after-teardown);
      reopen() re-arms the loader for the next mount without reviving old fetches
    - Failures never propagate to the caller: status -> FAILED, collection
      stays empty, the error is logged. A non-iterable fetch result counts as
      a malformed payload
    - A raising listener is logged and skipped; it never aborts a load
    - asyncio.CancelledError is re-raised untouched
    - preview_limit truncation happens once, at load time

Design Decisions:
    - Generation counter over task cancellation: the data source may not be
      cancellable, and a counter also covers sources that ignore cancel
    - No retry, no polling, no timeout at this layer
"""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Generic, TypeVar

from catalog.core.domain_types import ListingStatus
from catalog.core.errors import CatalogError, ErrorContext, MalformedPayloadError
from catalog.core.repository_protocols import FetchFn

logger = logging.getLogger(__name__)

R = TypeVar("R")

StateListener = Callable[["ResourceLoader"], None]


class ResourceLoader(Generic[R]):
    """Owns one collection and its fetch lifecycle."""

    def __init__(
        self,
        fetch: FetchFn[R],
        *,
        name: str = "resources",
        preview_limit: int | None = None,
        on_change: StateListener | None = None,
    ):
        if preview_limit is not None and preview_limit < 0:
            raise ValueError("preview_limit must be >= 0")
        self._fetch = fetch
        self.name = name
        self.preview_limit = preview_limit
        self._on_change = on_change
        self._generation = 0
        self._disposed = False
        self.status = ListingStatus.LOADING
        self.collection: tuple[R, ...] = ()
        self.last_error: Exception | None = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def disposed(self) -> bool:
        return self._disposed

    def is_current(self, token: int) -> bool:
        return not self._disposed and token == self._generation

    async def load(self) -> tuple[R, ...]:
        """Start a fresh fetch cycle and apply its result if still current.

        Returns the collection as it stands once this call resolves, which is
        the newer call's data when this one was superseded.
        """
        if self._disposed:
            logger.debug(
                "Load skipped on disposed loader", extra={"listing": self.name},
            )
            return self.collection

        self._generation += 1
        token = self._generation
        self.status = ListingStatus.LOADING
        self.collection = ()
        self.last_error = None
        self._notify()

        try:
            records = await self._fetch()
            items = self._materialize(records)
        except CatalogError as e:
            self._apply_failure(token, e, unexpected=False)
            return self.collection
        except Exception as e:
            self._apply_failure(token, e, unexpected=True)
            return self.collection

        if not self.is_current(token):
            self._log_stale(token)
            return self.collection

        self._apply_success(token, items)
        return self.collection

    def dispose(self) -> None:
        """Tear down: any in-flight result will be dropped."""
        if not self._disposed:
            self._disposed = True
            self._generation += 1
            logger.debug(
                "Loader disposed",
                extra={"listing": self.name, "generation": self._generation},
            )

    def reopen(self) -> None:
        """Re-arm a disposed loader for a new mount. Old fetches stay stale."""
        self._disposed = False

    # ─── internals ───────────────────────────────────────────────

    def _materialize(self, records: Sequence[R]) -> tuple[R, ...]:
        if not isinstance(records, Iterable) or isinstance(records, (str, bytes, Mapping)):
            raise MalformedPayloadError(
                f"{self.name} fetch returned {type(records).__name__}, expected a sequence",
                context=ErrorContext(listing=self.name),
            )
        items = tuple(records)
        if self.preview_limit is not None:
            items = items[: self.preview_limit]
        return items

    def _apply_success(self, token: int, items: tuple[R, ...]) -> None:
        self.collection = items
        self.status = ListingStatus.READY
        logger.info(
            f"Loaded {self.name}",
            extra={
                "listing": self.name,
                "generation": token,
                "item_count": len(items),
            },
        )
        self._notify()

    def _apply_failure(self, token: int, error: Exception, unexpected: bool) -> None:
        if not self.is_current(token):
            self._log_stale(token)
            return
        self.collection = ()
        self.status = ListingStatus.FAILED
        self.last_error = error
        error_code = getattr(error, "code", "INTERNAL_ERROR")
        context = getattr(error, "context", None)
        logger.error(
            f"Error fetching {self.name}: {error}",
            exc_info=unexpected,
            extra={
                "listing": self.name,
                "generation": token,
                "error_code": error_code,
                "endpoint": getattr(context, "endpoint", None),
                "status_code": getattr(context, "status_code", None),
            },
        )
        self._notify()

    def _log_stale(self, token: int) -> None:
        logger.debug(
            f"Discarded stale {self.name} response",
            extra={"listing": self.name, "generation": token},
        )

    def _notify(self) -> None:
        if self._on_change is None:
            return
        try:
            self._on_change(self)
        except Exception:
            logger.exception(
                f"State listener failed for {self.name}",
                extra={"listing": self.name, "generation": self._generation},
            )
