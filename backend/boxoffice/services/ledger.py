"""
Per-showtime seat ledger.

The ledger owns the committed ticket total of every showtime it has seen and
is the only code allowed to read or change it. Admission is a single
check-and-increment performed while holding that showtime's lock, so two
buyers can never both see the same remaining seats. Locks are per showtime:
a busy showtime never delays purchases for another one.

One ledger lives for the lifetime of the application (see ``boxoffice.main``)
and is rebuilt from the order store on startup.
"""

from collections.abc import Callable, Iterator, Mapping
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from threading import Lock

from loguru import logger

from boxoffice.exceptions.purchase_exceptions import (
    InsufficientCapacityError,
    InvalidPurchaseError,
    ReservationTimeoutError,
    SoldOutError,
)

__all__ = [
    "CapacityLedger",
    "CommittedLoader",
    "Reservation",
]

CommittedLoader = Callable[[], int]


@dataclass(frozen=True)
class Reservation:
    """Receipt for an admitted quantity, needed to release it again."""

    showtime_id: int
    quantity: int
    capacity: int
    committed_after: int

    @property
    def available_after(self) -> int:
        return self.capacity - self.committed_after


class CapacityLedger:
    def __init__(self, *, lock_timeout: float | None = None) -> None:
        """
        Parameters:
            lock_timeout (float | None): Seconds to wait for a showtime's lock
                before giving up with ReservationTimeoutError. None waits forever.
        """
        self._lock_timeout = lock_timeout
        self._registry_lock = Lock()
        self._locks: dict[int, Lock] = {}
        self._committed: dict[int, int] = {}

    def _lock_for(self, showtime_id: int) -> Lock:
        with self._registry_lock:
            lock = self._locks.get(showtime_id)
            if lock is None:
                lock = self._locks[showtime_id] = Lock()
            return lock

    @contextmanager
    def _holding(self, showtime_id: int, *, timeout: float | None) -> Iterator[None]:
        lock = self._lock_for(showtime_id)
        acquired = lock.acquire(timeout=-1 if timeout is None else timeout)
        if not acquired:
            logger.warning(f"Timed out waiting for the lock of showtime {showtime_id}")
            raise ReservationTimeoutError(showtime_id)
        try:
            yield
        finally:
            lock.release()

    def _current(self, showtime_id: int, load_committed: CommittedLoader) -> int:
        # Caller must hold the showtime's lock.
        committed = self._committed.get(showtime_id)
        if committed is None:
            committed = load_committed()
            self._committed[showtime_id] = committed
            logger.debug(f"Loaded committed total {committed} for showtime {showtime_id}")
        return committed

    def admit(
        self,
        *,
        showtime_id: int,
        quantity: int,
        capacity: int,
        load_committed: CommittedLoader,
    ) -> Reservation:
        """
        Reserve ``quantity`` seats of a showtime if they are still available.

        Parameters:
            showtime_id (int): The showtime to reserve seats for.
            quantity (int): Number of tickets requested, at least 1.
            capacity (int): Seating capacity of the showtime's room.
            load_committed (Callable[[], int]): Reads the committed total from
                the order store. Only called the first time a showtime is seen.
        Returns:
            Reservation: The admitted reservation.
        Raises:
            InvalidPurchaseError: If quantity is below 1.
            SoldOutError: If no seats are left.
            InsufficientCapacityError: If fewer seats than requested are left.
            ReservationTimeoutError: If the showtime's lock could not be taken
                in time. Nothing is reserved in that case.
        """
        if quantity < 1:
            raise InvalidPurchaseError("Ticket quantity must be at least 1.")

        with self._holding(showtime_id, timeout=self._lock_timeout):
            committed = self._current(showtime_id, load_committed)
            available = capacity - committed
            if available <= 0:
                raise SoldOutError(showtime_id)
            if quantity > available:
                raise InsufficientCapacityError(showtime_id, available, quantity)
            committed += quantity
            self._committed[showtime_id] = committed

        return Reservation(
            showtime_id=showtime_id,
            quantity=quantity,
            capacity=capacity,
            committed_after=committed,
        )

    def release(self, reservation: Reservation) -> None:
        """
        Give back the seats of a reservation whose order was never stored.

        Waits for the lock without a timeout: dropping a release would leak seats.
        """
        with self._holding(reservation.showtime_id, timeout=None):
            committed = self._committed.get(reservation.showtime_id, 0)
            self._committed[reservation.showtime_id] = max(
                0, committed - reservation.quantity
            )

    def available(
        self,
        *,
        showtime_id: int,
        capacity: int,
        load_committed: CommittedLoader,
    ) -> int:
        with self._holding(showtime_id, timeout=self._lock_timeout):
            committed = self._current(showtime_id, load_committed)
        return max(0, capacity - committed)

    def committed(self, showtime_id: int) -> int | None:
        """Committed total of a showtime, or None if the ledger has not loaded it yet."""
        with self._holding(showtime_id, timeout=None):
            return self._committed.get(showtime_id)

    def rebuild(self, totals: Mapping[int, int]) -> None:
        """
        Replace all tracked totals with ``totals``. Showtimes missing from it are
        loaded lazily on first use. Meant for startup, before purchases arrive.

        Waits for every showtime lock handed out so far, so an admission that is
        in progress finishes before the totals are swapped. No new locks are
        handed out while the registry lock is held.
        """
        with self._registry_lock, ExitStack() as held:
            for showtime_id in sorted(self._locks):
                held.enter_context(self._locks[showtime_id])
            self._committed = dict(totals)
