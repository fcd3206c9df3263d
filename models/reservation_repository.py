"""
Reservation repositories.

The booking service only ever loads the whole reservation collection and
saves it back wholesale. Both repositories hand out fresh Reservation
objects on every load, so callers cannot change stored state without
calling save_reservations().
"""

from .reservation_record import Reservation
from .storage import RESERVATIONS_KEY, load_collection, save_collection


class StorageReservationRepository:
    """Reservations kept in the application storage table (needs an app context)."""

    def __init__(self, storage_key: str = RESERVATIONS_KEY):
        self.storage_key = storage_key

    def load_reservations(self) -> list:
        return [Reservation.from_dict(item) for item in load_collection(self.storage_key)]

    def save_reservations(self, reservations) -> None:
        save_collection(self.storage_key, [r.to_dict() for r in reservations])


class InMemoryReservationRepository:
    """Reservations kept in process memory, in their persisted shape."""

    def __init__(self, reservations=None):
        self._records = [r.to_dict() for r in reservations or []]

    def load_reservations(self) -> list:
        return [Reservation.from_dict(item) for item in self._records]

    def save_reservations(self, reservations) -> None:
        self._records = [r.to_dict() for r in reservations]
