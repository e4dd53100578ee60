from .logging import get_logger
from .set_entry import SetRecord


class SetStore:
    """Local collection of the user's sets.

    Imports only ever append to it; it is also where exports look up the
    name to give the downloaded file.
    """

    def __init__(self, sets: list[SetRecord] | None = None) -> None:
        self.logger = get_logger("flashset.set_store")
        self._sets: list[SetRecord] = list(sets or [])

    def __len__(self) -> int:
        return len(self._sets)

    @property
    def sets(self) -> list[SetRecord]:
        return list(self._sets)

    def replace_all(self, sets: list[SetRecord]) -> None:
        self._sets = list(sets)
        self.logger.debug("Loaded %d sets", len(self._sets))

    def append(self, record: SetRecord) -> None:
        self._sets.append(record)
        self.logger.debug("Added set '%s' (id %s)", record.name, record.id)

    def find(self, set_id: str) -> SetRecord | None:
        for record in self._sets:
            if record.id == set_id:
                return record
        return None
