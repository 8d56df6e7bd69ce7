# ABOUTME: Readable game data store with an atomic publish step
# ABOUTME: Readers only ever see an empty store or a fully built GameData, never a partial load

import threading

from triad_ingest.domain.catalogue import GameData
from triad_ingest.domain.models import Card, CardInfo, Opponent, OpponentInfo


class GameDataStore:
    """Holds the last successfully loaded GameData.

    The pipeline is the only writer. A load is built into its own GameData and swapped in
    with publish(), so readers checking is_ready never observe half-filled catalogues.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data = GameData()
        self._ready = False

    @property
    def is_ready(self) -> bool:
        with self._lock:
            return self._ready

    @property
    def data(self) -> GameData:
        """The published catalogues, empty while not ready."""
        with self._lock:
            return self._data

    def snapshot(self) -> tuple[bool, GameData]:
        """Read the ready flag and the catalogues it describes in one step."""
        with self._lock:
            return self._ready, self._data

    def publish(self, data: GameData) -> None:
        with self._lock:
            self._data = data
            self._ready = True

    def reset(self) -> None:
        """Drop published data and mark the store not ready."""
        with self._lock:
            self._data = GameData()
            self._ready = False

    def _published(self) -> GameData | None:
        ready, data = self.snapshot()
        return data if ready else None

    def find_card(self, card_id: int) -> Card | None:
        data = self._published()
        return data.cards.find_by_id(card_id) if data is not None else None

    def find_card_info(self, card_id: int) -> CardInfo | None:
        data = self._published()
        return data.find_card_info(card_id) if data is not None else None

    def find_opponent(self, opponent_index: int) -> Opponent | None:
        data = self._published()
        if data is None or not 0 <= opponent_index < len(data.opponents):
            return None
        return data.opponents[opponent_index]

    def find_opponent_info(self, opponent_index: int) -> OpponentInfo | None:
        data = self._published()
        return data.opponent_infos.get(opponent_index) if data is not None else None


_default_store: GameDataStore | None = None


def get_store() -> GameDataStore:
    """Get the process-wide game data store, created on first access."""
    global _default_store
    if _default_store is None:
        _default_store = GameDataStore()
    return _default_store
