import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path


logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class HistoryEntry:
    date: str
    type: str
    input: str
    output: str

    @classmethod
    def create(cls, type: str, input: str, output: str) -> "HistoryEntry":
        return cls(datetime.now().strftime(DATE_FORMAT), type, input, output)

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        return cls(
            date=str(data["date"]),
            type=str(data["type"]),
            input=str(data["input"]),
            output=str(data["output"]),
        )

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class HistoryStore:
    """Conversion history kept as a JSON array in a single file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> list[HistoryEntry]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Cannot read history file %s: %s", self.path, e)
            return []

        if not isinstance(data, list):
            logger.warning("History file %s does not hold a list, ignoring it", self.path)
            return []

        entries = []
        for index, record in enumerate(data):
            try:
                entries.append(HistoryEntry.from_dict(record))
            except (KeyError, TypeError) as e:
                logger.warning("Skipping malformed history record #%d: %s", index, e)
        return entries

    def _save(self, entries: list[HistoryEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([e.to_dict() for e in entries], f, indent=2, ensure_ascii=False)
        logger.debug("Saved %d history entries to %s", len(entries), self.path)

    def append(self, entry: HistoryEntry) -> None:
        entries = self.load()
        entries.append(entry)
        self._save(entries)

    def delete(self, index: int) -> HistoryEntry:
        entries = self.load()
        if not 0 <= index < len(entries):
            raise IndexError(f"No history entry #{index + 1}")
        removed = entries.pop(index)
        self._save(entries)
        return removed

    def clear(self) -> None:
        self._save([])

    def __len__(self) -> int:
        return len(self.load())
