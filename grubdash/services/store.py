"""
In-memory resource storage
"""
import threading
from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")

class ResourceStore(Generic[T]):
    """Упорядоченное хранилище записей одного вида ресурса.

    Уникальность ID не проверяется: за неё отвечает IdentifierGenerator.
    Сервис держит `lock` на всё время проверки и мутации.
    """
    
    def __init__(self, records: Optional[Iterable[T]] = None):
        self._records: List[T] = list(records or [])
        self.lock = threading.RLock()
    
    def __len__(self) -> int:
        return len(self._records)
    
    def insert(self, record: T) -> T:
        self._records.append(record)
        return record
    
    def find_by_id(self, record_id: str) -> Optional[T]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None
    
    def index_of(self, record: T) -> int:
        """Позиция записи; ValueError, если её нет"""
        for index, stored in enumerate(self._records):
            if stored is record:
                return index
        raise ValueError(f"record {getattr(record, 'id', record)!r} is not in store")
    
    def replace_at(self, index: int, record: T) -> T:
        self._records[index] = record
        return record
    
    def remove_at(self, index: int) -> T:
        return self._records.pop(index)
    
    def all(self) -> List[T]:
        """Живой список записей, не копия"""
        return self._records
    
    def ids(self) -> List[str]:
        return [record.id for record in self._records]

class IdentifierGenerator:
    """Возрастающий счётчик ID, продолжающий максимальный числовой ID из начальных данных"""
    
    def __init__(self, existing_ids: Iterable[str] = ()):
        numeric = [int(value) for value in existing_ids if str(value).isdecimal()]
        self._last = max(numeric, default=0)
        self._lock = threading.Lock()
    
    @property
    def last(self) -> int:
        return self._last
    
    def __call__(self) -> str:
        with self._lock:
            self._last += 1
            return str(self._last)
