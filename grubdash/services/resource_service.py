"""
Base service: validation pipeline + mutation over one resource store
"""
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Type
from grubdash.business import ResourceError, ValidationContext, ValidationPipeline
from grubdash.models.base import GrubDashBaseModel, PartialPayload
from grubdash.services.store import ResourceStore, IdentifierGenerator
from grubdash.utils.logger import logger

class ResourceService:
    """Операции create / read / update / list над одним видом ресурса"""

    kind: str = "resource"
    model: Type[GrubDashBaseModel] = GrubDashBaseModel

    def __init__(self, seed_path: Optional[str] = None, store: Optional[ResourceStore] = None):
        self.seed_path = seed_path
        self.store = store if store is not None else ResourceStore()
        self.next_id = IdentifierGenerator(self.store.ids())
        self.rules = self._build_rules(self.store)
        self._initialized = False

    def _build_rules(self, store: ResourceStore):
        raise NotImplementedError

    async def initialize(self):
        """Инициализация сервиса: загрузка начальных данных"""
        if self._initialized:
            return

        logger.info(f"Initializing {type(self).__name__}", seed_path=self.seed_path)
        if self.seed_path:
            self.load_seed(self._read_seed_file(Path(self.seed_path)))
        self._initialized = True
        logger.info(f"{type(self).__name__} initialized", records=len(self.store), last_id=self.next_id.last)

    def _read_seed_file(self, path: Path) -> List[Dict[str, Any]]:
        if not path.exists():
            logger.warning(f"Seed file not found, {self.kind} store starts empty", path=str(path))
            return []

        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load {self.kind} seed data", path=str(path), error=str(e))
            raise

    def load_seed(self, records: Iterable[Dict[str, Any]]) -> int:
        """Загрузка записей и пересчёт счётчика ID"""
        count = 0
        with self.store.lock:
            for data in records:
                self.store.insert(self.model.model_validate(data))
                count += 1
            self.next_id = IdentifierGenerator(self.store.ids())
        return count

    def _validate(self, pipeline: ValidationPipeline, context: ValidationContext) -> ValidationContext:
        try:
            return pipeline.run(context)
        except ResourceError as e:
            logger.validation_rejected(
                pipeline.kind,
                pipeline.operation,
                e.status,
                e.message,
                route_id=context.route_id
            )
            raise

    def create(self, payload: Optional[PartialPayload]):
        with self.store.lock:
            self._validate(self.rules.create, ValidationContext(payload=payload))

            data = payload.present_fields()
            data["id"] = self.next_id()
            record = self.store.insert(self.model.model_validate(data))

        logger.resource_event(self.kind, "created", id=record.id)
        return record

    def read(self, record_id: str):
        with self.store.lock:
            context = self._validate(self.rules.read, ValidationContext(route_id=record_id))
        return context.record

    def update(self, record_id: str, payload: Optional[PartialPayload]):
        """Частичное обновление: перезаписываются только переданные поля"""
        with self.store.lock:
            context = self._validate(
                self.rules.update,
                ValidationContext(route_id=record_id, payload=payload, partial=True)
            )

            stored = context.record
            index = self.store.index_of(stored)
            changes = payload.present_fields()
            # ID неизменяем: совпадение с маршрутом уже проверено
            changes.pop("id", None)
            merged = self.model.model_validate({**stored.model_dump(), **changes})
            self.store.replace_at(index, merged)

        logger.resource_event(self.kind, "updated", id=merged.id, fields=sorted(changes))
        return merged

    def list(self) -> List[Any]:
        return self.store.all()
