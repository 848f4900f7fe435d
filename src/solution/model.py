# src/solution/model.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.instance.model import require_field

@dataclass
class Item:
    article_id: Any
    order_id: Optional[Any] = None
    extra: Dict[str, Any] = field(default_factory=dict)   # claves adicionales del documento

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Item":
        article_id = require_field(d, "ArticleId", "Ítem")
        extra = {k: v for k, v in d.items() if k not in ("ArticleId", "OrderId")}
        return Item(article_id=article_id, order_id=d.get("OrderId"), extra=extra)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.order_id is not None:
            out["OrderId"] = self.order_id
        out["ArticleId"] = self.article_id
        out.update(self.extra)
        return out

@dataclass
class Batch:
    batch_id: Any
    items: List[Item] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.items)

    def article_ids(self) -> List[Any]:
        return [it.article_id for it in self.items]

@dataclass
class Wave:
    wave_id: Any
    batch_ids: List[Any] = field(default_factory=list)
    order_ids: List[Any] = field(default_factory=list)

    def claims(self, order_id: Any) -> bool:
        # comparación estricta: el pedido "7" no está en una wave que lista 7
        return order_id in self.order_ids

@dataclass
class Solution:
    batches: List[Batch]
    waves: List[Wave]

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Solution":
        batches = []
        for b in require_field(d, "Batches", "Solución"):
            batch_id = require_field(b, "BatchId", "Batch")
            items = require_field(b, "Items", f"Batch {batch_id}")
            batches.append(Batch(batch_id=batch_id, items=[Item.from_dict(it) for it in items]))
        waves = []
        for w in require_field(d, "Waves", "Solución"):
            wave_id = require_field(w, "WaveId", "Wave")
            waves.append(Wave(wave_id=wave_id,
                              batch_ids=list(require_field(w, "BatchIds", f"Wave {wave_id}")),
                              order_ids=list(require_field(w, "OrderIds", f"Wave {wave_id}"))))
        return Solution(batches=batches, waves=waves)

    def batch_index(self) -> Dict[Any, Batch]:
        """BatchId (tal cual) -> Batch; si un id se repite gana el último."""
        return {b.batch_id: b for b in self.batches}
