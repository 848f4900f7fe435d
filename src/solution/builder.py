# src/solution/builder.py
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from src.config.limits import Limits
from src.instance.model import Order, ProblemInstance, as_text

logger = logging.getLogger(__name__)


@dataclass
class _OpenWave:
    wave_id: int
    warehouse: Optional[Any]
    orders: List[Order] = field(default_factory=list)
    size: int = 0
    batch_ids: List[int] = field(default_factory=list)


@dataclass
class _OpenBatch:
    batch_id: int
    items: List[Dict[str, Any]] = field(default_factory=list)
    volume: float = 0


def dominant_warehouse(order: Order, instance: ProblemInstance) -> Optional[Any]:
    """Almacén con más artículos del pedido; empate → menor texto. None si el pedido está vacío."""
    counts = Counter(instance.location_of(aid).warehouse for aid in order.article_ids)
    if not counts:
        return None
    return min(counts, key=lambda w: (-counts[w], as_text(w)))


def _assign_waves(instance: ProblemInstance, limits: Limits) -> List[_OpenWave]:
    waves: List[_OpenWave] = []
    open_by_wh: Dict[Any, _OpenWave] = {}
    for order in instance.orders:
        wh = dominant_warehouse(order, instance)
        n = len(order.article_ids)
        if n > limits.max_wave_size:
            logger.warning("Pedido %s con %d artículos no cabe en ninguna wave", order.order_id, n)
        wave = open_by_wh.get(wh)
        if wave is None or wave.size + n > limits.max_wave_size:
            wave = _OpenWave(wave_id=len(waves), warehouse=wh)
            waves.append(wave)
            open_by_wh[wh] = wave
        wave.orders.append(order)
        wave.size += n
    return waves


def _assign_batches(waves: List[_OpenWave], instance: ProblemInstance, limits: Limits) -> List[_OpenBatch]:
    batches: List[_OpenBatch] = []
    for wave in waves:
        # un batch abierto por almacén dentro de la wave
        open_by_wh: Dict[Any, _OpenBatch] = {}
        for order in wave.orders:
            for aid in order.article_ids:
                wh = instance.location_of(aid).warehouse
                vol = instance.volume_of(aid)
                if vol > limits.max_batch_volume:
                    logger.warning("Artículo %s con volumen %s excede el máximo por batch", aid, vol)
                batch = open_by_wh.get(wh)
                if batch is None or batch.volume + vol > limits.max_batch_volume:
                    batch = _OpenBatch(batch_id=len(batches))
                    batches.append(batch)
                    wave.batch_ids.append(batch.batch_id)
                    open_by_wh[wh] = batch
                batch.items.append({"OrderId": order.order_id, "ArticleId": aid})
                batch.volume += vol
    return batches


def build_solution(instance: ProblemInstance, limits: Optional[Limits] = None) -> Dict[str, Any]:
    """
    Heurística voraz por almacén dominante:
      1) pedidos → waves (una wave abierta por almacén dominante, hasta max_wave_size ítems)
      2) ítems de cada wave → batches (uno abierto por almacén, hasta max_batch_volume)
    Devuelve el documento de solución (Waves / Batches).
    """
    limits = limits or Limits.default()
    waves = _assign_waves(instance, limits)
    batches = _assign_batches(waves, instance, limits)
    logger.info("Construidas %d waves y %d batches para %d pedidos",
                len(waves), len(batches), len(instance.orders))
    return {
        "Waves": [
            {
                "WaveId": w.wave_id,
                "BatchIds": list(w.batch_ids),
                "OrderIds": [o.order_id for o in w.orders],
                "WaveSize": w.size,
            }
            for w in waves
        ],
        "Batches": [
            {"BatchId": b.batch_id, "Items": list(b.items), "BatchVolume": b.volume}
            for b in batches
        ],
    }
