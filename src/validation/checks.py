from typing import Any, Dict, List, Set
import logging

from src.config.limits import Limits
from src.instance.model import ProblemInstance, as_text
from src.solution.model import Batch, Solution, Wave
from src.validation.errors import (
    WaveTooLarge, BatchTooLarge, OrderNotUniquelyAssigned, ArticleMissingFromOrder, MalformedInput
)

logger = logging.getLogger(__name__)

# -------------------- Helpers internos --------------------

def _wave_batches(wave: Wave, batches: Dict[Any, Batch]) -> List[Batch]:
    """Batches de la wave; la búsqueda por BatchId es estricta (7 != "7")."""
    out: List[Batch] = []
    for bid in wave.batch_ids:
        b = batches.get(bid)
        if b is None:
            if any(as_text(k) == as_text(bid) for k in batches):
                raise MalformedInput(
                    f"Wave {wave.wave_id} referencia el batch {bid!r}; solo existe con otro tipo de id")
            raise MalformedInput(f"Wave {wave.wave_id} referencia el batch inexistente {bid}")
        out.append(b)
    return out

def wave_size(wave: Wave, batches: Dict[Any, Batch]) -> int:
    """Ítems totales de los batches de la wave."""
    return sum(b.size for b in _wave_batches(wave, batches))

def batch_volume(batch: Batch, instance: ProblemInstance) -> float:
    return sum(instance.volume_of(aid) for aid in batch.article_ids())

# -------------------- Chequeos (cada uno fatal) --------------------

def check_wave_sizes(solution: Solution, limits: Limits) -> Dict[str, int]:
    """Lanza WaveTooLarge en la primera wave con más de `max_wave_size` ítems."""
    batches = solution.batch_index()
    sizes: Dict[str, int] = {}
    for wave in solution.waves:
        size = wave_size(wave, batches)
        if size > limits.max_wave_size:
            raise WaveTooLarge(wave.wave_id, size)
        sizes[as_text(wave.wave_id)] = size
    logger.debug("Tamaños de wave OK (%d waves)", len(sizes))
    return sizes

def check_batch_volumes(solution: Solution, instance: ProblemInstance, limits: Limits) -> Dict[str, float]:
    """Lanza BatchTooLarge en el primer batch con volumen > `max_batch_volume`."""
    volumes: Dict[str, float] = {}
    for batch in solution.batches:
        vol = batch_volume(batch, instance)
        if vol > limits.max_batch_volume:
            raise BatchTooLarge(batch.batch_id, vol)
        volumes[as_text(batch.batch_id)] = vol
    logger.debug("Volúmenes de batch OK (%d batches)", len(volumes))
    return volumes

def check_orders_fulfilled(solution: Solution, instance: ProblemInstance) -> Dict[str, Any]:
    """
    Cada pedido debe aparecer en los OrderIds de exactamente una wave, y los batches
    de esa wave deben contener todos sus artículos. Devuelve OrderId -> WaveId.
    Búsqueda lineal sobre las waves por pedido (O(pedidos x waves)).
    """
    batches = solution.batch_index()
    assigned: Dict[str, Any] = {}
    for order in instance.orders:
        waves = [w for w in solution.waves if w.claims(order.order_id)]
        if len(waves) != 1:
            raise OrderNotUniquelyAssigned(order.order_id, len(waves))

        wave = waves[0]
        available: Set[Any] = {
            aid for b in _wave_batches(wave, batches) for aid in b.article_ids()
        }
        for aid in order.article_ids:
            if aid not in available:
                raise ArticleMissingFromOrder(aid, order.order_id)
        assigned[as_text(order.order_id)] = wave.wave_id
    logger.debug("Pedidos cumplidos OK (%d pedidos)", len(assigned))
    return assigned
