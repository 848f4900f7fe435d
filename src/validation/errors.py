# src/validation/errors.py
from typing import Any


class ValidationError(ValueError):
    """Base de las violaciones fatales. `str(e)` es la línea de diagnóstico."""
    code = "ValidationError"


class WaveTooLarge(ValidationError):
    code = "WaveTooLarge"

    def __init__(self, wave_id: Any, size: int):
        self.wave_id = wave_id
        self.size = size
        super().__init__(f"Wave {wave_id} contains {size} articles!")


class BatchTooLarge(ValidationError):
    code = "BatchTooLarge"

    def __init__(self, batch_id: Any, volume: float):
        self.batch_id = batch_id
        self.volume = volume
        super().__init__(f"Batch {batch_id} has volume {_num(volume)}!")


class OrderNotUniquelyAssigned(ValidationError):
    code = "OrderNotUniquelyAssigned"

    def __init__(self, order_id: Any, n_waves: int):
        self.order_id = order_id
        self.n_waves = n_waves
        super().__init__(f"Order {order_id} is found in {n_waves} waves!")


class ArticleMissingFromOrder(ValidationError):
    code = "ArticleMissingFromOrder"

    def __init__(self, article_id: Any, order_id: Any):
        self.article_id = article_id
        self.order_id = order_id
        super().__init__(f"Article {article_id} missing from order {order_id}")


class MalformedInput(ValidationError):
    """Referencia colgante o clave faltante en los documentos de entrada."""
    code = "MalformedInput"


def _num(x: float) -> str:
    # 10001.0 -> "10001"
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)
