from dataclasses import dataclass
from typing import List, Literal, Optional
import numpy as np

from .model import Article, ArticleLocation, Order, ProblemInstance

PopularityMode = Literal["uniforme", "concentrada"]

@dataclass
class InstanceSpec:
    """Parámetros de una instancia sintética."""
    n_articles: int = 200
    n_warehouses: int = 4
    aisles_per_warehouse: int = 10
    n_orders: int = 100
    min_items: int = 1
    max_items: int = 5
    min_volume: int = 50
    max_volume: int = 1500
    popularity: PopularityMode = "concentrada"
    alpha: float = 1.2

    def validate(self) -> None:
        assert self.n_articles >= 1, "n_articles debe ser >= 1"
        assert self.n_warehouses >= 1 and self.aisles_per_warehouse >= 1
        assert 1 <= self.min_items <= self.max_items, "rango de ítems inválido"
        assert 0 < self.min_volume <= self.max_volume, "rango de volumen inválido"

def popularity_weights(n: int, mode: PopularityMode, alpha: float = 1.1) -> List[float]:
    """
    - uniforme: todos con el mismo peso
    - concentrada: Zipf(α) sobre el ranking (α>1). α≈1.1–1.3 da 80/20 aproximado.
    """
    if mode == "uniforme":
        return [1.0 / n] * n
    w_raw = [1.0 / (r ** alpha) for r in range(1, n + 1)]
    s = sum(w_raw)
    return [x / s for x in w_raw]

class InstanceGenerator:
    """Genera instancias reproducibles a partir de una semilla."""

    def __init__(self, spec: InstanceSpec, seed: Optional[int] = None):
        spec.validate()
        self.spec = spec
        self._rs = np.random.default_rng(seed)

    def _articles(self) -> List[Article]:
        vols = self._rs.integers(self.spec.min_volume, self.spec.max_volume + 1, size=self.spec.n_articles)
        return [Article(article_id=i, volume=int(v)) for i, v in enumerate(vols)]

    def _locations(self) -> List[ArticleLocation]:
        sp = self.spec
        wh = self._rs.integers(0, sp.n_warehouses, size=sp.n_articles)
        ai = self._rs.integers(0, sp.aisles_per_warehouse, size=sp.n_articles)
        pos = self._rs.integers(0, 100, size=sp.n_articles)
        return [
            ArticleLocation(article_id=i, warehouse=int(wh[i]), aisle=int(ai[i]), position=int(pos[i]))
            for i in range(sp.n_articles)
        ]

    def _order(self, order_id: int, p: List[float]) -> Order:
        sp = self.spec
        k = int(self._rs.integers(sp.min_items, sp.max_items + 1))
        picked = self._rs.choice(sp.n_articles, size=k, replace=True, p=p)
        return Order(order_id=order_id, article_ids=[int(x) for x in picked])

    def make_instance(self) -> ProblemInstance:
        articles = self._articles()
        locations = self._locations()
        p = popularity_weights(self.spec.n_articles, self.spec.popularity, self.spec.alpha)
        orders = [self._order(i, p) for i in range(self.spec.n_orders)]
        return ProblemInstance(
            articles={str(a.article_id): a for a in articles},
            locations={l.article_id: l for l in locations},
            orders=orders,
        )
