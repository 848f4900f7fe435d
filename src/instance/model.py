# src/instance/model.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.validation.errors import MalformedInput

def as_text(value: Any) -> str:
    """
    Forma textual de un id o de un valor de ubicación.
    Solo la tabla de volúmenes (objeto JSON indexado por clave) compara ids por texto;
    los float enteros se escriben sin decimales (1.0 -> "1").
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

def require_field(d: Dict[str, Any], key: str, what: str) -> Any:
    if not isinstance(d, dict) or key not in d:
        raise MalformedInput(f"{what} sin campo '{key}': {d!r}")
    return d[key]

@dataclass
class Article:
    article_id: Any
    volume: float

@dataclass
class ArticleLocation:
    article_id: Any
    warehouse: Any
    aisle: Any
    position: Optional[Any] = None

    @property
    def aisle_key(self) -> str:
        # Concatenación textual: ("1","23") y ("12","3") comparten clave.
        return as_text(self.warehouse) + as_text(self.aisle)

@dataclass
class Order:
    order_id: Any
    article_ids: List[Any]   # con posibles repetidos

@dataclass
class ProblemInstance:
    articles: Dict[str, Article]              # as_text(id) -> Article
    locations: Dict[Any, ArticleLocation]     # id tal cual -> ubicación
    orders: List[Order] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "ProblemInstance":
        raw_articles = require_field(d, "Articles", "Instancia")
        articles: Dict[str, Article] = {}
        if isinstance(raw_articles, dict):
            for aid, a in raw_articles.items():
                articles[as_text(aid)] = Article(aid, require_field(a, "Volume", f"Artículo {aid}"))
        else:
            for a in raw_articles:
                aid = require_field(a, "ArticleId", "Artículo")
                articles[as_text(aid)] = Article(aid, require_field(a, "Volume", f"Artículo {aid}"))

        locations: Dict[Any, ArticleLocation] = {}
        for loc in require_field(d, "ArticleLocations", "Instancia"):
            aid = require_field(loc, "ArticleId", "Ubicación")
            locations[aid] = ArticleLocation(
                article_id=aid,
                warehouse=require_field(loc, "Warehouse", f"Ubicación de {aid}"),
                aisle=require_field(loc, "Aisle", f"Ubicación de {aid}"),
                position=loc.get("Position"),
            )

        orders = [
            Order(
                order_id=require_field(o, "OrderId", "Pedido"),
                article_ids=list(require_field(o, "ArticleIds", "Pedido")),
            )
            for o in require_field(d, "Orders", "Instancia")
        ]
        return ProblemInstance(articles=articles, locations=locations, orders=orders)

    def to_dict(self) -> Dict[str, Any]:
        locs = []
        for loc in self.locations.values():
            rec = {"ArticleId": loc.article_id, "Warehouse": loc.warehouse, "Aisle": loc.aisle}
            if loc.position is not None:
                rec["Position"] = loc.position
            locs.append(rec)
        return {
            "Articles": {as_text(a.article_id): {"Volume": a.volume} for a in self.articles.values()},
            "ArticleLocations": locs,
            "Orders": [{"OrderId": o.order_id, "ArticleIds": list(o.article_ids)} for o in self.orders],
        }

    # --------- búsquedas ---------
    def volume_of(self, article_id: Any) -> float:
        art = self.articles.get(as_text(article_id))
        if art is None:
            raise MalformedInput(f"Artículo {article_id} sin volumen en la instancia")
        return art.volume

    def location_of(self, article_id: Any) -> ArticleLocation:
        """Búsqueda estricta: el id 7 y el id "7" son artículos distintos."""
        loc = self.locations.get(article_id)
        if loc is None:
            key = as_text(article_id)
            if any(as_text(k) == key for k in self.locations):
                raise MalformedInput(
                    f"Artículo {article_id!r} sin ubicación; existe una con el mismo texto y otro tipo de id")
            raise MalformedInput(f"Artículo {article_id} sin ubicación en la instancia")
        return loc
