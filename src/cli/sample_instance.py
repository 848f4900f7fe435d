import argparse
from pathlib import Path

from src.config.loader import write_document
from src.instance.generator import InstanceSpec, InstanceGenerator

def main(argv=None):
    parser = argparse.ArgumentParser(description="Generar una instancia sintética.")
    parser.add_argument("--out", type=Path, default=Path("outputs/instance.json"))
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--articles", type=int, default=200)
    parser.add_argument("--orders", type=int, default=100)
    parser.add_argument("--warehouses", type=int, default=4)
    parser.add_argument("--aisles", type=int, default=10, help="pasillos por almacén")
    parser.add_argument("--popularity", choices=["uniforme", "concentrada"], default="concentrada")
    args = parser.parse_args(argv)

    spec = InstanceSpec(n_articles=args.articles, n_orders=args.orders, n_warehouses=args.warehouses,
                        aisles_per_warehouse=args.aisles, popularity=args.popularity)
    instance = InstanceGenerator(spec, seed=args.seed).make_instance()
    out = write_document(args.out, instance.to_dict())
    n_items = sum(len(o.article_ids) for o in instance.orders)
    print(f"[OK] Instancia → {out}  ({len(instance.articles)} artículos, {len(instance.orders)} pedidos, {n_items} ítems)")

if __name__ == "__main__":
    main()
