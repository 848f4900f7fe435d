import argparse
from pathlib import Path
from src.config.limits import load_limits

def main(argv=None):
    parser = argparse.ArgumentParser(description="Validar e imprimir los límites y costos activos.")
    parser.add_argument("--config", type=Path, help="Ruta a JSON/YAML (opcional)")
    args = parser.parse_args(argv)

    limits = load_limits(args.config)
    print(limits.summary())

if __name__ == "__main__":
    main()
