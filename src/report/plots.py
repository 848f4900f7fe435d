from pathlib import Path
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def plot_tour_cost_by_batch(csv_path: Path, out_png: Path) -> Path:
    out_png = Path(out_png)
    df = pd.read_csv(csv_path, dtype={"batch_id": str, "wave_id": str})
    plt.figure()
    plt.bar(df["batch_id"], df["tour_cost"])
    plt.xlabel("Batch")
    plt.ylabel("Costo de tour")
    plt.title("Costo de tour por batch")
    plt.xticks(rotation=90)
    plt.tight_layout()
    out_png.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_png)
    plt.close()
    return out_png

def plot_wave_sizes(csv_path: Path, out_png: Path) -> Path:
    out_png = Path(out_png)
    df = pd.read_csv(csv_path, dtype={"batch_id": str, "wave_id": str})
    # tamaño de wave = suma de ítems de sus batches
    agg = df.groupby("wave_id", as_index=False)["n_items"].sum()
    plt.figure()
    plt.hist(agg["n_items"].values, bins=min(20, max(1, len(agg))))
    plt.xlabel("Ítems por wave")
    plt.ylabel("Waves")
    plt.title("Distribución de tamaño de wave")
    plt.tight_layout()
    out_png.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_png)
    plt.close()
    return out_png
