import os

import polars as pl

from ahma_studio.sample_data import sample_price_series


def generate_sample_series(name, days=180, seed=7):
    rows = sample_price_series(days, seed=seed)

    if not os.path.exists("data"):
        os.makedirs("data")

    # Text form read by run_indicator.py
    with open(f"data/{name}.txt", "w", encoding="utf-8") as file:
        file.write("\n".join(f"{label}, {close}" for label, close in rows) + "\n")

    df = pl.DataFrame(
        {
            "date": [label for label, _ in rows],
            "close": [close for _, close in rows],
        }
    )
    df.write_csv(f"data/{name}.csv")
    print(f"Generated data/{name}.txt and data/{name}.csv")


if __name__ == "__main__":
    generate_sample_series("sample", 180)
    generate_sample_series("sample_long", 1000, seed=11)
