from __future__ import annotations
import argparse, yaml, os, random
from typing import List

from puzzle_core.parser import format_grid
from puzzle_core.scramble import scramble


"""
Generate scrambled, solvable puzzle files and a list file for run_batch.

Usage:
  python -m scripts.make_puzzles --config configs/puzzles.yaml --seed 42
"""

def write_list(path: str, items: List[str]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for it in items:
            f.write(it + "\n")


def make_puzzles(cfg: dict, seed: int) -> List[str]:
    out_dir = cfg["output"]["dir"]
    os.makedirs(out_dir, exist_ok=True)
    rng = random.Random(seed)

    written: List[str] = []
    for entry in cfg["puzzles"]:
        size = int(entry["size"])
        depth = int(entry["depth"])
        for i in range(int(entry.get("count", 1))):
            s = scramble(size, depth, seed=rng.getrandbits(32))
            path = os.path.join(out_dir, f"n{size}_d{depth}_{i:03d}.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write(format_grid(s))
            written.append(path)
    return written


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/puzzles.yaml")
    p.add_argument("--seed", type=int, default=42)
    args = p.parse_args()

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    written = make_puzzles(cfg, args.seed)
    write_list(cfg["output"]["list"], written)

    print("written:")
    print(" puzzles:", cfg["output"]["dir"], len(written))
    print(" list:", cfg["output"]["list"])

if __name__ == "__main__":
    main()
