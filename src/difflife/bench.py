"""
Generation Stepping Benchmark

Times the incremental stepper against full recomputation on the same grid.
"""

import csv
import time
from datetime import datetime
from pathlib import Path

from loguru import logger

from difflife import reference
from difflife.grid import BoolGrid
from difflife.simulation import Simulation


def trunc(s: str, n: int = 16) -> str:
    return s[:n] + "..." + s[-n:] if len(s) > n * 2 + 3 else s


class BenchmarkRunner:
    def __init__(self, width: int, height: int, generations: int, seed: int = 42, warmup: int = 5):
        self.width = width
        self.height = height
        self.generations = generations
        self.seed = seed
        self.warmup = warmup
        self.results = {}  # name -> {time, description}
        self.fingerprints = {}
        self.run_timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    def _initial(self) -> BoolGrid:
        return BoolGrid.random(self.width, self.height, seed=self.seed)

    def run_incremental(self) -> None:
        name = "Incremental"
        logger.info(f"Running {name}...")
        print(f"Running {name}...", end="", flush=True)

        simulation = Simulation(self._initial())
        for _ in range(self.warmup):
            simulation.advance()

        start = time.perf_counter()
        for _ in range(self.generations):
            simulation.advance()
        duration = time.perf_counter() - start

        self.results[name] = {"time": duration, "description": "pending deltas merged once per generation"}
        self.fingerprints[name] = simulation.current.fingerprint()
        logger.info(f"{name}: {duration:.6f}s")
        print(f" → {duration:.6f} s")

    def run_reference(self) -> None:
        name = "Brute force"
        logger.info(f"Running {name}...")
        print(f"Running {name}...", end="", flush=True)

        grid = self._initial()
        for _ in range(self.warmup):
            grid = reference.evolve(grid)

        start = time.perf_counter()
        for _ in range(self.generations):
            grid = reference.evolve(grid)
        duration = time.perf_counter() - start

        self.results[name] = {"time": duration, "description": "np.roll recount every generation"}
        self.fingerprints[name] = grid.fingerprint()
        logger.info(f"{name}: {duration:.6f}s")
        print(f" → {duration:.6f} s")

    def verify(self) -> bool:
        """Check both implementations finished on the same grid."""
        print("\nCorrectness Verification")
        ref_name = next(iter(self.fingerprints))
        ref_fp = self.fingerprints[ref_name]
        print(f"   Reference: {ref_name}: {trunc(ref_fp)}")
        all_match = True
        for name, fp in self.fingerprints.items():
            if name == ref_name:
                continue
            if fp == ref_fp:
                print(f"   {name:<20}: ✓ match")
            else:
                print(f"   {name:<20}: ✗ MISMATCH! {trunc(fp)}")
                logger.error(f"{name}: fingerprint mismatch")
                all_match = False
        return all_match

    def print_summary(self) -> None:
        baseline_name = next(iter(self.results))
        baseline_time = self.results[baseline_name]["time"]
        fastest_name = min(self.results.items(), key=lambda x: x[1]["time"])[0]

        print("\n" + "═" * 80)
        print(f" GENERATION STEPPING BENCHMARK — {self.width}×{self.height} grid, {self.generations} generations")
        print(f" Seed: {self.seed} | Warm-up: {self.warmup} generations | Time: {self.run_timestamp}")
        print("═" * 80)
        print(f" {'Implementation':<20} {'Time (s)':<12} {'Speedup':<10} {'Description'}")
        print("─" * 80)
        for name, result in self.results.items():
            t = result["time"]
            speedup = baseline_time / t if t else float("inf")
            marker = " ← FASTEST" if name == fastest_name else ""
            print(f" {name:<20} {t:>10.6f} s   {speedup:>6.2f}×   {result['description']}{marker}")
        print("═" * 80)

    def save_csv(self, path: str | Path) -> Path:
        path = Path(path)
        logger.info(f"Saving results to {path}")
        baseline_time = next(iter(self.results.values()))["time"]
        with open(path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow([
                "timestamp",
                "implementation",
                "grid_size",
                "generations",
                "time_seconds",
                "speedup_vs_baseline",
                "fingerprint",
            ])
            for name, result in self.results.items():
                speedup = baseline_time / result["time"] if result["time"] else float("inf")
                writer.writerow([
                    self.run_timestamp,
                    name,
                    f"{self.width}×{self.height}",
                    self.generations,
                    f"{result['time']:.6f}",
                    f"{speedup:.2f}",
                    trunc(self.fingerprints.get(name, ""), 32),
                ])
        print(f"\nResults saved to: {path}")
        return path

    def run(self) -> bool:
        logger.info(f"Starting benchmark run: {self.width}×{self.height} grid, {self.generations} generations")
        self.run_incremental()
        self.run_reference()
        ok = self.verify()
        self.print_summary()
        return ok
