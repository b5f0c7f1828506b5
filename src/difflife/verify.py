"""
Incremental Stepper Correctness Verification

Runs the incremental stepper and the brute-force reference side by side from
the same seeded grid and checks, generation by generation, that the cells and
the neighbour counts agree.
"""

import numpy as np
from loguru import logger

from difflife import reference
from difflife.grid import BoolGrid
from difflife.simulation import Simulation


class VerificationRunner:
    def __init__(self, width: int, height: int, generations: int, seed: int = 42, verbose: bool = False):
        self.width = width
        self.height = height
        self.generations = generations
        self.seed = seed
        self.verbose = verbose
        self.checked = 0

    def _report_difference(self, generation: int, incremental: BoolGrid, expected: BoolGrid) -> None:
        diff = np.flatnonzero(incremental.data != expected.data)
        index = int(diff[0])
        row, col = divmod(index, self.width)
        print(f"  ✗ Generation {generation}: {diff.size} cells differ")
        print(f"    First difference at position {index} (row {row}, col {col})")
        print(f"    Reference: {int(expected.data[index])}, Incremental: {int(incremental.data[index])}")
        logger.error(f"Cell mismatch at generation {generation}, first at ({col}, {row})")

    def run(self) -> bool:
        print("Incremental Stepper Correctness Verification")
        print(f"Grid size: {self.width}×{self.height}")
        print(f"Generations: {self.generations}")
        print(f"Seed: {self.seed}\n")

        initial = BoolGrid.random(self.width, self.height, seed=self.seed)
        expected = initial.copy()
        simulation = Simulation(initial.copy())

        if not np.array_equal(simulation.counts.committed_counts(), reference.count_neighbours(expected)):
            print("  ✗ Seeded neighbour counts differ from brute force")
            logger.error("Seeded neighbour counts differ from brute force")
            return False

        for generation in range(1, self.generations + 1):
            incremental = simulation.advance()
            expected = reference.evolve(expected)
            self.checked = generation

            if incremental != expected:
                self._report_difference(generation, incremental, expected)
                return False
            if not np.array_equal(simulation.counts.committed_counts(), reference.count_neighbours(expected)):
                print(f"  ✗ Generation {generation}: neighbour counts drifted from brute force")
                logger.error(f"Neighbour count drift at generation {generation}")
                return False
            if self.verbose:
                print(f"  Generation {generation:>5}: {incremental.fingerprint()[:16]}... ✓")

        print("=" * 70)
        print(f"✓ INCREMENTAL AND BRUTE-FORCE RESULTS IDENTICAL FOR {self.generations} GENERATIONS")
        print(f"  Final fingerprint: {simulation.current.fingerprint()}")
        print("=" * 70)
        logger.info("Correctness verification passed")
        return True
