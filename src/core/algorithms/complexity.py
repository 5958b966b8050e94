import math
import random
import time
from typing import List, Optional

import numpy as np

from src.core.structures.avl_tree import AVLTree

# Limite teórico da altura de uma AVL: h < 1.4405 * log2(n + 2)
AVL_HEIGHT_FACTOR = 1.45

class ComplexityMeter:
    """
    Medições empíricas de crescimento da AVL.
    Usado para validar que a altura (e portanto o custo das operações) é O(log n).
    """

    @staticmethod
    def height_bound(n: int) -> float:
        return AVL_HEIGHT_FACTOR * math.log2(n + 2)

    @staticmethod
    def measure_heights(sizes: List[int], shuffled: bool = False, seed: Optional[int] = None) -> np.ndarray:
        """
        Altura final da árvore após inserir 1..n para cada n em `sizes`.
        Com `shuffled=True`, a ordem de inserção é aleatória.
        """
        rng = random.Random(seed)
        heights = []
        for n in sizes:
            keys = list(range(1, n + 1))
            if shuffled:
                rng.shuffle(keys)
            tree = AVLTree()
            for key in keys:
                tree.insert(key)
            heights.append(tree.height())
        return np.array(heights, dtype=int)

    @staticmethod
    def measure_insert_times(sizes: List[int]) -> np.ndarray:
        """Tempo médio (segundos) por inserção sequencial para cada tamanho."""
        times = []
        for n in sizes:
            tree = AVLTree()
            start = time.perf_counter()
            for key in range(n):
                tree.insert(key)
            elapsed = time.perf_counter() - start
            times.append(elapsed / max(n, 1))
        return np.array(times, dtype=float)

    @staticmethod
    def height_ratios(sizes: List[int], heights: np.ndarray) -> np.ndarray:
        """Razão altura / log2(n + 2). Para uma AVL deve ficar abaixo de 1.45."""
        logs = np.log2(np.asarray(sizes, dtype=float) + 2)
        return heights / logs
