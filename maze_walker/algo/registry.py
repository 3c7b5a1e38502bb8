import random
from typing import Dict, Optional, Type
from maze_walker.core.grid import Algorithm, Grid
from maze_walker.algo.base import Generator
from maze_walker.algo.dfs import RecursiveBacktracker
from maze_walker.algo.kruskal import KruskalAlgorithm
from maze_walker.algo.prim import PrimsAlgorithm

GENERATORS: Dict[Algorithm, Type[Generator]] = {
    Algorithm.PRIM: PrimsAlgorithm,
    Algorithm.BACKTRACKING: RecursiveBacktracker,
    Algorithm.KRUSKAL: KruskalAlgorithm,
}

def create_generator(grid: Grid, algorithm=Algorithm.PRIM,
                     rng: Optional[random.Random] = None, seed: int = None) -> Generator:
    cls = GENERATORS[Algorithm.parse(algorithm)]
    return cls(grid, rng=rng, seed=seed)
