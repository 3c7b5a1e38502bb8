# Defaults shared by the library and the command line

DEFAULT_SIZE = 10
MIN_SIZE = 1
MAX_SIZE = 50

DEFAULT_ALGORITHM = "prim"
DEFAULT_STRATEGY = "left"

# Most recent path entries kept by a Navigator (None = unbounded, 0 = off)
DEFAULT_PATH_CAPACITY = 10_000

# Runner step budget when none is given: factor * size * size
STEP_BUDGET_FACTOR = 4

BENCHMARK_SIZES = (10, 25, 50)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'
