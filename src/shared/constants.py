APP_NAME = 'ElevationScanner'

# Target number of samples in the coarse whole-sphere grid
INITIAL_SCAN_POINTS = 50_000

# Candidates kept from the coarse grid for the first refinement round
# (halved every following round, never below 1)
FILTER_SIZE = 100

# Refinement stops once the latitude increment reaches this size (degrees)
SMALLEST_INCREMENT_DEG = 0.001

# Each refinement round shrinks the latitude increment by this factor
REFINE_SHRINK_FACTOR = 0.125

# Longitude step of a refinement sub-grid, as a fraction of its span
REFINE_LONGITUDE_SUBSTEP = 0.1

# Upper bound on refinement rounds (0.125 shrink normally needs < 10)
MAX_REFINE_ROUNDS = 64

# Bump whenever the scanning algorithm changes in a way that alters results.
# Combined with the scan parameters into the persisted version stamp.
SCAN_ALGORITHM_REVISION = 1

# Reference-body walks longer than this are treated as a broken hierarchy
HIERARCHY_DEPTH_LIMIT = 100

# Save-file entry names
CACHE_VERSION_KEY = 'ElevationScannerVersion'
ELEVATION_PREFIX = 'elevation:'

# Name of the save-file table holding the scanner's node
SCENARIO_NODE_NAME = 'ELEVATION_SCANNER'

# Time spent precomputing at startup (ms); negative means unbounded
PRECOMPUTE_BUDGET_MS = 4000

# Human-inspectable export of all known peaks
DUMP_FILE_NAME = f'{APP_NAME}Dump.cfg'
DUMP_NODE_NAME = 'MAX_ELEVATION'

# Log memory usage after precompute runs
LOG_MEMORY_AFTER_PRECOMPUTE = True

# Default settings file location (relative to the working directory)
SETTINGS_FILE = 'configs/settings.toml'
