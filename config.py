# config.py

# Grid dimensions
DEFAULT_ROWS = 10
DEFAULT_COLS = 12

# Rows grow on demand when an access lands below the last row
CAN_EXPAND_Y = True

# Print every committed change-set
VERBOSE = False

# Text rendering
CELL_SPACE = 1   # width of an empty cell between brackets

# Snapshot persistence
SNAPSHOT_FILENAME = "grid_snapshot.json"
SNAPSHOT_INDENT = 2

# Plotting
FIGURE_SIZE = (8, 8)
COLOR_ITEM = (0.35, 0.55, 0.85)
COLOR_EDGE = (0.1, 0.1, 0.3)
COLOR_GRID = (0.85, 0.85, 0.85)
ITEM_ALPHA = 0.6

# Scripted demo
DEMO_STEP_DELAY = 0.25   # seconds between instructions
