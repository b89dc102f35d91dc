"""Package-wide constants."""

SEED_ENV_VAR = "DILUTEDML_SEED"

DEFAULT_DISPLAY_LINES = 5
DEFAULT_CELL_FORMAT = ".3f"

BACKENDS = ("numpy", "cupy")
