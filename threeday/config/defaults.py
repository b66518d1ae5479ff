"""Default grid cells with pre-resolved forecast grid coordinates."""

from threeday.config.schema import GridConfig

DEFAULT_GRID = GridConfig(name="Seoul", nx=60, ny=127)

GRID_PRESETS: dict[str, GridConfig] = {
    "seoul": DEFAULT_GRID,
    "busan": GridConfig(name="Busan", nx=98, ny=76),
    "incheon": GridConfig(name="Incheon", nx=55, ny=124),
    "daejeon": GridConfig(name="Daejeon", nx=67, ny=100),
    "jeju": GridConfig(name="Jeju", nx=52, ny=38),
}
