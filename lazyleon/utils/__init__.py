from .plotting_config import DEFAULT_PLOT_CFG, MINIMAL_PLOT_CFG, PlottingConfig


__all__ = [
    "DEFAULT_PLOT_CFG",
    "MINIMAL_PLOT_CFG",
    "PlottingConfig",
]
