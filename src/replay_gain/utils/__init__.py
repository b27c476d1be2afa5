from .config import (
    AnalysisSettings,
    ScanConfig,
    load_scan_config,
)

__all__ = [
    "AnalysisSettings",
    "ScanConfig",
    "load_scan_config",
]
