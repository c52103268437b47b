"""SVG directory to CSS mask-icon build package."""

__version__ = "1.0.0"

from .config import BuildConfig, ConfigurationError
from .pipeline import BuildPipeline, BuildPipelineError, BuildResult, build_icons
from .records import Accepted, IconRecord, IconRecordBuilder, Rejected

__all__ = [
    "__version__",
    "BuildConfig",
    "ConfigurationError",
    "BuildPipeline",
    "BuildPipelineError",
    "BuildResult",
    "build_icons",
    "IconRecord",
    "IconRecordBuilder",
    "Accepted",
    "Rejected",
]
