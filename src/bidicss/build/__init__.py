from bidicss.build.builder import BuildReport, TargetResult, build, read_source, write_output
from bidicss.build.config import BuildConfig, BuildTarget, load_config, plan_targets

__all__ = [
    "BuildConfig",
    "BuildTarget",
    "BuildReport",
    "TargetResult",
    "build",
    "load_config",
    "plan_targets",
    "read_source",
    "write_output",
]
