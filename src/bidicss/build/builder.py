"""Build step: read one source, write one stylesheet per direction."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from bidicss.build.config import BuildConfig, BuildTarget, plan_targets
from bidicss.errors import BidiCssError, OutputWriteError, SourceReadError
from bidicss.generator import generate
from bidicss.model.direction import resolve_profile
from bidicss.stylesheet import StylesheetSource, parse_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TargetResult:
    """Outcome of building one direction."""

    target: BuildTarget
    substitutions: int = 0
    error: BidiCssError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BuildReport:
    """Per-direction results of one build run."""

    results: list[TargetResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.results)

    @property
    def failures(self) -> list[TargetResult]:
        return [r for r in self.results if not r.ok]


def read_source(path: Path, encoding: str = "utf-8") -> StylesheetSource:
    """Read and scan a stylesheet source; raises SourceReadError."""
    try:
        # newline="" keeps the file's line endings so output is byte-faithful
        with path.open(encoding=encoding, newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise SourceReadError(str(path), cause=exc) from exc
    return parse_source(text)


def write_output(path: Path, text: str, encoding: str = "utf-8") -> None:
    """Write a generated stylesheet; raises OutputWriteError."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=encoding, newline="") as f:
            f.write(text)
    except (OSError, UnicodeEncodeError, LookupError) as exc:
        raise OutputWriteError(str(path), cause=exc) from exc


def build_target(
    source: StylesheetSource, target: BuildTarget, encoding: str = "utf-8"
) -> TargetResult:
    """Generate and write one direction. Errors are captured, not raised."""
    try:
        generated = generate(source, resolve_profile(target.direction))
        write_output(target.output, generated.text, encoding)
    except BidiCssError as exc:
        logger.error("%s: %s", target.direction, exc)
        return TargetResult(target=target, error=exc)
    logger.info(
        "%s: wrote %s (%d substitutions)",
        target.direction,
        target.output,
        generated.substitutions,
    )
    return TargetResult(target=target, substitutions=generated.substitutions)


def build(config: BuildConfig) -> BuildReport:
    """Run a build for every direction in *config*.

    The source is read once; a read failure raises SourceReadError. Each
    direction then succeeds or fails on its own and owns its output path
    exclusively, so targets may run concurrently.
    """
    targets = plan_targets(config)
    source = read_source(targets[0].source, config.encoding)
    logger.info(
        "Building %s (%d token references) for %s",
        targets[0].source,
        len(source.tokens),
        ", ".join(t.direction for t in targets),
    )

    if config.parallel and len(targets) > 1:
        with ThreadPoolExecutor(max_workers=len(targets)) as pool:
            results = list(
                pool.map(lambda t: build_target(source, t, config.encoding), targets)
            )
    else:
        results = [build_target(source, t, config.encoding) for t in targets]
    return BuildReport(results=results)
