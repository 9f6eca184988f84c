"""Build configuration: which source to read and where each direction goes."""

from __future__ import annotations

import codecs
import json
from dataclasses import dataclass, fields
from pathlib import Path

from bidicss.errors import ConfigError, InvalidDirectionError
from bidicss.model.direction import Direction

DEFAULT_TEMPLATE = "{direction}-{stem}.css"


@dataclass(frozen=True)
class BuildConfig:
    source: str
    output_dir: str = "."
    output_template: str = DEFAULT_TEMPLATE  # fields: direction, stem, name
    encoding: str = "utf-8"
    directions: tuple[Direction, ...] = tuple(Direction)
    parallel: bool = False

    def __post_init__(self) -> None:
        for name in ("source", "output_dir", "output_template", "encoding"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {value!r}")
        if not isinstance(self.parallel, bool):
            raise ConfigError(f"parallel must be true or false, got {self.parallel!r}")
        if not all(isinstance(d, Direction) for d in self.directions):
            raise ConfigError(f"directions must be Direction values, got {self.directions!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigError(f"Unknown encoding {self.encoding!r}", cause=exc) from exc


@dataclass(frozen=True)
class BuildTarget:
    """One ``{output: source}`` pair, owned by a single direction."""

    direction: Direction
    source: Path
    output: Path


def _output_name(config: BuildConfig, direction: Direction) -> str:
    src = Path(config.source)
    try:
        return config.output_template.format(
            direction=direction.value, stem=src.stem, name=src.name
        )
    except (KeyError, IndexError, ValueError, AttributeError) as exc:
        raise ConfigError(
            f"Bad output_template {config.output_template!r}: {exc}", cause=exc
        ) from exc


def plan_targets(config: BuildConfig) -> list[BuildTarget]:
    """Expand *config* into one BuildTarget per direction.

    Raises ConfigError when two directions would write the same file.
    """
    if not config.directions:
        raise ConfigError("No directions to build")
    source = Path(config.source)
    out_dir = Path(config.output_dir)
    targets: list[BuildTarget] = []
    seen: dict[Path, Direction] = {}
    for direction in dict.fromkeys(config.directions):
        output = out_dir / _output_name(config, direction)
        if output in seen:
            raise ConfigError(
                f"{direction} and {seen[output]} both write {output}; "
                "include {direction} in output_template"
            )
        if output.resolve() == source.resolve():
            raise ConfigError(f"Output {output} would overwrite the source")
        seen[output] = direction
        targets.append(BuildTarget(direction=direction, source=source, output=output))
    return targets


_KEYS = {f.name for f in fields(BuildConfig)}


def load_config(path: str | Path) -> BuildConfig:
    """Load a BuildConfig from a JSON file.

    ``source`` and ``output_dir`` are resolved against the file's directory.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}", cause=exc) from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}", cause=exc) from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    unknown = sorted(set(data) - _KEYS)
    if unknown:
        raise ConfigError(f"{path}: unknown key(s): {', '.join(unknown)}")
    if "source" not in data:
        raise ConfigError(f"{path}: 'source' is required")

    for key in ("source", "output_dir"):
        if key in data and not isinstance(data[key], str):
            raise ConfigError(f"{path}: '{key}' must be a string")
    if "directions" in data and not isinstance(data["directions"], list):
        raise ConfigError(f"{path}: 'directions' must be a list")

    base = path.parent
    data["source"] = str(base / data["source"])
    data["output_dir"] = str(base / data.get("output_dir", "."))
    if "directions" in data:
        try:
            data["directions"] = tuple(Direction.parse(d) for d in data["directions"])
        except (InvalidDirectionError, TypeError) as exc:
            raise ConfigError(f"{path}: {exc}", cause=exc) from exc
    try:
        return BuildConfig(**data)
    except ConfigError as exc:
        raise ConfigError(f"{path}: {exc}", cause=exc) from exc
