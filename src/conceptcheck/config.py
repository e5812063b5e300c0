from __future__ import annotations

import codecs
from dataclasses import dataclass, replace
from pathlib import Path

import yaml


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class CheckProfile:
    name: str = "default"

    # marker grammar
    step_marker: str = "*"
    concept_marker: str = "#"

    # discovery
    spec_extension: str = "spec"
    concept_extension: str = "cpt"
    encoding: str = "utf-8"

    # locating matched steps back in the spec
    strict_locator: bool = True

    # presentation
    presenter: str = "list"
    show_empty: bool = False

    def with_overrides(self, **overrides) -> "CheckProfile":
        """Copy with every non-None override applied (CLI flags win over files)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        prof = replace(self, **changes)
        validate_profile(prof)
        return prof


def _ext(value) -> str:
    # accept ".cpt" as well as "cpt"
    return str(value).lstrip(".")


def profile_from_cfg(cfg: dict | None) -> CheckProfile:
    # allow empty cfg
    cfg = cfg or {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config must be a mapping, got {type(cfg).__name__}")
    prof = CheckProfile(
        name=str(cfg.get("name", "default")),
        step_marker=str(cfg.get("step_marker", "*")),
        concept_marker=str(cfg.get("concept_marker", "#")),
        spec_extension=_ext(cfg.get("spec_extension", "spec")),
        concept_extension=_ext(cfg.get("concept_extension", "cpt")),
        encoding=str(cfg.get("encoding", "utf-8")),
        strict_locator=bool(cfg.get("strict_locator", True)),
        presenter=str(cfg.get("presenter", "list")).lower(),
        show_empty=bool(cfg.get("show_empty", False)),
    )
    validate_profile(prof)
    return prof


def validate_profile(prof: CheckProfile) -> None:
    for key in ("step_marker", "concept_marker"):
        marker = getattr(prof, key)
        if len(marker) != 1 or marker.isspace():
            raise ConfigError(f"{key} must be a single non-whitespace character, got {marker!r}")
    if prof.step_marker == prof.concept_marker:
        raise ConfigError("step_marker and concept_marker must differ")
    if not prof.spec_extension or not prof.concept_extension:
        raise ConfigError("File extensions must not be empty")
    try:
        codecs.lookup(prof.encoding)
    except LookupError:
        raise ConfigError(f"Unknown encoding {prof.encoding!r}") from None


def load_profile(path: Path | None) -> CheckProfile:
    """Read a YAML profile; no path means defaults."""
    if path is None:
        return CheckProfile()
    try:
        cfg = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    return profile_from_cfg(cfg)
