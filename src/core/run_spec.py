"""Typed run-spec parsing for declarative report pipelines.

A run-spec is a YAML file listing report steps. Each step is resolved
at load time into source overrides and output settings, with the
file-level defaults already layered underneath, so execution only has
to apply the overrides to the client's report options.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from core.constants import DEFAULT_REPORT_FORMAT
from core.errors import NameGraphRunSpecError
from core.run_spec_fields import (
    optional_delimiter,
    optional_int,
    optional_string,
    parse_report_format,
)
from core.types import ReportOptions

RUN_SPEC_VERSION = 1
_ROOT_KEYS = frozenset({"version", "defaults", "steps"})
_SOURCE_KEYS = frozenset({"source", "limit", "start_index", "delimiter"})
_STEP_KEYS: dict[str, frozenset[str]] = {
    "report": _SOURCE_KEYS | {"format"},
    "summary": _SOURCE_KEYS,
    "totals": _SOURCE_KEYS,
    "letters": _SOURCE_KEYS,
    "reachable": _SOURCE_KEYS,
    "export": _SOURCE_KEYS | {"output"},
}
SUPPORTED_RUN_SPEC_COMMANDS: tuple[str, ...] = tuple(_STEP_KEYS)


@dataclass(frozen=True)
class SourceOverrides:
    """Report options set by a run-spec; ``None`` keeps the client value.

    Attributes:
        source: Delimited source file.
        limit: Record cap, where 0 lifts the cap.
        start_index: Traversal start node.
        delimiter: Field delimiter.
    """

    source: Path | None = None
    limit: int | None = None
    start_index: int | None = None
    delimiter: str | None = None

    def layered_on(self, base: SourceOverrides) -> SourceOverrides:
        """Fill unset values from ``base``."""
        return SourceOverrides(
            source=self.source if self.source is not None else base.source,
            limit=self.limit if self.limit is not None else base.limit,
            start_index=self.start_index if self.start_index is not None else base.start_index,
            delimiter=self.delimiter if self.delimiter is not None else base.delimiter,
        )

    def apply(self, options: ReportOptions) -> ReportOptions:
        """Return ``options`` with every set override applied."""
        if self.source is not None:
            options = replace(options, source_path=self.source)
        if self.limit is not None:
            options = replace(options, max_records=self.limit or None)
        if self.start_index is not None:
            options = replace(options, start_index=self.start_index)
        if self.delimiter is not None:
            options = replace(options, delimiter=self.delimiter)
        return options


@dataclass(frozen=True)
class RunSpecStep:
    """One resolved pipeline step.

    Attributes:
        command: Step command name.
        overrides: Source overrides with run-spec defaults applied.
        report_format: Output format for ``report`` steps.
        output: Destination file for ``export`` steps.
    """

    command: str
    overrides: SourceOverrides
    report_format: str = DEFAULT_REPORT_FORMAT
    output: Path | None = None


@dataclass(frozen=True)
class RunSpec:
    """Validated run-spec root object."""

    version: int
    defaults: SourceOverrides
    steps: tuple[RunSpecStep, ...]


def load_run_spec(spec_path: str) -> RunSpec:
    """Load and validate a YAML run-spec from disk.

    Args:
        spec_path: File path to YAML run-spec.

    Returns:
        Run-spec with every step resolved.

    Raises:
        NameGraphRunSpecError: If the file is unreadable or fails validation.
    """
    document = _checked_mapping(_read_yaml(spec_path), "run spec", _ROOT_KEYS)
    version = document.get("version")
    if isinstance(version, bool) or version != RUN_SPEC_VERSION:
        raise NameGraphRunSpecError(
            f"Unsupported run spec version {version!r}. Set version: {RUN_SPEC_VERSION}."
        )
    defaults_mapping = _checked_mapping(
        document.get("defaults") or {}, "run spec defaults", _SOURCE_KEYS
    )
    defaults = _parse_overrides(defaults_mapping)
    raw_steps = document.get("steps")
    if not isinstance(raw_steps, list) or not raw_steps:
        raise NameGraphRunSpecError(
            "Run spec field 'steps' must be a non-empty list of commands."
        )
    steps = tuple(
        _parse_step(raw_step, f"run spec step #{position}", defaults)
        for position, raw_step in enumerate(raw_steps, start=1)
    )
    return RunSpec(version=RUN_SPEC_VERSION, defaults=defaults, steps=steps)


def _read_yaml(spec_path: str) -> object:
    spec_file = Path(spec_path).expanduser().resolve()
    try:
        payload: object = yaml.safe_load(spec_file.read_text(encoding="utf-8"))
    except OSError as error:
        raise NameGraphRunSpecError(
            f"Failed to read run spec at {spec_file}: {error}. Provide a readable YAML file."
        ) from error
    except yaml.YAMLError as error:
        raise NameGraphRunSpecError(
            f"Failed to parse YAML run spec at {spec_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise NameGraphRunSpecError(
            f"Run spec at {spec_file} is empty. Define 'version' and 'steps'."
        )
    return payload


def _checked_mapping(value: object, context: str, allowed_keys: frozenset[str]) -> dict:
    """Return ``value`` if it is a mapping whose keys are all allowed."""
    if not isinstance(value, dict):
        raise NameGraphRunSpecError(
            f"Invalid {context}: expected a mapping, got {type(value).__name__}."
        )
    unknown_keys = sorted(str(key) for key in value if key not in allowed_keys)
    if unknown_keys:
        raise NameGraphRunSpecError(
            f"Invalid {context}: unknown fields {', '.join(unknown_keys)}. "
            f"Allowed: {', '.join(sorted(allowed_keys))}."
        )
    return value


def _parse_step(raw_step: object, context: str, defaults: SourceOverrides) -> RunSpecStep:
    command = raw_step.get("command") if isinstance(raw_step, dict) else None
    allowed_keys = _STEP_KEYS.get(command) if isinstance(command, str) else None
    if allowed_keys is None:
        raise NameGraphRunSpecError(
            f"Unsupported command {command!r} in {context}. "
            f"Use one of: {', '.join(SUPPORTED_RUN_SPEC_COMMANDS)}."
        )
    step_mapping = _checked_mapping(raw_step, context, allowed_keys | {"command"})
    output = optional_string(step_mapping, "output")
    if command == "export" and output is None:
        raise NameGraphRunSpecError(f"Invalid {context}: export steps need an 'output' path.")
    return RunSpecStep(
        command=command,
        overrides=_parse_overrides(step_mapping).layered_on(defaults),
        report_format=parse_report_format(step_mapping),
        output=Path(output).expanduser() if output is not None else None,
    )


def _parse_overrides(mapping: dict) -> SourceOverrides:
    source = optional_string(mapping, "source")
    return SourceOverrides(
        source=Path(source).expanduser() if source is not None else None,
        limit=optional_int(mapping, "limit"),
        start_index=optional_int(mapping, "start_index"),
        delimiter=optional_delimiter(mapping, "delimiter"),
    )
