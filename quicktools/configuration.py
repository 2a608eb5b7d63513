"""Prepper-backed configuration loader for QuickTools."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, List, Mapping, Sequence

from dotenv import dotenv_values
from prepper import (
    Field,
    IoError,
    SchemaError,
    SchemaModel,
    ValidationError,
    model_validator,
)
from prepper.config import ConfigInstance
from prepper.loaders import _parse_file, _path_to_source, discover_file_paths
from prepper.merge import merge_layer
from prepper.provenance import ProvenanceRecorder

from .digest import BACKENDS, resolve_algorithm
from .errors import ConfigurationError
from .textstats import DEFAULT_WORDS_PER_MINUTE

APP_NAME = "QuickTools"


class QuickToolsConfig(SchemaModel):
    """Schema describing all supported configuration options."""

    QUICKTOOLS_DEBUG: bool = Field(
        default=False,
        description="Dump tool requests and responses to stderr.",
    )
    QUICKTOOLS_WORDS_PER_MINUTE: int = Field(
        default=DEFAULT_WORDS_PER_MINUTE,
        description="Reading speed used for reading time estimates.",
    )
    QUICKTOOLS_DEFAULT_ALGORITHMS: str = Field(
        default="SHA-1,SHA-256,SHA-384,SHA-512",
        description="Comma separated digest algorithms used when none are requested.",
    )
    QUICKTOOLS_DIGEST_BACKEND: str = Field(
        default="hashlib",
        description="Digest backend identifier.",
    )

    @model_validator(mode="before")
    def _normalise_values(data: Any) -> Any:
        if isinstance(data, dict):
            backend = data.get("QUICKTOOLS_DIGEST_BACKEND")
            if isinstance(backend, str):
                data["QUICKTOOLS_DIGEST_BACKEND"] = backend.strip().lower() or "hashlib"
            algorithms = data.get("QUICKTOOLS_DEFAULT_ALGORITHMS")
            if isinstance(algorithms, (list, tuple)):
                data["QUICKTOOLS_DEFAULT_ALGORITHMS"] = ",".join(
                    str(item) for item in algorithms
                )
        return data

    def default_algorithms(self) -> List[str]:
        return [
            item.strip()
            for item in self.QUICKTOOLS_DEFAULT_ALGORITHMS.split(",")
            if item.strip()
        ]


@lru_cache(maxsize=1)
def _load_config_instance(app_dir: Path | None = None) -> ConfigInstance:
    """Load configuration layers once and cache the immutable instance."""

    base_dir = app_dir or Path.cwd()
    try:
        provenance = ProvenanceRecorder()
        combined = _load_discovered_yaml(app_dir=base_dir, provenance=provenance)
        _merge_env_sources(
            combined,
            provenance=provenance,
            app_dir=base_dir,
            schema=QuickToolsConfig,
        )

        # Every field has a default, so an empty layer set is valid.
        model = QuickToolsConfig.validate(combined, provenance=provenance)
        _validate_settings(model)

        instance = ConfigInstance(
            model=model,
            provenance=provenance,
            env_prefix=None,
            schema_cls=QuickToolsConfig,
        )
        return instance
    except IoError as exc:
        raise ConfigurationError(
            f"Configuration files could not be read: {exc}"
        ) from exc
    except SchemaError as exc:
        raise ConfigurationError(f"Configuration schema error: {exc}") from exc
    except ValidationError as exc:
        issues = _format_validation_errors(exc.to_dict())
        raise ConfigurationError(issues) from exc


def _load_discovered_yaml(
    *,
    app_dir: Path,
    provenance: ProvenanceRecorder,
) -> dict[str, Any]:
    """Load YAML configuration files using Prepper's discovery rules."""

    result: dict[str, Any] = {}
    discovered = discover_file_paths(
        APP_NAME,
        "yaml",
        app_dir=app_dir,
        extra_paths=None,
    )
    for path, label in discovered:
        parsed = _parse_file(path, "yaml")
        if not isinstance(parsed, Mapping):
            raise IoError(
                f"Invalid configuration file {path}: expected a mapping at the root."
            )
        source = _path_to_source(label, "yaml", path)
        merge_layer(result, parsed, provenance=provenance, source=source, layer="file")
    return result


def _merge_env_sources(
    target: dict[str, Any],
    *,
    provenance: ProvenanceRecorder,
    app_dir: Path,
    schema: type[SchemaModel],
) -> None:
    """Merge .env and process environment variables into the target mapping."""

    allowed = set(schema.__field_infos__.keys())

    def merge_values(values: Mapping[str, str], *, source_prefix: str) -> None:
        for key, value in sorted(values.items()):
            if value is None:
                continue
            if key not in allowed:
                continue
            merge_layer(
                target,
                {key: value},
                provenance=provenance,
                source=f"env:{source_prefix}:{key}",
                layer="env",
            )

    dotenv_path = app_dir / ".env"
    if dotenv_path.exists():
        dotenv_content = dotenv_values(dotenv_path)
        merge_values(
            {k: v for k, v in dotenv_content.items() if v is not None},
            source_prefix=".env",
        )

    merge_values(
        {k: v for k, v in os.environ.items() if isinstance(v, str)},
        source_prefix="process",
    )


def _validate_settings(settings: QuickToolsConfig) -> None:
    errors: list[str] = []

    if settings.QUICKTOOLS_WORDS_PER_MINUTE <= 0:
        errors.append("QUICKTOOLS_WORDS_PER_MINUTE must be a positive integer.")

    unknown = [
        name for name in settings.default_algorithms() if resolve_algorithm(name) is None
    ]
    if unknown:
        errors.append(
            "QUICKTOOLS_DEFAULT_ALGORITHMS contains unsupported algorithms: "
            f"{', '.join(unknown)}."
        )

    if settings.QUICKTOOLS_DIGEST_BACKEND not in BACKENDS:
        errors.append(
            "QUICKTOOLS_DIGEST_BACKEND must be one of: "
            f"{', '.join(sorted(BACKENDS))}."
        )

    if errors:
        bullet_list = "\n".join(f"- {message}" for message in errors)
        raise ConfigurationError(
            "Configuration validation errors detected:\n" + bullet_list
        )


def _format_validation_errors(entries: Sequence[dict[str, Any]]) -> str:
    details: list[str] = []
    for entry in entries:
        path = entry.get("path") or []
        if isinstance(path, (list, tuple)):
            location = ".".join(str(part) for part in path if part not in {None, ""})
        else:
            location = str(path)
        message = str(entry.get("message") or entry.get("msg") or "Invalid value")
        source = entry.get("source")
        origin = f" (source: {source})" if source else ""
        prefix = f"{location}: " if location else ""
        details.append(f"- {prefix}{message}{origin}")
    return "Configuration validation errors detected:\n" + "\n".join(details)


def get_config(app_dir: Path | None = None) -> ConfigInstance:
    """Return the immutable configuration instance."""

    return _load_config_instance(app_dir=app_dir)


def get_settings(app_dir: Path | None = None) -> QuickToolsConfig:
    """Return the validated schema model for typed access."""

    return get_config(app_dir=app_dir).model()


def clear_settings_cache() -> None:
    """Forget cached settings so the next lookup reloads every source."""

    _load_config_instance.cache_clear()
