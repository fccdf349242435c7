import os

from pydantic import BaseModel, ConfigDict, field_validator

from sab_detector.core.languages import normalize_language

DEFAULT_TARGET_NAME = "SharedArrayBuffer"
DEFAULT_EXTENSIONS: tuple[str, ...] = (".js",)
DEFAULT_MAX_WORKERS = 8


class ScanConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    target_name: str = DEFAULT_TARGET_NAME
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    recursive: bool = False
    max_workers: int = DEFAULT_MAX_WORKERS
    language: str | None = None

    @field_validator("target_name")
    @classmethod
    def _non_empty_target(cls, value: str) -> str:
        if not value:
            raise ValueError("Target name must not be empty.")
        return value

    @field_validator("extensions")
    @classmethod
    def _dotted_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("At least one source extension is required.")
        return tuple(ext if ext.startswith(".") else f".{ext}" for ext in value)

    @field_validator("language")
    @classmethod
    def _known_language(cls, value: str | None) -> str | None:
        return normalize_language(value) if value else None

    @field_validator("max_workers")
    @classmethod
    def _positive_workers(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_workers must be at least 1.")
        return value


def load_config(**overrides: object) -> ScanConfig:
    """Build a config from environment defaults, then apply explicit overrides.

    Overrides whose value is ``None`` are ignored so CLI options left unset
    fall through to the environment.
    """
    values: dict[str, object] = {
        "target_name": os.getenv("SAB_DETECTOR_TARGET", DEFAULT_TARGET_NAME),
        "max_workers": int(os.getenv("SAB_DETECTOR_JOBS", str(DEFAULT_MAX_WORKERS))),
    }
    extensions = os.getenv("SAB_DETECTOR_EXTENSIONS")
    if extensions:
        values["extensions"] = tuple(ext.strip() for ext in extensions.split(",") if ext.strip())

    values.update({key: value for key, value in overrides.items() if value is not None})
    return ScanConfig.model_validate(values)
