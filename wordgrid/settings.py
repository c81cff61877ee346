import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    BOARD_SIZE: int = 5
    MAX_BOARD_SIZE: int = 1024
    MAX_RESULTS: int = 50

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    HOST: str = "127.0.0.1"
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "data" / "words.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(type(getattr(self, fld)), env_val))

        # Follow an overridden BASE_DIR unless the dictionary was set explicitly
        if "DICTIONARY_PATH" not in os.environ:
            self.DICTIONARY_PATH = self.BASE_DIR / "data" / "words.txt"


# Fields that may be changed at runtime through the settings API.
EDITABLE_FIELDS: dict[str, type] = {
    "BOARD_SIZE": int,
    "MAX_RESULTS": int,
    "LOG_LEVEL": str,
    "DEBUG": bool,
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _coerce(kind: type, value):
    if issubclass(kind, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if issubclass(kind, Path):
        return Path(value)
    if issubclass(kind, int) and isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected an integer, got {value!r}")
    return kind(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable fields to ``cfg``; return ``{field: error}`` for rejected ones.

    Valid fields are applied even when others in the same call are rejected.
    """
    errors: dict[str, str] = {}
    for name, raw in values.items():
        kind = EDITABLE_FIELDS.get(name)
        if kind is None:
            if hasattr(cfg, name):
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            value = _coerce(kind, raw)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid {kind.__name__}: {e}"
            continue
        if name == "BOARD_SIZE" and not 1 <= value <= cfg.MAX_BOARD_SIZE:
            errors[name] = f"must be between 1 and {cfg.MAX_BOARD_SIZE}"
            continue
        if name == "MAX_RESULTS" and value < 0:
            errors[name] = "must be >= 0"
            continue
        if name == "LOG_LEVEL":
            value = value.upper()
            if value not in _LOG_LEVELS:
                errors[name] = f"must be one of {', '.join(_LOG_LEVELS)}"
                continue
        setattr(cfg, name, value)
    return errors


settings = Settings()
