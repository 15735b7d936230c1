import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    MAX_GRID_SIZE: int = 9
    WORKERS: int = 1
    ALL_WORDS_DISPLAY_THRESHOLD: int = 10
    MAX_RESULTS: int = 0

    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "words"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


# Fields that may be changed at runtime through /api/settings
EDITABLE_FIELDS: dict[str, type] = {
    "WORKERS": int,
    "MAX_RESULTS": int,
    "ALL_WORDS_DISPLAY_THRESHOLD": int,
    "DEBUG": bool,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply the given editable fields to ``cfg``.

    Returns a mapping of field name to error message for every value that
    was rejected; valid fields are applied even when others fail.
    """
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "not an editable setting"
            continue
        try:
            coerced = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid value {value!r}: {e}"
            continue
        if EDITABLE_FIELDS[name] is int and coerced < 0:
            errors[name] = "must not be negative"
            continue
        if name == "WORKERS" and coerced < 1:
            errors[name] = "must be at least 1"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()
