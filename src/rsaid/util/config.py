from pydantic import BaseModel  # noqa: F401 For reexporting
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdSettings(BaseSettings):
    model_config = SettingsConfigDict(
        # Automatically pick up the named variables from the environment and
        # strip the APP_ prefix
        env_prefix="APP_",
        # Nested models can have individual fields set via APP_OUTER__INNER
        env_nested_delimiter="__",
        # Rename the env vars to lowercase in pydantic
        case_sensitive=False,
        # Don't allow mutation of the settings object, and allow it to be hashed
        frozen=True,
    )
