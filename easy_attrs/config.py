from pydantic_settings import BaseSettings, SettingsConfigDict


class EasyAttrsSettings(BaseSettings):
    # Key normalization
    deep_normalize_sequences: bool = True
    key_cache_size: int = 4096

    model_config = SettingsConfigDict(
        env_prefix="EASY_ATTRS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = EasyAttrsSettings()
