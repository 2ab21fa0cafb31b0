from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    environment: str = "local"
    debug: bool = True
    log_level: str = "INFO"

    # Upper bounds applied by the HTTP layer before a roll is evaluated.
    # The engine itself accepts any size; these keep untrusted input cheap.
    max_times: int = 100
    max_dice: int = 100
    max_sides: int = 1000

    # Longest accepted notation string, in characters (16 KiB of request body).
    max_notation_length: int = 1024 * 16


settings = Settings()
