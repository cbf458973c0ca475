from __future__ import annotations
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # names of the variables consulted when no key value or key file is given
    private_key_env: str = Field(
        default="NACL_PRIVATE_KEY", alias="SIGNIFY_PRIVATE_KEY_ENV"
    )
    public_key_env: str = Field(default="NACL_PUBLIC_KEY", alias="SIGNIFY_PUBLIC_KEY_ENV")

    public_key_mode: int = Field(default=0o444, alias="SIGNIFY_PUBLIC_KEY_MODE")
    private_key_mode: int = Field(default=0o400, alias="SIGNIFY_PRIVATE_KEY_MODE")
    output_mode: int = Field(default=0o640, alias="SIGNIFY_OUTPUT_MODE")

    log_level: str = Field(default="WARNING", alias="SIGNIFY_LOG_LEVEL")

    @field_validator("public_key_mode", "private_key_mode", "output_mode", mode="before")
    @classmethod
    def _octal_mode(cls, v):
        """Read file modes from text as octal, with or without a 0o prefix."""
        if isinstance(v, str):
            s = v.strip().lower()
            if s.startswith("0o"):
                s = s[2:]
            v = int(s, 8)
        if not 0 <= v <= 0o7777:
            raise ValueError("file mode out of range")
        return v


settings = Settings()  # load at import
