"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]
PositiveInt = Annotated[int, Field(gt=0)]
BcryptRounds = Annotated[int, Field(ge=4, le=31)]


class Settings(BaseSettings):
    """Environment-driven process-wide authentication defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    identity_field: NonEmptyStr | None = Field(
        default=None,
        validation_alias="AUTHSENSE_IDENTITY_FIELD",
    )
    password_field: NonEmptyStr | None = Field(
        default=None,
        validation_alias="AUTHSENSE_PASSWORD_FIELD",
    )
    hashed_password_field: NonEmptyStr | None = Field(
        default=None,
        validation_alias="AUTHSENSE_HASHED_PASSWORD_FIELD",
    )
    login_error: NonEmptyStr | None = Field(
        default=None,
        validation_alias="AUTHSENSE_LOGIN_ERROR",
    )
    password_hash_scheme: Literal["bcrypt", "argon2"] = Field(
        default="bcrypt",
        validation_alias="PASSWORD_HASH_SCHEME",
    )
    bcrypt_rounds: BcryptRounds = Field(default=12, validation_alias="BCRYPT_ROUNDS")
    argon2_time_cost: PositiveInt = Field(default=3, validation_alias="ARGON2_TIME_COST")
    argon2_memory_cost: PositiveInt = Field(
        default=65536,
        validation_alias="ARGON2_MEMORY_COST",
    )
    argon2_parallelism: PositiveInt = Field(default=4, validation_alias="ARGON2_PARALLELISM")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
