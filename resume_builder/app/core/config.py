import logging
from functools import lru_cache

from pydantic import Field, PostgresDsn, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)

GEMINI_OPENAI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_LLM_MODEL = "gemini-2.0-flash-lite"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    This class defines all configuration values used by the application,
    including database connection details, token signing parameters, the
    generative-AI endpoint and the limits applied to resume generation.
    Values are loaded from environment variables with fallback defaults.

    Attributes:
        database_url (PostgresDsn): Database connection URL for PostgreSQL.
        secret_key (str): Secret key for signing JWT tokens.
            Must be kept secure and changed in production.
        algorithm (str): Algorithm used for JWT token encoding.
        access_token_expire_minutes (int): Duration in minutes for which access tokens remain valid.
        llm_api_key (str | None): API key for the generative-AI endpoint.
            When unset, resume generation answers with the sample fallback resume.
        llm_endpoint (str): OpenAI-compatible base URL of the generative-AI endpoint.
        llm_model_name (str): Model used for generation and extraction.
        max_prompt_words (int): Maximum number of words accepted in a generation prompt.
        max_prompt_chars (int): Maximum number of characters accepted in a generation prompt.
        anonymous_prompt_limit (int): Number of anonymous prompts retained in the usage log.
        resume_count_cache_ttl_seconds (int): Lifetime of the cached public resume count.
        anonymous_user_email (str): Email of the sentinel account that owns anonymized resumes.

    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
    )

    # Database settings
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="resume_builder", validation_alias="DB_NAME")
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: str = Field(default="", validation_alias="DB_PASSWORD")
    db_echo: bool = Field(default=False, validation_alias="DB_ECHO")

    @computed_field
    @property
    def database_url(self) -> PostgresDsn:
        """
        Assembled database URL from components.

        Returns:
            PostgresDsn: The fully assembled PostgreSQL connection URL.

        Notes:
            1. The scheme is set to "postgresql".
            2. The username, password, host, port, and database name are retrieved from the instance attributes.

        """
        return PostgresDsn.build(
            scheme="postgresql",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            path=self.db_name,
        )

    # Security settings
    secret_key: str = Field(
        default="your-secret-key-change-in-production",
        validation_alias="SECRET_KEY",
    )
    algorithm: str = Field(default="HS256", validation_alias="ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=120,
        validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Generative AI settings
    llm_api_key: str | None = Field(default=None, validation_alias="GEMINI_API_KEY")
    llm_endpoint: str = Field(
        default=GEMINI_OPENAI_ENDPOINT,
        validation_alias="LLM_ENDPOINT",
    )
    llm_model_name: str = Field(
        default=DEFAULT_LLM_MODEL,
        validation_alias="LLM_MODEL_NAME",
    )

    # Generation limits
    max_prompt_words: int = Field(default=80, validation_alias="MAX_PROMPT_WORDS")
    max_prompt_chars: int = Field(default=600, validation_alias="MAX_PROMPT_CHARS")
    anonymous_prompt_limit: int = Field(
        default=100,
        validation_alias="ANONYMOUS_PROMPT_LIMIT",
    )
    resume_count_cache_ttl_seconds: int = Field(
        default=300,
        validation_alias="RESUME_COUNT_CACHE_TTL_SECONDS",
    )

    anonymous_user_email: str = Field(
        default="anonymous@resume-builder.invalid",
        validation_alias="ANONYMOUS_USER_EMAIL",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get the global settings instance.

    Returns:
        Settings: The global settings instance, containing all configuration values.

    Raises:
        ValidationError: If environment variables are present but invalid.

    Notes:
        1. Reads configuration from environment variables and the .env file.
        2. If environment variables are not set, default values are used.
        3. The function returns a cached instance to avoid repeated parsing of the .env file.
        4. This function performs disk access to read the .env file on first call.

    """
    return Settings()
