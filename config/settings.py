from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global configuration for ImitatorAI."""

    # Only read by the CLI; the library takes the key as an explicit argument
    ANTHROPIC_API_KEY: str = ""
    MODEL_NAME: str = "claude-sonnet-4-20250514"

    # Replies are meant to be one short sentence
    MAX_TOKENS: int = 256

    # Passed straight to the Anthropic client
    REQUEST_TIMEOUT: float = 60.0  # seconds
    MAX_RETRIES: int = 2

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
