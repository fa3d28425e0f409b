"""
Embedding provider settings.

Selects the embedding backend and model used for both ingestion and
query embedding. Dimensionality must stay constant for a deployment.

Dependencies: pydantic, pydantic_settings
System role: Embedding model configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict

from semantic_search.configs.base import BaseSettings


class EmbeddingSettings(BaseSettings):
    """Embedding backend configuration (Gemini or Bedrock)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(
        default="google",
        description="Embedding provider: 'google' (Gemini) or 'bedrock' (Titan)",
    )
    model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID for the selected provider",
    )
    dimension: int | None = Field(
        default=None,
        description="Expected vector length; vectors of any other length are rejected",
    )
    google_api_key: SecretStr | None = Field(
        default=None,
        description="Google API key for Gemini embeddings",
    )
    aws_region: str = Field(default="us-east-1", description="AWS region for Bedrock")
