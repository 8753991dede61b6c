"""
Configuration settings for s3utils
"""

from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # AWS Configuration
    AWS_REGION: str = Field("us-east-1", description="Region used for the client and bucket creation")
    AWS_ACCESS_KEY_ID: Optional[str] = Field(None, description="Explicit access key")
    AWS_SECRET_ACCESS_KEY: Optional[str] = Field(None, description="Explicit secret key")
    AWS_SESSION_TOKEN: Optional[str] = Field(None, description="Optional session token")
    AWS_PROFILE: Optional[str] = Field(None, description="Named profile from ~/.aws")

    # S3 Settings
    S3_ENDPOINT_URL: Optional[str] = Field(None, description="Custom endpoint (MinIO, R2, localstack)")
    S3_DELETE_QUIET: bool = False

    def get_boto3_session_kwargs(self) -> Dict[str, Any]:
        """Get keyword arguments for boto3.session.Session"""
        kwargs: Dict[str, Any] = {}
        if self.AWS_ACCESS_KEY_ID and self.AWS_SECRET_ACCESS_KEY:
            kwargs['aws_access_key_id'] = self.AWS_ACCESS_KEY_ID
            kwargs['aws_secret_access_key'] = self.AWS_SECRET_ACCESS_KEY
            if self.AWS_SESSION_TOKEN:
                kwargs['aws_session_token'] = self.AWS_SESSION_TOKEN
        if self.AWS_PROFILE:
            kwargs['profile_name'] = self.AWS_PROFILE
        return kwargs

    def get_client_kwargs(self, region: Optional[str] = None) -> Dict[str, Any]:
        """Get keyword arguments for session.client('s3')"""
        kwargs: Dict[str, Any] = {'region_name': region or self.AWS_REGION}
        if self.S3_ENDPOINT_URL:
            kwargs['endpoint_url'] = self.S3_ENDPOINT_URL
        return kwargs


# Global settings instance
settings = Settings()
