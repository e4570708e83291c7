"""
配置文件 - 项目配置管理
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GrpcTlsSettings(BaseModel):
    enabled: bool = False
    cert: Optional[str] = None
    key: Optional[str] = None
    ca: Optional[str] = None


class GrpcSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 50051
    # This maps to GRPC option grpc.max_concurrent_streams
    max_concurrent_streams: int = 100
    tls: GrpcTlsSettings = Field(default_factory=GrpcTlsSettings)

    @field_validator("port")
    @classmethod
    def _validate_port(cls, v: int) -> int:
        if not 0 <= v <= 65535:
            raise ValueError("port must be between 0 and 65535")
        return v


class FeatureSourceSettings(BaseModel):
    # JSON list of {"location": {"latitude", "longitude"}, "name"}
    path: str = "features.json"


class NoteRegistrySettings(BaseModel):
    # global: one lock for every location; per_key: one lock per location
    lock_mode: Literal["global", "per_key"] = "global"


class Settings(BaseSettings):
    """项目配置"""

    # 基础配置
    PROJECT_NAME: str = Field(default="RouteGuide")
    VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=True)
    ENVIRONMENT: str = Field(default="development")

    # 日志配置：grpc 运行时自身的日志级别（其 DEBUG 输出非常多）
    GRPC_LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="WARNING")

    # 分组配置：嵌套模型，环境变量形如 GRPC__PORT=50052
    grpc: GrpcSettings = Field(default_factory=GrpcSettings)
    features: FeatureSourceSettings = Field(default_factory=FeatureSourceSettings)
    notes: NoteRegistrySettings = Field(default_factory=NoteRegistrySettings)

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",
        env_nested_delimiter="__",
    )


settings = Settings()
