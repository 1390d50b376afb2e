# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Environment-driven configuration for trainware logging and tracing.
"""

import os
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

ENVIRONMENTS = ('production', 'staging', 'development', 'test')


class ObservabilityConfig(BaseModel):
    """Logging and tracing settings."""

    model_config = ConfigDict(
        validate_assignment=True,
        frozen=True
    )

    environment: str = Field(default='development', description="Deployment environment")
    otel_enabled: bool = Field(default=False, description="Install an OpenTelemetry tracer provider")
    service_name: str = Field(default='trainware', description="Resource service.name")
    service_version: str = Field(default='1.0.0', description="Resource service.version")
    log_level: Optional[str] = Field(default=None, description="Overrides the per-environment log level")
    otlp_endpoint: Optional[str] = Field(default=None, description="OTLP collector endpoint")

    @field_validator('environment')
    @classmethod
    def validate_environment(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ENVIRONMENTS:
            raise ValueError(f"environment must be one of {', '.join(ENVIRONMENTS)}")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        v = v.strip().upper()
        if v not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"unknown log level: {v}")
        return v


def load_config() -> ObservabilityConfig:
    """
    Build configuration from environment variables.

    Returns:
        ObservabilityConfig populated from ENVIRONMENT, OTEL_ENABLED,
        SERVICE_NAME, SERVICE_VERSION, LOG_LEVEL and OTEL_EXPORTER_OTLP_ENDPOINT
    """
    return ObservabilityConfig(
        environment=os.getenv('ENVIRONMENT', 'development'),
        otel_enabled=os.getenv('OTEL_ENABLED', 'false').lower() == 'true',
        service_name=os.getenv('SERVICE_NAME', 'trainware'),
        service_version=os.getenv('SERVICE_VERSION', '1.0.0'),
        log_level=os.getenv('LOG_LEVEL'),
        otlp_endpoint=os.getenv('OTEL_EXPORTER_OTLP_ENDPOINT')
    )
