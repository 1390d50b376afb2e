# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
OpenTelemetry and logging setup.

The library only creates module loggers and tracers; applications call
``setup_observability`` once at startup to decide where spans and log
records go.
"""

import logging
from typing import Optional
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

from trainware.config import ObservabilityConfig, load_config

SAMPLING_RATIOS = {
    'production': 0.1,
    'staging': 0.5
}

LOG_LEVELS = {
    'production': logging.WARNING,
    'staging': logging.INFO,
    'development': logging.ERROR
}


def setup_observability(config: Optional[ObservabilityConfig] = None) -> Optional[TracerProvider]:
    """
    Initialize OpenTelemetry tracing and logging.

    Args:
        config: Settings to use, read from the environment when omitted

    Returns:
        The installed tracer provider, or None when tracing is disabled
    """
    config = config or load_config()

    setup_structured_logging(config)

    if not config.otel_enabled:
        return None

    sampler = TraceIdRatioBased(SAMPLING_RATIOS.get(config.environment, 1.0))

    resource = Resource.create({
        "service.name": config.service_name,
        "service.version": config.service_version,
        "deployment.environment": config.environment
    })

    tracer_provider = TracerProvider(
        sampler=sampler,
        resource=resource
    )

    if config.environment in ('production', 'staging'):
        # Without a collector endpoint spans are sampled but not exported
        if config.otlp_endpoint:
            otlp_exporter = OTLPSpanExporter(endpoint=config.otlp_endpoint)
            tracer_provider.add_span_processor(
                BatchSpanProcessor(otlp_exporter, max_export_batch_size=512)
            )
    else:
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        if config.otlp_endpoint:
            tracer_provider.add_span_processor(
                BatchSpanProcessor(OTLPSpanExporter(endpoint=config.otlp_endpoint))
            )

    trace.set_tracer_provider(tracer_provider)

    logging.getLogger(__name__).info(
        "Tracing enabled",
        extra={
            "environment": config.environment,
            "service_name": config.service_name
        }
    )

    return tracer_provider


def setup_structured_logging(config: ObservabilityConfig) -> int:
    """
    Configure the root logger for the given environment.

    Args:
        config: Observability settings

    Returns:
        The root log level that was applied
    """
    if config.log_level:
        log_level = logging.getLevelName(config.log_level)
    else:
        log_level = LOG_LEVELS.get(config.environment, logging.ERROR)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s %(levelname)s %(name)s %(message)s',
        handlers=[logging.StreamHandler()]
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(log_level)

    if config.environment == 'development' and not config.log_level:
        logging.getLogger('trainware').setLevel(logging.DEBUG)

    return log_level
