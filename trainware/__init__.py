# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
trainware - compose WSGI middleware into a single handler.
"""

from .train import Train, Middleware, WSGIApplication, new
from .defaults import default_handler
from .errors import TrainwareException, InvalidMiddlewareError, InvalidHandlerError
from .config import ObservabilityConfig, load_config
from .observability import setup_observability, setup_structured_logging

__version__ = "1.0.0"

__all__ = [
    "Train",
    "Middleware",
    "WSGIApplication",
    "new",
    "default_handler",
    "TrainwareException",
    "InvalidMiddlewareError",
    "InvalidHandlerError",
    "ObservabilityConfig",
    "load_config",
    "setup_observability",
    "setup_structured_logging"
]
