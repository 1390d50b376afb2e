# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Exceptions raised when a train is built with values that cannot be composed.
"""

from typing import Any


class TrainwareException(Exception):
    """Base class for trainware exceptions."""

    def __init__(self, message: str, error_type: str = "trainware-error"):
        super().__init__(message)
        self.message = message
        self.error_type = error_type


class InvalidMiddlewareError(TrainwareException, TypeError):
    """Raised when a non-callable value is added to a train."""

    def __init__(self, middleware: Any):
        super().__init__(
            f"Middleware must be callable, got {type(middleware).__name__}",
            "invalid-middleware"
        )
        self.middleware = middleware


class InvalidHandlerError(TrainwareException, TypeError):
    """Raised when a train is applied to a non-callable handler."""

    def __init__(self, handler: Any):
        super().__init__(
            f"Handler must be a WSGI callable, got {type(handler).__name__}",
            "invalid-handler"
        )
        self.handler = handler
