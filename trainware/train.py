# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Middleware train: an immutable, ordered collection of WSGI middleware.

A middleware is any callable taking a WSGI application and returning a WSGI
application, e.g. ``ProxyFix`` or a function closing over the wrapped app.
Middleware is appended to the back of the train and applied in insertion
order, so the first middleware ends up innermost and the last one outermost:
the last middleware added sees the request first and the response last.
"""

from typing import Any, Callable, Iterable, Iterator, Optional, Tuple
from flask import Flask
from opentelemetry import trace
import logging

from trainware import defaults
from trainware.errors import InvalidHandlerError, InvalidMiddlewareError

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

WSGIApplication = Callable[[dict, Callable[..., Any]], Iterable[bytes]]
Middleware = Callable[[WSGIApplication], WSGIApplication]


class Train:
    """Ordered middleware collection; every add returns a new train."""

    def __init__(self, default_handler: Optional[WSGIApplication] = None):
        """
        Create an empty train.

        Args:
            default_handler: Handler used by ``apply`` when called without one.
                Defaults to ``defaults.default_handler()``.
        """
        if default_handler is not None and not callable(default_handler):
            raise InvalidHandlerError(default_handler)

        self._middlewares: Tuple[Middleware, ...] = ()
        self._default_handler = default_handler

    def _derive(self, middlewares: Tuple[Middleware, ...]) -> 'Train':
        train = Train(self._default_handler)
        train._middlewares = middlewares
        return train

    @property
    def middlewares(self) -> Tuple[Middleware, ...]:
        return self._middlewares

    def add(self, middleware: Optional[Middleware]) -> 'Train':
        """
        Append middleware to the back of the train.

        Args:
            middleware: Callable wrapping a WSGI application, or None

        Returns:
            A new train with the middleware appended, or this train when
            middleware is None

        Raises:
            InvalidMiddlewareError: If middleware is neither None nor callable
        """
        if middleware is None:
            return self

        if not callable(middleware):
            raise InvalidMiddlewareError(middleware)

        return self._derive(self._middlewares + (middleware,))

    def add_many(self, *middlewares: Optional[Middleware]) -> 'Train':
        """Add each middleware in order; shorthand for chained ``add`` calls."""
        train = self
        for middleware in middlewares:
            train = train.add(middleware)

        return train

    def apply(self, handler: Optional[WSGIApplication] = None) -> WSGIApplication:
        """
        Wrap handler with every middleware of the train.

        Args:
            handler: Terminal WSGI application. When omitted the train's
                default handler is used.

        Returns:
            Composed WSGI application; handler itself for an empty train

        Raises:
            InvalidHandlerError: If handler is not callable
        """
        with tracer.start_as_current_span("train.apply") as span:
            use_default = handler is None
            if use_default:
                handler = self._default_handler
                if handler is None:
                    handler = defaults.default_handler()
            elif not callable(handler):
                raise InvalidHandlerError(handler)

            span.set_attributes({
                "train.length": len(self._middlewares),
                "train.default_handler_used": use_default
            })

            for middleware in self._middlewares:
                handler = middleware(handler)

            logger.debug(
                "Applied middleware train",
                extra={
                    "length": len(self._middlewares),
                    "default_handler_used": use_default
                }
            )

            return handler

    def install(self, app: Flask) -> Flask:
        """
        Apply the train onto a Flask application's WSGI callable.

        Args:
            app: Flask application

        Returns:
            The same application, with ``wsgi_app`` wrapped
        """
        app.wsgi_app = self.apply(app.wsgi_app)
        return app

    def __len__(self) -> int:
        return len(self._middlewares)

    def __iter__(self) -> Iterator[Middleware]:
        return iter(self._middlewares)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Train):
            return NotImplemented
        return self._middlewares == other._middlewares

    def __hash__(self) -> int:
        return hash(self._middlewares)

    def __repr__(self) -> str:
        names = ', '.join(getattr(mw, '__name__', type(mw).__name__) for mw in self._middlewares)
        return f"Train([{names}])"


def new(default_handler: Optional[WSGIApplication] = None) -> Train:
    """Create an empty train."""
    return Train(default_handler)
