# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and fixtures.
"""

import os
import logging
import pytest
from flask import Flask, jsonify, request
from werkzeug.test import Client

# Set test environment
os.environ['ENVIRONMENT'] = 'test'

MARKER_KEY = 'trainware.test_markers'


def marker_middleware(n: int):
    """
    Middleware appending n to a per-request list carried in the WSGI environ.
    On the way out it appends an ``X-Train`` header with the same value.
    """
    def middleware(app):
        def wrapped(environ, start_response):
            environ = dict(environ)
            environ[MARKER_KEY] = list(environ.get(MARKER_KEY, [])) + [n]

            def marker_start_response(status, headers, exc_info=None):
                return start_response(status, list(headers) + [('X-Train', str(n))], exc_info)

            return app(environ, marker_start_response)
        return wrapped

    middleware.__name__ = f"marker_{n}"
    return middleware


def create_echo_app() -> Flask:
    """Flask app echoing the environ marker list as JSON."""
    app = Flask(__name__)

    @app.route('/')
    def echo():
        return jsonify(request.environ.get(MARKER_KEY, []))

    @app.route('/api/healthz')
    def health_check():
        return jsonify({"status": "healthy"})

    return app


def respond(handler, path: str = '/'):
    """Serve a single GET request through a WSGI handler."""
    return Client(handler).get(path)


@pytest.fixture
def echo_app():
    """Terminal Flask application."""
    return create_echo_app()


@pytest.fixture
def restore_logging():
    """Restore logger levels changed by logging setup."""
    root = logging.getLogger()
    trainware_logger = logging.getLogger('trainware')
    root_level = root.level
    trainware_level = trainware_logger.level
    yield
    root.setLevel(root_level)
    trainware_logger.setLevel(trainware_level)


@pytest.fixture
def make_marker():
    """Factory for marker middleware."""
    return marker_middleware


@pytest.fixture
def serve():
    """Serve a GET request through a WSGI handler."""
    return respond
