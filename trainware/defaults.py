# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Fallback handler used when a train is applied without an explicit handler.
"""

from werkzeug.exceptions import NotFound


def default_handler():
    """
    Build the library default handler.

    Werkzeug HTTP exceptions are WSGI applications themselves, so a ``NotFound``
    instance answers every request with ``404 Not Found``, the same outcome as
    an empty router.

    Returns:
        WSGI application
    """
    return NotFound()
