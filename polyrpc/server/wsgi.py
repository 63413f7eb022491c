
#
# polyrpc - Copyright (C) polyrpc contributors.
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301
#

"""
A server that uses http as transport via wsgi. It doesn't contain any server
logic.
"""

import logging
logger = logging.getLogger(__name__)

from polyrpc.const.http import gen_status_line
from polyrpc.context import RequestContext
from polyrpc.error import Fault


class WsgiApplication(object):
    """A PEP-3333 compliant callable class.

    Every request is buffered and turned into a
    :class:`polyrpc.context.RequestContext` before anything else looks at it.

    :param app: A :class:`polyrpc.application.Application` instance.
    :param max_content_length: The maximum number of bytes a request body can
        have. Longer requests are answered with a 413 error.
    """

    def __init__(self, app, max_content_length=2 * 1024 * 1024):
        self.app = app
        self.max_content_length = max_content_length

    def __call__(self, req_env, start_response):
        """This method conforms to the WSGI spec for callable wsgi
        applications (PEP 3333)."""

        try:
            ctx = RequestContext.from_environ(req_env,
                                                        self.max_content_length)

        except Fault as e:
            logger.debug("Rejecting request: %r", e)
            response = self.app.dispatcher.serialize_fault(e)

        else:
            response = self.app.dispatch(ctx)

        start_response(gen_status_line(response.status), response.get_headers())

        if req_env.get('REQUEST_METHOD', 'GET').upper() == 'HEAD':
            return [b'']

        return [response.body]
