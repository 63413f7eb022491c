
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

"""The ``polyrpc.protocol.rest`` module contains the path-based protocol:
``GET /<service>/<operation>/<arg1>/<arg2>/`` calls ``operation`` with the
url-decoded path segments as positional arguments.
"""

import logging
logger = logging.getLogger(__name__)

from urllib.parse import unquote

from polyrpc.classifier import get_path_info
from polyrpc.context import Response
from polyrpc.error import operation_name_required
from polyrpc.protocol import ProtocolBase


class RestProtocol(ProtocolBase):
    """The path-based protocol. Strings are returned as they are, every other
    return value is json-encoded.

    :param service_name: The name of the path segment that precedes the
        operation name. Only needed when the adapter is used without the
        classifier.
    """

    mime_type = 'application/json'

    def __init__(self, service_name=None, mime_type=None,
                                                        string_encoding=None):
        super(RestProtocol, self).__init__(mime_type=mime_type,
                                               string_encoding=string_encoding)

        self.service_name = service_name

    def get_path_info(self, ctx, classification):
        if classification is not None and classification.path_info is not None:
            return classification.path_info

        if self.service_name is None:
            return ctx.path.strip('/')

        return get_path_info(ctx.path, self.service_name).strip('/')

    def parse_request(self, ctx, classification=None):
        path_info = self.get_path_info(ctx, classification)

        segments = [unquote(s, encoding=self.string_encoding)
                                         for s in path_info.strip('/').split('/')]

        name = segments[0]
        if len(name) == 0:
            raise operation_name_required()

        args = segments[1:]
        logger.debug("rest call to %r with %r", name, args)

        return name, args

    def serialize_result(self, operation, value):
        if isinstance(value, str):
            body = value.encode(self.string_encoding)
        elif isinstance(value, bytes):
            body = value
        else:
            body = self.to_json_bytes(value)

        return Response(200, self.mime_type, body)
