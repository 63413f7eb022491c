
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

"""The ``polyrpc.protocol.http`` module contains the plain http protocol,
where the operation name is in the ``call`` field and the arguments in the
``param`` field of a form-encoded request. The usual array encodings are
supported: ::

    call=add&param[]=5&param[]=3
    call=add&param[0]=5&param[1]=3
    call=add&param=5&param=3
    call=add&param[a]=5&param[b]=3

The last one binds arguments by name.
"""

import logging
logger = logging.getLogger(__name__)

from decimal import Decimal

from polyrpc.context import Response
from polyrpc.error import ArgumentError
from polyrpc.error import operation_name_required
from polyrpc.protocol import ProtocolBase


class HttpFormProtocol(ProtocolBase):
    """The form-encoded http protocol. Successful responses are plain text,
    faults are the usual json error bodies."""

    mime_type = 'text/plain; charset=utf-8'

    call_field = 'call'
    param_field = 'param'

    def get_args(self, params):
        prefix = self.param_field + "["
        positional = []
        named = {}

        for key in params.keys():
            if not (key.startswith(prefix) and key.endswith("]")):
                continue

            index = key[len(prefix):-1]
            if len(index) == 0:
                continue

            if index.isdigit():
                positional.append((int(index), params.get(key)))
            else:
                named[index] = params.get(key)

        if len(named) > 0:
            if len(positional) > 0:
                raise ArgumentError("positional and named arguments can't be "
                                                                       "mixed")
            return named

        if len(positional) > 0:
            positional.sort(key=lambda p: p[0])
            return [value for _, value in positional]

        retval = params.getlist(self.param_field + '[]')
        if len(retval) > 0:
            return retval

        return params.getlist(self.param_field)

    def parse_request(self, ctx, classification=None):
        name = ctx.get_param(self.call_field)
        if not name:
            raise operation_name_required()

        args = self.get_args(ctx.get_param_source(self.param_field))
        logger.debug("http call to %r with %r", name, args)

        return name, args

    def to_text(self, value):
        if value is None:
            return ''

        if isinstance(value, bool):
            return 'true' if value else 'false'

        if isinstance(value, str):
            return value

        if isinstance(value, (int, float, Decimal)):
            return str(value)

        return self.to_json_bytes(value).decode(self.string_encoding)

    def serialize_result(self, operation, value):
        if isinstance(value, bytes):
            body = value
        else:
            body = self.to_text(value).encode(self.string_encoding)

        return Response(200, self.mime_type, body)
