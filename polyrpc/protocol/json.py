
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

"""The ``polyrpc.protocol.json`` module contains the json envelope protocol.

A request carries a single ``json`` field, either form-encoded in the POST
body or in the query string, whose value is a document like: ::

    {"call": "add", "param": [5, 3]}

``param`` can also be an object, in which case the arguments are bound by
name. The response is ``{"result": 8}``.
"""

import logging
logger = logging.getLogger(__name__)

import simplejson as json
from simplejson import JSONDecodeError

from polyrpc.context import Response
from polyrpc.error import ArgumentError
from polyrpc.error import operation_name_required
from polyrpc.protocol import ProtocolBase


class JsonProtocol(ProtocolBase):
    """An implementation of the json envelope protocol that uses the
    simplejson package."""

    mime_type = 'application/json'

    field_name = 'json'

    def parse_request(self, ctx, classification=None):
        data = ctx.get_param(self.field_name)
        if data is None or len(data) == 0:
            raise ArgumentError("json value is required")

        try:
            doc = json.loads(self.decode_string(data))
        except JSONDecodeError as e:
            raise ArgumentError("invalid JSON: %s" % (e,))

        if not isinstance(doc, dict):
            raise ArgumentError("invalid JSON: the request must be an object")

        name = doc.get('call', None)
        if not name:
            raise operation_name_required()

        if not isinstance(name, str):
            raise ArgumentError("invalid JSON: call must be a string")

        args = doc.get('param', None)
        if args is None:
            args = ()
        elif not isinstance(args, (list, dict)):
            args = (args,)

        logger.debug("json call to %r with %r", name, args)

        return name, args

    def serialize_result(self, operation, value):
        return Response(200, self.mime_type,
                                        self.to_json_bytes({"result": value}))
