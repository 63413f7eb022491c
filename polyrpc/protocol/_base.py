
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

import logging
logger = logging.getLogger(__name__)

from datetime import date
from datetime import time

import simplejson as json

from polyrpc.context import Response


class JsonEncoder(json.JSONEncoder):
    """Knows how to serialize the values operations commonly return on top
    of what simplejson handles. ``Decimal`` and ``bytes`` values are
    handled by simplejson itself."""

    def default(self, o):
        if isinstance(o, (date, time)):
            # datetime is a subclass of date
            return o.isoformat()

        try:
            return super(JsonEncoder, self).default(o)

        except TypeError as e:
            # if json can't serialize it, it's possibly a generator or a set.
            # If not, we give up.
            try:
                return list(o)
            except TypeError:
                raise e


class ProtocolBase(object):
    """Base class for protocol adapters.

    A protocol adapter parses an incoming request into an
    ``(operation_name, args)`` pair and serializes the return value of the
    operation, or the fault that occurred while processing the request, back
    into its own envelope. Adapters are stateless after construction and are
    shared among concurrent requests.

    :param mime_type: Overrides the content type of successful responses.
    :param string_encoding: The charset of the textual payloads.
    """

    mime_type = 'application/octet-stream'
    fault_mime_type = 'application/json'
    default_string_encoding = 'utf8'

    def __init__(self, mime_type=None, string_encoding=None):
        if mime_type is not None:
            self.mime_type = mime_type

        self.string_encoding = string_encoding
        if self.string_encoding is None:
            self.string_encoding = self.default_string_encoding

    def parse_request(self, ctx, classification=None):
        """Returns an ``(operation_name, args)`` tuple for the given
        :class:`polyrpc.context.RequestContext`. ``args`` is either a sequence
        of positional arguments or a mapping of parameter names to values.

        Raises :class:`polyrpc.error.Fault` when the request does not fit the
        grammar of the protocol.
        """

        raise NotImplementedError()

    def serialize_result(self, operation, value):
        """Returns the :class:`polyrpc.context.Response` that carries the
        return value of the given operation."""

        raise NotImplementedError()

    def serialize_fault(self, fault):
        """Returns the :class:`polyrpc.context.Response` that carries the
        given fault. The default implementation produces the json error
        body. The status code is always the one in the fault."""

        return Response(fault.http_status, self.fault_mime_type,
                                        self.to_json_bytes(fault.to_dict()))

    def to_json_bytes(self, value):
        return json.dumps(value, cls=JsonEncoder).encode(self.string_encoding)

    def decode_string(self, data):
        if isinstance(data, bytes):
            return data.decode(self.string_encoding)
        return data
