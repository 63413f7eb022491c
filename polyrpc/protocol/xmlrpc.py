
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

"""The ``polyrpc.protocol.xmlrpc`` module contains the XML-RPC protocol, on
top of the marshalling code in the :mod:`xmlrpc.client` module."""

import logging
logger = logging.getLogger(__name__)

import xmlrpc.client

from datetime import date
from datetime import datetime
from decimal import Decimal
from xml.parsers.expat import ExpatError

from polyrpc.context import Response
from polyrpc.error import ArgumentError
from polyrpc.error import operation_name_required
from polyrpc.protocol import ProtocolBase


def _to_marshallable(value):
    """Converts what the xmlrpc marshaller does not know about to the closest
    thing that it does."""

    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return value.isoformat()

    if isinstance(value, Decimal):
        return str(value)

    if isinstance(value, dict):
        return dict((str(k), _to_marshallable(v)) for k, v in value.items())

    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_marshallable(v) for v in value]

    return value


class XmlRpcProtocol(ProtocolBase):
    """The XML-RPC protocol. Faults are sent as standard fault structs whose
    ``faultCode`` is the http status code of the fault."""

    mime_type = 'text/xml; charset=utf-8'
    fault_mime_type = mime_type

    def parse_request(self, ctx, classification=None):
        try:
            args, name = xmlrpc.client.loads(ctx.body, use_builtin_types=True)

        except (ExpatError, xmlrpc.client.ResponseError, ValueError,
                                                             TypeError) as e:
            raise ArgumentError("invalid XML-RPC request: %s" % (e,))

        if not name:
            raise operation_name_required()

        logger.debug("xml-rpc call to %r with %r", name, args)

        return name, args

    def serialize_result(self, operation, value):
        data = xmlrpc.client.dumps((_to_marshallable(value),),
                    methodresponse=True, allow_none=True, encoding='utf-8')

        return Response(200, self.mime_type, data.encode('utf8'))

    def serialize_fault(self, fault):
        data = xmlrpc.client.dumps(
                     xmlrpc.client.Fault(fault.http_status, fault.message),
                                       methodresponse=True, encoding='utf-8')

        return Response(fault.http_status, self.fault_mime_type,
                                                           data.encode('utf8'))
