
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

"""The ``polyrpc.dispatcher`` module contains the :class:`Dispatcher`, the
state machine that every request goes through once: ::

    classify -> parse -> look up -> invoke -> serialize

Interface document and client download requests skip invocation and are
served from the collaborators of the application. Every fault is caught here
and rendered by the protocol the request was classified as, so no request
error ever reaches the host server.
"""

import logging
logger = logging.getLogger(__name__)
logger_client = logging.getLogger('.'.join([__name__, 'client']))
logger_server = logging.getLogger('.'.join([__name__, 'server']))

from polyrpc import const
from polyrpc.classifier import classify_request
from polyrpc.context import Response
from polyrpc.error import Fault
from polyrpc.error import InternalError
from polyrpc.protocol.http import HttpFormProtocol
from polyrpc.protocol.json import JsonProtocol
from polyrpc.protocol.rest import RestProtocol
from polyrpc.protocol.soap import Soap11
from polyrpc.protocol.xmlrpc import XmlRpcProtocol


class Dispatcher(object):
    """Routes requests to protocol adapters and interface documents.

    :param app: A :class:`polyrpc.application.Application` instance.
    """

    def __init__(self, app):
        self.app = app
        self.contract = app.contract

        self.protocols = {
            const.SOAP: Soap11(self.contract, tns=app.tns),
            const.JSON: JsonProtocol(),
            const.REST: RestProtocol(self.contract.service_name),
            const.XML_RPC: XmlRpcProtocol(),
            const.HTTP_FORM: HttpFormProtocol(),
        }

        # Renders faults that occur outside of a protocol adapter.
        self.fault_protocol = self.protocols[const.JSON]

        self.handlers = {
            const.WSDL: self.handle_wsdl,
            const.DESCRIPTOR_DOC: self.handle_descriptor,
            const.PDF: self.handle_pdf,
            const.CLIENT_DOWNLOAD: self.handle_client_download,
        }

    def dispatch(self, ctx):
        """Returns the :class:`polyrpc.context.Response` for the given
        :class:`polyrpc.context.RequestContext`."""

        classification = classify_request(ctx, self.contract.service_name)

        if classification.tag in const.INVOCATION_TAGS:
            return self.handle_rpc(ctx, classification)

        handler = self.handlers[classification.tag]
        try:
            return handler(ctx, classification)

        except Exception as e:
            logger_server.critical(e, exc_info=1)
            return self.serialize_fault(InternalError())

    def handle_rpc(self, ctx, classification):
        protocol = self.protocols[classification.tag]

        try:
            name, args = protocol.parse_request(ctx, classification)
            operation = self.contract.get_operation(name)

            logger.debug("%s call to operation %r", classification.tag, name)

            value = self.contract.invoke(name, args)

            return protocol.serialize_result(operation, value)

        except Fault as e:
            if 400 <= e.http_status < 500:
                logger_client.info("%r", e)
            else:
                logger.exception(e)

            return protocol.serialize_fault(e)

        except Exception as e:
            logger_server.critical(e, exc_info=1)

            return protocol.serialize_fault(InternalError())

    def serialize_fault(self, fault):
        """Renders a fault that can't be attributed to a protocol."""

        return self.fault_protocol.serialize_fault(fault)

    def handle_wsdl(self, ctx, classification):
        doc = self.app.wsdl11
        return Response(200, doc.mime_type, doc.get_interface_document())

    def handle_descriptor(self, ctx, classification):
        doc = self.app.html
        return Response(200, doc.mime_type, doc.get_interface_document())

    def handle_pdf(self, ctx, classification):
        doc = self.app.pdf
        return Response(200, doc.mime_type, doc.get_interface_document(),
                                                               doc.get_headers())

    def handle_client_download(self, ctx, classification):
        file_name, mime_type, source = self.app.client_generator \
               .generate_for_kind(classification.client_kind,
                                                        classification.minified)

        return Response(200, mime_type, source,
              (('Content-Disposition', 'attachment; filename="%s"' % file_name),))
