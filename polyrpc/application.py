
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

from polyrpc.codegen import ClientGenerator
from polyrpc.contract import build_contract
from polyrpc.dispatcher import Dispatcher
from polyrpc.interface import HtmlDescriptor
from polyrpc.interface import PdfDescriptor
from polyrpc.interface import Wsdl11


class Application(object):
    """The Application class is the glue between a service definition, the
    protocols it's exposed with and the documents that describe it.

    Everything is built in the constructor and never modified afterwards, so
    an Application instance can be shared among any number of concurrent
    requests.

    :param service_class: The class whose public methods are exposed.
    :param endpoint:      The public url of the service.
    :param name:          The name of the service. Defaults to the
                          ``__service_name__`` attribute of the service class,
                          or its name.
    :param tns:           The target namespace of the wsdl document and the
                          soap messages. Defaults to the endpoint.
    :param factory:       A callable that returns a fresh service instance per
                          call. Defaults to the service class itself.
    :param config:        An arbitrary python object to store random global
                          data.

    Raises :class:`polyrpc.error.ContractError` when the service class does
    not expose any operation.
    """

    def __init__(self, service_class, endpoint, name=None, tns=None,
                                                     factory=None, config=None):
        self.service_class = service_class
        self.config = config

        self.contract = build_contract(service_class, endpoint,
                                          service_name=name, factory=factory)
        self.name = self.contract.service_name
        self.endpoint = self.contract.endpoint

        self.tns = tns
        if self.tns is None:
            self.tns = self.endpoint

        logger.info("Initializing application {%s}%s...", self.tns, self.name)

        self.wsdl11 = Wsdl11(self.contract, tns=self.tns)
        self.html = HtmlDescriptor(self.contract)
        self.pdf = PdfDescriptor(self.contract)
        for doc in (self.wsdl11, self.html, self.pdf):
            doc.build_interface_document()

        self.client_generator = ClientGenerator(self.contract)
        self.dispatcher = Dispatcher(self)

        logger.info("Application %s exposes %d operation(s) at %s", self.name,
                                             len(self.contract), self.endpoint)

    def dispatch(self, ctx):
        """Returns the :class:`polyrpc.context.Response` for the given
        :class:`polyrpc.context.RequestContext`."""

        return self.dispatcher.dispatch(ctx)

    def __repr__(self):
        return "%s(%r, %r)" % (self.__class__.__name__, self.name,
                                                                 self.endpoint)
