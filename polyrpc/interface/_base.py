
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

from polyrpc.const import CLIENT_KINDS
from polyrpc.const import MINIFIABLE_CLIENT_KINDS


CLIENT_LABELS = {
    "phpsoapclient": "PHP SOAP client",
    "phpjsonclient": "PHP JSON client",
    "jsjsonclient": "JavaScript JSON client",
    "phprpcclient": "PHP XML RPC client",
    "phphttpclient": "PHP http client",
    "phprestclient": "PHP REST client",
}


class InterfaceDocumentBase(object):
    """Base class for the documents that are generated from a service
    contract. Documents are built once with :meth:`build_interface_document`
    and served as they are afterwards.

    :param contract: A :class:`polyrpc.contract.ServiceContract` instance.
    """

    mime_type = 'application/octet-stream'

    def __init__(self, contract):
        self.contract = contract
        self.__document = None

    @property
    def service_name(self):
        return self.contract.service_name

    @property
    def endpoint(self):
        return self.contract.endpoint

    def get_wsdl_url(self):
        return self.endpoint + '?WSDL'

    def get_pdf_url(self):
        return self.endpoint + '?PDF'

    def get_client_urls(self):
        """Returns a list of ``(label, url)`` pairs, one per client download.
        The minified javascript client has its own entry."""

        retval = []
        for token, _ in CLIENT_KINDS:
            url = "%s?%s" % (self.endpoint, token.upper())
            retval.append((CLIENT_LABELS[token], url))

            if token in MINIFIABLE_CLIENT_KINDS:
                retval.append(("Compressed " + CLIENT_LABELS[token],
                                                                  url + "&min"))

        return retval

    def build_interface_document(self):
        """Builds the document and caches it for
        :meth:`get_interface_document`."""

        self.__document = self.generate()

        logger.debug("%s for %r built, %d bytes", self.__class__.__name__,
                                         self.service_name, len(self.__document))

    def get_interface_document(self):
        if self.__document is None:
            self.build_interface_document()
        return self.__document

    def generate(self):
        """Returns the document as a ``bytes`` instance."""

        raise NotImplementedError()
