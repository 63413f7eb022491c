
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

"""The ``polyrpc.protocol.soap.soap11`` module contains the implementation of
the document/literal wrapped flavour of Soap 1.1.

The first child of the Soap Body names the operation. Its children are bound
to the parameters of the operation by their local names, or by their order
when the names don't match the parameter names. The response looks like: ::

    <soap11env:Envelope>
      <soap11env:Body>
        <tns:addResponse>
          <tns:addResult>8</tns:addResult>
        </tns:addResponse>
      </soap11env:Body>
    </soap11env:Envelope>
"""

import logging
logger = logging.getLogger(__name__)
logger_invalid = logging.getLogger(__name__ + ".invalid")

from base64 import b64encode
from datetime import date
from datetime import time
from decimal import Decimal

from lxml import etree
from lxml.etree import XMLParser
from lxml.etree import XMLSyntaxError

from polyrpc.const import RESPONSE_SUFFIX
from polyrpc.const import RESULT_SUFFIX
from polyrpc.const import xml as ns
from polyrpc.context import Response
from polyrpc.error import ArgumentError
from polyrpc.error import operation_name_required
from polyrpc.protocol import ProtocolBase


def _parse_xml_string(xml_string, parser):
    try:
        return etree.fromstring(xml_string, parser)

    except XMLSyntaxError as e:
        logger_invalid.error("%r in string %r", e, xml_string)
        raise ArgumentError("invalid XML: %s" % (e,))


def _from_soap(in_envelope_xml, ns_soap=ns.NS_SOAP11_ENV):
    """Returns the first child of the Soap Body of the given envelope, or
    ``None`` when the Body is empty."""

    if in_envelope_xml.tag != '{%s}Envelope' % ns_soap:
        raise ArgumentError('No {%s}Envelope element was found!' % ns_soap)

    body_envelope = in_envelope_xml.xpath('e:Body', namespaces={'e': ns_soap})
    if len(body_envelope) == 0:
        raise ArgumentError('No {%s}Body element was found!' % ns_soap)

    for child in body_envelope[0]:
        if isinstance(child.tag, str):
            return child

    return None


def _is_nil(elt):
    return elt.get(ns.XSI('nil'), '').lower() in ('true', '1')


def _child_elements(elt):
    return [c for c in elt if isinstance(c.tag, str)]


def _element_to_value(elt):
    """Children with distinct names make a dict, repeated names or a lone
    ``item`` child make a list."""

    if _is_nil(elt):
        return None

    children = _child_elements(elt)
    if len(children) == 0:
        return elt.text or ''

    names = [etree.QName(c).localname for c in children]
    if len(set(names)) == len(names) and names != ['item']:
        return dict((n, _element_to_value(c)) for n, c in zip(names, children))

    return [_element_to_value(c) for c in children]


class Soap11(ProtocolBase):
    """The Soap 1.1 protocol.

    :param contract: The :class:`polyrpc.contract.ServiceContract` whose
        parameter names are used for binding arguments by name.
    :param tns: The target namespace of the response elements. Defaults to
        the endpoint of the contract.
    """

    mime_type = 'text/xml; charset=utf-8'
    fault_mime_type = mime_type

    ns_soap_env = ns.NS_SOAP11_ENV

    def __init__(self, contract, tns=None, mime_type=None,
                                                        string_encoding=None):
        super(Soap11, self).__init__(mime_type=mime_type,
                                               string_encoding=string_encoding)

        self.contract = contract
        if tns is None:
            tns = contract.endpoint
        self.tns = tns

        self.parser_kwargs = dict(resolve_entities=False, no_network=True,
                                                            remove_comments=True)

    def get_args(self, name, children):
        names = [etree.QName(c).localname for c in children]
        values = [_element_to_value(c) for c in children]

        if name in self.contract:
            param_names = self.contract.get_operation(name).parameter_names
            if len(set(names)) == len(names) and set(names) <= set(param_names):
                return dict(zip(names, values))

        return values

    def parse_request(self, ctx, classification=None):
        if ctx.body is None or len(ctx.body) == 0:
            raise ArgumentError("No Soap envelope was found in the request")

        root = _parse_xml_string(ctx.body, XMLParser(**self.parser_kwargs))
        body = _from_soap(root, self.ns_soap_env)
        if body is None:
            raise operation_name_required()

        name = etree.QName(body).localname
        args = self.get_args(name, _child_elements(body))

        logger.debug("soap call to %r with %r", name, args)

        return name, args

    def gen_envelope(self):
        nsmap = {
            'soap11env': self.ns_soap_env,
            'xsi': ns.NS_XSI,
            ns.PREF_TNS: self.tns,
        }

        envelope = etree.Element('{%s}Envelope' % self.ns_soap_env, nsmap=nsmap)
        body = etree.SubElement(envelope, '{%s}Body' % self.ns_soap_env)

        return envelope, body

    def to_parent(self, parent, tag, value):
        elt = etree.SubElement(parent, tag)

        if value is None:
            elt.set(ns.XSI('nil'), 'true')

        elif isinstance(value, bool):
            elt.text = 'true' if value else 'false'

        elif isinstance(value, str):
            elt.text = value

        elif isinstance(value, (int, float, Decimal)):
            elt.text = str(value)

        elif isinstance(value, (bytes, bytearray)):
            elt.text = b64encode(value).decode('ascii')

        elif isinstance(value, (date, time)):
            elt.text = value.isoformat()

        elif isinstance(value, dict):
            for k, v in value.items():
                self.to_parent(elt, '{%s}%s' % (self.tns, k), v)

        else:
            for v in value:
                self.to_parent(elt, '{%s}item' % self.tns, v)

        return elt

    def to_bytes(self, document):
        return etree.tostring(document, xml_declaration=True,
                                                               encoding="UTF-8")

    def serialize_result(self, operation, value):
        envelope, body = self.gen_envelope()

        wrapper = etree.SubElement(body, '{%s}%s%s' % (self.tns, operation.name,
                                                              RESPONSE_SUFFIX))
        if operation.returns is not None or value is not None:
            self.to_parent(wrapper, '{%s}%s%s' % (self.tns, operation.name,
                                                         RESULT_SUFFIX), value)

        return Response(200, self.mime_type, self.to_bytes(envelope))

    def serialize_fault(self, fault):
        envelope, body = self.gen_envelope()

        elt = etree.SubElement(body, '{%s}Fault' % self.ns_soap_env)
        etree.SubElement(elt, 'faultcode').text = 'soap11env:%s' % \
                                                                 fault.faultcode
        etree.SubElement(elt, 'faultstring').text = fault.message

        return Response(fault.http_status, self.fault_mime_type,
                                                        self.to_bytes(envelope))
