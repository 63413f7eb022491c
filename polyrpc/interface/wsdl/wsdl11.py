
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

"""The ``polyrpc.interface.wsdl.wsdl11`` module contains the implementation of
the WSDL 1.1 document that describes the document/literal wrapped Soap 1.1
flavour of a service contract."""

import logging
logger = logging.getLogger(__name__)

from lxml import etree
from lxml.etree import SubElement

from polyrpc.const import RESPONSE_SUFFIX
from polyrpc.const import RESULT_SUFFIX
from polyrpc.const import xml as ns
from polyrpc.const.xml import WSDL11
from polyrpc.const.xml import WSDL11_SOAP
from polyrpc.const.xml import XSD
from polyrpc.interface._base import InterfaceDocumentBase
from polyrpc.model import get_xsd_type


class Wsdl11(InterfaceDocumentBase):
    """The WSDL 1.1 document of a service contract.

    One request element and one ``<operation>Response`` element is declared
    per operation. Parameters that have default values are optional, return
    values are always optional. Types that don't map to a schema type are
    declared as ``xs:anyType``.

    :param contract: A :class:`polyrpc.contract.ServiceContract` instance.
    :param tns: The target namespace. Defaults to the endpoint of the
        contract.
    :param element_form_default: The value of the ``elementFormDefault``
        attribute of the schema.
    """

    mime_type = 'text/xml; charset=utf-8'

    def __init__(self, contract, tns=None, element_form_default='qualified'):
        super(Wsdl11, self).__init__(contract)

        if tns is None:
            tns = contract.endpoint
        self.tns = tns
        self.element_form_default = element_form_default

        self.root_elt = None

    @property
    def nsmap(self):
        retval = {
            'xs': ns.NS_XSD,
            'wsdl': ns.NS_WSDL11,
            'wsdlsoap11': ns.NS_WSDL11_SOAP,
            'soap11enc': ns.NS_SOAP11_ENC,
        }
        retval[ns.PREF_TNS] = self.tns
        return retval

    def tns_ref(self, name):
        return '%s:%s' % (ns.PREF_TNS, name)

    def generate(self):
        service_name = self.service_name

        self.root_elt = root = etree.Element(WSDL11("definitions"),
                                                               nsmap=self.nsmap)
        root.set('targetNamespace', self.tns)
        root.set('name', service_name)

        types = SubElement(root, WSDL11("types"))
        self.add_schema(types)

        for op in self.contract.operations:
            self.add_messages_for_operation(root, op)

        self.add_port_type(root, service_name)
        self.add_binding(root, service_name)
        self.add_service(root, service_name)

        return etree.tostring(root.getroottree(), xml_declaration=True,
                                                               encoding="UTF-8")

    def add_schema(self, types):
        schema = SubElement(types, XSD("schema"))
        schema.set('targetNamespace', self.tns)
        schema.set('elementFormDefault', self.element_form_default)

        for op in self.contract.operations:
            sequence = self._add_wrapper_element(schema, op.name)
            for i, param in enumerate(op.parameters):
                elt = SubElement(sequence, XSD("element"))
                elt.set('name', param.name)
                elt.set('type', 'xs:%s' % get_xsd_type(param.type_label))
                if i >= op.required_count:
                    elt.set('minOccurs', '0')
                elt.set('nillable', 'true')

            sequence = self._add_wrapper_element(schema,
                                                      op.name + RESPONSE_SUFFIX)
            if op.returns is not None:
                elt = SubElement(sequence, XSD("element"))
                elt.set('name', op.name + RESULT_SUFFIX)
                elt.set('type', 'xs:%s' % get_xsd_type(op.returns.type_label))
                elt.set('minOccurs', '0')
                elt.set('nillable', 'true')

        return schema

    def _add_wrapper_element(self, schema, name):
        elt = SubElement(schema, XSD("element"))
        elt.set('name', name)

        complex_type = SubElement(elt, XSD("complexType"))
        return SubElement(complex_type, XSD("sequence"))

    def add_messages_for_operation(self, root, op):
        for name in (op.name, op.name + RESPONSE_SUFFIX):
            message = SubElement(root, WSDL11("message"))
            message.set('name', name)

            part = SubElement(message, WSDL11("part"))
            part.set('name', 'parameters')
            part.set('element', self.tns_ref(name))

    def add_port_type(self, root, service_name):
        port_type = SubElement(root, WSDL11("portType"))
        port_type.set('name', service_name)

        for op in self.contract.operations:
            operation = SubElement(port_type, WSDL11("operation"))
            operation.set('name', op.name)

            if len(op.description) > 0:
                doc = SubElement(operation, WSDL11("documentation"))
                doc.text = op.description

            op_input = SubElement(operation, WSDL11("input"))
            op_input.set('name', op.name)
            op_input.set('message', self.tns_ref(op.name))

            op_output = SubElement(operation, WSDL11("output"))
            op_output.set('name', op.name + RESPONSE_SUFFIX)
            op_output.set('message', self.tns_ref(op.name + RESPONSE_SUFFIX))

        return port_type

    def add_binding(self, root, service_name):
        binding = SubElement(root, WSDL11("binding"))
        binding.set('name', service_name)
        binding.set('type', self.tns_ref(service_name))

        transport = SubElement(binding, WSDL11_SOAP("binding"))
        transport.set('style', 'document')
        transport.set('transport', ns.SOAP11_HTTP_TRANSPORT)

        for op in self.contract.operations:
            operation = SubElement(binding, WSDL11("operation"))
            operation.set('name', op.name)

            soap_operation = SubElement(operation, WSDL11_SOAP("operation"))
            soap_operation.set('soapAction', op.name)
            soap_operation.set('style', 'document')

            for tag, name in ((WSDL11("input"), op.name),
                              (WSDL11("output"), op.name + RESPONSE_SUFFIX)):
                elt = SubElement(operation, tag)
                elt.set('name', name)

                soap_body = SubElement(elt, WSDL11_SOAP("body"))
                soap_body.set('use', 'literal')

        return binding

    def add_service(self, root, service_name):
        service = SubElement(root, WSDL11("service"))
        service.set('name', service_name)

        wsdl_port = SubElement(service, WSDL11("port"))
        wsdl_port.set('name', service_name)
        wsdl_port.set('binding', self.tns_ref(service_name))

        addr = SubElement(wsdl_port, WSDL11_SOAP("address"))
        addr.set('location', self.endpoint)

        return service
