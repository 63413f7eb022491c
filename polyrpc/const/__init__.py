
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

"""The ``polyrpc.const`` package contains the protocol tags the request
classifier produces, the client download tokens and various naming
conventions shared by the protocols and interface documents."""

RESPONSE_SUFFIX = 'Response'
"""Suffix of the SOAP response element and WSDL output message."""

RESULT_SUFFIX = 'Result'
"""Suffix of the SOAP element that wraps an operation's return value."""

DEFAULT_TYPE_LABEL = 'mixed'
"""Type label of parameters that carry neither documentation nor an
annotation."""

#
# Protocol tags. The classifier returns exactly one of these per request.
#

WSDL = 'WSDL'
DESCRIPTOR_DOC = 'DESCRIPTOR_DOC'
PDF = 'PDF'
CLIENT_DOWNLOAD = 'CLIENT_DOWNLOAD'
SOAP = 'SOAP'
JSON = 'JSON'
XML_RPC = 'XML_RPC'
HTTP_FORM = 'HTTP_FORM'
REST = 'REST'

INVOCATION_TAGS = (SOAP, JSON, XML_RPC, HTTP_FORM, REST)
"""Tags that end up calling an operation."""

#
# Client downloads. Order matters: the classifier checks the tokens in this
# order.
#

CLIENT_KINDS = (
    ('phpsoapclient', ('soap', 'php')),
    ('phpjsonclient', ('json', 'php')),
    ('jsjsonclient', ('json', 'javascript')),
    ('phprpcclient', ('rpc', 'php')),
    ('phphttpclient', ('http', 'php')),
    ('phprestclient', ('rest', 'php')),
)
"""Maps the client download tokens to ``(protocol, language)`` pairs."""

CLIENT_KIND_MAP = dict(CLIENT_KINDS)

MINIFIABLE_CLIENT_KINDS = ('jsjsonclient',)

LANGUAGE_EXTENSIONS = {
    'php': 'php',
    'javascript': 'js',
}

LANGUAGE_MIME_TYPES = {
    'php': 'application/x-php',
    'javascript': 'application/javascript',
}

SERVED_PROTOCOLS = ('SOAP', 'JSON', 'XML RPC', 'http', 'REST')
"""Human-readable protocol names, as listed in the descriptor documents."""
