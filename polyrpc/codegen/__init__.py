
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

"""The ``polyrpc.codegen`` package contains the client code generators.

Clients are generated from a service contract for the following
``(protocol, language)`` combinations: ::

    ('soap', 'php'), ('json', 'php'), ('json', 'javascript'),
    ('rpc', 'php'), ('http', 'php'), ('rest', 'php')

The generated class is always named ``<service>_<PROTOCOL>_Client``.
"""

import logging
logger = logging.getLogger(__name__)

from datetime import datetime

from polyrpc import LOCAL_TZ
from polyrpc.const import CLIENT_KIND_MAP
from polyrpc.const import LANGUAGE_EXTENSIONS
from polyrpc.const import LANGUAGE_MIME_TYPES
from polyrpc.codegen import js
from polyrpc.codegen import php
from polyrpc.codegen.minify import minify_js


LANGUAGE_WRITERS = {
    'php': php.WRITERS,
    'javascript': js.WRITERS,
}

MINIFIERS = {
    'javascript': minify_js,
}


class ClientGenerator(object):
    """Generates client source code for a service contract.

    :param contract: A :class:`polyrpc.contract.ServiceContract` instance.
    :param tz: The time zone of the timestamp in the header of the
        generated code.
    """

    def __init__(self, contract, tz=LOCAL_TZ):
        self.contract = contract
        self.tz = tz

    def get_writer_class(self, protocol, language):
        retval = LANGUAGE_WRITERS.get(language, {}).get(protocol, None)
        if retval is None:
            raise ValueError("Unsupported protocol/language combination: "
                                                 "%s/%s" % (protocol, language))
        return retval

    def get_class_name(self, protocol):
        return "%s_%s_Client" % (self.contract.service_name, protocol.upper())

    def get_file_name(self, protocol, language, minified=False):
        self.get_writer_class(protocol, language)

        retval = self.get_class_name(protocol)
        if minified and language in MINIFIERS:
            retval += '.min'

        return "%s.%s" % (retval, LANGUAGE_EXTENSIONS[language])

    def get_mime_type(self, language):
        return LANGUAGE_MIME_TYPES[language]

    def get_timestamp(self):
        return datetime.now(self.tz).strftime('%Y-%m-%d %H:%M:%S %Z')

    def generate(self, protocol, language, minified=False):
        """Returns the source code of the client for the given protocol and
        language as a string. ``minified`` is ignored for languages that
        can't be minified.

        Raises ``ValueError`` for unsupported combinations.
        """

        writer_class = self.get_writer_class(protocol, language)
        writer = writer_class(self.contract, self.get_class_name(protocol),
                                                           self.get_timestamp())
        retval = writer.generate()

        minifier = MINIFIERS.get(language, None)
        if minified and minifier is not None:
            retval = minifier(retval)

        logger.debug("Generated %s/%s client for %r, %d chars", protocol,
                                 language, self.contract.service_name, len(retval))

        return retval

    def generate_for_kind(self, kind, minified=False):
        """Returns a ``(file_name, mime_type, source)`` tuple for the given
        client download token, e.g. ``'phpsoapclient'``."""

        try:
            protocol, language = CLIENT_KIND_MAP[kind.lower()]
        except KeyError:
            raise ValueError("Unknown client kind %r" % (kind,))

        return (self.get_file_name(protocol, language, minified),
                self.get_mime_type(language),
                self.generate(protocol, language, minified))
