
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

"""The ``polyrpc.classifier`` module decides which protocol a request uses.

Detection relies solely on the shape of the query string, the request path
and the request body. It's an ordered decision list where the first match
wins, so e.g. a query string that contains both ``wsdl`` and ``pdf`` is
always a wsdl request.
"""

import logging
logger = logging.getLogger(__name__)

from collections import namedtuple
from urllib.parse import unquote

from lxml import etree

from polyrpc import const


Classification = namedtuple('Classification', ['tag', 'path_info',
                                                 'client_kind', 'minified'])
"""The result of :func:`classify`. ``path_info`` is only set for REST
requests, ``client_kind`` (one of the keys of
:data:`polyrpc.const.CLIENT_KIND_MAP`) and ``minified`` only for client
downloads."""


def _tag(tag, path_info=None, client_kind=None, minified=False):
    return Classification(tag, path_info, client_kind, minified)


def get_path_info(raw_path, service_name):
    """Returns the part of ``raw_path`` that follows the ``/<service_name>``
    segment, or ``''`` when there's no such segment.

    The segment is searched case-insensitively anywhere in the path, so
    services mounted under a prefix work as well.
    """

    if not raw_path:
        return ''

    segment = '/' + service_name.strip('/')
    lpath = raw_path.lower()
    lsegment = segment.lower()

    pos = lpath.find(lsegment + '/')
    if pos >= 0:
        return '/' + raw_path[pos + len(segment):].lstrip('/')

    if lpath.rstrip('/') == lsegment:
        return '/'

    return ''


def get_root_tag(body):
    """Returns the local name of the root element of ``body``, or ``None`` if
    it's not well-formed xml."""

    parser = etree.XMLParser(resolve_entities=False, no_network=True,
                                                                 huge_tree=False)
    try:
        root = etree.fromstring(body, parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.debug("Body is not xml: %r", e)
        return None

    if not isinstance(root.tag, str):
        return None

    return etree.QName(root).localname


def sniff_body(body, params=None):
    """Decides the protocol of a request that carries a body. It does not
    consume anything: ``body`` is a bytes value and ``params`` a mapping of
    the form-encoded fields.

    Malformed xml just means "not XML-RPC".
    """

    if params is None:
        params = {}

    if 'json' in params:
        return const.JSON

    if get_root_tag(body) == 'methodCall':
        return const.XML_RPC

    if 'call' in params:
        return const.HTTP_FORM

    return const.SOAP


def classify(query_string, raw_path, service_name, body, params=None):
    """Returns the :class:`Classification` of a request.

    :param query_string: The raw query string.
    :param raw_path: The raw request path.
    :param service_name: The name of the service, as it appears in REST
        paths.
    :param body: The request body as bytes. May be empty or ``None``.
    :param params: A mapping of the form-encoded POST and query string fields.
    """

    query_string = query_string or ''
    lquery = query_string.lower()

    if 'wsdl' in lquery:
        return _tag(const.WSDL)

    if 'pdf' in lquery:
        return _tag(const.PDF)

    for token, _ in const.CLIENT_KINDS:
        if token in lquery:
            minified = False
            if token in const.MINIFIABLE_CLIENT_KINDS:
                minified = 'min' in query_string

            return _tag(const.CLIENT_DOWNLOAD, client_kind=token,
                                                              minified=minified)

    path_info = get_path_info(raw_path, service_name)
    if len(path_info) > 0 and path_info != '/':
        return _tag(const.REST, path_info=path_info.strip('/'))

    if body:
        return _tag(sniff_body(body, params))

    if len(query_string) == 0:
        return _tag(const.DESCRIPTOR_DOC)

    return _tag(const.SOAP)


def classify_request(ctx, service_name):
    """Calls :func:`classify` with the relevant bits of a
    :class:`polyrpc.context.RequestContext`."""

    retval = classify(ctx.query_string, ctx.path, service_name, ctx.body,
                                                                    ctx.params)

    logger.debug("%s %s?%s classified as %r", ctx.method, unquote(ctx.path),
                                                     ctx.query_string, retval)

    return retval
