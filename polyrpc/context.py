
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

"""The ``polyrpc.context`` module contains the :class:`RequestContext` class,
the immutable view of an incoming request that the classifier and every
protocol adapter work from, and the :class:`Response` class that they produce.
Nothing in the core looks at the WSGI environ directly."""

import logging
logger = logging.getLogger(__name__)

from collections import namedtuple

from werkzeug.datastructures import CombinedMultiDict
from werkzeug.datastructures import ImmutableMultiDict
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.wrappers import Request

from polyrpc.error import RequestTooLongError
from polyrpc.util import get_raw_path
from polyrpc.util import reconstruct_url


class RequestContext(namedtuple('RequestContext', ['method', 'query_string',
                             'path', 'content_type', 'body', 'params', 'url',
                                                           'form', 'args'])):
    """An immutable request value.

    :param method: Upper-case http verb.
    :param query_string: The raw query string, without the leading '?'.
    :param path: The raw (still url-encoded) request path.
    :param content_type: The value of the Content-Type header or ``None``.
    :param body: The whole request body as a ``bytes`` instance. It's buffered
        once, so it can be inspected by the classifier and parsed again by
        the protocol adapter.
    :param params: A read-only multidict of the form-encoded POST fields and
        the query string fields. POST fields take precedence.
    :param url: The reconstructed request url.
    :param form: A read-only multidict of the form-encoded POST fields only.
    :param args: A read-only multidict of the query string fields only.
    """

    __slots__ = ()

    @classmethod
    def from_environ(cls, environ, max_content_length=None):
        """Builds a :class:`RequestContext` from a PEP-3333 environ.

        Raises :class:`polyrpc.error.RequestTooLongError` when the body is
        longer than ``max_content_length``.
        """

        request = Request(environ)
        if max_content_length is not None:
            length = request.content_length
            if length is not None and length > max_content_length:
                raise RequestTooLongError()

            request.max_content_length = max_content_length

        try:
            # cache=True makes werkzeug parse the form fields from a copy of
            # the buffered body instead of the input stream.
            body = request.get_data(cache=True)
            form = request.form

        except RequestEntityTooLarge:
            raise RequestTooLongError()

        params = CombinedMultiDict([form, request.args])

        return cls(
            method=environ.get('REQUEST_METHOD', 'GET').upper(),
            query_string=environ.get('QUERY_STRING', ''),
            path=get_raw_path(environ),
            content_type=environ.get('CONTENT_TYPE', None) or None,
            body=body,
            params=params,
            url=reconstruct_url(environ),
            form=form,
            args=request.args,
        )

    @classmethod
    def create(cls, query_string='', path='/', body=b'', params=None,
                     method=None, content_type=None, url=None, args=None):
        """Builds a :class:`RequestContext` from ready-made values. Meant for
        hosts that aren't WSGI-based.

        ``params`` are the POST fields and ``args`` the query string fields.
        """

        if method is None:
            method = 'POST' if len(body) > 0 else 'GET'

        form = _to_multidict(params)
        args = _to_multidict(args)

        return cls(method=method, query_string=query_string, path=path,
                   content_type=content_type, body=body,
                   params=CombinedMultiDict([form, args]), url=url,
                   form=form, args=args)

    def get_param(self, key, default=None):
        return self.params.get(key, default)

    def get_param_source(self, prefix):
        """Returns the POST fields if any of their names starts with
        ``prefix``, and the query string fields otherwise. Values of a field
        family never come from both."""

        for key in self.form.keys():
            if key.startswith(prefix):
                return self.form

        return self.args


def _to_multidict(data):
    if data is None:
        return ImmutableMultiDict()

    if isinstance(data, (ImmutableMultiDict, CombinedMultiDict)):
        return data

    return ImmutableMultiDict(data)


class Response(namedtuple('Response', ['status', 'content_type', 'body',
                                                                  'headers'])):
    """An immutable response value. ``status`` is an integer http status
    code, ``body`` is a ``bytes`` instance and ``headers`` is a tuple of extra
    ``(name, value)`` header pairs."""

    __slots__ = ()

    def __new__(cls, status, content_type, body, headers=()):
        if isinstance(body, str):
            body = body.encode('utf8')

        return super(Response, cls).__new__(cls, int(status), content_type,
                                                        body, tuple(headers))

    def get_headers(self):
        """Returns the list of headers to pass to ``start_response``."""

        retval = [('Content-Type', self.content_type),
                  ('Content-Length', str(len(self.body)))]
        retval.extend(self.headers)
        return retval
