
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

"""Helpers that drive :class:`polyrpc.server.wsgi.WsgiApplication` instances
without a server."""

from io import BytesIO
from pprint import pformat
from urllib.parse import urlencode


class StartResponse(object):
    """A ``start_response`` callable that remembers what it was called with."""

    def __init__(self):
        self.status = None
        self.headers = None

    def __call__(self, status, headers, exc_info=None):
        print(status, pformat(headers))

        self.status = status
        self.headers = headers

    @property
    def code(self):
        return int(self.status.split(' ', 1)[0])

    def get_header(self, name):
        for k, v in self.headers:
            if k.lower() == name.lower():
                return v


def gen_environ(path='/', query_string='', method=None, body=b'',
                                               content_type=None, headers=None):
    if isinstance(body, str):
        body = body.encode('utf8')

    if method is None:
        method = 'POST' if len(body) > 0 else 'GET'

    retval = {
        'REQUEST_METHOD': method,
        'SCRIPT_NAME': '',
        'PATH_INFO': path,
        'QUERY_STRING': query_string,
        'SERVER_NAME': 'polyrpc.test',
        'SERVER_PORT': '80',
        'SERVER_PROTOCOL': 'HTTP/1.1',
        'wsgi.version': (1, 0),
        'wsgi.url_scheme': 'http',
        'wsgi.input': BytesIO(body),
        'wsgi.errors': BytesIO(),
        'wsgi.multithread': False,
        'wsgi.multiprocess': False,
        'wsgi.run_once': False,
        'CONTENT_LENGTH': str(len(body)),
    }

    if content_type is not None:
        retval['CONTENT_TYPE'] = content_type

    if headers is not None:
        retval.update(headers)

    return retval


def call_wsgi_app(app, path='/', query_string='', method=None, body=b'',
                                               content_type=None, headers=None):
    """Calls the given wsgi app and returns a ``(start_response, body)``
    tuple where ``body`` is a ``bytes`` instance."""

    environ = gen_environ(path, query_string, method, body, content_type,
                                                                        headers)
    start_response = StartResponse()

    out_string = b''.join(app(environ, start_response))

    return start_response, out_string


def call_wsgi_app_form(app, pairs, path='/', query_string=''):
    """POSTs the given ``(name, value)`` pairs form-encoded."""

    return call_wsgi_app(app, path=path, query_string=query_string,
                    method='POST', body=urlencode(pairs),
                    content_type='application/x-www-form-urlencoded')
