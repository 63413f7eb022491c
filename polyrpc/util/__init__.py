
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

from urllib.parse import quote
from urllib.parse import urlsplit


_PATH_SAFE = "/:@!$&'()*+,;=-._~"


def get_raw_path(environ):
    """Returns the url-encoded request path, including the SCRIPT_NAME part.

    Servers that pass the original request uri along (as ``RAW_URI`` or
    ``REQUEST_URI``) are preferred since ``PATH_INFO`` is already decoded and
    an encoded slash inside it can't be told apart from a path separator.
    """

    for key in ('RAW_URI', 'REQUEST_URI'):
        uri = environ.get(key, None)
        if uri:
            path = uri.split('?', 1)[0]
            if not path.startswith('/'):
                # absolute form, as sent to proxies
                path = urlsplit(path).path
            return path

    path = environ.get('SCRIPT_NAME', '') + environ.get('PATH_INFO', '')

    # PEP-3333 says native strings in the environ are latin-1 decoded bytes.
    return quote(path.encode('latin-1'), safe=_PATH_SAFE)


def reconstruct_url(environ, query_string=True):
    """Rebuilds the request url from a PEP-3333 environ. Taken from
    http://www.python.org/dev/peps/pep-0333/#url-reconstruction
    """

    url = environ['wsgi.url_scheme'] + '://'

    if environ.get('HTTP_HOST'):
        url += environ['HTTP_HOST']
    else:
        url += environ['SERVER_NAME']

        if environ['wsgi.url_scheme'] == 'https':
            if environ['SERVER_PORT'] != '443':
                url += ':' + environ['SERVER_PORT']
        else:
            if environ['SERVER_PORT'] != '80':
                url += ':' + environ['SERVER_PORT']

    url += quote(environ.get('SCRIPT_NAME', ''))
    url += quote(environ.get('PATH_INFO', ''))
    if query_string and environ.get('QUERY_STRING'):
        url += '?' + environ['QUERY_STRING']

    return url
