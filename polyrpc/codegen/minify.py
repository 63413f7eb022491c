
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

"""The ``polyrpc.codegen.minify`` module contains a small javascript
minifier. It removes comments and collapses whitespace, leaving string
literals alone. Regular expression literals are not recognized, so it's only
meant for the code polyrpc generates itself."""

_QUOTES = frozenset('\'"`')
_PUNCTUATION = frozenset('{}()[];,:=<>!&|?*')


def _skip_string(source, start):
    """Returns the index right after the string literal that starts at
    ``start``."""

    quote = source[start]
    i = start + 1
    n = len(source)
    while i < n:
        c = source[i]
        if c == '\\':
            i += 2
            continue

        i += 1
        if c == quote:
            break

    return min(i, n)


def minify_js(source):
    """Returns the minified version of the given javascript source.

    Minifying already minified code returns it unchanged.
    """

    retval = []
    pending_space = False

    i = 0
    n = len(source)
    while i < n:
        c = source[i]

        if c in _QUOTES:
            j = _skip_string(source, i)
            if pending_space and len(retval) > 0 and \
                                             retval[-1][-1] not in _PUNCTUATION:
                retval.append(' ')
            pending_space = False

            retval.append(source[i:j])
            i = j
            continue

        if source.startswith('//', i):
            j = source.find('\n', i)
            i = n if j < 0 else j
            pending_space = True
            continue

        if source.startswith('/*', i):
            j = source.find('*/', i + 2)
            i = n if j < 0 else j + 2
            pending_space = True
            continue

        if c.isspace():
            pending_space = True
            i += 1
            continue

        if pending_space and len(retval) > 0 and c not in _PUNCTUATION and \
                                            retval[-1][-1] not in _PUNCTUATION:
            retval.append(' ')
        pending_space = False

        retval.append(c)
        i += 1

    return ''.join(retval)
