
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

from contextlib import contextmanager
from io import StringIO


INDENT = '    '


class CodeWriter(object):
    """Accumulates indented lines of source code.

    :param ostr: A text stream to write to. Defaults to a fresh
        ``io.StringIO`` instance.
    """

    def __init__(self, ostr=None):
        if ostr is None:
            ostr = StringIO()

        self.ostr = ostr
        self.level = 0

    def write(self, text=''):
        """Writes one or more lines, keeping their relative indentation."""

        for line in text.split('\n'):
            if len(line) > 0:
                self.ostr.write(INDENT * self.level)
                self.ostr.write(line)
            self.ostr.write('\n')

    @contextmanager
    def indent(self, opener=None, closer=None):
        if opener is not None:
            self.write(opener)

        self.level += 1
        try:
            yield self
        finally:
            self.level -= 1

        if closer is not None:
            self.write(closer)

    def comment(self, *lines):
        """Writes a doc-block comment."""

        self.write("/**")
        for line in lines:
            if len(line) > 0:
                self.write(" * " + line)
            else:
                self.write(" *")
        self.write(" */")

    def getvalue(self):
        return self.ostr.getvalue()
