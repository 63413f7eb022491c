
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

"""The ``polyrpc.interface`` package contains the documents that describe a
service contract: the WSDL 1.1 document, the html descriptor page and its
pdf rendition."""

from polyrpc.interface._base import InterfaceDocumentBase
from polyrpc.interface.html import HtmlDescriptor
from polyrpc.interface.pdf import PdfDescriptor
from polyrpc.interface.wsdl import Wsdl11
