
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

"""This module contains the :class:`Service` class, the optional base class of
service definitions."""


class Service(object):
    """Base class for service definitions. Subclassing it is not mandatory,
    any class that declares public methods can be exposed. Members of this
    class are never exposed as operations since only the members that are
    declared directly on the exposed class are.
    """

    __service_name__ = None
    """The name of this service definition as exposed in interface documents,
    client stubs and the REST path. Defaults to the class name."""
