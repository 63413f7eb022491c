
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

__version__ = '1.0.0'

from pytz import utc as LOCAL_TZ

from polyrpc.error import ContractError
from polyrpc.error import Fault
from polyrpc.error import ArgumentError
from polyrpc.error import ResourceNotFoundError
from polyrpc.error import RequestTooLongError
from polyrpc.error import InternalError

from polyrpc.contract import build_contract
from polyrpc.contract import ServiceContract
from polyrpc.context import RequestContext
from polyrpc.context import Response

from polyrpc.service import Service
from polyrpc.application import Application


def _vercheck():
    import sys
    if not hasattr(sys, "version_info") or sys.version_info < (3, 6):
        raise RuntimeError("polyrpc requires Python 3.6 or later. Trust us.")
_vercheck()
