
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

"""The service definitions the tests expose."""

from decimal import Decimal

from polyrpc.error import ResourceNotFoundError
from polyrpc.service import Service


ENDPOINT = 'http://polyrpc.test/Calculator'


class Calculator(Service):
    """A small service that exercises every kind of operation."""

    def add(self, a, b):
        """Add two numbers together

        :param int a: First number to add
        :param int b: Second number to add
        :returns: The sum of both numbers
        :rtype: int
        """

        return a + b

    def multiply(self, a: float, b: float) -> float:
        """Multiply two numbers."""

        return a * b

    def echo(self, s, times=1):
        """Repeats a string.

        :param string s: The string to repeat.
        :param int times: How many times to repeat it.
        :rtype: string
        """

        return s * times

    def divide(self, a, b):
        """:param int a: Dividend
        :param int b: Divisor
        :rtype: float
        """

        return a / b

    def get_user(self, user_id):
        """Returns the user with the given id.

        :param int user_id: The id of the user.
        :rtype: struct
        """

        if user_id != 1:
            raise ResourceNotFoundError("user %d not found" % user_id)

        return {"id": 1, "name": "John Doe", "balance": Decimal('12.50')}

    def get_tags(self):
        """:rtype: array"""

        return ["a", "b"]

    def is_even(self, n):
        """:param int n: The number.
        :rtype: boolean
        """

        return n % 2 == 0

    def nothing(self):
        pass

    @staticmethod
    def version():
        """:rtype: string"""

        return "1.0"

    @classmethod
    def service_name(cls):
        """:rtype: string"""

        return cls.__name__

    def _private(self):
        return "private"

    total = 0
