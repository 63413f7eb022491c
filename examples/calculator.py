#!/usr/bin/env python
# encoding: utf8

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

"""
A calculator that is exposed with every protocol polyrpc supports, from a
single endpoint. Here's a sample:

$ curl http://localhost:8000/Calculator/add/5/3/
8

$ curl -d 'json={"call": "multiply", "param": [2.5, 4]}' \
                                                http://localhost:8000/Calculator
{"result": 10.0}

$ curl -d 'call=get_user_info&param[]=1' http://localhost:8000/Calculator
{"id": 1, "name": "John Doe", "email": "john@example.com"}

Point your browser to http://localhost:8000/Calculator to see the generated
documentation, and to http://localhost:8000/Calculator?wsdl for the wsdl.
"""


import logging

from polyrpc import Application
from polyrpc import ResourceNotFoundError
from polyrpc import Service
from polyrpc.server.wsgi import WsgiApplication


class Calculator(Service):
    def add(self, a, b):
        """Add two numbers together

        :param int a: First number to add
        :param int b: Second number to add
        :returns: The sum of both numbers
        :rtype: int
        """

        return a + b

    def multiply(self, a: float, b: float) -> float:
        """Multiply two numbers

        :param a: First number
        :param b: Second number
        :returns: The product of both numbers
        """

        return a * b

    def get_user_info(self, user_id):
        """Get information about a user

        :param int user_id: The id of the user
        :returns: The user's name and email
        :rtype: struct
        """

        if user_id != 1:
            raise ResourceNotFoundError("user %d not found" % user_id)

        return {"id": user_id, "name": "John Doe",
                                                  "email": "john@example.com"}


if __name__ == '__main__':
    # Python daemon boilerplate
    from wsgiref.simple_server import make_server

    logging.basicConfig(level=logging.DEBUG)

    application = Application(Calculator, 'http://localhost:8000/Calculator')

    wsgi_application = WsgiApplication(application)

    server = make_server('127.0.0.1', 8000, wsgi_application)

    logging.info("listening to http://127.0.0.1:8000/Calculator")
    logging.info("wsdl is at: http://localhost:8000/Calculator?wsdl")

    server.serve_forever()
