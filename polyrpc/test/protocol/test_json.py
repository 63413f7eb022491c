
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

import unittest

from datetime import date
from datetime import datetime
from decimal import Decimal

import simplejson as json

from polyrpc.context import RequestContext
from polyrpc.contract import build_contract
from polyrpc.error import ArgumentError
from polyrpc.error import Fault
from polyrpc.error import InternalError
from polyrpc.protocol import JsonEncoder
from polyrpc.protocol.json import JsonProtocol
from polyrpc.test._service import Calculator
from polyrpc.test._service import ENDPOINT


def _ctx(value):
    return RequestContext.create(body=b'json=...', params={'json': value})


class TestJsonProtocol(unittest.TestCase):
    def setUp(self):
        self.protocol = JsonProtocol()
        self.contract = build_contract(Calculator, ENDPOINT)

    def test_parse(self):
        name, args = self.protocol.parse_request(
                                     _ctx('{"call": "add", "param": [5, 3]}'))

        assert name == 'add'
        assert args == [5, 3]

    def test_parse_named(self):
        name, args = self.protocol.parse_request(
                           _ctx('{"call": "add", "param": {"a": 5, "b": 3}}'))

        assert name == 'add'
        assert args == {"a": 5, "b": 3}

    def test_parse_no_param(self):
        name, args = self.protocol.parse_request(_ctx('{"call": "nothing"}'))

        assert name == 'nothing'
        assert len(args) == 0

    def test_parse_scalar_param(self):
        name, args = self.protocol.parse_request(
                                         _ctx('{"call": "is_even", "param": 4}'))

        assert args == (4,)

    def test_missing_name(self):
        for doc in ('{"param": [1]}', '{"call": ""}', '{"call": null}'):
            try:
                self.protocol.parse_request(_ctx(doc))
            except Fault as e:
                assert e.http_status == 400
                assert e.message == 'operation name is required'
            else:
                raise Exception("must fail")

    def test_invalid_json(self):
        try:
            self.protocol.parse_request(_ctx('{"call": "add", '))
        except ArgumentError as e:
            assert e.http_status == 400
            assert e.message.startswith('invalid JSON')
        else:
            raise Exception("must fail")

    def test_not_an_object(self):
        self.assertRaises(ArgumentError, self.protocol.parse_request,
                                                                   _ctx('[1]'))

    def test_empty_value(self):
        self.assertRaises(ArgumentError, self.protocol.parse_request, _ctx(''))

    def test_serialize_result(self):
        op = self.contract.get_operation('add')
        response = self.protocol.serialize_result(op,
                                   self.contract.invoke('add', [5, 3]))

        assert response.status == 200
        assert response.content_type == 'application/json'
        assert json.loads(response.body) == {"result": 8}

    def test_serialize_struct(self):
        op = self.contract.get_operation('get_user')
        response = self.protocol.serialize_result(op,
                                   self.contract.invoke('get_user', [1]))

        assert json.loads(response.body) == {"result": {
                         "id": 1, "name": "John Doe", "balance": 12.5}}

    def test_serialize_fault(self):
        response = self.protocol.serialize_fault(InternalError("boom"))

        assert response.status == 500
        assert response.content_type == 'application/json'
        assert json.loads(response.body) == {"success": False, "error": "boom"}


class TestJsonEncoder(unittest.TestCase):
    def test_types(self):
        value = {
            'date': date(2020, 1, 2),
            'datetime': datetime(2020, 1, 2, 3, 4, 5),
            'decimal': Decimal('1.5'),
            'set': set([1]),
            'gen': (i for i in range(2)),
        }

        assert json.loads(json.dumps(value, cls=JsonEncoder)) == {
            'date': '2020-01-02',
            'datetime': '2020-01-02T03:04:05',
            'decimal': 1.5,
            'set': [1],
            'gen': [0, 1],
        }

    def test_unknown(self):
        self.assertRaises(TypeError, json.dumps, object(), cls=JsonEncoder)


if __name__ == '__main__':
    unittest.main()
