
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

from werkzeug.datastructures import MultiDict

import simplejson as json

from polyrpc.context import RequestContext
from polyrpc.contract import build_contract
from polyrpc.error import ArgumentError
from polyrpc.error import Fault
from polyrpc.error import InternalError
from polyrpc.protocol.http import HttpFormProtocol
from polyrpc.test._service import Calculator
from polyrpc.test._service import ENDPOINT


def _ctx(*pairs):
    return RequestContext.create(body=b'call=...', params=MultiDict(pairs))


class TestHttpFormProtocol(unittest.TestCase):
    def setUp(self):
        self.protocol = HttpFormProtocol()
        self.contract = build_contract(Calculator, ENDPOINT)

    def _call(self, *pairs):
        name, args = self.protocol.parse_request(_ctx(*pairs))
        return self.contract.invoke(name, args)

    def test_bracket_array(self):
        name, args = self.protocol.parse_request(_ctx(('call', 'add'),
                                         ('param[]', '5'), ('param[]', '3')))
        assert name == 'add'
        assert args == ['5', '3']

    def test_indexed_array(self):
        name, args = self.protocol.parse_request(_ctx(('call', 'add'),
               ('param[1]', '3'), ('param[0]', '5'), ('param[10]', '7'),
               ('param[2]', '6')))

        assert args == ['5', '3', '6', '7']

    def test_repeated(self):
        name, args = self.protocol.parse_request(_ctx(('call', 'add'),
                                             ('param', '5'), ('param', '3')))
        assert args == ['5', '3']

    def test_named(self):
        name, args = self.protocol.parse_request(_ctx(('call', 'add'),
                                         ('param[b]', '3'), ('param[a]', '5')))
        assert args == {'a': '5', 'b': '3'}

    def test_mixed(self):
        self.assertRaises(ArgumentError, self.protocol.parse_request,
              _ctx(('call', 'add'), ('param[0]', '3'), ('param[a]', '5')))

    def test_no_params(self):
        name, args = self.protocol.parse_request(_ctx(('call', 'nothing')))

        assert name == 'nothing'
        assert len(args) == 0

    def test_post_fields_shadow_query_string(self):
        ctx = RequestContext.create(body=b'call=...',
                 params=MultiDict([('call', 'echo'), ('param[]', 'hi')]),
                 args=MultiDict([('param[]', '3'), ('param[1]', '4')]))

        name, args = self.protocol.parse_request(ctx)

        assert args == ['hi']

    def test_query_string_fields(self):
        ctx = RequestContext.create(body=b'call=...',
                 params=MultiDict([('call', 'add')]),
                 args=MultiDict([('param[1]', '3'), ('param[0]', '5')]))

        name, args = self.protocol.parse_request(ctx)

        assert args == ['5', '3']

    def test_invoke(self):
        assert self._call(('call', 'add'), ('param[]', '5'),
                                                         ('param[]', '3')) == 8
        assert self._call(('call', 'echo'), ('param[0]', 'x')) == 'x'

    def test_missing_name(self):
        for pairs in ((('param[]', '1'),), (('call', ''),)):
            try:
                self.protocol.parse_request(_ctx(*pairs))
            except Fault as e:
                assert e.http_status == 400
                assert e.message == 'operation name is required'
            else:
                raise Exception("must fail")

    def test_argument_count(self):
        try:
            self._call(('call', 'add'), ('param[]', '5'))
        except Fault as e:
            assert e.http_status == 400
        else:
            raise Exception("must fail")

    def test_serialize(self):
        op = self.contract.get_operation('add')

        response = self.protocol.serialize_result(op, 8)
        assert response.status == 200
        assert response.content_type == 'text/plain; charset=utf-8'
        assert response.body == b'8'

        assert self.protocol.serialize_result(op, u'ç').body == u'ç'.encode('utf8')
        assert self.protocol.serialize_result(op, None).body == b''
        assert self.protocol.serialize_result(op, False).body == b'false'
        assert json.loads(self.protocol.serialize_result(op,
                                             {'a': [1]}).body) == {'a': [1]}

    def test_serialize_fault(self):
        response = self.protocol.serialize_fault(InternalError())

        assert response.status == 500
        assert response.content_type == 'application/json'
        assert json.loads(response.body) == {"success": False,
                                                      "error": "Internal Error"}


if __name__ == '__main__':
    unittest.main()
