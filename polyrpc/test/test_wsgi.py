
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

from xmlrpc.client import dumps
from xmlrpc.client import loads

import simplejson as json

from polyrpc.application import Application
from polyrpc.server.wsgi import WsgiApplication
from polyrpc.test._service import Calculator
from polyrpc.test._service import ENDPOINT
from polyrpc.util.test import call_wsgi_app
from polyrpc.util.test import call_wsgi_app_form


class TestWsgiApplication(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = Application(Calculator, ENDPOINT)

    def setUp(self):
        self.wsgi_app = WsgiApplication(self.app)

    def test_descriptor(self):
        sr, body = call_wsgi_app(self.wsgi_app, path='/Calculator')

        assert sr.status == '200 OK'
        assert sr.get_header('Content-Type') == 'text/html; charset=utf-8'
        assert sr.get_header('Content-Length') == str(len(body))
        assert b'Calculator SOAP WebService interface description' in body

    def test_head(self):
        sr, body = call_wsgi_app(self.wsgi_app, path='/Calculator',
                                                                method='HEAD')

        assert sr.code == 200
        assert body == b''
        assert int(sr.get_header('Content-Length')) > 0

    def test_wsdl(self):
        sr, body = call_wsgi_app(self.wsgi_app, path='/Calculator',
                                                            query_string='WSDL')

        assert sr.code == 200
        assert sr.get_header('Content-Type') == 'text/xml; charset=utf-8'
        assert body.startswith(b'<?xml')

    def test_json_form(self):
        sr, body = call_wsgi_app_form(self.wsgi_app,
                  [('json', '{"call": "multiply", "param": [2.5, 2]}')],
                                                          path='/Calculator')

        assert sr.code == 200
        assert sr.get_header('Content-Type') == 'application/json'
        assert json.loads(body) == {"result": 5.0}

    def test_json_struct(self):
        sr, body = call_wsgi_app_form(self.wsgi_app,
                  [('json', '{"call": "get_user", "param": [1]}')])

        assert sr.code == 200
        assert json.loads(body)["result"]["name"] == "John Doe"

    def test_json_invalid(self):
        sr, body = call_wsgi_app_form(self.wsgi_app, [('json', '{"call":')])

        assert sr.code == 400
        assert json.loads(body)["error"].startswith("invalid JSON")

    def test_http_form(self):
        sr, body = call_wsgi_app_form(self.wsgi_app, [('call', 'echo'),
                                   ('param[0]', 'ab'), ('param[1]', '2')])

        assert sr.code == 200
        assert sr.get_header('Content-Type') == 'text/plain; charset=utf-8'
        assert body == b'abab'

    def test_http_form_query_params(self):
        sr, body = call_wsgi_app_form(self.wsgi_app, [('call', 'is_even')],
                                                    query_string='param=4')

        assert sr.code == 200
        assert body == b'true'

    def test_http_form_post_fields_win(self):
        sr, body = call_wsgi_app_form(self.wsgi_app,
                                      [('call', 'echo'), ('param[]', 'hi')],
                                      query_string='param[]=3')

        assert sr.code == 200
        assert body == b'hi'

    def test_rest(self):
        sr, body = call_wsgi_app(self.wsgi_app, path='/Calculator/add/5/3/')

        assert sr.code == 200
        assert body == b'8'

    def test_rest_encoded(self):
        sr, body = call_wsgi_app(self.wsgi_app, path='/Calculator/echo/a b/')

        assert sr.code == 200
        assert body == b'a b'

    def test_rest_encoded_slash(self):
        sr, body = call_wsgi_app(self.wsgi_app,
                                 path='/Calculator/echo/a/b/',
                                 headers={'REQUEST_URI':
                                                '/Calculator/echo/a%2Fb/'})

        assert sr.code == 200
        assert body == b'a/b'

    def test_rest_not_found(self):
        sr, body = call_wsgi_app(self.wsgi_app, path='/Calculator/sub/1/')

        assert sr.status == '404 Not Found'
        assert json.loads(body) == {"success": False,
                                    "error": "operation sub not found"}

    def test_xml_rpc(self):
        sr, body = call_wsgi_app(self.wsgi_app, path='/Calculator',
                                 body=dumps(('ab', 3), 'echo'),
                                 content_type='text/xml')

        assert sr.code == 200
        assert loads(body)[0] == ('ababab',)

    def test_soap_invalid_xml(self):
        sr, body = call_wsgi_app(self.wsgi_app, path='/Calculator',
                                 body=b'<not-xml', content_type='text/xml')

        assert sr.code == 400
        assert sr.get_header('Content-Type') == 'text/xml; charset=utf-8'
        assert b'faultstring' in body

    def test_internal_error(self):
        sr, body = call_wsgi_app(self.wsgi_app, path='/Calculator/divide/1/0/')

        assert sr.status == '500 Internal Server Error'
        assert json.loads(body)["success"] is False

    def test_request_too_long(self):
        wsgi_app = WsgiApplication(self.app, max_content_length=16)
        sr, body = call_wsgi_app_form(wsgi_app,
                  [('json', '{"call": "add", "param": [5, 3]}')])

        assert sr.code == 413
        assert json.loads(body) == {"success": False,
                                    "error": "Request too long"}

    def test_client_download(self):
        sr, body = call_wsgi_app(self.wsgi_app, path='/Calculator',
                                                query_string='phprestclient')

        assert sr.code == 200
        assert sr.get_header('Content-Type') == 'application/x-php'
        assert sr.get_header('Content-Disposition') == \
                            'attachment; filename="Calculator_REST_Client.php"'
        assert body.startswith(b'<?php')


if __name__ == '__main__':
    unittest.main()
