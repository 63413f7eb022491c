
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

"""The ``polyrpc.codegen.php`` module contains the generators of the php
client classes. Every client class has one method per operation and talks
to the service using one of the supported protocols."""

import logging
logger = logging.getLogger(__name__)

from polyrpc.codegen._base import CodeWriter


def php_string(s):
    """Returns ``s`` as a double-quoted php string literal."""

    return '"%s"' % s.replace('\\', '\\\\').replace('"', '\\"') \
                                                          .replace('$', '\\$')


def gen_arguments(op):
    retval = []
    for i, p in enumerate(op.parameters):
        if i < op.required_count:
            retval.append('$' + p.name)
        else:
            retval.append('$%s = null' % p.name)
    return ', '.join(retval)


def gen_op_comment(op, via):
    retval = []
    if len(op.description) > 0:
        retval.append(op.description)
    else:
        retval.append("Calls %s %s" % (op.name, via))
    retval.append('')

    for p in op.parameters:
        retval.append(("@param %s $%s %s" % (p.type_label, p.name,
                                                     p.description)).rstrip())
    if op.returns is not None:
        retval.append(("@return %s %s" % (op.returns.type_label,
                                               op.returns.description)).rstrip())

    return retval


class PhpClientWriter(CodeWriter):
    """Writes the parts that all php clients share. Subclasses implement
    :meth:`gen_members` and :meth:`gen_operation`."""

    protocol = None
    description = None
    via = None

    def __init__(self, contract, class_name, generated_on):
        super(PhpClientWriter, self).__init__()

        self.contract = contract
        self.class_name = class_name
        self.generated_on = generated_on

    def gen_header(self):
        name = self.contract.service_name

        self.write("<?php")
        self.comment("%s %s Client" % (name, self.protocol),
                     "Generated on %s" % self.generated_on,
                     "",
                     "This client provides %s access to the %s service" %
                                                        (self.description, name))
        self.write()

    def gen_constructor(self):
        self.write("private $endpoint;")
        self.write()
        with self.indent("public function __construct($endpoint = %s)\n{" %
                                   php_string(self.contract.endpoint), "}"):
            self.write('$this->endpoint = rtrim($endpoint, "/");')

    def gen_members(self):
        raise NotImplementedError()

    def gen_operation(self, op):
        raise NotImplementedError()

    def gen_call_args(self):
        self.write("$args = func_get_args();")

    def gen_example(self):
        self.write()
        self.write("// Example usage:")
        self.write("/*")
        with self.indent("try {", "} catch (Exception $e) {"):
            self.write("$client = new %s();" % self.class_name)
            self.write()
            self.write("// $result = $client->methodName($param1, $param2);")
        with self.indent(closer="}"):
            self.write('echo "Error: " . $e->getMessage();')
        self.write("*/")

    def generate(self):
        self.gen_header()

        with self.indent("class %s\n{" % self.class_name, "}"):
            self.gen_constructor()
            self.gen_members()

            for op in self.contract.operations:
                self.write()
                self.comment(*gen_op_comment(op, self.via))
                with self.indent("public function %s(%s)\n{" %
                                           (op.name, gen_arguments(op)), "}"):
                    self.gen_operation(op)

        self.gen_example()

        return self.getvalue()


class SoapClientWriter(PhpClientWriter):
    protocol = 'SOAP'
    description = 'SOAP based'
    via = 'via SOAP'

    def gen_constructor(self):
        self.write("private $client;")
        self.write("private $endpoint;")
        self.write()
        with self.indent("public function __construct($endpoint = %s)\n{" %
                                   php_string(self.contract.endpoint), "}"):
            self.write(
                '$this->endpoint = $endpoint;\n'
                '$options = [\n'
                '    "soap_version" => SOAP_1_1,\n'
                '    "exceptions" => true,\n'
                '    "trace" => 1,\n'
                '    "cache_wsdl" => WSDL_CACHE_NONE\n'
                '];\n'
                '$this->client = new SoapClient($endpoint . "?WSDL", $options);'
            )

    def gen_members(self):
        self.write()
        with self.indent("public function getClient()\n{", "}"):
            self.write("return $this->client;")

    def gen_operation(self, op):
        self.write("$names = %s;" % self.gen_names(op))
        self.write("$args = [];")
        with self.indent("foreach (func_get_args() as $i => $arg) {", "}"):
            self.write("$args[$names[$i]] = $arg;")

        with self.indent("try {", "} catch (SoapFault $e) {"):
            self.write("$response = $this->client->__soapCall(%s, [$args]);" %
                                                             php_string(op.name))
            self.write("return isset($response->%sResult) ? "
                                 "$response->%sResult : null;" % (op.name, op.name))

        with self.indent(closer="}"):
            self.write('throw new Exception("SOAP Error in %s: " . '
                                                '$e->getMessage());' % op.name)

    def gen_names(self, op):
        return "[%s]" % ', '.join(php_string(p.name) for p in op.parameters)


class JsonClientWriter(PhpClientWriter):
    protocol = 'JSON'
    description = 'JSON based'
    via = 'via JSON'

    def gen_members(self):
        self.write()
        with self.indent("private function makeRequest($method, $params = [])"
                                                                  "\n{", "}"):
            self.write(
                '$data = ["call" => $method, "param" => $params];\n'
                '$postData = "json=" . urlencode(json_encode($data));\n'
                '$context = stream_context_create([\n'
                '    "http" => [\n'
                '        "method" => "POST",\n'
                '        "header" => "Content-Type: '
                                     'application/x-www-form-urlencoded\\r\\n",\n'
                '        "content" => $postData,\n'
                '        "ignore_errors" => true\n'
                '    ]\n'
                ']);\n'
                '$result = file_get_contents($this->endpoint, false, $context);\n'
                'if ($result === false) {\n'
                '    throw new Exception("Failed to connect to service");\n'
                '}\n'
                '$decoded = json_decode($result, true);\n'
                'if (json_last_error() !== JSON_ERROR_NONE) {\n'
                '    throw new Exception("Invalid JSON response: " . '
                                                     'json_last_error_msg());\n'
                '}\n'
                'if (isset($decoded["error"])) {\n'
                '    throw new Exception($decoded["error"]);\n'
                '}\n'
                'return $decoded["result"];'
            )

    def gen_operation(self, op):
        self.gen_call_args()
        self.write("return $this->makeRequest(%s, $args);" % php_string(op.name))


class RpcClientWriter(PhpClientWriter):
    protocol = 'RPC'
    description = 'XML-RPC'
    via = 'via XML-RPC'

    def gen_members(self):
        self.write()
        with self.indent("private function makeRequest($method, $params = [])"
                                                                  "\n{", "}"):
            self.write(
                '$request = xmlrpc_encode_request($method, $params);\n'
                '$context = stream_context_create([\n'
                '    "http" => [\n'
                '        "method" => "POST",\n'
                '        "header" => "Content-Type: text/xml\\r\\n",\n'
                '        "content" => $request,\n'
                '        "ignore_errors" => true\n'
                '    ]\n'
                ']);\n'
                '$response = file_get_contents($this->endpoint, false, $context);\n'
                'if ($response === false) {\n'
                '    throw new Exception("Failed to connect to service");\n'
                '}\n'
                '$result = xmlrpc_decode($response);\n'
                'if (is_array($result) && xmlrpc_is_fault($result)) {\n'
                '    throw new Exception("XML-RPC Fault: " . '
                                                     '$result["faultString"]);\n'
                '}\n'
                'return $result;'
            )

    def gen_operation(self, op):
        self.gen_call_args()
        self.write("return $this->makeRequest(%s, $args);" % php_string(op.name))


class HttpClientWriter(PhpClientWriter):
    protocol = 'HTTP'
    description = 'HTTP based'
    via = 'via HTTP'

    def gen_members(self):
        self.write()
        with self.indent("private function makeRequest($method, $params = [])"
                                                                  "\n{", "}"):
            self.write(
                '$postData = http_build_query(["call" => $method, '
                                                    '"param" => $params]);\n'
                '$context = stream_context_create([\n'
                '    "http" => [\n'
                '        "method" => "POST",\n'
                '        "header" => "Content-Type: '
                                     'application/x-www-form-urlencoded\\r\\n",\n'
                '        "content" => $postData\n'
                '    ]\n'
                ']);\n'
                '$result = file_get_contents($this->endpoint, false, $context);\n'
                'if ($result === false) {\n'
                '    throw new Exception("Failed to connect to service");\n'
                '}\n'
                'return $result;'
            )

    def gen_operation(self, op):
        self.gen_call_args()
        self.write("return $this->makeRequest(%s, $args);" % php_string(op.name))


class RestClientWriter(PhpClientWriter):
    protocol = 'REST'
    description = 'REST based'
    via = 'via REST'

    def gen_members(self):
        self.write()
        with self.indent("private function makeRequest($path)\n{", "}"):
            self.write(
                '$url = $this->endpoint . "/" . ltrim($path, "/");\n'
                '$context = stream_context_create([\n'
                '    "http" => [\n'
                '        "method" => "GET",\n'
                '        "header" => "Accept: application/json\\r\\n"\n'
                '    ]\n'
                ']);\n'
                '$result = file_get_contents($url, false, $context);\n'
                'if ($result === false) {\n'
                '    throw new Exception("Failed to connect to service");\n'
                '}\n'
                'return $result;'
            )

    def gen_operation(self, op):
        self.write("$path = %s;" % php_string(op.name))
        with self.indent("foreach (func_get_args() as $arg) {", "}"):
            self.write('$path .= "/" . rawurlencode($arg);')
        self.write('$path .= "/";')
        self.write("return $this->makeRequest($path);")


WRITERS = {
    'soap': SoapClientWriter,
    'json': JsonClientWriter,
    'rpc': RpcClientWriter,
    'http': HttpClientWriter,
    'rest': RestClientWriter,
}
