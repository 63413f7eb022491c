
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

"""The ``polyrpc.codegen.js`` module contains the generator of the javascript
json client. The generated constructor function has one method per
operation. Methods are synchronous unless a callback is passed as the last
argument."""

import logging
logger = logging.getLogger(__name__)

import simplejson as json

from polyrpc.codegen._base import CodeWriter


MAKE_REQUEST = """\
this.makeRequest = function(method, params, callback, callbackData) {
    var xhr = new XMLHttpRequest();
    var data = "json=" + encodeURIComponent(JSON.stringify({
        call: method,
        param: params || []
    }));

    xhr.open("POST", this.endpoint, callback != null);
    xhr.setRequestHeader("Content-Type", "application/x-www-form-urlencoded");

    if (callback) {
        xhr.onreadystatechange = function() {
            if (xhr.readyState === 4) {
                var response;
                try {
                    response = JSON.parse(xhr.responseText);
                } catch (e) {
                    response = {error: "Invalid JSON response"};
                }
                callback(response, callbackData);
            }
        };
        xhr.send(data);
        return null;
    }

    xhr.send(data);
    var response = JSON.parse(xhr.responseText);
    if (xhr.status !== 200) {
        throw new Error(response.error || ("HTTP Error " + xhr.status));
    }
    return response.result;
};"""

METHOD_BODY = """\
var args = Array.prototype.slice.call(arguments);
var callback = null;
var callbackData = null;

// a trailing function is the callback, optionally followed by its data
if (args.length > 1 && typeof args[args.length - 2] === "function") {
    callbackData = args.pop();
    callback = args.pop();
}
else if (args.length > 0 && typeof args[args.length - 1] === "function") {
    callback = args.pop();
}

return this.makeRequest(%s, args, callback, callbackData);"""

EXAMPLE = """\
// Example usage:
/*
var client = new %(class_name)s();

// Synchronous call
try {
    var result = client.methodName(param1, param2);
} catch (e) {
    console.error("Error:", e.message);
}

// Asynchronous call
client.methodName(param1, param2, function(response, data) {
    if (response.error) {
        console.error("Error:", response.error);
    } else {
        console.log("Success:", response.result);
    }
});
*/"""


class JsonClientWriter(CodeWriter):
    protocol = 'JSON'

    def __init__(self, contract, class_name, generated_on):
        super(JsonClientWriter, self).__init__()

        self.contract = contract
        self.class_name = class_name
        self.generated_on = generated_on

    def gen_header(self):
        name = self.contract.service_name

        self.comment("%s JSON Client (JavaScript)" % name,
                     "Generated on %s" % self.generated_on,
                     "",
                     "This client provides JSON-based access to the %s service "
                                                      "from JavaScript" % name)
        self.write()

    def gen_operation(self, op):
        params = ', '.join(p.name for p in op.parameters)

        lines = []
        if len(op.description) > 0:
            lines.extend((op.description, ''))
        for p in op.parameters:
            lines.append(("@param {%s} %s %s" % (p.type_label, p.name,
                                                     p.description)).rstrip())
        if op.returns is not None:
            lines.append(("@returns {%s} %s" % (op.returns.type_label,
                                               op.returns.description)).rstrip())
        if len(lines) > 0:
            self.comment(*lines)

        with self.indent("this.%s = function(%s) {" % (op.name, params), "};"):
            self.write(METHOD_BODY % json.dumps(op.name))

    def generate(self):
        self.gen_header()

        with self.indent("var %s = function(endpoint) {" % self.class_name,
                                                                          "};"):
            self.write("this.endpoint = endpoint || %s;" %
                                            json.dumps(self.contract.endpoint))
            self.write()
            self.write(MAKE_REQUEST)

            for op in self.contract.operations:
                self.write()
                self.gen_operation(op)

        self.write()
        self.write(EXAMPLE % {'class_name': self.class_name})

        return self.getvalue()


WRITERS = {
    'json': JsonClientWriter,
}
