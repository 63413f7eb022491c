
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

from polyrpc.contract import build_contract
from polyrpc.contract import parse_docstring
from polyrpc.contract import KIND_CLASS
from polyrpc.contract import KIND_METHOD
from polyrpc.contract import KIND_STATIC
from polyrpc.error import ContractError
from polyrpc.error import Fault
from polyrpc.service import Service
from polyrpc.test._service import Calculator
from polyrpc.test._service import ENDPOINT


class TestBuildContract(unittest.TestCase):
    def setUp(self):
        self.contract = build_contract(Calculator, ENDPOINT + '/')

    def test_operation_names(self):
        assert [op.name for op in self.contract.operations] == [
            'add', 'multiply', 'echo', 'divide', 'get_user', 'get_tags',
            'is_even', 'nothing', 'version', 'service_name',
        ]
        assert len(self.contract) == 10

    def test_private_and_attributes_skipped(self):
        assert '_private' not in self.contract
        assert 'total' not in self.contract
        assert '__init__' not in self.contract

    def test_endpoint_stripped(self):
        assert self.contract.endpoint == ENDPOINT

    def test_service_name(self):
        assert self.contract.service_name == 'Calculator'

        class SomeService(Service):
            __service_name__ = 'Other'

            def some_call(self):
                pass

        contract = build_contract(SomeService, ENDPOINT)
        assert contract.service_name == 'Other'

        contract = build_contract(SomeService, ENDPOINT, service_name='Third')
        assert contract.service_name == 'Third'

    def test_service_base_adds_nothing(self):
        class SomeService(Service):
            def some_call(self):
                pass

        contract = build_contract(SomeService, ENDPOINT)

        assert contract.service_name == 'SomeService'
        assert [op.name for op in contract.operations] == ['some_call']

    def test_kinds(self):
        assert self.contract.get_operation('add').kind == KIND_METHOD
        assert self.contract.get_operation('version').kind == KIND_STATIC
        assert self.contract.get_operation('service_name').kind == KIND_CLASS

    def test_documented_types(self):
        op = self.contract.get_operation('add')

        assert op.parameter_names == ('a', 'b')
        assert [p.type_label for p in op.parameters] == ['int', 'int']
        assert op.parameters[0].description == 'First number to add'
        assert op.returns.type_label == 'int'
        assert op.returns.description == 'The sum of both numbers'
        assert op.description == 'Add two numbers together'
        assert op.get_signature() == 'int add (int a, int b)'

    def test_annotated_types(self):
        op = self.contract.get_operation('multiply')

        assert [p.type_label for p in op.parameters] == ['float', 'float']
        assert op.returns.type_label == 'float'

    def test_undocumented(self):
        op = self.contract.get_operation('nothing')

        assert op.parameters == ()
        assert op.returns is None
        assert op.description == ''
        assert op.get_signature() == 'nothing ()'

    def test_default_type_label(self):
        class SomeService(object):
            def some_call(self, x):
                pass

        op = build_contract(SomeService, ENDPOINT).get_operation('some_call')
        assert op.parameters[0].type_label == 'mixed'

    def test_required_count(self):
        op = self.contract.get_operation('echo')

        assert op.required_count == 1
        assert op.accepts(1)
        assert op.accepts(2)
        assert not op.accepts(0)
        assert not op.accepts(3)

    def test_rest_uri(self):
        op = self.contract.get_operation('add')
        assert op.get_rest_uri(ENDPOINT) == ENDPOINT + '/add/:a/:b/'

        op = self.contract.get_operation('nothing')
        assert op.get_rest_uri(ENDPOINT) == ENDPOINT + '/nothing/'

    def test_inherited_members_skipped(self):
        class Child(Calculator):
            def subtract(self, a, b):
                return a - b

        contract = build_contract(Child, ENDPOINT)
        assert [op.name for op in contract.operations] == ['subtract']

    def test_no_operations(self):
        class Empty(object):
            def _hidden(self):
                pass

        self.assertRaises(ContractError, build_contract, Empty, ENDPOINT)

    def test_not_a_class(self):
        self.assertRaises(ContractError, build_contract, Calculator(), ENDPOINT)

    def test_var_args(self):
        class SomeService(object):
            def some_call(self, *args):
                pass

        self.assertRaises(ContractError, build_contract, SomeService, ENDPOINT)

        class SomeService(object):
            def some_call(self, **kwargs):
                pass

        self.assertRaises(ContractError, build_contract, SomeService, ENDPOINT)

        class SomeService(object):
            def some_call(self, *, a):
                pass

        self.assertRaises(ContractError, build_contract, SomeService, ENDPOINT)

    def test_immutable(self):
        assert isinstance(self.contract.operations, tuple)

        def _set():
            self.contract.operations = ()
        self.assertRaises(AttributeError, _set)

        op = self.contract.get_operation('add')
        self.assertRaises(AttributeError, setattr, op, 'name', 'sub')


class TestInvoke(unittest.TestCase):
    def setUp(self):
        self.contract = build_contract(Calculator, ENDPOINT)

    def test_invoke(self):
        assert self.contract.invoke('add', [5, 3]) == 8
        assert self.contract.invoke('add', ['5', '3']) == 8
        assert self.contract.invoke('multiply', ['1.5', 2]) == 3.0
        assert self.contract.invoke('echo', ['ab']) == 'ab'
        assert self.contract.invoke('echo', ['ab', '2']) == 'abab'
        assert self.contract.invoke('version', []) == '1.0'
        assert self.contract.invoke('service_name', []) == 'Calculator'

    def test_invoke_by_name(self):
        assert self.contract.invoke('add', {'a': 1, 'b': 2}) == 3
        assert self.contract.invoke('echo', {'s': 'x'}) == 'x'

    def test_invoke_by_name_unknown(self):
        try:
            self.contract.invoke('add', {'a': 1, 'c': 2})
        except Fault as e:
            assert e.http_status == 400
        else:
            raise Exception("must fail")

    def test_fresh_instance(self):
        instances = []

        class Counter(object):
            def __init__(self):
                instances.append(self)
                self.count = 0

            def incr(self):
                self.count += 1
                return self.count

        contract = build_contract(Counter, ENDPOINT)
        assert contract.invoke('incr', []) == 1
        assert contract.invoke('incr', []) == 1
        assert len(instances) == 2

    def test_factory(self):
        class Greeter(object):
            def __init__(self, greeting):
                self.greeting = greeting

            def greet(self, name):
                return "%s %s" % (self.greeting, name)

        contract = build_contract(Greeter, ENDPOINT,
                                             factory=lambda: Greeter("Hello"))
        assert contract.invoke('greet', ['World']) == 'Hello World'

    def test_unknown_operation(self):
        try:
            self.contract.invoke('subtract', [1, 2])
        except Fault as e:
            assert e.http_status == 404
            assert e.message == 'operation subtract not found'
        else:
            raise Exception("must fail")

    def test_missing_name(self):
        for name in ('', None):
            try:
                self.contract.get_operation(name)
            except Fault as e:
                assert e.http_status == 400
                assert e.message == 'operation name is required'
            else:
                raise Exception("must fail")

    def test_argument_count(self):
        for args in ([5], [1, 2, 3]):
            try:
                self.contract.invoke('add', args)
            except Fault as e:
                assert e.http_status == 400
                assert e.message == 'invalid number of arguments for ' \
                                                                'operation add'
            else:
                raise Exception("must fail")

    def test_invalid_value(self):
        try:
            self.contract.invoke('add', ['five', 3])
        except Fault as e:
            assert e.http_status == 400
            assert e.message == 'invalid value for argument a of operation add'
        else:
            raise Exception("must fail")

    def test_exception(self):
        try:
            self.contract.invoke('divide', [1, 0])
        except Fault as e:
            assert e.http_status == 500
            assert e.message.startswith('exception in operation divide: ')
        else:
            raise Exception("must fail")

    def test_fault_passes_through(self):
        try:
            self.contract.invoke('get_user', [2])
        except Fault as e:
            assert e.http_status == 404
            assert e.message == 'user 2 not found'
        else:
            raise Exception("must fail")


class TestParseDocstring(unittest.TestCase):
    def test_fields(self):
        description, params, returns = parse_docstring("""
            Does things.

            Over two lines.

            :param int a: The first
                argument.
            :param b: The second argument.
            :type b: float
            :returns: Nothing much.
            :rtype: string
        """)

        assert description == 'Does things. Over two lines.'
        assert params == {'a': ['int', 'The first argument.'],
                          'b': ['float', 'The second argument.']}
        assert returns == ['string', 'Nothing much.']

    def test_empty(self):
        assert parse_docstring(None) == ('', {}, [None, None])
        assert parse_docstring('') == ('', {}, [None, None])

    def test_description_only(self):
        description, params, returns = parse_docstring("Just this.")

        assert description == 'Just this.'
        assert params == {}
        assert returns == [None, None]


if __name__ == '__main__':
    unittest.main()
