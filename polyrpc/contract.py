
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

"""The ``polyrpc.contract`` module contains the operation registry. It turns a
service class into an immutable :class:`ServiceContract` that every protocol,
interface document and client generator works from.

Only the members declared directly on the service class are exposed.
Inherited members, private members (whose names start with an underscore,
which also rules out constructors and destructors), properties and plain
attributes are skipped.

Operations are documented using the usual reST field lists: ::

    class Calculator(object):
        def add(self, a, b):
            '''Add two numbers together

            :param int a: First number to add
            :param int b: Second number to add
            :returns: The sum of both numbers
            :rtype: int
            '''
            return a + b

Types that are not documented are taken from the annotations in the
signature, if any.
"""

import logging
logger = logging.getLogger(__name__)

import re
import inspect

from collections import namedtuple
from collections.abc import Mapping
from types import MappingProxyType

from polyrpc.const import DEFAULT_TYPE_LABEL
from polyrpc.error import ContractError
from polyrpc.error import Fault
from polyrpc.error import invalid_argument_count
from polyrpc.error import invalid_argument_value
from polyrpc.error import operation_exception
from polyrpc.error import operation_name_required
from polyrpc.error import operation_not_found
from polyrpc.model import coerce
from polyrpc.model import label_from_annotation
from polyrpc.model import normalize_label


KIND_METHOD = 'method'
KIND_STATIC = 'static'
KIND_CLASS = 'class'

_FIELD_RE = re.compile(r'^:(\w+)((?:\s+[^:]+?)?)\s*:(.*)$')

_UNSUPPORTED_PARAMETER_KINDS = (
    inspect.Parameter.VAR_POSITIONAL,
    inspect.Parameter.VAR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


Parameter = namedtuple('Parameter', ['name', 'type_label', 'description'])
"""One operation argument."""

ReturnValue = namedtuple('ReturnValue', ['type_label', 'description'])
"""The documented return value of an operation."""


class Operation(namedtuple('Operation', ['name', 'parameters', 'returns',
                                  'description', 'required_count', 'kind'])):
    """One exposed method. ``parameters`` is a tuple of :class:`Parameter`
    instances in positional binding order, ``returns`` is a
    :class:`ReturnValue` or ``None``."""

    __slots__ = ()

    @property
    def parameter_names(self):
        return tuple(p.name for p in self.parameters)

    def accepts(self, count):
        return self.required_count <= count <= len(self.parameters)

    def get_signature(self):
        """Returns a human-readable signature like ``int add (int a, int b)``."""

        params = ', '.join("%s %s" % (p.type_label, p.name)
                                                       for p in self.parameters)
        if self.returns is None:
            return "%s (%s)" % (self.name, params)
        return "%s %s (%s)" % (self.returns.type_label, self.name, params)

    def get_rest_uri(self, endpoint):
        """Returns the default GET REST uri template of this operation."""

        retval = [endpoint, self.name]
        retval.extend(':%s' % p.name for p in self.parameters)
        return '/'.join(retval) + '/'

    def bind(self, args):
        """Binds a sequence of positional arguments to the parameters of
        this operation and coerces them to the declared types.

        Raises a 400 :class:`polyrpc.error.Fault` on count mismatch or when a
        value can't be coerced.
        """

        args = tuple(args)
        if not self.accepts(len(args)):
            raise invalid_argument_count(self.name)

        retval = []
        for param, value in zip(self.parameters, args):
            try:
                retval.append(coerce(param.type_label, value))
            except ValueError:
                raise invalid_argument_value(self.name, param.name)

        return tuple(retval)

    def bind_by_name(self, kwargs):
        """Same as :meth:`bind`, but takes a mapping of parameter names to
        values."""

        unknown = set(kwargs) - set(self.parameter_names)
        if len(unknown) > 0:
            raise invalid_argument_count(self.name)

        args = []
        for i, param in enumerate(self.parameters):
            if param.name in kwargs:
                if len(args) < i:
                    # a gap can't be expressed positionally.
                    raise invalid_argument_count(self.name)
                args.append(kwargs[param.name])

        return self.bind(args)


class ServiceContract(object):
    """The immutable, protocol-agnostic description of a service. Use
    :func:`build_contract` to create instances of this class.

    :param service_class: The introspected class.
    :param service_name: Display/identifier name.
    :param endpoint: Canonical base url of the service.
    :param operations: An iterable of :class:`Operation` instances.
    :param factory: A callable that returns a fresh service instance. Defaults
        to the service class itself.
    """

    def __init__(self, service_class, service_name, endpoint, operations,
                                                                  factory=None):
        self.__service_class = service_class
        self.__service_name = service_name
        self.__endpoint = endpoint.rstrip('/')
        self.__operations = tuple(operations)

        if factory is None:
            factory = service_class

        operation_map = {}
        handles = {}
        for op in self.__operations:
            if op.name in operation_map:
                raise ContractError("Operation name %r is not unique" %
                                                                      (op.name,))

            operation_map[op.name] = op
            handles[op.name] = _make_handle(service_class, op, factory)

        self.__operation_map = MappingProxyType(operation_map)
        self.__handles = MappingProxyType(handles)

    @property
    def service_class(self):
        return self.__service_class

    @property
    def service_name(self):
        return self.__service_name

    @property
    def endpoint(self):
        return self.__endpoint

    @property
    def operations(self):
        return self.__operations

    def __len__(self):
        return len(self.__operations)

    def __iter__(self):
        return iter(self.__operations)

    def __contains__(self, name):
        return name in self.__operation_map

    def get_operation(self, name):
        """Returns the :class:`Operation` with the given name. Raises a 404
        fault if there's no such operation, and a 400 fault if the name is
        empty."""

        if name is None or len(name) == 0:
            raise operation_name_required()

        retval = self.__operation_map.get(name, None)
        if retval is None:
            raise operation_not_found(name)

        return retval

    def invoke(self, name, args):
        """Looks up, binds and calls the operation with the given name.
        ``args`` is either a sequence of positional arguments or a mapping of
        parameter names to values.

        Every exception raised by the operation is converted to a 500
        :class:`polyrpc.error.Fault`, unless it's already a fault.
        """

        operation = self.get_operation(name)
        if isinstance(args, Mapping):
            args = operation.bind_by_name(args)
        else:
            args = operation.bind(args)
        handle = self.__handles[name]

        logger.debug("Invoking %s.%s%r", self.__service_name, name, args)

        try:
            return handle(args)

        except Fault:
            raise

        except Exception as e:
            raise operation_exception(name, e)

    def __repr__(self):
        return "%s(%r, %r, [%s])" % (self.__class__.__name__,
                     self.__service_name, self.__endpoint,
                     ', '.join(op.name for op in self.__operations))


def _make_handle(service_class, operation, factory):
    name = operation.name

    if operation.kind == KIND_METHOD:
        def handle(args):
            return getattr(factory(), name)(*args)

    else:
        function = getattr(service_class, name)

        def handle(args):
            return function(*args)

    return handle


def parse_docstring(doc):
    """Parses a docstring into a ``(description, params, returns)`` tuple.

    ``params`` is a dict that maps parameter names to ``[type, description]``
    lists, ``returns`` is a ``[type, description]`` list. Missing bits are
    ``None``.
    """

    description = []
    params = {}
    returns = [None, None]

    if not doc:
        return '', params, returns

    current = None
    in_fields = False
    for line in inspect.cleandoc(doc).splitlines():
        stripped = line.strip()
        match = _FIELD_RE.match(stripped)

        if match is None:
            if current is not None:
                if len(stripped) > 0:
                    current.append(stripped)
                else:
                    current = None
            elif not in_fields:
                description.append(stripped)
            continue

        field, arg, text = match.group(1), match.group(2).split(), \
                                                           match.group(3).strip()
        field = field.lower()
        current = None
        in_fields = True

        if field in ('param', 'parameter', 'arg', 'argument'):
            if len(arg) == 0:
                continue

            entry = params.setdefault(arg[-1], [None, None])
            if len(arg) > 1:
                entry[0] = ' '.join(arg[:-1])
            entry[1] = text
            current = _Continuation(entry, 1)

        elif field == 'type':
            if len(arg) == 0:
                continue

            entry = params.setdefault(arg[-1], [None, None])
            entry[0] = text

        elif field in ('returns', 'return'):
            if len(arg) > 0:
                returns[0] = ' '.join(arg)
            returns[1] = text
            current = _Continuation(returns, 1)

        elif field == 'rtype':
            returns[0] = text

    description = ' '.join(' '.join(description).split())

    for entry in params.values():
        if entry[1] is not None:
            entry[1] = ' '.join(entry[1].split())
    if returns[1] is not None:
        returns[1] = ' '.join(returns[1].split())

    return description, params, returns


class _Continuation(object):
    """Appends continuation lines of a field to the right list slot."""

    def __init__(self, target, index):
        self.target = target
        self.index = index

    def append(self, text):
        self.target[self.index] = ' '.join((self.target[self.index] or '', text))


def _iter_members(service_class):
    # vars() preserves declaration order and only has own members.
    for name, member in vars(service_class).items():
        if name.startswith('_'):
            continue

        if isinstance(member, staticmethod):
            yield name, member.__func__, KIND_STATIC

        elif isinstance(member, classmethod):
            yield name, member.__func__, KIND_CLASS

        elif inspect.isfunction(member):
            yield name, member, KIND_METHOD


def _build_operation(service_class, name, function, kind):
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError) as e:
        raise ContractError("Can't introspect %s.%s: %s" %
                                             (service_class.__name__, name, e))

    sig_params = list(signature.parameters.values())
    if kind in (KIND_METHOD, KIND_CLASS):
        if len(sig_params) == 0:
            raise ContractError("%s.%s has no implicit first argument" %
                                                  (service_class.__name__, name))
        sig_params = sig_params[1:]

    description, doc_params, doc_returns = parse_docstring(function.__doc__)

    params = []
    required_count = 0
    for p in sig_params:
        if p.kind in _UNSUPPORTED_PARAMETER_KINDS:
            raise ContractError("%s.%s: argument %r can't be bound "
                                "positionally" % (service_class.__name__, name,
                                                                        p.name))

        doc_type, doc_desc = doc_params.get(p.name, (None, None))
        if doc_type is not None:
            type_label = normalize_label(doc_type)
        else:
            type_label = label_from_annotation(p.annotation, inspect.Parameter.empty)
            if type_label is None:
                type_label = DEFAULT_TYPE_LABEL

        if p.default is inspect.Parameter.empty:
            required_count += 1

        params.append(Parameter(p.name, type_label, doc_desc or ''))

    for doc_name in doc_params:
        if doc_name not in signature.parameters:
            logger.warning("%s.%s documents unknown parameter %r",
                                       service_class.__name__, name, doc_name)

    returns = None
    ret_type, ret_desc = doc_returns
    annotated = label_from_annotation(signature.return_annotation,
                                                       inspect.Signature.empty)
    if ret_type is not None:
        returns = ReturnValue(normalize_label(ret_type), ret_desc or '')
    elif annotated is not None:
        returns = ReturnValue(annotated, ret_desc or '')
    elif ret_desc is not None:
        returns = ReturnValue(DEFAULT_TYPE_LABEL, ret_desc)

    return Operation(name, tuple(params), returns, description,
                                                          required_count, kind)


def get_service_name(service_class):
    retval = getattr(service_class, '__service_name__', None)
    if retval is None:
        retval = service_class.__name__
    return retval


def build_contract(service_class, endpoint, service_name=None, factory=None):
    """Introspects ``service_class`` and returns its :class:`ServiceContract`.

    This is a pure function of the declared members of ``service_class``.
    Raises :class:`polyrpc.error.ContractError` when the class does not
    expose any operation.
    """

    if not inspect.isclass(service_class):
        raise ContractError("%r is not a class" % (service_class,))

    if service_name is None:
        service_name = get_service_name(service_class)

    operations = []
    for name, function, kind in _iter_members(service_class):
        operations.append(_build_operation(service_class, name, function, kind))

    if len(operations) == 0:
        raise ContractError("%s does not declare any public operations" %
                                                       (service_class.__name__,))

    logger.debug("Built contract for %s with operations %r", service_name,
                                                [op.name for op in operations])

    return ServiceContract(service_class, service_name, endpoint, operations,
                                                                factory=factory)
