
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

"""The ``polyrpc.error`` module contains the exceptions that the registry and
the dispatcher raise, and that user code can raise to control the fault
response of an operation.
"""


class ContractError(Exception):
    """Raised when a service class can't be turned into a service contract.
    This is a startup-time error, it's never sent to a client."""


class Fault(Exception):
    """Use this class as a base for all request-time errors.

    A fault carries an http status code and a human-readable message. Every
    protocol adapter knows how to render a fault inside its own envelope, and
    the http status of the response is always the one in the fault.

    :param http_status: An integer http status code. 4xx codes denote a
        problem with the request, 5xx codes a problem while processing an
        otherwise legitimate request.
    :param message: The human-readable explanation of the error.
    """

    HTTP_STATUS = 500

    def __init__(self, http_status=None, message=""):
        if http_status is None:
            http_status = self.HTTP_STATUS

        super(Fault, self).__init__(message)

        self.http_status = int(http_status)
        self.message = message

    @property
    def faultcode(self):
        """SOAP 1.1 style fault code: 'Client' for 4xx, 'Server' otherwise."""

        if 400 <= self.http_status < 500:
            return 'Client'
        return 'Server'

    def to_dict(self):
        return {"success": False, "error": self.message}

    def __str__(self):
        return self.message

    def __repr__(self):
        return "%s(%d: %r)" % (self.__class__.__name__, self.http_status,
                                                                   self.message)


class ArgumentError(Fault):
    """Raised when there is a problem with the input data."""

    HTTP_STATUS = 400

    def __init__(self, message=""):
        super(ArgumentError, self).__init__(self.HTTP_STATUS, message)


class ResourceNotFoundError(Fault):
    """Raised when the requested operation does not exist."""

    HTTP_STATUS = 404

    def __init__(self, message=""):
        super(ResourceNotFoundError, self).__init__(self.HTTP_STATUS, message)


class RequestTooLongError(Fault):
    """Raised when request is too long."""

    HTTP_STATUS = 413

    def __init__(self, message="Request too long"):
        super(RequestTooLongError, self).__init__(self.HTTP_STATUS, message)


class InternalError(Fault):
    """Raised to communicate server-side errors."""

    HTTP_STATUS = 500

    def __init__(self, message="Internal Error"):
        super(InternalError, self).__init__(self.HTTP_STATUS, message)


def operation_name_required():
    return ArgumentError("operation name is required")


def operation_not_found(name):
    return ResourceNotFoundError("operation %s not found" % (name,))


def invalid_argument_count(name):
    return ArgumentError("invalid number of arguments for operation %s" %
                                                                       (name,))


def invalid_argument_value(name, param_name):
    return ArgumentError("invalid value for argument %s of operation %s" %
                                                           (param_name, name))


def operation_exception(name, error):
    return InternalError("exception in operation %s: %s" % (name, error))
