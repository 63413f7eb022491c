
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

"""The ``polyrpc.model`` module maps python types and documented type names to
the type labels that appear in service contracts, and to the xml schema types
that appear in the wsdl document. It also implements the only kind of input
processing polyrpc does: coercing incoming values to the declared type.
"""

import logging
logger = logging.getLogger(__name__)

from datetime import date
from datetime import datetime
from decimal import Decimal

from polyrpc.const import DEFAULT_TYPE_LABEL


NATIVE_MAP = {
    int: 'int',
    float: 'float',
    str: 'string',
    bool: 'boolean',
    bytes: 'base64Binary',
    list: 'array',
    tuple: 'array',
    dict: 'struct',
    Decimal: 'decimal',
    datetime: 'dateTime',
    date: 'date',
}
"""Python types to type labels."""

LABEL_ALIASES = {
    'int': 'int',
    'integer': 'int',
    'long': 'int',
    'float': 'float',
    'double': 'float',
    'number': 'float',
    'str': 'string',
    'string': 'string',
    'unicode': 'string',
    'bool': 'boolean',
    'boolean': 'boolean',
    'bytes': 'base64Binary',
    'base64binary': 'base64Binary',
    'list': 'array',
    'tuple': 'array',
    'array': 'array',
    'dict': 'struct',
    'struct': 'struct',
    'decimal': 'decimal',
    'datetime': 'dateTime',
    'date': 'date',
    'mixed': DEFAULT_TYPE_LABEL,
    'any': DEFAULT_TYPE_LABEL,
    'object': DEFAULT_TYPE_LABEL,
}
"""Lowercase documented type names to type labels. Unknown names are kept
as they are written."""

XSD_TYPE_MAP = {
    'int': 'int',
    'float': 'double',
    'string': 'string',
    'boolean': 'boolean',
    'base64Binary': 'base64Binary',
    'decimal': 'decimal',
    'dateTime': 'dateTime',
    'date': 'date',
}
"""Type labels to xml schema type names. Everything else is xs:anyType."""

_TRUE_STRINGS = ('true', '1', 'yes', 'on')
_FALSE_STRINGS = ('false', '0', 'no', 'off', '')


def normalize_label(label):
    """Returns the canonical type label for a documented type name."""

    if label is None:
        return DEFAULT_TYPE_LABEL

    label = label.strip()
    if len(label) == 0:
        return DEFAULT_TYPE_LABEL

    return LABEL_ALIASES.get(label.lower(), label)


def label_from_annotation(annotation, empty=None):
    """Returns the type label for a signature annotation, or ``None`` when
    there is no annotation."""

    if annotation is empty or annotation is None:
        return None

    if isinstance(annotation, str):
        # postponed evaluation of annotations leaves us with the source text.
        return normalize_label(annotation)

    retval = NATIVE_MAP.get(annotation, None)
    if retval is not None:
        return retval

    if isinstance(annotation, type):
        return annotation.__name__

    return str(annotation)


def get_xsd_type(label):
    return XSD_TYPE_MAP.get(label, 'anyType')


def _to_int(value):
    if isinstance(value, bool):
        return int(value)

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(value)
        return int(value)

    if isinstance(value, bytes):
        value = value.decode('utf8')

    if isinstance(value, str):
        return int(value.strip())

    raise ValueError(value)


def _to_float(value):
    if isinstance(value, (int, float, Decimal)):
        return float(value)

    if isinstance(value, bytes):
        value = value.decode('utf8')

    if isinstance(value, str):
        return float(value.strip())

    raise ValueError(value)


def _to_string(value):
    if isinstance(value, str):
        return value

    if isinstance(value, bytes):
        return value.decode('utf8')

    if isinstance(value, bool):
        return 'true' if value else 'false'

    if isinstance(value, (int, float, Decimal)):
        return str(value)

    raise ValueError(value)


def _to_boolean(value):
    if isinstance(value, bool):
        return value

    if isinstance(value, int) and value in (0, 1):
        return bool(value)

    if isinstance(value, bytes):
        value = value.decode('utf8')

    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE_STRINGS:
            return True
        if v in _FALSE_STRINGS:
            return False

    raise ValueError(value)


COERCERS = {
    'int': _to_int,
    'float': _to_float,
    'string': _to_string,
    'boolean': _to_boolean,
}


def coerce(label, value):
    """Coerces ``value`` to the type denoted by ``label``.

    ``None`` and values of labels that have no coercer pass through
    untouched. Raises ``ValueError`` when the value can't be coerced.
    """

    if value is None:
        return None

    coercer = COERCERS.get(label, None)
    if coercer is None:
        return value

    try:
        return coercer(value)

    except (TypeError, ValueError, UnicodeDecodeError) as e:
        logger.debug("Could not coerce %r to %r: %r", value, label, e)
        raise ValueError("%r is not a valid %s" % (value, label))
