#!/usr/bin/env python
#encoding: utf8

import io
import os
import re

from setuptools import setup
from setuptools import find_packages


with io.open(os.path.join(os.path.dirname(__file__), 'polyrpc', '__init__.py'), 'r') as v:
    VERSION = re.match(r".*__version__ = '(.*?)'", v.read(), re.S).group(1)

SHORT_DESC="Exposes the public methods of a plain python class as a web " \
"service that speaks SOAP, JSON, REST, XML-RPC and form-encoded HTTP at once."

LONG_DESC = """polyrpc introspects a service class once and serves it from a
single endpoint url. The protocol of every request is detected from the shape
of its query string, path and body. The same contract is used to generate a
WSDL document, an html and pdf description of the service and ready-to-use
PHP and JavaScript clients.
"""

try:
    os.stat('CHANGELOG.rst')
    with io.open('CHANGELOG.rst', 'rb') as f:
        LONG_DESC += u"\n\n" + f.read().decode('utf8')
except OSError:
    pass


setup(
    name='polyrpc',
    packages=find_packages(exclude=['examples', 'examples.*']),

    version=VERSION,
    description=SHORT_DESC,
    long_description=LONG_DESC,
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Operating System :: OS Independent',
        'Natural Language :: English',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
    ],
    keywords='soap wsdl wsgi rest rpc json http xml xmlrpc pdf',
    license='LGPL-2.1',
    zip_safe=False,
    python_requires='>=3.6',
    install_requires=[
        'pytz',
        'lxml',
        'werkzeug',
        'simplejson',
        'reportlab',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
)
