
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

"""The ``polyrpc.interface.html`` module contains the html descriptor page,
the page a browser gets when it opens the endpoint url without a query
string."""

import logging
logger = logging.getLogger(__name__)

from lxml import html
from lxml.html.builder import E
from lxml.html.builder import CLASS

from polyrpc.const import SERVED_PROTOCOLS
from polyrpc.interface._base import InterfaceDocumentBase


STYLE = """
body { font-family: Arial, sans-serif; margin: 20px; }
h1 { color: #333; }
h2 { color: #666; border-bottom: 1px solid #ccc; }
h3 { color: #888; }
.operation { margin: 20px 0; padding: 15px; border: 1px solid #ddd; }
.parameter { margin: 5px 0; }
.code { font-family: monospace; background: #f5f5f5; padding: 2px 4px; }
.uri { color: #0066cc; }
.description { margin: 10px 0; }
.download-links p { margin: 5px 0; }
"""


def _link(url):
    return E.a(E.span(url, CLASS('uri')), href=url, target='_blank')


def _field(label, *content):
    return E.p(E.strong(label + ':'), ' ', *content)


class HtmlDescriptor(InterfaceDocumentBase):
    """Renders the descriptor page: the endpoint, wsdl and client download
    urls, an index of the operations and the detailed documentation of
    every operation."""

    mime_type = 'text/html; charset=utf-8'

    def get_title(self):
        return "%s SOAP WebService interface description" % self.service_name

    def gen_header(self):
        return [
            E.h1(self.get_title()),
            _field("Endpoint URI", E.span(self.endpoint, CLASS('uri'))),
            _field("WSDL URI", _link(self.get_wsdl_url())),
        ]

    def gen_client_links(self):
        return E.div(CLASS('download-links'), *[
            _field("%s download URI" % label, _link(url))
                                    for label, url in self.get_client_urls()])

    def gen_protocols(self):
        return E.p("This service can be called using these protocols: %s" %
                                                   ', '.join(SERVED_PROTOCOLS))

    def gen_index(self):
        return [
            E.h2("Index"),
            E.h3("Public methods:"),
            E.ul(*[E.li(E.a(op.name, href='#' + op.name))
                                           for op in self.contract.operations]),
        ]

    def gen_operation(self, op):
        retval = E.div(CLASS('operation'),
            E.h3(op.name, id=op.name),
            E.p(op.get_signature(), CLASS('code')),
        )

        if len(op.description) > 0:
            retval.append(E.div(op.description, CLASS('description')))

        for p in op.parameters:
            retval.append(E.div(CLASS('parameter'),
                            E.strong("%s %s" % (p.type_label, p.name)), E.br(),
                            p.description))

        if op.returns is not None:
            retval.append(E.div(CLASS('parameter'),
                       E.strong("Return value %s:" % op.returns.type_label), ' ',
                       op.returns.description))

        retval.append(_field("Default GET REST URI",
                                         _link(op.get_rest_uri(self.endpoint))))

        return retval

    def gen_footer(self):
        return [
            E.hr(),
            E.p(E.em("Powered by polyrpc - PDF download: ",
                   E.a("Download this page as PDF", href=self.get_pdf_url(),
                                                             target='_blank'))),
        ]

    def gen_document(self):
        body = E.body()
        body.extend(self.gen_header())
        body.append(self.gen_client_links())
        body.append(self.gen_protocols())
        body.extend(self.gen_index())
        body.append(E.h2("Public methods"))
        for op in self.contract.operations:
            body.append(self.gen_operation(op))
        body.extend(self.gen_footer())

        return E.html(
            E.head(
                E.meta(charset='utf-8'),
                E.title(self.get_title()),
                E.style(STYLE),
            ),
            body,
        )

    def generate(self):
        return html.tostring(self.gen_document(), doctype='<!DOCTYPE html>',
                                           encoding='utf-8', pretty_print=True)
