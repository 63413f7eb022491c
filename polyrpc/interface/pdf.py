
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

"""The ``polyrpc.interface.pdf`` module renders the contents of the
descriptor page as a pdf document, using reportlab's platypus layout
engine."""

import logging
logger = logging.getLogger(__name__)

from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import HRFlowable
from reportlab.platypus import ListFlowable
from reportlab.platypus import ListItem
from reportlab.platypus import Paragraph
from reportlab.platypus import SimpleDocTemplate

from polyrpc.const import SERVED_PROTOCOLS
from polyrpc.interface._base import InterfaceDocumentBase


class PdfDescriptor(InterfaceDocumentBase):
    """The pdf rendition of :class:`polyrpc.interface.html.HtmlDescriptor`.

    :param contract: A :class:`polyrpc.contract.ServiceContract` instance.
    :param pagesize: A reportlab page size tuple.
    """

    mime_type = 'application/pdf'

    def __init__(self, contract, pagesize=A4):
        super(PdfDescriptor, self).__init__(contract)

        self.pagesize = pagesize
        self.styles = getSampleStyleSheet()

    def get_title(self):
        return "%s SOAP WebService interface description" % self.service_name

    def get_file_name(self):
        return "%s_API_Documentation.pdf" % self.service_name

    def get_headers(self):
        return (('Content-Disposition',
                             'attachment; filename="%s"' % self.get_file_name()),)

    def _p(self, text, style='BodyText'):
        return Paragraph(text, self.styles[style])

    def _field(self, label, text):
        return self._p("<b>%s:</b> %s" % (escape(label), escape(text)))

    def _bullets(self, texts):
        return ListFlowable([ListItem(self._p(escape(t))) for t in texts],
                                                             bulletType='bullet')

    def gen_operation(self, op):
        retval = [
            self._p(escape(op.name), 'Heading3'),
            self._p(escape(op.get_signature()), 'Code'),
        ]

        if len(op.description) > 0:
            retval.append(self._p(escape(op.description)))

        if len(op.parameters) > 0:
            retval.append(self._p("<b>Parameters:</b>"))
            for p in op.parameters:
                retval.append(self._p("<b>%s %s</b><br/>%s" % (
                  escape(p.type_label), escape(p.name), escape(p.description))))

        if op.returns is not None:
            retval.append(self._field("Return value %s" %
                                op.returns.type_label, op.returns.description))

        retval.append(self._field("Default GET REST URI",
                                                op.get_rest_uri(self.endpoint)))
        retval.append(HRFlowable(width='100%'))

        return retval

    def gen_story(self):
        """Returns the list of flowables that make up the document."""

        story = [
            self._p(escape(self.get_title()), 'Title'),
            self._field("Endpoint URI", self.endpoint),
            self._field("WSDL URI", self.get_wsdl_url()),
            self._p("<b>Client Downloads Available:</b>"),
            self._bullets(["%s: %s" % (label, url)
                                    for label, url in self.get_client_urls()]),
            self._p(escape("This service can be called using these "
                                "protocols: %s" % ', '.join(SERVED_PROTOCOLS))),
            self._p("Index", 'Heading2'),
            self._p("Public methods:", 'Heading3'),
            self._bullets([op.name for op in self.contract.operations]),
            self._p("Public methods", 'Heading2'),
        ]

        for op in self.contract.operations:
            story.extend(self.gen_operation(op))

        story.append(self._p("<i>Powered by polyrpc</i>"))

        return story

    def generate(self):
        stream = BytesIO()

        doc = SimpleDocTemplate(stream, pagesize=self.pagesize,
                    leftMargin=15 * mm, rightMargin=15 * mm,
                    topMargin=27 * mm, bottomMargin=25 * mm,
                    title=self.get_title(), author="polyrpc",
                    subject="WebService API Documentation", creator="polyrpc")

        doc.build(self.gen_story())

        return stream.getvalue()
