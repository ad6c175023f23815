"""
Shared fixtures for the DNI scanner test suite.
"""

import pytest

from dni_scanner.core.interfaces.extraction_observer import IExtractionObserver
from dni_scanner.core.use_cases.scan_document import ScanDocumentUseCase
from dni_scanner.infrastructure.parsers import BackSideParser, FrontSideParser


class RecordingObserver(IExtractionObserver):
    """Keeps every extraction event as a tuple for assertions."""

    def __init__(self):
        self.events = []

    def scan_started(self, side, text_length):
        self.events.append(("scan_started", side, text_length))

    def text_normalized(self, side, normalized):
        self.events.append(("text_normalized", side, normalized))

    def field_extracted(self, side, field, value, strategy):
        self.events.append(("field_extracted", side, field, value, strategy))

    def field_missed(self, side, field):
        self.events.append(("field_missed", side, field))

    def side_skipped(self, side, reason):
        self.events.append(("side_skipped", side, reason))

    def back_side_failed(self, error):
        self.events.append(("back_side_failed", error))

    def of_kind(self, kind):
        return [e for e in self.events if e[0] == kind]

    def strategy_for(self, field):
        for event in self.of_kind("field_extracted"):
            if event[2] == field:
                return event[4]
        return None


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def front_parser(observer):
    return FrontSideParser(observer=observer)


@pytest.fixture
def back_parser(observer):
    return BackSideParser(observer=observer)


@pytest.fixture
def use_case(front_parser, back_parser, observer):
    return ScanDocumentUseCase(front_parser, back_parser, observer=observer)


@pytest.fixture
def front_text():
    return "APELLIDO\nPEREZ\nNOMBRE\nJUAN CARLOS\n12345678\n15/03/1985"


@pytest.fixture
def back_text():
    return (
        "DOMICILIO: AV SIEMPREVIVA 742\n"
        "CUIL 20-12345678-1\n"
        "LUGAR DE NACIMIENTO\n"
        "BUENOS AIRES"
    )


@pytest.fixture
def realistic_front_text():
    """Front of a DNI as Google Vision returns it, labels and noise included."""
    return (
        "REPUBLICA ARGENTINA - MERCOSUR\n"
        "REGISTRO NACIONAL DE LAS PERSONAS\n"
        "Apellido / Surname\n"
        "GONZÁLEZ\n"
        "Nombre / Name\n"
        "MARÍA   LAURA\n"
        "Sexo / Sex   Nacionalidad / Nationality\n"
        "F  ARGENTINA\n"
        "Fecha de nacimiento / Date of birth\n"
        "05 NOV/ NOV 1990\n"
        "Fecha de emisión / Date of issue\n"
        "12 ENE/ JAN 2018\n"
        "Documento / Document\n"
        "35.123.456 |\n"
    )
