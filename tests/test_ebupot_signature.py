# -*- coding: utf-8 -*-
"""
Tests for e-Bupot layout detection.
"""

import pytest

from ebupot_reader.ebupot_reader.parsers.models import EbupotFormat
from ebupot_reader.ebupot_reader.parsers.signature import detect_ebupot_format

SIGNATURE_A = "FORMULIR BPBS\nH.1\nH.2\nH.3"
SIGNATURE_B = "FORMULIR BPBS\nBukti Pemotongan"
SIGNATURE_C = "FORMULIR BPBS\nH.1\nNOMOR"


@pytest.mark.parametrize(
    "text, expected",
    [
        (f"header\n{SIGNATURE_A}\nbody", EbupotFormat.A),
        (f"{SIGNATURE_B} Unifikasi\n", EbupotFormat.B),
        (f"{SIGNATURE_C}\n", EbupotFormat.C),
        ("", EbupotFormat.EMPTY),
        ("  \n\t \n", EbupotFormat.EMPTY),
        ("\ufeff", EbupotFormat.EMPTY),
        ("\ufeff \n\ufeff\n", EbupotFormat.EMPTY),
        ("\ufeffFaktur Pajak", EbupotFormat.UNRECOGNIZED),
        ("Faktur Pajak\nKode dan Nomor Seri", EbupotFormat.UNRECOGNIZED),
        ("FORMULIR BPBS H.1 H.2 H.3", EbupotFormat.UNRECOGNIZED),
    ],
)
def test_detects_format(text, expected):
    assert detect_ebupot_format(text) is expected


def test_priority_a_over_b_and_c():
    text = "\n".join([SIGNATURE_C, SIGNATURE_B, SIGNATURE_A])
    assert detect_ebupot_format(text) is EbupotFormat.A


def test_priority_b_over_c():
    text = "\n".join([SIGNATURE_C, SIGNATURE_B])
    assert detect_ebupot_format(text) is EbupotFormat.B


def test_format_values_are_single_letter_tags():
    assert [fmt.value for fmt in EbupotFormat] == ["A", "B", "C", "Z", "U"]
    assert EbupotFormat("Z") is EbupotFormat.EMPTY


def test_detects_fixture_layouts(layout_a_text, layout_b_text, layout_c_prior_doc_text):
    assert detect_ebupot_format(layout_a_text) is EbupotFormat.A
    assert detect_ebupot_format(layout_b_text) is EbupotFormat.B
    assert detect_ebupot_format(layout_c_prior_doc_text) is EbupotFormat.C
