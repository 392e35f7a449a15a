# -*- coding: utf-8 -*-
"""
Tests for the layout C certificate parser.
"""

import pytest

from ebupot_reader.ebupot_reader.parsers.format_c_parser import (
    FormatCParser,
    FormatCState,
    extract_format_c,
)
from ebupot_reader.ebupot_reader.parsers.normalization import (
    MalformedFieldError,
    ParsingErrorCollector,
)


class TestFormatCPriorDocument:

    def test_extracts_all_fields(self, layout_c_prior_doc_text):
        record = extract_format_c(layout_c_prior_doc_text)

        assert record.certificate_number == "2301ABCDE"
        assert record.amount_ref_1 == "28-4001"
        assert record.amount_ref_2 == "2.000.000"
        assert record.supporting_documents == []
        assert record.prior_documents == ["SPK/2023/01   ", "2023-07-12"]
        assert record.taxpayer_id == "012345678901234"
        assert record.certificate_date == "2024-01-15"

    def test_reaches_final_state(self, layout_c_prior_doc_text):
        parser = FormatCParser()
        parser.run(layout_c_prior_doc_text)
        assert parser.is_complete


class TestFormatCSupportingDocument:

    def test_extracts_all_fields(self, layout_c_supporting_doc_text):
        record = extract_format_c(layout_c_supporting_doc_text)

        assert record.supporting_documents == [
            "Faktur Pajak",
            "010.000-23.00000001 ",
            "2023-08-05",
        ]
        assert record.prior_documents == []
        assert record.taxpayer_id == "012345678901234"
        assert record.certificate_date == "2024-01-15"

    def test_repeated_runs_are_identical(self, layout_c_supporting_doc_text):
        first = extract_format_c(layout_c_supporting_doc_text)
        second = extract_format_c(layout_c_supporting_doc_text)
        assert first == second


class TestFormatCEdgeCases:

    def test_amount_row_without_dash(self, layout_c_prior_doc_text):
        text = layout_c_prior_doc_text.replace("28-40012.000.000,00", "2840012.000.000,00")
        collector = ParsingErrorCollector()

        record = extract_format_c(text, collector)

        assert record.amount_ref_1 == ""
        assert record.amount_ref_2 == ""
        assert record.taxpayer_id == "012345678901234"
        assert [e.field for e in collector.errors] == ["b1"]

    def test_amount_row_without_dash_strict(self, layout_c_prior_doc_text):
        text = layout_c_prior_doc_text.replace("28-40012.000.000,00", "2840012.000.000,00")
        with pytest.raises(MalformedFieldError):
            extract_format_c(text, strict=True)

    def test_truncated_before_certificate_date(self, layout_c_prior_doc_text):
        text = layout_c_prior_doc_text.split("\n15 01 2024")[0]
        parser = FormatCParser()

        record = parser.run(text)

        assert record.prior_documents == ["SPK/2023/01   ", "2023-07-12"]
        assert record.certificate_date == ""
        assert parser.state is FormatCState.CERTIFICATE_DATE
