# -*- coding: utf-8 -*-
"""
Tests for the layout B descrambling tables.
"""

import pytest

from ebupot_reader.ebupot_reader.parsers.normalization import MalformedFieldError
from ebupot_reader.ebupot_reader.parsers.permutation import (
    CERTIFICATE_DATE_TABLE,
    SEPARATOR,
    SUPPORTING_DOC_DATE_TABLE,
    TAXPAYER_ID_TABLE,
    descramble,
    is_bijection,
    required_length,
    source_indices,
)


@pytest.mark.parametrize(
    "table, size",
    [
        (TAXPAYER_ID_TABLE, 15),
        (SUPPORTING_DOC_DATE_TABLE, 8),
        (CERTIFICATE_DATE_TABLE, 8),
    ],
)
def test_tables_read_every_index_exactly_once(table, size):
    assert is_bijection(table, size)
    assert required_length(table) == size


def test_date_tables_insert_separators_in_iso_positions():
    for table in (SUPPORTING_DOC_DATE_TABLE, CERTIFICATE_DATE_TABLE):
        assert [i for i, entry in enumerate(table) if entry == SEPARATOR] == [4, 7]


def test_is_bijection_rejects_reused_index():
    assert not is_bijection((0, 1, 1))
    assert not is_bijection((0, 2), 2)


def test_taxpayer_id_table_order():
    assert descramble("ABCDEFGHIJKLMNO", TAXPAYER_ID_TABLE) == "HLOJDFMNBGCKAIE"


def test_taxpayer_id_known_fixture():
    assert descramble("280445903311672", TAXPAYER_ID_TABLE) == "012345678901234"


def test_supporting_doc_date_known_fixture():
    assert descramble("02008352", SUPPORTING_DOC_DATE_TABLE) == "2023-08-05"


def test_certificate_date_known_fixture():
    assert descramble("02254110", CERTIFICATE_DATE_TABLE) == "2024-01-15"


def test_source_indices_drop_separators():
    assert source_indices(CERTIFICATE_DATE_TABLE) == [1, 7, 2, 4, 0, 6, 5, 3]


def test_short_input_raises_malformed_field_error():
    with pytest.raises(MalformedFieldError) as exc_info:
        descramble("0123456789", TAXPAYER_ID_TABLE, field="c1")
    assert exc_info.value.field == "c1"


def test_longer_input_reads_only_table_indices():
    assert descramble("02254110XYZ", CERTIFICATE_DATE_TABLE) == "2024-01-15"
