# -*- coding: utf-8 -*-
"""
Synthetic e-Bupot text layers, one per layout.

Line breaks follow the PDF text layer segmentation the layout parsers expect:
glued labels ("Nama Wajib PajakC.2:"), wrapped values and blank cells.
"""

import pytest

LAYOUT_A_LINES = [
    "FORMULIR BPBS",
    "H.1",
    "H.2",
    "H.3",
    "BUKTI PEMOTONGAN/PEMUNGUTAN PPh UNIFIKASI",
    "B.7Dokumen Referensi",
    "Nomor Dokumen",
    "Nama Dokumen",
    "ddmm",
    "yyyy",
    "INV/2023/0815 05082023",
    "B.8",
    "Tanggal",
    "SPK-01 1",
    "2072023",
    "B.9",
    "Fasilitas: Tanpa Fasilitas",
    "C.1",
    "C. IDENTITAS PEMOTONG/PEMUNGUT PPh",
    ":NPWP",
    "0123456",
    "78901234",
    "Nama Wajib PajakC.2:",
    "PT CONTOH JAYA",
    "C.3 Tanggal dd",
    "mmyyyy",
    "1509",
    "2023",
    "C.4",
    "Nama Penandatangan",
    "Dengan ini saya menyatakan telah menyampaikan Bukti Pemotongan ini.",
    "2301ABCDE",
    "PPh",
    "24-104-01",
    "1.500.000",
    "trailing footer",
]

LAYOUT_B_LINES = [
    "FORMULIR BPBS",
    "Bukti Pemotongan/Pemungutan Unifikasi PPh",
    "B.2 Jenis PPh : PPh Tidak Final",
    "PPh Pasal 23",
    "2301ABCDE",
    "B. OBJEK PEMOTONGAN",
    "B.1B.2B.3B.4B.5B.6",
    "PPh Pasal 23 24-104-01 1.000.000 2 20.000",
    "B.7 Dokumen Dasar",
    "ddmm",
    "ddmmyyyy",
    "Invoice",
    "INV/2023/081502008352",
    "B.8",
    "B.9",
    "C. IDENTITAS PEMOTONG/PEMUNGUT PPh",
    "280445903311672",
    "C.1 NPWP",
    "C.2Nama Wajib Pajak:",
    "02254110",
    "C.4 Nama Penandatangan",
]

LAYOUT_C_PRIOR_DOC_LINES = [
    "FORMULIR BPBS",
    "H.1",
    "NOMOR",
    "Dengan ini saya menyatakan telah menyampaikan Bukti Pemotongan ini.",
    "2301 ABC DE",
    "H.2",
    "H.3",
    "H.4",
    "B.1 B.2 B.3 B.4 B.5 B.6",
    "28-40012.000.000,00",
    "Dokumen",
    "SPK/2023/01   1207 2023",
    "01 234 567 890 1234",
    "PT CONTOH JAYA",
    "15 01 2024",
    "Nama Penandatangan",
]

LAYOUT_C_SUPPORTING_DOC_LINES = [
    "FORMULIR BPBS",
    "H.1",
    "NOMOR",
    "Dengan ini saya menyatakan telah menyampaikan Bukti Pemotongan ini.",
    "2301 ABC DE",
    "H.2",
    "H.3",
    "H.4",
    "B.1 B.2 B.3 B.4 B.5 B.6",
    "28-40012.000.000,00",
    "Dokumen",
    "Faktur Pajak",
    "010.000-23.00000001 0508 2023",
    "0123 4567 8901 234",
    "PT CONTOH JAYA",
    "15012024",
    "Nama Penandatangan",
]


def _join(lines):
    return "\n".join(lines)


@pytest.fixture()
def layout_a_lines():
    return list(LAYOUT_A_LINES)


@pytest.fixture()
def layout_a_text():
    return _join(LAYOUT_A_LINES)


@pytest.fixture()
def layout_b_lines():
    return list(LAYOUT_B_LINES)


@pytest.fixture()
def layout_b_text():
    return _join(LAYOUT_B_LINES)


@pytest.fixture()
def layout_c_prior_doc_text():
    return _join(LAYOUT_C_PRIOR_DOC_LINES)


@pytest.fixture()
def layout_c_supporting_doc_text():
    return _join(LAYOUT_C_SUPPORTING_DOC_LINES)
