from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from ebupot_reader.ebupot_reader.parsers.ebupot_parser import parse_ebupot_text
from ebupot_reader.ebupot_reader.parsers.normalization import ParsingErrorCollector
from ebupot_reader.ebupot_reader.parsers.pdf_text import (
	extract_text_from_bytes,
	extract_text_from_path,
)

logger = logging.getLogger(__name__)

try:
	import frappe
	logger = frappe.logger()
except ImportError:
	pass

DEFAULT_SETTINGS = {
	"strict_field_checks": 0,
	"pdf_max_pages": None,
	"pdf_file_max_mb": 10,
	"pdf_page_separator": "\n\n",
}


def get_settings(overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
	settings = dict(DEFAULT_SETTINGS)
	for key, value in (overrides or {}).items():
		if key in DEFAULT_SETTINGS:
			settings[key] = value
	return settings


def _pdf_options(settings: Mapping[str, Any]) -> dict[str, Any]:
	return {
		"max_pages": settings.get("pdf_max_pages"),
		"page_separator": settings.get("pdf_page_separator"),
		"max_mb": settings.get("pdf_file_max_mb"),
	}


def process_ebupot_text(text: str, settings: Mapping[str, Any] | None = None) -> dict[str, Any]:
	"""
	Extract certificate fields from an already linearized text layer.

	Returns the response body ``{"format", "data", "complete", "errors"}``.
	"""
	settings = get_settings(settings)
	collector = ParsingErrorCollector()
	result = parse_ebupot_text(
		text or "",
		collector=collector,
		strict=bool(settings.get("strict_field_checks")),
	)

	filled = result.record.filled_fields()
	if result.is_complete:
		logger.info(f"[EBUPOT] Format {result.format.value}: extracted {', '.join(filled) or 'nothing'}")
	elif result.format.is_supported:
		logger.warning(
			f"[EBUPOT] Format {result.format.value}: stopped at {result.halted_state}, "
			f"extracted {', '.join(filled) or 'nothing'}"
		)
	else:
		logger.warning(f"[EBUPOT] Format {result.format.value}: no fields extracted")

	return result.to_response()


def process_ebupot_pdf(
	pdf_bytes: bytes, source_name: str = "bytes", settings: Mapping[str, Any] | None = None
) -> dict[str, Any]:
	settings = get_settings(settings)
	text = extract_text_from_bytes(pdf_bytes, source_name=source_name, **_pdf_options(settings))
	return process_ebupot_text(text, settings)


def process_ebupot_file(path: str | Path, settings: Mapping[str, Any] | None = None) -> dict[str, Any]:
	settings = get_settings(settings)
	text = extract_text_from_path(path, **_pdf_options(settings))
	return process_ebupot_text(text, settings)
