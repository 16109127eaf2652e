# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from srcpoet.core.type_name import TypeName
from srcpoet.emit.imports import (
	FrozenRecordError,
	ImportRecord,
	StaticImportRecord,
	import_block,
	plain_import_lines,
)

SODA_FLOAT = TypeName.get("com.squareup.soda", "Float")
LANG_FLOAT = TypeName.get("java.lang", "Float")
TIME_UNIT = TypeName.get("java.util.concurrent", "TimeUnit")


def test_first_claim_wins() -> None:
	record = ImportRecord()
	assert record.claim(SODA_FLOAT) == SODA_FLOAT
	assert record.claim(LANG_FLOAT) == SODA_FLOAT
	assert record.bound("Float") == SODA_FLOAT
	assert len(record) == 1


def test_frozen_record_rejects_new_claims_but_answers_old_ones() -> None:
	record = ImportRecord()
	record.claim(SODA_FLOAT)
	record.freeze()
	assert record.claim(SODA_FLOAT) == SODA_FLOAT
	assert record.claim(LANG_FLOAT) == SODA_FLOAT
	with pytest.raises(FrozenRecordError):
		record.claim(TIME_UNIT)


def test_plain_lines_are_sorted_and_filtered() -> None:
	record = ImportRecord()
	for type_name in (
		TypeName.get("java.util", "List"),
		TypeName.get("com.squareup.tacos", "Salsa"),
		TypeName("", ("Test",)),
		LANG_FLOAT,
		TypeName.get("com.mattel", "Hoverboard"),
	):
		record.claim(type_name)
	assert plain_import_lines(record, "com.squareup.tacos") == [
		"com.mattel.Hoverboard",
		"java.lang.Float",
		"java.util.List",
	]
	assert plain_import_lines(record, "com.squareup.tacos", skip_namespace="java.lang") == [
		"com.mattel.Hoverboard",
		"java.util.List",
	]


def test_skipping_cannot_free_a_claimed_name() -> None:
	record = ImportRecord()
	record.claim(LANG_FLOAT)
	record.claim(SODA_FLOAT)
	assert plain_import_lines(record, "com.squareup.tacos", skip_namespace="java.lang") == []
	assert record.bound("Float") == LANG_FLOAT


def test_static_lines_sorted_with_wildcard_suppression() -> None:
	record = StaticImportRecord([(TIME_UNIT, "SECONDS"), (TIME_UNIT, "MINUTES"), (TIME_UNIT, "SECONDS")])
	assert record.lines() == [
		"java.util.concurrent.TimeUnit.MINUTES",
		"java.util.concurrent.TimeUnit.SECONDS",
	]
	record.add(TIME_UNIT, "*")
	assert record.lines() == ["java.util.concurrent.TimeUnit.*"]
	assert record.covers(TIME_UNIT, "HOURS")
	assert len(record) == 3


def test_static_record_normalizes_type_arguments() -> None:
	comparator = TypeName.get("java.util", "Comparator")
	record = StaticImportRecord([(comparator.parameterized(TIME_UNIT), "naturalOrder")])
	assert record.covers(comparator, "naturalOrder")
	assert not record.covers(comparator, "reverseOrder")


def test_static_record_validation_and_freeze() -> None:
	record = StaticImportRecord()
	with pytest.raises(ValueError):
		record.add(TIME_UNIT, "SECONDS.x")
	record.freeze()
	with pytest.raises(FrozenRecordError):
		record.add(TIME_UNIT, "SECONDS")


def test_import_block_layout() -> None:
	assert import_block([], []) == ""
	assert import_block([], ["java.util.List"]) == "import java.util.List\n\n"
	assert import_block(["java.lang.System.*"], ["java.util.List"]) == (
		"import static java.lang.System.*\n\nimport java.util.List\n\n"
	)
	assert import_block(["java.lang.System.*"], []) == "import static java.lang.System.*\n\n"
