import json

import pytest

from domain.seed import initial_materials
from fields.consumption_math import derive_all
from input_readers import ExportFormatError, read_export_json, read_export_json_file
from writers.export_writer import to_json


def test_reload_of_an_export_gives_back_the_materials():
    materials = initial_materials()
    rows, _ = derive_all(materials)

    reloaded = read_export_json(to_json(rows))

    assert reloaded == materials
    assert all("consomme" not in r for r in reloaded)


def test_reload_then_derive_gives_same_export():
    rows, _ = derive_all(initial_materials())
    text = to_json(rows)

    reloaded_rows, _ = derive_all(read_export_json(text))

    assert to_json(reloaded_rows) == text


def test_quantities_are_coerced():
    text = json.dumps([{"id": "A", "assigned": "12,5", "retour": -4, "planned": "junk"}])

    (record,) = read_export_json(text)

    assert record["assigned"] == 12.5
    assert record["retour"] == 0
    assert record["planned"] == 0
    assert record["description"] == ""
    assert record["unit_of_measure"] == ""


def test_ids_are_kept_as_strings():
    (record,) = read_export_json('[{"id": 123451}]')

    assert record["id"] == "123451"


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"id": "A"}',
        "[1, 2]",
        '[{"description": "no id"}]',
        '[{"id": "  "}]',
        '[{"id": "A"}, {"id": "A"}]',
    ],
)
def test_malformed_documents_raise(text):
    with pytest.raises(ExportFormatError):
        read_export_json(text)


def test_export_format_error_is_a_value_error():
    assert issubclass(ExportFormatError, ValueError)


def test_empty_export_reloads_to_empty_list():
    assert read_export_json("[]") == []


def test_read_from_file(tmp_path):
    rows, _ = derive_all(initial_materials())
    path = tmp_path / "conso-retour.json"
    path.write_text(to_json(rows), encoding="utf-8")

    assert read_export_json_file(path) == initial_materials()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_export_json_file(tmp_path / "missing.json")


def test_huge_integer_quantity_reloads_as_zero():
    (record,) = read_export_json('[{"id": "A", "assigned": 10, "retour": ' + "9" * 400 + "}]")

    assert record["retour"] == 0
    assert record["assigned"] == 10
