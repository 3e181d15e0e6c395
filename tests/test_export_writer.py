import json

from conftest import make_record
from domain.seed import initial_materials
from fields.consumption_math import derive_all
from writers.export_writer import csv_artifact, json_artifact, to_csv, to_json

CSV_HEADER = '"Material";"Description";"UoM";"Planned";"Assigned";"Issued";"Total";"Retour";"Consomme";"Delta (%)"'

JSON_KEYS = ["id", "description", "unitOfMeasure", "planned", "assigned", "issued", "total", "retour", "consomme"]


def _rows(materials):
    rows, _ = derive_all(materials)
    return rows


def test_csv_header_only_for_empty_rows():
    assert to_csv([]) == CSV_HEADER


def test_csv_rows(records):
    text = to_csv(_rows(records))

    assert text.split("\n") == [
        CSV_HEADER,
        '"A";"Material A";"EA";"120";"100";"10";"90";"40";"60";"-40.00"',
        '"B";"Material B";"EA";"0";"0";"0";"0";"5";"0";"0.00"',
    ]
    assert not text.endswith("\n")


def test_csv_escapes_quotes_and_keeps_semicolons_inside_fields():
    rows = _rows([make_record("Q", description='CARTON 12" SEC; LOT 2', assigned=10, retour=1)])
    line = to_csv(rows).split("\n")[1]

    assert line == '"Q";"CARTON 12"" SEC; LOT 2";"EA";"0";"10";"0";"0";"1";"9";"-10.00"'


def test_csv_keeps_fractional_quantities_raw():
    rows = _rows([make_record("F", assigned=1500.5, retour=0.25)])
    line = to_csv(rows).split("\n")[1]

    assert '"1500.5"' in line
    assert '"1500.25"' in line
    assert "\u202f" not in line


def test_csv_header_does_not_depend_on_content():
    text = to_csv(_rows(initial_materials()))

    assert text.split("\n")[0] == CSV_HEADER
    assert len(text.split("\n")) == 4


def test_json_empty_rows():
    assert to_json([]) == "[]"


def test_json_exact_document(record_a):
    assert to_json(_rows([record_a])) == (
        "[\n"
        "  {\n"
        '    "id": "A",\n'
        '    "description": "Material A",\n'
        '    "unitOfMeasure": "EA",\n'
        '    "planned": 120,\n'
        '    "assigned": 100,\n'
        '    "issued": 10,\n'
        '    "total": 90,\n'
        '    "retour": 40,\n'
        '    "consomme": 60\n'
        "  }\n"
        "]"
    )


def test_json_key_order_and_no_delta(records):
    payload = json.loads(to_json(_rows(records)))

    for item in payload:
        assert list(item) == JSON_KEYS
        assert "delta_percent" not in item


def test_json_round_trip_values():
    rows = _rows(initial_materials() + [make_record("F", description="ÉTIQUETTES", assigned=7.5, retour=2.25)])
    payload = json.loads(to_json(rows))

    assert len(payload) == len(rows)
    for item, row in zip(payload, rows):
        assert item["id"] == row["id"]
        assert item["description"] == row["description"]
        assert item["unitOfMeasure"] == row["unit_of_measure"]
        for key in ("planned", "assigned", "issued", "total", "retour", "consomme"):
            assert item[key] == row[key]


def test_json_keeps_non_ascii_text():
    text = to_json(_rows([make_record("E", description="BOUTEILLES VERRE ÉTÉ")]))

    assert "BOUTEILLES VERRE ÉTÉ" in text


def test_exports_are_deterministic(records):
    first = _rows(records)
    second = _rows([dict(r) for r in records])

    assert to_json(first) == to_json(second)
    assert to_csv(first) == to_csv(second)


def test_int_and_float_inputs_export_identically():
    as_ints = _rows([make_record("A", planned=120, assigned=100, retour=40)])
    as_floats = _rows([make_record("A", planned=120.0, assigned=100.0, retour=40.0)])

    assert to_json(as_ints) == to_json(as_floats)
    assert to_csv(as_ints) == to_csv(as_floats)


def test_artifacts(records):
    rows = _rows(records)

    json_export = json_artifact(rows)
    assert json_export.filename == "conso-retour.json"
    assert json_export.mime_type == "application/json"
    assert json_export.content == to_json(rows)
    assert json_export.data == to_json(rows).encode("utf-8")

    csv_export = csv_artifact(rows)
    assert csv_export.filename == "conso-retour.csv"
    assert csv_export.mime_type == "text/csv;charset=utf-8;"
    assert csv_export.content == to_csv(rows)


def test_artifacts_accept_generators(records):
    rows = _rows(records)

    assert json_artifact(r for r in rows).content == to_json(rows)
    assert csv_artifact(r for r in rows).content == to_csv(rows)


def test_csv_small_quantities_are_written_without_exponent():
    rows = _rows([make_record("S", assigned=1, retour=0.00001)])
    line = to_csv(rows).split("\n")[1]

    assert '"0.00001"' in line
    assert "e-" not in line
