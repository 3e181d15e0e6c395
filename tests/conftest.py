import pytest

from domain.material import MaterialRecord


def make_record(material_id: str = "A", **overrides) -> MaterialRecord:
    record = MaterialRecord(
        id=material_id,
        description=f"Material {material_id}",
        unit_of_measure="EA",
        planned=0,
        assigned=0,
        issued=0,
        total=0,
        retour=0,
    )
    record.update(overrides)
    return record


@pytest.fixture
def record_a() -> MaterialRecord:
    return make_record("A", planned=120, assigned=100, issued=10, total=90, retour=40)


@pytest.fixture
def record_b() -> MaterialRecord:
    return make_record("B", planned=0, assigned=0, issued=0, total=0, retour=5)


@pytest.fixture
def records(record_a, record_b):
    return [record_a, record_b]
