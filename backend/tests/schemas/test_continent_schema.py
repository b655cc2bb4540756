"""Continent Schemas — verifies compact, ordered JSON serialization."""

from continent_api.core.continent_table import ContinentRecord
from continent_api.schemas.continent import ContinentIndex, ContinentOut


def test_serializes_fields_in_wire_order_without_whitespace():
    out = ContinentOut.from_record(ContinentRecord("australia/oceania", 8510900, 44000000))
    assert out.model_dump_json() == (
        '{"name":"australia/oceania","area":8510900,"population":44000000}'
    )


def test_zero_population_serializes_as_zero():
    out = ContinentOut.from_record(ContinentRecord("antarctica", 14200000, 0))
    assert out.model_dump_json().endswith('"population":0}')


def test_name_with_space_is_not_escaped():
    out = ContinentOut.from_record(ContinentRecord("north america", 24230000, 600000000))
    assert '"name":"north america"' in out.model_dump_json()


def test_index_lists_keys():
    assert ContinentIndex(continents=["asia"]).model_dump() == {"continents": ["asia"]}
