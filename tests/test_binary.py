import pytest

from wasmkit.binary import (
    BinarySection,
    get_section_name,
    get_section_order,
)

_LAYOUT = [
    BinarySection.CUSTOM,
    BinarySection.TYPE,
    BinarySection.IMPORT,
    BinarySection.FUNCTION,
    BinarySection.TABLE,
    BinarySection.MEMORY,
    BinarySection.TAG,
    BinarySection.GLOBAL,
    BinarySection.EXPORT,
    BinarySection.START,
    BinarySection.ELEM,
    BinarySection.DATA_COUNT,
    BinarySection.CODE,
    BinarySection.DATA,
]


def test_section_ids_resolve_to_names():
    assert get_section_name(13) == "tag"
    assert get_section_name(12) == "data_count"


def test_section_order_matches_layout():
    orders = [get_section_order(section) for section in _LAYOUT]
    assert orders == list(range(len(_LAYOUT)))


def test_section_order_is_unique():
    sections = [s for s in BinarySection if s is not BinarySection.INVALID]
    orders = [get_section_order(s) for s in sections]
    assert sorted(orders) == list(range(len(sections)))


def test_tag_comes_before_global_despite_id():
    assert get_section_order(BinarySection.TAG) < get_section_order(
        BinarySection.GLOBAL
    )
    assert get_section_order(BinarySection.DATA_COUNT) < get_section_order(
        BinarySection.CODE
    )


@pytest.mark.parametrize(
    "section,name",
    [
        (BinarySection.CUSTOM, "custom"),
        (BinarySection.DATA_COUNT, "data_count"),
        (BinarySection.EXPORT, "export"),
        (BinarySection.CODE, "code"),
    ],
)
def test_section_names(section, name):
    assert get_section_name(section) == name


def test_section_name_from_int():
    assert get_section_name(2) == "import"


def test_invalid_section_raises():
    with pytest.raises(ValueError):
        get_section_name(BinarySection.INVALID)
    with pytest.raises(ValueError):
        get_section_order(99)