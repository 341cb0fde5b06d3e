from d2modgen.attribute_kinds import AttributeFlag, AttributeItemReq
from d2modgen.attribute_table import base_attributes


def _by_code():
    return {desc.code: desc for desc in base_attributes()}


def test_codes_are_unique():
    codes = [desc.code for desc in base_attributes()]
    assert len(codes) == len(set(codes))


def test_first_entry_is_defense():
    first = base_attributes()[0]
    assert first.code == "ac"
    assert first.flags == {AttributeFlag.DEFENSE}


def test_last_entries_keep_table_order():
    codes = [desc.code for desc in base_attributes()]
    assert codes[-2:] == ["Light", "Thorns"]


def test_item_requirements():
    table = _by_code()
    assert table["block"].items == {AttributeItemReq.SHIELD}
    assert table["knock"].items == {AttributeItemReq.WEAPON}
    assert table["ease"].items == {AttributeItemReq.WEAPON, AttributeItemReq.ARMOR}


def test_multi_flag_entries():
    table = _by_code()
    assert table["pierce"].flags == {AttributeFlag.MISSILE, AttributeFlag.QUANTITY}
    assert table["rep-dur"].flags == {AttributeFlag.DURABILITY, AttributeFlag.NO_MIN_MAX}
    assert table["skill-rand"].flags == {AttributeFlag.SKILLS, AttributeFlag.NO_MIN_MAX}


def test_per_level_codes_end_with_lvl():
    for desc in base_attributes():
        if desc.has_flag(AttributeFlag.PER_LEVEL):
            assert desc.code.endswith("/lvl")


def test_map_codes_start_with_map_prefix():
    for desc in base_attributes():
        assert desc.has_flag(AttributeFlag.PD2_MAP) == desc.code.startswith("map-")


def test_case_matters_for_codes():
    table = _by_code()
    assert "light" in table and "Light" in table
    assert table["light"] is not table["Light"]
    assert table["Thorns"].flags == frozenset()


def test_single_flag_entries_pinned():
    table = _by_code()
    assert table["crush"].flags == {AttributeFlag.OP}
    assert table["sock"].flags == {AttributeFlag.SOCKETS}
    assert table["lifesteal"].flags == {AttributeFlag.LEECH}
    assert table["dmg-to-mana"].flags == frozenset()
    assert table["cast"].flags == {AttributeFlag.SPEED}