import pytest

from pocketgb.controls import Controls, InputType, Key, KeyboardMap


def test_default_bindings():
    keyboard_map = Controls().keyboard_map
    assert keyboard_map.get_key_code_by_key(Key.UP) == ["W"]
    assert keyboard_map.get_key_code_by_key(Key.B) == ["LShift"]
    assert keyboard_map.get_key_code_by_key(Key.START) == ["Return"]


def test_default_selected_type_is_keyboard():
    assert Controls().selected_type is InputType.KEYBOARD


def test_add_key_code_new_code():
    keyboard_map = KeyboardMap()
    keyboard_map.add_key_code_by_key(Key.A, "Z")
    assert keyboard_map.map == {"Z": [Key.A]}


def test_add_key_code_twice_does_not_duplicate():
    keyboard_map = KeyboardMap()
    keyboard_map.add_key_code_by_key(Key.A, "Z")
    keyboard_map.add_key_code_by_key(Key.A, "Z")
    assert keyboard_map.map == {"Z": [Key.A]}


def test_one_code_may_press_several_keys():
    keyboard_map = KeyboardMap()
    keyboard_map.add_key_code_by_key(Key.A, "Z")
    keyboard_map.add_key_code_by_key(Key.B, "Z")
    assert keyboard_map.map["Z"] == [Key.A, Key.B]
    assert keyboard_map.get_key_code_by_key(Key.B) == ["Z"]


def test_clear_mapping_removes_all_bindings_of_key():
    keyboard_map = KeyboardMap()
    keyboard_map.add_key_code_by_key(Key.A, "Z")
    keyboard_map.add_key_code_by_key(Key.A, "X")
    keyboard_map.add_key_code_by_key(Key.B, "X")
    keyboard_map.clear_mapping_by_key(Key.A)
    assert keyboard_map.get_key_code_by_key(Key.A) == []
    assert keyboard_map.get_key_code_by_key(Key.B) == ["X"]


def test_default_to_dict_uses_button_names():
    data = Controls().keyboard_map.to_dict()
    assert data["Up"] == ["W"]
    assert data["A"] == ["Space"]
    assert data["Select"] == ["K"]
    assert len(data) == len(Key)


def test_to_dict_groups_codes_by_key():
    keyboard_map = KeyboardMap()
    keyboard_map.add_key_code_by_key(Key.A, "Z")
    keyboard_map.add_key_code_by_key(Key.A, "X")
    assert keyboard_map.to_dict() == {"A": ["Z", "X"]}


def test_keyboard_map_round_trip():
    keyboard_map = KeyboardMap()
    keyboard_map.add_key_code_by_key(Key.A, "Z")
    keyboard_map.add_key_code_by_key(Key.B, "Z")
    keyboard_map.add_key_code_by_key(Key.LEFT, "Left")
    restored = KeyboardMap.from_dict(keyboard_map.to_dict())
    assert {k: set(v) for k, v in restored.map.items()} == {
        k: set(v) for k, v in keyboard_map.map.items()
    }


def test_from_dict_unknown_key_raises():
    with pytest.raises(ValueError):
        KeyboardMap.from_dict({"Turbo": ["T"]})


def test_from_dict_bad_codes_raise():
    with pytest.raises(ValueError):
        KeyboardMap.from_dict({"A": "Z"})


def test_controls_round_trip():
    controls = Controls(InputType.GAMEPAD, KeyboardMap({"Q": [Key.SELECT]}))
    restored = Controls.from_dict(controls.to_dict())
    assert restored == controls


def test_controls_to_dict_selected_type():
    assert Controls().to_dict()["selected_type"] == "Keyboard"


def test_controls_from_dict_missing_field():
    with pytest.raises(ValueError):
        Controls.from_dict({"selected_type": "Keyboard"})


def test_controls_from_dict_unknown_type():
    with pytest.raises(ValueError):
        Controls.from_dict({"selected_type": "Mouse", "keyboard_map": {}})