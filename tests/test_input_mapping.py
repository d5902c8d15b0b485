import pytest

from delve.input import InputAction, InputMapper


def test_default_mapping_arrows_wasd_and_vi_keys():
    mapper = InputMapper.default()

    assert mapper.translate_key("UP") == InputAction.MOVE_UP
    assert mapper.translate_key("W") == InputAction.MOVE_UP
    assert mapper.translate_key("k") == InputAction.MOVE_UP
    # Case-insensitive
    assert mapper.translate_key("w") == InputAction.MOVE_UP

    assert mapper.translate_key("DOWN") == InputAction.MOVE_DOWN
    assert mapper.translate_key("S") == InputAction.MOVE_DOWN
    assert mapper.translate_key("j") == InputAction.MOVE_DOWN

    assert mapper.translate_key("LEFT") == InputAction.MOVE_LEFT
    assert mapper.translate_key("A") == InputAction.MOVE_LEFT
    assert mapper.translate_key("h") == InputAction.MOVE_LEFT

    assert mapper.translate_key("RIGHT") == InputAction.MOVE_RIGHT
    assert mapper.translate_key("D") == InputAction.MOVE_RIGHT
    assert mapper.translate_key("l") == InputAction.MOVE_RIGHT


def test_exit_keys():
    mapper = InputMapper.default()
    assert mapper.translate_key("ESCAPE") == InputAction.EXIT
    assert mapper.translate_key("eSc") == InputAction.EXIT
    assert mapper.translate_key("q") == InputAction.EXIT


def test_unbound_and_invalid_keys():
    mapper = InputMapper.default()
    assert mapper.translate_key("F13") is None
    assert mapper.translate_key("") is None
    assert mapper.translate_key(None) is None


def test_rebinding_and_unbinding():
    mapper = InputMapper.default()
    mapper.bind("A", InputAction.EXIT)
    assert mapper.translate_key("A") == InputAction.EXIT

    mapper.unbind("W")
    assert mapper.translate_key("W") is None
    assert mapper.translate_key("UP") == InputAction.MOVE_UP


def test_backend_key_codes_resolve_through_aliases():
    mapper = InputMapper.default()
    assert mapper.translate_key(65362) is None
    mapper.set_alias(65362, "up")
    assert mapper.translate_key(65362) == InputAction.MOVE_UP


def test_parse_script():
    mapper = InputMapper.default()
    assert mapper.parse_script("wwaasd") == [
        InputAction.MOVE_UP,
        InputAction.MOVE_UP,
        InputAction.MOVE_LEFT,
        InputAction.MOVE_LEFT,
        InputAction.MOVE_DOWN,
        InputAction.MOVE_RIGHT,
    ]
    assert mapper.parse_script("k, l\nq") == [InputAction.MOVE_UP, InputAction.MOVE_RIGHT, InputAction.EXIT]
    assert mapper.parse_script("") == []

    with pytest.raises(ValueError):
        mapper.parse_script("wz")
