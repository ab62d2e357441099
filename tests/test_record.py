import pytest

from zeroize.memory import ZEROIZE_ALIGNMENT, is_zeroized, zeroize
from zeroize.record import Object


def test_defaults():
    obj = Object()
    assert obj.id == 1234534
    assert obj.data == 123098


def test_length_matches_buffer_and_is_aligned():
    obj = Object()
    assert len(obj) == len(obj.buffer)
    assert len(obj) % ZEROIZE_ALIGNMENT == 0


def test_set_values_round_trip():
    obj = Object()
    obj.id = 99887733
    obj.data = 11223344
    assert (obj.id, obj.data) == (99887733, 11223344)


def test_setting_id_keeps_data():
    obj = Object()
    obj.id = 99887733
    assert obj.data == 123098


def test_zeroize_overwrites_fields():
    obj = Object()
    zeroize(obj.buffer)
    assert is_zeroized(obj.buffer)
    assert obj.id == obj.data
    assert obj.id != 1234534


def test_reset_after_zeroize_restores_defaults():
    obj = Object()
    zeroize(obj.buffer)
    obj.reset()
    assert obj.id == 1234534
    assert obj.data == 123098
    assert not is_zeroized(obj.buffer)


def test_negative_values_round_trip():
    obj = Object()
    obj.data = -11223344
    assert obj.data == -11223344