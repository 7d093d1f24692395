import pytest

from x68game.mml import engine_mml


@pytest.mark.parametrize(
    "num, expected",
    [
        (1, "@137v15o5(g>g2)"),
        (2, "@137v15o4(g2<g)"),
        (4, "@137v15(o3d*96,e),48"),
        (5, "@137v15o4(g2<g)"),
    ],
)
def test_fixed_variants(num, expected):
    assert engine_mml(num, 0) == expected
    assert engine_mml(num, 1234) == expected


def test_variant_zero_divides_key_by_eight():
    assert engine_mml(0, 80) == engine_mml(0, 87)
    assert engine_mml(0, 80) != engine_mml(0, 88)
    assert engine_mml(0, 0) == "@137v15o2l4q1@k0 d+&"


def test_variant_zero_format():
    text = engine_mml(0, 80)
    assert text.startswith("@137v15o2l4q1@k")
    assert text.endswith(" d+&")


def test_variant_three_wraps_key_by_80():
    assert engine_mml(3, 5) == engine_mml(3, 85)
    assert engine_mml(3, 0) == "@137v15o1k 0 d+1"


def test_variant_three_negative_key_keeps_sign():
    assert engine_mml(3, -5) == "@137v15o1k -5 d+1"
    assert engine_mml(3, -85) == engine_mml(3, -5)


def test_default_variant_uses_key_directly():
    assert engine_mml(9, 42) == "@29v15o5l4q1@k42 C+&"
    assert engine_mml(-1, 42) == engine_mml(9, 42)


def test_key_wraps_to_sixteen_bits():
    assert engine_mml(9, 0x10000 + 42) == engine_mml(9, 42)
    assert engine_mml(9, 0xFFFF) == engine_mml(9, -1)