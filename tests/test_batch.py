import numpy as np
import pytest

from luv_approx import abs_diff_eq
from luv_batch import (
    lchs_to_rgbs,
    luvs_to_rgb_bytes,
    luvs_to_rgbs,
    rgb_bytes_to_luvs,
    rgbs_to_lchs,
    rgbs_to_luvs,
)
from luv_types import LCh, Luv


@pytest.fixture
def random_rgbs():
    rng = np.random.default_rng(2048)
    return [tuple(row) for row in rng.integers(0, 256, size=(2048, 3)).tolist()]


class TestRgbsToLuvs:
    def test_reference_values(self, cases):
        luvs = rgbs_to_luvs(cases.rgb)
        assert len(luvs) == len(cases.rgb)
        assert abs_diff_eq(luvs, cases.luv, epsilon=1e-4)

    def test_three_colours(self):
        luvs = rgbs_to_luvs([(255, 0, 0), (255, 0, 255), (0, 255, 255)])
        expected = [
            Luv(53.238235, 175.01141, 37.758636),
            Luv(60.32269, 84.06383, -108.690346),
            Luv(91.11428, -70.46933, -15.2037325),
        ]
        assert abs_diff_eq(luvs, expected, epsilon=1e-4)

    def test_matches_single_conversions(self, random_rgbs):
        luvs = rgbs_to_luvs(random_rgbs)
        assert luvs == [Luv.from_rgb(rgb) for rgb in random_rgbs]

    def test_accepts_arrays(self, cases):
        arr = np.array(cases.rgb, dtype=np.uint8)
        assert rgbs_to_luvs(arr) == rgbs_to_luvs(cases.rgb)

    def test_empty(self):
        assert rgbs_to_luvs([]) == []

    def test_bad_shape(self):
        with pytest.raises(ValueError, match="RGB triples"):
            rgbs_to_luvs([(1, 2, 3, 4)])


class TestRgbBytesToLuvs:
    def test_reference_values(self, cases):
        assert rgb_bytes_to_luvs(cases.rgb_bytes()) == rgbs_to_luvs(cases.rgb)

    @pytest.mark.parametrize("wrap", [bytes, bytearray, memoryview, list])
    def test_buffer_types(self, cases, wrap):
        data = wrap(cases.rgb_bytes())
        assert rgb_bytes_to_luvs(data) == rgbs_to_luvs(cases.rgb)

    def test_array_input(self, cases):
        flat = np.frombuffer(cases.rgb_bytes(), dtype=np.uint8)
        assert rgb_bytes_to_luvs(flat) == rgbs_to_luvs(cases.rgb)

    def test_docstring_example(self):
        luvs = rgb_bytes_to_luvs(bytes([0xFF, 0x69, 0xB6, 0xE7, 0x00, 0x00]))
        assert luvs == rgbs_to_luvs([(0xFF, 0x69, 0xB6), (0xE7, 0x00, 0x00)])

    def test_empty(self):
        assert rgb_bytes_to_luvs(b"") == []

    @pytest.mark.parametrize("length", [1, 2, 4, 50])
    def test_length_not_multiple_of_three(self, length):
        with pytest.raises(ValueError, match="multiple of 3"):
            rgb_bytes_to_luvs(bytes(length))


class TestLuvsToRgbs:
    def test_reference_values(self, cases):
        assert luvs_to_rgbs(cases.luv) == cases.rgb

    def test_random_round_trip(self, random_rgbs):
        assert luvs_to_rgbs(rgbs_to_luvs(random_rgbs)) == random_rgbs

    def test_bytes(self, cases):
        data = luvs_to_rgb_bytes(cases.luv)
        assert isinstance(data, bytes)
        assert data == cases.rgb_bytes()

    def test_bytes_round_trip(self, random_rgbs):
        data = bytes(c for rgb in random_rgbs for c in rgb)
        assert luvs_to_rgb_bytes(rgb_bytes_to_luvs(data)) == data

    def test_empty(self):
        assert luvs_to_rgbs([]) == []
        assert luvs_to_rgb_bytes([]) == b""

    def test_order_preserved(self):
        luvs = [Luv(100.0, 0.0, 0.0), Luv(), Luv(53.238235, 175.01141, 37.758636)]
        assert luvs_to_rgbs(luvs) == [(255, 255, 255), (0, 0, 0), (255, 0, 0)]


class TestLChBatches:
    def test_reference_values(self, cases):
        assert abs_diff_eq(rgbs_to_lchs(cases.rgb), cases.lch, epsilon=1e-4)
        assert lchs_to_rgbs(cases.lch) == cases.rgb

    def test_matches_single_conversions(self, cases):
        assert rgbs_to_lchs(cases.rgb) == [LCh.from_rgb(rgb) for rgb in cases.rgb]
        assert lchs_to_rgbs(cases.lch) == [lch.to_rgb() for lch in cases.lch]

    def test_random_round_trip(self, random_rgbs):
        assert lchs_to_rgbs(rgbs_to_lchs(random_rgbs)) == random_rgbs

    def test_empty(self):
        assert rgbs_to_lchs([]) == []
        assert lchs_to_rgbs([]) == []


class TestValueTypes:
    def test_lch_values_rejected_by_luv_helpers(self, cases):
        with pytest.raises(TypeError, match="Expected Luv values, got LCh"):
            luvs_to_rgbs(cases.lch)
        with pytest.raises(TypeError, match="Expected Luv values, got LCh"):
            luvs_to_rgb_bytes(cases.lch)

    def test_luv_values_rejected_by_lch_helper(self, cases):
        with pytest.raises(TypeError, match="Expected LCh values, got Luv"):
            lchs_to_rgbs(cases.luv)

    def test_mixed_sequence_rejected(self):
        with pytest.raises(TypeError):
            luvs_to_rgbs([Luv(50.0, 0.0, 0.0), LCh(50.0, 0.0, 0.0)])
