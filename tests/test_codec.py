"""Tests for encode, decode, shorten and recover_nearest."""

import math

import pytest
from pluscode import codec
from pluscode.area import CodeArea
from pluscode.codec import (
    clip_latitude,
    compute_latitude_precision,
    decode,
    encode,
    normalize_longitude,
    recover_nearest,
    shorten,
)
from pluscode.errors import (
    CodeTooShort,
    InvalidCode,
    InvalidLength,
    InvalidShortCode,
    OpenLocationCodeError,
    PaddedCode,
)
from pluscode.validate import is_full, is_short


POINTS = [
    (0.0, 0.0),
    (1.0, -1.0),
    (47.365590, 8.524997),
    (41.380872, 2.123002),
    (-37.848760, 143.033642),
    (20.3701135, 2.78223535156),
    (-41.2730625, 174.7859375),
    (-89.5, -179.5),
    (89.5, 179.5),
]

LENGTHS = [2, 4, 6, 8, 10, 11, 12, 13, 14, 15]

TOLERANCE = 1e-3


class TestNormalization:
    """Tests for input clipping and wrapping."""

    def test_clip_latitude(self):
        """Test latitude is clipped into [-90, 90]."""
        assert clip_latitude(45.0) == 45.0
        assert clip_latitude(100.0) == 90.0
        assert clip_latitude(-100.0) == -90.0

    def test_normalize_longitude(self):
        """Test longitude is wrapped into [-180, 180)."""
        assert normalize_longitude(10.0) == 10.0
        assert normalize_longitude(180.0) == -180.0
        assert normalize_longitude(-180.0) == -180.0
        assert normalize_longitude(190.0) == -170.0
        assert normalize_longitude(-190.0) == 170.0
        assert normalize_longitude(720.0) == 0.0

    def test_latitude_precision(self):
        """Test cell height per code length."""
        assert compute_latitude_precision(2) == 20
        assert compute_latitude_precision(4) == 1
        assert compute_latitude_precision(8) == pytest.approx(0.0025)
        assert compute_latitude_precision(10) == pytest.approx(0.000125)
        assert compute_latitude_precision(11) == pytest.approx(0.0005)
        assert compute_latitude_precision(12) == pytest.approx(0.0001)


class TestEncode:
    """Tests for encode."""

    def test_known_codes(self):
        """Test well-known locations."""
        assert encode(41.380872, 2.123002) == "8FH494JF+86"
        assert encode(47.365590, 8.524997) == "8FVC9G8F+6X"

    def test_longitude_wraps(self):
        """Test longitudes outside [-180, 180) are wrapped."""
        assert encode(-37.848760, -216.966358) == "4RJ5522M+FF"
        assert encode(-37.848760, 143.033642) == "4RJ5522M+FF"

    def test_north_pole(self):
        """Test the pole is encoded as the cell just below it."""
        assert encode(90, 0, 8) == "CFX2X2X2+"
        assert encode(100, 0, 8) == "CFX2X2X2+"

    def test_north_pole_grid(self):
        """Test the pole with grid refinement stays decodable."""
        code = encode(90, 0, 11)
        assert code == "CFX2X2X2+R25"
        area = decode(code)
        assert area.code_length == 11
        assert area.latitude_lo < 90
        assert area.latitude_hi <= 90 + 1e-9

    def test_just_below_pole(self):
        """Test latitudes that round onto the pole when shifted."""
        latitude = math.nextafter(90, 0)
        code = encode(latitude, 0)
        assert code == encode(90, 0)
        assert is_full(code)
        assert decode(code).latitude_hi <= 90

        code = encode(89.99999999999, 0)
        assert is_full(code)
        assert code.startswith("CF")

    def test_just_below_antimeridian(self):
        """Test longitudes that round onto 180 when shifted wrap to -180."""
        code = encode(0, math.nextafter(180, 0))
        assert code == encode(0, -180)
        assert is_full(code)
        decode(code)

    def test_padding(self):
        """Test short lengths are padded."""
        assert encode(47.0, 8.0, 4) == "8FVC0000+"
        assert encode(47.0, 8.0, 2) == "8F000000+"
        assert encode(47.365590, 8.524997, 6) == "8FVC9G00+"

    def test_grid_characters(self):
        """Test lengths above 10 append grid characters."""
        code = encode(47.365590, 8.524997, 13)
        assert code.startswith("8FVC9G8F+6X")
        assert len(code) == 14

    def test_odd_length_above_eight(self):
        """Test odd lengths below 10 produce the enclosing pair code."""
        assert encode(47.365590, 8.524997, 9) == "8FVC9G8F+6X"

    def test_uppercase(self):
        """Test output is uppercase."""
        code = encode(-41.2730625, 174.7859375, 15)
        assert code == code.upper()

    @pytest.mark.parametrize("length", [-1, 0, 1, 3, 5, 7])
    def test_invalid_length(self, length):
        """Test illegal lengths are rejected."""
        with pytest.raises(InvalidLength):
            encode(47.0, 8.0, length)

    def test_invalid_length_is_value_error(self):
        """Test codec errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            encode(47.0, 8.0, 1)


class TestDecode:
    """Tests for decode."""

    def test_pair_code(self):
        """Test decoding a ten character code."""
        area = decode("8FVC9G8F+6X")
        assert area.latitude_lo == pytest.approx(47.3655, abs=1e-9)
        assert area.latitude_hi == pytest.approx(47.365625, abs=1e-9)
        assert area.longitude_lo == pytest.approx(8.524875, abs=1e-9)
        assert area.longitude_hi == pytest.approx(8.525, abs=1e-9)
        assert area.latitude_center == pytest.approx(47.3655625, abs=1e-9)
        assert area.longitude_center == pytest.approx(8.5249375, abs=1e-9)
        assert area.code_length == 10

    def test_padded_code(self):
        """Test decoding a padded code ignores the padding."""
        area = decode("8FVC0000+")
        assert area == CodeArea(47.0, 8.0, 48.0, 9.0, 4)

    def test_lowercase(self):
        """Test decoding is case-insensitive."""
        assert decode("8fvc9g8f+6x") == decode("8FVC9G8F+6X")

    def test_grid_code(self):
        """Test grid characters refine the pair cell."""
        base = decode("8FVC9G8F+6X")
        area = decode(encode(47.365590, 8.524997, 11))
        assert area.code_length == 11
        assert base.latitude_lo <= area.latitude_lo < area.latitude_hi
        assert area.latitude_hi <= base.latitude_hi + 1e-9
        assert base.longitude_lo <= area.longitude_lo < area.longitude_hi
        assert area.longitude_hi <= base.longitude_hi + 1e-9
        assert area.latitude_hi - area.latitude_lo == pytest.approx(0.000025)
        assert area.longitude_hi - area.longitude_lo == pytest.approx(0.00003125)

    def test_surrounding_whitespace(self):
        """Test surrounding whitespace is ignored."""
        assert decode(" 8FVC9G8F+6X\n") == decode("8FVC9G8F+6X")

    def test_short_code_rejected(self):
        """Test a valid short code cannot be decoded."""
        with pytest.raises(InvalidCode):
            decode("22WM+PW")

    @pytest.mark.parametrize("code", ["", "+", "8FVC9G8F+6", "CX222222+", "hello"])
    def test_invalid_code_rejected(self, code):
        """Test invalid or out of range codes cannot be decoded."""
        with pytest.raises(InvalidCode):
            decode(code)


class TestRoundTrip:
    """Tests for encode -> decode consistency."""

    @pytest.mark.parametrize("latitude,longitude", POINTS)
    @pytest.mark.parametrize("length", LENGTHS)
    def test_area_contains_location(self, latitude, longitude, length):
        """Test the decoded area contains the encoded location."""
        area = decode(encode(latitude, longitude, length))
        assert area.code_length == length

        longitude = normalize_longitude(longitude)
        assert area.latitude_lo - TOLERANCE <= latitude <= area.latitude_hi + TOLERANCE
        assert area.longitude_lo - TOLERANCE <= longitude <= area.longitude_hi + TOLERANCE

    @pytest.mark.parametrize("latitude,longitude", POINTS)
    @pytest.mark.parametrize("length", LENGTHS)
    def test_reencode_identity(self, latitude, longitude, length):
        """Test encoding a decoded area gives back the same code."""
        code = encode(latitude, longitude, length)
        area = decode(code)
        assert encode(area.latitude_center, area.longitude_center, area.code_length) == code

    @pytest.mark.parametrize("latitude,longitude", POINTS)
    @pytest.mark.parametrize("length", [2, 4, 6, 8, 10])
    def test_reencode_from_low_corner(self, latitude, longitude, length):
        """Test encoding the south-west corner of a decoded area."""
        code = encode(latitude, longitude, length)
        area = decode(code)
        assert encode(area.latitude_lo, area.longitude_lo, area.code_length) == code

    @pytest.mark.parametrize("code", [
        "8FVC0000+", "8F000000+", "22222222+22", "8FH494JF+86",
        "4RJ5522M+FF", "CFX2X2X2+", "8FVC9G8F+6X", "CVXXXXXX+XX",
    ])
    def test_reencode_known_codes_from_low_corner(self, code):
        """Test low corners of known codes encode back to the same code."""
        area = decode(code)
        assert encode(area.latitude_lo, area.longitude_lo, area.code_length) == code


class TestShorten:
    """Tests for shorten."""

    def test_shorten_by_four(self):
        """Test a reference within a few tenths of a degree."""
        assert shorten("8FVC9G8F+6X", 47.5, 8.5) == "9G8F+6X"

    def test_shorten_by_six(self):
        """Test a reference within a hundredth of a degree."""
        assert shorten("8FVC9G8F+6X", 47.37, 8.52) == "8F+6X"

    def test_shorten_by_eight(self):
        """Test a reference very close to the code center."""
        assert shorten("8FVC9G8F+6X", 47.3656, 8.5249) == "+6X"

    def test_eight_character_code(self):
        """Test an 8 character code keeps a pair before the separator."""
        short = shorten("8FVC9G8F+", 47.36625, 8.52375)
        assert short == "8F+"
        assert is_short(short)

    def test_surrounding_whitespace(self):
        """Test surrounding whitespace is ignored."""
        assert shorten("  8FVC9G8F+6X\n", 47.5, 8.5) == "9G8F+6X"

    def test_reference_too_far(self):
        """Test the code is returned unchanged when nothing can be trimmed."""
        assert shorten("8FVC9G8F+6X", 0.0, 0.0) == "8FVC9G8F+6X"

    def test_uppercase(self):
        """Test shortened codes are uppercase."""
        assert shorten("8fvc9g8f+6x", 47.5, 8.5) == "9G8F+6X"

    def test_short_code_rejected(self):
        """Test a short code cannot be shortened."""
        with pytest.raises(InvalidCode):
            shorten("9G8F+6X", 47.5, 8.5)

    def test_padded_code_rejected(self):
        """Test a padded code cannot be shortened."""
        with pytest.raises(PaddedCode):
            shorten("8FVC0000+", 47.5, 8.5)

    def test_too_short_rejected(self, monkeypatch):
        """Test codes with fewer than six significant characters are rejected."""
        monkeypatch.setattr(
            codec, "decode", lambda code: CodeArea(47.0, 8.0, 48.0, 9.0, 4)
        )
        with pytest.raises(CodeTooShort):
            shorten("8FVC9G8F+6X", 47.5, 8.5)

    def test_errors_share_base_class(self):
        """Test every shorten failure is an OpenLocationCodeError."""
        for code in ("9G8F+6X", "8FVC0000+"):
            with pytest.raises(OpenLocationCodeError):
                shorten(code, 47.5, 8.5)


class TestRecoverNearest:
    """Tests for recover_nearest."""

    def test_recover_same_cell(self):
        """Test recovery when the reference shares the missing prefix."""
        assert recover_nearest("9G8F+6X", 47.4, 8.6) == "8FVC9G8F+6X"

    def test_recover_moves_to_nearest(self):
        """Test recovery picks the neighbouring cell nearer the reference."""
        assert recover_nearest("9G8F+6X", 47.9, 8.6) == "8FWC9G8F+6X"

    def test_recover_lowercase(self):
        """Test short codes are accepted in either case."""
        assert recover_nearest("9g8f+6x", 47.4, 8.6) == "8FVC9G8F+6X"

    def test_full_code_unchanged(self):
        """Test full codes are returned as they are."""
        assert recover_nearest("8FVC9G8F+6X", 0.0, 0.0) == "8FVC9G8F+6X"
        assert recover_nearest("8fvc9g8f+6x", 0.0, 0.0) == "8FVC9G8F+6X"

    def test_surrounding_whitespace(self):
        """Test surrounding whitespace is ignored."""
        assert recover_nearest(" 9G8F+6X ", 47.4, 8.6) == "8FVC9G8F+6X"
        assert recover_nearest(" 8fvc9g8f+6x\t", 0.0, 0.0) == "8FVC9G8F+6X"

    def test_does_not_cross_pole(self):
        """Test recovery never moves a cell beyond the south pole."""
        assert recover_nearest("XX22+22", -89.9, 0.95) == "2F22XX22+22"

    @pytest.mark.parametrize("code", ["", "8FVC9G8F+6", "CX222222+", "hello"])
    def test_invalid_rejected(self, code):
        """Test codes that are neither short nor full are rejected."""
        with pytest.raises(InvalidShortCode):
            recover_nearest(code, 47.4, 8.6)


class TestShortenRecover:
    """Tests that recover_nearest undoes shorten."""

    @pytest.mark.parametrize("latitude,longitude", POINTS[:7])
    @pytest.mark.parametrize("offset", [0.0001, -0.0001, 0.01, -0.01, 0.2, -0.2, 5.0])
    @pytest.mark.parametrize("length", [8, 10, 11])
    def test_inverse(self, latitude, longitude, offset, length):
        """Test shortening then recovering with the same reference."""
        code = encode(latitude, longitude, length)
        ref_latitude = latitude + offset
        ref_longitude = longitude - offset

        short = shorten(code, ref_latitude, ref_longitude)
        assert is_short(short) or short == code
        assert recover_nearest(short, ref_latitude, ref_longitude) == code

    def test_recovered_code_is_full(self):
        """Test the recovered code is a full code."""
        assert is_full(recover_nearest("+6X", 47.3656, 8.5249))
