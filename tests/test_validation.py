"""Tests for the validation module."""

import pytest

from rdaplookup.errors import ValidationError
from rdaplookup.validation import validate_address, validate_addresses


class TestValidateAddress:
    @pytest.mark.parametrize(
        "ip",
        ["0.0.0.0", "8.8.8.8", "192.168.10.10", "255.255.255.255", "010.001.0.00"],
    )
    def test_valid(self, ip):
        assert validate_address(ip) == ip

    @pytest.mark.parametrize(
        "bad",
        [
            "",
            "1.2.3",
            "1.2.3.4.5",
            "a.b.c.d",
            "1.2.3.4 ",
            " 1.2.3.4",
            "1.2.3.4\n",
            "1..2.3",
            "1234.1.1.1",
            "1.2.3.-4",
            "example.com",
            "::1",
        ],
    )
    def test_bad_shape(self, bad):
        with pytest.raises(ValidationError) as exc:
            validate_address(bad)
        assert repr(bad) in str(exc.value)
        assert exc.value.candidate == bad

    @pytest.mark.parametrize("bad", ["999.1.1.1", "1.256.1.1", "1.1.1.300"])
    def test_octet_out_of_range(self, bad):
        with pytest.raises(ValidationError) as exc:
            validate_address(bad)
        assert bad in str(exc.value)
        assert "greater than 255" in str(exc.value)

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(ValidationError):
            validate_address("١.٢.٣.٤")

    def test_not_a_string(self):
        with pytest.raises(ValidationError):
            validate_address(None)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_address("nope")


class TestValidateAddresses:
    def test_preserves_order(self):
        ips = ["9.9.9.9", "1.1.1.1", "8.8.4.4"]
        assert validate_addresses(ips) == ips

    def test_accepts_generator(self):
        assert validate_addresses(ip for ip in ["1.1.1.1"]) == ["1.1.1.1"]

    def test_empty_rejected(self):
        with pytest.raises(ValidationError) as exc:
            validate_addresses([])
        assert str(exc.value) == "No IPv4 addresses supplied"
        assert exc.value.candidate is None

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="No IPv4 addresses"):
            validate_addresses(None)

    def test_one_bad_aborts_batch(self):
        with pytest.raises(ValidationError) as exc:
            validate_addresses(["1.1.1.1", "300.1.1.1", "2.2.2.2"])
        assert exc.value.candidate == "300.1.1.1"
