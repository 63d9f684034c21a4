"""Tests for the lease identifier codec."""

import pytest

from secretlease.identifier import (
    SEPARATOR,
    encode_lease_id,
    is_valid_secret_type,
    secret_type,
)


class TestEncode:
    def test_encode_joins_with_separator(self):
        assert encode_lease_id("aws", "1234") == "aws-1234"

    def test_encode_rejects_separator_in_type(self):
        with pytest.raises(ValueError):
            encode_lease_id("aws-iam", "1234")

    def test_suffix_may_contain_separator(self):
        lease_id = encode_lease_id("postgres", "a-b-c")
        assert lease_id == "postgres-a-b-c"


class TestDecode:
    def test_decode_aws(self):
        assert secret_type("aws-1234") == ("aws", "1234")

    def test_decode_without_separator(self):
        assert secret_type("noseparatorhere") == ("", "noseparatorhere")

    def test_decode_empty_string(self):
        assert secret_type("") == ("", "")

    def test_decode_splits_on_first_separator(self):
        assert secret_type("aws-0f8fad5b-d9cb-469f") == ("aws", "0f8fad5b-d9cb-469f")

    def test_decode_leading_separator(self):
        assert secret_type("-1234") == ("", "1234")

    @pytest.mark.parametrize(
        "type_name,suffix",
        [
            ("aws", "1234"),
            ("AWS_iam", "0f8fad5b-d9cb-469f-a165-70867728950e"),
            ("db2", ""),
            ("_", "x"),
        ],
    )
    def test_decode_inverts_encode(self, type_name, suffix):
        assert secret_type(encode_lease_id(type_name, suffix)) == (type_name, suffix)

    @pytest.mark.parametrize("lease_id", ["abc", "a_b_c", "12345", "AWS"])
    def test_ids_without_separator_decode_to_empty_type(self, lease_id):
        assert SEPARATOR not in lease_id
        assert secret_type(lease_id) == ("", lease_id)


class TestSecretTypePattern:
    @pytest.mark.parametrize("name", ["aws", "AWS", "postgres_ro", "db2", "_"])
    def test_valid(self, name):
        assert is_valid_secret_type(name) is True

    @pytest.mark.parametrize(
        "name", ["", "bad type!", "aws-iam", "a.b", "ünicode", "aws\n"]
    )
    def test_invalid(self, name):
        assert is_valid_secret_type(name) is False
