"""Tests for HMAC-SHA256 payment signatures."""

import hashlib
import hmac

import pytest
from payments.signature import compute_payment_signature, is_valid_payment_signature

SECRET = "rzp_test_secret"


def _reference_signature(order_id: str, payment_id: str) -> str:
    return hmac.new(SECRET.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256).hexdigest()


class TestComputePaymentSignature:
    def test_matches_hmac_over_pipe_joined_ids(self):
        assert compute_payment_signature("order_1", "pay_1", SECRET) == _reference_signature("order_1", "pay_1")

    def test_is_lowercase_hex_sha256(self):
        signature = compute_payment_signature("order_1", "pay_1", SECRET)
        assert len(signature) == 64
        assert signature == signature.lower()

    def test_depends_on_secret(self):
        assert compute_payment_signature("order_1", "pay_1", SECRET) != compute_payment_signature(
            "order_1", "pay_1", "other-secret"
        )


class TestIsValidPaymentSignature:
    def test_genuine_signature_is_valid(self):
        signature = _reference_signature("order_abc", "pay_xyz")
        assert is_valid_payment_signature("order_abc", "pay_xyz", signature, SECRET) is True

    @pytest.mark.parametrize("position", [0, 17, 63])
    def test_single_altered_character_is_invalid(self, position):
        signature = _reference_signature("order_abc", "pay_xyz")
        replacement = "0" if signature[position] != "0" else "1"
        tampered = signature[:position] + replacement + signature[position + 1 :]
        assert is_valid_payment_signature("order_abc", "pay_xyz", tampered, SECRET) is False

    def test_swapped_ids_are_invalid(self):
        signature = _reference_signature("order_abc", "pay_xyz")
        assert is_valid_payment_signature("pay_xyz", "order_abc", signature, SECRET) is False

    def test_empty_signature_is_invalid(self):
        assert is_valid_payment_signature("order_abc", "pay_xyz", "", SECRET) is False

    def test_non_ascii_signature_is_invalid_not_an_error(self):
        assert is_valid_payment_signature("order_abc", "pay_xyz", "é" * 64, SECRET) is False
