import pytest

from cryptolab.feistel import (
    DEFAULT_ROUND_KEYS,
    f_function,
    feistel_decrypt,
    feistel_encrypt,
    main,
)


@pytest.mark.parametrize("half", range(16))
def test_f_function_is_undone_by_same_key(half):
    assert f_function(f_function(half, 9), 9) == half


def test_round_trip_all_bytes_default_keys():
    for value in range(256):
        assert feistel_decrypt(feistel_encrypt(value, DEFAULT_ROUND_KEYS), DEFAULT_ROUND_KEYS) == value


def test_encryption_is_a_permutation_of_bytes():
    results = {feistel_encrypt(value) for value in range(256)}
    assert results == set(range(256))


def test_zero_keys_four_rounds():
    assert feistel_encrypt(0x12, [0, 0, 0, 0]) == 0x23


@pytest.mark.parametrize("keys", [(1,), (5, 10), (15, 0, 7, 3, 11)])
def test_round_trip_other_key_counts(keys):
    for value in (0, 0x5A, 0xD6, 0xFF):
        assert feistel_decrypt(feistel_encrypt(value, keys), keys) == value


def test_rejects_out_of_range_plaintext():
    with pytest.raises(ValueError):
        feistel_encrypt(256)


def test_rejects_negative_ciphertext():
    with pytest.raises(ValueError):
        feistel_decrypt(-1)


def test_rejects_empty_key_list():
    with pytest.raises(ValueError):
        feistel_encrypt(1, [])


def test_main_reports_round_trip(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    cipher = feistel_encrypt(0b11010110)
    assert lines == [
        "Plain Text: 0xD6",
        f"Ciphertext: 0x{cipher:02X}",
        "Decrypted: 0xD6",
    ]


def test_main_rejects_bad_plaintext():
    with pytest.raises(SystemExit):
        main(["300"])