import pytest

from cryptolab.des import (
    IP,
    IP_INV,
    des_encrypt,
    feistel,
    generate_subkeys,
    main,
    permute,
)

KEY = 0x133457799BBCDFF1
PLAINTEXT = 0x0123456789ABCDEF
PARITY_BITS = 0x0101010101010101


def test_permute_identity_table_returns_value():
    value = 0x0123456789ABCDEF
    assert permute(value, range(1, 65)) == value


def test_permute_single_positions():
    assert permute(1 << 63, (1,)) == 1
    assert permute(1, (64,)) == 1
    assert permute(1, (1,)) == 0


def test_initial_permutation_of_worked_example():
    assert permute(PLAINTEXT, IP) == 0xCC00CCFFF0AAF0AA


@pytest.mark.parametrize("value", [0, 1, PLAINTEXT, KEY, (1 << 64) - 1])
def test_final_permutation_inverts_initial(value):
    assert permute(permute(value, IP), IP_INV) == value


def test_permute_rejects_wide_value():
    with pytest.raises(ValueError):
        permute(1 << 64, IP)


def test_subkeys_of_worked_example():
    subkeys = generate_subkeys(KEY)
    assert len(subkeys) == 16
    assert subkeys[0] == 0x1B02EFFC7072
    assert subkeys[-1] == 0xCB3D8B0E17F5


def test_subkeys_fit_in_48_bits():
    assert all(0 <= k < 1 << 48 for k in generate_subkeys(KEY))


def test_subkeys_ignore_parity_bits():
    assert generate_subkeys(KEY ^ PARITY_BITS) == generate_subkeys(KEY)


def test_feistel_output_fits_in_32_bits():
    for subkey in generate_subkeys(KEY):
        assert 0 <= feistel(0xF0AAF0AA, subkey) < 1 << 32


def test_feistel_rejects_wide_inputs():
    with pytest.raises(ValueError):
        feistel(1 << 32, 0)
    with pytest.raises(ValueError):
        feistel(0, 1 << 48)


def test_encrypt_ignores_parity_bits():
    assert des_encrypt(PLAINTEXT, KEY ^ PARITY_BITS) == des_encrypt(PLAINTEXT, KEY)


def test_encrypt_is_deterministic_and_in_range():
    first = des_encrypt(PLAINTEXT, KEY)
    assert first == des_encrypt(PLAINTEXT, KEY)
    assert 0 <= first < 1 << 64


def test_encrypt_rejects_negative_plaintext():
    with pytest.raises(ValueError):
        des_encrypt(-1, KEY)


def test_encrypt_rejects_wide_key():
    with pytest.raises(ValueError):
        des_encrypt(PLAINTEXT, 1 << 64)


def test_main_prints_default_ciphertext(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == f"Ciphertext: {des_encrypt(PLAINTEXT, KEY):016X}\n"


def test_main_accepts_hex_arguments(capsys):
    assert main(["0", "--key", "0"]) == 0
    out = capsys.readouterr().out
    assert out == f"Ciphertext: {des_encrypt(0, 0):016X}\n"


def test_main_rejects_bad_hex():
    with pytest.raises(SystemExit):
        main(["xyz"])