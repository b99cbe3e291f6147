from auth.passwords import hash_password, verify_password


def test_verify_accepts_own_hash():
    digest = hash_password("hello pass")
    assert verify_password("hello pass", digest) is True


def test_verify_rejects_other_password():
    digest = hash_password("hello pass")
    assert verify_password("goodbye pass", digest) is False


def test_hash_is_salted():
    assert hash_password("same password") != hash_password("same password")


def test_undecodable_digest_is_a_mismatch():
    assert verify_password("hello pass", "not-an-argon2-digest") is False
    assert verify_password("hello pass", "") is False
    assert verify_password("hello pass", "\u00fcnicode") is False
    assert verify_password("hello pass", "$argon2id$v=19$m=65536,t=3,p=4$\u00fc$\u00fc") is False
