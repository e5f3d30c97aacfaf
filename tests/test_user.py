import pytest

from vbbs.user import PasswordTooShortError, User, UserType, hash_password


def test_hash_password_known_vector():
    assert hash_password("abc") == "A9993E364706816ABA3E25717850C26C9CD0D89D"


def test_hash_password_is_upper_hex_of_forty_chars():
    hashed = hash_password("password")
    assert len(hashed) == 40
    assert hashed == hashed.upper()
    int(hashed, 16)


def test_new_user_defaults():
    user = User()
    assert (user.user_id, user.username, user.pw_hash, user.email) == (0, "", "", "")
    assert user.user_type is UserType.REGULAR
    assert user.last_seen == 0


def test_change_password_then_authenticate():
    password = "password"
    user = User(username="alice", email="alice@example.com")
    user.change_password(password)
    assert user.pw_hash == hash_password(password)
    assert user.authenticate("alice", password) is True


def test_authenticate_rejects_wrong_password():
    password = "password"
    other_password = "placeholder"
    user = User(username="alice")
    user.change_password(password)
    assert user.authenticate("alice", other_password) is False


def test_authenticate_rejects_wrong_username():
    password = "password"
    user = User(username="alice")
    user.change_password(password)
    assert user.authenticate("bob", password) is False


def test_authenticate_rejects_missing_arguments():
    password = "password"
    user = User(username="alice")
    user.change_password(password)
    assert user.authenticate(None, password) is False
    assert user.authenticate("alice", None) is False


def test_short_password_is_rejected_and_hash_kept():
    password = "password"
    short_password = "secret"
    user = User(username="alice")
    user.change_password(password)
    before = user.pw_hash
    with pytest.raises(PasswordTooShortError):
        user.change_password(short_password)
    assert user.pw_hash == before


def test_copy_is_independent():
    user = User(
        user_id=7,
        username="alice",
        email="alice@example.com",
        user_type=UserType.ADMIN,
    )
    clone = user.copy()
    assert clone == user
    clone.username = "bob"
    assert user.username == "alice"
    assert clone.user_type is UserType.ADMIN