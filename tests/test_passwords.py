import pytest

from railbook.passwords import check_password


@pytest.mark.parametrize("candidate", ["Abc1!", "xY9#", "Ab1 ", "Zz0é"])
def test_strong_passwords_accepted(candidate):
    assert check_password(candidate) is True


@pytest.mark.parametrize(
    "candidate",
    ["", "abc1!", "ABC1!", "Abcd!", "Abc12", "password"],
)
def test_weak_passwords_rejected(candidate):
    assert check_password(candidate) is False


def test_order_does_not_matter():
    assert check_password("!1aA") == check_password("Aa1!")