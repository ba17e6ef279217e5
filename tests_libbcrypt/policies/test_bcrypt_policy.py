import bcrypt
import pytest

from libbcrypt.inspect.bcrypt import get_hash_information, get_work_factor
from libbcrypt.policies.bcrypt import BcryptPolicy

PAYLOAD = "R9h/cIPz0gi.URNNX3kh2OPST9/PgBkqquzi.Ss7KIUgO2t0jWMUW"


@pytest.fixture
def policy() -> BcryptPolicy:
    return BcryptPolicy(rounds=10)


@pytest.mark.parametrize("rounds", [4, 8, 12])
@pytest.mark.parametrize("prefix", [b"2a", b"2b"])
def test_parses_bcrypt_output(rounds: int, prefix: bytes) -> None:
    hash = bcrypt.hashpw(b"Secret", bcrypt.gensalt(rounds=rounds, prefix=prefix))

    info = get_hash_information(hash)
    assert info.version == prefix.decode()
    assert info.rounds == rounds
    assert get_work_factor(hash) == rounds
    assert bcrypt.hashpw(b"Secret", info.bcrypt_salt) == hash


@pytest.mark.parametrize(
    ("hash", "expected"),
    [
        ("$2b$10$" + PAYLOAD, False),
        ("$2b$12$" + PAYLOAD, False),
        ("$2b$31$" + PAYLOAD, False),
        ("$2b$09$" + PAYLOAD, True),
        ("$2b$04$" + PAYLOAD, True),
        ("$2a$10$" + PAYLOAD, True),
        ("$2y$12$" + PAYLOAD, True),
        ("$2$12$" + PAYLOAD, True),
        ("$5$saltstring$5B8vYYiY.CVt1RlTTf8KbXBH3hsxY/GNooZaBBGWEc5", True),
        ("Random String", True),
        ("", True),
    ],
)
def test_needs_update(policy: BcryptPolicy, hash: str, expected: bool) -> None:
    assert policy.needs_update(hash) is expected


def test_needs_update_generated_hashes(policy: BcryptPolicy) -> None:
    weak = bcrypt.hashpw(b"Secret", bcrypt.gensalt(rounds=4))
    current = bcrypt.hashpw(b"Secret", bcrypt.gensalt(rounds=10))

    assert policy.needs_update(weak)
    assert not policy.needs_update(current)


@pytest.mark.parametrize(
    ("hash", "expected"),
    [
        ("$2b$10$" + PAYLOAD, True),
        ("$2a$04$" + PAYLOAD, True),
        ("$2$04$" + PAYLOAD, True),
        ("$2c$04$" + PAYLOAD, False),
        (
            "$bcrypt-sha256$v=2,t=2b,r=5$5Hg1DKFqPE8C2aflZ5vVoe$wOK1VFFtS8IGTrGa7.h5fs0u84qyPbS",
            False,
        ),
    ],
)
def test_identify(policy: BcryptPolicy, hash: str, expected: bool) -> None:
    assert policy.identify(hash) is expected


@pytest.mark.parametrize("rounds", [0, 3, 32, 99])
def test_rounds_out_of_range(rounds: int) -> None:
    with pytest.raises(ValueError, match="rounds must be between 4 - 31"):
        BcryptPolicy(rounds=rounds)


@pytest.mark.parametrize("prefix", ["2", "2x", "2c", ""])
def test_unsupported_prefix(prefix: str) -> None:
    with pytest.raises(ValueError, match="prefix must be one of"):
        BcryptPolicy(prefix=prefix)  # type: ignore[arg-type]


def test_defaults() -> None:
    policy = BcryptPolicy()
    assert policy.rounds == 12
    assert policy.prefix == "2b"
    assert repr(policy) == "BcryptPolicy(rounds=12, prefix='2b')"
