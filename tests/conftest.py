import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey


@pytest.fixture
def metadata() -> Pubkey:
    return Keypair().pubkey()


@pytest.fixture
def authority() -> Pubkey:
    return Keypair().pubkey()


@pytest.fixture
def mint() -> Pubkey:
    return Keypair().pubkey()
