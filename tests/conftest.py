import pytest

from drinkbot.models.catalog import ShopCatalog

from helpers import StubMessenger, build_client


@pytest.fixture
def catalog():
    return ShopCatalog()


@pytest.fixture
def messenger():
    return StubMessenger()


@pytest.fixture
def failing_messenger():
    return StubMessenger(fail=True)


@pytest.fixture
def client(messenger):
    with build_client(messenger) as test_client:
        yield test_client


@pytest.fixture
def shop_select_client(messenger):
    with build_client(messenger, ORDER_FLOW="shop_select") as test_client:
        yield test_client
