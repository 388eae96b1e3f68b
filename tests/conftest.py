from typing import List

import pytest

from basket_mining.data.ingestion import parse_transactions
from basket_mining.data.samples import SAMPLE_DATASETS


@pytest.fixture()
def market_basket() -> List[List[str]]:
    return parse_transactions(SAMPLE_DATASETS["market_basket"])


@pytest.fixture()
def simple_baskets() -> List[List[str]]:
    return parse_transactions(SAMPLE_DATASETS["simple"])
