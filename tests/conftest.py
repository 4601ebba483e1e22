from pathlib import Path

import pytest
from src.addressbook.domain.address_book import AddressBook
from src.addressbook.services.model_manager import ModelManager

from tests.utils.typical_persons import get_typical_address_book


@pytest.fixture
def typical_address_book() -> AddressBook:
    return get_typical_address_book()


@pytest.fixture
def model(typical_address_book: AddressBook) -> ModelManager:
    """A model seeded with the typical students, teachers and meetings."""
    return ModelManager(typical_address_book)


@pytest.fixture
def expected_model(typical_address_book: AddressBook) -> ModelManager:
    """An independent copy of ``model`` to compare against after a command runs."""
    return ModelManager(typical_address_book)


@pytest.fixture
def empty_model() -> ModelManager:
    return ModelManager()


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    """Create a minimal valid YAML config file and return its path."""
    import yaml

    cfg = {
        "logging": {"level": "INFO"},
        "load_sample_data": False,
        "prompt": "ab> ",
    }
    p = tmp_path / "addressbook.yaml"
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump(cfg, f, sort_keys=False)
    return p
