import pytest
from loguru import logger


@pytest.fixture(name="log_records")
def log_records_fixture():
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
