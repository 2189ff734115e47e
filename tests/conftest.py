# Shared pytest fixtures
import pytest

from app import create_app
from utils.summarizer import Summarizer


class StubSummarizer(Summarizer):
    """Returns a fixed summary and records what it was asked"""

    def __init__(self, text="Stub summary"):
        self.text = text
        self.calls = []

    def summarize(self, sample_rows, max_sample=3):
        self.calls.append((list(sample_rows), max_sample))
        return self.text


class FailingSummarizer(Summarizer):
    def summarize(self, sample_rows, max_sample=3):
        raise TimeoutError("summary service timed out")


@pytest.fixture()
def stub_summarizer():
    return StubSummarizer()


@pytest.fixture()
def sample_csv():
    return "id,age\n1,25\n1,30\n2,\n"


@pytest.fixture()
def customers_json():
    return """[
  {"customer_id": "C1", "name": "Ada", "spend": 120.5},
  {"customer_id": "C2", "name": null, "spend": 99},
  {"customer_id": "C2", "name": "Grace", "spend": "101"},
  {"customer_id": "C4", "name": "undefined", "spend": 5000}
]"""


@pytest.fixture()
def app(stub_summarizer):
    return create_app({'TESTING': True}, summarizer=stub_summarizer)


@pytest.fixture()
def client(app):
    return app.test_client()
