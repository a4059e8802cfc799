from __future__ import annotations

import pytest
import requests

from config.settings import get_settings
from services.crm_client import CrmClient
from services.errors import CrmForwardError


class _Resp:
    def __init__(self, status_code: int, reason: str = "OK", text: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.text = text


def _stub_post(monkeypatch, resp=None, exc=None):
    calls = []

    def _post(url, json=None, timeout=None):
        calls.append((url, json, timeout))
        if exc:
            raise exc
        return resp

    monkeypatch.setattr(requests, "post", _post)
    return calls


def _client(monkeypatch):
    monkeypatch.setenv("CRM_WEBHOOK_URL", "https://hooks.example.test/leads")
    monkeypatch.setenv("CRM_SOURCE_TAG", "TEST-SRC")
    return CrmClient(settings=get_settings())


def test_posts_fixed_payload(monkeypatch):
    calls = _stub_post(monkeypatch, resp=_Resp(200))
    client = _client(monkeypatch)
    client.forward_contact(company="Acme", name=None, phone="+5511", email="a@acme.com", linkedin=None)
    url, payload, timeout = calls[0]
    assert url == "https://hooks.example.test/leads"
    assert payload == {
        "company": "Acme",
        "name": "no name",
        "phone": "+5511",
        "email": "a@acme.com",
        "linkedin": None,
        "source": "TEST-SRC",
    }
    assert timeout == 20


def test_non_2xx_is_failure_without_retry(monkeypatch):
    calls = _stub_post(monkeypatch, resp=_Resp(500, "Server Error"))
    client = _client(monkeypatch)
    with pytest.raises(CrmForwardError):
        client.forward_contact(company="Acme", name="Ana", phone="+55", email=None, linkedin=None)
    assert len(calls) == 1


def test_transport_error_is_failure(monkeypatch):
    _stub_post(monkeypatch, exc=requests.ConnectionError("down"))
    client = _client(monkeypatch)
    with pytest.raises(CrmForwardError):
        client.forward_contact(company="Acme", name="Ana", phone="+55", email=None, linkedin=None)


def test_missing_webhook_url(monkeypatch):
    calls = _stub_post(monkeypatch, resp=_Resp(200))
    monkeypatch.delenv("CRM_WEBHOOK_URL", raising=False)
    client = CrmClient(settings=get_settings())
    with pytest.raises(CrmForwardError):
        client.forward_contact(company="Acme", name="Ana", phone="+55", email=None, linkedin=None)
    assert calls == []
