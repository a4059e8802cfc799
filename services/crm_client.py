from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from config.settings import Settings, get_settings
from services.assembler import NO_NAME
from services.errors import CrmForwardError


class CrmClient:
    """Fire-and-forget sink posting single contacts to the CRM webhook."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def build_payload(
        self,
        *,
        company: Optional[str],
        name: Optional[str],
        phone: Optional[str],
        email: Optional[str],
        linkedin: Optional[str],
    ) -> Dict[str, Any]:
        return {
            "company": company,
            "name": name or NO_NAME,
            "phone": phone or "",
            "email": email,
            "linkedin": linkedin,
            "source": self.settings.crm_source_tag,
        }

    def forward_contact(
        self,
        *,
        company: Optional[str],
        name: Optional[str],
        phone: Optional[str],
        email: Optional[str],
        linkedin: Optional[str],
    ) -> None:
        """POST one contact; any non-2xx answer or transport error raises CrmForwardError.

        There is no retry.
        """
        url = self.settings.crm_webhook_url
        if not url:
            raise CrmForwardError("CRM_WEBHOOK_URL is not configured")
        payload = self.build_payload(company=company, name=name, phone=phone, email=email, linkedin=linkedin)
        try:
            resp = requests.post(url, json=payload, timeout=self.settings.http_timeout_seconds)
        except requests.RequestException as e:
            logging.error(f"CRM webhook request error: {e}", extra={"step": "crm_forward", "status": "error", "error": type(e).__name__})
            raise CrmForwardError(f"Webhook request failed: {e}") from e
        if not (200 <= resp.status_code < 300):
            logging.error(
                f"CRM webhook failed with status {resp.status_code}: {resp.text}",
                extra={"step": "crm_forward", "status": "error", "error": resp.status_code},
            )
            raise CrmForwardError(f"Webhook failed: {resp.status_code} {resp.reason}")
        logging.info(f"Forwarded contact {payload['name']} ({company}) to CRM", extra={"step": "crm_forward", "status": "ok"})
