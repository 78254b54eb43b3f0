"""
Diagnose Stripe webhook setup
Usage: python scripts/diagnose_webhook.py [webhook_url]

Checks the payment env vars, the health endpoint, and posts a signed
``diagnostic.ping`` event that a correctly configured endpoint acknowledges
with ``{"received": true}`` without touching any order.
"""
import asyncio
import hashlib
import hmac
import json
import os
import sys
import time
from pathlib import Path

import httpx
from dotenv import load_dotenv

DIAGNOSTIC_EVENT_TYPE = "diagnostic.ping"


def sign_payload(payload: str, secret: str, timestamp: int | None = None) -> str:
    """Stripe-Signature header value for ``payload``."""
    timestamp = int(time.time()) if timestamp is None else timestamp
    signature = hmac.new(
        secret.encode("utf-8"), f"{timestamp}.{payload}".encode("utf-8"), hashlib.sha256
    ).hexdigest()
    return f"t={timestamp},v1={signature}"


def health_url(webhook_url: str) -> str:
    """Health endpoint on the same scheme and host as the webhook."""
    return str(httpx.URL(webhook_url).join("/api/health"))


def build_diagnostic_event() -> str:
    return json.dumps(
        {
            "id": f"evt_diagnostic_{int(time.time())}",
            "object": "event",
            "type": DIAGNOSTIC_EVENT_TYPE,
            "data": {"object": {"metadata": {}}},
        }
    )


async def diagnose(webhook_url: str, transport: httpx.AsyncBaseTransport | None = None) -> bool:
    """Run all checks. Returns True when the webhook answered as expected."""
    secret_key = os.environ.get("STRIPE_SECRET_KEY")
    webhook_secret = os.environ.get("STRIPE_WEBHOOK_SECRET")

    print("1. Payment configuration")
    print(f"   STRIPE_SECRET_KEY: {'set' if secret_key else 'missing (demo mode)'}")
    print(f"   STRIPE_WEBHOOK_SECRET: {'set' if webhook_secret else 'missing (webhooks simulated)'}")

    async with httpx.AsyncClient(timeout=10.0, transport=transport) as client:
        health = health_url(webhook_url)
        print(f"\n2. Health check at {health}")
        try:
            response = await client.get(health)
            print(f"   Status: {response.status_code} {response.text}")
        except httpx.HTTPError as e:
            print(f"   Unreachable: {e}")
            return False

        print(f"\n3. Signed test event to {webhook_url}")
        payload = build_diagnostic_event()
        headers = {"Content-Type": "application/json"}
        if webhook_secret:
            headers["Stripe-Signature"] = sign_payload(payload, webhook_secret)

        try:
            response = await client.post(webhook_url, content=payload, headers=headers)
        except httpx.HTTPError as e:
            print(f"   Request failed: {e}")
            return False

        print(f"   Status: {response.status_code}")
        print(f"   Body: {response.text}")
        if response.status_code != 200:
            print("   Signature rejected: the server's STRIPE_WEBHOOK_SECRET differs from yours")
            return False

        body = response.json()
        if body.get("simulated"):
            print("   Server has no webhook secret: events are acknowledged but not processed")
        return body.get("received") is True


if __name__ == "__main__":
    env_path = Path(__file__).parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    url = sys.argv[1] if len(sys.argv) > 1 else os.environ.get(
        "STRIPE_WEBHOOK_URL", "http://localhost:8000/stripe"
    )
    ok = asyncio.run(diagnose(url))
    sys.exit(0 if ok else 1)
