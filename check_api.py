#!/usr/bin/env python3
"""Quick script to verify a deployed pricing API answers correctly."""

import sys

import requests

from rental_pricing.config import get_settings

API_URL = get_settings().api_url.rstrip("/")

print("=" * 60)
print(f"Checking Rental Pricing API at {API_URL}")
print("=" * 60)
print()

# 1. Health check
print("1. Health check...")
try:
    health = requests.get(f"{API_URL}/health", timeout=10)
    print(f"   ✓ Status: {health.status_code}")
    print(f"   ✓ Response: {health.json()}")
except requests.RequestException as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

# 2. Context
print("2. Getting context (compact)...")
try:
    ctx = requests.get(f"{API_URL}/context", params={"detail_level": "compact"}, timeout=30).json()
    print(f"   ✓ API: {ctx['name']} v{ctx['version']}")
    print(f"   ✓ Input sections: {len(ctx['input_sections'])}")
    print(f"   ✓ Endpoints: {len(ctx['endpoints'])}")
except (requests.RequestException, KeyError) as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

# 3. Deposit — make override should win
print("3. Resolving a deposit...")
try:
    dep = requests.post(
        f"{API_URL}/deposit/resolve",
        json={
            "vehicle": {"id": "check", "make": "Tesla", "daily_rate": 300},
            "host": {"require_deposit": True, "default_amount": 500, "make_deposits": {"Tesla": 800}},
        },
        timeout=30,
    ).json()
    mark = "✓" if dep["amount"] == 800 else "✗"
    print(f"   {mark} Deposit: ${dep['amount']:.0f} ({dep['source']})")
except (requests.RequestException, KeyError) as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

# 4. Commission tier
print("4. Resolving a commission tier...")
try:
    tier = requests.post(f"{API_URL}/commission/tier", json={"fleet_size": 30}, timeout=30).json()
    p = tier["progress"]
    print(f"   ✓ Tier: {p['current']['name']} → {p['next']['name']} ({p['progress_percent']}%)")
except (requests.RequestException, KeyError, TypeError) as e:
    print(f"   ✗ Failed: {e}")
    sys.exit(1)
print()

print("=" * 60)
print("All checks passed")
print("=" * 60)
