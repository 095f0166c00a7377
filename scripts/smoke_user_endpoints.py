import json
import os
import sys
import requests

# --- Configuration ---
BASE_URL = os.environ.get("API_BASE_URL", "http://127.0.0.1:8000")
EMAIL = os.environ.get("SMOKE_EMAIL", "test@example.com")
PASSWORD = os.environ.get("SMOKE_PASSWORD", "password123")


# --- Helper Function for API Requests ---
def run_api_request(method: str, endpoint: str, data: dict = None, token: str = None):
    """Makes an API request and returns (status code, parsed body)."""
    url = f"{BASE_URL}{endpoint}"
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    try:
        response = requests.request(method, url, json=data, headers=headers, timeout=10)
    except requests.exceptions.RequestException as e:
        print(f"Could not reach {url}: {e}")
        sys.exit(1)
    try:
        body = response.json()
    except ValueError:
        body = response.text
    return response.status_code, body


def show(title: str, status_code: int, body) -> None:
    print(f"\n{title} -> HTTP {status_code}")
    print(json.dumps(body, indent=2) if not isinstance(body, str) else body)


def main():
    """Signs a user in and walks the per-user bulk endpoints."""

    print("=== Testing User-Specific Endpoints ===")

    print("1. Signing in test user...")
    status_code, body = run_api_request("POST", "/auth/signin", {"name": "Test User", "email": EMAIL, "password": PASSWORD})
    token = body.get("token") if isinstance(body, dict) else None
    if not token:
        show("Signin failed", status_code, body)
        sys.exit(1)
    print(f"Token: {token}")

    for step, resource in enumerate(
        ["accounts", "transactions", "loans", "liabilities", "budgets", "recurring-transactions", "savings-goals", "preferences"],
        start=2,
    ):
        status_code, body = run_api_request("GET", f"/api/{resource}", token=token)
        show(f"{step}. /api/{resource}", status_code, body)

    status_code, body = run_api_request("GET", "/api/accounts")
    show("Without authentication (should be 401)", status_code, body)
    if status_code != 401:
        sys.exit(1)

    print("\n=== Tests completed ===")


if __name__ == "__main__":
    main()
