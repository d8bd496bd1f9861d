"""
Local smoke check for a running form service.
"""

import os
import requests

base_url = os.getenv("FORM_SERVICE_URL", "http://localhost:3000")
payload = {
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "phone": "",
    "message": "Hello from api_test.py",
}

print(f"Sending submission to {base_url}/submit")

try:
    r = requests.post(f"{base_url}/submit", data=payload, allow_redirects=False)
    print(f"[SUBMIT]: {r.status_code} -> {r.headers.get('location')}")

    r = requests.get(f"{base_url}/api/data")
    r.raise_for_status()

    submissions = r.json()
    print(f"[DATA]: {len(submissions)} submissions stored.")
    for item in submissions[-5:]:
        print(f"- {item.get('id')} {item.get('name')} <{item.get('email')}> at {item.get('timestamp')}")

    print("\n--- END ---")

except requests.RequestException as e:
    print(f"\nCritical error: {e}")
