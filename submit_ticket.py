#!/usr/bin/env python3
"""
Submit oilfield ticket images to the extraction API and print the results.

Usage:
    python submit_ticket.py tickets/*.jpg
    python submit_ticket.py --api-url http://127.0.0.1:8000 ticket.png
"""
import argparse
import base64
import mimetypes
import sys
from pathlib import Path

import requests

# Configuration
API_BASE_URL = "http://127.0.0.1:8000"


def encode_image_as_data_url(file_path: Path) -> str:
    """Read an image file and return it as a data URL, the same way a browser upload does"""
    mime_type, _ = mimetypes.guess_type(file_path.name)
    if not mime_type or not mime_type.startswith("image/"):
        mime_type = "image/jpeg"
    encoded = base64.b64encode(file_path.read_bytes()).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def submit_ticket(file_path: Path, api_base_url: str = API_BASE_URL) -> dict | None:
    """Upload one ticket image and show the extracted record"""
    url = f"{api_base_url.rstrip('/')}/api/process-invoice"
    payload = {"imageBase64": encode_image_as_data_url(file_path)}
    response = requests.post(url, json=payload, timeout=120)

    if response.status_code == 200:
        data = response.json()
        print(f"✅ {file_path.name}: {data['vendor']} - ${data['amount']:.2f} on {data['date']}")
        print(f"   Category: {data['category'] or 'n/a'} → cost code {data['costCode']}")
        if data["description"]:
            print(f"   {data['description']}")
        return data

    try:
        message = response.json().get("error", response.text)
    except ValueError:
        message = response.text
    print(f"❌ {file_path.name}: {response.status_code} - {message}")
    return None


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Extract invoice data from oilfield ticket images")
    parser.add_argument("files", nargs="+", type=Path, help="Ticket image files (JPEG recommended)")
    parser.add_argument("--api-url", default=API_BASE_URL, help=f"API base URL (default: {API_BASE_URL})")
    args = parser.parse_args(argv)

    failures = 0
    for file_path in args.files:
        if not file_path.is_file():
            print(f"⚠️  Not found: {file_path}")
            failures += 1
            continue
        if submit_ticket(file_path, args.api_url) is None:
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
