#!/usr/bin/env python3
"""
Practice plan smoke test — posts a sample assessment to a running server.

Usage:
    # Start API server first
    python scripts/serve.py

    python scripts/smoke_plan.py [--base-url http://localhost:3001]

Exit codes:
    0 — health check and plan generation succeeded
    1 — a request failed
"""

import argparse
import sys

import requests

SAMPLE_ASSESSMENT = {
    "scales": {"majorScale": 3, "minorPentatonic": 4},
    "triads": {"majorTriads": 2, "minorTriads": 1},
    "chords": {"barreChords": 3},
    "arpeggios": {"majorArpeggios": 2},
    "navigation": {"noteNames": 2},
    "technique": {"alternatePicking": 3, "legato": 2},
    "struggles": ["Getting out of the pentatonic box", "Soloing over chord changes"],
}


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke-test the practice plan API.")
    parser.add_argument("--base-url", default="http://localhost:3001")
    args = parser.parse_args()

    health = requests.get(f"{args.base_url}/health", timeout=10)
    if health.status_code != 200:
        print(f"✗  /health returned {health.status_code}")
        return 1
    print("✓  /health — ok")

    response = requests.post(
        f"{args.base_url}/api/generate-plan",
        json=SAMPLE_ASSESSMENT,
        timeout=180,
    )
    data = response.json()
    if response.status_code != 200:
        print(f"✗  /api/generate-plan returned {response.status_code}: {data.get('error')}")
        return 1

    plan = data["plan"]
    songs = plan.count('class="song-recommendation"')
    print(f"✓  /api/generate-plan — {len(plan)} chars, {songs} song recommendations")
    return 0


if __name__ == "__main__":
    sys.exit(main())
