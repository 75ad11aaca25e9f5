"""Record live Stack Exchange responses as test fixtures."""

import asyncio
import json
from pathlib import Path

import httpx

from soage.config import ServiceConfig

# fixture name -> (path, extra params)
REQUESTS = {
    "users_single": ("/users/22656", {}),
    "users_multiple": ("/users", {"inname": "alex smith", "pagesize": 5}),
    "users_empty": ("/users", {"inname": "zzqxv no such user zzqxv", "pagesize": 5}),
}

FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"


async def record(name: str, path: str, params: dict, config: ServiceConfig) -> dict:
    """Fetch one response and save it under tests/fixtures."""
    print(f"Recording {name} <- {path} {params}")

    async with httpx.AsyncClient(
        base_url=config.api_base_url,
        timeout=config.request_timeout_seconds,
    ) as client:
        response = await client.get(
            path,
            params={"site": config.site, "filter": config.response_filter, **params},
        )

    payload = response.json()
    fixture_path = FIXTURES_DIR / f"{name}.json"
    fixture_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    items = len(payload.get("items") or [])
    print(f"  HTTP {response.status_code}, {items} items, quota_remaining={payload.get('quota_remaining')}")
    return {"name": name, "status": response.status_code, "items": items}


async def main():
    config = ServiceConfig()
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)

    results = []
    for name, (path, params) in REQUESTS.items():
        results.append(await record(name, path, params, config))

    print(f"\nRecorded {len(results)} fixtures into {FIXTURES_DIR}")
    print("Note: live data changes; tests pinned to fixture values may need updating.")


if __name__ == "__main__":
    asyncio.run(main())
