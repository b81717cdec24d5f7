# seed_shortlinks.py
"""
Seed a storage backend with short links through the core service.

Usage:
  SHORTLINK_STORAGE_BACKEND=postgres SHORTLINK_DB_DSN=postgresql://... \
      python seed_shortlinks.py --count 2000 --owner seed --out mock_codes.jsonl

Every row goes through ShortLinkService.create, so codes are unique and URLs
are validated exactly as the API would. `--unsafe N` additionally plants N
rows with non-ASCII URLs directly in the store (as a manual DB write would),
to exercise the resolver's unsafe path.
"""
import argparse
import json
import time
from datetime import datetime, timezone

from shortlink_platform.logging_config import configure_logging
from shortlink_platform.manager.generator import RandomCodeGenerator
from shortlink_platform.manager.shortlink_service import ShortLinkService
from shortlink_platform.models import ShortLink
from shortlink_platform.storage.storage_factory import get_storage


def now_iso():
    return datetime.now(timezone.utc).isoformat()


def plant_unsafe(storage, owner, n, out_f):
    gen = RandomCodeGenerator()
    planted = 0
    for i in range(n):
        entity = ShortLink(
            original_url=f"https://example.com/café/{i}-{time.time_ns()}",
            short_code=gen.generate(),
            owner_id=owner,
        )
        result = storage.insert_unique(entity)
        if result.ok:
            planted += 1
            out_f.write(json.dumps({"code": entity.short_code, "url": entity.original_url, "unsafe": True}) + "\n")
    return planted


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--backend", default=None, help="memory|postgres (default: env)")
    ap.add_argument("--dsn", default=None)
    ap.add_argument("--count", type=int, default=2000, help="rows to create")
    ap.add_argument("--owner", default="seed")
    ap.add_argument("--unsafe", type=int, default=0, help="non-ASCII rows to plant directly")
    ap.add_argument("--out", default="mock_codes.jsonl")
    args = ap.parse_args()

    configure_logging("WARNING")
    storage = get_storage(args.backend, dsn=args.dsn, init_schema=True)
    service = ShortLinkService(storage)

    start_iso = now_iso()
    t0 = time.perf_counter()
    ok = 0
    failures = {}

    with open(args.out, "w", encoding="utf-8") as outf:
        for i in range(args.count):
            url = f"https://example.com/{i}?seed={start_iso}"
            result = service.create(url, args.owner)
            if result.succeeded:
                ok += 1
                outf.write(json.dumps({"code": result.short_link.short_code, "url": url}) + "\n")
            else:
                failures[result.error.value] = failures.get(result.error.value, 0) + 1
        planted = plant_unsafe(storage, args.owner, args.unsafe, outf) if args.unsafe else 0

    dt = time.perf_counter() - t0
    end_iso = now_iso()
    print(f"START: {start_iso}")
    print(f"END:   {end_iso}")
    print(f"TOTAL: {dt:.3f} s")
    print(f"CREATED: {ok}/{args.count} rows")
    if failures:
        print(f"FAILED:  {failures}")
    if planted:
        print(f"UNSAFE:  {planted} rows planted")
    if dt > 0:
        print(f"RPS: {ok/dt:.1f} rows/s")


if __name__ == "__main__":
    main()
