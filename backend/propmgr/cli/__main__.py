# backend/propmgr/cli/__main__.py
from __future__ import annotations

import argparse

from propmgr.cli.seed_demo import seed_demo
from propmgr.config import settings


def _cmd_seed_demo(args: argparse.Namespace) -> None:
    out = seed_demo(year=args.year, months=args.months)
    print(
        {
            "ok": True,
            "property_id": out.property_id,
            "purchase_id": out.purchase_id,
            "loan_id": out.loan_id,
            "contact_id": out.contact_id,
            "created": out.created,
        }
    )


def _cmd_geocode_missing(args: argparse.Namespace) -> None:
    from propmgr.db import SessionLocal
    from propmgr.services.geocoding import geocode_missing

    db = SessionLocal()
    try:
        out = geocode_missing(db, delay_seconds=args.delay)
    finally:
        db.close()
    print({"ok": True, **out})


def _cmd_serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run(
        "propmgr.main:app",
        host=args.host,
        port=args.port or settings.port,
        reload=args.reload,
        log_config=None,
    )


def main() -> None:
    from propmgr.logging_config import configure_logging

    configure_logging()

    p = argparse.ArgumentParser(prog="propmgr")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("seed-demo", help="insert one sample property with related rows")
    s.add_argument("--year", type=int, default=None)
    s.add_argument("--months", type=int, default=3)
    s.set_defaults(func=_cmd_seed_demo)

    g = sub.add_parser("geocode-missing", help="fill lat/lng for properties that lack them")
    g.add_argument("--delay", type=float, default=None, help="seconds between requests")
    g.set_defaults(func=_cmd_geocode_missing)

    v = sub.add_parser("serve", help="run the API with uvicorn")
    v.add_argument("--host", default="0.0.0.0")
    v.add_argument("--port", type=int, default=None)
    v.add_argument("--reload", action="store_true")
    v.set_defaults(func=_cmd_serve)

    args = p.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
