import argparse
import json
import sys
from pathlib import Path

from db.connection import get_connection
from db import schema
from pipelines.companies_overview import run_overview
from pipelines.import_records import import_contacts, import_enrichment
from services.crm_client import CrmClient
from services.errors import AggregationError, CrmForwardError, StatusUpdateError
from services.reporting import print_summary
from services.status_service import set_company_status
from config.settings import get_settings
from utils.logging_setup import init_logging


def _load_rows(path: str) -> list:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("records") or data.get("contacts") or data.get("companies") or []
    return list(data)


def _fail(message: str) -> None:
    print(json.dumps({"error": message}), file=sys.stderr)
    raise SystemExit(1)


def cmd_bootstrap(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    print("Schema ready")


def cmd_import_contacts(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    count = import_contacts(conn, _load_rows(args.input), default_source_tag=args.source_tag)
    print(f"Imported {count} contacts")


def cmd_import_enrichment(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    count = import_enrichment(conn, _load_rows(args.input))
    print(f"Imported {count} enrichment records")


def cmd_companies(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    try:
        ctx = run_overview(conn)
    except AggregationError as e:
        _fail(str(e))
    if args.summary:
        print_summary(ctx.companies, ctx.meta)
        return
    out = [c.model_dump(mode="json") for c in ctx.companies]
    print(json.dumps(out, indent=2, ensure_ascii=False))


def cmd_mark_contacted(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    try:
        record = set_company_status(conn, args.key, contacted=not args.unset, contacted_by=args.by)
    except ValueError as e:
        _fail(str(e))
    except StatusUpdateError as e:
        _fail(str(e))
    print(json.dumps(record.model_dump(mode="json"), indent=2, ensure_ascii=False))


def cmd_send_to_crm(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    try:
        companies = run_overview(conn).companies
    except AggregationError as e:
        _fail(str(e))
    match = None
    for company in companies:
        for contact in company.contacts:
            if contact.id == args.contact_id:
                match = (company, contact)
                break
        if match:
            break
    if not match:
        _fail(f"Contact not found: {args.contact_id}")
    company, contact = match
    try:
        CrmClient().forward_contact(
            company=company.name,
            name=contact.name,
            phone=contact.phone,
            email=contact.email,
            linkedin=contact.linkedin,
        )
    except CrmForwardError as e:
        _fail(f"Failed to send to CRM: {e}")
    print(json.dumps({"success": True}))


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Outreach dashboard CLI")
    parser.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_boot = sub.add_parser("bootstrap", help="Create tables and indexes")
    p_boot.set_defaults(func=cmd_bootstrap)

    p_ic = sub.add_parser("import-contacts", help="Load scraped contacts from JSON")
    p_ic.add_argument("--input", required=True, help="Path to JSON file (array or object)")
    p_ic.add_argument("--source-tag", default=settings.lead_source_tag, help="Source tag for rows without 'notes' (default from settings)")
    p_ic.set_defaults(func=cmd_import_contacts)

    p_ie = sub.add_parser("import-enrichment", help="Load company enrichment records from JSON")
    p_ie.add_argument("--input", required=True, help="Path to JSON file (array or object)")
    p_ie.set_defaults(func=cmd_import_enrichment)

    p_co = sub.add_parser("companies", help="Print grouped companies with enrichment and status")
    p_co.add_argument("--summary", action="store_true", help="Print counts instead of JSON")
    p_co.set_defaults(func=cmd_companies)

    p_mc = sub.add_parser("mark-contacted", help="Set or clear the contacted flag of a company")
    p_mc.add_argument("--key", required=True, help="Company key as shown in the overview")
    p_mc.add_argument("--by", default=None, help="Who contacted the company")
    p_mc.add_argument("--unset", action="store_true", help="Clear the contacted flag")
    p_mc.set_defaults(func=cmd_mark_contacted)

    p_crm = sub.add_parser("send-to-crm", help="Forward one contact to the CRM webhook")
    p_crm.add_argument("--contact-id", required=True, help="contact_id of the lead")
    p_crm.set_defaults(func=cmd_send_to_crm)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
