#!/usr/bin/env python3
"""
slug_to_name.py

Suggest display names for LinkedIn profile links. Each URL's /in/ slug is
cleaned of ids, hashes and credential suffixes and turned into a readable
name that can pre-fill a contact record.

Usage (ad-hoc):
  python slug_to_name.py \
      --url https://www.linkedin.com/in/stefaniemarrone-cpa-123 \
      --url linkedin.com/in/john-smith-12345

Usage (CSV):
  python slug_to_name.py \
      --input contacts.csv \
      --output contacts_named.csv \
      --url-column linkedin_url \
      --query-log slug_to_name.jsonl

Notable flags:
  --resolve-short-links   Follow lnkd.in links before extracting the slug
  --debug                 Print one line per processed row

Env vars:
  LINKEDIN_URL_COLUMN=...           (default CSV column, or use --url-column)
  RESOLVE_SHORT_LINKS=1|true|yes    (or use --resolve-short-links)
"""
import os
import csv
import time
import argparse
from typing import Dict, List, Optional

import requests
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from contactkit.names import reconstruct_name
from contactkit.resolver import ShortLinkResolver
from contactkit.utils import (
    append_log, norm, truncate_text, extract_linkedin_slug,
    is_linkedin_profile, is_short_link,
)

OUTPUT_COLUMNS = ["linkedin_slug", "suggested_name"]


def env_flag(name: str) -> bool:
    """Read a boolean switch from the environment."""
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


def validate_args(args) -> None:
    """Validate command line arguments."""
    if not args.url and not args.input:
        raise ValueError("Provide --url or --input")
    if args.url and args.input:
        raise ValueError("--url and --input cannot be combined")
    if args.input and not args.output:
        raise ValueError("--input requires --output")
    if not norm(args.url_column):
        raise ValueError("--url-column cannot be empty")


def suggest(url: str, resolver: Optional[ShortLinkResolver] = None, log_handle=None) -> Dict[str, str]:
    """Return slug and suggested name for one URL ('' for both when it has no profile slug)."""
    url = norm(url)
    if resolver is not None and is_short_link(url):
        try:
            resolved = resolver.resolve(url)
        except requests.RequestException as e:
            append_log(log_handle, {
                "event": "resolve_error",
                "url": url,
                "error": truncate_text(str(e), 300),
                "timestamp": time.time(),
            })
        else:
            append_log(log_handle, {
                "event": "resolved",
                "url": url,
                "resolved_url": resolved,
                "timestamp": time.time(),
            })
            url = resolved

    if not is_linkedin_profile(url):
        return {"linkedin_slug": "", "suggested_name": ""}
    slug = extract_linkedin_slug(url)
    if not slug:
        return {"linkedin_slug": "", "suggested_name": ""}
    return {"linkedin_slug": slug, "suggested_name": reconstruct_name(slug)}


def process_csv(args, resolver: Optional[ShortLinkResolver], log_handle) -> int:
    """Annotate every row of the input CSV; returns the number of named rows."""
    named = 0
    with open(args.input, newline="", encoding="utf-8") as f, open(args.output, "w", newline="", encoding="utf-8") as out:
        reader = csv.DictReader(f)
        input_fields = list(reader.fieldnames or [])
        if args.url_column not in input_fields:
            raise KeyError(f"Column '{args.url_column}' not found in {args.input}")
        fieldnames = input_fields + [c for c in OUTPUT_COLUMNS if c not in input_fields]
        writer = csv.DictWriter(out, fieldnames=fieldnames, extrasaction="ignore")
        writer.writeheader()

        for row_idx, row in enumerate(reader, start=1):
            url = norm(row.get(args.url_column))
            result = suggest(url, resolver, log_handle)
            if result["suggested_name"]:
                named += 1
                append_log(log_handle, {
                    "event": "row_named",
                    "row_index": row_idx,
                    "url": url,
                    "slug": result["linkedin_slug"],
                    "name": result["suggested_name"],
                    "timestamp": time.time(),
                })
            else:
                append_log(log_handle, {
                    "event": "row_skipped",
                    "row_index": row_idx,
                    "url": url,
                    "reason": "no_profile_slug" if url else "empty_url",
                    "timestamp": time.time(),
                })
            if args.debug:
                print(f"[debug][row {row_idx}] {url or '<empty>'} -> {result['suggested_name'] or '<none>'}", flush=True)
            row.update(result)
            writer.writerow(row)
    return named


def main(argv: Optional[List[str]] = None) -> int:
    """Main processing function."""
    ap = argparse.ArgumentParser()
    ap.add_argument("--url", action="append", help="LinkedIn profile URL (repeatable)")
    ap.add_argument("--input", help="Path to contacts CSV")
    ap.add_argument("--output", help="Path to write the annotated CSV")
    ap.add_argument("--url-column", default=os.getenv("LINKEDIN_URL_COLUMN", "linkedin_url"),
                    help="CSV column holding the profile URL")
    ap.add_argument("--resolve-short-links", action="store_true", default=env_flag("RESOLVE_SHORT_LINKS"),
                    help="Follow lnkd.in short links before extracting the slug")
    ap.add_argument("--query-log", help="Path to append JSONL diagnostics")
    ap.add_argument("--debug", action="store_true", help="Print per-row progress")
    args = ap.parse_args(argv)

    try:
        validate_args(args)
    except ValueError as exc:
        ap.error(str(exc))

    resolver = ShortLinkResolver() if args.resolve_short_links else None
    log_handle = open(args.query_log, "a", encoding="utf-8") if args.query_log else None

    try:
        append_log(log_handle, {
            "event": "run_start",
            "mode": "csv" if args.input else "url",
            "resolve_short_links": bool(resolver),
            "timestamp": time.time(),
        })
        if args.input:
            named = process_csv(args, resolver, log_handle)
            if args.debug:
                print(f"[debug] named {named} row(s) -> {args.output}", flush=True)
        else:
            for url in args.url:
                result = suggest(url, resolver, log_handle)
                print(f"{result['linkedin_slug']}\t{result['suggested_name']}", flush=True)
    finally:
        if log_handle:
            log_handle.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
