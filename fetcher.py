#!/usr/bin/env python3
"""
fetcher.py - Fetches metadata for a Wikimedia Commons file page

Commands:
    extract FILE           Show categories, descriptions and author
    extract FILE --json    Same, as JSON
    categories FILE        Show only the categories
    help                   Show this message

FILE is a page title such as "File:Example.jpg"; the prefix is added if
missing.
"""

import json
import sys
from datetime import datetime

from commons import category_url
from errors import MediaDataError
from extractor import MediaDataExtractor


def log(message: str, level: str = "INFO"):
    """Print timestamped log message"""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{timestamp}] {level}: {message}")


def normalize_filename(name: str) -> str:
    """Make sure a file name carries the File: namespace prefix."""
    name = name.strip().replace('_', ' ')
    if name.lower().startswith(('file:', 'image:')):
        return 'File:' + name.split(':', 1)[1]
    return f'File:{name}'


def fetch_media_data(filename: str):
    """Fetch and extract metadata, logging failures. Returns None on error."""
    extractor = MediaDataExtractor(filename)
    log(f"Fetching {filename}...")
    try:
        data = extractor.fetch()
    except MediaDataError as e:
        log(f"Error extracting {filename}: {e}", "ERROR")
        return None
    log(f"Got {len(data.categories)} categories, {len(data.descriptions)} descriptions")
    return data


def cmd_extract(filename: str, as_json: bool = False) -> int:
    """Print all extracted metadata for a file"""
    data = fetch_media_data(filename)
    if data is None:
        return 1

    if as_json:
        print(json.dumps({
            'title': filename,
            'categories': data.categories,
            'descriptions': data.descriptions,
            'author': data.author,
        }, indent=2, ensure_ascii=False))
        return 0

    print(f"\n{'='*60}")
    print(f"Title: {filename}")
    print(f"Author: {data.author}" if data.author else "Author: (none)")
    print(f"Descriptions: {len(data.descriptions)}")
    for lang, text in data.descriptions.items():
        print(f"  [{lang}] {text.strip()}")
    print(f"Categories: {len(data.categories)}")
    for cat in data.categories:
        print(f"  - {cat}")
        print(f"    {category_url(cat)}")
    return 0


def cmd_categories(filename: str) -> int:
    """Print only the categories of a file"""
    data = fetch_media_data(filename)
    if data is None:
        return 1

    for cat in data.categories:
        print(cat)
    return 0


def main():
    """Main CLI entry point"""
    args = sys.argv[1:]

    if not args or args[0] == 'help':
        print(__doc__)
        return 0

    cmd = args[0]

    if cmd in ('extract', 'categories') and len(args) < 2:
        print(f"Missing FILE for {cmd}")
        print(__doc__)
        return 1

    if cmd == 'extract':
        return cmd_extract(normalize_filename(args[1]), as_json='--json' in args)

    elif cmd == 'categories':
        return cmd_categories(normalize_filename(args[1]))

    else:
        print(f"Unknown command: {cmd}")
        print(__doc__)
        return 1


if __name__ == "__main__":
    sys.exit(main())
