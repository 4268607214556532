"""
Download a word list and turn it into a Word Scramble start list.

What it does:
- Downloads the page/file at --url.
- If the response is HTML, extracts the visible text with BeautifulSoup;
  plain-text responses are used as-is.
- Keeps lowercase a–z tokens of exactly --length letters.
- De-duplicates while preserving source order (or sorts with --sort) and writes to file.

Usage:
    python -m script.fetch_start_words --url https://example.org/words.txt \
        --out scramble/datasets/data/start.txt
    python -m script.fetch_start_words --url ... --length 7 --sort
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from scramble.datasets import write_lines

TOKEN_RE = re.compile(r"[A-Za-z]+")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(text: str, length: int) -> list[str]:
    words = [t.lower() for t in TOKEN_RE.findall(text) if len(t) == length]
    return unique_preserve_order(words)


def fetch_text(url: str) -> str:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    if "html" in r.headers.get("Content-Type", ""):
        return BeautifulSoup(r.text, "html.parser").get_text("\n", strip=True)
    return r.text


def main():
    ap = argparse.ArgumentParser(description="Build a start-word list from a URL")
    ap.add_argument("--url", required=True)
    ap.add_argument("--length", type=int, default=8, help="root word length to keep")
    ap.add_argument("--out", default="scramble/datasets/data/start.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = extract_words(fetch_text(args.url), args.length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique {args.length}-letter words -> {args.out}")

if __name__ == "__main__":
    main()
