import os
import logging
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

from constants import LETTERS, HTML_EXTENSIONS, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


def get_keyword(word, noise_words):
    """
    Returns the canonical keyword for a raw token, or None if it is rejected.

    A keyword starts with a letter and consists only of letters once any
    trailing run of non-letters ("Coming." or "farts,?") is stripped. Interior
    non-letters ("ab?cd", "don't") reject the whole token. The result is
    lowercased and rejected if it is a noise word.
    """
    if not word or word[0] not in LETTERS:
        return None

    end = len(word)
    for i, char in enumerate(word):
        if char not in LETTERS:
            end = i
            break

    # once the trailing run starts, letters may not come back
    if any(char in LETTERS for char in word[end:]):
        return None

    keyword = word[:end].lower()
    if keyword in noise_words:
        return None
    return keyword


def read_words(path):
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            yield from line.split()


def load_noise_words(path):
    noise_words = {word.lower() for word in read_words(path)}
    logger.info(f"Loaded {len(noise_words)} noise words from {path}")
    return noise_words


def read_doc_list(path):
    return list(read_words(path))


def is_valid_url(url):
    try:
        p = urlparse(url)
        return all([p.scheme in ("http", "https"), p.netloc])
    except Exception:
        return False


def is_html_file(path):
    return os.path.splitext(path)[1].lower() in HTML_EXTENSIONS


def extract_text(html):
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    return soup.get_text(separator=" ", strip=True)


def fetch_url_text(url):
    res = requests.get(url, timeout=REQUEST_TIMEOUT)
    res.raise_for_status()
    if "html" in res.headers.get("Content-Type", ""):
        return extract_text(res.text)
    return res.text


def document_tokens(doc_id):
    """
    Yields the whitespace-delimited tokens of a document in reading order.

    http(s) identifiers are fetched, HTML files have their markup removed, and
    anything else is streamed from disk line by line. Missing files and failed
    requests raise when the generator is first advanced.
    """
    if is_valid_url(doc_id):
        yield from fetch_url_text(doc_id).split()
    elif is_html_file(doc_id):
        with open(doc_id, "r", encoding="utf-8") as f:
            yield from extract_text(f.read()).split()
    else:
        yield from read_words(doc_id)
