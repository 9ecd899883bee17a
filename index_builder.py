import time
import logging
from collections import defaultdict, namedtuple
from concurrent.futures import ThreadPoolExecutor

from constants import ANALYTICS_FILE
from utils import get_keyword, document_tokens

logger = logging.getLogger(__name__)

Occurrence = namedtuple("Occurrence", ["document", "frequency"])


def load_keywords(tokens, noise_words):
    """Counts the keywords in one document's token stream."""
    counts = defaultdict(int)
    for token in tokens:
        keyword = get_keyword(token, noise_words)
        if keyword is None:
            continue
        counts[keyword] += 1
    return dict(counts)


def insert_last_occurrence(occurrences):
    """
    Moves the last occurrence of the list into place by binary search.

    Entries 0..n-2 must already be in descending order of frequency. Returns
    the midpoints probed by the search, or None when the list holds fewer than
    two entries and nothing has to move.

    On a frequency match the search stops at the first midpoint it hits, so
    among three or more equal entries the landing spot depends on where the
    probe falls rather than on insertion order.
    """
    if len(occurrences) < 2:
        return None

    target = occurrences.pop()
    lo = 0  # highest frequency
    hi = len(occurrences) - 1
    mid = 0
    midpoints = []

    while lo <= hi:
        mid = (lo + hi) // 2
        midpoints.append(mid)
        frequency = occurrences[mid].frequency
        if frequency == target.frequency:
            break
        if frequency < target.frequency:
            hi = mid - 1
        else:
            lo = mid + 1
            mid += 1

    occurrences.insert(mid, target)
    return midpoints


def merge_keywords(doc_id, keywords, index):
    for keyword, frequency in keywords.items():
        occurrences = index.setdefault(keyword, [])
        occurrences.append(Occurrence(doc_id, frequency))
        insert_last_occurrence(occurrences)


def build_index(doc_ids, token_source_for=document_tokens, noise_words=frozenset(), workers=1):
    """
    Builds the keyword index for the given documents.

    Returns {keyword: [Occurrence, ...]} with every list in descending order
    of frequency. With several workers the per-document keyword counts are
    computed concurrently, but merging stays serial and in document order.
    """
    doc_ids = list(doc_ids)
    index = {}
    start_time = time.time()

    def load(doc_id):
        return load_keywords(token_source_for(doc_id), noise_words)

    if workers > 1:
        # at most `workers` keyword maps wait for the merge at any time
        with ThreadPoolExecutor(max_workers=workers) as executor:
            for start in range(0, len(doc_ids), workers):
                batch = doc_ids[start:start + workers]
                for doc_id, keywords in zip(batch, executor.map(load, batch)):
                    merge_keywords(doc_id, keywords, index)
                    logger.info(f"Indexed {doc_id} ({len(keywords)} keywords)")
    else:
        for doc_id in doc_ids:
            keywords = load(doc_id)
            merge_keywords(doc_id, keywords, index)
            logger.info(f"Indexed {doc_id} ({len(keywords)} keywords)")

    elapsed = time.time() - start_time
    logger.info(f"Indexed {len(doc_ids)} documents, {len(index)} keywords in {elapsed:.2f} seconds")
    return index


def index_stats(index):
    documents = {occ.document for occurrences in index.values() for occ in occurrences}
    return {
        "documents": len(documents),
        "keywords": len(index),
        "occurrences": sum(len(occurrences) for occurrences in index.values()),
    }


def write_analytics(index, path=ANALYTICS_FILE):
    stats = index_stats(index)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"Documents indexed: {stats['documents']}\n")
        f.write(f"Unique keywords: {stats['keywords']}\n")
        f.write(f"Keyword occurrences: {stats['occurrences']}\n")
